"""Generate one WAV file per catalog entry."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, Optional, Sequence, Union

from sfxgen.catalog import select_effects
from sfxgen.catalog.models import SoundEffect
from sfxgen.core.errors import SfxGenError
from sfxgen.core.mixer import mix
from sfxgen.core.wav_encoder import HEADER_SIZE, encode, read_wav_info

logger = logging.getLogger(__name__)


def get_default_output_dir() -> Path:
    """<repo_root>/assets/sounds in a source checkout, else ./assets/sounds.

    An installed package lives in site-packages, which has no pyproject.toml
    next to it; the current working directory is used there instead.
    """
    # sfxgen/core/catalog_driver.py -> repo_root
    repo_root = Path(__file__).resolve().parent.parent.parent
    if (repo_root / "pyproject.toml").is_file():
        return repo_root / "assets" / "sounds"
    return Path.cwd() / "assets" / "sounds"


def ensure_output_dir(path: Union[str, os.PathLike]) -> Path:
    """Create the output directory if absent. Idempotent.

    Raises:
        OSError: If the directory cannot be created.
    """
    out = Path(path)
    out.mkdir(parents=True, exist_ok=True)
    return out


def synthesize(effect: SoundEffect) -> bytes:
    """Mix an effect's tones and encode them as WAV bytes."""
    samples = mix(effect.tones, silence_prefix=effect.silence_prefix)
    logger.debug("%s: %d tone(s), %d samples", effect.name, len(effect.tones), len(samples))
    return encode(samples)


def write_effect(effect: SoundEffect, output_dir: Union[str, os.PathLike]) -> Path:
    """Synthesize `effect` into <output_dir>/<name>.wav and verify the header.

    Raises:
        OSError: On write failure.
        SfxGenError: If the written file's header disagrees with its payload.
    """
    data = synthesize(effect)
    path = Path(output_dir) / effect.filename
    path.write_bytes(data)

    info = read_wav_info(path)
    if not info.is_consistent or info.data_size != len(data) - HEADER_SIZE:
        raise SfxGenError(
            f"Header mismatch in {path}",
            context={"info": info, "bytes_written": len(data)},
        )
    return path


@dataclass
class GenerationSummary:
    """Outcome of one catalog run."""

    output_dir: Path
    written: list[Path] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.written)


def generate_catalog(
    effects: Sequence[SoundEffect],
    output_dir: Union[str, os.PathLike],
    only: Optional[Iterable[str]] = None,
    progress_cb: Optional[Callable[[str], None]] = print,
) -> GenerationSummary:
    """Write every (selected) effect to `output_dir`, sequentially.

    The output directory is created once, before the first write. Any
    filesystem error aborts the run and propagates.

    Args:
        effects: Catalog to generate
        output_dir: Destination directory (created if absent)
        only: Optional effect names to restrict generation to
        progress_cb: Receives one line per file plus a summary line; None to silence

    Returns:
        GenerationSummary with the written paths in catalog order

    Raises:
        CatalogError: If `only` names an unknown effect.
        OSError: On directory creation or write failure.
    """
    selected = select_effects(effects, only)
    out = ensure_output_dir(output_dir)
    summary = GenerationSummary(output_dir=out)

    for effect in selected:
        path = write_effect(effect, out)
        summary.written.append(path)
        logger.info("Wrote %s", path)
        if progress_cb:
            progress_cb(f"Generated: {effect.filename}")

    if progress_cb:
        progress_cb(f"Generated {summary.count} sound(s) in {out}")
    return summary
