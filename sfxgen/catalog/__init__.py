"""
Sound effect catalog.

Public API:
    SoundEffect: Immutable named list of tones.
    BUILTIN_EFFECTS: The compiled-in game sound set.
    load_catalog: Load effects from a YAML file.
    select_effects: Filter a catalog by effect names.

Example:
    from sfxgen.catalog import BUILTIN_EFFECTS, select_effects

    for effect in select_effects(BUILTIN_EFFECTS, ["tick", "correct"]):
        print(effect.filename)
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from sfxgen.core.errors import CatalogError

from .builtin import BUILTIN_EFFECTS
from .loader import ValidationIssue, ValidationResult, load_catalog
from .models import SoundEffect

__all__ = [
    "SoundEffect",
    "BUILTIN_EFFECTS",
    "load_catalog",
    "select_effects",
    "ValidationIssue",
    "ValidationResult",
]


def select_effects(
    effects: Sequence[SoundEffect], names: Optional[Iterable[str]] = None
) -> tuple[SoundEffect, ...]:
    """Return the effects named in `names`, in catalog order.

    Args:
        effects: Full catalog
        names: Effect names to keep; None or empty keeps everything

    Raises:
        CatalogError: If a requested name is not in the catalog.
    """
    wanted = list(names or [])
    if not wanted:
        return tuple(effects)
    known = {e.name for e in effects}
    unknown = [n for n in wanted if n not in known]
    if unknown:
        raise CatalogError(
            f"Unknown sound effect(s): {', '.join(unknown)}",
            context={"unknown": unknown, "known": sorted(known)},
        )
    wanted_set = set(wanted)
    return tuple(e for e in effects if e.name in wanted_set)
