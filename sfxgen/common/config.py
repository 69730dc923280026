# sfxgen/common/config.py
#
# Frozen dataclass for generator settings and type coercion helpers.
# Values from a settings file are coerced leniently: a wrong type falls back
# to the default instead of raising.

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, replace
from typing import Any, Optional, Union

from sfxgen.core.errors import SfxGenError

_TRUE_STRINGS = frozenset({"true", "1", "yes"})
_FALSE_STRINGS = frozenset({"false", "0", "no"})


def _get_logger() -> logging.Logger:
    """Get module logger (lazy to avoid side effect at import time)."""
    return logging.getLogger(__name__)


# =============================================================================
# Helper Functions
# =============================================================================


def safe_bool(value: Any, default: bool = False) -> bool:
    """bool conversion. Unrecognized strings return default (typo guard).

    Args:
        value: Value to convert
        default: Returned for None or anything unrecognized

    Returns:
        Converted bool
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        lower = value.strip().lower()
        if lower in _TRUE_STRINGS:
            return True
        if lower in _FALSE_STRINGS:
            return False
    return default


def normalize_path(value: Any) -> str | None:
    """Path normalization. None/empty/whitespace-only/non-str become None."""
    if not isinstance(value, str):
        return None
    if not value.strip():
        return None
    return value


def safe_str_tuple(value: Any) -> tuple[str, ...]:
    """list/tuple of strings -> tuple. Non-string items are dropped.

    A single string is treated as a one-element list.
    """
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)):
        return ()
    return tuple(v for v in value if isinstance(v, str) and v.strip())


# =============================================================================
# Dataclasses
# =============================================================================


@dataclass(frozen=True)
class GeneratorConfig:
    """Settings for one generation run.

    Thread-safety: Immutable (frozen=True)

    Attributes:
        output_dir: Destination directory; None means the default assets/sounds
        catalog_path: YAML catalog to use instead of the built-in one
        only: Effect names to generate; empty means all
        debug: Verbose logging
    """

    output_dir: str | None = None
    catalog_path: str | None = None
    only: tuple[str, ...] = ()
    debug: bool = False

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "GeneratorConfig":
        """Build from a dict. Missing keys use defaults; bad types are coerced safely."""
        return cls(
            output_dir=normalize_path(d.get("output_dir")),
            catalog_path=normalize_path(d.get("catalog")),
            only=safe_str_tuple(d.get("only")),
            debug=safe_bool(d.get("debug"), default=False),
        )

    def merged(
        self,
        output_dir: Optional[str] = None,
        catalog_path: Optional[str] = None,
        only: Optional[list[str]] = None,
        debug: bool = False,
    ) -> "GeneratorConfig":
        """Overlay explicitly given values (e.g. CLI flags) on this config."""
        return replace(
            self,
            output_dir=output_dir if output_dir else self.output_dir,
            catalog_path=catalog_path if catalog_path else self.catalog_path,
            only=tuple(only) if only else self.only,
            debug=debug or self.debug,
        )


def load_settings(path: Union[str, os.PathLike]) -> GeneratorConfig:
    """Load a JSON settings file into a GeneratorConfig.

    Raises:
        SfxGenError: If the file is not valid JSON or not a JSON object.
        OSError: If the file cannot be read.
    """
    with open(path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise SfxGenError(f"Invalid settings file {path}: {e}") from e
    if not isinstance(data, dict):
        raise SfxGenError(f"Settings file {path} must contain a JSON object")
    unknown = sorted(set(data) - {"output_dir", "catalog", "only", "debug"})
    if unknown:
        _get_logger().warning("Ignoring unknown settings in %s: %s", path, ", ".join(unknown))
    return GeneratorConfig.from_dict(data)
