"""
YAML catalog loading.

This module provides:
- Two-stage validation pipeline (validate dict -> build SoundEffect)
- ValidationIssue and ValidationResult dataclasses
- load_catalog(): read a YAML file into a tuple of SoundEffect

Expected document shape:

    effects:
      - name: chime
        description: optional text
        silence_prefix: true        # optional, default true
        tones:
          - {frequency: 880, duration: 0.2, waveform: sine, volume: 0.3, delay: 0}
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from typing import Any, Union, cast

import yaml

from sfxgen.catalog.models import SoundEffect
from sfxgen.core.errors import CatalogError, CatalogParseError, ToneSpecError
from sfxgen.core.tone import ToneSpec

logger = logging.getLogger(__name__)

# Effect names become file names: lowercase letters, digits, '_' and '-'
NAME_PATTERN = re.compile(r"^[a-z][a-z0-9_-]*$")

TONE_DEFAULTS: dict[str, Any] = {"waveform": "sine", "volume": 0.3, "delay": 0.0}
TONE_REQUIRED = ("frequency", "duration")
TONE_FIELDS = frozenset(TONE_REQUIRED) | frozenset(TONE_DEFAULTS)


# ---------------------------------------------------------------------------
# Validation Issues
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ValidationIssue:
    """A single validation issue (error or warning).

    Attributes:
        entry_index: Index of the effect in the YAML effects list (0-indexed).
        entry_name: Effect name if available, None if missing/invalid.
        field: Field name where the issue occurred.
        message: Human-readable description of the issue.
        is_error: True for errors, False for warnings.
    """

    entry_index: int
    entry_name: str | None
    field: str
    message: str
    is_error: bool = True


@dataclass
class ValidationResult:
    """Issues collected while loading a catalog."""

    issues: list[ValidationIssue] = field(default_factory=list)
    entries_loaded: int = 0

    @property
    def has_errors(self) -> bool:
        return any(issue.is_error for issue in self.issues)

    @property
    def error_count(self) -> int:
        return sum(1 for issue in self.issues if issue.is_error)

    def format_report(self) -> str:
        """Format a human-readable report of validation issues."""
        lines = [f"Loaded: {self.entries_loaded}, Errors: {self.error_count}"]
        for issue in self.issues:
            level = "ERROR" if issue.is_error else "WARN"
            id_str = issue.entry_name or f"index {issue.entry_index}"
            lines.append(f"[{level}] {id_str}.{issue.field}: {issue.message}")
        return "\n".join(lines)


# ---------------------------------------------------------------------------
# Stage 1: Dict Validation
# ---------------------------------------------------------------------------


def _validate_tone_dict(tone: Any, index: int, name: str | None, tone_index: int) -> list[ValidationIssue]:
    where = f"tones[{tone_index}]"
    if not isinstance(tone, dict):
        return [ValidationIssue(index, name, where, f"must be a mapping, got {type(tone).__name__}")]

    bad_keys = [key for key in tone if not isinstance(key, str)]
    if bad_keys:
        return [ValidationIssue(index, name, where, f"field names must be strings, got {bad_keys!r}")]

    issues = []
    for key in TONE_REQUIRED:
        if key not in tone:
            issues.append(ValidationIssue(index, name, f"{where}.{key}", "required field missing"))
    for key in sorted(set(tone) - TONE_FIELDS):
        issues.append(
            ValidationIssue(index, name, f"{where}.{key}", "unknown field ignored", is_error=False)
        )
    if any(i.is_error for i in issues):
        return issues

    try:
        _build_tone(tone)
    except ToneSpecError as e:
        issues.append(ValidationIssue(index, name, where, str(e)))
    return issues


def validate_effect_dict(data: Any, index: int) -> list[ValidationIssue]:
    """Validate one raw effect mapping.

    Args:
        data: Raw YAML value for the effect
        index: Position in the effects list

    Returns:
        Issues found (empty when the entry is valid)
    """
    if not isinstance(data, dict):
        return [ValidationIssue(index, None, "(entry)", f"must be a mapping, got {type(data).__name__}")]

    issues: list[ValidationIssue] = []
    name = data.get("name")
    if not isinstance(name, str) or not NAME_PATTERN.match(name):
        issues.append(
            ValidationIssue(index, None, "name", f"must match {NAME_PATTERN.pattern}, got {name!r}")
        )
        name = None

    if "silence_prefix" in data and not isinstance(data["silence_prefix"], bool):
        issues.append(ValidationIssue(index, name, "silence_prefix", "must be true or false"))
    if "description" in data and not isinstance(data["description"], str):
        issues.append(ValidationIssue(index, name, "description", "must be a string"))

    tones = data.get("tones")
    if not isinstance(tones, list) or not tones:
        issues.append(ValidationIssue(index, name, "tones", "must be a non-empty list"))
    else:
        for j, tone in enumerate(tones):
            issues.extend(_validate_tone_dict(tone, index, name, j))
    return issues


# ---------------------------------------------------------------------------
# Stage 2: Build
# ---------------------------------------------------------------------------


def _build_tone(tone: dict[str, Any]) -> ToneSpec:
    values = {**TONE_DEFAULTS, **{k: v for k, v in tone.items() if k in TONE_FIELDS}}
    return ToneSpec.of(
        values["frequency"],
        values["duration"],
        values["waveform"],
        values["volume"],
        values["delay"],
    )


def build_effect_from_dict(data: dict[str, Any]) -> SoundEffect:
    """Build a SoundEffect from a dict that passed validate_effect_dict()."""
    return SoundEffect(
        name=data["name"],
        tones=tuple(_build_tone(t) for t in data["tones"]),
        silence_prefix=data.get("silence_prefix", True),
        description=data.get("description", ""),
    )


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


def _load_yaml(path: Union[str, os.PathLike]) -> dict[str, Any]:
    """Load YAML with line number preservation for syntax errors."""
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        line = None
        column = None
        if getattr(e, "problem_mark", None) is not None:
            line = e.problem_mark.line + 1  # 0-indexed -> 1-indexed
            column = e.problem_mark.column + 1
        raise CatalogParseError(f"YAML syntax error: {e}", line=line, column=column) from e
    except UnicodeDecodeError as e:
        raise CatalogParseError(f"Catalog is not valid UTF-8: {e}") from e
    if data is None:
        raise CatalogParseError("YAML file is empty")
    if not isinstance(data, dict):
        raise CatalogParseError("Catalog root must be a mapping with an 'effects' key")
    return cast(dict[str, Any], data)


def load_catalog(path: Union[str, os.PathLike]) -> tuple[SoundEffect, ...]:
    """Load and validate a catalog YAML file.

    Args:
        path: Path to the YAML file

    Returns:
        Effects in file order

    Raises:
        CatalogParseError: If the YAML cannot be parsed or has invalid structure.
        CatalogError: If any effect is invalid or names are duplicated.
        OSError: If the file cannot be read.
    """
    raw = _load_yaml(path)
    if "effects" not in raw:
        raise CatalogParseError("Missing 'effects' key in YAML")
    entries = raw["effects"]
    if not isinstance(entries, list):
        raise CatalogParseError("'effects' must be a list")

    result = ValidationResult()
    effects: list[SoundEffect] = []
    seen: set[str] = set()
    for i, entry in enumerate(entries):
        issues = validate_effect_dict(entry, i)
        result.issues.extend(issues)
        if any(issue.is_error for issue in issues):
            continue
        name = entry["name"]
        if name in seen:
            result.issues.append(ValidationIssue(i, name, "name", f"Duplicate name: '{name}'"))
            continue
        seen.add(name)
        effects.append(build_effect_from_dict(entry))
        result.entries_loaded += 1

    for issue in result.issues:
        if not issue.is_error:
            logger.warning("%s: %s.%s: %s", path, issue.entry_name, issue.field, issue.message)
    if result.has_errors:
        raise CatalogError(
            f"Invalid catalog {path}:\n{result.format_report()}",
            user_message=f"Catalog {path} has {result.error_count} error(s)",
            context={"issues": result.issues},
        )
    logger.debug("Loaded %d effect(s) from %s", len(effects), path)
    return tuple(effects)
