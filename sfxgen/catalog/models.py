"""Catalog data model."""

from __future__ import annotations

from dataclasses import dataclass

from sfxgen.core.errors import CatalogError
from sfxgen.core.tone import ToneSpec


@dataclass(frozen=True)
class SoundEffect:
    """A named sound effect: one or more tones mixed into one file.

    Attributes:
        name: Effect name, also the output file stem
        tones: Ordered, non-empty tuple of tones
        silence_prefix: Prepend a short lead-in of silence when mixing
        description: Free text, informational only
    """

    name: str
    tones: tuple[ToneSpec, ...]
    silence_prefix: bool = True
    description: str = ""

    def __post_init__(self) -> None:
        if not self.name or not isinstance(self.name, str):
            raise CatalogError(f"Sound effect name must be a non-empty string, got {self.name!r}")
        object.__setattr__(self, "tones", tuple(self.tones))
        if not self.tones:
            raise CatalogError(f"Sound effect '{self.name}' has no tones")

    @property
    def filename(self) -> str:
        return f"{self.name}.wav"
