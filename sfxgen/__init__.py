"""sfxgen - procedural tone synthesis for short sound effects."""

__version__ = "1.0.0"
