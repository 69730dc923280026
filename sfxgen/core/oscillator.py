"""Waveform oscillators.

Each oscillator maps (t, frequency) to an instantaneous amplitude in [-1, 1].
The set of shapes is closed, so dispatch is a plain function table keyed by
Waveform rather than a class hierarchy.

Usage:
    from sfxgen.core.oscillator import Waveform, wave

    amplitude = wave(Waveform.TRIANGLE, 0.001, 440.0)
"""

import math
from enum import Enum
from typing import Callable, Dict, Union

from sfxgen.core.errors import ToneSpecError


class Waveform(Enum):
    """Supported oscillator shapes."""

    SINE = "sine"
    TRIANGLE = "triangle"
    SAWTOOTH = "sawtooth"

    @classmethod
    def parse(cls, value: Union["Waveform", str]) -> "Waveform":
        """Accept a Waveform or its string name (case-insensitive)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip().lower()
            for member in cls:
                if member.value == name:
                    return member
        valid = ", ".join(w.value for w in cls)
        raise ToneSpecError(
            f"Unknown waveform {value!r} (expected one of: {valid})",
            context={"waveform": value},
        )


def _phase(t: float, frequency: float) -> float:
    """Position within the current period, in [0, 1)."""
    period = 1.0 / frequency
    return (t % period) / period


def sine_wave(t: float, frequency: float) -> float:
    return math.sin(2 * math.pi * frequency * t)


def triangle_wave(t: float, frequency: float) -> float:
    # +1 at phase 0, -1 at phase 0.5
    return 4 * abs(_phase(t, frequency) - 0.5) - 1


def sawtooth_wave(t: float, frequency: float) -> float:
    return 2 * _phase(t, frequency) - 1


WAVE_FUNCTIONS: Dict[Waveform, Callable[[float, float], float]] = {
    Waveform.SINE: sine_wave,
    Waveform.TRIANGLE: triangle_wave,
    Waveform.SAWTOOTH: sawtooth_wave,
}


def wave(shape: Union[Waveform, str], t: float, frequency: float) -> float:
    """Evaluate oscillator `shape` at time t (seconds).

    Args:
        shape: Waveform member or its string name
        t: Time in seconds
        frequency: Frequency in Hz, must be > 0 (not checked here)

    Returns:
        Amplitude in [-1, 1]
    """
    return WAVE_FUNCTIONS[Waveform.parse(shape)](t, frequency)
