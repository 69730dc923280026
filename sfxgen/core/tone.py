"""
Tone specification and single-tone rendering.

This module provides:
- ToneSpec: immutable, validated description of one tone
- render(): oscillator x envelope, one float per sample period
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, List, Union

from sfxgen.core.constants import SAMPLE_RATE
from sfxgen.core.envelope import attack_time_for, gain
from sfxgen.core.errors import ToneSpecError
from sfxgen.core.oscillator import WAVE_FUNCTIONS, Waveform

# One float per sample; index i is time i / sample_rate
SampleBuffer = List[float]


def _is_real(value: Any) -> bool:
    # bool is an int subclass but never a valid amplitude/time
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


@dataclass(frozen=True)
class ToneSpec:
    """One tone: frequency, length, shape, peak volume and onset delay.

    Thread-safety: Immutable (frozen=True)

    Attributes:
        frequency: Hz, > 0
        duration: Seconds, > 0
        waveform: Oscillator shape (a string name is coerced to Waveform)
        volume: Peak amplitude in (0, 1]
        delay: Onset offset in seconds when mixed, >= 0

    Raises:
        ToneSpecError: On construction, if any field violates its range.
    """

    frequency: float
    duration: float
    waveform: Waveform = Waveform.SINE
    volume: float = 0.3
    delay: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "waveform", Waveform.parse(self.waveform))
        context = {
            "frequency": self.frequency,
            "duration": self.duration,
            "volume": self.volume,
            "delay": self.delay,
        }
        if not _is_real(self.frequency) or self.frequency <= 0:
            raise ToneSpecError(f"frequency must be > 0, got {self.frequency!r}", context=context)
        if not _is_real(self.duration) or self.duration <= 0:
            raise ToneSpecError(f"duration must be > 0, got {self.duration!r}", context=context)
        if not _is_real(self.volume) or not 0 < self.volume <= 1:
            raise ToneSpecError(f"volume must be in (0, 1], got {self.volume!r}", context=context)
        if not _is_real(self.delay) or self.delay < 0:
            raise ToneSpecError(f"delay must be >= 0, got {self.delay!r}", context=context)

    @classmethod
    def of(
        cls,
        frequency: float,
        duration: float,
        waveform: Union[Waveform, str] = Waveform.SINE,
        volume: float = 0.3,
        delay: float = 0.0,
    ) -> "ToneSpec":
        """Positional shorthand used by the built-in catalog table."""
        return cls(frequency, duration, Waveform.parse(waveform), volume, delay)

    @property
    def end_time(self) -> float:
        """Delay plus duration (seconds), before any silence prefix."""
        return self.delay + self.duration


def sample_count(duration: float, sample_rate: int = SAMPLE_RATE) -> int:
    """Number of whole sample periods in `duration` seconds."""
    return math.floor(sample_rate * duration)


def render(tone: ToneSpec, sample_rate: int = SAMPLE_RATE) -> SampleBuffer:
    """Render one tone, ignoring its delay.

    Args:
        tone: Tone to render
        sample_rate: Samples per second

    Returns:
        Buffer of exactly floor(sample_rate * tone.duration) samples
    """
    oscillator = WAVE_FUNCTIONS[tone.waveform]
    attack_time = attack_time_for(tone.frequency)
    samples: SampleBuffer = []
    for i in range(sample_count(tone.duration, sample_rate)):
        t = i / sample_rate
        samples.append(
            oscillator(t, tone.frequency) * gain(t, tone.duration, tone.volume, attack_time)
        )
    return samples
