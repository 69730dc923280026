"""Amplitude envelope: smoothed attack ramp combined with exponential decay."""

import math

from sfxgen.core.constants import (
    ATTACK_MAX_SECONDS,
    ATTACK_MIN_CYCLES,
    ATTACK_MIN_SECONDS,
    ENVELOPE_FLOOR,
)


def attack_multiplier(t: float, attack_time: float) -> float:
    """Sine-squared ease-in from 0 to 1 over attack_time, then 1."""
    if t < attack_time:
        progress = t / attack_time
        return math.sin(progress * math.pi / 2) ** 2
    return 1.0


def decay_rate(total_duration: float, peak_volume: float) -> float:
    """Rate that brings peak_volume down to ENVELOPE_FLOOR at total_duration."""
    return math.log(peak_volume / ENVELOPE_FLOOR) / total_duration


def gain(t: float, total_duration: float, peak_volume: float, attack_time: float) -> float:
    """Envelope gain at time t.

    Args:
        t: Time since tone onset (seconds)
        total_duration: Tone length; the decay reaches ENVELOPE_FLOOR here
        peak_volume: Peak amplitude in (0, 1]
        attack_time: Attack ramp length (seconds)

    Returns:
        Non-negative gain multiplier
    """
    decay = math.exp(-decay_rate(total_duration, peak_volume) * t)
    return peak_volume * decay * attack_multiplier(t, attack_time)


def attack_time_for(frequency: float) -> float:
    """Attack length for a tone: at least ATTACK_MIN_CYCLES periods, clamped.

    Low tones get longer ramps (up to 60ms), high tones never drop below 25ms.
    """
    from_cycles = ATTACK_MIN_CYCLES / frequency
    return max(ATTACK_MIN_SECONDS, min(ATTACK_MAX_SECONDS, from_cycles))
