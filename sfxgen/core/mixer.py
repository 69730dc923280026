"""Multi-tone mixing with silence lead-in, fade-out tail and peak normalization."""

from __future__ import annotations

import logging
import math
from typing import Sequence

from sfxgen.core.constants import (
    FADE_OUT_SECONDS,
    NORMALIZE_CEILING,
    SAMPLE_RATE,
    SILENCE_PREFIX_SECONDS,
)
from sfxgen.core.errors import ToneSpecError
from sfxgen.core.tone import SampleBuffer, ToneSpec, render, sample_count

logger = logging.getLogger(__name__)


def total_duration(tones: Sequence[ToneSpec], silence_prefix: bool = True) -> float:
    """Length of the mixed clip in seconds, fade-out tail included."""
    prefix = SILENCE_PREFIX_SECONDS if silence_prefix else 0.0
    max_end = 0.0
    for tone in tones:
        end = prefix + tone.delay + tone.duration
        if end > max_end:
            max_end = end
    return max_end + FADE_OUT_SECONDS


def apply_fade_out(samples: SampleBuffer, sample_rate: int = SAMPLE_RATE) -> None:
    """Cosine taper over the last FADE_OUT_SECONDS, reaching zero at the last sample (in place)."""
    fade_samples = min(sample_count(FADE_OUT_SECONDS, sample_rate), len(samples))
    if fade_samples <= 0:
        return
    fade_start = len(samples) - fade_samples
    span = max(fade_samples - 1, 1)
    for i in range(fade_start, len(samples)):
        progress = (i - fade_start) / span
        samples[i] *= math.cos(progress * math.pi / 2)


def normalize(samples: SampleBuffer, ceiling: float = NORMALIZE_CEILING) -> float:
    """Scale down in place so that peak |x| <= ceiling. Never scales up.

    Returns:
        The scale factor applied (1.0 when the buffer already fits)
    """
    peak = max((abs(s) for s in samples), default=0.0)
    if peak <= ceiling:
        return 1.0
    scale = ceiling / peak
    for i, s in enumerate(samples):
        # clamp absorbs the last-ulp rounding of s * scale
        samples[i] = max(-ceiling, min(ceiling, s * scale))
    logger.debug("Normalized peak %.4f by factor %.4f", peak, scale)
    return scale


def mix(
    tones: Sequence[ToneSpec],
    silence_prefix: bool = True,
    sample_rate: int = SAMPLE_RATE,
) -> SampleBuffer:
    """Mix tones into a single buffer.

    Each tone is rendered on its own and summed into the output at its delay
    (plus the optional silence prefix). Overlapping tones add up; the final
    normalization pass keeps the result within [-0.9, 0.9].

    Args:
        tones: One or more tones; each tone's `delay` positions it
        silence_prefix: Prepend SILENCE_PREFIX_SECONDS of silence
        sample_rate: Samples per second

    Returns:
        Mixed buffer of floor(sample_rate * total_duration(...)) samples

    Raises:
        ToneSpecError: If `tones` is empty.
    """
    if not tones:
        raise ToneSpecError("mix() needs at least one tone")

    prefix = SILENCE_PREFIX_SECONDS if silence_prefix else 0.0
    num_samples = sample_count(total_duration(tones, silence_prefix), sample_rate)
    combined: SampleBuffer = [0.0] * num_samples

    for tone in tones:
        samples = render(tone, sample_rate)
        start = math.floor((prefix + tone.delay) * sample_rate)
        stop = min(len(samples), num_samples - start)
        for i in range(max(stop, 0)):
            combined[start + i] += samples[i]

    apply_fade_out(combined, sample_rate)
    normalize(combined)
    return combined
