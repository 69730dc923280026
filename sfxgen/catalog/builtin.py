# sfxgen/catalog/builtin.py
"""Built-in game sound effects.

Single-tone cues (tick, time_up) are mixed without the silence lead-in.
Overlapping chords are kept at low per-tone volumes; the mixer normalizes the
sum anyway.
"""

from sfxgen.catalog.models import SoundEffect
from sfxgen.core.oscillator import Waveform
from sfxgen.core.tone import ToneSpec

SINE = Waveform.SINE
SAW = Waveform.SAWTOOTH
T = ToneSpec.of

BUILTIN_EFFECTS: tuple[SoundEffect, ...] = (
    SoundEffect(
        "tick",
        (T(600, 0.05, SINE, 0.15),),
        silence_prefix=False,
        description="Countdown tick",
    ),
    SoundEffect(
        "time_up",
        (T(440, 0.1, SINE, 0.2),),
        silence_prefix=False,
        description="Warning tone, a lower and longer tick",
    ),
    SoundEffect(
        "correct",
        (
            T(523, 0.15, SINE, 0.3, 0),
            T(659, 0.15, SINE, 0.3, 0.1),
            T(784, 0.2, SINE, 0.3, 0.2),
        ),
        description="Ascending C-E-G",
    ),
    SoundEffect(
        "wrong",
        (
            T(400, 0.2, SAW, 0.2, 0),
            T(300, 0.3, SAW, 0.15, 0.15),
        ),
        description="Descending sawtooth",
    ),
    SoundEffect(
        "bonus",
        (
            T(800, 0.1, SINE, 0.25, 0),
            T(1000, 0.1, SINE, 0.25, 0.08),
            T(1200, 0.15, SINE, 0.3, 0.16),
        ),
        description="Sparkle",
    ),
    SoundEffect(
        "streak",
        (
            T(700, 0.1, SINE, 0.25, 0),
            T(900, 0.1, SINE, 0.25, 0.07),
            T(1100, 0.15, SINE, 0.3, 0.14),
            T(1300, 0.15, SINE, 0.25, 0.21),
        ),
        description="Sparkle with tighter timing and a fourth step",
    ),
    SoundEffect(
        "round_start",
        (
            T(400, 0.15, SINE, 0.25, 0),
            T(500, 0.15, SINE, 0.25, 0.15),
            T(600, 0.2, SINE, 0.3, 0.3),
        ),
        description="Ascending beeps",
    ),
    SoundEffect(
        "reveal",
        (
            T(300, 0.35, SINE, 0.15, 0),
            T(500, 0.3, SINE, 0.25, 0.25),
        ),
        description="Dramatic reveal",
    ),
    SoundEffect(
        "victory",
        (
            T(523, 0.25, SINE, 0.2, 0),
            T(659, 0.25, SINE, 0.2, 0.2),
            T(784, 0.25, SINE, 0.2, 0.4),
            T(1047, 0.35, SINE, 0.25, 0.6),
        ),
        description="Fanfare C-E-G-C",
    ),
    SoundEffect(
        "game_over",
        (
            T(400, 0.3, SINE, 0.15, 0),
            T(300, 0.4, SINE, 0.2, 0.25),
        ),
        description="Descending, more final than 'wrong'",
    ),
)
