"""
Pytest configuration and shared fixtures for sfxgen tests.

This module provides:
- Fixture paths
- Common tone sets used across mixer, encoder and driver tests
"""

from pathlib import Path

import pytest

from sfxgen.core.oscillator import Waveform
from sfxgen.core.tone import ToneSpec


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------

TESTS_DIR = Path(__file__).parent
FIXTURES_DIR = TESTS_DIR / "fixtures"
CATALOG_FIXTURES_DIR = FIXTURES_DIR / "catalog"


# ---------------------------------------------------------------------------
# Tone fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def tick_tone() -> ToneSpec:
    """600Hz 50ms sine at volume 0.15."""
    return ToneSpec(600, 0.05, Waveform.SINE, 0.15)


@pytest.fixture
def correct_tones() -> list:
    """Ascending C-E-G with staggered onsets."""
    return [
        ToneSpec(523, 0.15, Waveform.SINE, 0.3, 0),
        ToneSpec(659, 0.15, Waveform.SINE, 0.3, 0.1),
        ToneSpec(784, 0.2, Waveform.SINE, 0.3, 0.2),
    ]


@pytest.fixture
def loud_chord() -> list:
    """Full-volume tones starting together; their sum clips without normalization."""
    return [
        ToneSpec(220, 0.3, Waveform.SAWTOOTH, 1.0),
        ToneSpec(330, 0.3, Waveform.TRIANGLE, 1.0),
        ToneSpec(440, 0.3, Waveform.SINE, 1.0),
        ToneSpec(440, 0.3, Waveform.SINE, 1.0),
        ToneSpec(550, 0.3, Waveform.SINE, 1.0),
    ]


@pytest.fixture
def output_dir(tmp_path) -> Path:
    """Not-yet-existing output directory under tmp_path."""
    return tmp_path / "assets" / "sounds"
