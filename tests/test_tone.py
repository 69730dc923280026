"""
Tests for sfxgen.core.tone module.

Verifies:
- ToneSpec validation (fail fast on out-of-range fields)
- render() buffer length, onset and peak
"""

import math
from dataclasses import FrozenInstanceError

import pytest

from sfxgen.core.constants import SAMPLE_RATE
from sfxgen.core.errors import SfxGenError, ToneSpecError
from sfxgen.core.oscillator import Waveform
from sfxgen.core.tone import ToneSpec, render, sample_count


# ---------------------------------------------------------------------------
# ToneSpec
# ---------------------------------------------------------------------------


class TestToneSpec:
    def test_defaults(self):
        tone = ToneSpec(440, 0.1)
        assert tone.waveform is Waveform.SINE
        assert tone.volume == 0.3
        assert tone.delay == 0.0

    def test_waveform_string_is_coerced(self):
        assert ToneSpec(440, 0.1, "triangle").waveform is Waveform.TRIANGLE

    def test_of_is_positional_shorthand(self):
        tone = ToneSpec.of(523, 0.15, "sine", 0.3, 0.1)
        assert tone == ToneSpec(523, 0.15, Waveform.SINE, 0.3, 0.1)

    def test_end_time(self):
        assert ToneSpec(440, 0.2, delay=0.15).end_time == pytest.approx(0.35)

    def test_frozen(self):
        tone = ToneSpec(440, 0.1)
        with pytest.raises(FrozenInstanceError):
            tone.frequency = 880

    def test_volume_one_is_allowed(self):
        assert ToneSpec(440, 0.1, volume=1.0).volume == 1.0

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"frequency": 0},
            {"frequency": -440},
            {"frequency": float("nan")},
            {"frequency": True},
            {"frequency": "440"},
            {"duration": 0},
            {"duration": -0.1},
            {"duration": float("inf")},
            {"volume": 0},
            {"volume": 1.01},
            {"delay": -0.01},
        ],
    )
    def test_invalid_fields_raise(self, kwargs):
        params = {"frequency": 440, "duration": 0.1, "volume": 0.3, "delay": 0.0}
        params.update(kwargs)
        with pytest.raises(ToneSpecError):
            ToneSpec(**params)

    def test_unknown_waveform_raises(self):
        with pytest.raises(ToneSpecError):
            ToneSpec(440, 0.1, "square")

    def test_error_carries_context(self):
        with pytest.raises(ToneSpecError) as exc_info:
            ToneSpec(-1, 0.1)
        assert isinstance(exc_info.value, SfxGenError)
        assert exc_info.value.context["frequency"] == -1
        assert "frequency" in exc_info.value.user_message


# ---------------------------------------------------------------------------
# render
# ---------------------------------------------------------------------------


class TestRender:
    def test_tick_scenario(self, tick_tone):
        samples = render(tick_tone)
        assert len(samples) == 2205
        assert samples[0] == 0.0
        assert max(abs(s) for s in samples) <= 0.15

    @pytest.mark.parametrize("duration", [0.05, 0.1, 0.15, 0.2, 0.25, 0.3, 0.35, 0.4, 0.123])
    def test_length_is_floor_of_rate_times_duration(self, duration):
        samples = render(ToneSpec(500, duration))
        assert len(samples) == math.floor(SAMPLE_RATE * duration)
        assert len(samples) == sample_count(duration)

    def test_custom_sample_rate(self):
        assert len(render(ToneSpec(500, 0.1), sample_rate=8000)) == 800

    def test_delay_does_not_change_render(self):
        assert render(ToneSpec(500, 0.1, delay=0.3)) == render(ToneSpec(500, 0.1))

    @pytest.mark.parametrize("shape", list(Waveform))
    def test_peak_bounded_by_volume(self, shape):
        samples = render(ToneSpec(300, 0.2, shape, 0.4))
        assert max(abs(s) for s in samples) <= 0.4

    def test_sawtooth_onset_is_silent(self):
        """Sawtooth starts at -1 but the attack gain is 0."""
        samples = render(ToneSpec(300, 0.1, Waveform.SAWTOOTH, 0.5))
        assert samples[0] == 0.0

    def test_deterministic(self, tick_tone):
        assert render(tick_tone) == render(tick_tone)
