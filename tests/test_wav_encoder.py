# tests/test_wav_encoder.py
#
# Unit tests for sfxgen.core.wav_encoder

import struct
import wave

import pytest

from sfxgen.core.mixer import mix
from sfxgen.core.wav_encoder import (
    HEADER_SIZE,
    WavInfo,
    decode,
    encode,
    quantize,
    read_wav_info,
    write_wav,
)


# =============================================================================
# quantize
# =============================================================================


class TestQuantize:
    @pytest.mark.parametrize(
        "sample, expected",
        [
            (0.0, 0),
            (1.0, 32767),
            (-1.0, -32767),
            (0.5, 16383),
            (-0.5, -16384),
            (2.0, 32767),
            (-3.0, -32767),
        ],
    )
    def test_clamp_and_floor(self, sample, expected):
        assert quantize(sample) == expected


# =============================================================================
# Header layout
# =============================================================================


class TestHeader:
    def test_hundred_zero_samples(self):
        data = encode([0.0] * 100)
        assert len(data) == 244
        assert struct.unpack_from("<I", data, 4)[0] == 236
        assert struct.unpack_from("<I", data, 40)[0] == 200
        assert data[HEADER_SIZE:] == b"\x00" * 200

    def test_canonical_fields(self):
        data = encode([0.1, -0.1, 0.2])
        assert data[0:4] == b"RIFF"
        assert data[8:12] == b"WAVE"
        assert data[12:16] == b"fmt "
        fmt_size, audio_format, channels, rate, byte_rate, block_align, bits = struct.unpack_from(
            "<IHHIIHH", data, 16
        )
        assert fmt_size == 16
        assert audio_format == 1
        assert channels == 1
        assert rate == 44100
        assert byte_rate == 88200
        assert block_align == 2
        assert bits == 16
        assert data[36:40] == b"data"

    def test_empty_buffer(self):
        data = encode([])
        assert len(data) == HEADER_SIZE
        assert struct.unpack_from("<I", data, 4)[0] == 36

    def test_samples_little_endian(self):
        data = encode([0.5, -0.5])
        assert data[HEADER_SIZE:] == struct.pack("<hh", 16383, -16384)


# =============================================================================
# Read-back
# =============================================================================


class TestRoundTrip:
    def test_mixed_clip(self, correct_tones):
        samples = mix(correct_tones)
        info = read_wav_info(encode(samples))
        assert info.channels == 1
        assert info.sample_rate == 44100
        assert info.sample_width_bits == 16
        assert info.frame_count == len(samples)
        assert info.data_size == 2 * len(samples)
        assert info.is_consistent

    def test_stdlib_reader_agrees(self, tmp_path, tick_tone):
        path = tmp_path / "tick.wav"
        write_wav(path, mix([tick_tone], silence_prefix=False))
        with wave.open(str(path), "rb") as wav:
            assert wav.getnchannels() == 1
            assert wav.getsampwidth() == 2
            assert wav.getframerate() == 44100

    def test_decode_returns_quantized_values(self):
        assert decode(encode([0.5, -0.5, 0.0, 1.5])) == [16383, -16384, 0, 32767]

    def test_read_from_path(self, tmp_path):
        path = tmp_path / "zeros.wav"
        written = write_wav(path, [0.0] * 10)
        assert written == HEADER_SIZE + 20
        assert path.stat().st_size == written
        assert read_wav_info(path).frame_count == 10

    def test_deterministic(self, correct_tones):
        assert encode(mix(correct_tones)) == encode(mix(correct_tones))

    def test_not_a_wav_raises(self):
        with pytest.raises((wave.Error, EOFError)):
            read_wav_info(b"not a wav file at all, definitely not RIFF")


class TestWavInfo:
    def test_inconsistent_sizes_detected(self):
        info = WavInfo(
            channels=1, sample_rate=44100, sample_width_bits=16, frame_count=10, data_size=20, riff_size=40
        )
        assert not info.is_consistent
