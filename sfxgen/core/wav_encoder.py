# sfxgen/core/wav_encoder.py
"""Mono 16-bit PCM WAV encoding (and read-back for verification).

The container is written with the standard-library `wave` module, which emits
the canonical 44-byte RIFF/WAVE header:

    RIFF <36 + data_size> WAVE
    fmt  <16> <PCM=1> <channels> <rate> <byte rate> <block align> <bits>
    data <data_size> <samples...>

Usage:
    from sfxgen.core.wav_encoder import encode, read_wav_info

    data = encode(samples)
    info = read_wav_info(data)
"""

from __future__ import annotations

import io
import math
import os
import struct
import wave
from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence, Union

from sfxgen.core.constants import NUM_CHANNELS, PCM_MAX, SAMPLE_RATE, SAMPLE_WIDTH_BYTES

HEADER_SIZE = 44


def quantize(sample: float) -> int:
    """Clamp to [-1, 1] and floor to a signed 16-bit value."""
    clamped = max(-1.0, min(1.0, sample))
    return math.floor(clamped * PCM_MAX)


def encode(samples: Sequence[float], sample_rate: int = SAMPLE_RATE) -> bytes:
    """Serialize float samples as a mono 16-bit PCM WAV file.

    Args:
        samples: Float amplitudes, nominally in [-1, 1]
        sample_rate: Samples per second written to the header

    Returns:
        Complete file contents (HEADER_SIZE + 2 * len(samples) bytes)
    """
    frames = struct.pack(f"<{len(samples)}h", *(quantize(s) for s in samples))
    buf = io.BytesIO()
    with wave.open(buf, "wb") as wav:
        wav.setnchannels(NUM_CHANNELS)
        wav.setsampwidth(SAMPLE_WIDTH_BYTES)
        wav.setframerate(sample_rate)
        wav.setnframes(len(samples))
        wav.writeframes(frames)
    return buf.getvalue()


def write_wav(path: Union[str, os.PathLike], samples: Sequence[float]) -> int:
    """Encode and write samples to `path`. Returns the number of bytes written.

    OSError from the filesystem propagates to the caller.
    """
    data = encode(samples)
    with open(path, "wb") as f:
        f.write(data)
    return len(data)


@dataclass(frozen=True)
class WavInfo:
    """Header fields of a decoded WAV file.

    Attributes:
        channels: Channel count
        sample_rate: Frames per second
        sample_width_bits: Bits per sample
        frame_count: Number of frames in the data chunk
        data_size: Declared data chunk size in bytes
        riff_size: Declared RIFF chunk size in bytes
    """

    channels: int
    sample_rate: int
    sample_width_bits: int
    frame_count: int
    data_size: int
    riff_size: int

    @property
    def is_consistent(self) -> bool:
        """Declared sizes agree with each other and with the frame count."""
        block_align = self.channels * self.sample_width_bits // 8
        return (
            self.riff_size == 36 + self.data_size
            and self.data_size == self.frame_count * block_align
        )


def _as_bytes(source: Union[bytes, str, os.PathLike]) -> bytes:
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)
    return Path(source).read_bytes()


def read_wav_info(source: Union[bytes, str, os.PathLike]) -> WavInfo:
    """Read header fields from WAV bytes or a WAV file path.

    Raises:
        wave.Error: If the data is not a PCM WAV file.
    """
    data = _as_bytes(source)
    with wave.open(io.BytesIO(data), "rb") as wav:
        channels = wav.getnchannels()
        sample_width = wav.getsampwidth()
        rate = wav.getframerate()
        frames = wav.getnframes()
    (riff_size,) = struct.unpack_from("<I", data, 4)
    (data_size,) = struct.unpack_from("<I", data, HEADER_SIZE - 4)
    return WavInfo(
        channels=channels,
        sample_rate=rate,
        sample_width_bits=sample_width * 8,
        frame_count=frames,
        data_size=data_size,
        riff_size=riff_size,
    )


def decode(source: Union[bytes, str, os.PathLike]) -> List[int]:
    """Read the 16-bit samples of a mono WAV file."""
    data = _as_bytes(source)
    with wave.open(io.BytesIO(data), "rb") as wav:
        n = wav.getnframes()
        frames = wav.readframes(n)
    return list(struct.unpack(f"<{n}h", frames))
