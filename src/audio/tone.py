"""
Sine tone synthesis.

Buffers are interleaved: frame i occupies samples [i * channels, (i + 1) * channels),
with the same value in every channel.
"""
import numpy as np

from audio.config import (
    CHANNELS,
    SAMPLE_RATE,
    TONE_AMPLITUDE,
    TONE_DURATION_S,
    TONE_FREQUENCY_HZ,
)


def frame_count(duration: float, sample_rate: int) -> int:
    return int(duration * sample_rate)


def synthesize_tone(
    frequency: float = TONE_FREQUENCY_HZ,
    duration: float = TONE_DURATION_S,
    sample_rate: int = SAMPLE_RATE,
    channels: int = CHANNELS,
    amplitude: float = TONE_AMPLITUDE,
) -> np.ndarray:
    """Return an interleaved float32 buffer of frames * channels samples.

    The phase grows by 2*pi*f/r per frame and is never wrapped; the buffers
    are short enough that precision is not a concern.
    """
    frames = frame_count(duration, sample_rate)
    inc = 2.0 * np.pi * float(frequency) / float(sample_rate)
    phase = inc * np.arange(frames, dtype=np.float64)
    mono = (np.sin(phase) * amplitude).astype(np.float32)
    return np.repeat(mono, channels)


def to_pcm16(samples: np.ndarray) -> bytes:
    """Quantize float samples in [-1, 1] to little-endian signed 16-bit PCM."""
    clipped = np.clip(samples, -1.0, 1.0)
    return (clipped * 32767.0).astype("<i2").tobytes()
