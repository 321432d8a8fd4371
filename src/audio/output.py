"""
Audio output for the click tone, built on pyglet.media.

A single long-lived Player is used as the playback queue: every tone is
appended and the player keeps going until the queue is empty. If no audio
driver can be opened, playing a tone does nothing.
"""
import sys
from typing import Optional

import numpy as np
import pyglet
from pyglet.media.codecs.base import AudioFormat, StaticMemorySource

from audio.config import (
    CHANNELS,
    SAMPLE_RATE,
    SAMPLE_SIZE_BITS,
    TONE_DURATION_S,
    TONE_FREQUENCY_HZ,
)
from audio.tone import synthesize_tone, to_pcm16


class AudioOutput:
    def __init__(self, driver=None, sample_rate: int = SAMPLE_RATE, channels: int = CHANNELS):
        self.driver = driver
        self.sample_rate = sample_rate
        self.channels = channels
        self._format = AudioFormat(
            channels=channels, sample_size=SAMPLE_SIZE_BITS, sample_rate=sample_rate
        )
        self._player: Optional[pyglet.media.Player] = None

    @classmethod
    def open(cls, sample_rate: int = SAMPLE_RATE, channels: int = CHANNELS) -> "AudioOutput":
        """Open the default audio driver; an output without a driver is silent."""
        try:
            driver = pyglet.media.get_audio_driver()
        except Exception as e:
            print(f"[audio] pyglet.media.get_audio_driver failed: {e}", file=sys.stderr)
            driver = None

        if driver is None:
            print("[audio] No audio device available, clicks will be silent", file=sys.stderr)
        else:
            print(f"[audio] Using {type(driver).__name__} at {sample_rate} Hz, {channels} ch")
        return cls(driver, sample_rate=sample_rate, channels=channels)

    @property
    def available(self) -> bool:
        return self.driver is not None

    def play_tone(
        self,
        frequency: float = TONE_FREQUENCY_HZ,
        duration: float = TONE_DURATION_S,
    ) -> Optional[np.ndarray]:
        """Queue a tone for playback and return the float samples submitted."""
        if not self.available:
            return None

        samples = synthesize_tone(frequency, duration, self.sample_rate, self.channels)
        source = StaticMemorySource(to_pcm16(samples), self._format)

        if self._player is None:
            self._player = pyglet.media.Player()
        self._player.queue(source)
        if not self._player.playing:
            self._player.play()
        return samples

    def close(self) -> None:
        if self._player is not None:
            self._player.delete()
            self._player = None
