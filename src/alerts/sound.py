"""Sounddevice-backed chime played when the timer changes state."""

import logging
import wave
from typing import Optional

import numpy as np
import sounddevice as sd

from .config import SoundConfig
from .errors import SoundError

CHIME_SAMPLE_RATE_HZ = 44100
# (frequency_hz, start_seconds) pairs for the built-in two-note chime
_CHIME_NOTES = ((880.0, 0.0), (1318.5, 0.18))
_CHIME_NOTE_SECONDS = 0.6


def synthesize_chime(sample_rate_hz: int = CHIME_SAMPLE_RATE_HZ) -> np.ndarray:
    """Build a short two-note chime as a mono float32 array in [-1, 1]."""
    note_frames = int(_CHIME_NOTE_SECONDS * sample_rate_hz)
    starts = [int(start_seconds * sample_rate_hz) for _, start_seconds in _CHIME_NOTES]
    wav = np.zeros(max(starts) + note_frames, dtype=np.float32)
    note_t = np.arange(note_frames) / sample_rate_hz
    envelope = np.exp(-6.0 * note_t)
    for (frequency_hz, _), start in zip(_CHIME_NOTES, starts):
        note = np.sin(2 * np.pi * frequency_hz * note_t) * envelope
        wav[start : start + note_frames] += note.astype(np.float32)

    peak = float(np.max(np.abs(wav)))
    if peak > 0:
        wav /= peak
    return wav


def load_wav(path: str) -> tuple[np.ndarray, int]:
    """Read a 16-bit PCM WAV file into a float32 array shaped (frames, channels)."""
    try:
        with wave.open(path, "rb") as fh:
            channels = fh.getnchannels()
            sample_width = fh.getsampwidth()
            sample_rate_hz = fh.getframerate()
            pcm_bytes = fh.readframes(fh.getnframes())
    except (OSError, EOFError, wave.Error) as error:
        raise SoundError(f"Failed to read sound file {path}: {error}") from error

    if sample_width != 2:
        raise SoundError(
            f"Unsupported sample width in {path}: {sample_width * 8} bits (expected 16)"
        )

    try:
        pcm_int16 = np.frombuffer(pcm_bytes, dtype=np.int16)
        if len(pcm_int16) == 0:
            raise SoundError(f"Sound file is empty: {path}")
        wav = pcm_int16.astype(np.float32) / 32768.0
        return wav.reshape(-1, channels), sample_rate_hz
    except ValueError as error:
        raise SoundError(f"Truncated PCM data in {path}: {error}") from error


class SoundDeviceChime:
    """Plays the chime without blocking; a new play interrupts the previous one."""
    def __init__(
        self,
        config: SoundConfig,
        logger: Optional[logging.Logger] = None,
    ):
        self._config = config
        self._logger = logger or logging.getLogger(__name__)

        if config.file:
            wav, self._sample_rate_hz = load_wav(config.file)
            self._logger.info("Loaded chime from %s", config.file)
        else:
            wav = synthesize_chime()
            self._sample_rate_hz = CHIME_SAMPLE_RATE_HZ
        self._wav = (wav * config.volume).astype(np.float32)

    @property
    def sample_rate_hz(self) -> int:
        return self._sample_rate_hz

    @property
    def samples(self) -> np.ndarray:
        return self._wav

    def play(self) -> None:
        self._logger.debug(
            "Playing %d frames of chime audio at %d Hz",
            len(self._wav),
            self._sample_rate_hz,
        )
        try:
            sd.stop()
            sd.play(
                self._wav,
                samplerate=self._sample_rate_hz,
                device=self._config.output_device_index,
                blocking=False,
            )
        except Exception as error:
            raise SoundError(f"Audio playback failed: {error}") from error
