"""Recovering a message hidden in the high-frequency band of a WAV file."""

from __future__ import annotations

import math

import numpy as np

from .errors import AudioError, FailedToDecodeMessage, FailedToReadAudio
from .fourier import dft, magnitudes
from .stego_helpers import CHUNK_SIZE, MAX_HZ, OBS_KEY, SAMPLE_RATE, normalize_samples
from .wav import read_wav

BASE_BIN = int(math.floor(MAX_HZ * CHUNK_SIZE / SAMPLE_RATE + 0.5))
HEADER_LIMIT_BIN = 1024
BYTE_SPAN = 256
DETECTION_THRESHOLD = 0.1


def _message_length(spectrum: np.ndarray) -> int:
    band = magnitudes(spectrum[BASE_BIN:HEADER_LIMIT_BIN])
    return int(np.argmax(band)) if band.size else 0


def _decode_byte(spectrum: np.ndarray, window_idx: int) -> int | None:
    band = magnitudes(spectrum[BASE_BIN:BASE_BIN + BYTE_SPAN])
    if not band.size:
        return None
    offset = int(np.argmax(band))
    if band[offset] <= DETECTION_THRESHOLD:
        return None
    return (offset & 0xFF) ^ (OBS_KEY ^ (window_idx & 0xFF))


def _full_windows(samples: np.ndarray) -> np.ndarray:
    count = len(samples) // CHUNK_SIZE
    return samples[: count * CHUNK_SIZE].reshape(count, CHUNK_SIZE)


def unmask_message(samples) -> str | None:
    """Return the message hidden in ``samples``, or None when there are no samples.

    Raises FailedToDecodeMessage when the recovered bytes are not UTF-8.
    """
    values = np.asarray(samples, dtype=np.float64)
    if values.size == 0:
        return None

    decoded = bytearray()
    msg_len = 0
    for window_idx, window in enumerate(_full_windows(normalize_samples(values))):
        spectrum = dft(window)
        if window_idx == 0:
            msg_len = _message_length(spectrum)
            if msg_len == 0:
                break
        elif window_idx <= msg_len:
            byte = _decode_byte(spectrum, window_idx)
            if byte is not None:
                decoded.append(byte)
        if window_idx + 1 > msg_len:
            break

    try:
        return bytes(decoded).decode("utf-8")
    except UnicodeDecodeError as err:
        raise FailedToDecodeMessage("Decoded bytes are not valid UTF-8") from err


def run_decryption(input_file) -> str | None:
    """Read ``input_file``, print the hidden message and return it."""
    try:
        _, samples = read_wav(input_file)
    except AudioError as err:
        raise FailedToReadAudio(str(err)) from err
    message = unmask_message(samples)
    if message is not None:
        print(message)
    return message