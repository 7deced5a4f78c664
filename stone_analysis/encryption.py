"""Hiding a text message in the high-frequency band of a WAV file."""

from __future__ import annotations

import struct

import numpy as np

from .errors import AudioError, FailedToReadAudio, FailedToWriteEncryptedAudio
from .fourier import dft, idft
from .stego_helpers import (
    BIN_WIDTH_HZ,
    CHUNK_SIZE,
    MAX_HZ,
    PHASE,
    SAMPLE_RATE,
    calculate_adaptive_magnitude,
    dft_scaling_factor,
    encode_message,
    mask_chars,
    modify_sound_spectrum,
    normalize_samples,
)
from .wav import read_wav

TARGET_AMPLITUDE = 0.3
_PCM_SCALE = 32767.0
_U32_MASK = 0xFFFFFFFF


def write_to_wav(samples, file_name, header) -> None:
    """Write samples in [-1, 1] as 16-bit PCM behind a copy of ``header``."""
    values = np.nan_to_num(np.asarray(samples, dtype=np.float64), nan=0.0)
    pcm = (np.clip(values, -1.0, 1.0) * _PCM_SCALE).astype("<i2")
    data_size = (pcm.size * 2) & _U32_MASK
    riff_size = (36 + data_size) & _U32_MASK

    raw_header = bytearray(header.raw_bytes)
    struct.pack_into("<I", raw_header, 4, riff_size)
    struct.pack_into("<I", raw_header, 40, data_size)

    try:
        with open(file_name, "wb") as out:
            out.write(raw_header)
            out.write(pcm.tobytes())
    except OSError as err:
        raise FailedToWriteEncryptedAudio(str(err)) from err

    print(f"Success! Created '{file_name}' ({pcm.size} samples).")


def _windows(samples: np.ndarray, count: int) -> np.ndarray:
    padded = np.zeros(count * CHUNK_SIZE)
    padded[: len(samples)] = samples
    return padded.reshape(count, CHUNK_SIZE)


def mask_message(samples, header, output_file, message) -> None:
    """Hide ``message`` in ``samples`` and write the result to ``output_file``.

    The first window carries the message length, each following window one byte.
    """
    payload = encode_message(message)
    normalized = normalize_samples(samples)
    scale = dft_scaling_factor()

    chunk_count = -(-len(normalized) // CHUNK_SIZE)
    window_count = max(chunk_count, len(payload) + 1)
    length_hz = MAX_HZ + len(payload) * BIN_WIDTH_HZ

    pieces = []
    for index, window in enumerate(_windows(normalized, window_count)):
        spectrum = dft(window)
        if index <= len(payload):
            target_hz = length_hz if index == 0 else mask_chars(payload, index)
            magnitude = calculate_adaptive_magnitude(window, CHUNK_SIZE, TARGET_AMPLITUDE)
            spectrum = modify_sound_spectrum(spectrum, target_hz, SAMPLE_RATE, magnitude, PHASE)
        pieces.append(idft(spectrum) / scale)

    write_to_wav(np.concatenate(pieces), output_file, header)


def run_encryption(input_file, output_file, message) -> None:
    """Read ``input_file``, hide ``message`` in it and write ``output_file``."""
    try:
        header, samples = read_wav(input_file)
    except AudioError as err:
        raise FailedToReadAudio(str(err)) from err
    mask_message(samples, header, output_file, message)