"""Shared constants and spectral helpers for hiding bytes in audio."""

from __future__ import annotations

import cmath
import math

import numpy as np

from .errors import FrequencyOutOfBounds
from .fourier import dft, idft

CHUNK_SIZE = 2048
SAMPLE_RATE = 48000.0
PHASE = 0.0
OBS_KEY = 0x42
MAX_HZ = 20000.0
BIN_WIDTH_HZ = SAMPLE_RATE / CHUNK_SIZE

_INT16_NORMALIZER = 32768.0


def encode_message(message) -> bytes:
    """Return the bytes of a message given as text or bytes."""
    if isinstance(message, str):
        return message.encode("utf-8")
    return bytes(message)


def mask_chars(message, window_idx: int) -> float:
    """Return the carrier frequency that hides byte ``window_idx - 1`` of a message."""
    byte = encode_message(message)[window_idx - 1]
    upper = ord(chr(byte).upper()) if 0x61 <= byte <= 0x7A else byte
    masked = upper ^ (OBS_KEY ^ (window_idx & 0xFF))
    return MAX_HZ + masked * BIN_WIDTH_HZ


def _frequency_bin(target_hz: float, size: int, sample_rate: float) -> int:
    scaled = target_hz * size / sample_rate
    if math.isnan(scaled) or scaled <= 0:
        return 0
    if math.isinf(scaled):
        return size
    return int(math.floor(scaled + 0.5))


def modify_sound_spectrum(spectrum, target_hz: float, sample_rate: float, magnitude: float, phase: float) -> np.ndarray:
    """Return a copy of ``spectrum`` with a tone added at ``target_hz`` and its mirror bin.

    Raises FrequencyOutOfBounds when the frequency falls outside the window.
    """
    result = np.array(spectrum, dtype=np.complex128)
    size = len(result)
    target_bin = _frequency_bin(target_hz, size, sample_rate)
    if target_bin >= size:
        raise FrequencyOutOfBounds(target_hz)

    tone = cmath.rect(magnitude, phase)
    result[target_bin] += tone
    if target_bin > 0:
        result[size - target_bin] += tone.conjugate()
    return result


def dft_scaling_factor() -> float:
    """Return the gain of a forward and inverse transform, measured on a constant chunk."""
    calibration = np.full(CHUNK_SIZE, 0.5)
    peak = float(np.max(np.abs(idft(dft(calibration)))))
    return peak / 0.5 if peak > 0.001 else 1.0


def normalize_samples(samples) -> np.ndarray:
    """Scale raw 16-bit values into [-1, 1]; samples already in range are copied as they are."""
    values = np.array(samples, dtype=np.float64)
    if values.size and float(np.max(np.abs(values))) > 1.0:
        return values / _INT16_NORMALIZER
    return values


def calculate_adaptive_magnitude(chunk, chunk_size: int, target_time_amplitude: float) -> float:
    """Return the bin magnitude for a tone that fits in the headroom left by ``chunk``."""
    values = np.asarray(chunk, dtype=np.float64)
    peak = float(np.max(np.abs(values))) if values.size else 0.0
    headroom = 1.0 - peak
    if target_time_amplitude > headroom:
        amplitude = max(headroom - 0.01, 0.005)
    else:
        amplitude = target_time_amplitude
    return amplitude * chunk_size / 2.0