"""Discrete Fourier transforms over real sample buffers."""

from __future__ import annotations

import numpy as np


def dft(samples) -> np.ndarray:
    """Return the complex spectrum of real samples, taken along the last axis."""
    values = np.asarray(samples, dtype=np.float64)
    if values.shape and values.shape[-1] == 0:
        return np.zeros(values.shape, dtype=np.complex128)
    return np.fft.fft(values, axis=-1)


def idft(spectrum) -> np.ndarray:
    """Return the real part of the inverse transform of a spectrum."""
    values = np.asarray(spectrum, dtype=np.complex128)
    if values.shape and values.shape[-1] == 0:
        return np.zeros(values.shape, dtype=np.float64)
    return np.fft.ifft(values, axis=-1).real


def magnitudes(spectrum) -> np.ndarray:
    """Return the magnitude of every bin of a spectrum."""
    return np.abs(np.asarray(spectrum, dtype=np.complex128))