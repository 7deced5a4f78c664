"""Rendering of a WAV file's spectrogram as a PPM image."""

from __future__ import annotations

import numpy as np

from .color import heat_colormap
from .errors import EmptySignal
from .fourier import dft, magnitudes
from .wav import read_samples

CHUNK_SIZE = 2048
NUM_FREQ_BINS = 256
PIXEL_WIDTH = 2


def _spectrogram(samples: np.ndarray) -> np.ndarray:
    """Return one row of averaged band magnitudes per full chunk."""
    count = len(samples) // CHUNK_SIZE
    blocks = samples[: count * CHUNK_SIZE].reshape(count, CHUNK_SIZE)
    hann = 0.5 * (1.0 - np.cos(2.0 * np.pi * np.arange(CHUNK_SIZE) / (CHUNK_SIZE - 1)))
    half_size = CHUNK_SIZE // 2
    bin_size = half_size // NUM_FREQ_BINS
    spectra = magnitudes(dft(blocks * hann))[:, : NUM_FREQ_BINS * bin_size]
    return spectra.reshape(count, NUM_FREQ_BINS, bin_size).mean(axis=2)


def render(path, output_path) -> None:
    """Draw a log-scaled spectrogram, low frequencies at the bottom; silence draws nothing."""
    samples = np.asarray(read_samples(path), dtype=np.float64)
    grid = _spectrogram(samples)
    if grid.size == 0:
        return

    max_mag = float(np.max(grid))
    if max_mag == 0.0:
        return

    norm = np.maximum(grid / max_mag, 1e-9)
    intensity = np.clip(1.0 + np.log10(norm) / 4.0, 0.0, 1.0)

    width = grid.shape[0] * PIXEL_WIDTH
    rows = (
        b"".join(bytes(heat_colormap(float(value))) * PIXEL_WIDTH for value in row)
        for row in intensity.T[::-1]
    )
    try:
        with open(output_path, "wb") as out:
            out.write(f"P6\n{width} {NUM_FREQ_BINS}\n255\n".encode("ascii"))
            out.writelines(rows)
    except OSError as err:
        raise EmptySignal() from err