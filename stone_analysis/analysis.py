"""Averaged spectral analysis reporting the strongest frequencies of a file."""

from __future__ import annotations

from dataclasses import dataclass
from operator import attrgetter

import numpy as np

from .errors import EmptySignal
from .fourier import dft
from .fourier import magnitudes as spectrum_magnitudes
from .wav import read_samples

SAMPLE_RATE = 48000.0
CHUNK_SIZE = 2048


@dataclass(frozen=True)
class FrequencyResult:
    """A frequency in hertz with its averaged magnitude."""

    hz: float
    magnitude: float


def run(path, n: int) -> list[FrequencyResult]:
    """Analyse a WAV file, print its top ``n`` frequencies and return them."""
    samples = read_samples(path)
    top_frequencies = analyze_spectrogram(samples, n)
    print_results(top_frequencies)
    return top_frequencies


def print_results(top_frequencies) -> None:
    """Print a list of frequency results."""
    top_frequencies = list(top_frequencies)
    print(f"Top {len(top_frequencies)} frequencies:")
    for result in top_frequencies:
        print(f"{result.hz:.1f} Hz")


def analyze_spectrogram(samples, n: int) -> list[FrequencyResult]:
    """Average the magnitude spectra of all full chunks and return the top ``n`` bins.

    Raises EmptySignal when the signal is shorter than one chunk.
    """
    values = np.asarray(samples, dtype=np.float64)
    block_count = len(values) // CHUNK_SIZE
    if block_count == 0:
        raise EmptySignal()

    blocks = values[: block_count * CHUNK_SIZE].reshape(block_count, CHUNK_SIZE)
    half_size = CHUNK_SIZE // 2
    average = spectrum_magnitudes(dft(blocks))[:, :half_size].mean(axis=0)
    return find_top_n(average, SAMPLE_RATE, n)


def find_top_n(magnitudes, sample_rate: float, n: int) -> list[FrequencyResult]:
    """Return the ``n`` strongest bins, strongest first; ties keep bin order."""
    results = [
        FrequencyResult(hz=index * sample_rate / CHUNK_SIZE, magnitude=float(magnitude))
        for index, magnitude in enumerate(magnitudes)
    ]
    results.sort(key=attrgetter("magnitude"), reverse=True)
    return results[:n]