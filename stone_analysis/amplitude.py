"""Rendering of a WAV file's loudness envelope as a PPM image."""

from __future__ import annotations

import numpy as np

from .color import Rgb
from .ppm import PpmWriter
from .wav import read_samples

CHUNK_SIZE = 512
IMG_HEIGHT = 256
PIXEL_WIDTH = 2

BLACK = Rgb(0, 0, 0)
WHITE = Rgb(255, 255, 255)
GREY = Rgb(30, 30, 30)


def _rms_per_chunk(samples: np.ndarray) -> np.ndarray:
    chunks = np.split(samples, np.arange(CHUNK_SIZE, len(samples), CHUNK_SIZE))
    return np.array([np.sqrt(np.mean(np.square(chunk))) for chunk in chunks])


def render(path, output_path) -> None:
    """Draw one centred bar per chunk, its height the chunk's RMS; silent files draw nothing."""
    samples = np.asarray(read_samples(path), dtype=np.float64)
    if samples.size == 0:
        return

    rms_values = _rms_per_chunk(samples)
    global_max = float(np.max(rms_values))
    if global_max == 0.0:
        return

    width = len(rms_values) * PIXEL_WIDTH
    image = PpmWriter(width, IMG_HEIGHT, BLACK)
    center = IMG_HEIGHT // 2
    for x in range(width):
        image.set(x, center, GREY)

    for column, rms in enumerate(rms_values):
        half_bar = int(rms / global_max * center)
        y_top = max(center - half_bar, 0)
        y_bottom = min(center + half_bar, IMG_HEIGHT - 1)
        for y in range(y_top, y_bottom + 1):
            for dx in range(PIXEL_WIDTH):
                image.set(column * PIXEL_WIDTH + dx, y, WHITE)

    image.save(output_path)