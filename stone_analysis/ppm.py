"""A minimal binary PPM (P6) image writer."""

from __future__ import annotations

from .color import Rgb
from .errors import EmptySignal


class PpmWriter:
    """An in-memory RGB image that can be saved as a P6 file."""

    def __init__(self, width: int, height: int, bg: Rgb = Rgb(0, 0, 0)) -> None:
        self.width = width
        self.height = height
        self.pixels = [bg] * (width * height)

    def set(self, x: int, y: int, color: Rgb) -> None:
        """Colour one pixel; coordinates outside the image are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.pixels[y * self.width + x] = color

    def save(self, path) -> None:
        """Write the image to ``path`` in binary PPM format."""
        body = b"".join(bytes(pixel) for pixel in self.pixels)
        try:
            with open(path, "wb") as out:
                out.write(f"P6\n{self.width} {self.height}\n255\n".encode("ascii"))
                out.write(body)
        except OSError as err:
            raise EmptySignal() from err