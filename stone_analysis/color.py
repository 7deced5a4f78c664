"""Colours and the heat colour map used by the spectrogram."""

from __future__ import annotations

import math
from typing import NamedTuple


class Rgb(NamedTuple):
    """An 8-bit RGB colour."""

    r: int
    g: int
    b: int


_STOPS = (
    (0.00, Rgb(0, 0, 0)),
    (0.25, Rgb(0, 0, 180)),
    (0.50, Rgb(0, 200, 200)),
    (0.75, Rgb(255, 220, 0)),
    (1.00, Rgb(255, 255, 255)),
)


def _lerp(a: int, b: int, t: float) -> int:
    return min(255, max(0, int(a + (b - a) * t)))


def heat_colormap(t: float) -> Rgb:
    """Map ``t`` in [0, 1] to a colour running black, blue, cyan, yellow, white."""
    if math.isnan(t):
        return _STOPS[-1][1]
    t = min(1.0, max(0.0, t))
    for (t0, c0), (t1, c1) in zip(_STOPS, _STOPS[1:]):
        if t <= t1:
            a = (t - t0) / (t1 - t0)
            return Rgb(*(_lerp(lo, hi, a) for lo, hi in zip(c0, c1)))
    return _STOPS[-1][1]