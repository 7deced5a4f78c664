"""Selection of the image a WAV file is rendered to."""

from __future__ import annotations

import sys

from . import amplitude, frequency

_RENDERERS = {
    "amplitude": amplitude.render,
    "frequency": frequency.render,
}


def run(path, mode, output_path) -> None:
    """Render ``path`` to ``output_path`` as an amplitude or frequency image."""
    renderer = _RENDERERS.get(mode)
    if renderer is None:
        print(
            f"Mode inconnu : '{mode}'. Disponibles : amplitude, frequency",
            file=sys.stderr,
        )
        return
    renderer(path, output_path)