"""Spectral analysis, high-frequency message hiding and PPM visualisation for mono WAV files."""

__version__ = "0.1.0"