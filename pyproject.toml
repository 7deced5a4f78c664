[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stone_analysis"
version = "0.1.0"
description = "Analyse the spectrum of mono 48 kHz WAV files, hide text messages in their high frequencies, and render amplitude or spectrogram images."
requires-python = ">=3.10"
keywords = ["audio", "wav", "dft", "spectrum", "steganography", "spectrogram", "ppm"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
stone_analysis = "stone_analysis.main:main"

[tool.hatch.build.targets.wheel]
packages = ["stone_analysis"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
