"""Reading of mono 48 kHz 16-bit PCM WAV files."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from pathlib import Path

import numpy as np

from .errors import AudioIOError, EmptySignal, InvalidWavHeader, UnsupportedSampleFormat

SAMPLE_NORMALIZER = 32768.0
HEADER_SIZE = 44
EXPECTED_CHANNELS = 1
EXPECTED_SAMPLE_RATE = 48000
EXPECTED_BITS_PER_SAMPLE = 16


@dataclass(frozen=True)
class WavHeader:
    """The canonical 44-byte header of a WAV file."""

    channels: int
    sample_rate: int
    bits_per_sample: int
    data_size: int
    raw_bytes: bytes

    @classmethod
    def from_bytes(cls, data) -> "WavHeader":
        """Parse and validate a header from the start of a file's bytes."""
        data = bytes(data)
        if len(data) < HEADER_SIZE:
            raise InvalidWavHeader("En-tête WAV trop court (min 44 octets).")
        if data[0:4] != b"RIFF" or data[8:12] != b"WAVE":
            raise InvalidWavHeader("Le fichier n'est pas un conteneur RIFF/WAVE valide.")

        (channels,) = struct.unpack_from("<H", data, 22)
        (sample_rate,) = struct.unpack_from("<I", data, 24)
        (bits_per_sample,) = struct.unpack_from("<H", data, 34)
        (data_size,) = struct.unpack_from("<I", data, 40)

        if channels != EXPECTED_CHANNELS:
            raise UnsupportedSampleFormat(
                f"Attendu: Mono (1 canal), Obtenu: {channels} canaux"
            )
        if sample_rate != EXPECTED_SAMPLE_RATE:
            raise UnsupportedSampleFormat(f"Attendu: 48000 Hz, Obtenu: {sample_rate} Hz")
        if bits_per_sample != EXPECTED_BITS_PER_SAMPLE:
            raise UnsupportedSampleFormat(
                f"Attendu: 16-bit PCM, Obtenu: {bits_per_sample}-bit"
            )

        return cls(
            channels=channels,
            sample_rate=sample_rate,
            bits_per_sample=bits_per_sample,
            data_size=data_size,
            raw_bytes=data[:HEADER_SIZE],
        )


def convert_to_samples(raw_data) -> np.ndarray:
    """Decode little-endian 16-bit PCM into floats in [-1, 1); a trailing odd byte is ignored."""
    raw = bytes(raw_data)
    if not raw:
        raise EmptySignal()
    usable = len(raw) - len(raw) % 2
    pcm = np.frombuffer(raw[:usable], dtype="<i2")
    return pcm.astype(np.float32) / np.float32(SAMPLE_NORMALIZER)


def _load_file(path) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as err:
        raise AudioIOError(str(err)) from err


def read_samples(path) -> np.ndarray:
    """Read a WAV file and return its normalised samples."""
    return read_wav(path)[1]


def read_header(path) -> WavHeader:
    """Read and validate only the header of a WAV file."""
    return WavHeader.from_bytes(_load_file(path))


def read_wav(path) -> tuple[WavHeader, np.ndarray]:
    """Read a WAV file and return its header with its normalised samples."""
    buffer = _load_file(path)
    header = WavHeader.from_bytes(buffer)
    return header, convert_to_samples(buffer[HEADER_SIZE:])