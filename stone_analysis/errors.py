"""Exception hierarchy for the audio, steganography and command-line layers."""

from __future__ import annotations


def _format_float(value: float) -> str:
    """Render a float the way a plain number is shown to users: no trailing '.0'."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


class AudioError(Exception):
    """Base class for failures of the audio pipeline."""


class FileNotFoundAudioError(AudioError):
    """The audio file does not exist."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Fichier audio introuvable : {path}")


class InvalidWavHeader(AudioError):
    """The WAV header is truncated or is not a RIFF/WAVE container."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Header WAV corrompu : {detail}")


class UnsupportedSampleFormat(AudioError):
    """The WAV file uses a channel count, rate or depth that is not handled."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Format d'échantillon non supporté : {detail}")


class DftLengthMismatch(AudioError):
    """A transform received a buffer of the wrong size."""

    def __init__(self, expected: int, got: int) -> None:
        self.expected = expected
        self.got = got
        super().__init__(f"Taille DFT incorrecte (Attendu: {expected}, Obtenu: {got})")


class AudioIOError(AudioError):
    """An operating-system error occurred while reading audio."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Erreur système d'E/S : {detail}")


class EmptySignal(AudioError):
    """The audio signal holds no usable samples."""

    def __init__(self) -> None:
        super().__init__("Le signal audio fourni est vide")


class StegoError(Exception):
    """Base class for failures of hiding or recovering a message."""


class PayloadTooLarge(StegoError):
    """The message does not fit in the carrier file."""

    def __init__(self, max_bytes: int, requested: int) -> None:
        self.max_bytes = max_bytes
        self.requested = requested
        super().__init__(
            "Le message est trop grand pour ce WAV "
            f"(Max: {max_bytes} octets, Demandé: {requested})"
        )


class NoPayloadFound(StegoError):
    """No hidden message was detected."""

    def __init__(self) -> None:
        super().__init__("Aucun message caché détecté dans ce fichier")


class CorruptedMagicBytes(StegoError):
    """The steganography signature is invalid."""

    def __init__(self) -> None:
        super().__init__("Signature de stéganographie invalide")


class FrequencyOutOfBounds(StegoError):
    """A target frequency falls outside the analysis window."""

    def __init__(self, hz_rate: float) -> None:
        self.hz_rate = hz_rate
        super().__init__(
            f"Warning: Frequency {_format_float(hz_rate)} Hz is out of bounds for window size"
        )


class FailedToWriteEncryptedAudio(StegoError):
    """Writing the carrier file failed."""

    def __init__(self, details: str) -> None:
        self.details = details
        super().__init__(f"Failed to write encrypted audio: {details}")


class FailedToReadAudio(StegoError):
    """Reading the carrier file failed."""

    def __init__(self, details: str) -> None:
        self.details = details
        super().__init__(f"Failed to read audio: {details}")


class FailedToDecodeMessage(StegoError):
    """The recovered bytes do not form a valid message."""

    def __init__(self, details: str) -> None:
        self.details = details
        super().__init__(f"Failed to decode message: {details}")


class CliError(Exception):
    """Base class for command-line usage errors."""


class BadArgument(CliError):
    """An argument is unknown or malformed."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Argument invalide : {detail}")


class MissingRequiredOption(CliError):
    """A required argument or option value is missing."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Option manquante obligatoire : {detail}")