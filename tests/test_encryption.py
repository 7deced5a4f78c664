import struct

import numpy as np
import pytest

from stone_analysis.decryption import unmask_message
from stone_analysis.encryption import mask_message, run_encryption, write_to_wav
from stone_analysis.errors import (
    FailedToReadAudio,
    FailedToWriteEncryptedAudio,
    FrequencyOutOfBounds,
)
from stone_analysis.wav import WavHeader, read_wav


def _wav_bytes(pcm):
    data = np.asarray(pcm, dtype="<i2").tobytes()
    header = struct.pack(
        "<4sI4s4sIHHIIHH4sI",
        b"RIFF", 36 + len(data), b"WAVE", b"fmt ", 16, 1, 1, 48000, 96000, 2, 16,
        b"data", len(data),
    )
    return header + data


def _write_wav(path, pcm):
    path.write_bytes(_wav_bytes(pcm))
    return path


def test_write_to_wav_sizes_and_pcm(tmp_path, capsys):
    header = WavHeader.from_bytes(_wav_bytes([0]))
    out = tmp_path / "out.wav"
    write_to_wav([0.0, 0.5, -1.0, 2.0], out, header)
    raw = out.read_bytes()
    assert struct.unpack_from("<I", raw, 4)[0] == 36 + 8
    assert struct.unpack_from("<I", raw, 40)[0] == 8
    assert list(np.frombuffer(raw[44:], dtype="<i2")) == [0, 16383, -32767, 32767]
    assert "Success! Created" in capsys.readouterr().out


def test_write_to_wav_bad_path(tmp_path):
    header = WavHeader.from_bytes(_wav_bytes([0]))
    with pytest.raises(FailedToWriteEncryptedAudio):
        write_to_wav([0.0], tmp_path / "missing" / "out.wav", header)


def test_mask_message_window_count_follows_message(tmp_path):
    source = _write_wav(tmp_path / "in.wav", np.zeros(2048 * 2))
    header, samples = read_wav(source)
    out = tmp_path / "out.wav"
    mask_message(samples, header, out, "HELLO")
    _, written = read_wav(out)
    assert len(written) == 6 * 2048


def test_mask_message_pads_partial_chunk(tmp_path):
    source = _write_wav(tmp_path / "in.wav", np.zeros(3000))
    header, samples = read_wav(source)
    out = tmp_path / "out.wav"
    mask_message(samples, header, out, "")
    _, written = read_wav(out)
    assert len(written) == 2 * 2048


def test_run_encryption_round_trip(tmp_path):
    source = _write_wav(tmp_path / "in.wav", np.zeros(2048 * 4))
    out = tmp_path / "out.wav"
    run_encryption(source, out, "Hello")
    _, samples = read_wav(out)
    assert unmask_message(samples) == "HELLO"


def test_run_encryption_missing_input(tmp_path):
    with pytest.raises(FailedToReadAudio):
        run_encryption(tmp_path / "absent.wav", tmp_path / "out.wav", "hi")


def test_message_too_long_for_window(tmp_path):
    source = _write_wav(tmp_path / "in.wav", np.zeros(2048))
    out = tmp_path / "out.wav"
    with pytest.raises(FrequencyOutOfBounds):
        run_encryption(source, out, "A" * 1200)
    assert not out.exists()