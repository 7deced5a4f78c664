import pytest

from stone_analysis.color import Rgb
from stone_analysis.errors import EmptySignal
from stone_analysis.ppm import PpmWriter

RED = Rgb(255, 0, 0)
BLUE = Rgb(0, 0, 255)


def test_new_image_is_filled_with_background():
    writer = PpmWriter(3, 2, BLUE)
    assert writer.pixels == [BLUE] * 6


def test_set_changes_one_pixel():
    writer = PpmWriter(3, 2, BLUE)
    writer.set(2, 1, RED)
    assert writer.pixels[5] == RED
    assert writer.pixels.count(BLUE) == 5


def test_set_ignores_out_of_bounds():
    writer = PpmWriter(3, 2, BLUE)
    writer.set(3, 0, RED)
    writer.set(0, 2, RED)
    writer.set(-1, 0, RED)
    assert writer.pixels == [BLUE] * 6


def test_save_writes_p6(tmp_path):
    writer = PpmWriter(2, 1, BLUE)
    writer.set(1, 0, RED)
    out = tmp_path / "img.ppm"
    writer.save(out)
    assert out.read_bytes() == b"P6\n2 1\n255\n" + bytes(BLUE) + bytes(RED)


def test_save_to_bad_path(tmp_path):
    with pytest.raises(EmptySignal):
        PpmWriter(1, 1).save(tmp_path / "missing" / "img.ppm")