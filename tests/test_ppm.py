import pytest

from rayforge.color import Color
from rayforge.ppm import format_ppm, write_ppm


def test_format_small_image():
    image = [[Color(1, 2, 3), Color(4, 5, 6)]]
    assert format_ppm(image) == "P3\n2 1\n255\n1 2 3 4 5 6 \n"


def test_format_empty_image():
    assert format_ppm([]) == "P3\n0 0\n255\n"


def test_header_and_token_count():
    image = [[Color(r, g, 7) for r in range(3)] for g in range(2)]
    lines = format_ppm(image).splitlines()
    assert lines[:3] == ["P3", "3 2", "255"]
    tokens = " ".join(lines[3:]).split()
    assert len(tokens) == 3 * 3 * 2
    assert len(lines) == 3 + 2


def test_pixels_appear_in_row_order():
    image = [[Color(9, 8, 7)], [Color(6, 5, 4)]]
    body = format_ppm(image).splitlines()[3:]
    assert [list(map(int, line.split())) for line in body] == [[9, 8, 7], [6, 5, 4]]


def test_write_round_trip(tmp_path):
    image = [[Color(10, 20, 30), Color(40, 50, 60)], [Color(0, 0, 0), Color(255, 255, 255)]]
    target = tmp_path / "out.ppm"
    write_ppm(target, image)
    assert target.read_text(encoding="ascii") == format_ppm(image)


def test_write_to_directory_fails(tmp_path):
    with pytest.raises(OSError):
        write_ppm(tmp_path, [[Color(1, 1, 1)]])


def test_write_to_missing_directory_fails(tmp_path):
    with pytest.raises(FileNotFoundError):
        write_ppm(tmp_path / "missing" / "out.ppm", [[Color(1, 1, 1)]])