import pytest

from netpbm_editor.image import Image, Pixel, Selection
from netpbm_editor.rotate import (
    quarter_turns,
    rotate_square,
    rotate_square_90,
    rotate_whole,
    rotate_whole_90,
)


def _grey(rows):
    return Image("P2", len(rows[0]) if rows else 0, len(rows), 255, rows)


@pytest.mark.parametrize(
    "degrees, turns",
    [(90, 1), (180, 2), (270, 3), (-90, 3), (-180, 2), (-270, 1), (450, 0), (0, 0)],
)
def test_quarter_turns(degrees, turns):
    assert quarter_turns(degrees) == turns


def test_rotate_whole_90_worked_example():
    image = _grey([[1, 2, 3], [4, 5, 6]])
    rotated = rotate_whole_90(image)
    assert (rotated.cols, rotated.rows) == (2, 3)
    assert rotated.pixels == [[4, 1], [5, 2], [6, 3]]


def test_rotate_whole_does_not_modify_input():
    image = _grey([[1, 2, 3], [4, 5, 6]])
    rotate_whole(image, 90)
    assert image.pixels == [[1, 2, 3], [4, 5, 6]]


def test_rotate_whole_full_circle_is_identity():
    image = _grey([[1, 2, 3], [4, 5, 6]])
    result = image
    for _ in range(4):
        result = rotate_whole_90(result)
    assert result == image


def test_rotate_whole_opposite_angles_cancel():
    image = _grey([[1, 2, 3], [4, 5, 6]])
    assert rotate_whole(rotate_whole(image, 90), -90) == image
    assert rotate_whole(rotate_whole(image, 270), -270) == image


def test_rotate_whole_180_reverses_everything():
    image = _grey([[1, 2, 3], [4, 5, 6]])
    rotated = rotate_whole(image, -180)
    assert rotated.pixels == [list(reversed(r)) for r in reversed(image.pixels)]


def test_rotate_whole_unsupported_angle_is_noop():
    image = _grey([[1, 2], [3, 4]])
    assert rotate_whole(image, 450) == image


def test_rotate_whole_colour_keeps_pixels():
    image = Image("P3", 2, 1, 255, [[Pixel(1, 2, 3), Pixel(4, 5, 6)]])
    rotated = rotate_whole_90(image)
    assert rotated.pixels == [[Pixel(1, 2, 3)], [Pixel(4, 5, 6)]]
    assert rotated.format == "P3"


def test_rotate_square_matches_whole_on_full_square():
    image = _grey([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    selection = Selection(0, 0, 3, 3)
    assert rotate_square_90(image, selection) == rotate_whole_90(image)


def test_rotate_square_only_touches_selection():
    image = _grey([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    selection = Selection(1, 1, 3, 3)
    rotated = rotate_square_90(image, selection)
    assert rotated.pixels[0] == [1, 2, 3]
    assert [row[0] for row in rotated.pixels] == [1, 4, 7]
    block = [row[1:] for row in rotated.pixels[1:]]
    expected = rotate_whole_90(_grey([[5, 6], [8, 9]])).pixels
    assert block == expected


def test_rotate_square_full_circle():
    image = _grey([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    selection = Selection(0, 1, 2, 3)
    result = rotate_square(rotate_square(image, selection, 180), selection, -180)
    assert result == image


def test_rotate_square_non_square_raises():
    image = _grey([[1, 2, 3], [4, 5, 6]])
    with pytest.raises(ValueError):
        rotate_square(image, Selection(0, 0, 3, 2), 90)