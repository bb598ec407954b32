import pytest

from netpbm_editor.image import Image, Pixel
from netpbm_editor.netpbm import (
    NetpbmError,
    ascii_format,
    binary_format,
    read_image,
    write_image,
)


def _grey(fmt="P2"):
    return Image(fmt, 3, 2, 255, [[0, 128, 255], [10, 32, 7]])


def _color(fmt="P3"):
    return Image(
        fmt,
        2,
        2,
        255,
        [
            [Pixel(10, 20, 30), Pixel(0, 0, 0)],
            [Pixel(255, 254, 253), Pixel(32, 9, 13)],
        ],
    )


@pytest.mark.parametrize(
    "fmt, expected", [("P5", "P2"), ("P6", "P3"), ("P2", "P2"), ("P3", "P3")]
)
def test_ascii_format(fmt, expected):
    assert ascii_format(fmt) == expected


@pytest.mark.parametrize(
    "fmt, expected", [("P2", "P5"), ("P3", "P6"), ("P5", "P5"), ("P6", "P6")]
)
def test_binary_format(fmt, expected):
    assert binary_format(fmt) == expected


@pytest.mark.parametrize("ascii", [True, False])
def test_greyscale_round_trip(tmp_path, ascii):
    path = tmp_path / "grey.pgm"
    image = _grey()
    write_image(image, path, ascii)
    loaded = read_image(path)
    assert loaded.pixels == image.pixels
    assert (loaded.cols, loaded.rows, loaded.maxval) == (3, 2, 255)
    assert loaded.format == (ascii_format("P5") if ascii else binary_format("P2"))


@pytest.mark.parametrize("ascii", [True, False])
def test_color_round_trip(tmp_path, ascii):
    path = tmp_path / "color.ppm"
    image = _color()
    write_image(image, path, ascii)
    loaded = read_image(path)
    assert loaded.pixels == image.pixels
    assert loaded.is_color()


def test_binary_output_bytes(tmp_path):
    path = tmp_path / "out.pgm"
    image = Image("P2", 2, 1, 255, [[0, 255]])
    assert write_image(image, path, False) == "P5"
    assert path.read_bytes() == b"P5\n2 1\n255\n\x00\xff"


def test_ascii_output_text(tmp_path):
    path = tmp_path / "out.pgm"
    image = Image("P5", 2, 1, 255, [[0, 255]])
    assert write_image(image, path, True) == "P2"
    assert path.read_text() == "P2\n2 1\n255\n0 255 \n"


def test_color_ascii_header_converted(tmp_path):
    path = tmp_path / "out.ppm"
    write_image(_color("P6"), path, True)
    assert path.read_text().splitlines()[0] == "P3"


def test_write_leaves_image_unchanged(tmp_path):
    image = _grey()
    write_image(image, tmp_path / "x.pgm", False)
    assert image == _grey()


def test_raw_pixel_that_looks_like_whitespace(tmp_path):
    path = tmp_path / "ws.pgm"
    path.write_bytes(b"P5\n2 1\n255\n\n ")
    assert read_image(path).pixels == [[10, 32]]


def test_plain_values_wrap_to_a_byte(tmp_path):
    path = tmp_path / "wrap.pgm"
    path.write_text("P2\n1 1\n255\n300\n")
    assert read_image(path).pixels == [[44]]


def test_plain_values_any_whitespace_layout(tmp_path):
    path = tmp_path / "layout.ppm"
    path.write_text("P3 1 1\n255 1\n2\t3")
    assert read_image(path).pixels == [[Pixel(1, 2, 3)]]


def test_missing_file(tmp_path):
    path = tmp_path / "absent.pgm"
    with pytest.raises(NetpbmError) as info:
        read_image(path)
    assert info.value.path == path
    assert info.value.unsupported is False


def test_empty_file(tmp_path):
    path = tmp_path / "empty.pgm"
    path.write_bytes(b"")
    with pytest.raises(NetpbmError):
        read_image(path)


@pytest.mark.parametrize("marker", ["P1", "P4", "XYZ"])
def test_unsupported_format(tmp_path, marker):
    path = tmp_path / "other.pbm"
    path.write_text(f"{marker}\n1 1\n1\n")
    with pytest.raises(NetpbmError) as info:
        read_image(path)
    assert info.value.unsupported is True


def test_truncated_raw_data(tmp_path):
    path = tmp_path / "short.ppm"
    path.write_bytes(b"P6\n2 1\n255\n\x01\x02\x03")
    with pytest.raises(NetpbmError):
        read_image(path)


def test_truncated_plain_data(tmp_path):
    path = tmp_path / "short.pgm"
    path.write_text("P2\n2 2\n255\n1 2 3\n")
    with pytest.raises(NetpbmError):
        read_image(path)


def test_non_numeric_header(tmp_path):
    path = tmp_path / "bad.pgm"
    path.write_text("P2\nwide 2\n255\n")
    with pytest.raises(NetpbmError):
        read_image(path)


def test_write_to_missing_directory(tmp_path):
    with pytest.raises(NetpbmError):
        write_image(_grey(), tmp_path / "nope" / "x.pgm", False)