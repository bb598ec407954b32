"""Rotating a square selection or the whole image by multiples of 90 degrees."""

from __future__ import annotations

from .image import Image, Selection

_TURNS = {90: 1, 180: 2, 270: 3, -90: 3, -180: 2, -270: 1}


def quarter_turns(degrees: int) -> int:
    """Number of clockwise quarter turns for an angle.

    Only +/-90, +/-180 and +/-270 rotate; any other angle gives 0.
    """
    return _TURNS.get(degrees, 0)


def rotate_square_90(image: Image, selection: Selection) -> Image:
    """Return a copy with the square ``selection`` turned 90 degrees clockwise.

    Raises ValueError if the selection is not square.
    """
    xs, ys, xe, ye = (
        selection.x_start,
        selection.y_start,
        selection.x_end,
        selection.y_end,
    )
    if xe - xs != ye - ys:
        raise ValueError("The selection must be square")
    block = [row[xs:xe] for row in image.pixels[ys:ye]]
    turned = [list(column) for column in zip(*reversed(block))]
    result = image.copy()
    for offset, row in enumerate(turned):
        result.pixels[ys + offset][xs:xe] = row
    return result


def rotate_square(image: Image, selection: Selection, degrees: int) -> Image:
    """Return a copy with the square ``selection`` rotated by ``degrees``."""
    for _ in range(quarter_turns(degrees)):
        image = rotate_square_90(image, selection)
    return image


def rotate_whole_90(image: Image) -> Image:
    """Return the whole image turned 90 degrees clockwise."""
    if image.rows:
        pixels = [list(column) for column in zip(*reversed(image.pixels))]
    else:
        pixels = [[] for _ in range(image.cols)]
    return Image(image.format, image.rows, image.cols, image.maxval, pixels)


def rotate_whole(image: Image, degrees: int) -> Image:
    """Return the whole image rotated by ``degrees``."""
    for _ in range(quarter_turns(degrees)):
        image = rotate_whole_90(image)
    return image