"""3x3 convolution filters for colour images."""

from __future__ import annotations

from enum import Enum
from typing import Union

from .image import Image, Pixel, Selection

Kernel = tuple[tuple[int, int, int], tuple[int, int, int], tuple[int, int, int]]


class Filter(Enum):
    """The available filters: a 3x3 kernel and the divisor of its sum."""

    EDGE = (((-1, -1, -1), (-1, 8, -1), (-1, -1, -1)), 1)
    SHARPEN = (((0, -1, 0), (-1, 5, -1), (0, -1, 0)), 1)
    BLUR = (((1, 1, 1), (1, 1, 1), (1, 1, 1)), 9)
    GAUSSIAN_BLUR = (((1, 2, 1), (2, 4, 2), (1, 2, 1)), 16)

    def __init__(self, kernel: Kernel, divisor: int) -> None:
        self.kernel = kernel
        self.divisor = divisor


def clamp_byte(value: int) -> int:
    """Clamp an integer into the range 0..255."""
    return max(0, min(255, value))


def _truncating_div(value: int, divisor: int) -> int:
    quotient = abs(value) // divisor
    return quotient if value >= 0 else -quotient


def apply_kernel(image: Image, kernel: Filter, row: int, col: int) -> Pixel:
    """Return the filtered value of one pixel.

    Pixels on the image border are returned unchanged.
    """
    if row in (0, image.rows - 1) or col in (0, image.cols - 1):
        return image.pixels[row][col]
    window = [image.pixels[row + dr][col - 1:col + 2] for dr in (-1, 0, 1)]
    channels = []
    for channel in range(3):
        total = sum(
            weight * pixel[channel]
            for kernel_row, pixel_row in zip(kernel.kernel, window)
            for weight, pixel in zip(kernel_row, pixel_row)
        )
        channels.append(clamp_byte(_truncating_div(total, kernel.divisor)))
    return Pixel(*channels)


def apply_filter(
    image: Image, selection: Selection, kernel: Union[Filter, str]
) -> Image:
    """Return a copy of ``image`` with ``kernel`` applied inside ``selection``.

    Raises TypeError for greyscale images and ValueError for an unknown
    filter name.
    """
    if isinstance(kernel, str):
        try:
            kernel = Filter[kernel]
        except KeyError:
            raise ValueError(f"unknown filter {kernel!r}") from None
    if not image.is_color():
        raise TypeError("filters need a colour image")
    result = image.copy()
    for row in range(selection.y_start, selection.y_end):
        result.pixels[row][selection.x_start:selection.x_end] = [
            apply_kernel(image, kernel, row, col)
            for col in range(selection.x_start, selection.x_end)
        ]
    return result