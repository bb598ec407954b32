"""In-memory image, pixel and selection types."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import NamedTuple, Union

_COLOR_FORMATS = frozenset({"P3", "P6"})


class Pixel(NamedTuple):
    """An RGB pixel with 8-bit channels."""

    r: int
    g: int
    b: int


Sample = Union[int, Pixel]


@dataclass
class Image:
    """A greyscale or colour raster.

    ``pixels`` is a list of rows; greyscale rows hold ints in 0..255,
    colour rows hold :class:`Pixel` values.
    """

    format: str
    cols: int
    rows: int
    maxval: int
    pixels: list[list[Sample]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.cols < 0 or self.rows < 0:
            raise ValueError("image dimensions must not be negative")
        if len(self.pixels) != self.rows or any(
            len(row) != self.cols for row in self.pixels
        ):
            raise ValueError(
                f"pixel data does not match dimensions {self.cols}x{self.rows}"
            )

    def copy(self) -> Image:
        """Return an independent copy of the image."""
        return replace(self, pixels=[list(row) for row in self.pixels])

    def is_color(self) -> bool:
        """True for colour (PPM) images, False for greyscale (PGM) ones."""
        return self.format in _COLOR_FORMATS


@dataclass
class Selection:
    """A half-open rectangle [x_start, x_end) x [y_start, y_end)."""

    x_start: int = 0
    y_start: int = 0
    x_end: int = 0
    y_end: int = 0
    whole: bool = False

    def covers(self, image: Image) -> bool:
        """True if the rectangle spans the entire image."""
        return (
            self.x_start == 0
            and self.y_start == 0
            and self.x_end == image.cols
            and self.y_end == image.rows
        )


def full_selection(image: Image) -> Selection:
    """Return a selection of the whole image."""
    return Selection(0, 0, image.cols, image.rows, whole=True)