"""Selecting and cropping rectangular regions."""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Optional

from .image import Image, Selection, full_selection

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class SelectionError(ValueError):
    """Raised for a bad SELECT request.

    ``malformed`` is True when the arguments themselves are wrong, and
    False when they are well formed but the coordinates are invalid.
    """

    def __init__(self, message: str, malformed: bool = False) -> None:
        super().__init__(message)
        self.malformed = malformed


def has_letters(text: Optional[str]) -> bool:
    """True if ``text`` contains an ASCII letter."""
    if text is None:
        return False
    return any(("A" <= ch <= "Z") or ("a" <= ch <= "z") for ch in text)


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def check_selection(
    image: Image, x_start: int, y_start: int, x_end: int, y_end: int
) -> Selection:
    """Normalise corner order and validate the rectangle against ``image``."""
    x_start, x_end = sorted((x_start, x_end))
    y_start, y_end = sorted((y_start, y_end))
    if (
        x_end > image.cols
        or y_end > image.rows
        or x_start < 0
        or y_start < 0
        or x_start == x_end
        or y_start == y_end
    ):
        raise SelectionError("Invalid set of coordinates")
    selection = Selection(x_start, y_start, x_end, y_end)
    selection.whole = selection.covers(image)
    return selection


def parse_selection(tokens: Sequence[str], image: Image) -> Selection:
    """Build a selection from the arguments of a SELECT command."""
    if not tokens:
        raise SelectionError("Invalid command", malformed=True)
    if tokens[0] == "ALL":
        return full_selection(image)
    if len(tokens) < 3:
        raise SelectionError("Invalid command", malformed=True)
    coords = list(tokens[:4])
    if any(has_letters(tok) for tok in coords):
        raise SelectionError("Invalid command", malformed=True)
    if len(tokens) != 4:
        raise SelectionError("Invalid command", malformed=True)
    x_start, y_start, x_end, y_end = (_leading_int(tok) for tok in coords)
    return check_selection(image, x_start, y_start, x_end, y_end)


def crop(image: Image, selection: Selection) -> Image:
    """Return a new image holding only the selected rectangle."""
    pixels = [
        list(row[selection.x_start:selection.x_end])
        for row in image.pixels[selection.y_start:selection.y_end]
    ]
    return Image(
        image.format,
        selection.x_end - selection.x_start,
        selection.y_end - selection.y_start,
        image.maxval,
        pixels,
    )