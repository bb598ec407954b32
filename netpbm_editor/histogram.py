"""Histogram and histogram equalisation for greyscale images."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import accumulate

from .image import Image


def _frequencies(image: Image) -> list[int]:
    counts = Counter(value for row in image.pixels for value in row)
    return [counts.get(value, 0) for value in range(256)]


def histogram(image: Image, max_stars: int, bins: int) -> list[int]:
    """Return the number of stars for each of ``bins`` bins.

    ``bins`` must be even and in 1..256. An empty image gives an empty
    list. Raises ValueError for bad parameters and TypeError for colour
    images.
    """
    if bins % 2 != 0 or bins > 256 or bins <= 0:
        raise ValueError("Invalid set of parameters")
    if image.is_color():
        raise TypeError("histogram needs a greyscale image")
    freq = _frequencies(image)
    width = 256 // bins
    totals = [sum(freq[i * width:(i + 1) * width]) for i in range(bins)]
    largest = max(totals)
    if largest == 0:
        return []
    return [total * max_stars // largest for total in totals]


def render_histogram(counts: Sequence[int]) -> list[str]:
    """Render star counts as text lines."""
    return [f"{stars}\t|\t{'*' * stars}" for stars in counts]


def clamp_round(value: float) -> int:
    """Clamp into 0..255 and round half up."""
    return int(max(0.0, min(255.0, value)) + 0.5)


def equalize(image: Image) -> Image:
    """Return a histogram-equalised copy of a greyscale image."""
    if image.is_color():
        raise TypeError("equalize needs a greyscale image")
    result = image.copy()
    area = float(image.rows * image.cols)
    if area == 0:
        return result
    cumulative = list(accumulate(float(f) for f in _frequencies(image)))
    result.pixels = [
        [clamp_round(255 * (1 / area) * cumulative[value]) for value in row]
        for row in image.pixels
    ]
    return result