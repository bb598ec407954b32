"""Reading and writing PGM and PPM files in plain and raw encodings."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import Union

from .image import Image, Pixel

PathLike = Union[str, Path]

_ASCII_TO_BINARY = {"P2": "P5", "P3": "P6"}
_BINARY_TO_ASCII = {raw: plain for plain, raw in _ASCII_TO_BINARY.items()}
_WHITESPACE = b" \t\n\r\x0b\x0c"


class NetpbmError(Exception):
    """Raised when an image file cannot be read or written.

    ``unsupported`` is set when the file was readable but its format
    is not one of P2, P3, P5 or P6.
    """

    def __init__(
        self, message: str, path: PathLike | None = None, unsupported: bool = False
    ) -> None:
        super().__init__(message)
        self.path = path
        self.unsupported = unsupported


def ascii_format(fmt: str) -> str:
    """Map a raw format to its plain counterpart; others are unchanged."""
    return _BINARY_TO_ASCII.get(fmt, fmt)


def binary_format(fmt: str) -> str:
    """Map a plain format to its raw counterpart; others are unchanged."""
    return _ASCII_TO_BINARY.get(fmt, fmt)


class _Reader:
    """Cursor over the bytes of an image file."""

    def __init__(self, data: bytes, path: PathLike) -> None:
        self._data = data
        self._pos = 0
        self._path = path

    def token(self) -> bytes:
        data, pos = self._data, self._pos
        while pos < len(data) and data[pos] in _WHITESPACE:
            pos += 1
        start = pos
        while pos < len(data) and data[pos] not in _WHITESPACE:
            pos += 1
        if start == pos:
            raise NetpbmError(f"unexpected end of {self._path}", self._path)
        self._pos = pos
        return data[start:pos]

    def integer(self) -> int:
        tok = self.token()
        try:
            return int(tok)
        except ValueError:
            raise NetpbmError(
                f"expected a number in {self._path}, found {tok!r}", self._path
            ) from None

    def skip_separator(self) -> None:
        if self._pos < len(self._data) and self._data[self._pos] in _WHITESPACE:
            self._pos += 1

    def raw(self, count: int) -> bytes:
        end = self._pos + count
        if end > len(self._data):
            raise NetpbmError(f"pixel data of {self._path} is truncated", self._path)
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk


def _chunks(items: Sequence, size: int) -> Iterator[list]:
    for start in range(0, len(items), size):
        yield list(items[start:start + size])


def _read_header(reader: _Reader, path: PathLike) -> tuple[int, int, int]:
    cols = reader.integer()
    rows = reader.integer()
    maxval = reader.integer()
    if cols < 0 or rows < 0:
        raise NetpbmError(f"invalid dimensions in {path}", path)
    return cols, rows, maxval


def _read_plain(reader: _Reader, fmt: str, path: PathLike) -> Image:
    cols, rows, maxval = _read_header(reader, path)
    if fmt == "P2":
        pixels = [
            [reader.integer() & 0xFF for _ in range(cols)] for _ in range(rows)
        ]
    else:
        pixels = [
            [
                Pixel(*(reader.integer() & 0xFF for _ in range(3)))
                for _ in range(cols)
            ]
            for _ in range(rows)
        ]
    return Image(fmt, cols, rows, maxval, pixels)


def _read_raw(reader: _Reader, fmt: str, path: PathLike) -> Image:
    cols, rows, maxval = _read_header(reader, path)
    reader.skip_separator()
    if fmt == "P5":
        body = reader.raw(rows * cols)
        samples: list = list(body)
    else:
        body = reader.raw(rows * cols * 3)
        channels = iter(body)
        samples = [Pixel(r, g, b) for r, g, b in zip(channels, channels, channels)]
    pixels = list(_chunks(samples, cols)) if cols else [[] for _ in range(rows)]
    return Image(fmt, cols, rows, maxval, pixels)


def read_image(path: PathLike) -> Image:
    """Load a P2, P3, P5 or P6 image from ``path``."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise NetpbmError(f"cannot open {path}", path) from exc
    reader = _Reader(data, path)
    try:
        fmt = reader.token().decode("latin-1")
    except NetpbmError:
        raise NetpbmError(f"{path} has no format marker", path) from None
    if fmt in ("P2", "P3"):
        return _read_plain(reader, fmt, path)
    if fmt in ("P5", "P6"):
        return _read_raw(reader, fmt, path)
    raise NetpbmError(f"unsupported format {fmt!r} in {path}", path, unsupported=True)


def _plain_body(image: Image, fmt: str) -> str:
    if fmt == "P2":
        lines = ("".join(f"{value} " for value in row) for row in image.pixels)
    elif fmt == "P3":
        lines = (
            "".join(f"{p.r} {p.g} {p.b} " for p in row) for row in image.pixels
        )
    else:
        return ""
    return "".join(f"{line}\n" for line in lines)


def _raw_body(image: Image, fmt: str) -> bytes:
    if fmt == "P5":
        return bytes(value for row in image.pixels for value in row)
    if fmt == "P6":
        return bytes(
            channel for row in image.pixels for pixel in row for channel in pixel
        )
    return b""


def write_image(image: Image, path: PathLike, ascii: bool = False) -> str:
    """Write ``image`` to ``path`` in plain or raw encoding.

    Returns the format marker that was written.
    """
    fmt = ascii_format(image.format) if ascii else binary_format(image.format)
    header = f"{fmt}\n{image.cols} {image.rows}\n{image.maxval}\n"
    try:
        if ascii:
            Path(path).write_text(header + _plain_body(image, fmt), encoding="ascii")
        else:
            Path(path).write_bytes(header.encode("ascii") + _raw_body(image, fmt))
    except OSError as exc:
        raise NetpbmError(f"cannot write {path}", path) from exc
    return fmt