"""Line-oriented command interpreter for editing PGM and PPM images."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable
from typing import Optional

from .filters import Filter, apply_filter
from .histogram import equalize, histogram, render_histogram
from .image import Image, Selection, full_selection
from .netpbm import NetpbmError, read_image, write_image
from .region import SelectionError, crop, parse_selection
from .rotate import rotate_square, rotate_whole

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_NO_IMAGE = "No image loaded"
_INVALID = "Invalid command"


def _to_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


class Editor:
    """Holds the loaded image and current selection and runs commands."""

    def __init__(self) -> None:
        self.image: Optional[Image] = None
        self.selection = Selection()
        self.finished = False

    def execute(self, line: str) -> list[str]:
        """Run one command line and return the messages it produces."""
        tokens = line.split()
        if not tokens:
            return [_INVALID]
        command, args = tokens[0], tokens[1:]
        handler = {
            "LOAD": self._load,
            "SAVE": self._save,
            "EXIT": self._exit,
            "SELECT": self._select,
            "ROTATE": self._rotate,
            "EQUALIZE": self._equalize,
            "CROP": self._crop,
            "APPLY": self._apply,
            "HISTOGRAM": self._histogram,
        }.get(command)
        if handler is None:
            return [_INVALID]
        return handler(args)

    def run(self, lines: Iterable[str]) -> list[str]:
        """Run commands until EXIT or the end of input; return all messages."""
        output: list[str] = []
        for line in lines:
            output.extend(self.execute(line))
            if self.finished:
                break
        return output

    def _load(self, args: list[str]) -> list[str]:
        if not args:
            return [_INVALID]
        path = args[0]
        try:
            image = read_image(path)
        except NetpbmError as exc:
            self.image = None
            if exc.unsupported:
                return []
            self.selection = Selection()
            return [f"Failed to load {path}"]
        self.image = image
        self.selection = full_selection(image)
        return [f"Loaded {path}"]

    def _save(self, args: list[str]) -> list[str]:
        if self.image is None:
            return [_NO_IMAGE]
        if not args:
            return ["Failed to save new file"]
        path = args[0]
        mode = args[1] if len(args) > 1 else None
        if mode is None or mode == "ascii":
            try:
                self.image.format = write_image(
                    self.image, path, ascii=mode == "ascii"
                )
            except NetpbmError:
                return ["Failed to save new file"]
        return [f"Saved {path}"]

    def _exit(self, args: list[str]) -> list[str]:
        self.finished = True
        messages = [_NO_IMAGE] if self.image is None else []
        self.image = None
        return messages

    def _select(self, args: list[str]) -> list[str]:
        if self.image is None:
            return [_NO_IMAGE]
        try:
            selection = parse_selection(args, self.image)
        except SelectionError as exc:
            return [str(exc)]
        self.selection = selection
        if args[0] == "ALL":
            return ["Selected ALL"]
        s = selection
        return [f"Selected {s.x_start} {s.y_start} {s.x_end} {s.y_end}"]

    def _rotate(self, args: list[str]) -> list[str]:
        if self.image is None:
            return [_NO_IMAGE]
        if not args:
            return [_INVALID]
        degrees = _to_int(args[0])
        if degrees % 90 != 0:
            return ["Unsupported rotation angle"]
        if degrees % 360 == 0:
            return [f"Rotated {degrees}"]
        if self.selection.whole:
            self.image = rotate_whole(self.image, degrees)
            self.selection = full_selection(self.image)
        else:
            try:
                self.image = rotate_square(self.image, self.selection, degrees)
            except ValueError as exc:
                return [str(exc)]
        return [f"Rotated {degrees}"]

    def _equalize(self, args: list[str]) -> list[str]:
        if self.image is None:
            return [_NO_IMAGE]
        if self.image.is_color():
            return ["Black and white image needed"]
        self.image = equalize(self.image)
        return ["Equalize done"]

    def _crop(self, args: list[str]) -> list[str]:
        if self.image is None:
            return [_NO_IMAGE]
        self.image = crop(self.image, self.selection)
        self.selection = full_selection(self.image)
        return ["Image cropped"]

    def _apply(self, args: list[str]) -> list[str]:
        if self.image is None:
            return [_NO_IMAGE]
        if not args:
            return [_INVALID]
        if not self.image.is_color():
            return ["Easy, Charlie Chaplin"]
        name = args[0]
        if name not in Filter.__members__:
            return ["APPLY parameter invalid"]
        self.image = apply_filter(self.image, self.selection, Filter[name])
        return [f"APPLY {name} done"]

    def _histogram(self, args: list[str]) -> list[str]:
        if self.image is None:
            return [_NO_IMAGE]
        if len(args) < 2:
            return [_INVALID]
        max_stars, bins = _to_int(args[0]), _to_int(args[1])
        try:
            counts = histogram(self.image, max_stars, bins)
        except ValueError:
            return ["Invalid set of parameters"]
        except TypeError:
            return ["Black and white image needed"]
        if not counts:
            return ["Image contains no data"]
        return render_histogram(counts)


def main(argv: Optional[list[str]] = None) -> int:
    """Read commands from a script file or standard input and run them."""
    parser = argparse.ArgumentParser(
        prog="netpbm-editor", description="Edit PGM and PPM images with commands."
    )
    parser.add_argument("script", nargs="?", help="file of commands (default: stdin)")
    options = parser.parse_args(argv)
    editor = Editor()
    if options.script:
        with open(options.script, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    else:
        lines = (line.rstrip("\n") for line in sys.stdin)
    for message in editor.run(lines):
        print(message)
    return 0


if __name__ == "__main__":
    sys.exit(main())