# netpbm-editor

A small command-driven editor for Netpbm images. It reads greyscale (PGM,
`P2` plain / `P5` raw) and colour (PPM, `P3` plain / `P6` raw) files, edits
them in memory and writes them back in plain-text or raw form.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Usage

The `netpbm-editor` command reads commands, one per line, either from a
script file given as its only argument or from standard input:

```
netpbm-editor commands.txt
netpbm-editor < commands.txt
```

Each command prints short status lines, such as `Loaded photo.ppm` or
`Invalid command`. Processing stops at `EXIT` or at the end of the input.

| Command | Effect |
| --- | --- |
| `LOAD <file>` | Load a PGM or PPM image; the whole image becomes the selection |
| `SELECT ALL` | Select the whole image |
| `SELECT <x1> <y1> <x2> <y2>` | Select a rectangle; the corners may come in either order. An invalid rectangle keeps the previous selection |
| `CROP` | Keep only the selected region; it then becomes the whole selection |
| `ROTATE <angle>` | Rotate by ±90, ±180 or ±270 degrees: the whole image when everything is selected, otherwise a square selection. Multiples of 360 leave the image as it is |
| `APPLY <filter>` | Apply `EDGE`, `SHARPEN`, `BLUR` or `GAUSSIAN_BLUR` to the selection of a colour image; border pixels of the image stay unchanged |
| `EQUALIZE` | Equalize the histogram of a greyscale image |
| `HISTOGRAM <stars> <bins>` | Print a star histogram of a greyscale image; `bins` must be an even number from 2 to 256 |
| `SAVE <file> [ascii]` | Save the image: raw by default, plain text when `ascii` is given. The image keeps the format it was saved in |
| `EXIT` | Release the image and stop |

Example session:

```
LOAD photo.ppm
SELECT 10 10 110 110
APPLY GAUSSIAN_BLUR
SELECT ALL
ROTATE 90
SAVE rotated.ppm ascii
EXIT
```

## Using it from Python

Images are `Image` dataclasses (`netpbm_editor.image`) holding a list of
rows: ints for greyscale images, `Pixel(r, g, b)` tuples for colour ones. A
`Selection` is a half-open rectangle; `full_selection(image)` covers it all.
The editing functions return new images rather than changing their input.

```python
from netpbm_editor.netpbm import read_image, write_image
from netpbm_editor.image import full_selection
from netpbm_editor.filters import Filter, apply_filter
from netpbm_editor.rotate import rotate_whole

image = read_image("photo.ppm")
image = apply_filter(image, full_selection(image), Filter.BLUR)
image = rotate_whole(image, 90)
write_image(image, "out.ppm", ascii=False)
```

The modules:

- `netpbm_editor.netpbm`: `read_image`, `write_image`, `ascii_format`,
  `binary_format`; errors are raised as `NetpbmError`.
- `netpbm_editor.region`: `parse_selection`, `check_selection`, `crop`;
  bad selections raise `SelectionError`.
- `netpbm_editor.filters`: the `Filter` enum, `apply_filter`, `apply_kernel`.
- `netpbm_editor.histogram`: `histogram`, `render_histogram`, `equalize`.
- `netpbm_editor.rotate`: `rotate_whole`, `rotate_square` and their
  single quarter-turn forms.
- `netpbm_editor.editor`: the `Editor` class runs the same commands as the
  console program. `Editor.execute(line)` handles one command line and
  returns its messages; `Editor.run(lines)` handles a sequence of them.

## Limitations

- Only `P2`, `P3`, `P5` and `P6` files are read; bitmap files (`P1`, `P4`)
  are not supported. Samples are stored as 8-bit values.
- A partial selection can only be rotated when it is square.
- Filters work on colour images only; histogram and equalization work on
  greyscale images only.