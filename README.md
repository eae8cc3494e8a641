# wireframe

Turns a height-map file into an isometric wireframe picture. The picture is
written as a binary PPM.

## Map format

A map is a plain text file. Each line is one row of the grid. A line holds
heights separated by spaces. A height can carry a colour after a comma. The
colour is hexadecimal, with or without a `0x` prefix, and at most eight
characters of it are read:

```
0 0 0 0
0 5 5,0xFF0000 0
0 0 0 0
```

- The grid width is the number of values on the first line.
- A line with fewer values than that raises `MapError`.
- Values past the width are ignored.
- Points without a colour are white (`0xFFFFFF`).
- A value with a comma but no height or no colour takes the height and colour
  of the point read before it.

Each point is projected isometrically onto a 3800×2000 canvas, with the grid
origin at the centre. Neighbouring points are joined by Bresenham lines: the
horizontal edges first, then the vertical ones. Along each line the colour
blends from one end to the other. Parts of a line that fall outside the image
are skipped.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
wireframe path/to/map.fdf > map.ppm
```

The command loads the map, renders it at 3800×2000 and writes the PPM to
standard output. It exits with status 1 and a message on standard error in
two cases: when it is not given exactly one argument, or when the map cannot
be read.

## Library use

```python
from wireframe.parsing import load_map
from wireframe.app import render

grid_map = load_map("map.fdf")
image = render(grid_map)  # width and height default to 3800 and 2000
with open("map.ppm", "wb") as handle:
    handle.write(image.to_ppm())
```

`render` projects the map in place. The projection always centres on a
3800×2000 canvas. A smaller `width` and `height` passed to `render` crop
that canvas from its top-left corner; they do not rescale it.

### Modules

- `wireframe.parsing`: the `Pixel` and `Map` dataclasses, with `parse_map`
  for an iterable of lines and `load_map` for a file. A map that cannot be
  read raises `MapError`. The module also holds the helpers `word_count`,
  `char_to_hex`, `atoi_base` and `parse_point`.
- `wireframe.isometric`: `project` sets the window coordinates of one point.
  `isometric` does this for every point of a map.
- `wireframe.drawing`: holds the `Line` class, which has `Line.from_points`
  and `Line.points`. It also holds `gradient`, `draw_line` and `draw_map`.
- `wireframe.app`: `render` and the `main` entry point of the command.
- `wireframe.image`: `Image`, a pixel buffer.
  - Its rows are padded to 32 bits.
  - It supports 8, 16, 24 or 32 bits per pixel.
  - Pixels are stored little-endian (`endian=0`) or big-endian (`endian=1`).
  - `put_pixel` and `get_pixel` raise `IndexError` outside the image.
  - `to_ppm` reads each pixel as `0xRRGGBB`.
- `wireframe.xpm`: loads XPM pictures into an `Image`.
  - `xpm_to_image` takes a list of strings.
  - `xpm_file_to_image` takes a file path.
  - `parse_xpm` is the reader that both use.
  - `str_to_wordtab`, `strip_comments` and `quoted_lines` are helpers.
  - Malformed input raises `XpmError`.
  - Pixels of colour `none` are stored as `0xFF000000`.
- `wireframe.colors`: the X11 colour-name table, through `color_names`.
  `text_rgb` resolves a colour spec: `#RRGGBB`, or a name matched without
  regard to case. Unknown names give 0 and `none` gives -1.
- `wireframe.visual`: `rgb_shifts` derives channel shifts and widths from
  RGB bit masks. `good_color` packs a `0xRRGGBB` colour into a pixel value
  for a visual shallower than 24 bits.

## What it does not do

The package opens no window and shows nothing on screen. It has no key or
mouse handling. The rendered picture exists only as an `Image` in memory or
as the PPM bytes that the command writes.