"""Rendering a height map as an isometric wireframe picture."""

from __future__ import annotations

import sys

from wireframe.drawing import draw_map
from wireframe.image import Image
from wireframe.isometric import WIN_HEIGHT, WIN_WIDTH, isometric
from wireframe.parsing import Map, MapError, load_map


def render(grid_map: Map, width=WIN_WIDTH, height=WIN_HEIGHT) -> Image:
    """Project ``grid_map`` and draw its wireframe into a new image."""
    isometric(grid_map)
    image = Image(width, height)
    draw_map(image, grid_map)
    return image


def _ppm_bytes(image: Image) -> bytes:
    if (
        image.bits_per_pixel == 32
        and image.endian == 0
        and image.line_length == image.width * 4
    ):
        header = f"P6\n{image.width} {image.height}\n255\n".encode("ascii")
        data = image.data
        body = bytearray(image.width * image.height * 3)
        body[0::3] = data[2::4]
        body[1::3] = data[1::4]
        body[2::3] = data[0::4]
        return header + bytes(body)
    return image.to_ppm()


def main(argv=None) -> int:
    """Render the map named on the command line and write it to stdout as PPM."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("usage: wireframe MAP", file=sys.stderr)
        return 1
    try:
        grid_map = load_map(args[0])
    except MapError as exc:
        print(f"wireframe: {exc}", file=sys.stderr)
        return 1
    image = render(grid_map)
    out = sys.stdout.buffer
    out.write(_ppm_bytes(image))
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())