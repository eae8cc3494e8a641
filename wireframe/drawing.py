"""Drawing map edges as colour-graded Bresenham lines."""

from __future__ import annotations

import struct
from collections.abc import Iterator
from dataclasses import dataclass

from wireframe.image import Image
from wireframe.parsing import Map, Pixel


def _f32(value: float) -> float:
    """Round ``value`` to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


@dataclass(frozen=True)
class Line:
    """A segment from ``a`` to ``b`` with its Bresenham parameters."""

    a: Pixel
    b: Pixel
    dx: int
    dy: int
    err: int
    x_inc: int
    y_inc: int

    @classmethod
    def from_points(cls, a: Pixel, b: Pixel) -> Line:
        """Prepare the line between two points."""
        dx = abs(b.x - a.x)
        dy = abs(b.y - a.y)
        return cls(
            a=a,
            b=b,
            dx=dx,
            dy=dy,
            err=dx - dy,
            x_inc=-1 if a.x >= b.x else 1,
            y_inc=-1 if a.y >= b.y else 1,
        )

    def points(self) -> Iterator[tuple[int, int]]:
        """Yield the (x, y) positions from ``a`` up to, but not including, ``b``."""
        x, y = self.a.x, self.a.y
        err = self.err
        while x != self.b.x or y != self.b.y:
            yield x, y
            e2 = 2 * err
            if e2 > -self.dy:
                err -= self.dy
                x += self.x_inc
            if e2 < self.dx:
                err += self.dx
                y += self.y_inc


def _fraction(start: int, end: int, current: int) -> float:
    return _f32(_f32(current - start) / _f32(end - start))


def _blend(start: int, end: int, calc: float) -> int:
    channels = []
    for shift in (16, 8, 0):
        first = (start >> shift) & 0xFF
        last = (end >> shift) & 0xFF
        channels.append(first + int(_f32(calc * (last - first))))
    red, green, blue = channels
    return (red << 16) | (green << 8) | blue


def gradient(line: Line, x: int, y: int) -> int:
    """Return the colour at (x, y) on ``line``, blended between its end colours.

    The position along the line is measured on its longer axis.
    """
    if line.a.colour == line.b.colour:
        return line.a.colour
    if line.dx > line.dy:
        calc = _fraction(line.a.x, line.b.x, x)
    else:
        calc = _fraction(line.a.y, line.b.y, y)
    return _blend(line.a.colour, line.b.colour, calc)


def draw_line(image: Image, a: Pixel, b: Pixel) -> None:
    """Draw the line from ``a`` to ``b``; positions outside the image are skipped."""
    line = Line.from_points(a, b)
    for x, y in line.points():
        colour = gradient(line, x, y)
        if 0 <= x < image.width and 0 <= y < image.height:
            image.put_pixel(x, y, colour)


def draw_map(image: Image, grid_map: Map) -> None:
    """Draw every horizontal edge of the grid, then every vertical one."""
    rows = [row[: grid_map.width] for row in grid_map.grid[: grid_map.height]]
    for row in rows:
        for left, right in zip(row, row[1:]):
            draw_line(image, left, right)
    for column in range(grid_map.width):
        for upper, lower in zip(rows, rows[1:]):
            draw_line(image, upper[column], lower[column])