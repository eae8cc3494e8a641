"""Isometric projection of map points onto the window."""

from __future__ import annotations

import math

from wireframe.parsing import Map, Pixel

WIN_WIDTH = 3800
WIN_HEIGHT = 2000
ISO_ANGLE = 0.523599
ISO_SCALE = 25
Z_SCALE = 25
COMPRESSION = 1


def project(pixel: Pixel) -> Pixel:
    """Set the window coordinates of ``pixel`` from its original ones and return it."""
    x = float(pixel.ori_x * ISO_SCALE)
    y = float(pixel.ori_y * ISO_SCALE)
    z = float(pixel.ori_z * Z_SCALE)
    pixel.x = int((x - y) * math.cos(ISO_ANGLE)) + WIN_WIDTH // 2
    pixel.y = int((x + y) * math.sin(ISO_ANGLE) / COMPRESSION - z) + WIN_HEIGHT // 2
    return pixel


def isometric(grid_map: Map) -> Map:
    """Project every point of ``grid_map`` in place and return the map."""
    for row in grid_map.grid[: grid_map.height]:
        for pixel in row[: grid_map.width]:
            project(pixel)
    return grid_map