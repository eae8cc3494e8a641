"""Isometric wireframe rendering of height maps into in-memory images, with XPM loading and named colours."""

__version__ = "0.1.0"