"""Reading height maps: one row of points per line, each "z" or "z,0xRRGGBB"."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_COLOUR = 0xFFFFFF

_WHITESPACE = "\t\n\v\f\r "
_ATOI = re.compile(r"[\t\n\v\f\r ]*([+-]?[0-9]+)")


class MapError(ValueError):
    """Raised when a map cannot be read."""


@dataclass
class Pixel:
    """A map point: current (projected) coordinates and its original ones."""

    x: int = 0
    y: int = 0
    z: int = 0
    ori_x: int = 0
    ori_y: int = 0
    ori_z: int = 0
    colour: int = 0


@dataclass
class Map:
    """A grid of points, ``height`` rows of ``width`` points each."""

    grid: list[list[Pixel]] = field(default_factory=list)
    height: int = 0
    width: int = 0

    def __iter__(self) -> Iterator[Pixel]:
        for row in self.grid:
            yield from row


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return _to_int32(int(match.group(1))) if match else 0


def word_count(text, sep=" ") -> int:
    """Count the words in ``text`` separated by ``sep``; newlines end words too."""
    text = text.split("\0", 1)[0]
    enders = (sep, "\0", "\n")
    return sum(
        1
        for char, following in zip(text, text[1:] + "\0")
        if char not in (sep, "\n") and following in enders
    )


def char_to_hex(char) -> int:
    """Return the value of a hexadecimal digit, or -1 if it is not one."""
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    if "a" <= char <= "f":
        return ord(char) - ord("a") + 10
    if "A" <= char <= "F":
        return ord(char) - ord("A") + 10
    return -1


def atoi_base(text, base=16) -> int:
    """Read a number in ``base`` after leading whitespace.

    Reading stops at the first invalid digit or once eight characters of
    ``text`` (leading whitespace included) have been consumed.
    """
    text = text.split("\0", 1)[0]
    start = len(text) - len(text.lstrip(_WHITESPACE))
    result = 0
    for consumed, char in enumerate(text[start:], start + 1):
        digit = char_to_hex(char)
        if digit == -1 or digit >= base:
            break
        result = result * base + digit
        if consumed >= 8:
            break
    return _to_int32(result)


def parse_point(token) -> tuple[int, int] | None:
    """Return (z, colour) for one map token.

    A token without a comma has the default colour. A token with a comma
    needs both a height and a colour; otherwise None is returned.
    """
    if "," not in token:
        return _atoi(token), DEFAULT_COLOUR
    parts = [part for part in token.split(",") if part]
    if len(parts) < 2:
        return None
    colour_text = parts[1]
    if colour_text[:1] == "0" and colour_text[1:2] in ("x", "X"):
        colour_text = colour_text[2:]
    return _atoi(parts[0]), atoi_base(colour_text, 16)


def parse_map(lines: Iterable[str]) -> Map:
    """Build a map from its lines.

    The width is the number of words on the first line. A token that cannot
    be read keeps the height and colour of the point read before it.
    """
    rows = list(lines)
    width = word_count(rows[0]) if rows else 0
    grid: list[list[Pixel]] = []
    z, colour = 0, 0
    for i, line in enumerate(rows):
        tokens = [token for token in line.split(" ") if token]
        if len(tokens) < width:
            raise MapError(
                f"line {i + 1} has {len(tokens)} values, expected {width}"
            )
        row = []
        for j, token in enumerate(tokens[:width]):
            parsed = parse_point(token)
            if parsed is not None:
                z, colour = parsed
            row.append(
                Pixel(x=j, y=i, z=z, ori_x=j, ori_y=i, ori_z=z, colour=colour)
            )
        grid.append(row)
    return Map(grid=grid, height=len(rows), width=width)


def load_map(path) -> Map:
    """Read a map file."""
    try:
        text = Path(path).read_bytes().decode("latin-1")
    except OSError as exc:
        raise MapError(f"cannot read map {path}: {exc.strerror}") from exc
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return parse_map(lines)