"""Reading XPM pixmaps into images."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path

from wireframe.colors import text_rgb
from wireframe.image import Image

_TRANSPARENT = 0xFF000000
_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be read."""


def _atoi(word: str) -> int:
    match = _ATOI.match(word)
    return int(match.group(1)) if match else 0


def str_to_wordtab(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs only."""
    return [word for word in re.split(r"[ \t]+", text) if word]


def _find_unquoted(text: str, needle: str) -> int:
    quoted = False
    for pos, char in enumerate(text):
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def strip_comments(text: str) -> str:
    """Blank out C comments outside double quotes, keeping the text length."""
    while (begin := _find_unquoted(text, "/*")) != -1:
        end = text.find("*/", begin + 2)
        stop = len(text) if end == -1 else end + 2
        text = text[:begin] + " " * (stop - begin) + text[stop:]
    while (begin := _find_unquoted(text, "//")) != -1:
        end = text.find("\n", begin + 2)
        stop = len(text) if end == -1 else end + 1
        text = text[:begin] + " " * (stop - begin) + text[stop:]
    return text


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of each double-quoted string in ``text``."""
    pos = 0
    while True:
        start = text.find('"', pos)
        if start == -1:
            return
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1:end]
        pos = end + 1


def _read_palette(rows: Iterator[str], ncolors: int, cpp: int) -> dict[str, int]:
    palette: dict[str, int] = {}
    # Short keys behave like a direct table (later entries win); longer keys
    # are searched in definition order (earlier entries win).
    later_wins = cpp <= 2
    for _ in range(ncolors):
        line = next(rows, None)
        if line is None or len(line) < cpp:
            raise XpmError("missing or truncated colour line")
        spec = str_to_wordtab(line[cpp:])
        try:
            index = spec.index("c")
        except ValueError:
            raise XpmError(f"colour line without a 'c' key: {line!r}") from None
        if index + 1 >= len(spec):
            raise XpmError(f"colour line without a colour: {line!r}")
        end = spec[index + 2] if index + 2 < len(spec) else None
        colour = text_rgb(spec[index + 1], end)
        key = line[:cpp]
        if later_wins:
            palette[key] = colour
        else:
            palette.setdefault(key, colour)
    return palette


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from XPM lines: header, colour lines, then pixel rows."""
    rows = iter(lines)
    header = next(rows, None)
    if header is None:
        raise XpmError("missing header")
    words = str_to_wordtab(header)
    if len(words) < 4:
        raise XpmError(f"header needs four values: {header!r}")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid header values: {header!r}")

    palette = _read_palette(rows, ncolors, cpp)
    image = Image(width, height)
    for y in range(height):
        line = next(rows, None)
        if line is None:
            raise XpmError(f"missing pixel row {y}")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row {y} is too short")
        for x, start in enumerate(range(0, width * cpp, cpp)):
            colour = palette.get(line[start:start + cpp], 0)
            if colour == -1:
                colour = _TRANSPARENT
            image.put_pixel(x, y, colour)
    return image


def xpm_to_image(data: Sequence[str]) -> Image:
    """Build an image from XPM data given as its list of strings."""
    return parse_xpm(data)


def xpm_file_to_image(path) -> Image:
    """Read an XPM file and build an image from it."""
    text = Path(path).read_text(encoding="latin-1")
    return parse_xpm(quoted_lines(strip_comments(text)))