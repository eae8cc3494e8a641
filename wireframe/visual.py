"""Conversion of 0xRRGGBB colours to pixel values of a TrueColor visual."""

from __future__ import annotations

from collections.abc import Sequence


def _shift_and_width(mask: int, channel: str) -> tuple[int, int]:
    if mask <= 0:
        raise ValueError(f"{channel} mask must be a positive bit mask, got {mask}")
    shift = 0
    while not mask & 1:
        mask >>= 1
        shift += 1
    width = 0
    while mask & 1:
        mask >>= 1
        width += 1
    return shift, width


def rgb_shifts(red_mask, green_mask, blue_mask) -> tuple[int, int, int, int, int, int]:
    """Return (red shift, red bits, green shift, green bits, blue shift, blue bits).

    The shift is the position of the lowest set bit of each mask and the bit
    count is the length of the run of set bits starting there.
    """
    return (
        *_shift_and_width(red_mask, "red"),
        *_shift_and_width(green_mask, "green"),
        *_shift_and_width(blue_mask, "blue"),
    )


def good_color(color, depth, shifts: Sequence[int]) -> int:
    """Convert ``color`` (0xRRGGBB) to a pixel value for a visual of ``depth`` bits.

    Visuals of 24 bits or more take the colour as it is; shallower visuals
    pack the top bits of each channel according to ``shifts`` as returned by
    :func:`rgb_shifts`.
    """
    if depth >= 24:
        return color
    if len(shifts) != 6:
        raise ValueError(f"expected six shift values, got {len(shifts)}")
    red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits = shifts
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - red_bits)) << red_shift)
        + ((green >> (16 - green_bits)) << green_shift)
        + ((blue >> (16 - blue_bits)) << blue_shift)
    )