"""In-memory pixel images with a fixed row stride, as used for rendering."""

from __future__ import annotations

_BYTE_ORDERS = {0: "little", 1: "big"}
_DEPTHS = (8, 16, 24, 32)


class Image:
    """A block of pixel memory laid out row by row.

    Rows are padded to a multiple of 32 bits, so ``line_length`` may exceed
    ``width * bits_per_pixel / 8``. ``endian`` is 0 for least significant
    byte first and 1 for most significant byte first.
    """

    def __init__(self, width, height, bits_per_pixel=32, endian=0):
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        if bits_per_pixel not in _DEPTHS:
            raise ValueError(f"unsupported bits per pixel: {bits_per_pixel}")
        if endian not in _BYTE_ORDERS:
            raise ValueError(f"endian must be 0 or 1, got {endian}")
        self.width = width
        self.height = height
        self.bits_per_pixel = bits_per_pixel
        self.endian = endian
        self.line_length = (width * bits_per_pixel + 31) // 32 * 4
        self.data = bytearray(self.line_length * height)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"pixel ({x}, {y}) outside {self.width}x{self.height} image"
            )
        return y * self.line_length + x * self.bytes_per_pixel

    def put_pixel(self, x, y, colour) -> None:
        """Store ``colour`` at (x, y), truncated to the pixel size."""
        opp = self.bytes_per_pixel
        offset = self._offset(x, y)
        value = colour & ((1 << (8 * opp)) - 1)
        self.data[offset:offset + opp] = value.to_bytes(
            opp, _BYTE_ORDERS[self.endian]
        )

    def get_pixel(self, x, y) -> int:
        """Return the unsigned value stored at (x, y)."""
        opp = self.bytes_per_pixel
        offset = self._offset(x, y)
        return int.from_bytes(
            self.data[offset:offset + opp], _BYTE_ORDERS[self.endian]
        )

    def to_ppm(self) -> bytes:
        """Encode the image as a binary PPM (P6), reading pixels as 0xRRGGBB."""
        out = bytearray(f"P6\n{self.width} {self.height}\n255\n".encode("ascii"))
        for y in range(self.height):
            for x in range(self.width):
                colour = self.get_pixel(x, y)
                out += bytes(
                    ((colour >> 16) & 0xFF, (colour >> 8) & 0xFF, colour & 0xFF)
                )
        return bytes(out)