import pytest

from wireframe.image import Image


def _color_map(x, y, w, h, kind=1):
    if kind == 2:
        return (y * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


@pytest.mark.parametrize("size", [42, 242])
@pytest.mark.parametrize("endian", [0, 1])
@pytest.mark.parametrize("kind", [1, 2])
def test_fill_and_read_back(size, endian, kind):
    image = Image(size, size, 32, endian)
    for y in range(size):
        for x in range(size):
            image.put_pixel(x, y, _color_map(x, y, size, size, kind))
    for y in range(0, size, 7):
        for x in range(0, size, 5):
            assert image.get_pixel(x, y) == _color_map(x, y, size, size, kind)


def test_line_length_for_32_bits():
    image = Image(42, 42)
    assert image.line_length == 168
    assert len(image.data) == 168 * 42


def test_line_length_is_padded_to_32_bits():
    image = Image(3, 2, 24, 0)
    assert image.line_length == 12
    assert image.line_length % 4 == 0
    assert image.line_length >= 3 * 3


def test_little_endian_layout():
    image = Image(2, 1, 32, 0)
    image.put_pixel(1, 0, 0x11223344)
    assert bytes(image.data[4:8]) == bytes([0x44, 0x33, 0x22, 0x11])


def test_big_endian_layout():
    image = Image(2, 1, 32, 1)
    image.put_pixel(0, 0, 0x11223344)
    assert bytes(image.data[0:4]) == bytes([0x11, 0x22, 0x33, 0x44])


def test_new_image_is_black():
    image = Image(4, 4)
    assert all(b == 0 for b in image.data)
    assert image.get_pixel(3, 3) == 0


def test_colour_is_truncated_to_pixel_size():
    image = Image(1, 1, 16, 0)
    image.put_pixel(0, 0, 0x11223344)
    assert image.get_pixel(0, 0) == 0x3344


def test_negative_colour_wraps():
    image = Image(1, 1)
    image.put_pixel(0, 0, -1)
    assert image.get_pixel(0, 0) == 0xFFFFFFFF


def test_to_ppm():
    image = Image(2, 1)
    image.put_pixel(0, 0, 0xFF99FF)
    image.put_pixel(1, 0, 0x00FFFF)
    assert image.to_ppm() == b"P6\n2 1\n255\n" + bytes(
        [0xFF, 0x99, 0xFF, 0x00, 0xFF, 0xFF]
    )


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (4, 0), (0, 3)])
def test_out_of_range_pixel(x, y):
    image = Image(4, 3)
    with pytest.raises(IndexError):
        image.put_pixel(x, y, 1)
    with pytest.raises(IndexError):
        image.get_pixel(x, y)


@pytest.mark.parametrize(
    "args", [(0, 5), (5, 0), (-2, 5), (5, 5, 12), (5, 5, 32, 2)]
)
def test_invalid_image(args):
    with pytest.raises(ValueError):
        Image(*args)