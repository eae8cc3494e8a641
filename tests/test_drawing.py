import pytest

from wireframe.drawing import Line, draw_line, draw_map, gradient
from wireframe.image import Image
from wireframe.parsing import Map, Pixel


def _pt(x, y, colour=0xFFFFFF):
    return Pixel(x=x, y=y, colour=colour)


def test_from_points_direction_for_reversed_line():
    line = Line.from_points(_pt(5, 5), _pt(1, 2))
    assert line.x_inc == -1
    assert line.y_inc == -1
    assert line.dx == 4
    assert line.dy == 3


def test_equal_coordinates_step_negative():
    line = Line.from_points(_pt(2, 2), _pt(2, 7))
    assert line.x_inc == -1
    assert line.y_inc == 1


def test_horizontal_points_exclude_end():
    line = Line.from_points(_pt(0, 0), _pt(3, 0))
    assert list(line.points()) == [(x, 0) for x in range(3)]


def test_degenerate_line_has_no_points():
    assert list(Line.from_points(_pt(4, 4), _pt(4, 4)).points()) == []


@pytest.mark.parametrize(
    "a, b",
    [((0, 0), (7, 3)), ((5, 1), (0, 9)), ((-3, 4), (6, -2)), ((2, 2), (2, -5))],
)
def test_points_form_connected_path(a, b):
    start, end = _pt(*a), _pt(*b)
    line = Line.from_points(start, end)
    pts = list(line.points())
    assert pts[0] == a
    assert len(pts) == max(line.dx, line.dy)
    path = pts + [b]
    for (x0, y0), (x1, y1) in zip(path, path[1:]):
        assert abs(x1 - x0) <= 1 and abs(y1 - y0) <= 1
        assert (x0, y0) != (x1, y1)


def test_points_can_be_iterated_twice():
    line = Line.from_points(_pt(0, 0), _pt(9, 4))
    first = list(line.points())
    second = list(line.points())
    assert len(first) == 9
    assert first[0] == (0, 0)
    assert second == first


def test_gradient_same_colour():
    line = Line.from_points(_pt(0, 0, 0x123456), _pt(10, 3, 0x123456))
    assert gradient(line, 4, 1) == 0x123456


def test_gradient_endpoints():
    a, b = _pt(0, 0, 0xFF0000), _pt(3, 8, 0x00FF00)
    line = Line.from_points(a, b)
    assert gradient(line, 0, 0) == a.colour
    assert gradient(line, 3, 8) == b.colour


def test_gradient_midpoint():
    line = Line.from_points(_pt(0, 0, 0x000000), _pt(2, 0, 0x000064))
    assert gradient(line, 1, 0) == 0x32


def test_gradient_monotonic_along_line():
    line = Line.from_points(_pt(0, 0, 0x000000), _pt(20, 5, 0x0000FF))
    blues = [gradient(line, x, y) & 0xFF for x, y in line.points()]
    assert blues == sorted(blues)
    assert all(gradient(line, x, y) >> 8 == 0 for x, y in line.points())


def test_draw_line_skips_end_point():
    image = Image(5, 5)
    draw_line(image, _pt(0, 0), _pt(4, 0))
    assert [image.get_pixel(x, 0) for x in range(5)] == [0xFFFFFF] * 4 + [0]


def test_draw_line_clips_outside():
    image = Image(3, 3)
    draw_line(image, _pt(-2, 1), _pt(3, 1))
    assert [image.get_pixel(x, 1) for x in range(3)] == [0xFFFFFF] * 3
    assert all(image.get_pixel(x, 0) == 0 for x in range(3))


def test_draw_map_square():
    grid = [[_pt(1, 1), _pt(3, 1)], [_pt(1, 3), _pt(3, 3)]]
    image = Image(5, 5)
    draw_map(image, Map(grid=grid, height=2, width=2))
    lit = {
        (x, y)
        for y in range(5)
        for x in range(5)
        if image.get_pixel(x, y)
    }
    assert lit == {(1, 1), (2, 1), (1, 3), (2, 3), (1, 2), (3, 1), (3, 2)}


def test_draw_map_single_point_draws_nothing():
    image = Image(4, 4)
    draw_map(image, Map(grid=[[_pt(1, 1)]], height=1, width=1))
    pixels = [image.get_pixel(x, y) for y in range(4) for x in range(4)]
    assert pixels == [0] * 16