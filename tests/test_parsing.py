import pytest

from wireframe.parsing import (
    DEFAULT_COLOUR,
    Map,
    MapError,
    Pixel,
    atoi_base,
    char_to_hex,
    load_map,
    parse_map,
    parse_point,
    word_count,
)


def test_word_count_ignores_newline_and_repeated_separators():
    words = ["0", "10", "-3", "7"]
    assert word_count("  ".join(words) + "\n") == len(words)
    assert word_count(" ".join(words) + " \n") == len(words)


def test_word_count_empty():
    assert word_count("") == 0
    assert word_count("\n") == 0


@pytest.mark.parametrize("char", ["g", "x", " ", "-", "G"])
def test_char_to_hex_rejects_non_digits(char):
    assert char_to_hex(char) == -1


def test_char_to_hex_digits_in_any_case():
    assert [char_to_hex(c) for c in "0123456789abcdef"] == list(range(16))
    assert [char_to_hex(c) for c in "ABCDEF"] == list(range(10, 16))


def test_atoi_base_reads_hex():
    assert atoi_base("FF0000", 16) == 0xFF0000
    assert atoi_base("ff00ff", 16) == 0xFF00FF


def test_atoi_base_stops_at_invalid_digit():
    assert atoi_base("12zz", 16) == 0x12
    assert atoi_base("19", 8) == 1


def test_atoi_base_reads_at_most_eight_characters():
    assert atoi_base("123456789", 16) == 0x12345678
    assert atoi_base(" 123456789", 16) == 0x1234567


def test_parse_point_plain_height_uses_default_colour():
    assert parse_point("42") == (42, DEFAULT_COLOUR)
    assert parse_point("-7\n") == (-7, DEFAULT_COLOUR)


def test_parse_point_with_colour():
    assert parse_point("10,0xFF0000") == (10, 0xFF0000)
    assert parse_point("3,0X00ff00\n") == (3, 0x00FF00)
    assert parse_point("3,abc") == (3, 0xABC)


@pytest.mark.parametrize("token", ["5,", ",0xFF", ","])
def test_parse_point_incomplete_colour_gives_none(token):
    assert parse_point(token) is None


def test_parse_map_builds_grid():
    grid_map = parse_map(["0 1 2\n", "3 4,0xFF0000 5\n"])
    assert (grid_map.height, grid_map.width) == (2, 3)
    assert grid_map.grid[1][1] == Pixel(
        x=1, y=1, z=4, ori_x=1, ori_y=1, ori_z=4, colour=0xFF0000
    )
    assert [p.z for p in grid_map] == [0, 1, 2, 3, 4, 5]
    for i, row in enumerate(grid_map.grid):
        for j, pixel in enumerate(row):
            assert (pixel.x, pixel.y, pixel.ori_x, pixel.ori_y) == (j, i, j, i)
            assert pixel.ori_z == pixel.z


def test_parse_map_ignores_extra_values():
    grid_map = parse_map(["1 2\n", "3 4 5 6\n"])
    assert [len(row) for row in grid_map.grid] == [2, 2]


def test_parse_map_short_row_raises():
    with pytest.raises(MapError):
        parse_map(["1 2 3\n", "1 2\n"])


def test_parse_map_empty():
    assert parse_map([]) == Map(grid=[], height=0, width=0)


def test_load_map_matches_parse_map(tmp_path):
    lines = ["0 0 0\n", "0 10,0xFF0000 0\n", "0 0 0"]
    path = tmp_path / "map.fdf"
    path.write_text("".join(lines))
    assert load_map(path) == parse_map(lines)


def test_load_map_missing_file(tmp_path):
    with pytest.raises(MapError):
        load_map(tmp_path / "missing.fdf")