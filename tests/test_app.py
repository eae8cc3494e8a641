from wireframe.app import _ppm_bytes, main, render
from wireframe.image import Image
from wireframe.isometric import WIN_HEIGHT, WIN_WIDTH
from wireframe.parsing import DEFAULT_COLOUR, parse_map

HEADER = f"P6\n{WIN_WIDTH} {WIN_HEIGHT}\n255\n".encode("ascii")


def test_render_projects_and_draws_origin():
    grid_map = parse_map(["0 0\n", "0 0\n"])
    image = render(grid_map)
    assert (image.width, image.height) == (WIN_WIDTH, WIN_HEIGHT)
    origin = grid_map.grid[0][0]
    assert (origin.x, origin.y) == (WIN_WIDTH // 2, WIN_HEIGHT // 2)
    assert image.get_pixel(origin.x, origin.y) == DEFAULT_COLOUR


def test_render_uses_point_colour():
    grid_map = parse_map(["0,0xFF0000 0,0xFF0000\n"])
    image = render(grid_map)
    origin = grid_map.grid[0][0]
    assert image.get_pixel(origin.x, origin.y) == 0xFF0000


def test_render_small_image_is_blank():
    image = render(parse_map(["0 0\n", "0 0\n"]), 10, 10)
    assert image.width == 10
    assert not any(image.data)


def test_ppm_fast_path_matches_image():
    image = Image(3, 2)
    image.put_pixel(0, 0, 0x102030)
    image.put_pixel(2, 1, 0xA0B0C0)
    assert _ppm_bytes(image) == image.to_ppm()


def test_ppm_big_endian_matches_image():
    image = Image(2, 2, 32, 1)
    image.put_pixel(1, 0, 0x010203)
    assert _ppm_bytes(image) == image.to_ppm()


def test_main_wrong_argument_count():
    assert main([]) == 1
    assert main(["a.fdf", "b.fdf"]) == 1


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.fdf")]) == 1


def test_main_writes_ppm(tmp_path, capsysbinary):
    path = tmp_path / "square.fdf"
    path.write_text("0 0\n0 0\n")
    assert main([str(path)]) == 0
    out = capsysbinary.readouterr().out
    assert out.startswith(HEADER)
    assert len(out) == len(HEADER) + WIN_WIDTH * WIN_HEIGHT * 3
    offset = len(HEADER) + ((WIN_HEIGHT // 2) * WIN_WIDTH + WIN_WIDTH // 2) * 3
    assert out[offset:offset + 3] == b"\xff\xff\xff"