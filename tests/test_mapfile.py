import pytest

from wiremap.mapfile import HeightMap, MapError, load_map, parse_point, read_map


def test_parse_point_without_colour_is_white():
    assert parse_point("-5") == (-5, 0xFFFFFF)


def test_parse_point_with_colour():
    assert parse_point("3,0x00ff00") == (3, 0x00FF00)


def test_parse_point_uppercase_hex_and_trailing_newline():
    assert parse_point("12,0xFF0000\n") == (12, 0xFF0000)


def test_parse_point_non_number_reads_as_zero():
    assert parse_point("abc") == (0, 0xFFFFFF)


def test_read_map_grid():
    hmap = read_map(["0 0 0\n", "0 10,0xFF0000 0\n"])
    assert (hmap.width, hmap.height) == (3, 2)
    assert hmap.heights == [0, 0, 0, 0, 10, 0]
    assert hmap.colors[4] == 0xFF0000
    assert hmap.colors[0] == 0xFFFFFF
    assert (hmap.top, hmap.bottom) == (10, 0)


def test_top_and_bottom_bound_every_height():
    hmap = read_map(["4 -2 7", "1 0 -9", "3 3 3"])
    assert hmap.top == max(hmap.heights)
    assert hmap.bottom == min(hmap.heights)
    assert all(hmap.bottom <= h <= hmap.top for h in hmap.heights)


@pytest.mark.parametrize("width, height", [(1, 1), (2, 3), (5, 4), (10, 1)])
def test_line_count_counts_neighbour_segments(width, height):
    hmap = read_map([" ".join("0" * width)] * height)
    assert hmap.line_count() == width * (height - 1) + height * (width - 1)


def test_single_point_has_no_lines():
    assert HeightMap(1, 1, [0], [0xFFFFFF]).line_count() == 0


def test_empty_map_is_rejected():
    with pytest.raises(MapError):
        read_map([])


def test_blank_first_line_is_rejected():
    with pytest.raises(MapError):
        read_map(["\n", "1 2"])


def test_ragged_rows_are_rejected():
    with pytest.raises(MapError):
        read_map(["1 2 3", "1 2"])


def test_load_map_from_file(tmp_path):
    path = tmp_path / "grid.fdf"
    path.write_text("0 1\n2 3,0xABCDEF\n")
    hmap = load_map(path)
    assert hmap.heights == [0, 1, 2, 3]
    assert hmap.colors[3] == 0xABCDEF


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        load_map(tmp_path / "missing.fdf")