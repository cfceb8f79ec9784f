import pytest
from PIL import Image

from environment.maze import CELL_OPEN, CELL_PATH, CELL_WALL
from visualization.maze_image import render_maze_image, save_maze_image
from visualization.theme import DARK_PALETTE, LIGHT_PALETTE, cell_color, get_palette


def _rgb(hex_color):
    hex_color = hex_color.lstrip("#")
    return tuple(int(hex_color[i:i + 2], 16) for i in (0, 2, 4))


def test_get_palette_returns_copies():
    palette = get_palette(False)
    palette["wall"] = "#123456"
    assert LIGHT_PALETTE["wall"] == "#808080"
    assert get_palette(True) == DARK_PALETTE


def test_cell_color_precedence():
    palette = get_palette(False)
    start, end = (0, 0), (2, 2)
    assert cell_color(palette, CELL_WALL, (0, 0), start, end) == palette["wall"]
    # Позначений фініш малюється як шлях
    assert cell_color(palette, CELL_PATH, (2, 2), start, end) == palette["path"]
    assert cell_color(palette, CELL_OPEN, (0, 0), start, end) == palette["start"]
    assert cell_color(palette, CELL_OPEN, (2, 2), start, end) == palette["end"]
    assert cell_color(palette, CELL_OPEN, (1, 1), start, end, current=(1, 1)) == palette["current"]
    assert cell_color(palette, CELL_OPEN, (1, 0), start, end, current=(1, 1)) == palette["empty"]


def test_dark_palette_differs_from_light():
    assert get_palette(True)["empty"] != get_palette(False)["empty"]
    assert get_palette(True)["path"] == "#FFC800"


def test_render_maze_image_size_and_colors():
    grid = [
        [0, 1, 0],
        [0, 2, 0],
    ]
    image = render_maze_image(grid, (0, 0), (1, 2), cell_size=10)
    assert isinstance(image, Image.Image)
    assert image.size == (30, 20)
    # Центри клітинок (рамка малюється по краях)
    assert image.getpixel((5, 5)) == _rgb(LIGHT_PALETTE["start"])
    assert image.getpixel((15, 5)) == _rgb(LIGHT_PALETTE["wall"])
    assert image.getpixel((15, 15)) == _rgb(LIGHT_PALETTE["path"])
    assert image.getpixel((25, 15)) == _rgb(LIGHT_PALETTE["end"])
    assert image.getpixel((25, 5)) == _rgb(LIGHT_PALETTE["empty"])


def test_render_with_dark_palette():
    image = render_maze_image([[0, 0]], (0, 0), (0, 1), cell_size=8, palette=get_palette(True))
    assert image.getpixel((4, 4)) == _rgb(DARK_PALETTE["start"])
    assert image.getpixel((0, 0)) == _rgb(DARK_PALETTE["border"])


def test_render_rejects_bad_cell_size():
    with pytest.raises(ValueError):
        render_maze_image([[0]], (0, 0), (0, 0), cell_size=0)


def test_save_maze_image(tmp_path):
    target = tmp_path / "images" / "maze.png"
    returned = save_maze_image(str(target), [[0, 1], [0, 0]], (0, 0), (1, 1), cell_size=4)
    assert returned == str(target)
    with Image.open(target) as saved:
        assert saved.size == (8, 8)
