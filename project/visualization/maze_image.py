import os
from typing import Optional
from PIL import Image, ImageDraw

from .theme import cell_color, get_palette

DEFAULT_CELL_SIZE = 20


def render_maze_image(maze_grid: list[list[int]], start: tuple[int, int], end: tuple[int, int],
                      cell_size: int = DEFAULT_CELL_SIZE, palette: Optional[dict] = None,
                      current: Optional[tuple[int, int]] = None) -> Image.Image:
    """
    Малює лабіринт у PIL Image.

    Args:
        maze_grid: сітка лабіринту (0 - прохід, 1 - стіна, 2 - шлях).
        start, end: координати старту та фінішу (row, col).
        cell_size: розмір клітинки в пікселях.
        palette: палітра кольорів (за замовчуванням світла тема).
        current: клітинка, яку треба виділити як поточну.
    """
    if cell_size <= 0:
        raise ValueError("cell_size must be positive")
    palette = palette or get_palette(False)

    height = len(maze_grid)
    width = len(maze_grid[0]) if height > 0 else 0
    image = Image.new("RGB", (max(1, width * cell_size), max(1, height * cell_size)), palette["background"])
    draw = ImageDraw.Draw(image)

    for r in range(height):
        for c in range(width):
            x1, y1 = c * cell_size, r * cell_size
            x2, y2 = x1 + cell_size - 1, y1 + cell_size - 1
            fill_color = cell_color(palette, maze_grid[r][c], (r, c), start, end, current)
            draw.rectangle([x1, y1, x2, y2], fill=fill_color, outline=palette["border"])

    return image


def save_maze_image(filepath: str, maze_grid: list[list[int]], start: tuple[int, int],
                    end: tuple[int, int], cell_size: int = DEFAULT_CELL_SIZE,
                    palette: Optional[dict] = None) -> str:
    """Зберігає зображення лабіринту у файл. Формат визначається за розширенням."""
    image = render_maze_image(maze_grid, start, end, cell_size, palette)
    directory = os.path.dirname(filepath)
    if directory:
        os.makedirs(directory, exist_ok=True)
    image.save(filepath)
    print(f"Maze image saved to {filepath}")
    return filepath
