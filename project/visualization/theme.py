from typing import Optional

try:
    from environment.maze import CELL_WALL, CELL_PATH
except ImportError:
    print("Warning: Could not import constants from environment.maze. Using default values.")
    CELL_WALL, CELL_PATH = 1, 2

# --- Кольорові палітри (світла / темна тема) ---
LIGHT_PALETTE = {
    "background": "#FFFFFF",
    "foreground": "#000000",
    "wall": "#808080",
    "path": "#FFFF00",
    "start": "#00FF00",
    "end": "#FF0000",
    "current": "#0000FF",
    "empty": "#FFFFFF",
    "border": "#000000",
    "panel": "lightgrey",
}

DARK_PALETTE = {
    "background": "#000000",
    "foreground": "#FFFFFF",
    "wall": "#404040",
    "path": "#FFC800",
    "start": "#00B200",
    "end": "#B20000",
    "current": "#0000B2",
    "empty": "#000000",
    "border": "#FFFFFF",
    "panel": "#282c34",
}


def get_palette(dark_mode: bool) -> dict:
    """Повертає копію палітри для обраної теми."""
    return dict(DARK_PALETTE if dark_mode else LIGHT_PALETTE)


def cell_color(palette: dict, cell_value: int, cell: tuple[int, int],
               start: tuple[int, int], end: tuple[int, int],
               current: Optional[tuple[int, int]] = None) -> str:
    """
    Колір клітинки. Пріоритет: стіна, шлях, старт, фініш, поточна, порожня.
    """
    if cell_value == CELL_WALL:
        return palette["wall"]
    if cell_value == CELL_PATH:
        return palette["path"]
    if tuple(cell) == tuple(start):
        return palette["start"]
    if tuple(cell) == tuple(end):
        return palette["end"]
    if current is not None and tuple(cell) == tuple(current):
        return palette["current"]
    return palette["empty"]
