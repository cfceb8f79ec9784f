import random
from typing import Optional

CELL_OPEN = 0
CELL_WALL = 1
CELL_PATH = 2

# Заготовлені лабіринти 10x13 для кнопки "Випадковий лабіринт"
PRESET_MAZES: tuple[tuple[tuple[int, ...], ...], ...] = (
    (
        (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
        (1, 0, 1, 0, 1, 0, 1, 0, 0, 0, 0, 0, 1),
        (1, 0, 1, 0, 0, 0, 1, 0, 1, 1, 1, 0, 1),
        (1, 0, 0, 0, 1, 1, 1, 0, 0, 0, 0, 0, 1),
        (1, 0, 1, 0, 0, 0, 0, 0, 1, 1, 1, 0, 1),
        (1, 0, 1, 0, 1, 1, 1, 0, 1, 0, 0, 0, 1),
        (1, 0, 1, 0, 1, 0, 0, 0, 1, 1, 1, 0, 1),
        (1, 0, 1, 0, 1, 1, 1, 0, 1, 0, 1, 0, 1),
        (1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 1, 0, 1),
        (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
    ),
    (
        (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
        (1, 0, 1, 0, 0, 0, 1, 0, 0, 0, 0, 0, 1),
        (1, 0, 1, 0, 1, 0, 0, 0, 1, 1, 1, 0, 1),
        (1, 0, 0, 0, 1, 1, 1, 0, 0, 1, 0, 0, 1),
        (1, 0, 1, 0, 0, 0, 1, 0, 1, 1, 1, 1, 1),
        (1, 0, 1, 1, 1, 1, 1, 0, 1, 0, 0, 0, 1),
        (1, 0, 1, 0, 0, 0, 0, 0, 1, 0, 1, 0, 1),
        (1, 0, 1, 0, 1, 1, 1, 1, 1, 0, 1, 0, 1),
        (1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 1, 0, 1),
        (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
    ),
    (
        (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
        (1, 0, 0, 0, 1, 0, 1, 0, 0, 0, 0, 0, 1),
        (1, 0, 1, 0, 0, 0, 1, 0, 1, 1, 1, 0, 1),
        (1, 0, 1, 1, 1, 1, 1, 0, 0, 0, 1, 0, 1),
        (1, 0, 1, 0, 0, 0, 1, 0, 1, 1, 1, 0, 1),
        (1, 0, 1, 0, 1, 0, 1, 0, 0, 1, 0, 0, 1),
        (1, 0, 1, 0, 1, 0, 1, 0, 1, 1, 1, 0, 1),
        (1, 0, 1, 0, 1, 0, 1, 0, 1, 0, 1, 0, 1),
        (1, 0, 0, 0, 1, 0, 0, 0, 0, 0, 1, 0, 1),
        (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
    ),
    (
        (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
        (1, 0, 0, 0, 1, 0, 1, 0, 0, 0, 0, 0, 1),
        (1, 0, 1, 0, 0, 0, 1, 0, 1, 1, 1, 0, 1),
        (1, 0, 1, 1, 1, 1, 1, 0, 0, 0, 1, 0, 1),
        (1, 0, 1, 0, 0, 0, 1, 1, 1, 1, 1, 0, 1),
        (1, 0, 1, 0, 1, 0, 1, 0, 0, 1, 0, 0, 1),
        (1, 0, 1, 0, 1, 0, 0, 0, 1, 1, 1, 0, 1),
        (1, 0, 1, 0, 1, 0, 1, 1, 1, 0, 1, 0, 1),
        (1, 0, 0, 0, 1, 0, 0, 0, 0, 0, 1, 0, 1),
        (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
    ),
)


class Maze:
    """Клас для представлення 2D лабіринту зі стартом та фінішем."""

    def __init__(self, grid: list[list[int]], start: tuple[int, int], end: tuple[int, int],
                 label: str = "custom", seed: Optional[int] = None):
        if not grid or not grid[0]:
            raise ValueError("Maze grid must have at least one row and one column.")
        width = len(grid[0])
        if any(len(row) != width for row in grid):
            raise ValueError("Maze grid must be rectangular.")

        self.grid = [list(row) for row in grid]
        self.height = len(self.grid)
        self.width = width
        self.label = label
        self.seed = seed

        for name, pos in (("start", start), ("end", end)):
            if not self._is_valid(*pos):
                raise ValueError(f"Maze {name} position {pos} is out of bounds.")
            if self.grid[pos[0]][pos[1]] == CELL_WALL:
                raise ValueError(f"Maze {name} position {pos} is a wall.")
        self.start_pos = tuple(start)
        self.end_pos = tuple(end)

    @property
    def rows(self) -> int:
        return self.height

    @property
    def cols(self) -> int:
        return self.width

    @classmethod
    def empty(cls, rows: int, cols: int) -> "Maze":
        """Порожній лабіринт без стін: старт у (0, 0), фініш у протилежному куті."""
        if rows <= 0 or cols <= 0:
            raise ValueError("rows and cols must be positive")
        grid = [[CELL_OPEN for _ in range(cols)] for _ in range(rows)]
        return cls(grid, (0, 0), (rows - 1, cols - 1), label="empty")

    @classmethod
    def from_preset(cls, index: int) -> "Maze":
        """Створює лабіринт із заготовки з номером index."""
        if not 0 <= index < len(PRESET_MAZES):
            raise ValueError(f"Unknown preset maze index: {index}")
        grid = [list(row) for row in PRESET_MAZES[index]]
        rows, cols = len(grid), len(grid[0])
        return cls(grid, (1, 1), (rows - 2, cols - 2), label=f"preset-{index + 1}")

    @classmethod
    def random_preset(cls, rng: Optional[random.Random] = None) -> "Maze":
        """Обирає випадкову заготовку."""
        rng = rng or random
        return cls.from_preset(rng.randrange(len(PRESET_MAZES)))

    @classmethod
    def generate(cls, rows: int, cols: int, seed: Optional[int] = None) -> "Maze":
        """Генерує новий лабіринт за допомогою Recursive Backtracking."""
        if rows < 5 or cols < 5 or rows % 2 == 0 or cols % 2 == 0:
            raise ValueError("Rows and cols must be odd integers >= 5 for Recursive Backtracking.")
        if seed is None:
            seed = random.randint(0, 2**32 - 1)
        rng = random.Random(seed)

        # Початково всі стіни
        grid = [[CELL_WALL for _ in range(cols)] for _ in range(rows)]

        # Ітеративний варіант, щоб не впертися в ліміт рекурсії на великих лабіринтах
        start_r = rng.randrange(1, rows, 2)
        start_c = rng.randrange(1, cols, 2)
        grid[start_r][start_c] = CELL_OPEN
        stack = [(start_r, start_c)]
        while stack:
            r, c = stack[-1]
            # Сусіди через одну клітинку, які ще є стінами
            candidates = [(nr, nc) for nr, nc in ((r - 2, c), (r + 2, c), (r, c - 2), (r, c + 2))
                          if 0 < nr < rows - 1 and 0 < nc < cols - 1 and grid[nr][nc] == CELL_WALL]
            if not candidates:
                stack.pop()
                continue
            nr, nc = rng.choice(candidates)
            # Пробиваємо стіну між поточною клітинкою та сусідом
            grid[r + (nr - r) // 2][c + (nc - c) // 2] = CELL_OPEN
            grid[nr][nc] = CELL_OPEN
            stack.append((nr, nc))

        start = (1, 1)
        end = (rows - 2, cols - 2)
        return cls(grid, start, end, label=f"generated-{seed}", seed=seed)

    def _is_valid(self, r: int, c: int) -> bool:
        """Перевіряє, чи знаходяться координати в межах лабіринту."""
        return 0 <= r < self.height and 0 <= c < self.width

    def is_walkable(self, r: int, c: int) -> bool:
        """Перевіряє, чи є клітинка прохідною (не стіна)."""
        if self._is_valid(r, c):
            return self.grid[r][c] != CELL_WALL
        return False

    def get_cell_type(self, r: int, c: int) -> int:
        """Повертає тип клітинки."""
        if self._is_valid(r, c):
            return self.grid[r][c]
        return CELL_WALL

    def path_cells(self) -> list[tuple[int, int]]:
        """Клітинки, позначені як шлях."""
        return [(r, c) for r in range(self.height) for c in range(self.width)
                if self.grid[r][c] == CELL_PATH]

    def clear_path(self) -> int:
        """Прибирає позначки шляху. Повертає кількість очищених клітинок."""
        cleared = 0
        for row in self.grid:
            for c, value in enumerate(row):
                if value == CELL_PATH:
                    row[c] = CELL_OPEN
                    cleared += 1
        return cleared

    def copy_grid(self) -> list[list[int]]:
        return [list(row) for row in self.grid]

    def display(self):
        """Виводить лабіринт у консоль (для тестування)."""
        for r in range(self.height):
            row_str = ""
            for c in range(self.width):
                cell_type = self.grid[r][c]
                if (r, c) == self.start_pos:
                    row_str += " S"
                elif (r, c) == self.end_pos:
                    row_str += " E"
                elif cell_type == CELL_OPEN:
                    row_str += "  "
                elif cell_type == CELL_WALL:
                    row_str += "##"
                elif cell_type == CELL_PATH:
                    row_str += " ."
                else:
                    row_str += " ?" # Невідомий тип
            print(row_str)
