from typing import Iterator, NamedTuple


class Cell(NamedTuple):
    """Координата клітинки лабіринту (рядок, стовпець)."""
    row: int
    col: int


# Фіксований порядок обходу сусідів: вгору, вниз, вліво, вправо
DIRECTIONS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


class GridGraph:
    """
    Граф 4-зв'язної сітки. Сусіди зберігаються у таблиці з прямою адресацією
    [row][col], тому пошук сусідів виконується за O(1).
    Стіни тут не враховуються, їх фільтрує пошук під час обходу.
    """

    def __init__(self, rows: int, cols: int):
        if rows <= 0 or cols <= 0:
            raise ValueError("rows and cols must be positive")
        self.rows = rows
        self.cols = cols
        self._adjacency: list[list[tuple[Cell, ...]]] = [
            [self._compute_neighbors(r, c) for c in range(cols)] for r in range(rows)
        ]

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.rows and 0 <= c < self.cols

    def _compute_neighbors(self, r: int, c: int) -> tuple[Cell, ...]:
        neighbors = []
        for dr, dc in DIRECTIONS:
            nr, nc = r + dr, c + dc
            if self.in_bounds(nr, nc):
                neighbors.append(Cell(nr, nc))
        return tuple(neighbors)

    def neighbors(self, cell: tuple[int, int]) -> tuple[Cell, ...]:
        """Повертає сусідів клітинки у фіксованому порядку DIRECTIONS."""
        r, c = cell
        return self._adjacency[r][c]

    def __contains__(self, cell) -> bool:
        try:
            r, c = cell
        except (TypeError, ValueError):
            return False
        return self.in_bounds(r, c)

    def __iter__(self) -> Iterator[Cell]:
        for r in range(self.rows):
            for c in range(self.cols):
                yield Cell(r, c)

    def __len__(self) -> int:
        return self.rows * self.cols

    def adjacency(self) -> dict[Cell, frozenset[Cell]]:
        """Словник суміжності (для порівняння графів та перевірок)."""
        return {cell: frozenset(self.neighbors(cell)) for cell in self}

    def __repr__(self) -> str:
        return f"GridGraph(rows={self.rows}, cols={self.cols})"


def build_graph(rows: int, cols: int) -> GridGraph:
    """Будує граф сусідства для лабіринту розміром rows x cols."""
    return GridGraph(rows, cols)
