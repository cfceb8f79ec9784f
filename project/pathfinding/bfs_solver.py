import time
from collections import deque
from dataclasses import dataclass, field

from environment.maze import CELL_PATH, CELL_WALL
from .grid_graph import Cell, GridGraph


@dataclass
class SolveResult:
    """Результат одного розв'язання лабіринту."""
    found: bool
    path: list[Cell] = field(default_factory=list)
    distance_map: list[list[int]] = field(default_factory=list)
    visited_count: int = 0
    elapsed_ms: float = 0.0

    @property
    def path_length(self) -> int:
        """Кількість позначених клітинок шляху (без стартової)."""
        return len(self.path)


def bfs(maze_grid: list[list[int]], graph: GridGraph,
        start: tuple[int, int], end: tuple[int, int]) -> tuple[bool, list[list[int]]]:
    """
    Пошук в ширину від start до end.
    Повертає (знайдено, карта відстаней). У карті 0 означає "не відвідано",
    додатне значення дорівнює відстані від старту + 1.
    """
    rows, cols = graph.rows, graph.cols
    visited = [[0] * cols for _ in range(rows)]
    start, end = Cell(*start), Cell(*end)

    queue = deque([start])
    visited[start.row][start.col] = 1

    while queue:
        current = queue.popleft()
        if current == end:
            return True, visited

        current_dist = visited[current.row][current.col]
        for neighbor in graph.neighbors(current):
            nr, nc = neighbor
            # Сусід має бути в межах, не стіною і ще не відвіданим
            if (graph.in_bounds(nr, nc) and maze_grid[nr][nc] != CELL_WALL
                    and visited[nr][nc] == 0):
                visited[nr][nc] = current_dist + 1
                queue.append(neighbor)

    return False, visited


def reconstruct_path(distance_map: list[list[int]], graph: GridGraph,
                     start: tuple[int, int], end: tuple[int, int]) -> list[Cell]:
    """
    Відновлює шлях, рухаючись від end до сусіда з відстанню на 1 меншою.
    Повертає клітинки в порядку від старту до кінця: без start, з end.
    """
    start, current = Cell(*start), Cell(*end)
    reversed_path: list[Cell] = []

    while current != start:
        reversed_path.append(current)
        current_dist = distance_map[current.row][current.col]
        for neighbor in graph.neighbors(current):
            if distance_map[neighbor.row][neighbor.col] == current_dist - 1:
                current = neighbor
                break
        else:
            raise ValueError(f"Distance map has no predecessor for cell {current}")

    reversed_path.reverse()
    return reversed_path


def solve_detailed(maze_grid: list[list[int]], graph: GridGraph,
                   start: tuple[int, int], end: tuple[int, int]) -> SolveResult:
    """Розв'язує лабіринт, позначає шлях у maze_grid і повертає всі подробиці."""
    started_at = time.perf_counter()
    found, distance_map = bfs(maze_grid, graph, start, end)
    visited_count = sum(1 for row in distance_map for value in row if value > 0)

    path: list[Cell] = []
    if found:
        path = reconstruct_path(distance_map, graph, start, end)
        for r, c in path:
            maze_grid[r][c] = CELL_PATH

    elapsed_ms = (time.perf_counter() - started_at) * 1000.0
    return SolveResult(found=found, path=path, distance_map=distance_map,
                       visited_count=visited_count, elapsed_ms=elapsed_ms)


def solve(maze_grid: list[list[int]], graph: GridGraph,
          start: tuple[int, int], end: tuple[int, int]) -> tuple[bool, list[list[int]]]:
    """
    Розв'язує лабіринт і позначає знайдений шлях значенням CELL_PATH.
    Якщо шляху немає, лабіринт не змінюється.
    """
    result = solve_detailed(maze_grid, graph, start, end)
    return result.found, maze_grid
