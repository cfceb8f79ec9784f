import os
from datetime import datetime
from typing import Dict, List, Optional

import matplotlib.pyplot as plt
import pandas as pd

COLUMNS = ["timestamp", "maze_label", "rows", "cols", "found",
           "path_length", "visited_cells", "elapsed_ms"]


class SolveHistory:
    """Клас для збору та аналізу статистики розв'язань лабіринтів."""

    def __init__(self, limit: Optional[int] = 500):
        self.limit = limit
        self.records: List[Dict] = []

    def __len__(self) -> int:
        return len(self.records)

    def record(self, maze_label: str, rows: int, cols: int, found: bool,
               path_length: int, visited_cells: int, elapsed_ms: float) -> Dict:
        """Додає запис про одне розв'язання. Найстаріші записи відкидаються після ліміту."""
        entry = {
            "timestamp": datetime.now().isoformat(timespec="seconds"),
            "maze_label": maze_label,
            "rows": rows,
            "cols": cols,
            "found": bool(found),
            "path_length": path_length,
            "visited_cells": visited_cells,
            "elapsed_ms": float(elapsed_ms),
        }
        self.records.append(entry)
        if self.limit is not None and self.limit > 0 and len(self.records) > self.limit:
            del self.records[:len(self.records) - self.limit]
        return entry

    def record_result(self, maze, result) -> Dict:
        """Зручна обгортка: запис з об'єктів Maze та SolveResult."""
        return self.record(maze.label, maze.rows, maze.cols, result.found,
                           result.path_length, result.visited_count, result.elapsed_ms)

    def clear(self):
        self.records.clear()

    def to_dataframe(self) -> pd.DataFrame:
        """Повертає історію як DataFrame."""
        return pd.DataFrame(self.records, columns=COLUMNS)

    def summary(self) -> Dict:
        """Зведена статистика по всіх розв'язаннях."""
        df = self.to_dataframe()
        if df.empty:
            return {"total_solves": 0, "found": 0, "not_found": 0,
                    "avg_path_length": None, "avg_visited_cells": None, "avg_elapsed_ms": None}

        solved = df[df["found"]]
        return {
            "total_solves": int(len(df)),
            "found": int(len(solved)),
            "not_found": int(len(df) - len(solved)),
            "avg_path_length": float(solved["path_length"].mean()) if not solved.empty else None,
            "avg_visited_cells": float(df["visited_cells"].mean()),
            "avg_elapsed_ms": float(df["elapsed_ms"].mean()),
        }

    def per_maze_summary(self) -> pd.DataFrame:
        """Середні показники, згруповані за лабіринтом."""
        df = self.to_dataframe()
        if df.empty:
            return pd.DataFrame(columns=["maze_label", "solves", "path_length", "visited_cells", "elapsed_ms"])
        grouped = df.groupby("maze_label").agg(
            solves=("found", "size"),
            path_length=("path_length", "mean"),
            visited_cells=("visited_cells", "mean"),
            elapsed_ms=("elapsed_ms", "mean"),
        )
        return grouped.reset_index()

    def export_csv(self, filepath: str) -> str:
        """Експортує історію в CSV."""
        directory = os.path.dirname(filepath)
        if directory:
            os.makedirs(directory, exist_ok=True)
        self.to_dataframe().to_csv(filepath, index=False, encoding="utf-8")
        print(f"Solve history exported to {filepath}")
        return filepath

    def plot_history(self, save_path: Optional[str] = None, figure=None):
        """
        Малює довжину шляху та кількість відвіданих клітинок для кожного розв'язання.
        Якщо передано figure (наприклад, з PlotWindow), малює в неї.
        """
        df = self.to_dataframe()
        fig = figure if figure is not None else plt.figure(figsize=(10, 5))
        fig.clear()
        ax = fig.add_subplot(111)

        if df.empty:
            ax.set_title('Немає даних про розв\'язання')
        else:
            solve_numbers = range(1, len(df) + 1)
            ax.plot(solve_numbers, df['visited_cells'], label='Відвідані клітинки', linewidth=2)
            ax.plot(solve_numbers, df['path_length'], label='Довжина шляху', linewidth=2)
            failed = df[~df['found']]
            if not failed.empty:
                ax.scatter(failed.index + 1, failed['visited_cells'], color='red',
                           label='Шлях не знайдено', zorder=3)
            ax.set_xlabel('Номер розв\'язання')
            ax.set_ylabel('Клітинки')
            ax.set_title('Історія розв\'язань BFS')
            ax.legend()
            ax.grid(True, alpha=0.3)

        if save_path:
            fig.savefig(save_path, dpi=100, bbox_inches='tight')
            print(f"Plot saved to {save_path}")
        return fig


def plot_distance_map(distance_map: list[list[int]], path=None, figure=None,
                      save_path: Optional[str] = None):
    """Теплова карта BFS-відстаней. Невідвідані клітинки не зафарбовуються."""
    fig = figure if figure is not None else plt.figure(figsize=(8, 6))
    fig.clear()
    ax = fig.add_subplot(111)

    if not distance_map:
        ax.set_title('Немає карти відстаней')
    else:
        # 0 = не відвідано, решта = відстань + 1
        data = pd.DataFrame(distance_map).astype(float)
        data = data.where(data > 0) - 1
        image = ax.imshow(data.to_numpy(), cmap='viridis', interpolation='nearest')
        cbar = fig.colorbar(image, ax=ax)
        cbar.set_label('Відстань від старту')
        if path:
            rows = [cell[0] for cell in path]
            cols = [cell[1] for cell in path]
            ax.plot(cols, rows, color='red', linewidth=2, label='Шлях')
            ax.legend(loc='upper right')
        ax.set_title('Карта відстаней BFS')
        ax.set_xlabel('Стовпець')
        ax.set_ylabel('Рядок')

    if save_path:
        fig.savefig(save_path, dpi=100, bbox_inches='tight')
        print(f"Plot saved to {save_path}")
    return fig
