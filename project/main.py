import importlib
import random
import tkinter as tk
from tkinter import messagebox
from typing import Optional

try:
    import config as cfg
except ImportError:
    print("ERROR: config.py not found. Make sure it's in the project root.")
    exit()

from environment.maze import Maze
from pathfinding.grid_graph import build_graph
from pathfinding.bfs_solver import SolveResult, solve_detailed
from analysis.solve_statistics import SolveHistory
from visualization.gui import MazeSolverGUI
from visualization.maze_image import save_maze_image


class MazeSolverController:
    def __init__(self, master: tk.Tk):
        self.master = master
        self.config = self._load_config()
        self._rng = random.Random()

        self.history = SolveHistory(limit=self.config.get('SOLVE_HISTORY_LIMIT', 500))
        self.last_result: Optional[SolveResult] = None

        if self.config.get('START_ON_PRESET'):
            self.maze = Maze.random_preset(self._rng)
        else:
            self.maze = Maze.empty(self.config['MAZE_ROWS'], self.config['MAZE_COLS'])
        self.graph = build_graph(self.maze.rows, self.maze.cols)

        self.gui = MazeSolverGUI(master, self.config, self)
        self._redraw_maze()
        self._update_gui_stats()

    def _load_config(self) -> dict:
        """Завантажує конфігурацію з config.py."""
        try:
            importlib.reload(cfg)
            config_dict = {key: getattr(cfg, key) for key in dir(cfg) if not key.startswith('_')}
        except Exception as e:
            print(f"ERROR loading config.py: {e}")
            config_dict = {}

        config_dict.setdefault('MAZE_ROWS', 10)
        config_dict.setdefault('MAZE_COLS', 13)
        config_dict.setdefault('GENERATED_MAZE_ROWS', 15)
        config_dict.setdefault('GENERATED_MAZE_COLS', 21)
        config_dict.setdefault('MAZE_SEED', None)
        config_dict.setdefault('CELL_SIZE_PX', 40)
        config_dict.setdefault('ANIMATION_DELAY_MS', 30)
        config_dict.setdefault('DARK_MODE', False)
        return config_dict

    def _redraw_maze(self, hidden_cells: Optional[set] = None):
        """Перемальовує лабіринт на GUI."""
        self.gui.draw_maze(self.maze.grid, self.maze.start_pos, self.maze.end_pos,
                           self.config.get('CELL_SIZE_PX', 40), hidden_cells=hidden_cells)

    def _update_gui_stats(self):
        self.gui.update_stats(self.maze.label, self.last_result, len(self.history))

    def _set_maze(self, maze: Maze):
        """Встановлює новий лабіринт і перебудовує граф."""
        self.gui.cancel_animation()
        self.maze = maze
        self.graph = build_graph(maze.rows, maze.cols)
        self.last_result = None
        print(f"Info: Maze '{maze.label}' loaded ({maze.rows}x{maze.cols}), start={maze.start_pos}, end={maze.end_pos}")
        self._redraw_maze()
        self._update_gui_stats()

    def solve_maze(self) -> SolveResult:
        """Шукає найкоротший шлях і запускає його анімацію."""
        # Позначки попереднього розв'язку не повинні впливати на новий
        self.maze.clear_path()
        result = solve_detailed(self.maze.grid, self.graph, self.maze.start_pos, self.maze.end_pos)
        self.last_result = result
        self.history.record_result(self.maze, result)
        self._update_gui_stats()

        if result.found:
            print(f"Info: Path found, length {result.path_length}, visited {result.visited_count} cells "
                  f"in {result.elapsed_ms:.2f} ms")
            self.gui.animate_path(result.path)
        else:
            print(f"Info: No path in maze '{self.maze.label}' (visited {result.visited_count} cells)")
            self._redraw_maze()
            self.gui.show_no_path()
        return result

    def randomize_maze(self) -> Maze:
        """Обирає випадковий заготовлений лабіринт."""
        self._set_maze(Maze.random_preset(self._rng))
        return self.maze

    def generate_new_maze(self, seed: Optional[int] = None) -> Optional[int]:
        """Генерує новий лабіринт. Повертає використаний seed або None при помилці."""
        try:
            maze = Maze.generate(self.config['GENERATED_MAZE_ROWS'], self.config['GENERATED_MAZE_COLS'], seed)
        except ValueError as e:
            print(f"Error generating maze: {e}")
            messagebox.showerror("Maze Error", f"Could not generate maze:\n{e}")
            return None
        self.config['MAZE_SEED'] = maze.seed
        self._set_maze(maze)
        return maze.seed

    def reset_maze(self):
        """Прибирає позначки шляху з поточного лабіринту."""
        self.gui.cancel_animation()
        self.maze.clear_path()
        self.last_result = None
        self._redraw_maze()
        self._update_gui_stats()

    def export_maze_image(self, filepath: str, palette: Optional[dict] = None) -> str:
        return save_maze_image(filepath, self.maze.grid, self.maze.start_pos, self.maze.end_pos,
                               cell_size=self.config.get('CELL_SIZE_PX', 40), palette=palette)

    def export_statistics(self, filepath: str) -> str:
        return self.history.export_csv(filepath)


def main():
    root = tk.Tk()
    try:
        MazeSolverController(root)
        root.mainloop()
    except Exception as e:
        print(f"\n--- Unhandled Exception ---")
        import traceback
        traceback.print_exc()
        print(f"---------------------------\n")
        try:
            messagebox.showerror("Fatal Error", f"An unexpected error occurred:\n{e}\n\nCheck console output.")
        except tk.TclError:
            pass


if __name__ == "__main__":
    main()
