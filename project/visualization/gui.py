import matplotlib.pyplot as plt
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
import tkinter as tk
from tkinter import ttk, messagebox, filedialog, Menu
from typing import Callable, Optional, TYPE_CHECKING
import traceback
if TYPE_CHECKING:
    from project.main import MazeSolverController

from .theme import get_palette, cell_color

try:
    from environment.maze import CELL_OPEN
except ImportError:
    print("Warning: Could not import constants from environment.maze. Using default values.")
    CELL_OPEN = 0


class PlotWindow(tk.Toplevel):
    """Окреме вікно для відображення графіка."""
    def __init__(self, master, title="Plot"):
        super().__init__(master)
        self.title(title)
        self.figure = plt.Figure(figsize=(8, 6), dpi=100)
        self.canvas = FigureCanvasTkAgg(self.figure, self)
        self.canvas_widget = self.canvas.get_tk_widget()
        self.canvas_widget.pack(side=tk.TOP, fill=tk.BOTH, expand=True)
        self.protocol("WM_DELETE_WINDOW", self.on_close)

    def on_close(self):
        self.figure.clear()
        self.destroy()


class MazeSolverGUI:
    """Клас для графічного інтерфейсу розв'язувача лабіринтів (BFS)."""

    def __init__(self, master: tk.Tk, config: dict, main_controller: 'MazeSolverController'):
        self.master = master
        self.main_controller = main_controller
        self.config = config
        self.master.title("Розв'язувач лабіринтів (BFS)")

        self._cell_size = config.get('CELL_SIZE_PX', 40)
        self._animation_delay_ms = max(1, int(config.get('ANIMATION_DELAY_MS', 30)))
        info_panel_width = config.get('INFO_PANEL_WIDTH_PX', 280)

        # Стан теми належить лише GUI
        self.dark_mode = bool(config.get('DARK_MODE', False))
        self.palette = get_palette(self.dark_mode)

        self.is_animating = False
        self._animation_job = None
        self._start = (0, 0)
        self._end = (0, 0)
        self._maze_grid: list[list[int]] = []

        self.style = ttk.Style(master)

        # --- Основні фрейми ---
        self.maze_frame = tk.Frame(master, bd=1, relief=tk.SUNKEN)
        self.maze_frame.pack(side=tk.LEFT, fill=tk.BOTH, expand=True, padx=5, pady=5)

        self.control_frame = tk.Frame(master, width=info_panel_width, bd=1, relief=tk.RAISED)
        self.control_frame.pack(side=tk.RIGHT, fill=tk.Y, padx=5, pady=5)
        self.control_frame.pack_propagate(False)

        # --- Канвас для лабіринту ---
        self.maze_canvas = tk.Canvas(self.maze_frame, highlightthickness=0)
        self.maze_canvas.pack(fill=tk.BOTH, expand=True)

        self._create_control_widgets(self.control_frame)
        self._create_menubar()
        self.apply_theme()

    def _create_menubar(self):
        """Створює головне меню програми."""
        menubar = Menu(self.master)
        self.master.config(menu=menubar)

        file_menu = Menu(menubar, tearoff=0)
        menubar.add_cascade(label="Файл", menu=file_menu)
        file_menu.add_command(label="Зберегти зображення лабіринту (PNG)", command=self._on_export_image)
        file_menu.add_command(label="Експортувати статистику (CSV)", command=self._on_export_statistics)
        file_menu.add_separator()
        file_menu.add_command(label="Вихід", command=self.master.quit)

        plots_menu = Menu(menubar, tearoff=0)
        menubar.add_cascade(label="Графіки", menu=plots_menu)
        plots_menu.add_command(label="Карта відстаней останнього пошуку", command=self._plot_distance_map)
        plots_menu.add_command(label="Історія розв'язань", command=self._plot_solve_history)

    def _create_control_widgets(self, parent_frame):
        """Створює віджети на панелі керування."""
        current_row = 0
        parent_frame.grid_columnconfigure(0, weight=1)

        # --- Керування ---
        control_box = ttk.LabelFrame(parent_frame, text="Панель управління", padding=(5, 5))
        control_box.grid(row=current_row, column=0, sticky="ew", padx=5, pady=5); current_row += 1
        control_box.columnconfigure(0, weight=1)
        self.solve_button = ttk.Button(control_box, text="Розв'язати лабіринт", command=self._on_solve)
        self.solve_button.grid(row=0, column=0, sticky="ew", pady=2)
        self.randomize_button = ttk.Button(control_box, text="Випадковий лабіринт", command=self._on_randomize)
        self.randomize_button.grid(row=1, column=0, sticky="ew", pady=2)
        self.clear_path_button = ttk.Button(control_box, text="Очистити шлях", command=self._on_clear_path)
        self.clear_path_button.grid(row=2, column=0, sticky="ew", pady=2)

        # --- Налаштування Лабіринту ---
        settings_frame = ttk.LabelFrame(parent_frame, text="Налаштування", padding=(5, 5))
        settings_frame.grid(row=current_row, column=0, sticky="ew", padx=5, pady=5); current_row += 1
        settings_frame.columnconfigure(1, weight=1)

        ttk.Label(settings_frame, text="Seed:").grid(row=0, column=0, sticky="w", padx=(0, 5), pady=2)
        initial_seed_value = self.config.get("MAZE_SEED", "")
        self.seed_var = tk.StringVar(value=str(initial_seed_value) if initial_seed_value is not None else "")
        self.seed_entry = ttk.Entry(settings_frame, textvariable=self.seed_var, width=15)
        self.seed_entry.grid(row=0, column=1, sticky="ew", padx=2, pady=2)

        self.new_maze_button = ttk.Button(settings_frame, text="Згенерувати новий лабіринт", command=self._on_new_maze)
        self.new_maze_button.grid(row=1, column=0, columnspan=2, sticky="ew", pady=(5, 2))

        self.dark_mode_var = tk.BooleanVar(value=self.dark_mode)
        self.dark_mode_check = ttk.Checkbutton(settings_frame, text="Темна тема", variable=self.dark_mode_var,
                                               command=self._on_toggle_dark_mode)
        self.dark_mode_check.grid(row=2, column=0, columnspan=2, sticky="w", pady=(5, 2))

        # --- Статистика ---
        stats_frame = ttk.LabelFrame(parent_frame, text="Статистика", padding=(5, 5))
        stats_frame.grid(row=current_row, column=0, sticky="ew", padx=5, pady=5); current_row += 1
        self.maze_label = ttk.Label(stats_frame, text="Лабіринт: N/A")
        self.maze_label.pack(anchor=tk.W)
        self.path_length_label = ttk.Label(stats_frame, text="Довжина шляху: N/A")
        self.path_length_label.pack(anchor=tk.W)
        self.visited_label = ttk.Label(stats_frame, text="Відвідано клітинок: N/A")
        self.visited_label.pack(anchor=tk.W)
        self.time_label = ttk.Label(stats_frame, text="Час пошуку: N/A")
        self.time_label.pack(anchor=tk.W)
        self.solves_label = ttk.Label(stats_frame, text="Розв'язань: 0")
        self.solves_label.pack(anchor=tk.W)

    # --- Тема ---

    def _on_toggle_dark_mode(self):
        self.dark_mode = bool(self.dark_mode_var.get())
        self.apply_theme()

    def apply_theme(self):
        """Застосовує поточну палітру до всіх віджетів та перемальовує лабіринт."""
        self.palette = get_palette(self.dark_mode)
        background = self.palette["background"]
        foreground = self.palette["foreground"]
        panel = self.palette["panel"]

        self.master.configure(bg=background)
        self.maze_frame.configure(bg=background)
        self.maze_canvas.configure(bg=background)
        self.control_frame.configure(bg=panel)
        self.style.configure("TLabelframe", background=panel)
        self.style.configure("TLabelframe.Label", background=panel, foreground=foreground)
        self.style.configure("TLabel", background=panel, foreground=foreground)
        self.style.configure("TCheckbutton", background=panel, foreground=foreground)
        self.style.configure("TFrame", background=panel)

        if self._maze_grid:
            self.cancel_animation()
            self._redraw_current(hidden_cells=None)

    # --- Малювання ---

    def draw_maze(self, maze_grid: list[list[int]], start: tuple[int, int], end: tuple[int, int],
                  cell_size: Optional[int] = None, hidden_cells: Optional[set] = None,
                  current: Optional[tuple[int, int]] = None):
        """Малює лабіринт на канвасі. Клітинки з hidden_cells малюються як прохід."""
        if cell_size is not None:
            self._cell_size = cell_size
        cell_size = self._cell_size
        self._maze_grid = maze_grid
        self._start, self._end = tuple(start), tuple(end)
        self.maze_canvas.delete("maze")

        height = len(maze_grid)
        width = len(maze_grid[0]) if height > 0 else 0
        if width == 0: return

        canvas_width = width * cell_size
        canvas_height = height * cell_size
        self.maze_canvas.config(scrollregion=(0, 0, canvas_width, canvas_height),
                                width=canvas_width, height=canvas_height)

        hidden_cells = hidden_cells or set()
        for r in range(height):
            for c in range(width):
                x1, y1 = c * cell_size, r * cell_size
                x2, y2 = x1 + cell_size, y1 + cell_size
                cell_type = CELL_OPEN if (r, c) in hidden_cells else maze_grid[r][c]
                fill_color = cell_color(self.palette, cell_type, (r, c), self._start, self._end, current)
                self.maze_canvas.create_rectangle(x1, y1, x2, y2,
                                                  fill=fill_color,
                                                  outline=self.palette["border"],
                                                  tags=("maze", f"cell_{r}_{c}"))

    def _redraw_current(self, hidden_cells: Optional[set]):
        self.draw_maze(self._maze_grid, self._start, self._end, hidden_cells=hidden_cells)

    def _paint_cell(self, cell: tuple[int, int], color: str):
        self.maze_canvas.itemconfigure(f"cell_{cell[0]}_{cell[1]}", fill=color)

    def animate_path(self, path: list[tuple[int, int]], on_done: Optional[Callable[[], None]] = None):
        """
        Поступово показує знайдений шлях від старту до фінішу.
        Сам лабіринт уже містить позначки шляху, тут лише темп відображення.
        """
        self.cancel_animation()
        path = [tuple(cell) for cell in path]
        self._redraw_current(hidden_cells=set(path))
        if not path:
            if on_done: on_done()
            return

        self.is_animating = True
        self.set_controls_state(busy=True)

        def step(index: int, previous: Optional[tuple[int, int]]):
            if not self.is_animating:
                return
            if previous is not None:
                self._paint_cell(previous, self.palette["path"])
            if index >= len(path):
                self._animation_job = None
                self.is_animating = False
                self.set_controls_state(busy=False)
                if on_done: on_done()
                return
            # Голова шляху малюється кольором поточної клітинки
            self._paint_cell(path[index], self.palette["current"])
            self._animation_job = self.master.after(self._animation_delay_ms, step, index + 1, path[index])

        step(0, None)

    def cancel_animation(self):
        if self._animation_job is not None:
            try:
                self.master.after_cancel(self._animation_job)
            except tk.TclError:
                pass
            self._animation_job = None
        if self.is_animating:
            self.is_animating = False
            self.set_controls_state(busy=False)

    def set_controls_state(self, busy: bool):
        """Блокує кнопки під час анімації."""
        state = tk.DISABLED if busy else tk.NORMAL
        for widget in (self.solve_button, self.randomize_button, self.clear_path_button, self.new_maze_button):
            widget.config(state=state)

    # --- Статистика ---

    def update_stats(self, maze_label: str, result=None, total_solves: int = 0):
        self.maze_label.config(text=f"Лабіринт: {maze_label}")
        if result is None:
            self.path_length_label.config(text="Довжина шляху: N/A")
            self.visited_label.config(text="Відвідано клітинок: N/A")
            self.time_label.config(text="Час пошуку: N/A")
        else:
            length_text = str(result.path_length) if result.found else "шлях не знайдено"
            self.path_length_label.config(text=f"Довжина шляху: {length_text}")
            self.visited_label.config(text=f"Відвідано клітинок: {result.visited_count}")
            self.time_label.config(text=f"Час пошуку: {result.elapsed_ms:.2f} мс")
        self.solves_label.config(text=f"Розв'язань: {total_solves}")

    def show_no_path(self):
        messagebox.showinfo("Результат", "Шлях не знайдено!")

    # --- Обробники кнопок ---

    def _on_solve(self):
        if self.is_animating:
            return
        if not self.main_controller:
            print("Помилка: Відсутній головний контролер (main_controller).")
            return
        try:
            self.main_controller.solve_maze()
        except Exception as e:
            messagebox.showerror("Solve Error", f"Could not solve maze:\n{e}")
            print(f"Error solving maze: {e}")
            traceback.print_exc()

    def _on_randomize(self):
        if self.is_animating:
            return
        if not self.main_controller:
            print("Помилка: Відсутній головний контролер (main_controller).")
            return
        try:
            self.main_controller.randomize_maze()
        except Exception as e:
            messagebox.showerror("Maze Error", f"Could not load random maze:\n{e}")
            print(f"Error loading random maze: {e}")
            traceback.print_exc()

    def _on_clear_path(self):
        if self.is_animating or not self.main_controller:
            return
        try:
            self.main_controller.reset_maze()
        except Exception as e:
            messagebox.showerror("Maze Error", f"Could not clear path:\n{e}")
            print(f"Error clearing path: {e}")
            traceback.print_exc()

    def _on_new_maze(self):
        if self.is_animating:
            messagebox.showwarning("Анімація активна", "Дочекайтеся завершення анімації шляху.")
            return
        if not self.main_controller:
            print("Помилка: Відсутній головний контролер (main_controller).")
            return

        seed_str = self.seed_var.get().strip()
        seed = None
        if seed_str:
            try: seed = int(seed_str)
            except ValueError:
                messagebox.showerror("Invalid Seed", f"Cannot parse seed: '{seed_str}'. Using random.")
                self.seed_var.set("")

        new_seed_used = self.main_controller.generate_new_maze(seed)
        if new_seed_used is not None:
            self.seed_var.set(str(new_seed_used))

    def _on_export_image(self):
        filepath = filedialog.asksaveasfilename(
            defaultextension=".png",
            filetypes=[("PNG Files", "*.png"), ("All Files", "*.*")],
            title="Зберегти зображення лабіринту"
        )
        if not filepath:
            return
        try:
            self.main_controller.export_maze_image(filepath, palette=self.palette)
            messagebox.showinfo("Success", f"Maze image saved to {filepath}")
        except Exception as e:
            messagebox.showerror("Export Error", f"Failed to save image:\n{e}")
            traceback.print_exc()

    def _on_export_statistics(self):
        filepath = filedialog.asksaveasfilename(
            defaultextension=".csv",
            filetypes=[("CSV Files", "*.csv"), ("All Files", "*.*")],
            title="Експортувати статистику в CSV файл"
        )
        if not filepath:
            return
        try:
            self.main_controller.export_statistics(filepath)
            messagebox.showinfo("Success", f"Statistics exported to {filepath}")
        except Exception as e:
            messagebox.showerror("Export Error", f"Failed to export statistics:\n{e}")
            traceback.print_exc()

    # --- Графіки ---

    def _plot_distance_map(self):
        result = self.main_controller.last_result if self.main_controller else None
        if result is None:
            messagebox.showinfo("Немає даних", "Спочатку розв'яжіть лабіринт.")
            return
        from analysis.solve_statistics import plot_distance_map
        plot_win = PlotWindow(self.master, title="Карта відстаней BFS")
        plot_distance_map(result.distance_map, path=result.path, figure=plot_win.figure)
        plot_win.canvas.draw()

    def _plot_solve_history(self):
        history = self.main_controller.history if self.main_controller else None
        if not history:
            messagebox.showinfo("Немає даних", "Немає даних про розв'язання для побудови графіка.")
            return
        plot_win = PlotWindow(self.master, title="Історія розв'язань")
        history.plot_history(figure=plot_win.figure)
        plot_win.canvas.draw()
