# --- Параметри лабіринту ---
# Порожній лабіринт, який відкривається при старті
MAZE_ROWS = 10
MAZE_COLS = 13
START_ON_PRESET = False

# Розміри лабіринту для генератора (Recursive Backtracking)
GENERATED_MAZE_ROWS = 15
GENERATED_MAZE_COLS = 21
# Перевірка на непарність
if GENERATED_MAZE_ROWS % 2 == 0: GENERATED_MAZE_ROWS += 1
if GENERATED_MAZE_COLS % 2 == 0: GENERATED_MAZE_COLS += 1
GENERATED_MAZE_ROWS = max(5, GENERATED_MAZE_ROWS)
GENERATED_MAZE_COLS = max(5, GENERATED_MAZE_COLS)
MAZE_SEED = None

# --- Параметри візуалізації ---
CELL_SIZE_PX = 40
INFO_PANEL_WIDTH_PX = 280
ANIMATION_DELAY_MS = 30
DARK_MODE = False

# --- Статистика ---
SOLVE_HISTORY_LIMIT = 500
