"""
Game constants for the snake game.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

OPPOSITES = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# (dx, dy) per direction; y grows downward
DELTAS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

# Board settings
CANVAS_SIZE = 400  # pixels
CELL_SIZE = 20     # pixels per cell
GRID_WIDTH = CANVAS_SIZE // CELL_SIZE
GRID_HEIGHT = CANVAS_SIZE // CELL_SIZE

# Initial game configuration
INITIAL_SNAKE = [(8, 8)]
INITIAL_FOOD = (15, 15)
INITIAL_DIRECTION = RIGHT
TICK_INTERVAL_MS = 150

# Engine states
RUNNING = "running"
GAME_OVER = "game_over"

# Tick outcomes
MOVED = "moved"
ATE = "ate"
WALL_COLLISION = "wall"
SELF_COLLISION = "self"
HALTED = "halted"
