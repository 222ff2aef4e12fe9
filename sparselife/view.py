import numpy as np

from .board import contains, corners
from .constants import ALIVE_GLYPH, CELL_SEPARATOR, DEAD_GLYPH, ROW_SEPARATOR

__all__ = ['corners', 'get_grid', 'print_cell', 'print_cells', 'render_generations']


def print_cell(cell, board, alive=ALIVE_GLYPH, dead=DEAD_GLYPH):
    return alive if contains(board, cell) else dead


def get_grid(board):
    """
    Convert a sparse board into a dense grid covering its bounding box.

    Args:
        board: A Board (or any collection of (x, y) pairs)

    Returns:
        A uint8 array of shape (height, width). Row 0 holds the highest y,
        column 0 the lowest x. An empty board gives a single dead cell.
    """
    bottom_left, top_right = corners(board)
    width = top_right.x - bottom_left.x + 1
    height = top_right.y - bottom_left.y + 1

    grid = np.zeros((height, width), dtype=np.uint8)
    for x, y in board:
        grid[top_right.y - y, x - bottom_left.x] = 1
    return grid


def print_cells(board, alive=ALIVE_GLYPH, dead=DEAD_GLYPH):
    """Render a board as rows of glyphs, highest y first, separated by spaces."""
    bottom_left, top_right = corners(board)
    rows = []
    for y in range(top_right.y, bottom_left.y - 1, -1):
        rows.append(CELL_SEPARATOR.join(
            print_cell((x, y), board, alive=alive, dead=dead)
            for x in range(bottom_left.x, top_right.x + 1)))
    return ROW_SEPARATOR.join(rows)


def render_generations(boards, alive=ALIVE_GLYPH, dead=DEAD_GLYPH):
    return [print_cells(board, alive=alive, dead=dead) for board in boards]
