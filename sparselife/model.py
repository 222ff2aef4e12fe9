import operator

import torch

from .board import Board, BoundingBox, Coordinate, contains, corners, living_neighbors
from .constants import BIRTH_COUNT, DEFAULT_DEVICE, SURVIVE_COUNT


class InvalidIterationCount(ValueError):
    """Raised when an iteration count is not a non-negative integer."""


def will_be_alive(cell, board):
    n = len(living_neighbors(cell, board))
    alive = contains(board, cell)
    return (alive and n == SURVIVE_COUNT) or n == BIRTH_COUNT


def expanded_corners(board):
    """Bounding box of `board` grown by one cell on every side.

    Every cell that can change state in the next generation lies inside it.
    """
    bottom_left, top_right = corners(board)
    return BoundingBox(Coordinate(bottom_left.x - 1, bottom_left.y - 1),
                       Coordinate(top_right.x + 1, top_right.y + 1))


def calculate_next(board):
    """Return the generation that follows `board`. `board` is not modified."""
    bottom_left, top_right = expanded_corners(board)
    next_cells = []
    for y in range(bottom_left.y, top_right.y + 1):
        for x in range(bottom_left.x, top_right.x + 1):
            if will_be_alive((x, y), board):
                next_cells.append((x, y))
    return Board(next_cells)


def check_iterations(iterations):
    if isinstance(iterations, bool):
        raise InvalidIterationCount(f"iterations must be an integer, got {iterations!r}")
    try:
        iterations = operator.index(iterations)
    except TypeError:
        raise InvalidIterationCount(f"iterations must be an integer, got {iterations!r}") from None
    if iterations < 0:
        raise InvalidIterationCount(f"iterations must be non-negative, got {iterations}")
    return iterations


def iterate(board, iterations, step=calculate_next):
    """Apply `step` `iterations` times, returning every generation.

    The result starts with `board` itself and has `iterations + 1` entries.
    """
    iterations = check_iterations(iterations)
    boards = [board]
    for _ in range(iterations):
        board = step(board)
        boards.append(board)
    return boards


class GameOfLife:
    """Sparse Game of Life runner. Holds the current board and a generation counter."""

    def __init__(self, board=None):
        self.board = board if isinstance(board, Board) else Board(board or ())
        self.generation = 0

    def step(self, board):
        return calculate_next(board)

    def update(self):
        self.board = self.step(self.board)
        self.generation += 1

    def run(self, iterations):
        """Advance `iterations` generations and return all of them, current board first."""
        boards = iterate(self.board, iterations, step=self.step)
        self.board = boards[-1]
        self.generation += iterations
        return boards

    def get_board(self):
        return self.board


class DenseGameOfLife(GameOfLife):
    """Game of Life evaluated with a convolution over the board's bounding box.

    Each generation is copied into a zero tensor covering the expanded bounding
    box, neighbors are counted with a 3x3 kernel and the result is read back
    into a sparse Board. Cells outside the window are dead, so there is no
    wrap-around. Produces the same boards as GameOfLife.
    """

    def __init__(self, board=None, device=DEFAULT_DEVICE):
        super().__init__(board)
        self.device = device if torch.cuda.is_available() and device == 'cuda' else 'cpu'

        # Create convolution kernel for counting neighbors
        self.kernel = torch.tensor([
            [1, 1, 1],
            [1, 0, 1],
            [1, 1, 1]
        ], dtype=torch.float32, device=self.device).view(1, 1, 3, 3)

    def get_grid(self, board):
        """Return the expanded bounding-box window of `board` as a tensor.

        Row index is y - min y, column index is x - min x.
        """
        bottom_left, top_right = expanded_corners(board)
        height = top_right.y - bottom_left.y + 1
        width = top_right.x - bottom_left.x + 1
        grid = torch.zeros((height, width), dtype=torch.float32, device=self.device)
        if len(board) > 0:
            index = torch.tensor(
                [[y - bottom_left.y, x - bottom_left.x] for x, y in board],
                dtype=torch.long, device=self.device)
            grid[index[:, 0], index[:, 1]] = 1.0
        return grid, bottom_left

    def step(self, board):
        grid, origin = self.get_grid(board)
        height, width = grid.shape

        # Zero padding: everything beyond the window is dead
        neighbors = torch.nn.functional.conv2d(
            grid.view(1, 1, height, width),
            self.kernel,
            padding=1
        ).view(height, width)

        is_alive = (grid == 1.0)
        survives = is_alive & (neighbors == SURVIVE_COUNT)
        births = neighbors == BIRTH_COUNT

        live = (survives | births).nonzero(as_tuple=False).tolist()
        return Board((col + origin.x, row + origin.y) for row, col in live)
