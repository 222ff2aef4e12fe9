import operator
from collections import namedtuple

from .constants import EMPTY_CORNER, NEIGHBOR_OFFSETS

Coordinate = namedtuple('Coordinate', ['x', 'y'])
BoundingBox = namedtuple('BoundingBox', ['bottom_left', 'top_right'])


class Board:
    """An immutable set of live cells on an unbounded integer grid.

    Only live cells are stored, keyed by (x, y), so the grid has no size.
    Iterating a board yields its cells in ascending (x, y) order.
    """

    __slots__ = ('_cells',)

    def __init__(self, cells=()):
        self._cells = frozenset(Coordinate(operator.index(x), operator.index(y)) for x, y in cells)

    def __contains__(self, cell):
        return tuple(cell) in self._cells

    def __iter__(self):
        return iter(sorted(self._cells))

    def __len__(self):
        return len(self._cells)

    def __eq__(self, other):
        if isinstance(other, Board):
            return self._cells == other._cells
        if isinstance(other, (set, frozenset)):
            return self._cells == other
        return NotImplemented

    def __hash__(self):
        return hash(self._cells)

    def __repr__(self):
        return f"Board({[tuple(cell) for cell in self]})"

    @property
    def cells(self):
        return self._cells


def seed(*cells):
    """Create a board from literal (x, y) pairs."""
    return Board(cells)


def contains(board, cell):
    return cell in board


def neighbors_of(cell):
    x, y = cell
    return [Coordinate(x + dx, y + dy) for dx, dy in NEIGHBOR_OFFSETS]


def living_neighbors(cell, board):
    return [neighbor for neighbor in neighbors_of(cell) if contains(board, neighbor)]


def corners(board=None):
    """Return the bounding box of the live cells of `board`.

    An empty board collapses to the origin, (0, 0)-(0, 0).
    """
    if not board:
        return BoundingBox(Coordinate(*EMPTY_CORNER), Coordinate(*EMPTY_CORNER))

    xs = [x for x, _ in board]
    ys = [y for _, y in board]
    return BoundingBox(Coordinate(min(xs), min(ys)), Coordinate(max(xs), max(ys)))
