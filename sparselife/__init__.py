"""
Conway's Game of Life on an unbounded sparse grid, rendered as text
"""

from .board import Board, BoundingBox, Coordinate, contains, corners, living_neighbors, neighbors_of, seed
from .model import (DenseGameOfLife, GameOfLife, InvalidIterationCount, calculate_next,
                    iterate, will_be_alive)
from .patterns import PATTERNS, get_pattern
from .view import get_grid, print_cell, print_cells, render_generations
from .constants import *

__version__ = "0.1.0"
