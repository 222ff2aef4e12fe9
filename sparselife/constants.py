# Rendering glyphs
ALIVE_GLYPH = '\u25a3'  # filled square
DEAD_GLYPH = '\u25a2'   # hollow square
CELL_SEPARATOR = ' '
ROW_SEPARATOR = '\n'

# Default simulation parameters
DEFAULT_PATTERN = 'rpentomino'
DEFAULT_ITERATIONS = 50
DEFAULT_ENGINE = 'sparse'
DEFAULT_DEVICE = 'cpu'
ENGINES = ('sparse', 'dense')

# Bounding box of an empty board
EMPTY_CORNER = (0, 0)

# Neighbor offsets, in enumeration order (dx, dy)
NEIGHBOR_OFFSETS = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0),           (1, 0),
    (-1, 1),  (0, 1),  (1, 1),
)

# Conway's rule
SURVIVE_COUNT = 2
BIRTH_COUNT = 3

USAGE = f"Usage: sparse-life {DEFAULT_PATTERN} {DEFAULT_ITERATIONS}"
