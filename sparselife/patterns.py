from .board import seed

# Starting patterns, as literal (x, y) coordinates
PATTERNS = {
    'rpentomino': [
        (3, 2),
        (2, 3),
        (3, 3),
        (3, 4),
        (4, 4),
    ],
    'glider': [
        (-2, -2),
        (-1, -2),
        (-2, -1),
        (-1, -1),
        (1, 1),
        (2, 1),
        (3, 1),
        (3, 2),
        (2, 3),
    ],
    'square': [
        (1, 1),
        (2, 1),
        (1, 2),
        (2, 2),
    ],
    'blinker': [
        (1, 0),
        (1, 1),
        (1, 2),
    ],
}


def get_pattern(name):
    """Return the named starting pattern as a Board. Raises KeyError for unknown names."""
    return seed(*PATTERNS[name])
