import pytest

from sparselife.board import (Board, BoundingBox, Coordinate, contains, corners,
                              living_neighbors, neighbors_of, seed)


def test_seed_removes_duplicates():
    board = seed((1, 1), (1, 1), (2, 1))
    assert len(board) == 2
    assert board == {(1, 1), (2, 1)}


def test_board_defaults_to_empty():
    assert len(Board()) == 0
    assert Board() == seed()


def test_board_iterates_in_ascending_order():
    board = seed((2, 0), (0, 5), (0, -1), (1, 1))
    assert list(board) == [(0, -1), (0, 5), (1, 1), (2, 0)]


def test_board_equality_ignores_input_order():
    assert seed((0, 0), (1, 2), (3, 4)) == seed((3, 4), (0, 0), (1, 2))
    assert hash(seed((0, 0), (1, 2))) == hash(seed((1, 2), (0, 0)))


def test_board_rejects_non_integer_coordinates():
    with pytest.raises(TypeError):
        seed((0.5, 1))


def test_contains_compares_components():
    board = seed((1, 2), (-3, 4))
    assert contains(board, (1, 2))
    assert contains(board, Coordinate(-3, 4))
    assert not contains(board, (2, 1))
    assert not contains(Board(), (0, 0))


def test_neighbors_of_enumeration_order():
    assert neighbors_of((0, 0)) == [
        (-1, -1), (0, -1), (1, -1),
        (-1, 0), (1, 0),
        (-1, 1), (0, 1), (1, 1),
    ]


def test_neighbors_of_offsets_from_cell():
    neighbors = neighbors_of((5, -3))
    assert len(neighbors) == 8
    assert (5, -3) not in neighbors
    assert all(max(abs(x - 5), abs(y + 3)) == 1 for x, y in neighbors)


def test_living_neighbors_keeps_enumeration_order():
    board = seed((1, 1), (-1, -1), (0, 0), (5, 5))
    assert living_neighbors((0, 0), board) == [(-1, -1), (1, 1)]


def test_corners_of_empty_board_is_origin():
    assert corners(Board()) == BoundingBox((0, 0), (0, 0))
    assert corners() == ((0, 0), (0, 0))


def test_corners_spans_live_cells():
    box = corners(seed((-2, -2), (3, 1), (2, 3)))
    assert box.bottom_left == (-2, -2)
    assert box.top_right == (3, 3)


def test_corners_of_single_cell():
    assert corners(seed((4, -7))) == ((4, -7), (4, -7))
