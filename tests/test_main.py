import pytest

from main import main, parse_iterations
from sparselife.constants import ALIVE_GLYPH, USAGE
from sparselife.model import iterate
from sparselife.patterns import get_pattern
from sparselife.view import print_cells

A = ALIVE_GLYPH


def test_parse_iterations():
    assert parse_iterations("50") == 50
    assert parse_iterations("0") == 0
    assert parse_iterations("-1") is None
    assert parse_iterations("ten") is None
    assert parse_iterations(None) is None


def test_square_prints_every_generation(capsys):
    assert main(["square", "2"]) == 0
    block = f"{A} {A}\n{A} {A}\n"
    assert capsys.readouterr().out == block * 3


def test_zero_iterations_prints_initial_board(capsys):
    assert main(["blinker", "0"]) == 0
    assert capsys.readouterr().out == f"{A}\n{A}\n{A}\n"


def test_output_matches_renderer(capsys):
    main(["rpentomino", "5"])
    expected = "".join(print_cells(board) + "\n" for board in iterate(get_pattern("rpentomino"), 5))
    assert capsys.readouterr().out == expected


def test_dense_engine_output_matches_sparse(capsys):
    main(["glider", "6"])
    sparse = capsys.readouterr().out
    main(["glider", "6", "--engine", "dense", "--device", "cpu"])
    assert capsys.readouterr().out == sparse


@pytest.mark.parametrize("argv", [
    [],
    ["square"],
    ["spaceship", "3"],
    ["square", "-1"],
    ["square", "many"],
    ["square", "2", "3"],
    ["square", "2", "--engine", "fast"],
    ["square", "2", "--device", "tpu"],
    ["square", "2", "--frames"],
])
def test_invalid_input_prints_usage(capsys, argv):
    assert main(argv) == 1
    assert capsys.readouterr().out == USAGE + "\n"


def test_verbose_prints_summary(capsys):
    main(["square", "1", "--verbose"])
    out = capsys.readouterr().out
    assert "PyTorch version" not in out
    assert "Pattern: square, Iterations: 1, Engine: sparse" in out
    assert out.rstrip().endswith("Live Cells: 4")


def test_verbose_dense_engine_prints_torch_configuration(capsys):
    main(["square", "1", "--engine", "dense", "--verbose"])
    out = capsys.readouterr().out
    assert "PyTorch version" in out
    assert "Pattern: square, Iterations: 1, Engine: dense" in out
