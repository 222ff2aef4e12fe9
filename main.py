import argparse

import torch

from sparselife.constants import DEFAULT_DEVICE, DEFAULT_ENGINE, ENGINES, USAGE
from sparselife.model import DenseGameOfLife, GameOfLife
from sparselife.patterns import PATTERNS, get_pattern
from sparselife.view import print_cells


def print_device_info():
    """Print information about the torch configuration used by the dense engine."""
    print("\n=== Torch Configuration ===")
    print(f"PyTorch version: {torch.__version__}")
    print(f"CUDA available: {torch.cuda.is_available()}")
    print(f"CUDA version: {torch.version.cuda if torch.cuda.is_available() else 'N/A'}")
    if torch.cuda.is_available():
        print(f"GPU device name: {torch.cuda.get_device_name(0)}")
    print("===========================\n")


def parse_iterations(text):
    """Return `text` as a non-negative int, or None if it is not one."""
    try:
        iterations = int(text)
    except (TypeError, ValueError):
        return None
    return iterations if iterations >= 0 else None


class UsageError(Exception):
    pass


class UsageParser(argparse.ArgumentParser):
    """Argument parser that leaves bad command lines to the usage message."""

    def error(self, message):
        raise UsageError(message)


def build_parser():
    parser = UsageParser(description="Conway's Game of Life rendered as text")
    parser.add_argument("pattern", nargs="?", help=f"Starting pattern ({', '.join(PATTERNS)})")
    parser.add_argument("iterations", nargs="?", help="Number of generations to compute")
    parser.add_argument("--engine", type=str, default=DEFAULT_ENGINE, choices=ENGINES,
                        help="'sparse' evaluates cells one by one, 'dense' uses a torch convolution")
    parser.add_argument("--device", type=str, default=DEFAULT_DEVICE, choices=['cuda', 'cpu'],
                        help="Computation device for the dense engine")
    parser.add_argument("--verbose", action='store_true',
                        help="Print a run summary, plus the torch configuration for the dense engine")
    return parser


def main(argv=None):
    try:
        args = build_parser().parse_args(argv)
    except UsageError:
        print(USAGE)
        return 1

    iterations = parse_iterations(args.iterations)
    if args.pattern not in PATTERNS or iterations is None:
        print(USAGE)
        return 1

    board = get_pattern(args.pattern)
    if args.engine == 'dense':
        game = DenseGameOfLife(board, device=args.device)
    else:
        game = GameOfLife(board)

    if args.verbose:
        if args.engine == 'dense':
            print_device_info()
            if args.device == 'cuda' and game.device != 'cuda':
                print("Warning: CUDA requested but not available, falling back to CPU.")
        print(f"Pattern: {args.pattern}, Iterations: {iterations}, Engine: {args.engine}\n")

    for state in game.run(iterations):
        print(print_cells(state))

    if args.verbose:
        print(f"\nGeneration: {game.generation}\nLive Cells: {len(game.get_board())}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
