"""
Command-line driver for the Gaussian elimination solver.

Builds a seeded random system, solves it, optionally verifies the result
against a regenerated copy of the system and reports the solve time.
Each boolean flag toggles its default.

Usage:
    pygauss -n 1024 -p -w 8
    python -m pygauss -r 7 -n 16 -v
"""

from __future__ import annotations

import argparse
import sys
import warnings
from typing import Sequence, TextIO

import numpy as np

from pygauss.core.compute.tolerances import BANDS, DEFAULT_BAND
from pygauss.core.exceptions import SingularMatrixError, ValidationError, VerificationWarning
from pygauss.linsolve.design import SystemDesign
from pygauss.linsolve.solvers import solve

DEFAULT_SEED = 411
DEFAULT_SIZE = 256
DEFAULT_RANGE = 65536


class _Toggle(argparse.Action):
    """Flip a boolean option each time its flag appears."""

    def __init__(self, option_strings, dest, default=False, help=None):
        super().__init__(option_strings, dest, nargs=0, default=default, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, not getattr(namespace, self.dest))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='pygauss',
        description='Gaussian Elimination Solver',
    )
    parser.add_argument(
        '-r', dest='seed', type=int, default=DEFAULT_SEED,
        help=f'seed for the random number generator (default {DEFAULT_SEED})',
    )
    parser.add_argument(
        '-n', dest='size', type=int, default=DEFAULT_SIZE,
        help=f'number of rows in the matrix (default {DEFAULT_SIZE})',
    )
    parser.add_argument(
        '-g', dest='value_range', type=int, default=DEFAULT_RANGE,
        help=f'range for values in the matrix (default {DEFAULT_RANGE})',
    )
    parser.add_argument(
        '-w', dest='workers', type=int, default=None,
        help='worker threads in parallel mode (default: all CPUs)',
    )
    parser.add_argument(
        '-v', dest='verbose', action=_Toggle, default=False,
        help='toggle verbose output (default false)',
    )
    parser.add_argument(
        '-p', dest='parallel', action=_Toggle, default=False,
        help='toggle parallel mode (default false)',
    )
    parser.add_argument(
        '-c', dest='check', action=_Toggle, default=True,
        help='toggle verifying the result (default true)',
    )
    parser.add_argument(
        '-b', dest='band', choices=sorted(BANDS), default=DEFAULT_BAND.name,
        help=f'verification tolerance band (default {DEFAULT_BAND.name})',
    )
    return parser


def print_system(A: np.ndarray, b: np.ndarray, out: TextIO) -> None:
    """Print A | b one equation per line."""
    for row, rhs in zip(A, b):
        print("\t".join(f"{v:g}" for v in row) + f"\t | {rhs:g}", file=out)
    print(file=out)


def main(argv: Sequence[str] | None = None, out: TextIO | None = None) -> int:
    """
    Run the benchmark driver.

    Returns:
        Process exit status: 0 on success (verification failures are
        reported, not fatal), 1 for a singular matrix, 2 for bad arguments
    """
    out = out if out is not None else sys.stdout
    args = build_parser().parse_args(argv)

    print(
        f"r,n,g,p = {args.seed}, {args.size}, {args.value_range}, {int(args.parallel)}",
        file=out,
    )

    try:
        design = SystemDesign.from_seed(args.seed, args.size, args.value_range)
    except ValidationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if args.verbose:
        print("Matrix (A) | B", file=out)
        print_system(design.A, design.b, out)

    backend = 'cpu_parallel' if args.parallel else 'cpu'
    try:
        result = solve(
            design,
            backend=backend,
            n_workers=args.workers if args.parallel else None,
            overwrite=True,
        )
    except SingularMatrixError:
        print("The matrix is singular!", file=out)
        return 1
    except ValidationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if args.verbose:
        print("Result X", file=out)
        print(" ".join(f"{v:g}" for v in result.x), file=out)
        print(file=out)

    if args.check:
        # The seeded design is regenerated; the solve consumed the original
        with warnings.catch_warnings():
            warnings.simplefilter('ignore', VerificationWarning)
            check = result.verify(band=args.band)
        print(check.summary(), file=out)

    print(
        f"Total execution time: {result.elapsed:g} seconds",
        file=out,
    )
    return 0


if __name__ == '__main__':
    sys.exit(main())
