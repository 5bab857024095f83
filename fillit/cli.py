"""Command line entry point: solve an input file and print the square."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from fillit.output import putendl, putstr
from fillit.parser import MAX_INPUT, InvalidInputError, parse_pieces
from fillit.solver import solve

USAGE = "usage: fillit input_file"


def solve_text(text: str) -> str:
    """Parse ``text`` and return the rendered smallest square."""
    return solve(parse_pieces(text)).render()


def solve_file(path: str) -> str:
    """Read the input at ``path`` and return the rendered smallest square.

    Raises InvalidInputError for malformed input and OSError if the file
    cannot be read.
    """
    with open(path, "rb") as handle:
        data = handle.read(MAX_INPUT + 1)
    return solve_text(data.decode("latin-1"))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command; prints the solution or ``error``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        putendl(USAGE)
        return 1
    try:
        result = solve_file(args[0])
    except (InvalidInputError, OSError):
        putendl("error")
        return 0
    putstr(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())