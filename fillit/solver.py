"""Fitting tetrominoes into the smallest square."""

from __future__ import annotations

from itertools import product
from math import isqrt
from typing import Iterator, List, Sequence, Tuple

from fillit.parser import Tetromino

_EMPTY = "."


def min_square_size(piece_count: int) -> int:
    """Side of the smallest square with room for ``piece_count`` pieces; at least 1."""
    if piece_count < 0:
        raise ValueError(f"negative piece count {piece_count}")
    area = piece_count * 4
    side = isqrt(area)
    if side * side < area:
        side += 1
    return max(side, 1)


class Board:
    """A square grid that pieces are placed on, empty cells shown as '.'."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"board size must be positive, got {size}")
        self.size = size
        self._grid: List[List[str]] = [[_EMPTY] * size for _ in range(size)]

    def _squares(self, piece: Tetromino, row: int, col: int) -> Iterator[Tuple[int, int]]:
        return ((row + dr, col + dc) for dr, dc in piece.cells)

    def _inside(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def fits(self, piece: Tetromino, row: int, col: int) -> bool:
        """True if ``piece`` with its first cell at (row, col) lies on free cells."""
        return all(
            self._inside(r, c) and self._grid[r][c] == _EMPTY
            for r, c in self._squares(piece, row, col)
        )

    def place(self, piece: Tetromino, row: int, col: int) -> None:
        """Mark the cells of ``piece`` with its letter."""
        for r, c in self._squares(piece, row, col):
            self._grid[r][c] = piece.letter

    def remove(self, piece: Tetromino, row: int, col: int) -> None:
        """Clear the cells of ``piece``."""
        for r, c in self._squares(piece, row, col):
            self._grid[r][c] = _EMPTY

    def render(self) -> str:
        """The grid as text, one newline-terminated line per row."""
        return "".join("".join(line) + "\n" for line in self._grid)

    def __str__(self) -> str:
        return self.render()


def _fill(board: Board, pieces: Sequence[Tetromino]) -> bool:
    if not pieces:
        return True
    piece, rest = pieces[0], pieces[1:]
    for row, col in product(range(board.size), repeat=2):
        if board.fits(piece, row, col):
            board.place(piece, row, col)
            if _fill(board, rest):
                return True
            board.remove(piece, row, col)
    return False


def solve(pieces: Sequence[Tetromino]) -> Board:
    """Place every piece, in order, on the smallest square that holds them all.

    Each piece takes the first free position in reading order that lets
    the remaining pieces fit.
    """
    size = min_square_size(len(pieces))
    while True:
        board = Board(size)
        if _fill(board, list(pieces)):
            return board
        size += 1