"""Reading and checking tetromino descriptions.

An input holds one to twenty-six blocks separated by empty lines. Each
block is four lines of four characters, ``#`` for a filled cell and ``.``
for an empty one, and must describe exactly one tetromino.
"""

from __future__ import annotations

from dataclasses import dataclass
from string import ascii_uppercase
from typing import List, Tuple

BLOCK_SIZE = 20
MIN_INPUT = 20
MAX_INPUT = 545

_ROWS = 4
_ROW_WIDTH = 4
_LINE_WIDTH = _ROW_WIDTH + 1
_STRIDE = BLOCK_SIZE + 1
_FILLED = "#"
_ALLOWED = frozenset(".#")

Cell = Tuple[int, int]


class InvalidInputError(ValueError):
    """The input is not a valid list of tetrominoes."""


@dataclass(frozen=True)
class Tetromino:
    """A piece named by ``letter``.

    ``cells`` are (row, column) offsets of its four squares from the first
    filled square in reading order, which is always ``(0, 0)``.
    """

    letter: str
    cells: Tuple[Cell, ...]


def _check_block(block: str) -> None:
    if not block.endswith("\n"):
        raise InvalidInputError("each row must end with a newline")
    rows = block[:-1].split("\n")
    if len(rows) != _ROWS or any(len(row) != _ROW_WIDTH for row in rows):
        raise InvalidInputError("a block must be four rows of four cells")
    if any(set(row) - _ALLOWED for row in rows):
        raise InvalidInputError("cells must be '.' or '#'")


def validate_layout(text: str) -> List[str]:
    """Check the overall shape of ``text`` and return its blocks.

    Each returned block is the 20 characters of four rows with their
    newlines. Raises InvalidInputError if the text is malformed.
    """
    if not MIN_INPUT <= len(text) <= MAX_INPUT:
        raise InvalidInputError(
            f"input must hold between {MIN_INPUT} and {MAX_INPUT} characters"
        )
    if (len(text) + 1) % _STRIDE:
        raise InvalidInputError("input length does not match whole blocks")
    separators = text[BLOCK_SIZE::_STRIDE]
    if set(separators) - {"\n"}:
        raise InvalidInputError("blocks must be separated by an empty line")
    blocks = [text[start:start + BLOCK_SIZE] for start in range(0, len(text), _STRIDE)]
    for block in blocks:
        _check_block(block)
    return blocks


def parse_tetromino(block: str, letter: str) -> Tetromino:
    """Turn one block into a :class:`Tetromino` named ``letter``.

    The block must hold exactly four filled cells joined side to side.
    """
    if not isinstance(letter, str) or len(letter) != 1:
        raise ValueError(f"expected a single letter, got {letter!r}")
    if len(block) < BLOCK_SIZE:
        raise InvalidInputError("block is too short")
    filled = [
        divmod(position, _LINE_WIDTH)
        for position, ch in enumerate(block[:BLOCK_SIZE])
        if ch == _FILLED
    ]
    if len(filled) != 4:
        raise InvalidInputError(f"a block must have 4 filled cells, found {len(filled)}")
    occupied = set(filled)
    links = sum(
        ((row, col + 1) in occupied) + ((row + 1, col) in occupied)
        for row, col in filled
    )
    # Three links make a connected piece; the square has four.
    if links not in (3, 4):
        raise InvalidInputError("filled cells do not form a tetromino")
    first_row, first_col = filled[0]
    return Tetromino(
        letter, tuple((row - first_row, col - first_col) for row, col in filled)
    )


def parse_pieces(text: str) -> List[Tetromino]:
    """Parse a whole input into pieces lettered A, B, C and so on."""
    blocks = validate_layout(text)
    return [parse_tetromino(block, letter) for block, letter in zip(blocks, ascii_uppercase)]