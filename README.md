# fillit

`fillit` reads a file of tetrominoes and finds the smallest square that holds
all of them. Each piece is labelled with a letter, starting at `A`, in the
order it appears in the file.

## Installing

```
pip install .
```

## Usage

```
fillit input_file
```

The solved square is printed with one row per line. Empty cells are shown
as `.` and each cell that a piece covers is shown as that piece's letter.

- With the wrong number of arguments the command prints
  `usage: fillit input_file` and exits with status 1.
- If the file cannot be read or is not valid, it prints `error` and exits
  with status 0.

## Input format

The file holds from 1 to 26 pieces, and at most 545 characters in all. Each
piece is four lines of four characters, written with `.` and `#`, and every
line ends with a newline. A blank line separates each piece from the next;
there is no blank line after the last piece. A piece must have exactly four
`#` cells, and those cells must be joined side to side.

```
....
##..
.#..
.#..

....
####
....
....
```

For this input the output is:

```
AA..
.A..
.A..
BBBB
```

Pieces are placed in order, each at the first free position in reading
order that lets the remaining pieces fit. The search starts with the
smallest square whose area could hold all the pieces and grows the side by
one until everything fits.

## From Python

```python
from fillit.cli import solve_text, solve_file

print(solve_text(open("pieces.txt").read()), end="")
print(solve_file("pieces.txt"), end="")
```

- `fillit.parser.parse_pieces(text)` turns input text into a list of
  `Tetromino` objects (a `letter` and the `cells` offsets of its four
  squares). It raises `InvalidInputError`, a `ValueError`, when the text is
  malformed. `validate_layout` and `parse_tetromino` do the two steps
  separately.
- `fillit.solver.solve(pieces)` returns the filled `Board`. `Board.render()`
  gives the text shown above; `Board.fits`, `Board.place` and
  `Board.remove` work on single pieces, and `min_square_size(n)` gives the
  starting side for `n` pieces.

## Helper modules

The package also carries small helpers that work on Python values:

- `fillit.charclass`: ASCII tests and case conversion (`isalpha`, `isdigit`,
  `isalnum`, `isascii`, `isprint`, `toupper`, `tolower`) for code points or
  one-character strings.
- `fillit.numconv`: `atoi` and `itoa`.
- `fillit.memory`: byte-buffer functions (`memset`, `bzero`, `memalloc`,
  `memcpy`, `memccpy`, `memmove`, `memchr`, `memcmp`).
- `fillit.strsearch`: `strlen`, `strchr`, `strrchr`, `strstr`, `strnstr`,
  `strcmp`, `strncmp`, `strequ`, `strnequ`, returning indices or `None`.
- `fillit.strbuild`: functions that return new strings (`strncpy`,
  `strcat`, `strncat`, `strlcat`, `strsub`, `strjoin`, `strtrim`,
  `strsplit`, `strmap`, `strmapi`, `striter`, `striteri`).
- `fillit.output`: `putchar`, `putstr`, `putendl`, `putnbr`, writing to
  standard output or a given stream.
- `fillit.linked`: a singly linked `LinkedList` of `Node`s with
  `push_front`, `push_back`, `last`, `at`, `clear`, `for_each` and `map`,
  plus a `foreach` function for any iterable.

The string helpers treat text as ending at the first NUL character.