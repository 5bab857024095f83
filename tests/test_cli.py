import pytest

from fillit.cli import main, solve_file, solve_text
from fillit.parser import InvalidInputError, parse_pieces

SQUARE = "....\n.##.\n.##.\n....\n"
T_PIECE = "....\n###.\n.#..\n....\n"


def test_solve_text_square():
    assert solve_text(SQUARE) == "AA\nAA\n"


def test_solve_text_uses_every_piece():
    text = "\n".join([SQUARE, T_PIECE, T_PIECE])
    result = solve_text(text)
    for piece in parse_pieces(text):
        assert result.count(piece.letter) == 4


def test_solve_text_rejects_bad_input():
    with pytest.raises(InvalidInputError):
        solve_text(SQUARE + "\n")


def test_solve_file_matches_solve_text(tmp_path):
    text = "\n".join([T_PIECE, SQUARE])
    path = tmp_path / "pieces.txt"
    path.write_text(text)
    assert solve_file(str(path)) == solve_text(text)


def test_solve_file_rejects_oversized(tmp_path):
    path = tmp_path / "big.txt"
    path.write_text("\n".join([SQUARE] * 27))
    with pytest.raises(InvalidInputError):
        solve_file(str(path))


def test_main_prints_solution(tmp_path, capsys):
    path = tmp_path / "one.txt"
    path.write_text(SQUARE)
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "AA\nAA\n"


def test_main_reports_invalid_input(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("#..#\n....\n....\n#..#\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "error\n"


def test_main_reports_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 0
    assert capsys.readouterr().out == "error\n"


@pytest.mark.parametrize("args", [[], ["a", "b"]])
def test_main_usage(args, capsys):
    assert main(args) == 1
    assert capsys.readouterr().out.startswith("usage:")