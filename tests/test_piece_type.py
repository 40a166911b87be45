import pytest

from chesslab.piece_type import PieceType, letter_from_piece_type, piece_type_from_letter


@pytest.mark.parametrize(
    "piece_type,letter",
    [
        (PieceType.SPACE, " "),
        (PieceType.PAWN, "p"),
        (PieceType.BISHOP, "b"),
        (PieceType.KNIGHT, "n"),
        (PieceType.ROOK, "r"),
        (PieceType.QUEEN, "q"),
        (PieceType.KING, "k"),
    ],
)
def test_letter_from_piece_type(piece_type, letter):
    assert letter_from_piece_type(piece_type) == letter


@pytest.mark.parametrize(
    "letter,piece_type",
    [
        ("p", PieceType.PAWN),
        ("b", PieceType.BISHOP),
        ("n", PieceType.KNIGHT),
        ("r", PieceType.ROOK),
        ("q", PieceType.QUEEN),
        ("k", PieceType.KING),
    ],
)
def test_piece_type_from_letter(letter, piece_type):
    assert piece_type_from_letter(letter) is piece_type


def test_round_trip():
    for piece_type in PieceType:
        if piece_type is PieceType.SPACE:
            continue
        assert piece_type_from_letter(letter_from_piece_type(piece_type)) is piece_type


@pytest.mark.parametrize("letter", [" ", "x", "K", ""])
def test_unknown_letter_raises(letter):
    with pytest.raises(ValueError):
        piece_type_from_letter(letter)