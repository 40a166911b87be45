"""The kinds of piece, and their letters in Smith notation."""

from __future__ import annotations

from enum import Enum


class PieceType(Enum):
    """A kind of piece; the value is its Smith notation letter."""

    SPACE = " "
    KING = "k"
    QUEEN = "q"
    ROOK = "r"
    KNIGHT = "n"
    BISHOP = "b"
    PAWN = "p"


def letter_from_piece_type(piece_type: PieceType) -> str:
    """Return the Smith notation letter of a piece type (a space for SPACE)."""
    return PieceType(piece_type).value


def piece_type_from_letter(letter: str) -> PieceType:
    """Return the piece type named by a lower-case Smith notation letter."""
    if letter == PieceType.SPACE.value:
        raise ValueError(f"no piece type for letter {letter!r}")
    try:
        return PieceType(letter)
    except ValueError:
        raise ValueError(f"no piece type for letter {letter!r}") from None