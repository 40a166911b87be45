"""The pieces that stand on the board, and the empty squares between them."""

from __future__ import annotations

from .piece_type import PieceType
from .position import Delta, Position

_ORTHOGONAL = (
    Delta(0, 1),
    Delta(-1, 0),
    Delta(1, 0),
    Delta(0, -1),
)

_DIAGONAL = (
    Delta(-1, 1),
    Delta(1, 1),
    Delta(-1, -1),
    Delta(1, -1),
)

_ALL_AROUND = (
    Delta(-1, 1),
    Delta(0, 1),
    Delta(1, 1),
    Delta(-1, 0),
    Delta(1, 0),
    Delta(-1, -1),
    Delta(0, -1),
    Delta(1, -1),
)

_KNIGHT_JUMPS = (
    Delta(-1, 2),
    Delta(1, 2),
    Delta(-2, 1),
    Delta(2, 1),
    Delta(-2, -1),
    Delta(2, -1),
    Delta(-1, -2),
    Delta(1, -2),
)


def _as_position(position: Position | int) -> Position:
    if isinstance(position, Position):
        return position.copy()
    return Position(position)


class Piece:
    """A piece on the board.

    ``black`` tells the side; ``can_slide`` marks pieces that travel any
    distance along their directions (bishops, rooks and queens).
    """

    piece_type: PieceType = PieceType.SPACE
    can_slide: bool = False
    _directions: tuple[Delta, ...] = _ORTHOGONAL

    def __init__(self, position: Position | int, black: bool) -> None:
        self.position = _as_position(position)
        self.black = black
        self.n_moves = 0

    def assign_position(self, position: Position | int) -> None:
        """Put the piece on a new square and count the move."""
        pos = _as_position(position)
        if not 0 <= pos.row <= 7 or not 0 <= pos.col <= 7:
            return
        self.position = pos
        self.n_moves += 1

    def has_moved(self) -> bool:
        return self.n_moves > 0

    def is_valid(self) -> bool:
        """True for a real piece, False for an empty square."""
        return self.piece_type is not PieceType.SPACE

    def directions(self) -> tuple[Delta, ...]:
        """The steps this piece may take from its square."""
        return self._directions

    def __repr__(self) -> str:
        side = "black" if self.black else "white"
        return f"{type(self).__name__}({self.position}, {side})"


class Space(Piece):
    """An empty square."""

    piece_type = PieceType.SPACE

    def __init__(self, position: Position | int) -> None:
        super().__init__(position, False)


class Pawn(Piece):
    piece_type = PieceType.PAWN


class King(Piece):
    piece_type = PieceType.KING
    _directions = _ALL_AROUND


class Queen(Piece):
    piece_type = PieceType.QUEEN
    can_slide = True
    _directions = _ALL_AROUND


class Rook(Piece):
    piece_type = PieceType.ROOK
    can_slide = True
    _directions = _ORTHOGONAL


class Bishop(Piece):
    piece_type = PieceType.BISHOP
    can_slide = True
    _directions = _DIAGONAL


class Knight(Piece):
    piece_type = PieceType.KNIGHT
    _directions = _KNIGHT_JUMPS