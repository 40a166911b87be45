"""A single chess move and its Smith notation."""

from __future__ import annotations

from dataclasses import dataclass, field

from .piece_type import PieceType, letter_from_piece_type
from .position import Position

_CAPTURES = {
    "p": PieceType.PAWN,
    "n": PieceType.KNIGHT,
    "b": PieceType.BISHOP,
    "r": PieceType.ROOK,
    "q": PieceType.QUEEN,
    "k": PieceType.KING,
}

_PROMOTIONS = {
    "N": PieceType.KNIGHT,
    "B": PieceType.BISHOP,
    "R": PieceType.ROOK,
    "Q": PieceType.QUEEN,
}


class MoveParseError(ValueError):
    """Raised when move text carries an unknown specification letter."""

    def __init__(self, text: str) -> None:
        super().__init__("Unknown promotion piece specification")
        self.text = text


@dataclass(eq=False)
class Move:
    """One move across the board."""

    source: Position = field(default_factory=Position)
    dest: Position = field(default_factory=Position)
    promote: PieceType = PieceType.SPACE
    capture: PieceType = PieceType.SPACE
    enpassant: bool = False
    castle_k: bool = False
    castle_q: bool = False
    is_white: bool = True
    error: str = ""

    @classmethod
    def parse(cls, text: str) -> Move:
        """Read a move in Smith notation, such as "e5e6" or "e1g1c"."""
        move = cls(source=Position.from_text(text[0:2]), dest=Position.from_text(text[2:4]))
        for ch in text[4:]:
            if ch in _CAPTURES:
                move.capture = _CAPTURES[ch]
            elif ch in _PROMOTIONS:
                move.promote = _PROMOTIONS[ch]
            elif ch == "c":
                move.castle_k = True
            elif ch == "C":
                move.castle_q = True
            elif ch == "E":
                move.enpassant = True
            else:
                raise MoveParseError(text)
        return move

    def text(self) -> str:
        """The move in Smith notation, or the error text if it is in error."""
        if self.error:
            return self.error
        parts = [str(self.source), str(self.dest)]
        if self.enpassant:
            parts.append("E")
        if self.castle_k:
            parts.append("c")
        if self.castle_q:
            parts.append("C")
        if self.promote is not PieceType.SPACE:
            parts.append(letter_from_piece_type(self.promote).upper())
        if self.capture is not PieceType.SPACE and not self.enpassant:
            parts.append(letter_from_piece_type(self.capture))
        return "".join(parts)

    def set_castle(self, king_side: bool) -> None:
        if king_side:
            self.castle_k = True
        else:
            self.castle_q = True

    def _key(self) -> tuple:
        return (
            self.source,
            self.dest,
            self.castle_k,
            self.castle_q,
            self.enpassant,
            self.capture,
            self.promote,
        )

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return self.text() == other
        if not isinstance(other, Move):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other: Move) -> bool:
        if not isinstance(other, Move):
            return NotImplemented
        return self.dest.location < other.dest.location

    def __str__(self) -> str:
        return self.text()