"""Squares on a chess board, numbered 0 (a1) to 63 (h8)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Delta:
    """A step across the board, in rows and columns."""

    d_row: int
    d_col: int


ADD_R = Delta(1, 0)
ADD_C = Delta(0, 1)
SUB_R = Delta(-1, 0)
SUB_C = Delta(0, -1)

INVALID = -1


class Position:
    """The location of a piece, the cursor or a possible move.

    Locations 0..63 are valid; anything else is an invalid position,
    and all invalid positions compare equal.
    """

    __slots__ = ("location",)

    def __init__(self, location: int = INVALID) -> None:
        self.location = location

    @classmethod
    def from_row_col(cls, row: int, col: int) -> Position:
        """Build a position from a row and a column, invalid if off the board."""
        pos = cls()
        pos.set(row, col)
        return pos

    @classmethod
    def from_text(cls, text: str | None) -> Position:
        """Build a position from text such as "e4"; bad text gives an invalid position."""
        if not text or len(text) < 2:
            return cls()
        file, rank = text[0], text[1]
        if not ("a" <= file <= "h" and "1" <= rank <= "8"):
            return cls()
        return cls.from_row_col(ord(rank) - ord("1"), ord(file) - ord("a"))

    @property
    def row(self) -> int:
        return 0 if self.is_invalid() else self.location // 8

    @property
    def col(self) -> int:
        return 0 if self.is_invalid() else self.location % 8

    def is_invalid(self) -> bool:
        return self.location < 0 or self.location >= 64

    def is_valid(self) -> bool:
        return not self.is_invalid()

    def set_row(self, row: int) -> None:
        if 0 <= row < 8 and self.is_valid():
            self.location = row * 8 + self.col
        else:
            self.location = INVALID

    def set_col(self, col: int) -> None:
        if 0 <= col < 8 and self.is_valid():
            self.location = self.row * 8 + col
        else:
            self.location = INVALID

    def set(self, row: int, col: int) -> None:
        self.location = 0
        self.set_row(row)
        self.set_col(col)

    def adjust_row(self, d_row: int) -> None:
        if self.is_valid():
            self.set_row(self.row + d_row)

    def adjust_col(self, d_col: int) -> None:
        if self.is_valid():
            self.set_col(self.col + d_col)

    def copy(self) -> Position:
        return Position(self.location)

    def __add__(self, delta: Delta) -> Position:
        if not isinstance(delta, Delta):
            return NotImplemented
        pos = self.copy()
        pos += delta
        return pos

    def __iadd__(self, delta: Delta) -> Position:
        if not isinstance(delta, Delta):
            return NotImplemented
        self.adjust_row(delta.d_row)
        self.adjust_col(delta.d_col)
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        if self.is_invalid():
            return other.is_invalid()
        return self.location == other.location

    def __hash__(self) -> int:
        return hash(INVALID if self.is_invalid() else self.location)

    def __lt__(self, other: Position) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self.location < other.location

    def __str__(self) -> str:
        if self.is_invalid():
            return "error"
        return chr(self.col + ord("a")) + chr(self.row + ord("1"))

    def __repr__(self) -> str:
        return f"Position({self.location})"