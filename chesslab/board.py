"""The chess board: where the pieces stand, whose turn it is, and how they move."""

from __future__ import annotations

from collections.abc import Iterator

from .move import Move
from .piece_type import PieceType
from .pieces import Bishop, King, Knight, Pawn, Piece, Queen, Rook, Space
from .position import Position

_BACK_RANK = (Rook, Knight, Bishop, Queen, King, Bishop, Knight, Rook)


def _location(position: Position | int) -> int:
    return position.location if isinstance(position, Position) else position


def _on_board(row: int, col: int) -> bool:
    return 0 <= row < 8 and 0 <= col < 8


class Board:
    """Sixty-four squares, each holding a piece or a ``Space``.

    Square 0 is a1 and square 63 is h8. White moves first.
    Candidate moves collected by :meth:`possible_moves` are kept, one per
    destination square, until :meth:`clear_moves` is called; :meth:`move`
    only performs a move found among them.
    """

    def __init__(self) -> None:
        self._squares: list[Piece] = [Space(loc) for loc in range(64)]
        self.current_move = 1
        self.last_move = Move()
        self._moves: dict[int, Move] = {}
        self.clear()
        self.reset()

    def clear(self) -> None:
        """Fill every square with an empty space."""
        for loc in range(64):
            self.assign(loc, Space(loc))

    def reset(self) -> None:
        """Set up both sides in their starting places."""
        for col, kind in enumerate(_BACK_RANK):
            self.assign(col, kind(col, False))
            self.assign(56 + col, kind(56 + col, True))
        for loc in range(8, 16):
            self.assign(loc, Pawn(loc, False))
        for loc in range(48, 56):
            self.assign(loc, Pawn(loc, True))

    def assign(self, position: Position | int, piece: Piece) -> None:
        """Put a piece on a square."""
        self._squares[_location(position)] = piece

    def __getitem__(self, location: Position | int) -> Piece:
        return self._squares[_location(location)]

    def __iter__(self) -> Iterator[Piece]:
        return iter(self._squares)

    def black_turn(self) -> bool:
        """True when it is black's turn to move."""
        return self.current_move % 2 == 0

    def clear_moves(self) -> None:
        """Forget every candidate move collected so far."""
        self._moves.clear()

    def possible_moves(self, location: Position | int) -> list[Move]:
        """Collect the moves of the piece on a square, if it belongs to the side to move.

        Returns all candidate moves collected so far, ordered by destination.
        """
        piece = self[location]
        if piece.is_valid() and piece.black == self.black_turn():
            for move in self._candidates(piece):
                self._moves.setdefault(move.dest.location, move)
        return sorted(self._moves.values())

    def move(self, position_from: Position | int, position_to: Position | int) -> bool:
        """Perform the candidate move ending on ``position_to``; False if there is none."""
        source = _location(position_from)
        dest = _location(position_to)
        candidate = self._moves.get(dest)
        if candidate is None:
            return False

        piece = self._squares[source]
        self._squares[dest] = piece
        piece.assign_position(dest)
        self._squares[source] = Space(source)
        self.current_move += 1
        self.last_move = candidate

        if candidate.castle_q:
            if piece.black:
                self._shift(56, 58)
            else:
                self._shift(0, 2)
        if candidate.castle_k:
            if piece.black:
                self._shift(63, 61)
            else:
                self._shift(7, 5)
        if candidate.enpassant:
            back = 1 if piece.black else -1
            taken = Position.from_row_col(candidate.dest.row + back, candidate.dest.col)
            if taken.is_valid():
                self._squares[taken.location] = Space(taken.location)

        if piece.piece_type is PieceType.PAWN:
            if piece.position.row == 0:
                self._promote(dest, black=True)
            elif piece.position.row == 7:
                self._promote(dest, black=False)
        return True

    def _promote(self, location: int, black: bool) -> None:
        queen = Queen(location, black)
        self._squares[location] = queen
        queen.assign_position(location)

    def _shift(self, source: int, dest: int) -> None:
        piece = self._squares[source]
        self._squares[dest] = piece
        piece.assign_position(dest)
        self._squares[source] = Space(source)

    def _at(self, row: int, col: int) -> Piece:
        return self._squares[row * 8 + col]

    def _is_space(self, row: int, col: int) -> bool:
        return self._at(row, col).piece_type is PieceType.SPACE

    @staticmethod
    def _make(piece: Piece, row: int, col: int, **flags) -> Move:
        return Move(source=piece.position.copy(), dest=Position(row * 8 + col), **flags)

    def _candidates(self, piece: Piece) -> Iterator[Move]:
        if piece.can_slide:
            yield from self._slides(piece)
        elif piece.piece_type is PieceType.PAWN:
            yield from self._pawn_moves(piece)
        elif piece.piece_type in (PieceType.KNIGHT, PieceType.KING):
            yield from self._steps(piece)
        if piece.piece_type is PieceType.KING:
            yield from self._castles(piece)

    def _slides(self, piece: Piece) -> Iterator[Move]:
        r, c = piece.position.row, piece.position.col
        for delta in piece.directions():
            row, col = r + delta.d_row, c + delta.d_col
            while _on_board(row, col) and self._is_space(row, col):
                yield self._make(piece, row, col)
                row += delta.d_row
                col += delta.d_col
            if _on_board(row, col):
                target = self._at(row, col)
                if piece.black != target.black:
                    yield self._make(piece, row, col, capture=target.piece_type)

    def _pawn_moves(self, piece: Piece) -> Iterator[Move]:
        r, c = piece.position.row, piece.position.col
        forward = -1 if piece.black else 1
        home_row = 6 if piece.black else 1
        passant_row = 3 if piece.black else 4

        if (
            piece.n_moves == 0
            and r == home_row
            and self._is_space(r + 2 * forward, c)
            and self._is_space(r + forward, c)
        ):
            yield self._make(piece, r + 2 * forward, c)

        row = r + forward
        if not 0 <= row < 8:
            return
        if self._is_space(row, c):
            yield self._make(piece, row, c)

        for col in (c - 1, c + 1):
            if 0 <= col < 8:
                target = self._at(row, col)
                if target.piece_type is not PieceType.SPACE and target.black != piece.black:
                    yield self._make(piece, row, col)

        if r == passant_row:
            for col in (c - 1, c + 1):
                if not 0 <= col < 8:
                    continue
                beside = self._at(r, col)
                if (
                    beside.piece_type is PieceType.PAWN
                    and beside.black != piece.black
                    and Position(r * 8 + col) == self.last_move.dest
                ):
                    yield self._make(piece, row, col, enpassant=True)

    def _steps(self, piece: Piece) -> Iterator[Move]:
        r, c = piece.position.row, piece.position.col
        for delta in piece.directions():
            row, col = r + delta.d_row, c + delta.d_col
            if not _on_board(row, col):
                continue
            target = self._at(row, col)
            if target.piece_type is PieceType.SPACE or target.black != piece.black:
                yield self._make(piece, row, col)

    def _castles(self, king: Piece) -> Iterator[Move]:
        if king.n_moves != 0:
            return
        base = 56 if king.black else 0
        queen_rook, king_rook = self._squares[0], self._squares[7]

        def empty(*locations: int) -> bool:
            return all(self._squares[loc].piece_type is PieceType.SPACE for loc in locations)

        if (
            queen_rook.piece_type is PieceType.ROOK
            and queen_rook.n_moves == 0
            and empty(base + 1, base + 2, base + 3)
        ):
            yield Move(source=king.position.copy(), dest=Position(base + 1), castle_q=True)
        if (
            king_rook.piece_type is PieceType.ROOK
            and king_rook.n_moves == 0
            and empty(base + 5, base + 6)
        ):
            yield Move(source=king.position.copy(), dest=Position(base + 6), castle_k=True)