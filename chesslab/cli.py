"""Command line entry: read moves in Smith notation and play them on a board."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .board import Board
from .piece_type import PieceType
from .position import Position


def _square(text: str) -> int:
    col = ord(text[0]) - ord("a")
    row = ord(text[1]) - ord("1")
    return row * 8 + col


def parse(text_move: str) -> tuple[int, int]:
    """Return the source and destination squares of a move such as "e2e4".

    Both are -1 when either falls off the board.
    """
    if len(text_move) < 4:
        raise ValueError(f"move too short: {text_move!r}")
    source = _square(text_move[0:2])
    dest = _square(text_move[2:4])
    if not (0 <= source < 64 and 0 <= dest < 64):
        return -1, -1
    return source, dest


def read_file(file_name: str) -> list[tuple[int, int]]:
    """Read whitespace-separated moves from a file; an unreadable file gives no moves."""
    try:
        with open(file_name, encoding="utf-8") as fin:
            text = fin.read()
    except OSError:
        return []
    return [parse(token) for token in text.split()]


def _render(board: Board) -> str:
    lines = []
    for row in range(7, -1, -1):
        letters = []
        for col in range(8):
            piece = board[row * 8 + col]
            if piece.piece_type is PieceType.SPACE:
                letters.append(".")
            else:
                letter = piece.piece_type.value
                letters.append(letter if piece.black else letter.upper())
        lines.append("".join(letters))
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    board = Board()
    status = 0
    if len(args) == 1:
        for source, dest in read_file(args[0]):
            board.clear_moves()
            if 0 <= source < 64:
                board.possible_moves(source)
            if not board.move(source, dest):
                print(f"invalid move: {Position(source)}{Position(dest)}", file=sys.stderr)
                status = 1
                break
    print(_render(board))
    return status


if __name__ == "__main__":
    sys.exit(main())