# chesslab

A small chess model: board squares, pieces and their movement, and moves
written in Smith notation (`e2e4`, `e5d6E`, `e1g1c`, `e7e8Q`, `d4e5p`).

## Install

```
pip install .
pip install ".[test]"   # with the test tools
```

## Positions

`chesslab.position.Position` is a square numbered 0–63, `a1` is 0 and `h8`
is 63. Anything outside that range is an invalid position, and all invalid
positions compare equal. Stepping off the board with a `Delta` makes a
position invalid.

```python
from chesslab.position import Position, Delta

pos = Position.from_text("c6")
pos.row, pos.col              # (5, 2)
str(pos)                      # "c6"
str(pos + Delta(1, 0))        # "c7"
str(Position())               # "error"
```

## Piece types

`chesslab.piece_type.PieceType` lists the kinds of piece, each valued by its
Smith notation letter. `letter_from_piece_type` and `piece_type_from_letter`
convert between the two; an unknown letter raises `ValueError`.

## Moves

```python
from chesslab.move import Move, MoveParseError

move = Move.parse("e1g1c")    # king-side castle
move.castle_k                 # True
move.text()                   # "e1g1c"
move == "e1g1c"               # True
```

After the two squares, lower-case `p n b r q k` mark a capture, `N B R Q`
a promotion, `c` and `C` king- and queen-side castling, and `E` en passant.
Any other letter raises `MoveParseError` (a `ValueError`).

## Pieces

`chesslab.pieces` holds `Piece` and its kinds `Pawn`, `King`, `Queen`,
`Rook`, `Bishop`, `Knight`, plus `Space` for an empty square. Each piece
knows its position, its side (`black`), how many times it has moved
(`n_moves`, `has_moved()`) and its `directions()`.

## Board

```python
from chesslab.board import Board

board = Board()
moves = board.possible_moves(12)   # moves of the piece on e2, sorted by destination
board.move(12, 28)                 # e2e4; True when it was among the collected moves
board.clear_moves()
board[28]                          # the pawn now on e4
```

White moves first; `Board.black_turn()` tells whose turn it is.
`possible_moves` only collects moves for a piece of the side to move, and
keeps them until `clear_moves()`. `move` performs castling (moving the rook
too), en passant (removing the passed pawn) and promotion of a pawn reaching
the last rank to a queen. The board does not look for check or checkmate.

## Command line

```
chesslab moves.txt
```

reads a file of whitespace-separated Smith-notation moves and plays them in
turn on a fresh board, then prints the board as text: rank 8 at the top,
white pieces in upper case, black in lower case, `.` for an empty square.
If a move cannot be played, it is reported on standard error, play stops
there and the exit status is 1. Without a file argument the starting
position is printed. An unreadable file gives no moves.

## What it does not do

There is no graphical board or mouse interaction: the board is shown only
as the text printout above.

## Tests

```
pytest
```