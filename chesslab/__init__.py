"""Chess board, pieces, Smith-notation moves and a command that plays a move file."""

__version__ = "0.1.0"
__all__ = ["board", "cli", "move", "piece_type", "pieces", "position"]