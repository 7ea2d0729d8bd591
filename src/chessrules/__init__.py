"""chessrules: a chess rules engine: legality, check, checkmate, stalemate."""

__version__ = "0.1.0"
