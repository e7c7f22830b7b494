"""A small chess engine: FEN parsing, legal move generation, bitboard masks and a game loop."""

__version__ = "0.1.0"
__all__ = ["state", "bitboards", "attacks", "moves", "movegen", "human", "cli"]