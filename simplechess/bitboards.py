"""64-bit boards and precomputed movement masks for knights, rooks and bishops."""

from __future__ import annotations

import sys
from dataclasses import dataclass

_MASK = (1 << 64) - 1

KNIGHT_DIRS = ((-2, -1), (-2, 1), (-1, -2), (-1, 2), (1, -2), (1, 2), (2, -1), (2, 1))
BISHOP_DIRS = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS = BISHOP_DIRS + ROOK_DIRS


@dataclass(frozen=True)
class Bitboard:
    """A set of squares held as the bits of an unsigned 64-bit integer."""

    board: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.board <= _MASK:
            raise ValueError(f"bitboard out of 64-bit range: {self.board}")

    def add(self, other: Bitboard) -> Bitboard:
        """Toggle the squares of ``other`` (exclusive or)."""
        return Bitboard(self.board ^ other.board)

    def sub(self, other: Bitboard) -> Bitboard:
        """Remove the squares of ``other``."""
        return Bitboard(self.board & ~other.board & _MASK)

    def __and__(self, other: Bitboard) -> Bitboard:
        return Bitboard(self.board & other.board)

    def __or__(self, other: Bitboard) -> Bitboard:
        return Bitboard(self.board | other.board)


EMPTY_BOARD = Bitboard(0)


def _on_board(row: int, col: int) -> bool:
    return 0 <= row < 8 and 0 <= col < 8


def create_prim_boards() -> dict[int, Bitboard]:
    """Return the 64 single-square boards keyed by square index."""
    return {index: Bitboard(1 << index) for index in range(64)}


def visualize(bboard: Bitboard) -> str:
    """Render a board as eight lines of 0/1, least significant bit first."""
    bits = format(bboard.board, "064b")[::-1]
    return "".join(bits[start:start + 8] + "\n" for start in range(0, 64, 8))


def _stepping_boards(prefix: str, prims: dict[int, Bitboard], dirs) -> dict[str, Bitboard]:
    boards: dict[str, Bitboard] = {}
    for row in range(8):
        for col in range(8):
            bboard = EMPTY_BOARD
            for d_row, d_col in dirs:
                n_row, n_col = row + d_row, col + d_col
                if _on_board(n_row, n_col):
                    bboard = bboard | prims[n_col + 8 * n_row]
            boards[f"{prefix}{row}{col}"] = bboard
    return boards


def _sliding_boards(prefix: str, prims: dict[int, Bitboard], dirs) -> dict[str, Bitboard]:
    boards: dict[str, Bitboard] = {}
    for row in range(8):
        for col in range(8):
            bboard = EMPTY_BOARD
            for d_row, d_col in dirs:
                n_row, n_col = row + d_row, col + d_col
                while _on_board(n_row, n_col):
                    bboard = bboard | prims[n_col + 8 * n_row]
                    n_row, n_col = n_row + d_row, n_col + d_col
            boards[f"{prefix}{row}{col}"] = bboard
    return boards


def knight_boards(prims: dict[int, Bitboard]) -> dict[str, Bitboard]:
    """Knight target masks keyed 'n<row><col>'."""
    return _stepping_boards("n", prims, KNIGHT_DIRS)


def rook_boards(prims: dict[int, Bitboard]) -> dict[str, Bitboard]:
    """Rook ray masks on an empty board keyed 'r<row><col>'."""
    return _sliding_boards("r", prims, ROOK_DIRS)


def bishop_boards(prims: dict[int, Bitboard]) -> dict[str, Bitboard]:
    """Bishop ray masks on an empty board keyed 'b<row><col>'."""
    return _sliding_boards("b", prims, BISHOP_DIRS)


def create_boards(prims: dict[int, Bitboard]) -> dict[str, Bitboard]:
    """All static piece movement masks: knights, then rooks, then bishops."""
    boards: dict[str, Bitboard] = {}
    boards.update(knight_boards(prims))
    boards.update(rook_boards(prims))
    boards.update(bishop_boards(prims))
    return boards


def main(argv=None) -> int:
    """List every mask name, then draw the bishop mask for row 1, column 2."""
    del argv
    boards = create_boards(create_prim_boards())
    out = sys.stdout
    for name in boards:
        print(name, file=out)
    print(visualize(boards["b12"]), file=out)
    return 0