"""Attack detection: finding kings, counting attackers and checks."""

from __future__ import annotations

from collections.abc import Iterator

from .bitboards import BISHOP_DIRS, KNIGHT_DIRS, QUEEN_DIRS, ROOK_DIRS
from .state import EMPTY, INVALID_COORD, Coord, GameState, is_on_board

_WHITE_PIECES = "PNBRQK"
_BLACK_PIECES = "pnbrqk"


def get_king(gs: GameState) -> Coord:
    """Return the square of the side to move's king, or INVALID_COORD."""
    king = "K" if gs.white_to_move else "k"
    for row, rank in enumerate(gs.board):
        for col, piece in enumerate(rank):
            if piece == king:
                return Coord(row, col)
    return INVALID_COORD


def _attackers(gs: GameState, row: int, col: int) -> Iterator[Coord]:
    """Yield the squares of enemy pieces attacking (row, col).

    Each sliding direction yields at most its first blocking piece.
    """
    board = gs.board
    attacker_is_white = not gs.white_to_move
    if attacker_is_white:
        # White pawns move towards row 0, so they attack from the row below.
        pawn_row = row + 1
        pawn, knight, bishop, rook, queen, king = _WHITE_PIECES
    else:
        pawn_row = row - 1
        pawn, knight, bishop, rook, queen, king = _BLACK_PIECES

    for col_offset in (-1, 1):
        new_col = col + col_offset
        if is_on_board(pawn_row, new_col) and board[pawn_row][new_col] == pawn:
            yield Coord(pawn_row, new_col)

    for d_row, d_col in KNIGHT_DIRS:
        new_row, new_col = row + d_row, col + d_col
        if is_on_board(new_row, new_col) and board[new_row][new_col] == knight:
            yield Coord(new_row, new_col)

    for directions, sliders in ((ROOK_DIRS, (rook, queen)), (BISHOP_DIRS, (bishop, queen))):
        for d_row, d_col in directions:
            new_row, new_col = row + d_row, col + d_col
            while is_on_board(new_row, new_col):
                piece = board[new_row][new_col]
                if piece != EMPTY:
                    if piece in sliders:
                        yield Coord(new_row, new_col)
                    break
                new_row += d_row
                new_col += d_col

    for d_row, d_col in QUEEN_DIRS:
        new_row, new_col = row + d_row, col + d_col
        if is_on_board(new_row, new_col) and board[new_row][new_col] == king:
            yield Coord(new_row, new_col)


def square_attacked_amount(gs: GameState, row: int, col: int) -> int:
    """Count the enemy pieces attacking the square."""
    return sum(1 for _ in _attackers(gs, row, col))


def is_square_attacked(gs: GameState, row: int, col: int) -> bool:
    """True if any enemy piece attacks the square."""
    return any(True for _ in _attackers(gs, row, col))


def is_in_check(gs: GameState) -> bool:
    """True if the side to move's king is attacked."""
    king = get_king(gs)
    return is_square_attacked(gs, king.row, king.col)


def get_checking_pieces(gs: GameState) -> list[Coord]:
    """Return the squares of the pieces giving check to the side to move."""
    king = get_king(gs)
    if king == INVALID_COORD:
        return []
    return list(_attackers(gs, king.row, king.col))