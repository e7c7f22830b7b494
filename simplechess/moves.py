"""Applying moves to a game state."""

from __future__ import annotations

from .state import EMPTY, INVALID_COORD, CastlingRights, Coord, GameResult, GameState, Move

_CASTLE_ROOK_MOVES = {
    "K": ((7, 7), (7, 5), "R"),
    "Q": ((7, 0), (7, 3), "R"),
    "k": ((0, 7), (0, 5), "r"),
    "q": ((0, 0), (0, 3), "r"),
}

_HALF_MOVE_LIMIT = 50


def apply_move(gs: GameState, move: Move) -> None:
    """Play the move on the state in place and pass the turn."""
    board = gs.board
    piece = move.piece

    board[move.to_row][move.to_col] = move.promotion or piece
    board[move.from_row][move.from_col] = EMPTY

    target = Coord(move.to_row, move.to_col)
    if target == gs.en_passant:
        if piece == "P":
            board[move.to_row + 1][move.to_col] = EMPTY
        elif piece == "p":
            board[move.to_row - 1][move.to_col] = EMPTY

    gs.en_passant = INVALID_COORD
    if piece == "P" and move.from_row == 6 and move.to_row == 4:
        gs.en_passant = Coord(5, move.from_col)
    elif piece == "p" and move.from_row == 1 and move.to_row == 3:
        gs.en_passant = Coord(2, move.from_col)

    rook_move = _CASTLE_ROOK_MOVES.get(move.castle)
    if rook_move is not None:
        (from_row, from_col), (to_row, to_col), rook = rook_move
        board[to_row][to_col] = rook
        board[from_row][from_col] = EMPTY

    update_castling_rights(gs.castling, move)

    if piece == "P" or move.capture not in ("", EMPTY):
        gs.counters.half_move = 0
    else:
        gs.counters.half_move += 1

    if gs.counters.half_move >= _HALF_MOVE_LIMIT:
        gs.results = GameResult.DRAW

    if not gs.white_to_move:
        gs.counters.full_move += 1

    gs.white_to_move = not gs.white_to_move


def update_castling_rights(rights: CastlingRights, move: Move) -> None:
    """Withdraw castling rights lost by this move, in place."""
    piece = move.piece

    if piece == "K":
        rights.white_kingside = False
        rights.white_queenside = False
    elif piece == "k":
        rights.black_kingside = False
        rights.black_queenside = False

    for rook, row, col in ((piece, move.from_row, move.from_col), (move.capture, move.to_row, move.to_col)):
        if rook == "R" and row == 7:
            if col == 0:
                rights.white_queenside = False
            elif col == 7:
                rights.white_kingside = False
        elif rook == "r" and row == 0:
            if col == 0:
                rights.black_queenside = False
            elif col == 7:
                rights.black_kingside = False