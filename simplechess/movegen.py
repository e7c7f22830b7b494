"""Pseudo-legal and legal move generation."""

from __future__ import annotations

from dataclasses import replace

from .attacks import get_king, is_in_check, is_square_attacked, square_attacked_amount
from .bitboards import BISHOP_DIRS, KNIGHT_DIRS, QUEEN_DIRS, ROOK_DIRS
from .moves import apply_move
from .state import EMPTY, INVALID_COORD, Coord, GameResult, GameState, Move, is_enemy, is_on_board

_WHITE_PROMOTIONS = ("Q", "R", "B", "N")
_BLACK_PROMOTIONS = ("q", "r", "b", "n")


def _scratch_copy(gs: GameState) -> GameState:
    return replace(
        gs,
        board=[rank[:] for rank in gs.board],
        castling=replace(gs.castling),
        counters=replace(gs.counters),
    )


def generate_all_moves(gs: GameState) -> list[Move]:
    """Return every legal move for the side to move.

    Sets ``gs.results`` to CHECKMATE or DRAW when no legal move exists,
    and to CHECKMATE when the side to move has no king.
    """
    is_white = gs.white_to_move
    king = get_king(gs)
    if king == INVALID_COORD:
        gs.results = GameResult.CHECKMATE

    legal: list[Move] = []
    for row, rank in enumerate(gs.board):
        for col, piece in enumerate(rank):
            if piece == EMPTY or is_enemy(piece, is_white):
                continue
            for move in generate_piece_moves(gs, row, col, piece):
                king_square = Coord(move.to_row, move.to_col) if piece in ("K", "k") else king
                trial = _scratch_copy(gs)
                apply_move(trial, move)
                trial.white_to_move = is_white
                if square_attacked_amount(trial, king_square.row, king_square.col) == 0:
                    legal.append(move)

    if not legal:
        gs.results = GameResult.CHECKMATE if is_in_check(gs) else GameResult.DRAW

    return legal


def generate_piece_moves(gs: GameState, row: int, col: int, piece: str) -> list[Move]:
    """Return the pseudo-legal moves of the given piece."""
    generator = {
        "P": generate_pawn_moves,
        "N": generate_knight_moves,
        "B": generate_bishop_moves,
        "R": generate_rook_moves,
        "Q": generate_queen_moves,
        "K": generate_king_moves,
    }.get(piece.upper() if len(piece) == 1 else "")
    if generator is None:
        return []
    return generator(gs, row, col)


def generate_pawn_moves(gs: GameState, row: int, col: int) -> list[Move]:
    """Return pawn pushes, captures, promotions and en passant."""
    board = gs.board
    piece = board[row][col]
    is_white = gs.white_to_move
    direction, start_row, last_row = (-1, 6, 0) if is_white else (1, 1, 7)
    promotions = _WHITE_PROMOTIONS if is_white else _BLACK_PROMOTIONS
    moves: list[Move] = []

    new_row = row + direction
    if 0 <= new_row < 8 and board[new_row][col] == EMPTY:
        if new_row == last_row:
            moves.extend(Move(row, col, new_row, col, piece, promotion=promo) for promo in promotions)
        else:
            moves.append(Move(row, col, new_row, col, piece))
            two_row = row + 2 * direction
            if row == start_row and board[two_row][col] == EMPTY:
                moves.append(Move(row, col, two_row, col, piece))

    for col_offset in (-1, 1):
        new_col = col + col_offset
        if not is_on_board(new_row, new_col):
            continue
        target = board[new_row][new_col]
        if target == EMPTY or not is_enemy(target, is_white):
            continue
        if new_row == last_row:
            moves.extend(
                Move(row, col, new_row, new_col, piece, capture=target, promotion=promo)
                for promo in promotions
            )
        else:
            moves.append(Move(row, col, new_row, new_col, piece, capture=target))

    ep = gs.en_passant
    if ep != INVALID_COORD and abs(col - ep.col) == 1:
        if is_white and row == 3 and ep.row == 2:
            moves.append(Move(row, col, ep.row, ep.col, "P", capture=board[row][ep.col]))
        elif not is_white and row == 4 and ep.row == 5:
            moves.append(Move(row, col, ep.row, ep.col, "p", capture=board[row][ep.col]))

    return moves


def generate_knight_moves(gs: GameState, row: int, col: int) -> list[Move]:
    """Return knight jumps to empty or enemy squares."""
    board = gs.board
    piece = board[row][col]
    is_white = gs.white_to_move
    moves: list[Move] = []
    for d_row, d_col in KNIGHT_DIRS:
        new_row, new_col = row + d_row, col + d_col
        if not is_on_board(new_row, new_col):
            continue
        target = board[new_row][new_col]
        if target == EMPTY:
            moves.append(Move(row, col, new_row, new_col, piece))
        elif is_enemy(target, is_white):
            moves.append(Move(row, col, new_row, new_col, piece, capture=target))
    return moves


def generate_sliding_moves(gs: GameState, row: int, col: int, directions) -> list[Move]:
    """Return moves along each direction until blocked, including captures."""
    board = gs.board
    piece = board[row][col]
    is_white = gs.white_to_move
    moves: list[Move] = []
    for d_row, d_col in directions:
        new_row, new_col = row + d_row, col + d_col
        while is_on_board(new_row, new_col):
            target = board[new_row][new_col]
            if target != EMPTY:
                if is_enemy(target, is_white):
                    moves.append(Move(row, col, new_row, new_col, piece, capture=target))
                break
            moves.append(Move(row, col, new_row, new_col, piece))
            new_row += d_row
            new_col += d_col
    return moves


def generate_bishop_moves(gs: GameState, row: int, col: int) -> list[Move]:
    """Return diagonal sliding moves."""
    return generate_sliding_moves(gs, row, col, BISHOP_DIRS)


def generate_rook_moves(gs: GameState, row: int, col: int) -> list[Move]:
    """Return orthogonal sliding moves."""
    return generate_sliding_moves(gs, row, col, ROOK_DIRS)


def generate_queen_moves(gs: GameState, row: int, col: int) -> list[Move]:
    """Return diagonal and orthogonal sliding moves."""
    return generate_sliding_moves(gs, row, col, QUEEN_DIRS)


_CASTLES = (
    # (is_white, right attribute, rank, target column, empty columns, safe columns, piece, tag)
    (True, "white_kingside", 7, 6, (5, 6), (4, 5, 6), "K", "K"),
    (True, "white_queenside", 7, 2, (3, 2, 1), (4, 3, 2), "K", "Q"),
    (False, "black_kingside", 0, 6, (5, 6), (4, 5, 6), "k", "k"),
    (False, "black_queenside", 0, 2, (3, 2, 1), (4, 3, 2), "k", "q"),
)


def generate_king_moves(gs: GameState, row: int, col: int) -> list[Move]:
    """Return king steps to unattacked squares and available castling moves."""
    board = gs.board
    piece = board[row][col]
    is_white = gs.white_to_move
    moves: list[Move] = []

    for d_row, d_col in QUEEN_DIRS:
        new_row, new_col = row + d_row, col + d_col
        if not is_on_board(new_row, new_col):
            continue
        target = board[new_row][new_col]
        if target != EMPTY and not is_enemy(target, is_white):
            continue
        if not is_square_attacked(gs, new_row, new_col):
            capture = target if target != EMPTY else ""
            moves.append(Move(row, col, new_row, new_col, piece, capture=capture))

    for side_white, right, rank, to_col, empties, safe, king, tag in _CASTLES:
        if side_white != is_white or not getattr(gs.castling, right):
            continue
        if all(board[rank][c] == EMPTY for c in empties) and not any(
            is_square_attacked(gs, rank, c) for c in safe
        ):
            moves.append(Move(rank, 4, rank, to_col, king, castle=tag))

    return moves