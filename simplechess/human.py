"""Reading and checking moves typed by a human player."""

from __future__ import annotations

from collections.abc import Iterable

from .moves import apply_move
from .state import EMPTY, GameState, Move, algebraic_to_coords, is_enemy, valid_square


class InvalidMoveError(ValueError):
    """Raised when a typed move is malformed or not legal."""


def parse_move(text: str, gs: GameState) -> Move:
    """Turn coordinate notation such as 'e2e4' into a Move for the side to move."""
    if len(text) != 4:
        raise InvalidMoveError("invalid move format, expected 4 chars like 'e2e4'")

    origin, target = text[:2], text[2:]
    if not valid_square(origin):
        raise InvalidMoveError(f"invalid from square: {origin}")
    if not valid_square(target):
        raise InvalidMoveError(f"invalid to square: {target}")

    source = algebraic_to_coords(origin)
    destination = algebraic_to_coords(target)

    piece = gs.board[source.row][source.col]
    if piece == EMPTY or is_enemy(piece, gs.white_to_move):
        raise InvalidMoveError(f"not your piece at {origin}")

    return Move(
        from_row=source.row,
        from_col=source.col,
        to_row=destination.row,
        to_col=destination.col,
        piece=piece,
        capture=gs.board[destination.row][destination.col],
    )


def check_human_move(gs: GameState, all_moves: Iterable[Move], text: str) -> Move:
    """Play the typed move if it matches a legal move and return the move played.

    The first legal move with the same squares is used, so a pawn reaching
    the last rank promotes to the first promotion piece generated.
    """
    try:
        requested = parse_move(text, gs)
    except InvalidMoveError as err:
        raise InvalidMoveError(f"invalid move format: {err}") from err

    chosen = next((move for move in all_moves if move.same_squares(requested)), None)
    if chosen is None:
        raise InvalidMoveError(f"invalid move: {text}")

    apply_move(gs, chosen)
    return chosen