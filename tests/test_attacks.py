from simplechess.attacks import (
    get_checking_pieces,
    get_king,
    is_in_check,
    is_square_attacked,
    square_attacked_amount,
)
from simplechess.state import INVALID_COORD, algebraic_to_coords, fen_to_game_state, starting_fen


def sq(name):
    return algebraic_to_coords(name)


def test_get_king_white_and_black():
    gs = fen_to_game_state(starting_fen())
    assert get_king(gs) == sq("e1")
    gs.white_to_move = False
    assert get_king(gs) == sq("e8")


def test_get_king_missing():
    gs = fen_to_game_state("8/8/8/8/8/8/8/4K3 b - - 0 1")
    assert get_king(gs) == INVALID_COORD


def test_start_position_not_in_check():
    gs = fen_to_game_state(starting_fen())
    assert not is_in_check(gs)
    assert get_checking_pieces(gs) == []


def test_rook_attacks_file_and_rank():
    gs = fen_to_game_state("4k3/8/8/8/8/8/8/R3K3 b - - 0 1")
    a8 = sq("a8")
    h1 = sq("h1")
    b2 = sq("b2")
    assert is_square_attacked(gs, a8.row, a8.col)
    # The white king on e1 blocks the rook's path to h1.
    assert not is_square_attacked(gs, h1.row, h1.col)
    assert not is_square_attacked(gs, b2.row, b2.col)
    assert not is_in_check(gs)


def test_white_pawn_attacks_diagonally_forward():
    gs = fen_to_game_state("4k3/8/8/8/4P3/8/8/4K3 b - - 0 1")
    d5, f5, e5, d3 = sq("d5"), sq("f5"), sq("e5"), sq("d3")
    assert is_square_attacked(gs, d5.row, d5.col)
    assert is_square_attacked(gs, f5.row, f5.col)
    assert not is_square_attacked(gs, e5.row, e5.col)
    assert not is_square_attacked(gs, d3.row, d3.col)


def test_black_pawn_attacks_diagonally_forward():
    gs = fen_to_game_state("4k3/8/8/4p3/8/8/8/4K3 w - - 0 1")
    d4, f4, d6 = sq("d4"), sq("f4"), sq("d6")
    assert is_square_attacked(gs, d4.row, d4.col)
    assert is_square_attacked(gs, f4.row, f4.col)
    assert not is_square_attacked(gs, d6.row, d6.col)


def test_double_check_pieces():
    gs = fen_to_game_state("4k3/8/3N4/8/8/8/8/4R1K1 b - - 0 1")
    assert is_in_check(gs)
    checkers = get_checking_pieces(gs)
    assert set(checkers) == {sq("e1"), sq("d6")}
    king = get_king(gs)
    assert square_attacked_amount(gs, king.row, king.col) == len(checkers)


def test_blocked_slider_does_not_attack():
    gs = fen_to_game_state("4k3/4p3/8/8/8/8/8/4R1K1 b - - 0 1")
    assert not is_in_check(gs)
    assert get_checking_pieces(gs) == []


def test_bishop_and_queen_diagonals():
    gs = fen_to_game_state("4k3/8/8/1B6/8/8/8/Q5K1 b - - 0 1")
    king = get_king(gs)
    assert get_checking_pieces(gs) == [sq("b5")]
    d4 = sq("d4")
    assert square_attacked_amount(gs, d4.row, d4.col) == len(
        [c for c in (sq("a1"),) if c]
    )
    assert is_square_attacked(gs, king.row, king.col)


def test_adjacent_king_attacks():
    gs = fen_to_game_state("8/8/8/3k4/8/3K4/8/8 b - - 0 1")
    d4 = sq("d4")
    d6 = sq("d6")
    assert is_square_attacked(gs, d4.row, d4.col)
    assert not is_square_attacked(gs, d6.row, d6.col)