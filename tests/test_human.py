import pytest

from simplechess.human import InvalidMoveError, check_human_move, parse_move
from simplechess.movegen import generate_all_moves
from simplechess.state import fen_to_game_state, new_game_state, new_slice_board, starting_fen


@pytest.fixture
def start():
    return fen_to_game_state(starting_fen())


def test_parse_move_reads_squares(start):
    move = parse_move("e2e4", start)
    assert (move.from_row, move.from_col, move.to_row, move.to_col) == (6, 4, 4, 4)
    assert move.piece == "P"
    assert move.capture == "."


def test_parse_move_records_target_piece():
    gs = fen_to_game_state("4k3/8/8/3p4/4P3/8/8/4K3 w - - 0 1")
    move = parse_move("e4d5", gs)
    assert move.capture == "p"


@pytest.mark.parametrize(
    "text, message",
    [
        ("e2e44", "expected 4 chars"),
        ("e2", "expected 4 chars"),
        ("i2e4", "invalid from square: i2"),
        ("e2e9", "invalid to square: e9"),
        ("e7e5", "not your piece at e7"),
        ("e3e4", "not your piece at e3"),
    ],
)
def test_parse_move_errors(start, text, message):
    with pytest.raises(InvalidMoveError, match=message):
        parse_move(text, start)


def test_check_human_move_applies_legal_move(start):
    moves = generate_all_moves(start)
    played = check_human_move(start, moves, "e2e4")
    assert played in moves
    assert start.board[4][4] == "P"
    assert start.board[6][4] == "."
    assert start.white_to_move is False


def test_check_human_move_rejects_illegal_move(start):
    before = [rank[:] for rank in start.board]
    moves = generate_all_moves(start)
    with pytest.raises(InvalidMoveError, match="invalid move: e2e5"):
        check_human_move(start, moves, "e2e5")
    assert start.board == before
    assert start.white_to_move is True


def test_check_human_move_wraps_format_errors(start):
    moves = generate_all_moves(start)
    with pytest.raises(InvalidMoveError, match="invalid move format"):
        check_human_move(start, moves, "e2")


def test_check_human_move_uses_first_promotion():
    gs = fen_to_game_state("4k3/P7/8/8/8/8/8/4K3 w - - 0 1")
    moves = generate_all_moves(gs)
    played = check_human_move(gs, moves, "a7a8")
    assert played.promotion == "Q"
    assert gs.board[0][0] == "Q"


def test_check_human_move_castles_with_rook():
    gs = fen_to_game_state("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
    moves = generate_all_moves(gs)
    check_human_move(gs, moves, "e1g1")
    assert gs.board[7][6] == "K"
    assert gs.board[7][5] == "R"
    assert gs.board[7][7] == "."
    assert gs.castling.white_kingside is False
    assert gs.castling.white_queenside is False


def test_check_human_move_on_fresh_state():
    gs = new_game_state()
    gs.board = new_slice_board()
    moves = generate_all_moves(gs)
    check_human_move(gs, moves, "g1f3")
    assert gs.board[5][5] == "N"
    assert gs.board[7][6] == "."