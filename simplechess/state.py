"""Core chess data types, FEN parsing and board formatting."""

from __future__ import annotations

import copy as _copy
from dataclasses import dataclass, field
from enum import IntEnum

Board = list[list[str]]

EMPTY = "."


@dataclass(frozen=True)
class Coord:
    """A square given as row (0 is rank 8) and column (0 is file a)."""

    row: int
    col: int


INVALID_COORD = Coord(-1, -1)


@dataclass
class CastlingRights:
    """Which castling moves are still allowed."""

    white_kingside: bool = False
    white_queenside: bool = False
    black_kingside: bool = False
    black_queenside: bool = False


@dataclass
class MoveCounters:
    """Halfmove clock and fullmove number."""

    half_move: int = 0
    full_move: int = 1


class GameResult(IntEnum):
    """Whether the game is still going, or how it ended."""

    ONGOING = 0
    CHECKMATE = 1
    DRAW = 2

    def is_over(self) -> bool:
        """True once the game has ended by checkmate or draw."""
        return self in (GameResult.CHECKMATE, GameResult.DRAW)

    def __str__(self) -> str:
        return self.name.capitalize()


def _square_name(row: int, col: int) -> str:
    return f"{chr(ord('a') + col)}{8 - row}"


@dataclass
class Move:
    """A single chess move with the pieces involved."""

    from_row: int
    from_col: int
    to_row: int
    to_col: int
    piece: str = ""
    capture: str = ""
    promotion: str = ""
    castle: str = ""

    def same_squares(self, other: Move) -> bool:
        """True if both moves go from and to the same squares."""
        return (
            self.from_row == other.from_row
            and self.from_col == other.from_col
            and self.to_row == other.to_row
            and self.to_col == other.to_col
        )

    def __str__(self) -> str:
        origin = _square_name(self.from_row, self.from_col)
        target = _square_name(self.to_row, self.to_col)
        if self.capture:
            return f"{self.piece} {origin} -> {target}, Captured: {self.capture}"
        return f"{self.piece} {origin} -> {target}"


@dataclass(frozen=True)
class GameData:
    """A named position with an evaluation."""

    fen: str
    name: str
    score: int = 0


GAME_DATA: tuple[GameData, ...] = (
    GameData("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1", "Start Position", 0),
    GameData(
        "rnbqkbnr/pppp1ppp/8/4p3/4P3/5N2/PPPP1PPP/RNBQKB1R b KQkq - 1 2",
        "King's Knight Opening",
        0,
    ),
    GameData("rnbqkbnr/pppp1ppp/8/8/8/8/PPPP1PPp/RNBQKB2 b Kkq - 0 10", "Promotion", 0),
)


@dataclass
class GameState:
    """Everything needed to describe a chess position."""

    board: Board = field(default_factory=list)
    white_to_move: bool = True
    castling: CastlingRights = field(default_factory=CastlingRights)
    en_passant: Coord = INVALID_COORD
    counters: MoveCounters = field(default_factory=MoveCounters)
    results: GameResult = GameResult.ONGOING

    def copy(self) -> GameState:
        """Return an independent copy of this state."""
        return _copy.deepcopy(self)


def is_on_board(row: int, col: int) -> bool:
    """True if row and col both lie in 0..7."""
    return 0 <= row < 8 and 0 <= col < 8


def is_enemy(piece: str, is_white: bool) -> bool:
    """True if the piece belongs to the side opposing ``is_white``."""
    if piece == EMPTY:
        return False
    if is_white:
        return "a" <= piece <= "z"
    return "A" <= piece <= "Z"


def algebraic_to_coords(algebraic: str) -> Coord:
    """Convert a square such as 'e4' into a Coord."""
    if len(algebraic) < 2:
        raise ValueError(f"not a square: {algebraic!r}")
    row = 8 - (ord(algebraic[1]) - ord("0"))
    col = ord(algebraic[0]) - ord("a")
    return Coord(row, col)


def valid_square(square: str) -> bool:
    """True if the first two characters name a square on the board."""
    if len(square) < 2:
        return False
    file, rank = square[0], square[1]
    return "a" <= file <= "h" and "1" <= rank <= "8"


def starting_fen() -> str:
    """Return the FEN of the standard starting position."""
    return GAME_DATA[0].fen


def _parse_placement(placement: str) -> Board:
    board: Board = []
    for rank in placement.split("/"):
        row: list[str] = []
        for char in rank:
            if "1" <= char <= "8":
                row.extend(EMPTY * int(char))
            else:
                row.append(char)
        board.append(row)
    return board


def fen_to_game_state(fen: str) -> GameState:
    """Build a GameState from a FEN string."""
    parts = fen.split(" ")
    if len(parts) < 4:
        raise ValueError(f"incomplete FEN: {fen!r}")
    board = _parse_placement(parts[0])

    castling = CastlingRights()
    if parts[2] != "-":
        castling.white_kingside = "K" in parts[2]
        castling.white_queenside = "Q" in parts[2]
        castling.black_kingside = "k" in parts[2]
        castling.black_queenside = "q" in parts[2]

    en_passant = INVALID_COORD if parts[3] == "-" else algebraic_to_coords(parts[3])

    return GameState(
        board=board,
        white_to_move=parts[1] == "w",
        castling=castling,
        en_passant=en_passant,
        counters=MoveCounters(0, 1),
        results=GameResult.ONGOING,
    )


def new_game_state() -> GameState:
    """Return a state with white to move, full castling rights and no board."""
    return GameState(
        white_to_move=True,
        castling=CastlingRights(True, True, True, True),
        en_passant=INVALID_COORD,
        counters=MoveCounters(0, 1),
        results=GameResult.ONGOING,
    )


def new_slice_board() -> Board:
    """Return the starting position as an 8x8 grid of piece letters."""
    return _parse_placement("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR")


def format_board(board: Board) -> str:
    """Render the board with rank numbers on the right and files below."""
    lines = [" ".join(row) + f" {8 - index}" for index, row in enumerate(board[:8])]
    lines.append("a b c d e f g h")
    return "\n".join(lines)


def format_result(result: GameResult, is_white: bool) -> str:
    """Describe a finished game; empty while the game is ongoing."""
    if result == GameResult.CHECKMATE:
        return "Black wins" if is_white else "White wins"
    if result == GameResult.DRAW:
        return "Draw"
    return ""