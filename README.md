# simplechess

A small chess engine. It reads positions in FEN and generates legal moves. It
can play a game against itself or against a human at the terminal.

## Installing

```
pip install .
```

## Playing

```
simplechess
```

This prints `Starting Chess Engine...` and the standard opening position. The
engine then plays both sides. On every turn it plays the second legal move in
the generated list. After each move it prints the board and a separator line.
The game stops at checkmate or a draw, and the result is printed
(`White wins`, `Black wins` or `Draw`). If the side to move ever has fewer than
two legal moves while the game is still going, the command stops with a
`RuntimeError`.

The board has ranks on the right and files along the bottom:

```
r n b q k b n r 8
p p p p p p p p 7
. . . . . . . . 6
...
a b c d e f g h
```

To enter the moves yourself:

```
simplechess --help
simplechess --human
```

In `--human` mode you type each move as four characters: the source square
followed by the target square, for example `e2e4`. You enter the moves for
both sides.

- A malformed or illegal move prints a message, and you are asked again.
- A pawn that reaches the last rank becomes a queen.
- Typing `exit`, or ending the input, stops the game.

## Precomputed piece boards

```
simplechess-bitboards
```

This builds the movement masks for knights, rooks and bishops on every square
of an empty board. It prints the name of every mask, then draws the bishop mask
for row 1, column 2 (`b12`) as eight lines of `0` and `1`.

Mask names have the form `n<row><col>`, `r<row><col>` and `b<row><col>`.

## Using it as a library

```python
from simplechess.state import fen_to_game_state, starting_fen, format_board
from simplechess.movegen import generate_all_moves
from simplechess.moves import apply_move

gs = fen_to_game_state(starting_fen())
moves = generate_all_moves(gs)
apply_move(gs, moves[0])
print(format_board(gs.board))
```

The modules:

- `simplechess.state`
  - Data types: `GameState`, `Move`, `Coord`, `CastlingRights`, `MoveCounters`, `GameResult` and `GameData`.
  - FEN parsing: `fen_to_game_state`.
  - Square helpers: `algebraic_to_coords` and `valid_square`.
  - Text output: `format_board` and `format_result`.
- `simplechess.movegen`
  - `generate_all_moves` returns the legal moves for the side to move.
  - When no legal move remains, it sets `gs.results`: `GameResult.CHECKMATE` if the side to move is in check, `GameResult.DRAW` otherwise.
  - Per-piece generators such as `generate_pawn_moves` and `generate_king_moves` return pseudo-legal moves.
- `simplechess.moves`
  - `apply_move` plays a move in place. This includes en passant, castling, promotion, castling rights and the move counters.
  - The game is marked a draw once the halfmove clock reaches 50.
- `simplechess.attacks`: `get_king`, `is_square_attacked`, `square_attacked_amount`, `is_in_check` and `get_checking_pieces`.
- `simplechess.human`
  - `parse_move` reads coordinate notation.
  - `check_human_move` plays a typed move if it matches one of the given legal moves.
  - Both raise `InvalidMoveError` when the move is malformed or illegal.
- `simplechess.bitboards`: the `Bitboard` type and the precomputed movement masks.

## What it does not do

- It has no search or position evaluation. The self-playing mode does not try to play well.
- It does not speak any engine protocol for graphical chess front-ends.
- It does not write positions back out as FEN.
- It does not detect draws by repetition or by insufficient material.
- When a position is read from FEN, its halfmove and fullmove fields are ignored. The counters start at 0 and 1.

## Tests

```
pip install .[test]
pytest
```