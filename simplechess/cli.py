"""Command line game loop: the engine plays itself, or a human plays."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from typing import TextIO

from .human import InvalidMoveError, check_human_move
from .movegen import generate_all_moves
from .moves import apply_move
from .state import GameResult, GameState, fen_to_game_state, format_board, format_result, starting_fen

SEPARATOR = "_________________"
PROMPT = "Move (e.g. e2e4): "


def _report_end(gs: GameState, out: TextIO) -> None:
    print(format_result(gs.results, gs.white_to_move), file=out)


def run_auto(gs: GameState, out: TextIO) -> GameResult:
    """Play the second generated legal move every turn until the game ends."""
    while True:
        all_moves = generate_all_moves(gs)
        if gs.results.is_over():
            _report_end(gs, out)
            return gs.results
        if len(all_moves) < 2:
            raise RuntimeError("the side to move has fewer than two legal moves")
        apply_move(gs, all_moves[1])
        print(format_board(gs.board), file=out)
        print(SEPARATOR, file=out)


def run_human(gs: GameState, lines: Iterable[str], out: TextIO) -> GameResult:
    """Read moves from ``lines`` and play them until the game ends, 'exit' or input runs out."""
    source = iter(lines)
    while True:
        all_moves = generate_all_moves(gs)
        if gs.results.is_over():
            _report_end(gs, out)
            return gs.results

        out.write(PROMPT)
        line = next(source, None)
        if line is None:
            out.write("\n")
            return gs.results

        text = line.strip()
        if text == "exit":
            return gs.results

        print(f"You entered: {text}", file=out)
        try:
            check_human_move(gs, all_moves, text)
        except InvalidMoveError as err:
            print(err, file=out)
            continue

        print(format_board(gs.board), file=out)


def main(argv=None) -> int:
    """Start a game from the standard position."""
    parser = argparse.ArgumentParser(prog="simplechess", description="Play a game of chess.")
    parser.add_argument("--human", action="store_true", help="enter the moves yourself")
    args = parser.parse_args(argv)

    out = sys.stdout
    print("Starting Chess Engine...", file=out)
    gs = fen_to_game_state(starting_fen())
    print(format_board(gs.board), file=out)

    if args.human:
        run_human(gs, sys.stdin, out)
    else:
        run_auto(gs, out)
    return 0