"""Interactive command loop for playing a game at the terminal."""

from __future__ import annotations

import re
import sys
from typing import Iterable, Optional, Sequence, TextIO

from dominion.cards import MAX_PLAYERS, card_name
from dominion.effects import play_card
from dominion.game import GameError, initialize_game
from dominion.interface import (
    add_card_to_hand,
    execute_bot_turn,
    format_deck,
    format_discard,
    format_hand,
    format_played,
    format_scores,
    format_state,
    format_supply,
    help_text,
)
from dominion.playdom import DEFAULT_KINGDOM

USAGE = "Usage: player [integer random number seed]\n"
UNUSED = -1
_KEY_LENGTH = 4


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def _parse(line: str) -> tuple[str, list[int]]:
    tokens = line.split()
    if not tokens:
        return "", [UNUSED] * 4
    args: list[int] = []
    for token in tokens[1:5]:
        try:
            args.append(int(token))
        except ValueError:
            break
    args.extend([UNUSED] * (4 - len(args)))
    return tokens[0], args


def _is(command: str, keyword: str) -> bool:
    return command[:_KEY_LENGTH] == keyword[:_KEY_LENGTH]


def run_session(
    seed: int, lines: Iterable[str], out: Optional[TextIO] = None
) -> int:
    """Run the command loop over the given input lines; return the exit status."""
    out = out if out is not None else sys.stdout
    source = iter(lines)
    game = initialize_game(2, DEFAULT_KINGDOM, seed)
    is_bot = [False] * MAX_PLAYERS
    game_started = False
    turn_num = 0

    out.write('Please enter a command or "help" for commands\n')

    while True:
        current = game.whose_turn

        if game_started and game.is_game_over():
            out.write(format_scores(game))
            winners = game.get_winners()
            out.write(f"After {turn_num} turns, the winner(s) are:\n")
            for player in range(game.num_players):
                if winners[player]:
                    out.write(f"Player {player}\n")
            for player in range(game.num_players):
                out.write(format_hand(game, player))
                out.write(format_played(game, player))
                out.write(format_discard(game, player))
                out.write(format_deck(game, player))
            break

        if is_bot[current]:
            turn_num = execute_bot_turn(game, current, turn_num, out)
            continue

        out.write("$ ")
        line = next(source, None)
        if line is None:
            break
        command, (arg0, arg1, arg2, arg3) = _parse(line)

        if _is(command, "add"):
            try:
                add_card_to_hand(game, current, arg0)
            except GameError:
                pass
            out.write(f"Player {current} adds {card_name(arg0)} to their hand\n\n")
        elif _is(command, "buy"):
            try:
                game.buy_card(arg0)
            except GameError:
                out.write(f"Player {current} cannot buy card {arg0}, {card_name(arg0)}\n\n")
            else:
                out.write(f"Player {current} buys card {arg0}, {card_name(arg0)}\n\n")
        elif _is(command, "end"):
            if game_started:
                if current == game.num_players - 1:
                    turn_num += 1
                game.end_turn()
                out.write(f"Player {game.whose_turn}'s turn number {turn_num}\n\n")
        elif _is(command, "exit"):
            break
        elif _is(command, "help"):
            out.write(help_text())
        elif _is(command, "init"):
            for player in range(arg0 - arg1, arg0):
                if 0 <= player < MAX_PLAYERS:
                    is_bot[player] = True
            out.write("\n")
            try:
                game = initialize_game(arg0, DEFAULT_KINGDOM, seed)
            except GameError:
                pass
            else:
                game_started = True
                out.write(f"Player {game.whose_turn}'s turn number {turn_num}\n\n")
        elif _is(command, "num"):
            out.write(f"There are {game.num_hand_cards()} cards in your hand.\n")
        elif _is(command, "play"):
            try:
                card = game.hand_card(arg0)
                play_card(game, arg0, arg1, arg2, arg3)
            except GameError:
                out.write(f"Player {current} cannot play card {arg0}\n\n")
            else:
                out.write(f"Player {current} plays {card_name(card)}\n\n")
        elif _is(command, "resi"):
            game.end_turn()
            out.write(format_scores(game))
            break
        elif _is(command, "show"):
            if game_started:
                out.write(format_hand(game, current))
                out.write(format_played(game, current))
        elif _is(command, "stat"):
            if game_started:
                out.write(format_state(game))
        elif _is(command, "supp"):
            out.write(format_supply(game))
        elif _is(command, "whos"):
            out.write(f"Player {game.whose_turn}'s turn\n")

    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: ``player SEED``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1 or _atoi(args[0]) <= 0:
        sys.stdout.write(USAGE)
        return 0
    return run_session(_atoi(args[0]), sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())