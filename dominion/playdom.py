"""A two-player game played out by fixed strategies."""

from __future__ import annotations

import re
import sys
from typing import Optional, Sequence, TextIO

from dominion.cards import Card
from dominion.effects import play_card
from dominion.game import GameError, GameState, initialize_game
from dominion.interface import count_hand_coins

DEFAULT_KINGDOM = (
    Card.ADVENTURER,
    Card.GARDENS,
    Card.EMBARGO,
    Card.VILLAGE,
    Card.MINION,
    Card.MINE,
    Card.CUTPURSE,
    Card.SEA_HAG,
    Card.TRIBUTE,
    Card.SMITHY,
)


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def _last_index(hand: Sequence[int], card: int) -> Optional[int]:
    positions = [i for i, c in enumerate(hand) if c == card]
    return positions[-1] if positions else None


def _try_play(state: GameState, hand_pos: int) -> None:
    try:
        play_card(state, hand_pos, -1, -1, -1)
    except GameError:
        pass


def _buy(state: GameState, card: Card) -> None:
    try:
        state.buy_card(card)
    except GameError:
        pass


def _smithy_turn(state: GameState, out: TextIO, num_smithies: int) -> int:
    hand = state.hands[0]
    money = count_hand_coins(state, 0)
    smithy_pos = _last_index(hand, Card.SMITHY)
    if smithy_pos is not None:
        out.write(f"0: smithy played from position {smithy_pos}\n")
        _try_play(state, smithy_pos)
        out.write("smithy played.\n")
        money = count_hand_coins(state, 0)

    if money >= 8:
        out.write("0: bought province\n")
        _buy(state, Card.PROVINCE)
    elif money >= 6:
        out.write("0: bought gold\n")
        _buy(state, Card.GOLD)
    elif money >= 4 and num_smithies < 2:
        out.write("0: bought smithy\n")
        _buy(state, Card.SMITHY)
        num_smithies += 1
    elif money >= 3:
        out.write("0: bought silver\n")
        _buy(state, Card.SILVER)

    out.write("0: end turn\n")
    state.end_turn()
    return num_smithies


def _adventurer_turn(state: GameState, out: TextIO, num_adventurers: int) -> int:
    player = state.whose_turn
    hand = state.hands[player]
    money = count_hand_coins(state, player)
    adventurer_pos = _last_index(hand, Card.ADVENTURER)
    if adventurer_pos is not None:
        out.write(f"1: adventurer played from position {adventurer_pos}\n")
        _try_play(state, adventurer_pos)
        money = count_hand_coins(state, player)

    if money >= 8:
        out.write("1: bought province\n")
        _buy(state, Card.PROVINCE)
    elif money >= 6 and num_adventurers < 2:
        out.write("1: bought adventurer\n")
        _buy(state, Card.ADVENTURER)
        num_adventurers += 1
    elif money >= 6:
        out.write("1: bought gold\n")
        _buy(state, Card.GOLD)
    elif money >= 3:
        out.write("1: bought silver\n")
        _buy(state, Card.SILVER)

    out.write("1: endTurn\n")
    state.end_turn()
    return num_adventurers


def play_game(seed: int, out: Optional[TextIO] = None) -> tuple[int, int]:
    """Play a smithy strategy against an adventurer strategy; return both scores."""
    out = out if out is not None else sys.stdout
    out.write("Starting game.\n")
    state = initialize_game(2, DEFAULT_KINGDOM, seed)

    num_smithies = 0
    num_adventurers = 0
    while not state.is_game_over():
        if state.whose_turn == 0:
            num_smithies = _smithy_turn(state, out, num_smithies)
        else:
            num_adventurers = _adventurer_turn(state, out, num_adventurers)

    scores = (state.score_for(0), state.score_for(1))
    out.write("Finished game.\n")
    out.write(f"Player 0: {scores[0]}\nPlayer 1: {scores[1]}\n")
    return scores


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: ``playdom SEED``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Usage: playdom [integer random number seed]")
        return 1
    play_game(_atoi(args[0]))
    return 0


if __name__ == "__main__":
    sys.exit(main())