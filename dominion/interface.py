"""Text views of a game and the simple bot used by the interactive player."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, TextIO

from dominion.cards import (
    NUM_K_CARDS,
    NUM_TOTAL_K_CARDS,
    TREASURE_VALUES,
    Card,
    card_cost,
    card_name,
    cost,
    phase_name,
)
from dominion.game import GameError, GameState
from dominion.rngs import RandomStreams

_HELP_LINES = (
    "Commands are: ",
    "  add [Supply Card Number] \t\t\t- add any card to your hand (teh hacks)",
    "  buy [Supply Card Number] \t\t\t- buy a card at supply position",
    "  end \t\t\t      \t\t\t- end your turn",
    "  init [Number of Players] [Number of Bots] \t- initialize the game",
    "  num \t\t\t      \t\t\t- print number of cards in your hand",
    "  play [Hand Index] [Choice] [Choice] [Choice]\t- play a card from your hand",
    "  resign\t\t\t\t\t- end the game showing the current scores",
    "  show \t\t\t\t\t\t- show your current hand",
    "  stat \t\t\t\t\t\t- show your turn's status",
    "  supp \t\t\t\t\t\t- show the supply",
    "  whos \t\t\t      \t\t\t- whos turn",
    "  exit \t\t\t      \t\t\t- exit the interface",
)


def _format_pile(title: str, cards: Iterable[int], row_end: str) -> str:
    cards = list(cards)
    lines = [title]
    if cards:
        lines.append("#  Card\n")
    lines.extend(
        f"{index:<2d} {card_name(card):<13}{row_end}" for index, card in enumerate(cards)
    )
    lines.append("\n")
    return "".join(lines)


def format_hand(state: GameState, player: int) -> str:
    """Numbered listing of a player's hand."""
    return _format_pile(f"Player {player}'s hand:\n", state.hands[player], "\n")


def format_deck(state: GameState, player: int) -> str:
    """Numbered listing of a player's deck."""
    return _format_pile(f"Player {player}'s deck: \n", state.decks[player], "\n")


def format_played(state: GameState, player: int) -> str:
    """Numbered listing of the cards played this turn."""
    return _format_pile(f"Player {player}'s played cards: \n", state.played_cards, " \n")


def format_discard(state: GameState, player: int) -> str:
    """Numbered listing of a player's discard pile."""
    return _format_pile(f"Player {player}'s discard: \n", state.discards[player], " \n")


def format_supply(state: GameState) -> str:
    """Table of the supply piles that are in the game."""
    lines = ["#   Card          Cost   Copies\n"]
    for card in range(NUM_TOTAL_K_CARDS):
        count = state.supply[card]
        if count == -1:
            continue
        lines.append(
            f"{card:<2d}  {card_name(card):<13} {card_cost(card):<5d}  {count:<5d}\n"
        )
    lines.append("\n")
    return "".join(lines)


def format_state(state: GameState) -> str:
    """Summary of the current player's turn."""
    return (
        f"Player {state.whose_turn}:\n{phase_name(state.phase)} phase\n"
        f"{state.num_actions} actions\n{state.coins} coins\n{state.num_buys} buys\n\n"
    )


def format_scores(state: GameState) -> str:
    """One line per player giving their score."""
    return "".join(
        f"Player {player} has a score of {state.score_for(player)}\n"
        for player in range(state.num_players)
    )


def help_text() -> str:
    """The list of commands the interactive player understands."""
    return "\n".join(_HELP_LINES) + "\n\n"


def add_card_to_hand(state: GameState, player: int, card: int) -> None:
    """Put any kingdom card straight into a player's hand."""
    if not Card.ADVENTURER <= card < NUM_TOTAL_K_CARDS:
        raise GameError(f"card {card} is not a kingdom card")
    state.hands[player].append(Card(card))


def select_kingdom_cards(seed: int, rng: Optional[RandomStreams] = None) -> list[Card]:
    """Pick ten different kingdom cards at random from a seeded stream."""
    rng = rng if rng is not None else RandomStreams()
    rng.select_stream(1)
    rng.put_seed(seed)
    chosen: list[Card] = []
    while len(chosen) < NUM_K_CARDS:
        card = int(rng.random() * NUM_TOTAL_K_CARDS)
        if card < Card.ADVENTURER or card in chosen:
            continue
        chosen.append(Card(card))
    return chosen


def count_hand_coins(state: GameState, player: int) -> int:
    """Total treasure value of a player's hand."""
    return sum(TREASURE_VALUES.get(card, 0) for card in state.hands[player])


def execute_bot_turn(
    state: GameState, player: int, turn_num: int, out: Optional[TextIO] = None
) -> int:
    """Play one turn for a bot and return the updated turn number."""
    out = out if out is not None else sys.stdout
    coins = count_hand_coins(state, player)
    out.write(
        f"*****************Executing Bot Player {player} "
        f"Turn Number {turn_num}*****************\n"
    )
    out.write(format_supply(state))

    provinces = state.supply_count(Card.PROVINCE)
    if coins >= cost(Card.PROVINCE) and provinces > 0:
        choice: Optional[Card] = Card.PROVINCE
    elif provinces == 0 and coins >= cost(Card.DUCHY):
        choice = Card.DUCHY
    elif coins >= cost(Card.GOLD) and state.supply_count(Card.GOLD) > 0:
        choice = Card.GOLD
    elif coins >= cost(Card.SILVER) and state.supply_count(Card.SILVER) > 0:
        choice = Card.SILVER
    else:
        choice = None

    if choice is not None:
        try:
            state.buy_card(choice)
        except GameError:
            pass
        out.write(f"Player {player} buys card {card_name(choice)}\n\n")

    if player == state.num_players - 1:
        turn_num += 1
    state.end_turn()
    if not state.is_game_over():
        out.write(f"Player {state.whose_turn}'s turn number {turn_num}\n\n")
    return turn_num