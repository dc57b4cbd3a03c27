import io

import pytest

from dominion.cards import Card, Phase
from dominion.game import GameError, GameState, initialize_game
from dominion.interface import (
    add_card_to_hand,
    count_hand_coins,
    execute_bot_turn,
    format_deck,
    format_discard,
    format_hand,
    format_played,
    format_scores,
    format_state,
    format_supply,
    help_text,
    select_kingdom_cards,
)

KINGDOM = [
    Card.ADVENTURER, Card.GARDENS, Card.EMBARGO, Card.VILLAGE, Card.MINION,
    Card.MINE, Card.CUTPURSE, Card.SEA_HAG, Card.TRIBUTE, Card.SMITHY,
]


def test_format_hand_rows():
    state = GameState(num_players=2)
    state.hands[0] = [Card.COPPER, Card.SMITHY]
    assert format_hand(state, 0) == (
        "Player 0's hand:\n#  Card\n0  Copper       \n1  Smithy       \n\n"
    )


def test_format_empty_piles_have_no_header():
    state = GameState(num_players=2)
    assert format_hand(state, 1) == "Player 1's hand:\n\n"
    assert format_deck(state, 1) == "Player 1's deck: \n\n"
    assert format_discard(state, 0) == "Player 0's discard: \n\n"


def test_format_played_has_trailing_space():
    state = GameState(num_players=2)
    state.played_cards = [Card.VILLAGE]
    text = format_played(state, 0)
    rows = text.splitlines()
    assert rows[0] == "Player 0's played cards: "
    assert rows[1] == "#  Card"
    assert rows[2].endswith(" ")
    assert rows[2].split() == ["0", "Village"]


def test_format_supply_lists_only_cards_in_game():
    state = initialize_game(2, KINGDOM, 1)
    lines = format_supply(state).splitlines()
    assert lines[0] == "#   Card          Cost   Copies"
    assert lines[1].startswith("0   Curse")
    assert lines[1].split() == ["0", "Curse", "0", "10"]
    assert not any("Council Room" in line for line in lines)
    assert any("Smithy" in line for line in lines)


def test_format_supply_empty_game():
    assert format_supply(GameState(num_players=2)) == "#   Card          Cost   Copies\n\n"


def test_format_state():
    state = GameState(num_players=2, phase=Phase.ACTION)
    assert format_state(state) == "Player 0:\nAction phase\n1 actions\n0 coins\n1 buys\n\n"


def test_format_scores_matches_score_for():
    state = initialize_game(3, KINGDOM, 2)
    lines = format_scores(state).splitlines()
    assert lines == [
        f"Player {i} has a score of {state.score_for(i)}" for i in range(3)
    ]


def test_help_text():
    text = help_text()
    assert text.startswith("Commands are: \n")
    assert "exit the interface" in text
    assert text.endswith("\n\n")


def test_add_card_to_hand():
    state = GameState(num_players=2)
    add_card_to_hand(state, 0, Card.SMITHY)
    assert state.hands[0] == [Card.SMITHY]


@pytest.mark.parametrize("card", [Card.COPPER, Card.CURSE, 27, -1])
def test_add_card_to_hand_rejects_non_kingdom(card):
    state = GameState(num_players=2)
    with pytest.raises(GameError):
        add_card_to_hand(state, 0, card)
    assert state.hands[0] == []


def test_select_kingdom_cards():
    cards = select_kingdom_cards(5)
    assert len(cards) == 10
    assert len(set(cards)) == 10
    assert all(Card.ADVENTURER <= c <= Card.TREASURE_MAP for c in cards)
    assert select_kingdom_cards(5) == cards


def test_count_hand_coins_agrees_with_update_coins():
    state = GameState(num_players=2)
    state.hands[0] = [Card.COPPER, Card.SILVER, Card.GOLD, Card.ESTATE]
    state.update_coins(0)
    assert count_hand_coins(state, 0) == state.coins


def test_execute_bot_turn_advances_turns():
    state = initialize_game(2, KINGDOM, 1)
    out = io.StringIO()
    turn = execute_bot_turn(state, 0, 0, out)
    assert turn == 0
    assert state.whose_turn == 1
    turn = execute_bot_turn(state, 1, turn, out)
    assert turn == 1
    assert state.whose_turn == 0
    text = out.getvalue()
    assert "Executing Bot Player 0 Turn Number 0" in text
    assert "Player 0's turn number 1\n" in text