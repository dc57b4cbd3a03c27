"""What each action card does when it is played."""

from __future__ import annotations

from typing import Callable, Dict, Iterator

from dominion.cards import Card, Phase, cost
from dominion.game import Destination, GameError, GameState

_NO_CARD = -1
_FEAST_BUDGET = 5
_BARON_COINS = 4
_TREASURE_MAP_GOLDS = 4

_TREASURES = (Card.COPPER, Card.SILVER, Card.GOLD)
_VICTORIES = (Card.ESTATE, Card.DUCHY, Card.PROVINCE, Card.GARDENS, Card.GREAT_HALL)


def _cost_or_invalid(card: int) -> int:
    try:
        return cost(card)
    except ValueError:
        return -1


def _draw(state: GameState, player: int, times: int = 1) -> None:
    for _ in range(times):
        state.draw_card(player)


def _try_gain(
    state: GameState,
    card: int,
    player: int,
    destination: Destination = Destination.DISCARD,
) -> bool:
    try:
        state.gain_card(card, player, destination)
    except GameError:
        return False
    return True


def _others(state: GameState, player: int) -> Iterator[int]:
    return (i for i in range(state.num_players) if i != player)


def _discard_first(state: GameState, player: int, card: int, trash: bool = False) -> None:
    hand = state.hands[player]
    if card in hand:
        state.discard_card(hand.index(card), player, trash)


def _discard_whole_hand(state: GameState, player: int, hand_pos: int) -> None:
    hand = state.hands[player]
    while hand:
        pos = min(max(hand_pos, 0), len(hand) - 1)
        state.discard_card(pos, player)


def _reveal_top(state: GameState, player: int) -> int:
    deck = state.decks[player]
    if not deck:
        discard = state.discards[player]
        deck.extend(discard)
        discard.clear()
        if not deck:
            return _NO_CARD
        state.shuffle(player)
    return deck.pop()


def _gain_estate_twice_counted(state: GameState, player: int) -> None:
    if state.supply_count(Card.ESTATE) > 0:
        state.gain_card(Card.ESTATE, player)
        state.supply[Card.ESTATE] -= 1


def _adventurer(state, player, choice1, choice2, choice3, hand_pos):
    set_aside = []
    found = 0
    while found < 2:
        card = state.draw_card(player)
        if card is None:
            break
        if card in _TREASURES:
            found += 1
        else:
            set_aside.append(state.hands[player].pop())
    state.discards[player].extend(reversed(set_aside))


def _council_room(state, player, choice1, choice2, choice3, hand_pos):
    _draw(state, player, 4)
    state.num_buys += 1
    for other in _others(state, player):
        state.draw_card(other)
    state.discard_card(hand_pos, player)


def _feast(state, player, choice1, choice2, choice3, hand_pos):
    if state.supply_count(choice1) <= 0:
        raise GameError("none of that card left")
    if _FEAST_BUDGET < _cost_or_invalid(choice1):
        raise GameError("that card is too expensive")
    state.coins = _FEAST_BUDGET
    state.gain_card(choice1, player, Destination.DISCARD)


def _gardens(state, player, choice1, choice2, choice3, hand_pos):
    raise GameError("gardens cannot be played")


def _mine(state, player, choice1, choice2, choice3, hand_pos):
    trashed = state.hand_card(choice1)
    if not Card.COPPER <= trashed <= Card.GOLD:
        raise GameError("mine must trash a treasure")
    if not Card.CURSE <= choice2 <= Card.TREASURE_MAP:
        raise GameError(f"unknown card {choice2}")
    if cost(trashed) + 3 > cost(choice2):
        raise GameError("mine can only gain a card costing up to 3 more")
    _try_gain(state, choice2, player, Destination.HAND)
    state.discard_card(hand_pos, player)
    _discard_first(state, player, trashed)


def _remodel(state, player, choice1, choice2, choice3, hand_pos):
    trashed = state.hand_card(choice1)
    if _cost_or_invalid(trashed) + 2 > _cost_or_invalid(choice2):
        raise GameError("remodel can only gain a card costing up to 2 more")
    _try_gain(state, choice2, player, Destination.DISCARD)
    state.discard_card(hand_pos, player)
    _discard_first(state, player, trashed)


def _smithy(state, player, choice1, choice2, choice3, hand_pos):
    _draw(state, player, 3)
    state.discard_card(hand_pos, player)


def _village(state, player, choice1, choice2, choice3, hand_pos):
    state.draw_card(player)
    state.num_actions += 2
    state.discard_card(hand_pos, player)


def _baron(state, player, choice1, choice2, choice3, hand_pos):
    state.num_buys += 1
    hand = state.hands[player]
    if choice1 > 0 and Card.ESTATE in hand:
        state.coins += _BARON_COINS
        state.discards[player].append(hand.pop(hand.index(Card.ESTATE)))
    else:
        _gain_estate_twice_counted(state, player)


def _great_hall(state, player, choice1, choice2, choice3, hand_pos):
    state.draw_card(player)
    state.num_actions += 1
    state.discard_card(hand_pos, player)


def _minion(state, player, choice1, choice2, choice3, hand_pos):
    state.num_actions += 1
    state.discard_card(hand_pos, player)
    if choice1:
        state.coins += 2
    elif choice2:
        _discard_whole_hand(state, player, hand_pos)
        _draw(state, player, 4)
        for other in _others(state, player):
            if len(state.hands[other]) > 4:
                _discard_whole_hand(state, other, hand_pos)
                _draw(state, other, 4)


def _steward(state, player, choice1, choice2, choice3, hand_pos):
    if choice1 == 1:
        _draw(state, player, 2)
    elif choice1 == 2:
        state.coins += 2
    else:
        state.discard_card(choice2, player, True)
        state.discard_card(choice3, player, True)
    state.discard_card(hand_pos, player)


def _tribute(state, player, choice1, choice2, choice3, hand_pos):
    victim = player + 1 if player + 1 < state.num_players else 0
    deck, discard = state.decks[victim], state.discards[victim]
    revealed = [_NO_CARD, _NO_CARD]
    if len(deck) + len(discard) <= 1:
        if deck:
            revealed[0] = deck.pop()
        elif discard:
            revealed[0] = discard.pop()
    else:
        revealed = [_reveal_top(state, victim), _reveal_top(state, victim)]

    if revealed[0] == revealed[1]:
        state.played_cards.append(revealed[1])
        revealed[1] = _NO_CARD

    for card in revealed:
        if card in _TREASURES:
            state.coins += 2
        elif card in _VICTORIES:
            _draw(state, player, 2)
        else:
            state.num_actions += 2


def _ambassador(state, player, choice1, choice2, choice3, hand_pos):
    if not 0 <= choice2 <= 2:
        raise GameError("ambassador returns 0 to 2 cards")
    if choice1 == hand_pos:
        raise GameError("ambassador cannot reveal itself")
    hand = state.hands[player]
    revealed = state.hand_card(choice1)
    copies = sum(
        1
        for i in range(len(hand))
        if i != hand_pos and i == revealed and i != choice1
    )
    if copies < choice2:
        raise GameError("not enough copies to return")

    state.supply[revealed] += choice2
    for other in _others(state, player):
        _try_gain(state, revealed, other)
    state.discard_card(hand_pos, player)

    for _ in range(choice2):
        target = hand[choice1] if 0 <= choice1 < len(hand) else _NO_CARD
        _discard_first(state, player, target, trash=True)


def _cutpurse(state, player, choice1, choice2, choice3, hand_pos):
    state.update_coins(player, 2)
    for other in _others(state, player):
        _discard_first(state, other, Card.COPPER)
    state.discard_card(hand_pos, player)


def _embargo(state, player, choice1, choice2, choice3, hand_pos):
    state.coins += 2
    if state.supply_count(choice1) == -1:
        raise GameError("that pile is not in the game")
    state.embargo_tokens[choice1] += 1
    state.discard_card(hand_pos, player, True)


def _outpost(state, player, choice1, choice2, choice3, hand_pos):
    state.outpost_played += 1
    state.discard_card(hand_pos, player)


def _salvager(state, player, choice1, choice2, choice3, hand_pos):
    state.num_buys += 1
    if choice1:
        state.coins += _cost_or_invalid(state.hand_card(choice1))
        state.discard_card(choice1, player, True)
    state.discard_card(hand_pos, player)


def _sea_hag(state, player, choice1, choice2, choice3, hand_pos):
    for other in _others(state, player):
        deck = state.decks[other]
        if deck:
            state.discards[other].append(deck.pop())
        deck.append(Card.CURSE)


def _treasure_map(state, player, choice1, choice2, choice3, hand_pos):
    hand = state.hands[player]
    other = next(
        (i for i, card in enumerate(hand) if card == Card.TREASURE_MAP and i != hand_pos),
        None,
    )
    if other is None:
        raise GameError("no second treasure map in hand")
    for pos in sorted((hand_pos, other), reverse=True):
        state.discard_card(pos, player, True)
    for _ in range(_TREASURE_MAP_GOLDS):
        _try_gain(state, Card.GOLD, player, Destination.DECK)


_Effect = Callable[[GameState, int, int, int, int, int], None]

_EFFECTS: Dict[Card, _Effect] = {
    Card.ADVENTURER: _adventurer,
    Card.COUNCIL_ROOM: _council_room,
    Card.FEAST: _feast,
    Card.GARDENS: _gardens,
    Card.MINE: _mine,
    Card.REMODEL: _remodel,
    Card.SMITHY: _smithy,
    Card.VILLAGE: _village,
    Card.BARON: _baron,
    Card.GREAT_HALL: _great_hall,
    Card.MINION: _minion,
    Card.STEWARD: _steward,
    Card.TRIBUTE: _tribute,
    Card.AMBASSADOR: _ambassador,
    Card.CUTPURSE: _cutpurse,
    Card.EMBARGO: _embargo,
    Card.OUTPOST: _outpost,
    Card.SALVAGER: _salvager,
    Card.SEA_HAG: _sea_hag,
    Card.TREASURE_MAP: _treasure_map,
}


def card_effect(
    state: GameState,
    card: int,
    choice1: int = 0,
    choice2: int = 0,
    choice3: int = 0,
    hand_pos: int = 0,
) -> None:
    """Carry out what an action card does for the current player.

    Raises GameError if the card cannot be played or a choice is invalid.
    """
    effect = _EFFECTS.get(card)
    if effect is None:
        raise GameError(f"card {card} has no action")
    effect(state, state.whose_turn, choice1, choice2, choice3, hand_pos)


def play_card(
    state: GameState,
    hand_pos: int,
    choice1: int = 0,
    choice2: int = 0,
    choice3: int = 0,
) -> None:
    """Play the action card at a position in the current player's hand."""
    if state.phase != Phase.ACTION:
        raise GameError("actions can only be played in the action phase")
    if state.num_actions < 1:
        raise GameError("no actions left")
    card = state.hand_card(hand_pos)
    if not Card.ADVENTURER <= card <= Card.TREASURE_MAP:
        raise GameError("that card is not an action")
    card_effect(state, card, choice1, choice2, choice3, hand_pos)
    state.num_actions -= 1
    state.update_coins(state.whose_turn, 0)