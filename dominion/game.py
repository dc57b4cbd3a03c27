"""Game state and the rules that move cards between piles."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, Optional, Sequence

from dominion.cards import (
    HANDSIZE,
    MAX_PLAYERS,
    NUM_K_CARDS,
    NUM_TOTAL_K_CARDS,
    START_COPPER,
    START_ESTATE,
    TREASURE_VALUES,
    Card,
    Phase,
    cost,
)
from dominion.rngs import RandomStreams

UNUSED_SCORE = -9999
_GAME_OVER_PILES = 25

_VICTORY_POINTS = {
    Card.CURSE: -1,
    Card.ESTATE: 1,
    Card.DUCHY: 3,
    Card.PROVINCE: 6,
    Card.GREAT_HALL: 1,
}


class GameError(Exception):
    """Raised when a move breaks the rules or the state cannot allow it."""


class Destination(IntEnum):
    """Where a gained card is put."""

    DISCARD = 0
    DECK = 1
    HAND = 2


def kingdom_cards(*args: int) -> list[Card]:
    """Return the ten given kingdom cards as a list."""
    if len(args) != NUM_K_CARDS:
        raise GameError(f"expected {NUM_K_CARDS} kingdom cards, got {len(args)}")
    return [Card(card) for card in args]


@dataclass
class GameState:
    """Everything about a game in progress."""

    num_players: int = 2
    supply: list[int] = field(default_factory=lambda: [-1] * NUM_TOTAL_K_CARDS)
    embargo_tokens: list[int] = field(default_factory=lambda: [0] * NUM_TOTAL_K_CARDS)
    outpost_played: int = 0
    outpost_turn: int = 0
    whose_turn: int = 0
    phase: Phase = Phase.ACTION
    num_actions: int = 1
    coins: int = 0
    num_buys: int = 1
    hands: list[list[int]] = field(default_factory=list)
    decks: list[list[int]] = field(default_factory=list)
    discards: list[list[int]] = field(default_factory=list)
    played_cards: list[int] = field(default_factory=list)
    rng: RandomStreams = field(default_factory=RandomStreams, repr=False, compare=False)

    def __post_init__(self) -> None:
        for piles in (self.hands, self.decks, self.discards):
            piles.extend([] for _ in range(self.num_players - len(piles)))

    def shuffle(self, player: int) -> None:
        """Shuffle a player's deck; the deck must not be empty."""
        deck = self.decks[player]
        if not deck:
            raise GameError(f"player {player} has no deck to shuffle")
        remaining = sorted(deck)
        shuffled = []
        while remaining:
            shuffled.append(remaining.pop(int(self.rng.random() * len(remaining))))
        deck[:] = shuffled

    def draw_card(self, player: int) -> Optional[int]:
        """Move the top card of the deck to the hand and return it.

        An empty deck is first refilled from the shuffled discard pile.
        Returns None if there is nothing left to draw.
        """
        deck = self.decks[player]
        if not deck:
            discard = self.discards[player]
            deck.extend(discard)
            discard.clear()
            if not deck:
                return None
            self.shuffle(player)
        card = deck.pop()
        self.hands[player].append(card)
        return card

    def discard_card(self, hand_pos: int, player: int, trash: bool = False) -> None:
        """Remove a card from the hand, to the played pile unless trashed.

        The last card of the hand fills the gap left by the removed one.
        """
        hand = self.hands[player]
        if not 0 <= hand_pos < len(hand):
            raise GameError(f"no card at hand position {hand_pos}")
        if not trash:
            self.played_cards.append(hand[hand_pos])
        last = hand.pop()
        if hand_pos < len(hand):
            hand[hand_pos] = last

    def gain_card(
        self, card: int, player: int, destination: Destination = Destination.DISCARD
    ) -> None:
        """Take a card from the supply and put it in the given pile."""
        if self.supply_count(card) < 1:
            raise GameError(f"no {Card(card).name.lower()} left in the supply")
        pile = {
            Destination.DECK: self.decks,
            Destination.HAND: self.hands,
        }.get(Destination(destination), self.discards)
        pile[player].append(card)
        self.supply[card] -= 1

    def update_coins(self, player: int, bonus: int = 0) -> None:
        """Set coins to the treasure in the player's hand plus a bonus."""
        self.coins = (
            sum(TREASURE_VALUES.get(card, 0) for card in self.hands[player]) + bonus
        )

    def buy_card(self, card: int) -> None:
        """Buy a card for the current player into their discard pile."""
        if self.num_buys < 1:
            raise GameError("no buys left")
        if self.supply_count(card) < 1:
            raise GameError("there are none of that card left")
        price = cost(card)
        if self.coins < price:
            raise GameError(f"not enough coins: have {self.coins}, need {price}")
        self.phase = Phase.BUY
        self.gain_card(card, self.whose_turn, Destination.DISCARD)
        self.coins -= price
        self.num_buys -= 1

    def num_hand_cards(self) -> int:
        """Number of cards in the current player's hand."""
        return len(self.hands[self.whose_turn])

    def hand_card(self, hand_pos: int) -> int:
        """The card at a position in the current player's hand."""
        hand = self.hands[self.whose_turn]
        if not 0 <= hand_pos < len(hand):
            raise GameError(f"no card at hand position {hand_pos}")
        return hand[hand_pos]

    def supply_count(self, card: int) -> int:
        """How many of a card remain in the supply; -1 if not in the game."""
        if not 0 <= card < len(self.supply):
            raise GameError(f"unknown card {card}")
        return self.supply[card]

    def full_deck_count(self, player: int, card: int) -> int:
        """Count a card across a player's deck, hand and discard pile."""
        return sum(
            pile.count(card)
            for pile in (self.decks[player], self.hands[player], self.discards[player])
        )

    def end_turn(self) -> None:
        """Discard the hand, pass the turn on and draw the next hand."""
        current = self.whose_turn
        self.discards[current].extend(self.hands[current])
        self.hands[current].clear()

        self.whose_turn = current + 1 if current < self.num_players - 1 else 0
        self.outpost_played = 0
        self.phase = Phase.ACTION
        self.num_actions = 1
        self.coins = 0
        self.num_buys = 1
        self.played_cards.clear()
        self.hands[self.whose_turn].clear()

        for _ in range(HANDSIZE):
            self.draw_card(self.whose_turn)
        self.update_coins(self.whose_turn)

    def is_game_over(self) -> bool:
        """True once provinces run out or three supply piles are empty."""
        if self.supply[Card.PROVINCE] == 0:
            return True
        empty = sum(1 for count in self.supply[:_GAME_OVER_PILES] if count == 0)
        return empty >= 3

    def _points(self, cards: Iterable[int], player: int) -> int:
        total = 0
        for card in cards:
            if card == Card.GARDENS:
                total += self.full_deck_count(player, Card.CURSE) // 10
            else:
                total += _VICTORY_POINTS.get(card, 0)
        return total

    def score_for(self, player: int) -> int:
        """Victory points held by a player."""
        counted_deck = self.decks[player][: len(self.discards[player])]
        return (
            self._points(self.hands[player], player)
            + self._points(self.discards[player], player)
            + self._points(counted_deck, player)
        )

    def get_winners(self) -> list[bool]:
        """One flag per seat saying whether that player won; ties share."""
        scores = [
            self.score_for(i) if i < self.num_players else UNUSED_SCORE
            for i in range(MAX_PLAYERS)
        ]
        high = max(scores)
        scores = [
            score + 1 if score == high and i > self.whose_turn else score
            for i, score in enumerate(scores)
        ]
        high = max(scores)
        return [score == high for score in scores]


def initialize_game(
    num_players: int,
    kingdom: Sequence[int],
    seed: int,
    rng: Optional[RandomStreams] = None,
) -> GameState:
    """Set up the supply, shuffle starting decks and deal the first hand."""
    rng = rng if rng is not None else RandomStreams()
    rng.select_stream(1)
    rng.put_seed(seed)

    if not 2 <= num_players <= MAX_PLAYERS:
        raise GameError(f"number of players must be 2..{MAX_PLAYERS}")
    chosen = list(kingdom)
    if len(set(chosen)) != len(chosen):
        raise GameError("kingdom cards must all be different")

    state = GameState(num_players=num_players, rng=rng)
    supply = state.supply
    supply[Card.CURSE] = {2: 10, 3: 20}.get(num_players, 30)
    victory = 8 if num_players == 2 else 12
    for card in (Card.ESTATE, Card.DUCHY, Card.PROVINCE):
        supply[card] = victory
    supply[Card.COPPER] = 60 - 7 * num_players
    supply[Card.SILVER] = 40
    supply[Card.GOLD] = 30

    for card in range(Card.ADVENTURER, Card.TREASURE_MAP + 1):
        if card in chosen:
            if card in (Card.GREAT_HALL, Card.GARDENS):
                supply[card] = victory
            else:
                supply[card] = 10
        else:
            supply[card] = -1

    for player in range(num_players):
        state.decks[player] = [Card.ESTATE] * START_ESTATE + [Card.COPPER] * START_COPPER
    for player in range(num_players):
        state.shuffle(player)

    for _ in range(HANDSIZE):
        state.draw_card(state.whose_turn)
    state.update_coins(state.whose_turn)
    return state