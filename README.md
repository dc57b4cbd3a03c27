# dominion

A rules engine for the Dominion deck-building card game, driven by a
seeded random number generator so that every game can be replayed exactly.

## Modules

- `dominion.cards`: the `Card` and `Phase` enums, `cost()`, `card_name()`,
  `card_cost()` (1000 for an unknown card) and `phase_name()`.
- `dominion.rngs`: `RandomStreams`, a Lehmer generator with 256 streams
  (`random`, `select_stream`, `put_seed`, `get_seed`, `plant_seeds`,
  `self_test`). `put_seed` takes a negative seed from the clock and asks for
  one at the prompt when given zero.
- `dominion.game`: `GameState`, `initialize_game()`, `kingdom_cards()`,
  `Destination` and `GameError`. The state covers the supply, embargo tokens,
  each player's deck, hand and discard pile, the played cards, buying,
  ending turns, the end-of-game test, scores and winners.
- `dominion.effects`: `card_effect()` and `play_card()`, the effects of the
  twenty kingdom cards.
- `dominion.interface`: text views of a game (`format_hand`, `format_deck`,
  `format_played`, `format_discard`, `format_supply`, `format_state`,
  `format_scores`, `help_text`), `add_card_to_hand`, `select_kingdom_cards`,
  `count_hand_coins` and `execute_bot_turn`, a bot that buys Province, Duchy,
  Gold or Silver by what its hand is worth.
- `dominion.playdom`: `play_game()`, a two-player game between a Smithy
  strategy and an Adventurer strategy.
- `dominion.player`: `run_session()`, the interactive command loop.
- `dominion.seedsearch`: `find_target()`, which counts how many draws of
  `floor(random() * 10**9)` from stream 1 a seed needs to reach a target.

## Installation

```
pip install .
```

To install the test dependencies as well: `pip install .[test]`.

## Command-line use

Play at the terminal. The argument must be a positive integer seed:

```
dominion-player 7
```

At the `$` prompt, commands are recognised by their first four letters:

- `init PLAYERS BOTS`: start a game with 2 to 4 players, the last `BOTS` of
  them played by the bot. `end`, `show` and `stat` do nothing until a game
  has been started this way.
- `buy CARD`, `play HAND_INDEX [CHOICE CHOICE CHOICE]`, `end`: buy a card by
  its supply number, play an action card, end the turn.
- `add CARD`: put any kingdom card into your hand.
- `show`, `stat`, `supp`, `num`, `whos`: show your hand and played cards,
  the turn status, the supply, the number of cards in your hand, whose turn
  it is.
- `resign`: end the turn and print the scores; `exit`: leave; `help`: list
  the commands.

When the game is over the scores, the winners and every player's piles are
printed.

Play out a scripted two-player game and print each move and the final
scores:

```
dominion-playdom 42
```

Search stream 1, seeded with the first number, until a draw equals the
second number (0 to 999,999,999), then print `Found the bug!`. The search
can take up to about two billion draws:

```
dominion-seedsearch 1 123456
```

## Library use

```python
from dominion.cards import Card, cost
from dominion.game import initialize_game, kingdom_cards
from dominion.effects import play_card

kingdom = kingdom_cards(
    Card.ADVENTURER, Card.GARDENS, Card.EMBARGO, Card.VILLAGE, Card.MINION,
    Card.MINE, Card.CUTPURSE, Card.SEA_HAG, Card.TRIBUTE, Card.SMITHY,
)
state = initialize_game(2, kingdom, 1)
print(state.num_hand_cards(), state.coins)
if state.coins >= cost(Card.SILVER):
    state.buy_card(Card.SILVER)
state.end_turn()
print(state.is_game_over(), state.score_for(0), state.get_winners())
```

Moves that break the rules raise `dominion.game.GameError`.

## What it does not do

- Games are not saved or loaded, and there is no network play.
- The interactive player always uses the fixed kingdom of `dominion.playdom`;
  `select_kingdom_cards` is available to library users only.
- Embargo tokens are counted but do not add Curses on a buy, and Outpost is
  counted but does not grant an extra turn.
- Treasures are not played as cards; coins come from the treasures in hand.

## Tests

```
pytest
```