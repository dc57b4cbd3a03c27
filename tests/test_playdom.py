import io

from dominion.cards import Card
from dominion.game import initialize_game
from dominion.playdom import DEFAULT_KINGDOM, main, play_game


def _run(seed):
    out = io.StringIO()
    scores = play_game(seed, out)
    return scores, out.getvalue()


def test_play_game_reports_returned_scores():
    scores, text = _run(1)
    lines = text.splitlines()
    assert lines[0] == "Starting game."
    assert lines[-3] == "Finished game."
    assert lines[-2] == f"Player 0: {scores[0]}"
    assert lines[-1] == f"Player 1: {scores[1]}"


def test_play_game_is_deterministic():
    first_scores, first_text = _run(3)
    second_scores, second_text = _run(3)
    assert first_text.startswith("Starting game.\n")
    assert first_text.splitlines()[-2] == f"Player 0: {first_scores[0]}"
    assert first_scores[0] == second_scores[0]
    assert first_scores[1] == second_scores[1]
    assert first_text == second_text


def test_both_players_take_turns():
    _, text = _run(2)
    assert "0: end turn" in text
    assert "1: endTurn" in text
    assert "bought province" in text


def test_default_kingdom_is_ten_distinct_cards():
    state = initialize_game(2, DEFAULT_KINGDOM, 1)
    in_game = [card for card in Card if card >= Card.ADVENTURER and state.supply_count(card) != -1]
    assert sorted(in_game) == sorted(DEFAULT_KINGDOM)
    assert len(in_game) == 10
    assert state.supply_count(Card.GARDENS) == 8
    assert state.supply_count(Card.SMITHY) == 10


def test_main_without_seed_reports_usage(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().out


def test_main_plays_a_game(capsys):
    assert main(["4"]) == 0
    text = capsys.readouterr().out
    assert text.startswith("Starting game.\n")
    assert "Finished game.\n" in text