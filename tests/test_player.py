import io

import pytest

from dominion.player import main, run_session


def run(*lines, seed=1):
    out = io.StringIO()
    code = run_session(seed, [line + "\n" for line in lines], out)
    return code, out.getvalue()


def test_exit_prompts_and_returns_zero():
    code, text = run("exit")
    assert code == 0
    assert text.startswith('Please enter a command or "help" for commands\n')
    assert text.endswith("$ ")


def test_end_of_input_stops_the_loop():
    code, text = run("whos")
    assert code == 0
    assert text.count("$ ") == 2


def test_whos():
    _, text = run("whos", "exit")
    assert "Player 0's turn\n" in text


def test_num_shows_starting_hand():
    _, text = run("num", "exit")
    assert "There are 5 cards in your hand.\n" in text


def test_end_before_init_does_nothing():
    _, text = run("end", "whos", "exit")
    assert "turn number" not in text
    assert "Player 0's turn\n" in text


def test_init_then_end_passes_turn():
    _, text = run("init 2 0", "end", "whos", "exit")
    assert "Player 0's turn number 0\n\n" in text
    assert "Player 1's turn number 0\n\n" in text
    assert "Player 1's turn\n" in text


def test_buy_copper():
    _, text = run("buy 4", "exit")
    assert "Player 0 buys card 4, Copper\n\n" in text


def test_buy_unknown_card_fails():
    _, text = run("buy 99", "exit")
    assert "Player 0 cannot buy card 99, ?\n\n" in text


def test_add_and_play_smithy():
    _, text = run("add 13", "play 5", "num", "exit")
    assert "Player 0 adds Smithy to their hand\n\n" in text
    assert "Player 0 plays Smithy\n\n" in text
    assert "There are 8 cards in your hand.\n" in text


def test_playing_a_non_action_fails():
    _, text = run("play 0", "exit")
    assert "Player 0 cannot play card 0\n\n" in text


def test_help():
    _, text = run("help", "exit")
    assert "Commands are: \n" in text


def test_show_and_stat_need_a_started_game():
    _, before = run("show", "stat", "exit")
    assert "hand:" not in before
    assert "phase" not in before
    _, after = run("init 2 0", "show", "stat", "exit")
    assert "Player 0's hand:\n" in after
    assert "Action phase\n" in after


def test_resign_prints_scores_and_stops():
    code, text = run("resign", "whos")
    assert code == 0
    assert text.splitlines()[-1].startswith("Player 1 has a score of ")
    assert "turn\n" not in text


def test_all_bot_game_runs_to_the_end():
    code, text = run("init 2 2")
    assert code == 0
    assert "the winner(s) are:\n" in text
    assert "Player 0's deck: \n" in text


@pytest.mark.parametrize("argv", [[], ["0"], ["-3"], ["1", "2"]])
def test_main_usage(argv, capsys):
    assert main(argv) == 0
    assert capsys.readouterr().out == "Usage: player [integer random number seed]\n"