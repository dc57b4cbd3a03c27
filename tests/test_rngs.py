from unittest import mock

import pytest

from dominion.rngs import A256, CHECK, DEFAULT, MODULUS, MULTIPLIER, RandomStreams


def test_self_test_passes():
    assert RandomStreams().self_test() is True


def test_ten_thousand_draws_from_seed_one_reach_check():
    rng = RandomStreams()
    rng.put_seed(1)
    for _ in range(10000):
        rng.random()
    assert rng.get_seed() == CHECK


def test_first_draw_from_seed_one_is_multiplier():
    rng = RandomStreams()
    rng.put_seed(1)
    value = rng.random()
    assert rng.get_seed() == MULTIPLIER
    assert value == MULTIPLIER / MODULUS


def test_plant_seeds_gives_stream_one_the_jump_multiplier():
    rng = RandomStreams()
    rng.select_stream(1)
    rng.plant_seeds(1)
    assert rng.stream == 1
    assert rng.get_seed() == A256


def test_default_seed_on_stream_zero():
    assert RandomStreams().get_seed() == DEFAULT


def test_values_lie_strictly_between_zero_and_one():
    rng = RandomStreams()
    rng.put_seed(12345)
    for _ in range(1000):
        value = rng.random()
        assert 0.0 < value < 1.0


def test_same_seed_gives_same_sequence():
    a, b = RandomStreams(), RandomStreams()
    a.select_stream(1)
    b.select_stream(1)
    a.put_seed(77)
    b.put_seed(77)
    assert [a.random() for _ in range(20)] == [b.random() for _ in range(20)]


def test_streams_are_independent():
    rng = RandomStreams()
    rng.select_stream(2)
    before = rng.get_seed()
    rng.select_stream(1)
    for _ in range(5):
        rng.random()
    rng.select_stream(2)
    assert rng.get_seed() == before


def test_large_seed_is_reduced():
    rng = RandomStreams()
    rng.put_seed(MODULUS + 5)
    assert rng.get_seed() == 5


def test_negative_stream_index_wraps():
    rng = RandomStreams()
    rng.select_stream(-1)
    assert rng.stream == 255
    rng.put_seed(7)
    rng.select_stream(255)
    assert rng.get_seed() == 7


def test_negative_seed_uses_clock():
    rng = RandomStreams()
    with mock.patch("time.time", return_value=1000.0):
        rng.put_seed(-3)
    assert rng.get_seed() == 1000


def test_zero_seed_asks_until_valid():
    replies = iter(["0", "oops", str(MODULUS), "42"])
    rng = RandomStreams(ask=lambda prompt: next(replies))
    rng.put_seed(0)
    assert rng.get_seed() == 42


def test_plant_seeds_keeps_current_stream():
    rng = RandomStreams()
    rng.select_stream(5)
    rng.plant_seeds(99)
    assert rng.stream == 5
    rng.select_stream(0)
    assert rng.get_seed() == 99


@pytest.mark.parametrize("seed", [1, 3, 1000])
def test_put_seed_round_trip(seed):
    rng = RandomStreams()
    rng.select_stream(3)
    rng.put_seed(seed)
    assert rng.get_seed() == seed