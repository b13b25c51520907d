import pytest

from algodrills.greedy import max_meetings, max_rope_load, min_coin_count


def test_rope_example():
    assert max_rope_load([10, 15]) == 20


def test_rope_single_and_empty():
    assert max_rope_load([42]) == 42
    assert max_rope_load([]) == 0


@pytest.mark.parametrize("limits", [[3, 1, 4, 1, 5], [7, 7, 7], [100, 1, 1, 1]])
def test_rope_bounds(limits):
    load = max_rope_load(limits)
    assert load >= max(limits)
    assert load >= min(limits) * len(limits)


def test_rope_order_does_not_matter():
    assert max_rope_load([5, 2, 9, 4]) == max_rope_load([9, 5, 4, 2])


COINS = [1, 5, 10, 50, 100, 500, 1000, 5000, 10000, 50000]


def test_coin_example():
    assert min_coin_count(COINS, 4200) == 6


def test_coin_exact_single_coin():
    for coin in COINS:
        assert min_coin_count(COINS, coin) == 1


def test_coin_zero_amount():
    assert min_coin_count(COINS, 0) == 0


def test_coin_order_independent():
    assert min_coin_count(list(reversed(COINS)), 4790) == min_coin_count(COINS, 4790)


def test_coin_rejects_bad_input():
    with pytest.raises(ValueError):
        min_coin_count(COINS, -1)
    with pytest.raises(ValueError):
        min_coin_count([0, 1], 5)


def test_meetings_example():
    meetings = [
        (1, 4), (3, 5), (0, 6), (5, 7), (3, 8), (5, 9),
        (6, 10), (8, 11), (8, 12), (2, 13), (12, 14),
    ]
    assert max_meetings(meetings) == 4


def test_meetings_empty():
    assert max_meetings([]) == 0


def test_meetings_disjoint_all_held():
    meetings = [(0, 1), (1, 2), (2, 3), (5, 9)]
    assert max_meetings(meetings) == len(meetings)


def test_meetings_zero_length_all_held():
    meetings = [(2, 2), (2, 2), (1, 2)]
    assert max_meetings(meetings) == len(meetings)


def test_meetings_identical_overlapping_only_one():
    assert max_meetings([(1, 5), (1, 5), (1, 5)]) == 1