import math

import pytest

from algodrills.backtracking import count_n_queens, count_subset_sums, ordered_selections


def test_subset_sum_example():
    assert count_subset_sums([-7, -3, -2, 5, 8], 0) == 1


def test_subset_sums_cover_every_non_empty_subset():
    values = [1, 2, 3, 4]
    total = sum(count_subset_sums(values, target) for target in range(sum(values) + 1))
    assert total == 2 ** len(values) - 1


def test_subsets_counted_by_position():
    values = [3, 3, 3]
    assert count_subset_sums(values, 3) == len(values)


def test_empty_subset_never_counted():
    assert count_subset_sums([], 0) == count_subset_sums([4, 5], 0)
    assert count_subset_sums([4, 5], 0) < count_subset_sums([4, 5], 9) + 1


@pytest.mark.parametrize("n, m", [(4, 2), (3, 3), (5, 1), (4, 4)])
def test_ordered_selections_are_complete_and_sorted(n, m):
    result = ordered_selections(n, m)
    assert len(result) == math.perm(n, m)
    assert result == sorted(result)
    assert len(set(result)) == len(result)
    for selection in result:
        assert len(selection) == m
        assert len(set(selection)) == m
        assert all(1 <= value <= n for value in selection)


def test_ordered_selections_bounds():
    result = ordered_selections(3, 3)
    assert result[0] == (1, 2, 3)
    assert result[-1] == (3, 2, 1)


def test_ordered_selections_more_than_available():
    assert ordered_selections(2, 3) == []


def test_ordered_selections_rejects_negative():
    with pytest.raises(ValueError):
        ordered_selections(3, -1)


def test_eight_queens():
    assert count_n_queens(8) == 92


def test_one_queen():
    assert count_n_queens(1) == 1


@pytest.mark.parametrize("n", [2, 3, 4, 5, 6, 7])
def test_queen_solutions_come_in_mirror_pairs(n):
    assert count_n_queens(n) % 2 == 0


def test_queens_rejects_negative():
    with pytest.raises(ValueError):
        count_n_queens(-1)