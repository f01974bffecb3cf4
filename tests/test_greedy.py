from collections import Counter
from itertools import combinations, permutations

import pytest

from algosolve.greedy import (
    allocate_rooms,
    count_towers,
    max_customers,
    max_movies,
    max_movies_with_members,
    max_subarray_sum,
    max_task_reward,
    min_reading_time,
    min_stick_cost,
    sell_tickets,
    smallest_missing_sum,
)


def _subset_sums(coins):
    sums = {0}
    for coin in coins:
        sums |= {total + coin for total in sums}
    return sums


@pytest.mark.parametrize("coins", [[2, 9, 1, 2, 7], [1, 1, 1], [3, 5], [1, 2, 4, 8]])
def test_smallest_missing_sum_is_first_gap(coins):
    result = smallest_missing_sum(coins)
    sums = _subset_sums(coins)
    assert result not in sums
    assert all(value in sums for value in range(1, result))


def test_smallest_missing_sum_of_nothing_is_one():
    assert smallest_missing_sum([]) == 1


@pytest.mark.parametrize("lengths", [[2, 3, 1, 5, 2], [7], [1, 10, 100], [4, 4, 8, 8]])
def test_min_stick_cost_is_optimal(lengths):
    best = min(
        sum(abs(target - length) for length in lengths)
        for target in range(min(lengths), max(lengths) + 1)
    )
    assert min_stick_cost(lengths) == best


def test_min_stick_cost_equal_lengths():
    assert min_stick_cost([6, 6, 6]) == 0


def test_min_stick_cost_empty_raises():
    with pytest.raises(ValueError):
        min_stick_cost([])


def test_min_reading_time_bounds():
    times = [2, 8, 3]
    result = min_reading_time(times)
    assert result >= sum(times)
    assert result >= 2 * max(times)
    assert result in (sum(times), 2 * max(times))


def test_min_reading_time_single_book():
    times = [7]
    assert min_reading_time(times) == 2 * times[0]


def test_min_reading_time_empty_raises():
    with pytest.raises(ValueError):
        min_reading_time([])


def test_max_task_reward_single_task():
    duration, deadline = 6, 10
    assert max_task_reward([(duration, deadline)]) == deadline - duration


def test_max_task_reward_beats_every_order():
    tasks = [(6, 10), (8, 15), (5, 12)]
    best = max(
        sum(deadline - finish for (_, deadline), finish in zip(order, _finishes(order)))
        for order in permutations(tasks)
    )
    assert max_task_reward(tasks) == best
    assert max_task_reward(list(reversed(tasks))) == best


def _finishes(order):
    elapsed = 0
    for duration, _ in order:
        elapsed += duration
        yield elapsed


def test_max_subarray_sum_all_negative_is_max_element():
    values = [-5, -2, -9]
    assert max_subarray_sum(values) == max(values)


def test_max_subarray_sum_all_positive_is_total():
    values = [3, 1, 4, 1, 5]
    assert max_subarray_sum(values) == sum(values)


@pytest.mark.parametrize("values", [[-1, 3, -2, 5, 3, -5, 2, 2], [2, -10, 3], [0, -1, 0]])
def test_max_subarray_sum_is_max_over_subarrays(values):
    best = max(sum(values[i:j]) for i in range(len(values)) for j in range(i + 1, len(values) + 1))
    assert max_subarray_sum(values) == best


def test_max_subarray_sum_empty_raises():
    with pytest.raises(ValueError):
        max_subarray_sum([])


def test_max_movies_disjoint_and_touching():
    movies = [(1, 3), (3, 5), (5, 9), (10, 12)]
    assert max_movies(movies) == len(movies)


def test_max_movies_all_overlapping():
    assert max_movies([(1, 10), (2, 9), (3, 8)]) == 1


def test_max_movies_with_one_member_matches_single_watcher():
    movies = [(1, 5), (8, 10), (3, 6), (2, 5), (6, 10)]
    assert max_movies_with_members(movies, 1) == max_movies(movies)


def test_max_movies_with_enough_members_watches_all():
    movies = [(1, 5), (8, 10), (3, 6), (2, 5), (6, 10)]
    assert max_movies_with_members(movies, len(movies)) == len(movies)


def test_max_movies_with_more_members_never_worse():
    movies = [(1, 5), (8, 10), (3, 6), (2, 5), (6, 10), (4, 7)]
    counts = [max_movies_with_members(movies, k) for k in range(1, 5)]
    assert counts == sorted(counts)


def test_max_customers_all_nested():
    visits = [(1, 20), (2, 19), (3, 18)]
    assert max_customers(visits) == len(visits)


def test_max_customers_never_exceeds_visits():
    visits = [(5, 8), (2, 4), (3, 9), (1, 6)]
    result = max_customers(visits)
    assert 1 <= result <= len(visits)
    assert max_customers([]) == 0


def test_allocate_rooms_no_overlap_in_same_room():
    visits = [(1, 2), (2, 4), (4, 4), (5, 6), (1, 10)]
    count, rooms = allocate_rooms(visits)
    assert len(rooms) == len(visits)
    assert set(rooms) == set(range(1, count + 1))
    for (a, room_a), (b, room_b) in combinations(zip(visits, rooms), 2):
        if room_a == room_b:
            assert a[1] < b[0] or b[1] < a[0]


def test_allocate_rooms_strictly_disjoint_share_one_room():
    count, rooms = allocate_rooms([(1, 2), (3, 4), (5, 6)])
    assert count == 1
    assert rooms == [count] * 3


def test_count_towers_increasing_needs_one_each():
    cubes = [1, 2, 3, 4]
    assert count_towers(cubes) == len(cubes)


def test_count_towers_equal_cubes_cannot_stack():
    cubes = [2, 2, 2]
    assert count_towers(cubes) == len(cubes)


def test_count_towers_decreasing_make_one():
    assert count_towers([9, 7, 4, 1]) == 1


def test_sell_tickets_respects_limits_and_stock():
    prices = [5, 3, 7, 8, 5]
    limits = [4, 8, 3, 1, 8]
    sold = sell_tickets(prices, limits)
    assert len(sold) == len(limits)
    for paid, limit in zip(sold, limits):
        if paid is not None:
            assert paid <= limit
    paid_counts = Counter(p for p in sold if p is not None)
    assert not paid_counts - Counter(prices)


def test_sell_tickets_none_when_nothing_fits():
    assert sell_tickets([10], [9, 10, 10]) == [None, 10, None]