"""Greedy choices over sorted data: coins, intervals, schedules and towers."""

import heapq

from sortedcontainers import SortedList


def smallest_missing_sum(coins):
    """Return the smallest positive sum that no subset of the coins makes."""
    reachable = 1
    for coin in sorted(coins):
        if coin > reachable:
            break
        reachable += coin
    return reachable


def min_stick_cost(lengths):
    """Return the least total change to make every stick the same length."""
    ordered = sorted(lengths)
    if not ordered:
        raise ValueError("lengths must not be empty")
    median = ordered[len(ordered) // 2]
    return sum(abs(median - length) for length in ordered)


def min_reading_time(times):
    """Return the least time for two readers to read every book."""
    items = list(times)
    if not items:
        raise ValueError("times must not be empty")
    return max(sum(items), 2 * max(items))


def max_task_reward(tasks):
    """Return the best total of deadline minus finish time over (duration, deadline) tasks."""
    elapsed = 0
    reward = 0
    for duration, deadline in sorted(tasks):
        elapsed += duration
        reward += deadline - elapsed
    return reward


def max_subarray_sum(values):
    """Return the largest sum of a non-empty contiguous subarray."""
    best = None
    running = 0
    for value in values:
        running += value
        best = running if best is None else max(best, running)
        if running < 0:
            running = 0
    if best is None:
        raise ValueError("values must not be empty")
    return best


def max_movies(movies):
    """Return how many (start, end) movies one person can watch in full."""
    watched = 0
    free_from = 0
    for start, end in sorted(movies, key=lambda movie: movie[1]):
        if start >= free_from:
            watched += 1
            free_from = end
    return watched


def max_movies_with_members(movies, members):
    """Return how many (start, end) movies a club of the given size can watch."""
    free_at = SortedList([0] * members)
    watched = 0
    for start, end in sorted(movies, key=lambda movie: movie[1]):
        index = free_at.bisect_right(start)
        if index == 0:
            continue
        free_at.pop(index - 1)
        free_at.add(end)
        watched += 1
    return watched


def max_customers(visits):
    """Return the most customers present at once, given (arrival, leaving) pairs."""
    pairs = list(visits)
    arrivals = sorted(arrival for arrival, _ in pairs)
    leavings = sorted(leaving for _, leaving in pairs)
    i = j = present = most = 0
    while i < len(arrivals) and j < len(leavings):
        if arrivals[i] < leavings[j]:
            i += 1
            present += 1
            most = max(most, present)
        else:
            j += 1
            present -= 1
    return most


def allocate_rooms(visits):
    """Assign rooms to (arrival, departure) visits.

    Returns the number of rooms used and the room number of each visit,
    in the order the visits were given.
    """
    pairs = list(visits)
    rooms = [0] * len(pairs)
    occupied = []
    room_count = 0
    for index in sorted(range(len(pairs)), key=lambda i: pairs[i][0]):
        start, end = pairs[index]
        if occupied and occupied[0][0] < start:
            _, room = heapq.heapreplace(occupied, (end, occupied[0][1]))
            rooms[index] = room
        else:
            room_count += 1
            rooms[index] = room_count
            heapq.heappush(occupied, (end, room_count))
    return room_count, rooms


def count_towers(cubes):
    """Return the fewest towers built from cubes in order, each on a larger one."""
    tops = SortedList()
    for cube in cubes:
        index = tops.bisect_right(cube)
        if index < len(tops):
            tops.pop(index)
        tops.add(cube)
    return len(tops)


def sell_tickets(prices, max_prices):
    """Sell each customer the dearest ticket within their limit.

    Returns the price paid by each customer, or None where no ticket fits.
    """
    available = SortedList(prices)
    sold = []
    for limit in max_prices:
        index = available.bisect_right(limit)
        if index == 0:
            sold.append(None)
        else:
            sold.append(available.pop(index - 1))
    return sold