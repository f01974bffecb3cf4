"""Prefix sums, monotone stacks and queues, and elimination orders."""

from collections import Counter, deque
from itertools import accumulate


def count_divisible_subarrays(values):
    """Count subarrays whose sum is divisible by the number of values."""
    items = list(values)
    n = len(items)
    if not n:
        return 0
    remainders = Counter(total % n for total in accumulate(items))
    remainders[0] += 1
    return sum(f * (f - 1) // 2 for f in remainders.values())


def count_subarrays_with_sum(values, target):
    """Count subarrays whose sum equals target."""
    seen = Counter({0: 1})
    total = 0
    found = 0
    for value in values:
        total += value
        found += seen[total - target]
        seen[total] += 1
    return found


def max_subarray_sum_in_range(values, a, b):
    """Return the largest sum of a subarray whose length lies between a and b."""
    items = list(values)
    if a < 1 or a > b or a > len(items):
        raise ValueError("need 1 <= a <= b and a <= len(values)")
    prefix = [0, *accumulate(items)]
    window = deque()
    best = None
    for end in range(a, len(items) + 1):
        candidate = end - a
        while window and prefix[window[-1]] >= prefix[candidate]:
            window.pop()
        window.append(candidate)
        while window[0] < end - b:
            window.popleft()
        total = prefix[end] - prefix[window[0]]
        best = total if best is None else max(best, total)
    return best


def nearest_smaller_positions(values):
    """For each value, return the 1-based position of the nearest smaller value to its left, or 0."""
    items = list(values)
    stack = []
    positions = []
    for index, value in enumerate(items):
        while stack and items[stack[-1]] >= value:
            stack.pop()
        positions.append(stack[-1] + 1 if stack else 0)
        stack.append(index)
    return positions


def josephus_order(n, k):
    """Return the removal order of people 1..n when every (k+1)-th is removed."""
    circle = list(range(1, n + 1))
    order = []
    index = 0
    while circle:
        index = (index + k) % len(circle)
        order.append(circle.pop(index))
    return order