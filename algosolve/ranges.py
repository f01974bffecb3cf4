"""Queries over ranges and over gaps between points on a line."""

from sortedcontainers import SortedList


def nested_range_counts(ranges):
    """For each (left, right) range, count the ranges it contains and those containing it.

    Returns two lists in the input order: how many other ranges each one
    contains, and how many other ranges contain it.
    """
    items = list(ranges)
    order = sorted(range(len(items)), key=lambda i: (items[i][0], -items[i][1]))
    contains = [0] * len(items)
    contained = [0] * len(items)

    seen_rights = SortedList()
    for index in order:
        right = items[index][1]
        contained[index] = len(seen_rights) - seen_rights.bisect_left(right)
        seen_rights.add(right)

    later_rights = SortedList()
    for index in reversed(order):
        right = items[index][1]
        contains[index] = later_rights.bisect_right(right)
        later_rights.add(right)

    return contains, contained


def traffic_light_passages(length, positions):
    """Return the longest light-free passage after each light is placed on a street."""
    points = SortedList([0, length])
    gaps = SortedList([length])
    longest = []
    for position in positions:
        if not 0 < position < length:
            raise ValueError(f"position {position} is outside the street")
        index = points.bisect_right(position)
        right, left = points[index], points[index - 1]
        gaps.remove(right - left)
        gaps.add(position - left)
        gaps.add(right - position)
        points.add(position)
        longest.append(gaps[-1])
    return longest