"""Two-pointer and sliding-window techniques over sequences."""

from collections import Counter


def _indexed_sorted(values):
    """Pair every value with its 1-based position and sort the pairs."""
    return sorted((value, position) for position, value in enumerate(values, start=1))


def three_sum(values, target):
    """Return 1-based positions of three values summing to target, or None."""
    indexed = _indexed_sorted(values)
    last = len(indexed) - 1
    for i, (first, first_pos) in enumerate(indexed):
        j, k = i + 1, last
        while j < k:
            total = first + indexed[j][0] + indexed[k][0]
            if total == target:
                return first_pos, indexed[j][1], indexed[k][1]
            if total < target:
                j += 1
            else:
                k -= 1
    return None


def two_sum(values, target):
    """Return 1-based positions of two values summing to target, or None."""
    indexed = _indexed_sorted(values)
    i, j = 0, len(indexed) - 1
    while i < j:
        total = indexed[i][0] + indexed[j][0]
        if total < target:
            i += 1
        elif total > target:
            j -= 1
        else:
            return indexed[i][1], indexed[j][1]
    return None


def count_apartment_matches(applicants, apartments, tolerance):
    """Count applicants that get an apartment within the size tolerance."""
    wanted = sorted(applicants)
    sizes = sorted(apartments)
    i = j = matches = 0
    while i < len(wanted) and j < len(sizes):
        if abs(wanted[i] - sizes[j]) <= tolerance:
            i += 1
            j += 1
            matches += 1
        elif wanted[i] > sizes[j] + tolerance:
            j += 1
        else:
            i += 1
    return matches


def count_gondolas(weights, limit):
    """Return the fewest gondolas for at most two children each under a weight limit."""
    ordered = sorted(weights)
    i, j = 0, len(ordered) - 1
    gondolas = 0
    while i <= j:
        if ordered[i] + ordered[j] <= limit:
            i += 1
        j -= 1
        gondolas += 1
    return gondolas


def count_subarrays_with_distinct_at_most(values, k):
    """Count subarrays holding at most k distinct values."""
    items = list(values)
    counts = Counter()
    left = 0
    total = 0
    for right, value in enumerate(items):
        counts[value] += 1
        while len(counts) > k:
            old = items[left]
            counts[old] -= 1
            if not counts[old]:
                del counts[old]
            left += 1
        total += right - left + 1
    return total


def longest_unique_segment(values):
    """Return the length of the longest run of consecutive distinct values."""
    last_seen = {}
    left = 0
    best = 0
    for right, value in enumerate(values):
        previous = last_seen.get(value)
        if previous is not None and previous >= left:
            left = previous + 1
        last_seen[value] = right
        best = max(best, right - left + 1)
    return best


def count_unique_subarrays(values):
    """Count subarrays whose values are all distinct."""
    last_seen = {}
    left = 0
    total = 0
    for right, value in enumerate(values):
        if value in last_seen:
            left = max(left, last_seen[value] + 1)
        total += right - left + 1
        last_seen[value] = right
    return total