"""Answers found by binary search over a monotone feasibility test."""


def _fits(values, parts, max_sum):
    current = 0
    used = 1
    for value in values:
        if current + value > max_sum:
            used += 1
            current = value
            if used > parts:
                return False
        else:
            current += value
    return True


def min_largest_part_sum(values, parts):
    """Return the smallest possible largest sum when splitting values into parts."""
    items = list(values)
    if not items:
        raise ValueError("values must not be empty")
    low, high = max(items), sum(items)
    answer = high
    while low <= high:
        mid = (low + high) // 2
        if _fits(items, parts, mid):
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer


def _products_made(machine_times, elapsed, needed):
    made = 0
    for duration in machine_times:
        made += elapsed // duration
        if made >= needed:
            break
    return made


def min_production_time(machine_times, products):
    """Return the shortest time in which the machines make the given products."""
    times = list(machine_times)
    if not times:
        raise ValueError("at least one machine is required")
    low, high = 1, min(times) * products
    answer = high
    while low <= high:
        mid = (low + high) // 2
        if _products_made(times, mid, products) >= products:
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer