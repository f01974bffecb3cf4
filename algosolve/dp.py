"""Dynamic-programming counting and optimisation problems."""

import math

MOD = 1_000_000_007


def max_pages(prices, pages, budget):
    """Return the most pages buyable within the budget, each book at most once."""
    best = [0] * (budget + 1)
    for price, page_count in zip(prices, pages):
        for spend in range(budget, price - 1, -1):
            best[spend] = max(best[spend], best[spend - price] + page_count)
    return best[budget]


def count_coin_combinations(coins, target):
    """Count unordered coin combinations summing to target, modulo 10**9+7."""
    ways = [0] * (target + 1)
    ways[0] = 1
    for coin in coins:
        for amount in range(coin, target + 1):
            ways[amount] = (ways[amount] + ways[amount - coin]) % MOD
    return ways[target] % MOD


def count_dice_combinations(n):
    """Count ordered dice-throw sequences summing to n, modulo 10**9+7."""
    if n < 0:
        raise ValueError("n must not be negative")
    ways = [1]
    for total in range(1, n + 1):
        ways.append(sum(ways[max(0, total - 6):total]) % MOD)
    return ways[n]


def min_coins(coins, target):
    """Return the fewest coins summing to target, or None if impossible."""
    fewest = [0] + [math.inf] * target
    for amount in range(1, target + 1):
        fewest[amount] = min(
            (fewest[amount - coin] + 1 for coin in coins if coin <= amount),
            default=math.inf,
        )
    result = fewest[target]
    return None if result == math.inf else result


def count_grid_paths(grid):
    """Count right/down paths through '.' cells from top-left to bottom-right."""
    rows = list(grid)
    if not rows or not rows[0]:
        raise ValueError("grid must not be empty")
    height, width = len(rows), len(rows[0])
    below = [0] * (width + 1)
    for r in reversed(range(height)):
        current = [0] * (width + 1)
        for c in reversed(range(width)):
            if rows[r][c] == "*":
                continue
            if r == height - 1 and c == width - 1:
                current[c] = 1
            else:
                current[c] = (current[c + 1] + below[c]) % MOD
        below = current
    return below[0]


def count_digit_removal_steps(n):
    """Return the steps to reach zero by repeatedly subtracting the largest digit."""
    steps = 0
    while n > 0:
        n -= max(int(d) for d in str(n))
        steps += 1
    return steps