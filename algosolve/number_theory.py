"""Counting and arithmetic problems with closed-form or fast answers."""

from collections import Counter

MOD = 1_000_000_007


def mod_pow(base, exp, mod):
    """Return base**exp modulo mod by repeated squaring."""
    result = 1
    base %= mod
    while exp > 0:
        if exp % 2 == 1:
            result = (result * base) % mod
        base = (base * base) % mod
        exp //= 2
    return result % mod


def count_bit_strings(n):
    """Return the number of bit strings of length n, modulo 10**9+7."""
    return mod_pow(2, n, MOD)


def trailing_zeros(n):
    """Return the number of trailing zeros of n factorial."""
    zeros = 0
    power = 5
    while power <= n:
        zeros += n // power
        power *= 5
    return zeros


def digit_at(k):
    """Return the k-th digit (1-based) of the string 123456789101112..."""
    if k < 1:
        raise ValueError("position must be at least 1")
    start, count, length = 1, 9, 1
    while k > count * length:
        k -= count * length
        length += 1
        count *= 10
        start *= 10
    number = start + (k - 1) // length
    return int(str(number)[(k - 1) % length])


def count_distinct_value_subsequences(values):
    """Count non-empty subsequences with distinct values, modulo 10**9+7."""
    result = 1
    for frequency in Counter(values).values():
        result = (result * (frequency + 1)) % MOD
    return (result - 1) % MOD


def can_empty_piles(a, b):
    """Tell whether both piles can be emptied taking 1 and 2 coins per move."""
    return (a + b) % 3 == 0 and max(a, b) <= 2 * min(a, b)