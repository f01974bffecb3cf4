"""Rearranging the letters of a string under simple constraints."""

from collections import Counter


def palindrome_reorder(s):
    """Return a palindrome made of the letters of s, or None if there is none."""
    counts = Counter(s)
    odd = [ch for ch, count in counts.items() if count % 2]
    if len(odd) > 1:
        return None
    half = "".join(ch * (counts[ch] // 2) for ch in sorted(counts))
    middle = odd[0] if odd else ""
    return half + middle + half[::-1]


def _next_letter(counts, previous, remaining):
    for ch in sorted(counts):
        if not counts[ch] or ch == previous:
            continue
        counts[ch] -= 1
        if max(counts.values()) <= (remaining + 1) // 2:
            return ch
        counts[ch] += 1
    return None


def reorder_no_adjacent(s):
    """Return the smallest reordering of uppercase s with no equal neighbours, or None."""
    if any(not "A" <= ch <= "Z" for ch in s):
        raise ValueError("string must hold only letters A-Z")
    counts = Counter(s)
    n = len(s)
    if counts and max(counts.values()) > (n + 1) // 2:
        return None
    result = []
    previous = None
    for position in range(n):
        letter = _next_letter(counts, previous, n - position - 1)
        if letter is None:
            return None
        result.append(letter)
        previous = letter
    return "".join(result)