"""Constructions: bit strings, Gray codes, MEX grids, recolourings and card games."""


def _to_binary(number, width):
    return "".join("1" if number >> bit & 1 else "0" for bit in reversed(range(width)))


def binary_strings(n):
    """Return the n-bit forms of 1 through 2**n, so the all-zero string comes last."""
    return [_to_binary(i, n) for i in range(1, (1 << n) + 1)]


def gray_code(n):
    """Return the reflected Gray code of n bits, each string differing by one bit."""
    codes = ["0", "1"]
    for _ in range(2, n + 1):
        codes = ["0" + code for code in codes] + ["1" + code for code in reversed(codes)]
    return codes


def mex_grid(n):
    """Return an n x n grid where each cell is the smallest value missing above and to its left."""
    grid = []
    for r in range(n):
        row = []
        for c in range(n):
            seen = {grid[above][c] for above in range(r)} | set(row)
            value = 0
            while value in seen:
                value += 1
            row.append(value)
        grid.append(row)
    return grid


def recolor_grid(grid):
    """Recolour every cell with A-D so it differs from its old colour and its neighbours."""
    rows = [list(row) for row in grid]
    for r, row in enumerate(rows):
        for c, original in enumerate(row):
            taken = {original}
            if r:
                taken.add(rows[r - 1][c])
            if c:
                taken.add(row[c - 1])
            row[c] = next(letter for letter in "ABCD" if letter not in taken)
    return ["".join(row) for row in rows]


def raab_game(n, a, b):
    """Return the cards two players play so they win a and b rounds, or None if impossible."""
    if n - (a + b) < 0:
        return None
    if a == n and b > 0 or b == n and a > 0:
        return None
    decisive = a + b
    if decisive > 0 and (a == 0 or b == 0):
        return None
    first = list(range(1, n + 1))
    second = []
    for i in range(1, decisive + 1):
        card = i + a
        if card > decisive:
            card -= decisive
        second.append(card)
    second.extend(range(decisive + 1, n + 1))
    return first, second