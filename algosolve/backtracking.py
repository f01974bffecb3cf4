"""Exhaustive searches: queens, partitions, permutations, Hanoi and grid paths."""

from itertools import permutations

_PATH_SIZE = 7
_PATH_STEPS = _PATH_SIZE * _PATH_SIZE - 1
_PATH_END = (_PATH_SIZE - 1, 0)
_DIRECTIONS = {"U": (-1, 0), "D": (1, 0), "L": (0, -1), "R": (0, 1)}


def count_queen_placements(grid):
    """Count ways to place one queen per row on the free '.' cells without attacks."""
    rows = [str(row) for row in grid]
    size = len(rows)
    if any(len(row) != size for row in rows):
        raise ValueError("grid must be square")
    columns, diagonals, anti_diagonals = set(), set(), set()

    def place(r):
        if r == size:
            return 1
        total = 0
        for c, cell in enumerate(rows[r]):
            if cell != "." or c in columns or r - c in diagonals or r + c in anti_diagonals:
                continue
            columns.add(c)
            diagonals.add(r - c)
            anti_diagonals.add(r + c)
            total += place(r + 1)
            columns.remove(c)
            diagonals.remove(r - c)
            anti_diagonals.remove(r + c)
        return total

    return place(0)


def min_apple_difference(weights):
    """Return the smallest weight difference when splitting apples into two groups."""
    differences = {0}
    for weight in weights:
        differences = {d + weight for d in differences} | {d - weight for d in differences}
    return min(abs(d) for d in differences)


def distinct_permutations(s):
    """Return every distinct reordering of s in alphabetical order."""
    return sorted({"".join(p) for p in permutations(s)})


def hanoi_moves(n):
    """Return the fewest (from, to) moves shifting n disks from stack 1 to stack 3."""
    if n < 0:
        raise ValueError("number of disks must not be negative")
    moves = []

    def shift(count, source, target):
        if count == 0:
            return
        spare = 6 - source - target
        shift(count - 1, source, spare)
        moves.append((source, target))
        shift(count - 1, spare, target)

    shift(n, 1, 3)
    return moves


def count_grid_path_descriptions(description):
    """Count 7x7 grid paths from the top-left to the bottom-left corner matching a description.

    The description holds 48 moves, each one of U, D, L, R or '?' for any move.
    """
    if len(description) != _PATH_STEPS:
        raise ValueError(f"description must have {_PATH_STEPS} moves")
    unknown = set(description) - set(_DIRECTIONS) - {"?"}
    if unknown:
        raise ValueError(f"invalid moves: {''.join(sorted(unknown))}")

    last = _PATH_SIZE - 1
    visited = [[False] * _PATH_SIZE for _ in range(_PATH_SIZE)]

    def free(r, c):
        return not visited[r][c]

    def splits_on_fixed_move(r, c):
        if not (0 < r < last and 0 < c < last):
            return False
        vertical = free(r - 1, c) and free(r + 1, c) and visited[r][c - 1] and visited[r][c + 1]
        horizontal = free(r, c - 1) and free(r, c + 1) and visited[r - 1][c] and visited[r + 1][c]
        return vertical or horizontal

    def splits_on_open_move(r, c):
        if (
            0 < r < last
            and free(r - 1, c)
            and free(r + 1, c)
            and (c == 0 or visited[r][c - 1])
            and (c == last or visited[r][c + 1])
        ):
            return True
        return (
            0 < c < last
            and free(r, c - 1)
            and free(r, c + 1)
            and (r == 0 or visited[r - 1][c])
            and (r == last or visited[r + 1][c])
        )

    def walk(r, c, step):
        if (r, c) == _PATH_END:
            return 1 if step == _PATH_STEPS else 0
        if step >= _PATH_STEPS:
            return 0
        visited[r][c] = True
        move = description[step]
        if move == "?":
            candidates = tuple(_DIRECTIONS.values())
            splits = splits_on_open_move
        else:
            candidates = (_DIRECTIONS[move],)
            splits = splits_on_fixed_move
        total = 0
        for dr, dc in candidates:
            nr, nc = r + dr, c + dc
            if 0 <= nr <= last and 0 <= nc <= last and free(nr, nc) and not splits(nr, nc):
                total += walk(nr, nc, step + 1)
        visited[r][c] = False
        return total

    return walk(0, 0, 0)