"""Breadth-first distances on a chessboard."""

from collections import deque

_KNIGHT_MOVES = ((2, 1), (2, -1), (-2, 1), (-2, -1), (1, 2), (1, -2), (-1, 2), (-1, -2))


def knight_distances(n):
    """Return the fewest knight moves from the top-left corner to every square, -1 if unreachable."""
    if n < 1:
        raise ValueError("board size must be at least 1")
    board = [[-1] * n for _ in range(n)]
    board[0][0] = 0
    queue = deque([(0, 0)])
    while queue:
        r, c = queue.popleft()
        for dr, dc in _KNIGHT_MOVES:
            nr, nc = r + dr, c + dc
            if 0 <= nr < n and 0 <= nc < n and board[nr][nc] == -1:
                board[nr][nc] = board[r][c] + 1
                queue.append((nr, nc))
    return board