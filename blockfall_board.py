"""Board helpers: walled grid, line sweep, game-over flatten"""
from typing import List, Optional, Tuple

from blockfall_shapes import BlockKind, MARKERS

Board = List[List[Optional[int]]]
WALL = MARKERS[BlockKind.WALL]


def _empty_row(width: int) -> List[Optional[int]]:
    row: List[Optional[int]] = [None] * width
    row[0] = row[-1] = WALL
    return row


def new_board(width: int, height: int) -> Board:
    """Row 0 is the floor; columns 0 and width-1 are walls on every row."""
    board = [_empty_row(width) for _ in range(height)]
    board[0] = [WALL] * width
    return board


def row_full(board: Board, y: int) -> bool:
    return all(c is not None for c in board[y])


def sweep(board: Board) -> int:
    """Compact full rows from the floor upwards; return the number of rows removed.

    The scan index only advances once the row at that index is no longer full,
    so a row shifted into place is checked again. Every shift refills the top
    row with an empty walled row, so the loop ends even when the rows under it
    are full.
    """
    height, width = len(board), len(board[0])
    top = height - 1
    cleared = 0
    for y in range(1, height - 2):
        while row_full(board, y):
            for j in range(y, top):
                board[j] = board[j + 1][:]
            board[top] = _empty_row(width)
            cleared += 1
    return cleared


def flatten(board: Board) -> None:
    """Freeze the board: every occupied cell becomes a wall marker."""
    for row in board:
        for x, c in enumerate(row):
            if c is not None:
                row[x] = WALL


def snapshot(board: Board) -> Tuple[Tuple[Optional[int], ...], ...]:
    return tuple(tuple(row) for row in board)
