"""Placement engine: footprints, collision checks, commit and removal.

The border is made of ordinary occupied cells, so one occupancy check covers
walls, floor and other pieces alike.
"""
from typing import List, Optional, Tuple

from blockfall_board import Board
from blockfall_exceptions import Collision
from blockfall_piece import Status
from blockfall_shapes import MARKERS, rotated_offsets

Cell = Tuple[int, int]


def footprint(status: Status) -> List[Cell]:
    """Absolute (x, y) cells of the piece, anchor first."""
    cells = [(status.x, status.y)]
    for dx, dy in rotated_offsets(status.kind, status.rotation):
        cells.append((status.x + dx, status.y + dy))
    return cells


def _in_grid(board: Board, cell: Cell) -> bool:
    x, y = cell
    return 0 <= y < len(board) and 0 <= x < len(board[0])


def first_overlap(board: Board, status: Status) -> Optional[Cell]:
    # checked in footprint order; a wall cell always comes before any cell past it
    for cell in footprint(status):
        assert _in_grid(board, cell), f"{cell} outside the board"
        x, y = cell
        if board[y][x] is not None:
            return cell
    return None


def can_place(board: Board, status: Status) -> bool:
    return first_overlap(board, status) is None


def commit(board: Board, status: Status) -> None:
    """Stamp the piece marker onto its cells (no collision check)."""
    marker = MARKERS[status.kind]
    for x, y in footprint(status):
        board[y][x] = marker


def remove_footprint(board: Board, status: Status) -> None:
    for x, y in footprint(status):
        board[y][x] = None


def try_place(board: Board, status: Status, commit_piece: bool = True) -> None:
    """Raise Collision if any cell is taken; otherwise stamp the piece when asked.

    The board is untouched on failure, and with ``commit_piece=False`` it is a
    pure probe.
    """
    hit = first_overlap(board, status)
    if hit is not None:
        raise Collision(status, hit)
    if commit_piece:
        commit(board, status)
