"""Falling piece status and controller states"""
from dataclasses import dataclass, replace
from enum import Enum

from blockfall_shapes import BlockKind


class PieceState(Enum):
    FALLING = "falling"
    LOCKED = "locked"          # transient: failed to descend, being committed
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Status:
    x: int
    y: int
    kind: BlockKind
    rotation: int = 0          # unbounded; effective turns = rotation % symmetry
    counter: int = 0

    def moved(self, **changes) -> "Status":
        return replace(self, **changes)
