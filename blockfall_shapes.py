"""Shape table: block kinds, offsets, symmetry, rotation and the marker/atlas mappings"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple

Offset = Tuple[int, int]


class BlockKind(Enum):
    WALL = "wall"
    I = "I"
    O = "O"
    Z = "Z"
    T = "T"
    J = "J"
    S = "S"
    L = "L"


@dataclass(frozen=True)
class Shape:
    symmetry: int                     # distinct rotations before the shape repeats
    offsets: Tuple[Offset, ...]       # cells besides the anchor


SHAPES: Dict[BlockKind, Shape] = {
    BlockKind.WALL: Shape(1, ()),
    BlockKind.I: Shape(2, ((0, -1), (0, 1), (0, 2))),
    BlockKind.O: Shape(1, ((0, 1), (1, 0), (1, 1))),
    BlockKind.Z: Shape(2, ((0, -1), (1, 0), (1, 1))),
    BlockKind.T: Shape(4, ((0, -1), (-1, 0), (1, 0))),
    BlockKind.J: Shape(4, ((-1, 0), (1, 0), (1, -1))),
    BlockKind.S: Shape(2, ((0, 1), (1, 0), (1, -1))),
    BlockKind.L: Shape(4, ((1, 0), (-1, 0), (-1, -1))),
}

# Board cell markers. 0 is the permanent wall.
MARKERS: Dict[BlockKind, int] = {
    BlockKind.WALL: 0,
    BlockKind.I: 1,
    BlockKind.O: 2,
    BlockKind.Z: 3,
    BlockKind.T: 4,
    BlockKind.J: 5,
    BlockKind.S: 6,
    BlockKind.L: 7,
}
KIND_BY_MARKER: Dict[int, BlockKind] = {m: k for k, m in MARKERS.items()}

# Tile rows in the atlas strip (wall, I, O, Z, T, L, S, J from the top).
ATLAS_ROWS: Dict[BlockKind, int] = {
    BlockKind.WALL: 0,
    BlockKind.I: 1,
    BlockKind.O: 2,
    BlockKind.Z: 3,
    BlockKind.T: 4,
    BlockKind.L: 5,
    BlockKind.S: 6,
    BlockKind.J: 7,
}

PLAYABLE: Tuple[BlockKind, ...] = (
    BlockKind.I, BlockKind.O, BlockKind.Z, BlockKind.T,
    BlockKind.J, BlockKind.S, BlockKind.L,
)


def shape_of(kind: BlockKind) -> Shape:
    return SHAPES[kind]


def rotate_offset(offset: Offset, turns: int) -> Offset:
    """Quarter-turn (dx, dy) -> (-dy, dx), applied ``turns`` times."""
    dx, dy = offset
    for _ in range(turns):
        dx, dy = -dy, dx
    return dx, dy


def rotated_offsets(kind: BlockKind, rotation: int) -> List[Offset]:
    shape = SHAPES[kind]
    turns = rotation % shape.symmetry
    return [rotate_offset(o, turns) for o in shape.offsets]
