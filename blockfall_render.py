"""
Board rendering from a vertical tile atlas.

The atlas is a strip of equally sized tiles, one per block kind, ordered by
ATLAS_ROWS. It is scaled once to the on-screen cell size so that drawing a
frame is a plain blit per occupied cell.
"""
from typing import Dict, Optional, Sequence, Tuple

import pygame

from blockfall_layout import Dims
from blockfall_shapes import ATLAS_ROWS, KIND_BY_MARKER, BlockKind

BACKGROUND = (0, 0, 0)

# Tile colours used when no atlas image is supplied
COLORS: Dict[BlockKind, Tuple[int, int, int]] = {
    BlockKind.WALL: (128, 128, 128),
    BlockKind.I: (102, 224, 255),
    BlockKind.O: (255, 224, 102),
    BlockKind.Z: (255, 102, 119),
    BlockKind.T: (200, 119, 255),
    BlockKind.L: (255, 158, 94),
    BlockKind.S: (94, 224, 142),
    BlockKind.J: (106, 119, 255),
}


def _shade(col: Tuple[int, int, int], k: float) -> Tuple[int, int, int]:
    return tuple(int(c * k) for c in col)


def build_atlas(size: int) -> pygame.Surface:
    """Generate the tile strip: a flat tile with a darker rim per kind."""
    atlas = pygame.Surface((size, size * len(ATLAS_ROWS)))
    rim = max(1, size // 15)
    for kind, row in ATLAS_ROWS.items():
        tile = pygame.Rect(0, row * size, size, size)
        atlas.fill(COLORS[kind], tile)
        pygame.draw.rect(atlas, _shade(COLORS[kind], 0.6), tile, rim)
    return atlas


def load_atlas(path: str) -> pygame.Surface:
    return pygame.image.load(path)


class RenderAssets:
    """Scaled atlas plus the board-to-screen mapping."""

    def __init__(self, dims: Dims, atlas: Optional[pygame.Surface] = None, src_size: Optional[int] = None):
        self.dims = dims
        if atlas is None:
            atlas = build_atlas(dims.cell)
            src_size = dims.cell
        src_size = src_size or atlas.get_width()
        c = dims.cell
        if src_size != c:
            w, h = atlas.get_size()
            atlas = pygame.transform.scale(atlas, (w * c // src_size, h * c // src_size))
        self.tiles = atlas

    def tile_area(self, marker: int) -> pygame.Rect:
        row = ATLAS_ROWS[KIND_BY_MARKER[marker]]
        c = self.dims.cell
        return pygame.Rect(0, row * c, c, c)

    def cell_rect(self, bx: int, by: int) -> pygame.Rect:
        """Screen rect of board cell (bx, by); row 1 sits on the bottom edge."""
        c = self.dims.cell
        return pygame.Rect((bx - 1) * c, (self.dims.rows - by) * c, c, c)

    def draw_board(self, screen: pygame.Surface, board: Sequence[Sequence[Optional[int]]]) -> None:
        """``board`` is the live grid or a snapshot of it; it is only read."""
        screen.fill(BACKGROUND)
        for by in range(1, self.dims.rows + 1):
            row = board[by]
            for bx in range(1, self.dims.cols + 1):
                marker = row[bx]
                if marker is not None:
                    screen.blit(self.tiles, self.cell_rect(bx, by), self.tile_area(marker))
