# blockfall_layout.py
from dataclasses import dataclass

from blockfall_config import CONFIG


@dataclass
class Dims:
    cell: int
    cols: int      # visible interior columns
    rows: int      # visible rows, counted up from the floor
    width: int
    height: int


def compute_dims(config: dict = CONFIG) -> Dims:
    cell = int(config["BLOCK_DST_SIZE"])
    cols = config["BOARD_WIDTH"] - 2
    rows = config["VISIBLE_ROWS"]
    return Dims(cell=cell, cols=cols, rows=rows, width=cols * cell, height=rows * cell)
