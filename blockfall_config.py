from blockfall_exceptions import ConfigError
from blockfall_shapes import PLAYABLE, rotated_offsets, shape_of

CONFIG = {
    "BOARD_WIDTH": 12,        # columns, both side walls included
    "BOARD_HEIGHT": 25,       # rows, floor and spawn buffer included
    "VISIBLE_ROWS": 20,
    "SPAWN_X": 5,
    "SPAWN_Y": 21,
    "TICK": 10,               # piece ticks per gravity step
    "TICK_HZ": 30,
    "INPUT_EVERY": 2,         # held keys sampled on every Nth tick
    "BLOCK_SRC_SIZE": 60,
    "BLOCK_DST_SIZE": 30,
    "ATLAS_PATH": None,
    "SEED": None,
    "LOG_LEVEL": "INFO",
}


def validate_config(config: dict) -> None:
    """Reject sizes, spawn points and timings that could index outside the grid."""
    width, height = config["BOARD_WIDTH"], config["BOARD_HEIGHT"]
    if width < 3 or height < 3:
        raise ConfigError(f"board {width}x{height} leaves no interior")
    if not 1 <= config["VISIBLE_ROWS"] <= height - 1:
        raise ConfigError(f"VISIBLE_ROWS must be within 1..{height - 1}")
    for key in ("TICK", "TICK_HZ", "INPUT_EVERY", "BLOCK_SRC_SIZE", "BLOCK_DST_SIZE"):
        if config[key] <= 0:
            raise ConfigError(f"{key} must be positive, got {config[key]}")
    sx, sy = config["SPAWN_X"], config["SPAWN_Y"]
    if not (1 <= sx <= width - 2 and 1 <= sy <= height - 1):
        raise ConfigError(f"spawn ({sx}, {sy}) is outside the playfield")
    for kind in PLAYABLE:
        for rotation in range(shape_of(kind).symmetry):
            for dx, dy in rotated_offsets(kind, rotation):
                x, y = sx + dx, sy + dy
                if not (0 <= x < width and 0 <= y < height):
                    raise ConfigError(f"{kind.name} rotation {rotation} reaches ({x}, {y}) at spawn")
