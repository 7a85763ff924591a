"""Errors raised by the block engine."""


class Collision(Exception):
    """A piece footprint overlaps an occupied cell."""

    def __init__(self, status, cell):
        super().__init__(f"{status.kind.name} at ({status.x}, {status.y}) hits {cell}")
        self.status = status
        self.cell = cell


class ConfigError(ValueError):
    """CONFIG values that would let a piece leave the grid."""
