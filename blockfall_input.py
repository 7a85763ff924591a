"""Input adapter: quit and rotation edges from events, held keys from key state"""
from dataclasses import dataclass
from typing import Iterable, Tuple

import pygame

from blockfall_piece import Status


@dataclass(frozen=True)
class HeldKeys:
    left: bool = False
    right: bool = False
    down: bool = False


NO_KEYS = HeldKeys()


def poll_events(events: Iterable[pygame.event.Event]) -> Tuple[bool, int]:
    """Return (quit requested, rotation presses).

    Key repeat is disabled by the driver, so each KEYDOWN is one physical press.
    """
    quit_requested = False
    rotations = 0
    for e in events:
        if e.type == pygame.QUIT:
            quit_requested = True
        elif e.type == pygame.KEYDOWN:
            if e.key == pygame.K_ESCAPE:
                quit_requested = True
            elif e.key == pygame.K_UP:
                rotations += 1
    return quit_requested, rotations


def sample_held(keys) -> HeldKeys:
    """``keys`` is anything indexable by pygame key constants (pygame.key.get_pressed())."""
    return HeldKeys(bool(keys[pygame.K_LEFT]), bool(keys[pygame.K_RIGHT]), bool(keys[pygame.K_DOWN]))


def apply_held(status: Status, held: HeldKeys) -> Status:
    # one action per sample: left wins over right, right over soft drop
    if held.left:
        return status.moved(x=status.x - 1)
    if held.right:
        return status.moved(x=status.x + 1)
    if held.down:
        return status.moved(counter=0)
    return status
