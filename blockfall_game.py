"""
Game state and the falling-piece controller.

One tick:
  1) build a candidate from the committed status: pending rotations, held keys
     (every INPUT_EVERY ticks of the piece counter) and gravity (every TICK);
  2) resolve a sideways/rotation change against the board;
  3) resolve a row change separately; a failed descent locks the piece,
     sweeps full rows and spawns the next one;
  4) bump the counter.

The two resolutions stay separate: when both kinds of change are pending, the
first attempt carries the row change too, and only if it fails is the descent
tried on its own.
"""
from logging import getLogger
from typing import Optional

from blockfall_board import Board, flatten, new_board, sweep
from blockfall_config import CONFIG
from blockfall_exceptions import Collision
from blockfall_input import NO_KEYS, HeldKeys, apply_held
from blockfall_piece import PieceState, Status
from blockfall_placement import commit, remove_footprint, try_place
from blockfall_rng import PieceRandom

LOGGER = getLogger(__name__)


class Game:
    def __init__(self, config: Optional[dict] = None, rng: Optional[PieceRandom] = None):
        self.config = CONFIG if config is None else config
        self.board: Board = new_board(self.config["BOARD_WIDTH"], self.config["BOARD_HEIGHT"])
        self.rng = rng if rng is not None else PieceRandom(self.config["SEED"])
        self.state = PieceState.FALLING
        self.status = self.spawn_status()
        try_place(self.board, self.status)

    @property
    def game_over(self) -> bool:
        return self.state is PieceState.GAME_OVER

    def spawn_status(self) -> Status:
        status = Status(self.config["SPAWN_X"], self.config["SPAWN_Y"], self.rng.next_kind())
        LOGGER.debug("spawn %s at (%d, %d)", status.kind.name, status.x, status.y)
        return status

    # ---------- candidate ----------
    def candidate(self, rotations: int = 0, held: HeldKeys = NO_KEYS) -> Status:
        cur = self.status
        cand = cur.moved(rotation=cur.rotation + rotations)
        if cur.counter % self.config["INPUT_EVERY"] == 0:
            cand = apply_held(cand, held)
        if cand.counter % self.config["TICK"] == 0:
            cand = cand.moved(y=cand.y - 1)
        return cand

    # ---------- transition ----------
    def advance(self, cand: Status) -> None:
        cur = self.status
        if cand.x != cur.x or cand.rotation != cur.rotation:
            remove_footprint(self.board, cur)
            try:
                try_place(self.board, cand)
            except Collision as e:
                LOGGER.debug("move rejected: %s", e)
                commit(self.board, cur)
                cand = cand.moved(x=cur.x, rotation=cur.rotation)
            else:
                self.status = cand
        if cand.y != self.status.y:
            self._descend(cand)

    def _descend(self, cand: Status) -> None:
        cur = self.status
        remove_footprint(self.board, cur)
        try:
            try_place(self.board, cand)
        except Collision:
            self._lock(cur)
        else:
            self.status = cand

    def _lock(self, cur: Status) -> None:
        self.state = PieceState.LOCKED
        commit(self.board, cur)
        LOGGER.debug("lock %s at (%d, %d)", cur.kind.name, cur.x, cur.y)
        cleared = sweep(self.board)
        if cleared:
            LOGGER.info("cleared %d line%s", cleared, "" if cleared == 1 else "s")
        self.status = self.spawn_status()
        try:
            try_place(self.board, self.status)
        except Collision:
            self._end()
        else:
            self.state = PieceState.FALLING

    def _end(self) -> None:
        self.state = PieceState.GAME_OVER
        flatten(self.board)
        LOGGER.info("game over: %s cannot spawn", self.status.kind.name)

    def tick(self, rotations: int = 0, held: HeldKeys = NO_KEYS) -> None:
        """Advance one frame. Does nothing once the game is over."""
        if self.game_over:
            return
        self.advance(self.candidate(rotations, held))
        self.status = self.status.moved(counter=self.status.counter + 1)
