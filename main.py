import argparse
import sys
from logging import getLogger

import pygame

from blockfall_board import snapshot
from blockfall_config import CONFIG, validate_config
from blockfall_game import Game
from blockfall_input import poll_events, sample_held
from blockfall_layout import compute_dims
from blockfall_log import configure_logging
from blockfall_render import RenderAssets, build_atlas, load_atlas

LOGGER = getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="blockfall", description="Falling-block puzzle game")
    parser.add_argument("--seed", type=int, help="seed for a reproducible piece sequence")
    parser.add_argument("--atlas", help="tile atlas image (vertical strip: wall, I, O, Z, T, L, S, J)")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING, ...")
    parser.add_argument("--hz", type=int, help="ticks per second")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> dict:
    config = dict(CONFIG)
    if args.seed is not None:
        config["SEED"] = args.seed
    if args.atlas:
        config["ATLAS_PATH"] = args.atlas
    if args.log_level:
        config["LOG_LEVEL"] = args.log_level
    if args.hz is not None:
        config["TICK_HZ"] = args.hz
    return config


def run(config: dict) -> None:
    pygame.init()
    try:
        _loop(config)
    finally:
        pygame.quit()


def _loop(config: dict) -> None:
    pygame.key.set_repeat()   # no key repeat: one KEYDOWN per physical press

    dims = compute_dims(config)
    screen = pygame.display.set_mode((dims.width, dims.height))
    pygame.display.set_caption("Blockfall")

    if config["ATLAS_PATH"]:
        render = RenderAssets(dims, load_atlas(config["ATLAS_PATH"]), config["BLOCK_SRC_SIZE"])
    else:
        render = RenderAssets(dims, build_atlas(config["BLOCK_SRC_SIZE"]), config["BLOCK_SRC_SIZE"])
    clock = pygame.time.Clock()

    game = Game(config)
    LOGGER.info("board %dx%d, %d Hz, seed %s",
                config["BOARD_WIDTH"], config["BOARD_HEIGHT"], config["TICK_HZ"], game.rng.seed)

    while True:
        quit_requested, rotations = poll_events(pygame.event.get())
        if quit_requested:
            LOGGER.info("quit")
            break
        if not game.game_over:
            game.tick(rotations, sample_held(pygame.key.get_pressed()))
        render.draw_board(screen, snapshot(game.board))
        pygame.display.flip()
        clock.tick(config["TICK_HZ"])


def main(argv=None) -> int:
    config = build_config(parse_args(argv))
    configure_logging(config["LOG_LEVEL"])
    validate_config(config)
    run(config)
    return 0


if __name__ == '__main__':
    sys.exit(main())
