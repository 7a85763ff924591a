"""Console logging with coloured levels"""
import logging
from logging import StreamHandler

from colorlog import ColoredFormatter

_COLORED_FORMATTER = ColoredFormatter(
    "%(log_color)s%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    datefmt="%H:%M:%S",
    log_colors={
        "DEBUG": "cyan",
        "INFO": "white",
        "WARNING": "yellow",
        "ERROR": "bold_red",
        "CRITICAL": "red",
    },
)


class ColoredStreamHandler(StreamHandler):
    def __init__(self):
        super().__init__()
        self.setFormatter(_COLORED_FORMATTER)


def configure_logging(level="INFO") -> None:
    root = logging.getLogger()
    root.handlers[:] = [h for h in root.handlers if not isinstance(h, ColoredStreamHandler)]
    root.addHandler(ColoredStreamHandler())
    root.setLevel(level.upper() if isinstance(level, str) else level)
