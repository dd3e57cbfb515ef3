import logging
import sys
from typing import Optional, TextIO


class Color:
    RESET = "\x1b[0m"
    DIM = "\x1b[2m"
    RED = "\x1b[31m"
    GREEN = "\x1b[32m"
    YELLOW = "\x1b[33m"


_LEVEL_COLORS = {
    "DEBUG": Color.DIM,
    "INFO": Color.GREEN,
    "WARNING": Color.YELLOW,
    "ERROR": Color.RED,
    "CRITICAL": Color.RED,
}


class PrettyFormatter(logging.Formatter):
    def __init__(self, fmt: str = "%(message)s", color: bool = True):
        super().__init__(fmt)
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        level = record.levelname
        msg = super().format(record)
        if not self.color:
            return f"{level:<8} {record.name}: {msg}"
        color = _LEVEL_COLORS.get(level, Color.DIM)
        return f"{color}{level:<8}{Color.RESET} {record.name}: {msg}"


def setup(level: str = "INFO", stream: Optional[TextIO] = None, color: bool = True) -> logging.Handler:
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    h = logging.StreamHandler(stream or sys.stdout)
    h.setFormatter(PrettyFormatter("%(message)s", color=color))
    logger.handlers = [h]
    return h
