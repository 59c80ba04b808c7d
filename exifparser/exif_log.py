"""
Custom log output
"""

import logging
import sys

TEXT_NORMAL = 0
TEXT_BOLD = 1
TEXT_RED = 31
TEXT_GREEN = 32
TEXT_YELLOW = 33
TEXT_BLUE = 34
TEXT_MAGENTA = 35
TEXT_CYAN = 36

LOGGER_NAME = 'exifparser'


def get_logger() -> logging.Logger:
    """Use this from all files needing to log."""
    return logging.getLogger(LOGGER_NAME)


def setup_logger(debug: bool, color: bool) -> logging.Logger:
    """Configure the logger."""
    if debug:
        log_level = logging.DEBUG
    else:
        log_level = logging.INFO

    logger = get_logger()
    # calling this twice must not double up the output
    for handler in list(logger.handlers):
        if isinstance(handler, Handler):
            logger.removeHandler(handler)
    logger.addHandler(Handler(log_level, debug, color))
    logger.setLevel(log_level)
    return logger


class Formatter(logging.Formatter):
    """
    Format the level name, colored if asked to, in debug mode only.
    """

    def __init__(self, debug: bool = False, color: bool = False):
        self.color = color
        self.debug = debug
        if self.debug:
            log_format = '%(levelname)-6s %(message)s'
        else:
            log_format = '%(message)s'
        super().__init__(log_format)

    def format(self, record: logging.LogRecord) -> str:
        if self.debug and self.color:
            if record.levelno >= logging.ERROR:
                color = TEXT_RED
            elif record.levelno >= logging.WARNING:
                color = TEXT_YELLOW
            elif record.levelno >= logging.INFO:
                color = TEXT_GREEN
            elif record.levelno >= logging.DEBUG:
                color = TEXT_CYAN
            else:
                color = TEXT_NORMAL
            record.levelname = '\x1b[%sm%s\x1b[%sm' % (color, record.levelname, TEXT_NORMAL)
        return super().format(record)


class Handler(logging.StreamHandler):

    def __init__(self, log_level: int, debug: bool = False, color: bool = False):
        self.color = color
        self.debug = debug
        super().__init__(sys.stdout)
        self.setFormatter(Formatter(debug, color))
        self.setLevel(log_level)
