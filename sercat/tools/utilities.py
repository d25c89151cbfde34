#!/usr/bin/env python3



from typing import TextIO
import logging
import sys


ESC_RED = '\033[31m'
ESC_YELLOW = '\033[33m'
ESC_RM = '\033[0m'


class ColorFormatter(logging.Formatter):
    """
    Plain ``%(message)s`` formatter that paints warnings yellow and
    errors red.

    Color is only applied when ``color`` is set; setup_logging() turns it
    on for streams that are a terminal.
    """

    COLORS = {
        logging.WARNING: ESC_YELLOW,
        logging.ERROR: ESC_RED,
        logging.CRITICAL: ESC_RED,
    }

    def __init__(self, color: bool = False):
        super().__init__('%(message)s')
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        escape = self.COLORS.get(record.levelno)
        if self.color and escape:
            return f"{escape}{message}{ESC_RM}"
        return message


class _BelowError(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.ERROR


def _make_handler(stream: TextIO) -> logging.StreamHandler:
    handler = logging.StreamHandler(stream)
    handler.setFormatter(ColorFormatter(color=stream.isatty()))
    return handler


def setup_logging(verbose: bool = False,
                  data_on_stdout: bool = False) -> logging.Logger:
    """
    Configure the ``sercat`` logger.

    Args:
        verbose: Emit debug messages
        data_on_stdout: stdout carries copied bytes (read mode), so
                        diagnostics must not be written there

    Returns:
        The package logger

    Errors always go to stderr. Everything below ERROR goes to stdout,
    or to stderr as well when ``data_on_stdout`` is set.
    """
    logger = logging.getLogger('sercat')
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.handlers.clear()
    logger.propagate = False

    info_handler = _make_handler(sys.stderr if data_on_stdout else sys.stdout)
    info_handler.addFilter(_BelowError())
    logger.addHandler(info_handler)

    error_handler = _make_handler(sys.stderr)
    error_handler.setLevel(logging.ERROR)
    logger.addHandler(error_handler)

    return logger
