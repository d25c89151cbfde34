"""
Device configuration
====================

Opens the device path and, when it is a terminal, puts the line into raw
mode and applies the requested flow control and speed.

Plain files and pipes are not terminals; they are returned as opened so
sercat can be used to copy to and from them as well.

Every failure raises straight away. Nothing is rolled back and the
descriptor is not closed, the process is about to exit anyway.
"""

import errno
import logging
import os
import termios
import tty
from typing import List

from .errors import ConfigurationError, DeviceOpenError
from .options import Options
from .speeds import supported_speeds, symbol_for, value_for


logger = logging.getLogger(__name__)


def _direction(flags: int) -> str:
    if flags == os.O_WRONLY:
        return " for writing"
    if flags == os.O_RDONLY:
        return " for reading"
    return ""


def _rate(value):
    return "unknown" if value is None else value


def _commit(fd: int, attrs: List, what: str) -> None:
    try:
        termios.tcsetattr(fd, termios.TCSANOW, attrs)
    except termios.error as e:
        raise ConfigurationError(f"Failed to {what}: {e.args[-1]}") from e


def make_raw(attrs: List) -> List:
    """
    Switch a tcgetattr() attribute list to raw mode, in place.

    Same flags as cfmakeraw(3): no input translation, no output
    processing, no echo, no canonical mode or signals, 8 data bits,
    reads return after one byte.
    """
    attrs[tty.IFLAG] &= ~(termios.IGNBRK | termios.BRKINT | termios.PARMRK |
                          termios.ISTRIP | termios.INLCR | termios.IGNCR |
                          termios.ICRNL | termios.IXON)
    attrs[tty.OFLAG] &= ~termios.OPOST
    attrs[tty.LFLAG] &= ~(termios.ECHO | termios.ECHONL | termios.ICANON |
                          termios.ISIG | termios.IEXTEN)
    attrs[tty.CFLAG] &= ~(termios.CSIZE | termios.PARENB)
    attrs[tty.CFLAG] |= termios.CS8
    attrs[tty.CC] = list(attrs[tty.CC])
    attrs[tty.CC][termios.VMIN] = 1
    attrs[tty.CC][termios.VTIME] = 0
    return attrs


def configure_terminal(fd: int, path: str, options: Options) -> bool:
    """
    Apply raw mode, flow control and speed to an open descriptor.

    Args:
        fd: Open descriptor of ``path``
        path: Device path, for messages
        options: Parsed command line

    Returns:
        False if the descriptor is not a terminal and was left alone,
        True once the line is configured and flushed

    Raises:
        ConfigurationError: If any step fails or the speed is unknown
    """
    try:
        attrs = termios.tcgetattr(fd)
    except termios.error as e:
        if e.args[0] == errno.ENOTTY:
            logger.info(f"{path} is not a tty, skipping tty config")
            return False
        raise ConfigurationError(
            f"Failed to get terminal attributes: {e.args[-1]}") from e

    logger.debug(f"termios.c_iflag = 0{attrs[tty.IFLAG]:o}")
    logger.debug(f"termios.c_oflag = 0{attrs[tty.OFLAG]:o}")
    logger.debug(f"termios.c_cflag = 0{attrs[tty.CFLAG]:o}")
    logger.debug(f"termios.c_lflag = 0{attrs[tty.LFLAG]:o}")

    logger.debug("Enable terminal raw mode")
    make_raw(attrs)
    _commit(fd, attrs, "enable raw mode")

    if options.flow is not None:
        verb = "en" if options.flow else "dis"
        crtscts = getattr(termios, 'CRTSCTS', None)
        if crtscts is None:
            raise ConfigurationError(
                f"Failed to {verb}able hardware flow control: "
                "not supported on this platform")
        if options.flow:
            attrs[tty.CFLAG] |= crtscts
        else:
            attrs[tty.CFLAG] &= ~crtscts
        logger.debug(f"{verb.capitalize()}abling hardware flow control")
        _commit(fd, attrs, f"{verb}able hardware flow control")

    if options.speed:
        symbol = symbol_for(options.speed)
        if symbol is None:
            rates = ", ".join(str(rate) for rate in supported_speeds() if rate)
            raise ConfigurationError(
                f"Unknown serial speed {options.speed} (supported: {rates})")
        logger.debug(f"Setting serial speed to {options.speed} bps")
        attrs[tty.ISPEED] = symbol
        attrs[tty.OSPEED] = symbol
        _commit(fd, attrs, "set speed attribute")
    else:
        ispeed = value_for(attrs[tty.ISPEED])
        ospeed = value_for(attrs[tty.OSPEED])
        logger.debug(f"Serial speed is {_rate(ispeed)}/{_rate(ospeed)}")

    logger.debug("Flushing terminal")
    try:
        termios.tcflush(fd, termios.TCIOFLUSH)
    except termios.error as e:
        raise ConfigurationError(f"Failed to flush: {e.args[-1]}") from e

    return True


def open_device(path: str, flags: int, options: Options) -> int:
    """
    Open ``path`` and configure it if it is a terminal.

    Args:
        path: Device path (e.g., '/dev/ttyUSB0')
        flags: os.O_RDONLY or os.O_WRONLY
        options: Parsed command line

    Returns:
        The open file descriptor, owned by the caller

    Raises:
        DeviceOpenError: If the path cannot be opened
        ConfigurationError: If the terminal cannot be configured
    """
    logger.debug(f"Opening {path}...")
    try:
        fd = os.open(path, flags)
    except OSError as e:
        raise DeviceOpenError(
            f"Failed to open {path}{_direction(flags)}: {e.strerror}") from e

    configure_terminal(fd, path, options)
    return fd
