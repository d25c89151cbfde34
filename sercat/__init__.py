"""
sercat - Serial Read/Write Tool
===============================

Opens a serial device, puts the line into raw mode, optionally sets the
speed and RTS/CTS flow control, and then copies bytes from the device to
stdout (read mode) or from stdin to the device (write mode).

Example:
    >>> from sercat import Options, relay
    >>>
    >>> relay(Options('/dev/ttyUSB0', speed=115200))
"""

from .device import open_device, configure_terminal, make_raw
from .errors import (
    SercatError,
    DeviceOpenError,
    ConfigurationError,
    CopyError,
    UsageError,
)
from .options import Options, parse_args
from .copyloop import copy_stream, relay, BUF_SIZE
from .speeds import SPEEDS, SpeedEntry, value_for, symbol_for, supported_speeds

__version__ = "1.0.0"
__all__ = [
    "open_device",
    "configure_terminal",
    "make_raw",
    "SercatError",
    "DeviceOpenError",
    "ConfigurationError",
    "CopyError",
    "UsageError",
    "Options",
    "parse_args",
    "copy_stream",
    "relay",
    "BUF_SIZE",
    "SPEEDS",
    "SpeedEntry",
    "value_for",
    "symbol_for",
    "supported_speeds",
]
