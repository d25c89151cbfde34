"""
Error types raised by sercat.

Everything a run can fail with at runtime derives from SercatError, which
is itself a ``serial.SerialException`` so code that already handles
pyserial errors catches ours as well. The CLI turns any of them into one
message on stderr and a failure exit status.
"""

import serial


class SercatError(serial.SerialException):
    """Base class for open, configuration and copy failures."""


class DeviceOpenError(SercatError):
    """The device path could not be opened."""


class ConfigurationError(SercatError):
    """A terminal attribute could not be read or applied."""


class CopyError(SercatError):
    """Read error, write error or short write while copying."""


class UsageError(Exception):
    """Malformed or contradictory command line."""
