"""
Serial speed table
==================

Maps the platform's termios baud-rate symbols (``termios.B9600`` ...) to
their bits-per-second value and back.

The candidate rates are pyserial's standard POSIX list plus ``0`` (hang
up). A rate only makes it into the table when the running platform's
termios module defines the matching ``B<n>`` constant, so the table
differs between Linux, macOS and the BSDs.
"""

import termios
from typing import List, NamedTuple, Optional, Tuple

from serial.serialutil import SerialBase


class SpeedEntry(NamedTuple):
    """One termios speed symbol and its rate in bps."""
    symbol: int
    value: int


def _build_table() -> Tuple[SpeedEntry, ...]:
    entries = []
    for value in (0,) + tuple(SerialBase.BAUDRATES):
        symbol = getattr(termios, f'B{value}', None)
        if symbol is not None:
            entries.append(SpeedEntry(symbol, value))
    return tuple(entries)


SPEEDS: Tuple[SpeedEntry, ...] = _build_table()


def value_for(symbol: int) -> Optional[int]:
    """
    Translate a termios speed symbol to bits per second.

    Returns:
        The rate, or None if the symbol is not in the table
    """
    for entry in SPEEDS:
        if entry.symbol == symbol:
            return entry.value
    return None


def symbol_for(value: int) -> Optional[int]:
    """
    Translate a rate in bits per second to its termios speed symbol.

    Returns:
        The ``termios.B<n>`` constant, or None if the rate is unknown
    """
    for entry in SPEEDS:
        if entry.value == value:
            return entry.symbol
    return None


def supported_speeds() -> List[int]:
    """Rates available on this platform, in table order."""
    return [entry.value for entry in SPEEDS]
