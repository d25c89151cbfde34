"""
Command line options for sercat.

The command line is parsed once into an immutable Options value which is
then handed to the device configurator and the copy loop.
"""

import argparse
import re
from dataclasses import dataclass
from typing import List, Optional

from .errors import UsageError


DIGITS = {
    16: re.compile(r'[0-9a-fA-F]+'),
    10: re.compile(r'[0-9]+'),
    8: re.compile(r'[0-7]+'),
}

USAGE = """
%(prog)s: [options] <dev>

Valid options are:
    -h, --help       Display this usage information
    -f, --hwflow     Enable hardware flow control (RTS/CTS)
    -n, --noflow     Disable hardware flow control
    -r, --read       Read mode (default)
    -s, --speed      Serial speed
    -v, --verbose    Enable verbose mode
    -w, --write      Write mode
"""


@dataclass(frozen=True)
class Options:
    """Parsed command line."""

    device: str
    hwflow: bool = False
    noflow: bool = False
    read: bool = False
    write: bool = False
    speed: Optional[int] = None
    verbose: bool = False

    def __post_init__(self):
        if self.hwflow and self.noflow:
            raise UsageError("--hwflow and --noflow are mutually exclusive")
        if self.read and self.write:
            raise UsageError("--read and --write are mutually exclusive")

    @property
    def mode(self) -> str:
        """'write' or 'read'; read is the default."""
        return 'write' if self.write else 'read'

    @property
    def flow(self) -> Optional[bool]:
        """True to enable RTS/CTS, False to disable, None to leave as is."""
        if self.hwflow:
            return True
        if self.noflow:
            return False
        return None

    @classmethod
    def from_namespace(cls, args: argparse.Namespace) -> 'Options':
        return cls(
            device=args.device,
            hwflow=args.hwflow,
            noflow=args.noflow,
            read=args.read,
            write=args.write,
            # 0 leaves the line speed alone
            speed=args.speed or None,
            verbose=args.verbose,
        )


def parse_speed(text: str) -> int:
    """
    Parse a speed the way strtoul(text, NULL, 0) would.

    ``0x``/``0X`` selects hex, a leading ``0`` octal, anything else
    decimal.
    """
    digits = text.strip()
    if digits.startswith('+'):
        digits = digits[1:]
    if digits[:2].lower() == '0x':
        base, digits = 16, digits[2:]
    elif digits.startswith('0') and len(digits) > 1:
        base, digits = 8, digits[1:]
    else:
        base = 10
    if not DIGITS[base].fullmatch(digits):
        raise argparse.ArgumentTypeError(f"invalid speed: {text!r}")
    return int(digits, base)


class SercatArgumentParser(argparse.ArgumentParser):
    """
    ArgumentParser with the classic sercat usage text that raises
    UsageError instead of exiting with status 2.
    """

    def format_usage(self) -> str:
        return usage(self.prog)

    def error(self, message: str):
        raise UsageError(message)


def usage(prog: str = 'sercat') -> str:
    return USAGE % {'prog': prog}


def build_parser(prog: str = 'sercat') -> SercatArgumentParser:
    parser = SercatArgumentParser(prog=prog, add_help=False,
                                  allow_abbrev=False)
    parser.add_argument('-h', '--help', action='store_true')

    flow = parser.add_mutually_exclusive_group()
    flow.add_argument('-f', '--hwflow', action='store_true')
    flow.add_argument('-n', '--noflow', action='store_true')

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument('-r', '--read', action='store_true')
    mode.add_argument('-w', '--write', action='store_true')

    parser.add_argument('-s', '--speed', type=parse_speed, default=0)
    parser.add_argument('-v', '--verbose', action='store_true')
    parser.add_argument('device', nargs='?')
    return parser


def parse_args(argv: Optional[List[str]] = None,
               prog: str = 'sercat') -> Options:
    """
    Parse the command line into Options.

    Raises:
        UsageError: On --help, a missing device or any invalid or
                    contradictory argument
    """
    parser = build_parser(prog)
    args = parser.parse_args(argv)
    if args.help:
        raise UsageError()
    if args.device is None:
        raise UsageError("no device given")
    return Options.from_namespace(args)
