#!/usr/bin/env python3
"""
sercat command line entry point.

Usage:
    sercat [-f|-n] [-r|-w] [-s SPEED] [-v] <dev>

Example:
    sercat --speed 115200 /dev/ttyUSB0 > capture.bin
    sercat --write --hwflow --speed 0x1c200 /dev/ttyUSB0 < firmware.bin
"""

import sys
from typing import List, Optional

from .errors import SercatError, UsageError
from .options import parse_args, usage
from .copyloop import relay
from .tools import setup_logging


EXIT_OK = 0
EXIT_USAGE = 1
EXIT_FAILURE = 255


def main(argv: Optional[List[str]] = None, prog: str = 'sercat') -> int:
    """
    Run sercat.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])
        prog: Program name shown in the usage text

    Returns:
        0 on end-of-stream, 1 on a usage error, 255 on any failure while
        opening, configuring or copying
    """
    try:
        options = parse_args(argv, prog=prog)
    except UsageError as e:
        sys.stderr.write(usage(prog) + "\n")
        if str(e):
            sys.stderr.write(f"{prog}: error: {e}\n")
        return EXIT_USAGE

    logger = setup_logging(verbose=options.verbose,
                           data_on_stdout=options.mode == 'read')

    try:
        relay(options)
    except SercatError as e:
        logger.error(str(e))
        return EXIT_FAILURE

    return EXIT_OK


def run() -> None:
    """Console script wrapper."""
    sys.exit(main())


if __name__ == '__main__':
    run()
