"""
Byte copy between the device and a standard stream.

Read mode copies device -> stdout, write mode stdin -> device. The copy
runs until the source returns end-of-stream; there is no timeout and no
way to stop it from inside the process.
"""

import logging
import os

from .device import open_device
from .errors import CopyError
from .options import Options


logger = logging.getLogger(__name__)

BUF_SIZE = 1024

STDIN_FD = 0
STDOUT_FD = 1


def copy_stream(src_fd: int, dst_fd: int, bufsize: int = BUF_SIZE) -> int:
    """
    Copy from ``src_fd`` to ``dst_fd`` until end-of-stream.

    Each chunk must be written in a single call; a short write is an
    error, not something to retry.

    Returns:
        Number of bytes copied

    Raises:
        CopyError: On a read error, write error or short write
    """
    total = 0
    while True:
        try:
            chunk = os.read(src_fd, bufsize)
        except OSError as e:
            raise CopyError(f"Read error: {e.strerror}") from e
        if not chunk:
            return total

        try:
            written = os.write(dst_fd, chunk)
        except OSError as e:
            raise CopyError(f"Write error: {e.strerror}") from e
        if written < len(chunk):
            raise CopyError(f"Short write {written} < {len(chunk)}")
        total += written


def relay(options: Options) -> int:
    """
    Open and configure the device, then copy in the requested direction.

    Only the device descriptor is closed, and only after a clean
    end-of-stream. The inherited standard stream stays open.

    Returns:
        Number of bytes copied
    """
    if options.mode == 'write':
        src_fd = STDIN_FD
        dst_fd = device_fd = open_device(options.device, os.O_WRONLY, options)
    else:
        src_fd = device_fd = open_device(options.device, os.O_RDONLY, options)
        dst_fd = STDOUT_FD

    total = copy_stream(src_fd, dst_fd)
    logger.debug(f"Copied {total} bytes")

    os.close(device_fd)
    return total
