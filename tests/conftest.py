import logging
import os
import pty

import pytest


@pytest.fixture(autouse=True)
def reset_sercat_logger():
    """Undo setup_logging() so every test starts from a clean logger."""
    yield
    logger = logging.getLogger('sercat')
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def pty_pair():
    """A pseudo-terminal pair: (master_fd, slave_fd, slave_path)."""
    master_fd, slave_fd = pty.openpty()
    slave_path = os.ttyname(slave_fd)
    yield master_fd, slave_fd, slave_path
    for fd in (master_fd, slave_fd):
        try:
            os.close(fd)
        except OSError:
            pass


@pytest.fixture
def plain_file(tmp_path):
    """A regular file containing b'hello'."""
    path = tmp_path / 'plainfile'
    path.write_bytes(b'hello')
    return path


@pytest.fixture
def stdin_pipe(monkeypatch):
    """
    Replace the copy loop's stdin with a pipe.

    Returns a function that feeds bytes into the pipe and closes the
    write end so the copy sees end-of-stream.
    """
    read_fd, write_fd = os.pipe()
    monkeypatch.setattr('sercat.copyloop.STDIN_FD', read_fd)
    open_fds = [read_fd, write_fd]

    def feed(data: bytes):
        os.write(write_fd, data)
        os.close(write_fd)
        open_fds.remove(write_fd)

    yield feed
    for fd in open_fds:
        os.close(fd)
