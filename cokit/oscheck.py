"""Turn C-style ``-1`` results into ``OSError`` and switch a terminal to raw mode."""

from __future__ import annotations

import errno as _errno
import os
import sys
from collections.abc import Iterator
from contextlib import contextmanager


def _location(depth: int) -> str:
    frame = sys._getframe(depth)
    return f"{frame.f_code.co_filename}:{frame.f_lineno}"


def _raise(err: int | None, location: str) -> None:
    if err is None:
        raise OSError(f"{location}: call failed")
    raise OSError(err, f"{location}: {os.strerror(err)}")


def check_error(result, err: int | None = None):
    """Return ``result``; if it is ``-1`` raise ``OSError`` for errno ``err``."""
    if result == -1:
        _raise(err, _location(2))
    return result


def check_error_nonblock(result, err: int | None = None, block_result=0, block_err: int = _errno.EWOULDBLOCK):
    """Like ``check_error``, but ``-1`` with ``block_err`` gives ``block_result``."""
    if result == -1:
        if err != block_err:
            _raise(err, _location(2))
        return block_result
    return result


@contextmanager
def raw_mode(fd: int | None = None) -> Iterator[list]:
    """Turn off canonical input and echo on ``fd``; restore on exit.

    Yields the original terminal attributes.
    """
    import termios

    if fd is None:
        fd = sys.stdin.fileno()
    original = termios.tcgetattr(fd)
    raw = list(original)
    raw[3] &= ~(termios.ICANON | termios.ECHO)
    cc = list(original[6])
    cc[termios.VMIN] = 1
    cc[termios.VTIME] = 0
    raw[6] = cc
    termios.tcsetattr(fd, termios.TCSANOW, raw)
    try:
        yield original
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, original)