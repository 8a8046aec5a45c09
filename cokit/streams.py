"""Buffered asynchronous character streams over strings and file descriptors."""

from __future__ import annotations

import asyncio
import codecs
import os
import stat
from collections.abc import Callable
from typing import Protocol

DEFAULT_BUFFER_SIZE = 8192


class EndOfStream(EOFError):
    """Raised when a stream runs out of input or its sink accepts nothing."""


class Reader(Protocol):
    async def read(self, size: int) -> str: ...


class Writer(Protocol):
    async def write(self, data: str) -> int: ...


class StringReadBuf:
    """Source that hands out the characters of a string."""

    def __init__(self, text: str = "") -> None:
        self.text = text
        self.pos = 0

    async def read(self, size: int) -> str:
        """Return up to ``size`` further characters; ``""`` at the end."""
        chunk = self.text[self.pos:self.pos + size]
        self.pos += len(chunk)
        return chunk


class StringWriteBuf:
    """Sink that appends everything written to ``text``."""

    def __init__(self, text: str = "") -> None:
        self.text = text

    async def write(self, data: str) -> int:
        """Append ``data`` and return how many characters were taken."""
        self.text += data
        return len(data)


def _needs_wait(fd: int) -> bool:
    mode = os.fstat(fd).st_mode
    return not (stat.S_ISREG(mode) or stat.S_ISDIR(mode))


async def _wait_ready(
    add: Callable[..., None], remove: Callable[[int], object], fd: int
) -> None:
    future = asyncio.get_running_loop().create_future()

    def ready() -> None:
        if not future.done():
            future.set_result(None)

    add(fd, ready)
    try:
        await future
    finally:
        remove(fd)


class FileBuf:
    """Source and sink over an operating-system file descriptor.

    Regular files and directories are read directly; pipes, sockets and
    terminals are waited on with the running event loop first. Text is
    decoded and encoded with ``encoding``.
    """

    def __init__(self, fd: int, encoding: str = "utf-8", closefd: bool = True) -> None:
        self._fd = fd
        self._encoding = encoding
        self._decoder = codecs.getincrementaldecoder(encoding)()
        self._closefd = closefd

    def fileno(self) -> int:
        """Return the file descriptor, or -1 once closed."""
        return self._fd

    async def _read_bytes(self, size: int) -> bytes:
        if not _needs_wait(self._fd):
            return os.read(self._fd, size)
        loop = asyncio.get_running_loop()
        while True:
            await _wait_ready(loop.add_reader, loop.remove_reader, self._fd)
            try:
                return os.read(self._fd, size)
            except BlockingIOError:
                continue

    async def _write_bytes(self, data: bytes) -> int:
        if not _needs_wait(self._fd):
            return os.write(self._fd, data)
        loop = asyncio.get_running_loop()
        while True:
            await _wait_ready(loop.add_writer, loop.remove_writer, self._fd)
            try:
                return os.write(self._fd, data)
            except BlockingIOError:
                continue

    async def read(self, size: int) -> str:
        """Return up to ``size`` decoded characters; ``""`` at end of file."""
        while True:
            data = await self._read_bytes(size)
            text = self._decoder.decode(data, final=not data)
            if text or not data:
                return text

    async def write(self, data: str) -> int:
        """Write all of ``data``; return its length, or 0 if nothing was taken."""
        remaining = memoryview(data.encode(self._encoding))
        while remaining:
            written = await self._write_bytes(remaining)
            if written == 0:
                return 0
            remaining = remaining[written:]
        return len(data)

    def close(self) -> None:
        """Close the descriptor if this buffer owns it."""
        if self._fd != -1 and self._closefd:
            os.close(self._fd)
        self._fd = -1

    def __enter__(self) -> FileBuf:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class IStream:
    """Buffered character input over a source with ``async read(size)``."""

    def __init__(self, source: Reader, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._source = source
        self._in_size = buffer_size
        self._in_buffer = ""
        self._in_index = 0

    async def _fill(self) -> bool:
        self._in_buffer = await self._source.read(self._in_size)
        self._in_index = 0
        return bool(self._in_buffer)

    async def getchar(self) -> str:
        """Return the next character; raise ``EndOfStream`` at the end."""
        if self._in_index == len(self._in_buffer) and not await self._fill():
            raise EndOfStream("end of stream")
        char = self._in_buffer[self._in_index]
        self._in_index += 1
        return char

    async def getline(self, eol: str = "\n") -> str:
        """Read up to ``eol`` and return the text without it."""
        line = await self.read_until(eol)
        return line[:-len(eol)]

    async def read_until(self, terminator: str) -> str:
        """Read up to and including ``terminator``."""
        if not terminator:
            raise ValueError("terminator must not be empty")
        parts: list[str] = []
        tail = ""
        while True:
            char = await self.getchar()
            parts.append(char)
            tail = (tail + char)[-len(terminator):]
            if tail == terminator:
                return "".join(parts)

    async def getn(self, n: int) -> str:
        """Read exactly ``n`` characters."""
        return "".join([await self.getchar() for _ in range(n)])


class OStream:
    """Buffered character output over a sink with ``async write(data)``."""

    def __init__(self, sink: Writer, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._sink = sink
        self._out_size = buffer_size
        self._out_parts: list[str] = []
        self._out_len = 0

    async def _write_all(self, data: str) -> None:
        while data:
            written = await self._sink.write(data)
            if written == 0:
                raise EndOfStream("sink accepted no data")
            data = data[written:]

    async def flush(self) -> None:
        """Write out everything buffered."""
        if self._out_len:
            data = "".join(self._out_parts)
            await self._write_all(data)
            self._out_parts.clear()
            self._out_len = 0

    async def putchar(self, char: str) -> None:
        """Buffer one character, flushing first if the buffer is full."""
        if self._out_len == self._out_size:
            await self.flush()
        self._out_parts.append(char)
        self._out_len += len(char)

    async def puts(self, text: str) -> None:
        """Buffer ``text``, or write it straight out if it does not fit."""
        if self._out_len + len(text) <= self._out_size:
            self._out_parts.append(text)
            self._out_len += len(text)
            return
        await self.flush()
        await self._write_all(text)


class IOStream(IStream, OStream):
    """Buffered input and output over one object with ``read`` and ``write``."""

    def __init__(self, buf, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        IStream.__init__(self, buf, buffer_size)
        OStream.__init__(self, buf, buffer_size)