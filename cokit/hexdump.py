"""Classic hex dump of a byte sequence: address, hex bytes and a printable column."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

_USAGE = (
    "Options:\n"
    "-f <file>   choose the file path\n"
    "-x <size>   choose the one_line_size\n"
)


def _as_bytes(data: bytes | bytearray | memoryview | str | Iterable[int]) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _printable(byte: int) -> str:
    return chr(byte) if 0x20 <= byte < 0x7F else "."


def hexdump_lines(data, width: int = 16) -> Iterator[str]:
    """Yield the dump of ``data`` one line at a time, without line endings."""
    if width <= 0:
        raise ValueError("width must be positive")
    view = _as_bytes(data)
    for start in range(0, len(view), width):
        chunk = view[start:start + width]
        hex_part = "".join(f" {byte:02x}" for byte in chunk)
        end = start + len(chunk)
        padding = " " * ((width - end % width) * 3) if end % width else ""
        text = "".join(_printable(byte) for byte in chunk)
        yield f"{start & 0xFFFFFFFF:08x}{hex_part}{padding} |{text}|"


def hexdump(data, width: int = 16, out: TextIO | None = None) -> None:
    """Write the dump of ``data`` to ``out`` (standard output by default)."""
    stream = sys.stdout if out is None else out
    for line in hexdump_lines(data, width):
        stream.write(line + "\n")


def main(argv: list[str] | None = None) -> int:
    """Dump a file (``-f``) or standard input with ``-x`` bytes per line."""
    args = iter(sys.argv[1:] if argv is None else argv)
    width = 16
    content: bytes | None = None

    for arg in args:
        if arg == "-h":
            sys.stderr.write(_USAGE)
            return 0
        if arg == "-x":
            value = next(args, None)
            if value is None:
                raise SystemExit("-x requires an argument")
            try:
                size = int(value)
            except ValueError:
                raise SystemExit(f"invalid size: {value}") from None
            if size <= 0:
                raise SystemExit("wrong num of one_line_size")
            width = size
        elif arg == "-f":
            path = next(args, None)
            if path is None:
                raise SystemExit("-f requires an argument")
            try:
                with open(path, "rb") as handle:
                    content = handle.read()
            except OSError as exc:
                print(f'{exc.strerror} ({exc.errno}) "{path}"', file=sys.stderr)
                return 0
        else:
            raise SystemExit(f"Unknown option: {arg}")

    if content is None:
        content = sys.stdin.buffer.read()
    hexdump(content, width, sys.stdout)
    return 0