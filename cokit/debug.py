"""Debug printer that tags output with the caller's location and checks assertions."""

from __future__ import annotations

import enum
import os
import sys
from collections.abc import Collection, Mapping
from typing import Any, TextIO

from cokit.optional import Optional
from cokit.variant import Variant

_ESCAPES = {
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\\": "\\\\",
    "\0": "\\0",
}


def quote(text: str, quote_char: str = '"') -> str:
    """Return ``text`` between ``quote_char`` with control characters escaped."""
    parts = [quote_char]
    for ch in text:
        escaped = _ESCAPES.get(ch)
        if escaped is not None:
            parts.append(escaped)
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            parts.append(f"\\x{ord(ch):02x}")
        else:
            if ch == quote_char:
                parts.append("\\")
            parts.append(ch)
    parts.append(quote_char)
    return "".join(parts)


def format_value(value: Any) -> str:
    """Render ``value`` the way the debug printer shows it."""
    if isinstance(value, str):
        return quote(value, '"')
    if isinstance(value, (bytes, bytearray)):
        return quote(bytes(value).decode("latin-1"), '"')
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, enum.Enum):
        return format_value(value.value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return f"{value:.15f}"
    if value is None:
        return "nil"
    if isinstance(value, Optional):
        return format_value(value.value()) if value else "nil"
    if isinstance(value, Variant):
        return value.visit(format_value)
    if isinstance(value, type):
        return value.__qualname__
    if isinstance(value, Mapping):
        items = (f"{{{format_value(k)}, {format_value(v)}}}" for k, v in value.items())
        return "{" + ", ".join(items) + "}"
    if isinstance(value, Collection):
        return "{" + ", ".join(format_value(item) for item in value) + "}"
    return str(value)


class _State(enum.Enum):
    SILENT = 0
    PRINT = 1
    PANIC = 2
    SUPPRESS = 3


class DebugCondition:
    """Left-hand side of an assertion; comparing it records a failure."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, debug: Debug, value: Any) -> None:
        self._debug = debug
        self._value = value

    def _check(self, ok: bool, other: Any, symbol: str) -> Debug:
        if not ok:
            debug = self._debug
            debug._on_error("assertion failed:")
            debug._on_print(format_value(self._value))
            debug._on_print(symbol)
            debug._on_print(format_value(other))
        return self._debug

    def __lt__(self, other: Any) -> Debug:
        return self._check(self._value < other, other, "<")

    def __gt__(self, other: Any) -> Debug:
        return self._check(self._value > other, other, ">")

    def __le__(self, other: Any) -> Debug:
        return self._check(self._value <= other, other, "<=")

    def __ge__(self, other: Any) -> Debug:
        return self._check(self._value >= other, other, ">=")

    def __eq__(self, other: Any) -> Debug:  # type: ignore[override]
        return self._check(self._value == other, other, "==")

    def __ne__(self, other: Any) -> Debug:  # type: ignore[override]
        return self._check(self._value != other, other, "!=")


class Debug:
    """Collects values and writes them, tagged with the creation site, on close.

    Output goes to ``stream`` (standard error by default) when ``close`` is
    called or the ``with`` block ends. A failed check or ``fail()`` makes
    ``close`` raise ``RuntimeError`` with the collected text instead.
    """

    def __init__(self, enable: bool = True, line: str | None = None, stream: TextIO | None = None) -> None:
        caller = sys._getframe(1)
        self._file = os.path.basename(caller.f_code.co_filename)
        self._lineno = caller.f_lineno
        self._line = line
        self._stream = stream
        self._parts: list[str] = []
        self._state = _State.SILENT if enable else _State.SUPPRESS
        self._closed = False

    def _add_location_marks(self) -> None:
        self._parts.append(f"{self._file}:{self._lineno}:\t")
        if self._line is not None:
            self._parts.append(f"[{self._line}]\t")
        self._parts.append(" ")

    def _on_print(self, text: str) -> None:
        if self._state is _State.SUPPRESS:
            return
        if self._state is _State.SILENT:
            self._state = _State.PRINT
            self._add_location_marks()
        else:
            self._parts.append(" ")
        self._parts.append(text)

    def _on_error(self, message: str) -> None:
        if self._state is not _State.SUPPRESS:
            self._state = _State.PANIC
            self._add_location_marks()
        else:
            self._parts.append(" ")
        self._parts.append(message)

    def print(self, *args: Any) -> Debug:
        """Append each argument, separated by spaces."""
        for arg in args:
            self._on_print(format_value(arg))
        return self

    def check(self, value: Any) -> DebugCondition:
        """Start an assertion on ``value``; finish it with a comparison."""
        return DebugCondition(self, value)

    def fail(self, failed: bool = True) -> Debug:
        """Record an error if ``failed``; otherwise silence this printer."""
        if failed:
            self._on_error("error:")
        else:
            self._state = _State.SUPPRESS
        return self

    def on(self, enable: bool) -> Debug:
        """Silence this printer unless ``enable``."""
        if not enable:
            self._state = _State.SUPPRESS
        return self

    def close(self) -> None:
        """Write the collected line, or raise ``RuntimeError`` after a failure."""
        if self._closed:
            return
        self._closed = True
        text = "".join(self._parts)
        if self._state is _State.PANIC:
            raise RuntimeError(text)
        if self._state is _State.PRINT:
            stream = self._stream if self._stream is not None else sys.stderr
            stream.write(text + "\n")

    def __enter__(self) -> Debug:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()