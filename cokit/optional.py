"""A container that holds either one value or nothing."""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Any

_EMPTY = object()


class BadOptionalAccess(Exception):
    """Raised when the value of an empty ``Optional`` is requested."""

    def __init__(self, message: str = "BadOptionalAccess") -> None:
        super().__init__(message)


class Optional:
    """Holds one value or nothing.

    ``Optional()`` is empty, ``Optional(value)`` holds ``value`` (even
    ``None``), and ``Optional(factory, *args)`` with two or more arguments
    holds ``factory(*args)``.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, *args: Any) -> None:
        if not args:
            self._value: Any = _EMPTY
        elif len(args) == 1:
            self._value = args[0]
        else:
            factory, *rest = args
            self._value = factory(*rest)

    def has_value(self) -> bool:
        """Return whether a value is held."""
        return self._value is not _EMPTY

    def __bool__(self) -> bool:
        return self.has_value()

    def value(self) -> Any:
        """Return the held value; raise ``BadOptionalAccess`` if empty."""
        if self._value is _EMPTY:
            raise BadOptionalAccess()
        return self._value

    def value_or(self, default: Any) -> Any:
        """Return the held value, or ``default`` if empty."""
        return default if self._value is _EMPTY else self._value

    def emplace(self, factory: Callable[..., Any], *args: Any) -> Any:
        """Replace the contents with ``factory(*args)`` and return it."""
        self.reset()
        self._value = factory(*args)
        return self._value

    def reset(self) -> None:
        """Make this optional empty."""
        self._value = _EMPTY

    def swap(self, other: Optional) -> None:
        """Exchange contents with ``other``."""
        self._value, other._value = other._value, self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Optional):
            return NotImplemented
        if self.has_value() != other.has_value():
            return False
        return not self.has_value() or self._value == other._value

    def __lt__(self, other: Optional) -> bool:
        if not self or not other:
            return False
        return self._value < other._value

    def __gt__(self, other: Optional) -> bool:
        if not self or not other:
            return False
        return self._value > other._value

    def __le__(self, other: Optional) -> bool:
        if not self or not other:
            return True
        return self._value <= other._value

    def __ge__(self, other: Optional) -> bool:
        if not self or not other:
            return True
        return self._value >= other._value

    def __repr__(self) -> str:
        return f"Optional({self._value!r})" if self else "Optional()"


def make_optional(value: Any) -> Optional:
    """Return an ``Optional`` holding ``value``."""
    return Optional(value)


def above_ten(number: int) -> Optional:
    """Return ``number`` wrapped if it is greater than 10, else an empty optional."""
    return Optional(number) if number > 10 else Optional()


def _numbers(stream) -> Any:
    for line in stream:
        for token in line.split():
            try:
                yield int(token)
            except ValueError:
                return


def main(argv: list[str] | None = None) -> int:
    """Print three sample lists, then classify integers read from standard input."""
    for values in ([1, 2, 3, 4, 54, 6, 7, 8], [2, 5, 7, 34, 3, 7, 89, 4, 2]):
        held = make_optional(values)
        if held:
            print("".join(f"{item} " for item in held.value()))
    third = Optional([1, 2, 3, 4, 5, 6, 7, 8, 9])
    if third:
        sys.stdout.write("".join(f"{item} " for item in third.value()))

    for number in _numbers(sys.stdin):
        result = above_ten(number)
        if result:
            print(f"*p:{result.value()}")
            print(f"p.value():{result.value()}")
        else:
            print(f"p.has_value:{int(result.has_value())}")
            print(f"p.valur_or(65):{result.value_or(65)}")
    return 0