"""Lazy, chainable sequence with explicit ``has_next``/``next`` stepping."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any

_EMPTY = object()


class Generator:
    """A one-shot lazy sequence.

    Values are pulled from the underlying iterable only when asked for.
    Chaining methods (``map``, ``filter``, ``take`` ...) consume this
    generator and return a new one.
    """

    def __init__(self, iterable: Iterable[Any]) -> None:
        self._it: Iterator[Any] = iter(iterable)
        self._pending: Any = _EMPTY

    @classmethod
    def from_array(cls, *args: Any) -> Generator:
        """Build a generator from one iterable or from the given values.

        A single iterable argument (other than ``str``/``bytes``) is
        iterated; otherwise each argument is yielded in order.
        """
        if len(args) == 1:
            (only,) = args
            if isinstance(only, Iterable) and not isinstance(only, (str, bytes, bytearray)):
                return cls(only)
        return cls(args)

    def has_next(self) -> bool:
        """Return whether another value is available, fetching it if needed."""
        if self._pending is _EMPTY:
            try:
                self._pending = next(self._it)
            except StopIteration:
                return False
        return True

    def next(self) -> Any:
        """Return the next value; raise ``StopIteration`` when exhausted."""
        if not self.has_next():
            raise StopIteration
        value = self._pending
        self._pending = _EMPTY
        return value

    def __iter__(self) -> Iterator[Any]:
        while self.has_next():
            yield self.next()

    def map(self, func: Callable[[Any], Any]) -> Generator:
        """Yield ``func(value)`` for each value."""
        return Generator(func(value) for value in self)

    def flat_map(self, func: Callable[[Any], Iterable[Any]]) -> Generator:
        """Yield every value of the iterable ``func(value)`` for each value."""
        return Generator(inner for value in self for inner in func(value))

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every remaining value."""
        for value in self:
            func(value)

    def fold(self, initial: Any, func: Callable[[Any, Any], Any]) -> Any:
        """Combine the values left to right starting from ``initial``."""
        acc = initial
        for value in self:
            acc = func(acc, value)
        return acc

    def sum(self) -> Any:
        """Return the sum of the remaining values, starting from 0."""
        total = 0
        for value in self:
            total += value
        return total

    def filter(self, predicate: Callable[[Any], bool]) -> Generator:
        """Yield only the values for which ``predicate`` is true."""
        return Generator(value for value in self if predicate(value))

    def take(self, n: int) -> Generator:
        """Yield at most ``n`` values."""

        def taken() -> Iterator[Any]:
            count = 0
            while count < n and self.has_next():
                yield self.next()
                count += 1

        return Generator(taken())

    def take_while(self, predicate: Callable[[Any], bool]) -> Generator:
        """Yield values until the first one for which ``predicate`` is false."""

        def taken() -> Iterator[Any]:
            for value in self:
                if not predicate(value):
                    return
                yield value

        return Generator(taken())


def main(argv: list[str] | None = None) -> int:
    """Print the multiples of three among 1..5 doubled."""
    pipeline = (
        Generator.from_array(1, 2, 3, 4, 5)
        .map(lambda i: i * 2)
        .filter(lambda i: i % 3 == 0)
        .take(10)
    )
    while pipeline.has_next():
        print(pipeline.next())
    return 0