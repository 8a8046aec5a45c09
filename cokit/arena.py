"""Bump allocation inside a fixed buffer, plus a resource that logs calls."""

from __future__ import annotations

import functools
import operator
import sys
from typing import Any, TextIO

DEFAULT_CAPACITY = 65536 * 161


class ArenaResource:
    """Hands out aligned offsets into one buffer; memory is freed only by ``release``."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self.buffer = bytearray(capacity)
        self.watermark = 0

    def allocate(self, size: int, align: int = 1) -> int:
        """Return the offset of ``size`` bytes aligned to ``align``.

        Raises ``MemoryError`` when the buffer is exhausted.
        """
        if align <= 0:
            raise ValueError("align must be positive")
        self.watermark = (self.watermark + align - 1) // align * align
        offset = self.watermark
        if self.watermark + size > self.capacity:
            raise MemoryError("arena exhausted")
        self.watermark += size
        return offset

    def release(self) -> None:
        """Forget every allocation."""
        self.watermark = 0


class ArenaAllocator:
    """Allocates arrays of fixed-size items from a shared ``ArenaResource``."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, resource: ArenaResource, item_size: int, align: int | None = None) -> None:
        if item_size <= 0:
            raise ValueError("item_size must be positive")
        self.resource = resource
        self.item_size = item_size
        self.align = item_size if align is None else align

    def allocate(self, n: int) -> int:
        """Return the offset of room for ``n`` items."""
        return self.resource.allocate(n * self.item_size, self.align)

    def deallocate(self, offset: int, n: int) -> None:
        """Check the block lies inside the arena; memory is reclaimed only by ``release``."""
        if offset < 0 or n < 0 or offset + n * self.item_size > self.resource.capacity:
            raise ValueError("block does not belong to this arena")

    def release(self) -> None:
        """Release the whole underlying resource."""
        self.resource.release()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArenaAllocator):
            return NotImplemented
        return self.resource is other.resource


class InspectingResource:
    """Forwards to ``upstream`` and writes a line for every call."""

    def __init__(self, upstream: Any, out: TextIO | None = None) -> None:
        self._upstream = upstream
        self._out = out

    def _write(self, text: str) -> None:
        (self._out if self._out is not None else sys.stdout).write(text)

    def allocate(self, size: int, align: int = 1) -> int:
        """Allocate from upstream and log the result."""
        offset = self._upstream.allocate(size, align)
        self._write(f"allocate    {offset:#x}  {size}  {align}\n")
        return offset

    def deallocate(self, offset: int, size: int, align: int = 1) -> None:
        """Log the call and pass it upstream if upstream can deallocate."""
        self._write(f"deallocate  {offset:#x}  {size}  {align}\n")
        upstream_deallocate = getattr(self._upstream, "deallocate", None)
        if upstream_deallocate is not None:
            upstream_deallocate(offset, size, align)


def add_all(*args: Any) -> Any:
    """Return ``0 + a + b + ...`` folded from the left."""
    return functools.reduce(operator.add, args, 0)