"""Sole ownership of an object, with a deleter run when ownership ends."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any


def _default_deleter(obj: Any) -> None:
    close = getattr(obj, "close", None)
    if callable(close):
        close()


class UniquePtr:
    """Owns at most one object and disposes of it with ``deleter``.

    The default deleter calls the object's ``close()`` method if it has one.
    Attribute access not defined here is forwarded to the owned object.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, obj: Any = None, deleter: Callable[[Any], Any] | None = None) -> None:
        self._obj = obj
        self._deleter = deleter if deleter is not None else _default_deleter

    def get(self) -> Any:
        """Return the owned object, or ``None``."""
        return self._obj

    def get_deleter(self) -> Callable[[Any], Any]:
        """Return the deleter."""
        return self._deleter

    def release(self) -> Any:
        """Give up ownership without deleting; return the object."""
        obj, self._obj = self._obj, None
        return obj

    def reset(self, obj: Any = None) -> None:
        """Delete the owned object, if any, and take ownership of ``obj``."""
        if self._obj is not None:
            self._deleter(self._obj)
        self._obj = obj

    def swap(self, other: UniquePtr) -> None:
        """Exchange owned objects and deleters with ``other``."""
        self._obj, other._obj = other._obj, self._obj
        self._deleter, other._deleter = other._deleter, self._deleter

    def take(self) -> UniquePtr:
        """Move ownership into a new pointer, leaving this one empty."""
        return UniquePtr(self.release(), self._deleter)

    def __bool__(self) -> bool:
        return self._obj is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UniquePtr):
            return NotImplemented
        return self._obj is other._obj

    def __enter__(self) -> UniquePtr:
        return self

    def __exit__(self, *args: object) -> None:
        self.reset()

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        obj = self.__dict__.get("_obj")
        if obj is None:
            raise AttributeError(f"empty UniquePtr has no attribute {name!r}")
        return getattr(obj, name)

    def __repr__(self) -> str:
        return f"UniquePtr({self._obj!r})"


def make_unique(cls: Callable[..., Any], *args: Any, **kwargs: Any) -> UniquePtr:
    """Construct ``cls(*args, **kwargs)`` and return a pointer owning it."""
    return UniquePtr(cls(*args, **kwargs))