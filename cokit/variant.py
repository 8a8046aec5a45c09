"""A tagged union holding exactly one value of a fixed list of types."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any


class BadVariantAccess(Exception):
    """Raised when a variant is read as an alternative it does not hold."""

    def __init__(self, message: str = "BadVariantAccess") -> None:
        super().__init__(message)


class Variant:
    """Holds one value whose type is exactly one of ``types``.

    The alternative index is the position of the value's type in
    ``types``. When a type appears more than once, the first position is used.
    """

    __slots__ = ("_types", "_index", "_value")

    def __init__(self, types: Sequence[type], value: Any) -> None:
        self._types = self._check_types(types)
        self._index = self._index_of(type(value))
        self._value = value

    @classmethod
    def in_place(cls, types: Sequence[type], index: int, *args: Any) -> Variant:
        """Build the alternative at ``index`` from ``args``."""
        checked = cls._check_types(types)
        if not 0 <= index < len(checked):
            raise IndexError(f"alternative index {index} out of range")
        variant = cls.__new__(cls)
        variant._types = checked
        variant._index = index
        variant._value = checked[index](*args)
        return variant

    @staticmethod
    def _check_types(types: Sequence[type]) -> tuple[type, ...]:
        checked = tuple(types)
        if not checked:
            raise TypeError("a variant needs at least one alternative")
        for kind in checked:
            if not isinstance(kind, type):
                raise TypeError(f"{kind!r} is not a type")
        return checked

    def _index_of(self, kind: type) -> int:
        for position, alternative in enumerate(self._types):
            if alternative is kind:
                return position
        raise TypeError(f"{kind.__name__} is not an alternative of this variant")

    def _resolve(self, key: int | type) -> int:
        if isinstance(key, type):
            return self._index_of(key)
        if not 0 <= key < len(self._types):
            raise IndexError(f"alternative index {key} out of range")
        return key

    @property
    def types(self) -> tuple[type, ...]:
        """The alternative types, in order."""
        return self._types

    def index(self) -> int:
        """Return the position of the held alternative."""
        return self._index

    def holds_alternative(self, kind: type) -> bool:
        """Return whether the held alternative is ``kind``."""
        return self._index_of(kind) == self._index

    def get(self, key: int | type) -> Any:
        """Return the value if ``key`` (index or type) names the held alternative.

        Raises ``BadVariantAccess`` otherwise.
        """
        if self._resolve(key) != self._index:
            raise BadVariantAccess()
        return self._value

    def get_if(self, key: int | type) -> Any:
        """Return the value if ``key`` names the held alternative, else ``None``."""
        if self._resolve(key) != self._index:
            return None
        return self._value

    def visit(self, func: Callable[[Any], Any]) -> Any:
        """Return ``func`` applied to the held value."""
        return func(self._value)

    def __repr__(self) -> str:
        names = ", ".join(kind.__name__ for kind in self._types)
        return f"Variant[{names}]({self._value!r})"