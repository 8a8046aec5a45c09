"""Declare a class's serialisable members and dump instances as styled JSON."""

from __future__ import annotations

import inspect
import json
from collections.abc import Callable
from typing import Any

_MAX_MEMBERS = 20
_CLASS_ATTR = "__reflect_members__"
_registry: dict[type, tuple[str, ...]] = {}


def _check_names(names: tuple[str, ...]) -> tuple[str, ...]:
    if not 1 <= len(names) <= _MAX_MEMBERS:
        raise ValueError(f"between 1 and {_MAX_MEMBERS} members may be reflected")
    for name in names:
        if not isinstance(name, str) or not name.isidentifier():
            raise ValueError(f"invalid member name: {name!r}")
    return names


def reflect(*args: str) -> Callable[[type], type]:
    """Class decorator listing the members that ``serialize`` writes."""
    names = _check_names(args)

    def decorate(cls: type) -> type:
        setattr(cls, _CLASS_ATTR, names)
        return cls

    return decorate


def reflect_type(cls: type, *args: str) -> type:
    """Register members of ``cls`` from outside the class; methods allowed."""
    _registry[cls] = _check_names(args)
    return cls


def _class_members(cls: type) -> tuple[str, ...]:
    names = cls.__dict__.get(_CLASS_ATTR)
    if names is None:
        raise TypeError(f"{cls.__name__} declares no reflected members")
    return names


def _members(cls: type) -> tuple[str, ...]:
    names = _registry.get(cls)
    if names is not None:
        return names
    return _class_members(cls)


def _accessor(name: str) -> Callable[[Any], Any]:
    def access(instance: Any) -> Any:
        return getattr(instance, name)

    return access


def foreach_members(cls: type, func: Callable[[str, Callable[[Any], Any]], Any]) -> None:
    """Call ``func(name, accessor)`` for each reflected member of ``cls``.

    Members registered with ``reflect_type`` are used if present, otherwise
    those given to ``reflect``. ``accessor(instance)`` returns the member.
    """
    for name in _members(cls):
        func(name, _accessor(name))


def _styled(root: dict[str, Any]) -> str:
    return json.dumps(root, indent=3, separators=(",", " : "), sort_keys=True, ensure_ascii=False) + "\n"


def serialize(obj: Any) -> str:
    """Dump the members declared with ``reflect`` as styled JSON."""
    root = {name: getattr(obj, name) for name in _class_members(type(obj))}
    return _styled(root)


def serialize_with_methods(obj: Any) -> str:
    """Dump reflected members; a method is written as its own name."""
    root: dict[str, Any] = {}

    def visit(name: str, accessor: Callable[[Any], Any]) -> None:
        value = accessor(obj)
        root[name] = name if inspect.ismethod(value) else value

    foreach_members(type(obj), visit)
    return _styled(root)