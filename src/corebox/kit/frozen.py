from __future__ import annotations

from collections.abc import Mapping
from typing import Any, NoReturn

from corebox.kit.errors import FrozenError


def _refuse(self, *args, **kwargs) -> NoReturn:
    raise FrozenError(f"Cannot modify {type(self).__name__}, object is frozen")


class FrozenDict(dict):
    """A ``dict`` that refuses every mutation.

    Still a real ``dict``, so it compares equal to plain dicts and
    serializes with :mod:`json` unchanged.
    """

    __slots__ = ()

    __setitem__ = _refuse
    __delitem__ = _refuse
    __ior__ = _refuse
    clear = _refuse
    pop = _refuse
    popitem = _refuse
    setdefault = _refuse
    update = _refuse

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise FrozenError(f"Cannot add property {name}, object is frozen")

    def __copy__(self) -> FrozenDict:
        return self

    def __deepcopy__(self, memo: dict) -> FrozenDict:
        return self

    def __reduce__(self):
        return (FrozenDict, (dict(self),))

    def __hash__(self) -> int:  # type: ignore[override]
        return hash(frozenset(self.items()))

    def __repr__(self) -> str:
        return f"FrozenDict({dict.__repr__(self)})"


class FrozenList(list):
    """A ``list`` that refuses every mutation."""

    __slots__ = ()

    __setitem__ = _refuse
    __delitem__ = _refuse
    __iadd__ = _refuse
    __imul__ = _refuse
    append = _refuse
    clear = _refuse
    extend = _refuse
    insert = _refuse
    pop = _refuse
    remove = _refuse
    reverse = _refuse
    sort = _refuse

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise FrozenError(f"Cannot add property {name}, object is frozen")

    def __copy__(self) -> FrozenList:
        return self

    def __deepcopy__(self, memo: dict) -> FrozenList:
        return self

    def __reduce__(self):
        return (FrozenList, (list(self),))

    def __hash__(self) -> int:  # type: ignore[override]
        return hash(tuple(self))

    def __repr__(self) -> str:
        return f"FrozenList({list.__repr__(self)})"


def freeze(obj: Any) -> Any:
    """Recursively freeze mappings and lists; scalars are returned as is."""
    if isinstance(obj, (FrozenDict, FrozenList)):
        return obj
    if isinstance(obj, Mapping):
        return FrozenDict((k, freeze(v)) for k, v in obj.items())
    if isinstance(obj, (list, tuple)):
        return FrozenList(freeze(v) for v in obj)
    return obj


def unfreeze(obj: Any) -> Any:
    """Return a mutable deep copy of a (possibly frozen) structure."""
    if isinstance(obj, Mapping):
        return {k: unfreeze(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [unfreeze(v) for v in obj]
    return obj
