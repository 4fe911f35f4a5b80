from __future__ import annotations

import json
from collections.abc import Mapping
from functools import cmp_to_key
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence

from corebox.kit.merge import merge

Comparator = Callable[[Any, Any], int]


def clone(obj: Mapping, keys: Optional[Iterable[str]] = None) -> Dict[str, Any]:
    """Deep copy of ``obj``, or of the subset named by ``keys``.

    Keys missing from ``obj`` are copied as ``None``.
    """
    if keys is None:
        source: Mapping = obj
    else:
        source = {key: obj.get(key) for key in keys}
    return merge({}, source)


def mapobj(obj: Mapping, fn: Callable[[Any], Any]) -> Dict[str, Any]:
    """Map ``fn`` over the values of ``obj`` into a new dict."""
    return {key: fn(value) for key, value in obj.items()}


def _values(obj_or_seq: Mapping | Sequence) -> Iterable[Any]:
    if isinstance(obj_or_seq, Mapping):
        return obj_or_seq.values()
    return obj_or_seq


def some(obj_or_seq: Mapping | Sequence, fn: Callable[[Any], Any]) -> bool:
    """True if ``fn`` holds for at least one value of a mapping or sequence."""
    return any(fn(value) for value in _values(obj_or_seq))


def every(obj_or_seq: Mapping | Sequence, fn: Callable[[Any], Any]) -> bool:
    """True if ``fn`` holds for every value; an empty input is ``True``."""
    return all(fn(value) for value in _values(obj_or_seq))


def sort_asc_fn(a: Any, b: Any) -> int:
    return 1 if a > b else -1


def sort_desc_fn(a: Any, b: Any) -> int:
    return -1 if a > b else 1


def sort(seq: Iterable[Any], fn: Comparator = sort_asc_fn) -> List[Any]:
    """Return a sorted copy of ``seq`` using a ``(a, b) -> int`` comparator.

    The input is left untouched.
    """
    return sorted(seq, key=cmp_to_key(fn))


def jsonify(obj: Any, human: bool = False) -> str:
    """Serialize ``obj`` to JSON, indented by 4 when ``human`` is set."""
    return json.dumps(obj, indent=4 if human else None)
