"""Deep merge of plain JSON-like structures.

Two policies are offered:

- :func:`merge` concatenates lists found under the same key,
- :func:`merge_overwrite_arrays` lets the right-hand list replace the left one.

Mappings are merged recursively and scalars on the right win in both cases.
Neither function mutates its inputs, and the result shares no mutable
container with them.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Dict, List

from corebox.kit.frozen import unfreeze

ArrayMerge = Callable[[List[Any], List[Any]], List[Any]]


def _concat_arrays(left: List[Any], right: List[Any]) -> List[Any]:
    return [*left, *right]


def _overwrite_arrays(left: List[Any], right: List[Any]) -> List[Any]:
    return right


def _is_list(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _merge_value(left: Any, right: Any, array_merge: ArrayMerge) -> Any:
    if isinstance(left, Mapping) and isinstance(right, Mapping):
        return _merge_mapping(left, right, array_merge)
    if _is_list(left) and _is_list(right):
        return array_merge(unfreeze(left), unfreeze(right))
    return unfreeze(right)


def _merge_mapping(left: Mapping, right: Mapping, array_merge: ArrayMerge) -> Dict[str, Any]:
    result: Dict[str, Any] = {k: unfreeze(v) for k, v in left.items()}
    for key, value in right.items():
        if key in result:
            result[key] = _merge_value(left[key], value, array_merge)
        else:
            result[key] = unfreeze(value)
    return result


def merge(x: Mapping, y: Mapping) -> Dict[str, Any]:
    """Merge ``y`` into ``x``, concatenating lists.

    >>> merge({'a': 1, 'b': [1, 2]}, {'b': [3], 'c': 2})
    {'a': 1, 'b': [1, 2, 3], 'c': 2}
    """
    return _merge_mapping(x, y, _concat_arrays)


def merge_overwrite_arrays(x: Mapping, y: Mapping) -> Dict[str, Any]:
    """Merge ``y`` into ``x``, lists in ``y`` replace lists in ``x``.

    >>> merge_overwrite_arrays({'a': 1, 'b': [1, 2]}, {'b': [3], 'c': 2})
    {'a': 1, 'b': [3], 'c': 2}
    """
    return _merge_mapping(x, y, _overwrite_arrays)
