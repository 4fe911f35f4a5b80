from collections.abc import Mapping
from numbers import Number
from typing import Any


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_number(value: Any) -> bool:
    # bool is an int subclass but not a number here
    return isinstance(value, Number) and not isinstance(value, bool)


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_object(value: Any) -> bool:
    """True for any container value: mappings, lists and tuples."""
    return isinstance(value, (Mapping, list, tuple))


def is_object_strong(value: Any) -> bool:
    """True only for mappings."""
    return isinstance(value, Mapping)
