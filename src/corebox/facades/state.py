from __future__ import annotations

from typing import Any, Mapping, Optional

from corebox.kit.frozen import FrozenDict, freeze
from corebox.kit.merge import merge_overwrite_arrays

_EMPTY = FrozenDict()


class State:
    """Immutable key/value state.

    Every value handed out is frozen; mutating it raises
    :class:`corebox.kit.errors.FrozenError`. New data is merged in with
    list values replacing, not extending, the current ones.
    """

    def __init__(self, initial: Optional[Mapping[str, Any]] = None) -> None:
        self._state: FrozenDict = freeze(merge_overwrite_arrays({}, initial)) if initial else _EMPTY

    def read(self) -> FrozenDict:
        return self._state

    def append(self, partial: Optional[Mapping[str, Any]] = None) -> FrozenDict:
        if partial:
            self._state = freeze(merge_overwrite_arrays(self._state, partial))
        return self._state

    def reset(self) -> 'State':
        self._state = _EMPTY
        return self

    def __repr__(self) -> str:
        return f"State({dict(self._state)!r})"
