from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Any, DefaultDict, List, Optional, Set, Tuple

from corebox.config.settings import load_settings
from corebox.facades.protocols import Handler
from corebox.kit.errors import ConfigError

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class _Subscription:
    handler: Handler
    once: bool = False


class Event:
    """Synchronous publish/subscribe facade.

    Handlers run in registration order, on the caller's stack. A handler
    that emits further events has them dispatched before the outer
    ``emit`` resumes.

    ``max_listeners`` is advisory: going past it logs a warning once per
    event name and the registration still succeeds. ``0`` disables it.
    """

    def __init__(self, max_listeners: Optional[int] = None) -> None:
        if max_listeners is None:
            max_listeners = load_settings().max_listeners
        if isinstance(max_listeners, bool) or not isinstance(max_listeners, int) or max_listeners < 0:
            raise ConfigError(f"max_listeners must be a non-negative integer, got {max_listeners!r}")
        self.max_listeners = max_listeners
        self._subscriptions: DefaultDict[str, List[_Subscription]] = defaultdict(list)
        self._warned: Set[str] = set()

    def _add(self, name: str, handler: Handler, once: bool) -> 'Event':
        if not callable(handler):
            raise TypeError(f"handler for '{name}' must be callable")
        subs = self._subscriptions[name]
        subs.append(_Subscription(handler, once))
        if self.max_listeners > 0 and len(subs) > self.max_listeners and name not in self._warned:
            self._warned.add(name)
            logger.warning(
                "Possible listener leak: %d listeners added for '%s' (max_listeners=%d)",
                len(subs),
                name,
                self.max_listeners,
            )
        return self

    def on(self, name: str, handler: Handler) -> 'Event':
        return self._add(name, handler, once=False)

    def once(self, name: str, handler: Handler) -> 'Event':
        return self._add(name, handler, once=True)

    def off(self, name: str, handler: Handler) -> 'Event':
        subs = self._subscriptions.get(name)
        if not subs:
            return self
        # latest registration goes first
        for i in range(len(subs) - 1, -1, -1):
            if subs[i].handler is handler:
                del subs[i]
                break
        if not subs:
            del self._subscriptions[name]
        return self

    def emit(self, name: str, *args: Any) -> 'Event':
        for sub in list(self._subscriptions.get(name, ())):
            if sub.once:
                live = self._subscriptions.get(name)
                if not live or sub not in live:
                    continue
                live.remove(sub)
                if not live:
                    del self._subscriptions[name]
            sub.handler(*args)
        return self

    def listeners(self, name: str) -> Tuple[Handler, ...]:
        return tuple(sub.handler for sub in self._subscriptions.get(name, ()))
