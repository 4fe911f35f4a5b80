"""Interfaces of the facades composed by :class:`corebox.box.Box`."""
from __future__ import annotations

from typing import Any, Callable, Mapping, Optional, Protocol, Tuple

Handler = Callable[..., Any]


class EventBus(Protocol):
    def emit(self, name: str, *args: Any) -> 'EventBus': ...
    def on(self, name: str, handler: Handler) -> 'EventBus': ...
    def off(self, name: str, handler: Handler) -> 'EventBus': ...
    def once(self, name: str, handler: Handler) -> 'EventBus': ...
    def listeners(self, name: str) -> Tuple[Handler, ...]: ...


class Logger(Protocol):
    def trace(self, *args: Any) -> 'Logger': ...
    def debug(self, *args: Any) -> 'Logger': ...
    def info(self, *args: Any) -> 'Logger': ...
    def warn(self, *args: Any) -> 'Logger': ...
    def error(self, *args: Any) -> 'Logger': ...
    def fatal(self, *args: Any) -> None: ...
    def any_error(self) -> bool: ...
    def errors(self) -> Tuple[str, ...]: ...


class StateStore(Protocol):
    def read(self) -> Mapping[str, Any]: ...
    def append(self, partial: Optional[Mapping[str, Any]] = None) -> Mapping[str, Any]: ...
    def reset(self) -> 'StateStore': ...


__all__ = ['EventBus', 'Handler', 'Logger', 'StateStore']
