"""Leveled log facade.

``Log`` filters by level, keeps a sticky error flag and an optional error
history, and ends the process on ``fatal``. Output is left to a backend:

- ``'logging'`` (default): a stdlib logger writing bunyan-style JSON lines
  to stdout,
- ``'console'``: plain lines through a :class:`rich.console.Console`,
- any object exposing ``debug/info/warn/error`` style methods.
"""
from __future__ import annotations

import json
import logging
import os
import socket
import sys
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Tuple

from pydantic import ValidationError
from rich.console import Console

from corebox.config.settings import LEVELS, LogConfig, Settings, load_settings
from corebox.kit.errors import ConfigError
from corebox.kit.identity import timestamp

logger = logging.getLogger(__name__)

TRACE = 5
logging.addLevelName(TRACE, 'TRACE')

_STDLIB_LEVELS = {
    'trace': TRACE,
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'warn': logging.WARNING,
    'error': logging.ERROR,
    'fatal': logging.CRITICAL,
}

_BUNYAN_LEVELS = {
    TRACE: 10,
    logging.DEBUG: 20,
    logging.INFO: 30,
    logging.WARNING: 40,
    logging.ERROR: 50,
    logging.CRITICAL: 60,
}

# method names tried, in order, on a custom backend
_METHOD_FALLBACKS = {
    'trace': ('trace', 'debug'),
    'debug': ('debug',),
    'info': ('info',),
    'warn': ('warn', 'warning'),
    'error': ('error',),
}


def render(args: Tuple[Any, ...]) -> str:
    return ' '.join(str(a) for a in args)


class JsonLineFormatter(logging.Formatter):
    """One JSON object per record, with bunyan's field names."""

    def __init__(self, label: str) -> None:
        super().__init__()
        self.label = label
        self.hostname = socket.gethostname()

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            'name': self.label,
            'hostname': self.hostname,
            'pid': record.process or os.getpid(),
            'level': _BUNYAN_LEVELS.get(record.levelno, record.levelno),
            'msg': record.getMessage(),
            'time': datetime.fromtimestamp(record.created, tz=timezone.utc)
            .isoformat(timespec='milliseconds')
            .replace('+00:00', 'Z'),
            'v': 0,
        }
        return json.dumps(payload)


class LoggingBackend:
    """Forward facade calls to a stdlib :class:`logging.Logger`."""

    def __init__(self, label: str, stream: Any = None) -> None:
        self.label = label
        # not registered with the logging manager, one per backend
        self.logger = logging.Logger(f"corebox.log.{label or 'root'}", TRACE)
        self.logger.propagate = False
        self.handler = logging.StreamHandler(stream or sys.stdout)
        self.handler.setFormatter(JsonLineFormatter(label))
        self.logger.addHandler(self.handler)

    def _log(self, level: str, args: Tuple[Any, ...]) -> None:
        self.logger.log(_STDLIB_LEVELS[level], render(args))

    def trace(self, *args: Any) -> None:
        self._log('trace', args)

    def debug(self, *args: Any) -> None:
        self._log('debug', args)

    def info(self, *args: Any) -> None:
        self._log('info', args)

    def warn(self, *args: Any) -> None:
        self._log('warn', args)

    def error(self, *args: Any) -> None:
        self._log('error', args)


class ConsoleBackend:
    """Print ``prefix message`` lines through rich."""

    def __init__(self, prefix: Callable[[str], str], console: Optional[Console] = None) -> None:
        self.prefix = prefix
        self.console = console or Console(highlight=False, soft_wrap=True)

    def _print(self, level: str, args: Tuple[Any, ...]) -> None:
        self.console.print(self.prefix(level), *(str(a) for a in args), markup=False)

    def trace(self, *args: Any) -> None:
        self._print('trace', args)

    def debug(self, *args: Any) -> None:
        self._print('debug', args)

    def info(self, *args: Any) -> None:
        self._print('info', args)

    def warn(self, *args: Any) -> None:
        self._print('warn', args)

    def error(self, *args: Any) -> None:
        self._print('error', args)


class Log:
    """Logger facade over a pluggable backend.

    Parameters
    ----------
    name:
        Label appended to the environment name, e.g. ``"development api"``.
    level:
        Minimum level forwarded by ``trace/debug/info/warn``. ``error`` and
        ``fatal`` are always forwarded.
    history:
        Keep the rendered message of every ``error`` call, see :meth:`errors`.
    ts:
        Prefix console lines with a timestamp.
    backend:
        ``'logging'``, ``'console'`` or a backend object.
    exit_fn:
        Called with the exit status by :meth:`fatal`; defaults to ``sys.exit``.
    """

    def __init__(
        self,
        name: Optional[str] = None,
        level: Optional[str] = None,
        history: Optional[bool] = None,
        ts: Any = None,
        backend: Any = None,
        exit_fn: Optional[Callable[[int], Any]] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        settings = settings or load_settings()
        try:
            config = LogConfig(
                name=name or '',
                level=level or settings.log_level,
                history=settings.log_history if history is None else history,
                ts=settings.log_ts if ts is None else ts,
                backend=backend if backend is not None else settings.log_backend,
            )
        except ValidationError as exc:
            raise ConfigError(f"Invalid log configuration: {exc}") from exc

        self.env = settings.env
        self.name = config.name
        self.level = config.level
        self.ts = config.ts
        self.history = config.history
        self.label = f"{self.env} {self.name}" if self.name else self.env

        self._exit_fn = exit_fn or sys.exit
        self._exit_status = settings.exit_status
        self._any_error = False
        self._errors: List[str] = []
        self._halted = False

        self.backend = self._dispatch_backend(config.backend)
        self._methods = {lvl: self._resolve(lvl) for lvl in _METHOD_FALLBACKS}

    def _dispatch_backend(self, backend: Any) -> Any:
        if backend == 'logging':
            return LoggingBackend(self.label)
        if backend == 'console':
            return ConsoleBackend(self.prefix)
        if isinstance(backend, str):
            raise ConfigError(f"Unknown log backend '{backend}', expected 'logging', 'console' or an object")
        return backend

    def _resolve(self, level: str) -> Callable[..., Any]:
        for attr in _METHOD_FALLBACKS[level]:
            method = getattr(self.backend, attr, None)
            if callable(method):
                return method
        raise ConfigError(f"Log backend {type(self.backend).__name__} has no method for level '{level}'")

    def _enabled(self, level: str) -> bool:
        return LEVELS.index(level) >= LEVELS.index(self.level)

    def _forward(self, level: str, args: Tuple[Any, ...]) -> None:
        self._methods[level](*args)

    def _filtered(self, level: str, args: Tuple[Any, ...]) -> 'Log':
        if self._halted:
            logger.debug("Dropped %s call after fatal on '%s'", level, self.label)
        elif self._enabled(level):
            self._forward(level, args)
        return self

    def prefix(self, level: str) -> str:
        parts = [timestamp()] if self.ts else []
        parts.append(level.upper())
        parts.append(self.label)
        return ' '.join(parts)

    def trace(self, *args: Any) -> 'Log':
        return self._filtered('trace', args)

    def debug(self, *args: Any) -> 'Log':
        return self._filtered('debug', args)

    def info(self, *args: Any) -> 'Log':
        return self._filtered('info', args)

    def warn(self, *args: Any) -> 'Log':
        return self._filtered('warn', args)

    warning = warn

    def error(self, *args: Any) -> 'Log':
        if self._halted:
            logger.debug("Dropped error call after fatal on '%s'", self.label)
            return self
        self._any_error = True
        self._forward('error', args)
        if self.history:
            self._errors.append(render(args))
        return self

    def fatal(self, *args: Any) -> None:
        """Log as an error with a ``FATAL`` marker, then exit the process."""
        if self._halted:
            return
        self.error('FATAL', *args)
        self._halted = True
        self._exit_fn(self._exit_status)

    def any_error(self) -> bool:
        return self._any_error

    def errors(self) -> Tuple[str, ...]:
        return tuple(self._errors)
