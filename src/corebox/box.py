from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from corebox.config.settings import Settings, load_profile, load_settings
from corebox.facades.event import Event
from corebox.facades.log import Log
from corebox.facades.protocols import EventBus, Logger, StateStore
from corebox.facades.state import State
from corebox.kit.identity import id as new_id


@dataclass(frozen=True)
class Box:
    """Event bus, logger and state composed into one namespace."""

    event: EventBus
    log: Logger
    state: StateStore
    env: str = 'development'

    def id(self) -> str:
        return new_id()

    @classmethod
    def create(
        cls,
        settings: Optional[Settings] = None,
        profile: Optional[Dict[str, Any]] = None,
        exit_fn: Optional[Callable[[int], Any]] = None,
    ) -> 'Box':
        settings = settings or load_settings()
        profile = profile or {}
        event_opts = profile.get('event') or {}
        log_opts = profile.get('log') or {}
        state_opts = profile.get('state') or {}

        return cls(
            event=Event(max_listeners=event_opts.get('max_listeners', settings.max_listeners)),
            log=Log(
                name=log_opts.get('name'),
                level=log_opts.get('level'),
                history=log_opts.get('history'),
                ts=log_opts.get('ts'),
                backend=log_opts.get('backend'),
                exit_fn=exit_fn,
                settings=settings,
            ),
            state=State(state_opts.get('initial')),
            env=settings.env,
        )

    @classmethod
    def from_profile(
        cls,
        path: str | Path,
        settings: Optional[Settings] = None,
        exit_fn: Optional[Callable[[int], Any]] = None,
    ) -> 'Box':
        return cls.create(settings=settings, profile=load_profile(path), exit_fn=exit_fn)
