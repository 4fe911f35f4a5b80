import uuid
from datetime import datetime, timezone
from typing import Optional


def id() -> str:  # noqa: A001 - public helper name
    """Random UUID v4 as a 36 character string."""
    return str(uuid.uuid4())


def timestamp() -> str:
    """Current UTC time, e.g. ``'2019-06-10T12:08:39.643Z'``."""
    now = datetime.now(tz=timezone.utc)
    return now.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def timestamp_compact(ts: Optional[str] = None) -> str:
    """``'2019-06-10T12:08:39.643Z'`` -> ``'20190610_120839_643'``.

    A new timestamp is generated when ``ts`` is not given.
    """
    if ts is None:
        ts = timestamp()
    return (
        ts.replace('-', '', 2)
        .replace('T', '_', 1)
        .replace(':', '', 2)
        .replace('.', '_', 1)
        .replace('Z', '', 1)
    )
