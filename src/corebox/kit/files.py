from __future__ import annotations

import glob
import os
from pathlib import Path
from typing import Callable, List

from corebox.kit.errors import ConfigError

DEFAULT_ENCODING = 'utf-8'
DEFAULT_MODE = 0o755


def load(file_path: str | Path, encoding: str = DEFAULT_ENCODING) -> str:
    with open(file_path, 'r', encoding=encoding) as f:
        return f.read()


def save(file_path: str | Path, content: str, encoding: str = DEFAULT_ENCODING, mode: int = DEFAULT_MODE) -> None:
    """Write ``content`` to ``file_path``, creating it with ``mode`` if new."""
    fd = os.open(file_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
    with open(fd, 'w', encoding=encoding) as f:
        f.write(content)


def init_file(file_path: str | Path, content_fn: Callable[[], str]) -> bool:
    """Create ``file_path`` from ``content_fn()`` unless it already exists.

    Returns ``True`` when the file was written.
    """
    if os.path.exists(file_path):
        return False
    save(file_path, content_fn())
    return True


def mkdir(dir_path: str | Path, mode: int = DEFAULT_MODE) -> None:
    Path(dir_path).mkdir(mode=mode, parents=True, exist_ok=True)


def globify(*selectors: str) -> List[str]:
    """Expand glob selectors in order, ``!pattern`` removes earlier matches."""
    found: List[str] = []
    for selector in selectors:
        if selector.startswith('!'):
            excluded = set(glob.glob(selector[1:], recursive=True))
            found = [p for p in found if p not in excluded]
            continue
        for p in sorted(glob.glob(selector, recursive=True)):
            if p not in found:
                found.append(p)
    return found


def get_path_base(full_path: str | Path, with_extension: bool = False) -> str:
    """File name of ``full_path``, without its extension unless asked."""
    p = Path(full_path)
    return p.name if with_extension else p.stem


def ls(dir_path: str | Path, only_dir: bool = False, only_file: bool = False) -> List[str]:
    """List the full paths of the entries in ``dir_path``.

    Raises
    ------
    ConfigError
        If both ``only_dir`` and ``only_file`` are set.
    """
    if only_dir and only_file:
        raise ConfigError('only_dir and only_file options can not be set together')

    res: List[str] = []
    for name in os.listdir(dir_path):
        file_path = os.path.join(dir_path, name)
        is_dir = os.path.isdir(file_path)
        if only_dir and not is_dir:
            continue
        if only_file and is_dir:
            continue
        res.append(file_path)
    return res
