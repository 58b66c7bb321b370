"""
Launcher configuration
======================
Everything the launcher reads from the process environment is collected
here once, at startup, into an immutable :class:`Config`.
"""
from __future__ import annotations

import os
import pathlib
from dataclasses import dataclass
from typing import List, Mapping, Optional, Sequence, Tuple

APP_ID = "yegonesh"
HISTORY_FILENAME = "history.tsv"
DEFAULT_SELECTOR = "dmenu"


def _home(environ: Mapping[str, str]) -> pathlib.Path:
    home = environ.get("HOME")
    return pathlib.Path(home) if home else pathlib.Path.home()


def resolve_config_dir(environ: Mapping[str, str]) -> pathlib.Path:
    """Return the config directory, creating it owner-only if needed.

    ``$XDG_CONFIG_HOME/yegonesh`` when that variable is set and non-empty,
    otherwise ``$HOME/.local/config/yegonesh``.
    """
    xdg = environ.get("XDG_CONFIG_HOME")
    if xdg:
        config_dir = pathlib.Path(xdg) / APP_ID
    else:
        config_dir = _home(environ) / ".local" / "config" / APP_ID
    config_dir.mkdir(mode=0o700, parents=True, exist_ok=True)
    return config_dir


def selector_args(argv: Sequence[str]) -> List[str]:
    """Arguments following the first ``--``, passed through to the selector."""
    for i, val in enumerate(argv):
        if val == "--":
            return list(argv[i + 1:])
    return []


@dataclass(frozen=True)
class Config:
    search_path: str
    home: pathlib.Path
    config_dir: pathlib.Path
    selector: str = DEFAULT_SELECTOR
    selector_args: Tuple[str, ...] = ()

    @property
    def history_path(self) -> pathlib.Path:
        return self.config_dir / HISTORY_FILENAME

    @classmethod
    def from_environ(
        cls,
        environ: Mapping[str, str],
        argv: Sequence[str] = (),
        selector: Optional[str] = None,
    ) -> "Config":
        return cls(
            search_path=environ.get("PATH", os.defpath),
            home=_home(environ),
            config_dir=resolve_config_dir(environ),
            selector=selector or DEFAULT_SELECTOR,
            selector_args=tuple(selector_args(argv)),
        )
