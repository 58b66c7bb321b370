from __future__ import annotations

import logging
import shutil
import subprocess
from typing import List, Optional, Tuple

from .config import Config
from .errors import LaunchError

logger = logging.getLogger(__name__)


def split_command(line: str) -> Tuple[str, Optional[str]]:
    """Split a menu selection into the program name and the raw remainder.

    The remainder is handed over as a single argument, it is not tokenized.
    """
    parts = line.strip().split(None, 1)
    if not parts:
        raise LaunchError("Nothing to launch")
    name = parts[0]
    remainder = parts[1] if len(parts) > 1 else None
    return name, remainder


def build_argv(line: str, search_path: str) -> List[str]:
    name, remainder = split_command(line)
    path = shutil.which(name, path=search_path)
    if path is None:
        raise LaunchError(f"{name}: executable not found in search path")
    argv = [path]
    if remainder is not None:
        argv.append(remainder)
    return argv


def launch_command(line: str, config: Config) -> subprocess.Popen:
    """Start the selected program in the home directory and return at once."""
    argv = build_argv(line, config.search_path)
    logger.debug("Launching %s in %s", argv, config.home)
    try:
        return subprocess.Popen(argv, cwd=config.home, start_new_session=True)
    except OSError as exc:
        raise LaunchError(f"Unable to launch {argv[0]}: {exc}") from exc
