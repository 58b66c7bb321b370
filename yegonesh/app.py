from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Optional

from .config import Config
from .history import HistoryStore
from .launch import launch_command
from .scanner import scan_path
from .selection import ProcessSelector, Selector
from .streams import history_name_stream, multiplex_menu_streams

logger = logging.getLogger(__name__)

Spawner = Callable[[str, Config], Any]


class Launcher:
    """One launcher invocation: discover, rank, select, launch, record."""

    def __init__(self, config: Config, selector: Optional[Selector] = None,
                 spawn: Spawner = launch_command):
        self.config = config
        self.selector = selector or ProcessSelector(config.selector, config.selector_args)
        self.spawn = spawn
        self.history = HistoryStore(config.history_path)

    async def run(self) -> str:
        """Run the launcher and return the selected line ('' if cancelled)."""
        executables = scan_path(self.config.search_path)
        # the scan workers are already running; load history alongside them
        history = await asyncio.to_thread(self.history.load)
        logger.debug("%d ranked entries", len(history))

        choice = await self.selector.select(
            multiplex_menu_streams(history_name_stream(history), executables)
        )
        if not choice:
            logger.debug("Selection cancelled")
            return ""

        self.spawn(choice, self.config)
        self.history.record(history, choice)
        return choice
