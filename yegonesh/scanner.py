"""Discovery of executables along a search path."""
from __future__ import annotations

import asyncio
import itertools
import logging
import os
import stat
from typing import AsyncIterator, List

logger = logging.getLogger(__name__)

EXECUTABLE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def _list_executables(directory: str) -> List[str]:
    names: List[str] = []
    try:
        with os.scandir(directory) as it:
            for entry in it:
                try:
                    mode = entry.stat(follow_symlinks=False).st_mode
                except OSError:
                    # removed between listing and stat
                    continue
                if mode & EXECUTABLE_BITS:
                    names.append(entry.name)
    except OSError as exc:
        logger.debug("Skipping unreadable directory %r: %s", directory, exc)
        return []
    return names


async def fetch_executables(directory: str) -> AsyncIterator[str]:
    """Yield the names of executable entries directly inside ``directory``.

    Entries come out in directory listing order. A directory that is
    missing or unreadable yields nothing.
    """
    names = await asyncio.to_thread(_list_executables, directory)
    for name in names:
        yield name


async def _collect(directory: str) -> List[str]:
    found = [name async for name in fetch_executables(directory)]
    logger.debug("%s: %d executables", directory or "''", len(found))
    return found


async def _emit(workers: "asyncio.Future[List[List[str]]]") -> AsyncIterator[str]:
    buffers = await workers
    commands = sorted(itertools.chain.from_iterable(buffers), key=os.fsencode)
    logger.debug("Discovered %d executables", len(commands))
    for command in commands:
        yield command


def scan_path(search_path: str) -> AsyncIterator[str]:
    """Scan every directory of a colon-separated search path concurrently.

    One worker task per directory is started right away, each filling its
    own list. Nothing is yielded until every worker has finished; the
    combined names are then sorted byte-wise. Names present in several
    directories are yielded once per directory.

    Must be called while an event loop is running.
    """
    directories = search_path.split(":")
    tasks = [asyncio.create_task(_collect(d)) for d in directories]
    return _emit(asyncio.gather(*tasks))
