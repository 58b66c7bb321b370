from __future__ import annotations

from typing import AsyncIterable, AsyncIterator, Iterable, Set

from .commands import Command


async def history_name_stream(commands: Iterable[Command]) -> AsyncIterator[str]:
    for command in commands:
        yield command.name


async def multiplex_menu_streams(
    ranked: AsyncIterable[str], discovered: AsyncIterable[str]
) -> AsyncIterator[str]:
    """Merge ranked history names with discovered names for the menu.

    ``ranked`` is drained completely before ``discovered`` is touched, so
    every history entry comes first. Discovered names already seen in the
    history are dropped; repeats within ``discovered`` are kept.
    """
    seen: Set[str] = set()

    async for name in ranked:
        seen.add(name)
        yield name

    async for name in discovered:
        if name not in seen:
            yield name
