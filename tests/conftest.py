import asyncio
import os
from pathlib import Path
from typing import AsyncIterable, Iterable, List

import pytest


async def _drain(stream: AsyncIterable[str]) -> List[str]:
    return [item async for item in stream]


def collect(stream_factory) -> List[str]:
    """Run ``stream_factory()`` inside a fresh event loop and gather its output."""
    async def runner():
        return await _drain(stream_factory())
    return asyncio.run(runner())


async def aiter_of(items: Iterable[str]):
    for item in items:
        yield item


@pytest.fixture
def make_bin(tmp_path):
    """Create a directory holding empty files with the given modes."""
    counter = {"n": 0}

    def make(files, mode=0o744) -> Path:
        counter["n"] += 1
        d = tmp_path / f"bin{counter['n']}"
        d.mkdir()
        if isinstance(files, dict):
            items = files.items()
        else:
            items = ((name, mode) for name in files)
        for name, perm in items:
            p = d / name
            p.write_bytes(b"")
            os.chmod(p, perm)
        return d

    return make
