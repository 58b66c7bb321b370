from __future__ import annotations

import asyncio
import logging
import os
from typing import AsyncIterable, List, Optional, Sequence

from .errors import SelectorError

logger = logging.getLogger(__name__)


class Selector:
    async def select(self, items: AsyncIterable[str]) -> str:
        """Offer ``items`` to the user and return the chosen line, or ''."""
        raise NotImplementedError


class HeadlessSelector(Selector):
    """Selector with a pre-defined response, for scripted runs and tests."""

    def __init__(self, response: Optional[str] = None):
        self.response = response
        self.offered: List[str] = []

    async def select(self, items: AsyncIterable[str]) -> str:
        self.offered = [item async for item in items]
        return (self.response or "").strip()


class ProcessSelector(Selector):
    """Pipe the menu through an external program such as dmenu."""

    def __init__(self, command: str = "dmenu", args: Sequence[str] = ()):
        self.command = command
        self.args = list(args)

    async def select(self, items: AsyncIterable[str]) -> str:
        try:
            proc = await asyncio.create_subprocess_exec(
                self.command,
                *self.args,
                stdin=asyncio.subprocess.PIPE,
                stdout=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise SelectorError(f"Unable to start selector {self.command!r}: {exc}") from exc

        # stdout is read concurrently so a selector that prints before
        # consuming all of stdin cannot block us
        output = asyncio.ensure_future(proc.stdout.read())
        finished = False
        try:
            try:
                async for item in items:
                    # names are filesystem bytes, undecodable ones included
                    proc.stdin.write(os.fsencode(item) + b"\n")
                    await proc.stdin.drain()
            except (BrokenPipeError, ConnectionResetError):
                logger.debug("Selector closed its input early")
            finally:
                proc.stdin.close()

            out = await output
            await proc.wait()
            finished = True
        finally:
            if not finished:
                try:
                    proc.kill()
                except ProcessLookupError:
                    pass
                output.cancel()
                await proc.wait()

        lines = os.fsdecode(out).splitlines()
        choice = lines[0].strip() if lines else ""
        logger.debug("Selector %r returned %r (exit %s)", self.command, choice, proc.returncode)
        return choice
