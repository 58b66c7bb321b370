from __future__ import annotations

import logging
import pathlib
import re
from typing import Iterable, Union

from .commands import Command, Commands, sort_by_score
from .errors import HistoryError, HistoryFormatError, HistoryWriteError

logger = logging.getLogger(__name__)

PathLike = Union[str, pathlib.Path]

_COUNT = re.compile(r"\+?[0-9]+")


def _parse_line(path: PathLike, line_number: int, raw: str) -> Command:
    line = raw.strip()
    calls, tab, name = line.partition("\t")
    if not _COUNT.fullmatch(calls):
        raise HistoryFormatError(path, line_number, line, "count is not an integer")
    if not tab or not name:
        raise HistoryFormatError(path, line_number, line, "missing name")
    return Command(name, int(calls))


def read_history(path: PathLike) -> Commands:
    """Load the history file, most launched first.

    A missing file is an empty history. Any record whose count does not
    parse raises :class:`HistoryFormatError`; records are never skipped.
    """
    try:
        f = open(path, "r", encoding="utf-8", errors="surrogateescape")
    except FileNotFoundError:
        return []
    except OSError as exc:
        raise HistoryError(f"Unable to read history from {path}: {exc}") from exc

    with f:
        history = [_parse_line(path, n, raw) for n, raw in enumerate(f, start=1)]

    logger.debug("Loaded %d history entries from %s", len(history), path)
    return sort_by_score(history, reverse=True)


def write_history(path: PathLike, commands: Iterable[Command], last_launched: str) -> None:
    """Rewrite the history file, counting one launch of ``last_launched``.

    Commands are written in the order given, not re-ranked. The first
    command named ``last_launched`` is incremented in place; if none
    matches, a new record with a count of 1 is appended at the end.
    """
    def write(f, command: Command):
        f.write(f"{command.calls}\t{command.name}\n")

    try:
        with open(path, "w", encoding="utf-8", errors="surrogateescape", newline="\n") as f:
            for command in commands:
                if last_launched and command.name == last_launched:
                    command.calls += 1
                    last_launched = ""
                write(f, command)

            if last_launched:
                write(f, Command(last_launched, 1))
    except OSError as exc:
        raise HistoryWriteError(path, str(exc)) from exc


class HistoryStore:
    def __init__(self, path: PathLike):
        self.path = pathlib.Path(path)

    def load(self) -> Commands:
        return read_history(self.path)

    def record(self, commands: Iterable[Command], name: str) -> None:
        write_history(self.path, commands, name)
        logger.debug("Recorded launch of %r in %s", name, self.path)
