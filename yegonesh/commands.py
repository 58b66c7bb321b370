from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List


@dataclass
class Command:
    """A launchable name and how many times it has been launched."""
    name: str
    calls: int = 0

    def __str__(self) -> str:
        return self.name


Commands = List[Command]


def by_score(command: Command) -> int:
    return command.calls


def sort_by_score(commands: Iterable[Command], reverse: bool = False) -> Commands:
    """Order commands by launch count.

    The sort is stable, so commands with equal counts keep their input
    order in both directions.
    """
    return sorted(commands, key=by_score, reverse=reverse)
