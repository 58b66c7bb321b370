from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

EXIT_CODE_OK = 0
EXIT_CODE_FAILURE = 1
# 2 is left to argparse usage errors
EXIT_CODE_CORRUPT_HISTORY = 3
EXIT_CODE_LAUNCH_FAILED = 4
EXIT_CODE_SELECTOR_FAILED = 5


class LauncherError(Exception):
    """
    Base class for conditions that end a launcher invocation.

    Components raise these and never exit the process themselves; the
    command-line entry point turns them into an exit code.
    """
    exit_code = EXIT_CODE_FAILURE

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def get_exit_code(self) -> int:
        return self.exit_code


class HistoryError(LauncherError):
    pass


class HistoryFormatError(HistoryError):
    """
    A history record could not be parsed.

    Args:
        path: The history file being read.
        line_number: 1-based line of the bad record.
        line: The offending text.
    """
    exit_code = EXIT_CODE_CORRUPT_HISTORY

    def __init__(self, path: Union[str, Path], line_number: int, line: str,
                 reason: Optional[str] = None):
        self.path = Path(path)
        self.line_number = line_number
        self.line = line
        detail = f": {reason}" if reason else ""
        super().__init__(
            f"Corrupt history record at {self.path}:{line_number} {line!r}{detail}"
        )


class HistoryWriteError(HistoryError):
    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        super().__init__(f"Unable to write history to {self.path}: {reason}")


class LaunchError(LauncherError):
    exit_code = EXIT_CODE_LAUNCH_FAILED


class SelectorError(LauncherError):
    exit_code = EXIT_CODE_SELECTOR_FAILED
