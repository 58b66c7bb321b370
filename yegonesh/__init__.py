__version__ = "1.0.0"

from .commands import Command, Commands, by_score, sort_by_score
from .history import HistoryStore, read_history, write_history
from .scanner import fetch_executables, scan_path
from .streams import history_name_stream, multiplex_menu_streams

__all__ = [
    "Command", "Commands", "by_score", "sort_by_score",
    "HistoryStore", "read_history", "write_history",
    "fetch_executables", "scan_path",
    "history_name_stream", "multiplex_menu_streams",
    "__version__",
]
