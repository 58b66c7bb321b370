from rich.console import Console
from .theme import GRAY

_console = Console(stderr=True)
def info(t): _console.print(f"[{GRAY}]{t}[/{GRAY}]", highlight=False)
def err(t):  _console.print(f"[red]Error: {t}[/red]", highlight=False)
