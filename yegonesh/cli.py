from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from typing import List, Mapping, Optional, Sequence

from rich.console import Console
from rich.logging import RichHandler

from . import __version__
from .app import Launcher
from .config import DEFAULT_SELECTOR, Config
from .errors import EXIT_CODE_FAILURE, EXIT_CODE_OK, LauncherError
from .messages import err, info

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yegonesh",
        description="Launch programs from $PATH, most used first.",
        epilog="Arguments after '--' are passed to the selector.",
    )
    parser.add_argument("--selector", default=DEFAULT_SELECTOR,
                        help="Program that presents the menu (default: %(default)s)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log discovery and launch details")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def own_args(argv: Sequence[str]) -> List[str]:
    """Arguments meant for the launcher itself, i.e. those before ``--``."""
    argv = list(argv)
    if "--" in argv:
        return argv[:argv.index("--")]
    return argv


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def main(argv: Optional[Sequence[str]] = None, environ: Optional[Mapping[str, str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    environ = os.environ if environ is None else environ

    args = build_parser().parse_args(own_args(argv))
    setup_logging(args.verbose)

    try:
        config = Config.from_environ(environ, argv, selector=args.selector)
        choice = asyncio.run(Launcher(config).run())
    except LauncherError as exc:
        logger.debug("Aborting", exc_info=True)
        err(exc.message)
        return exc.get_exit_code()
    except OSError as exc:
        # config directory could not be created
        err(str(exc))
        return EXIT_CODE_FAILURE

    if choice and args.verbose:
        info(f"Launched {choice}")
    return EXIT_CODE_OK
