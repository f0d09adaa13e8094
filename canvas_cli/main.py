"Main functions to run the program"

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from . import __version__
from .api import CanvasAPI
from .commands import assignment, config, course, file
from .config import load_config
from .errors import CanvasError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    "Parser of the `canvas` program"
    parser = argparse.ArgumentParser(
        prog="canvas", description="An app for interacting with Canvas"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log the requests made to Canvas"
    )
    parser.add_argument(
        "--config", type=Path, default=None, help="Path of the config file"
    )
    subparsers = parser.add_subparsers(dest="command", metavar="<command>")
    for module in (course, file, assignment, config):
        module.register(subparsers)
    return parser


def run(args: argparse.Namespace) -> None:
    "Runs the handler selected by the parser"
    if not getattr(args, "needs_api", True):
        args.handler(args)
        return

    with CanvasAPI.from_config(load_config(args.config)) as api:
        logger.debug("Using %r", api)
        args.handler(args, api)


def main(argv: Optional[Sequence[str]] = None) -> None:
    "Entry point of the `canvas` program"
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help(sys.stderr)
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        run(args)
    except CanvasError as error:
        print(error, file=sys.stderr)
        sys.exit(1)
    sys.exit(0)
