"`canvas config`"

from __future__ import annotations

import argparse

from ..config import ConfigEditor


def edit(args: argparse.Namespace) -> None:
    ConfigEditor(args.config).run()


def register(subparsers) -> None:
    parser = subparsers.add_parser("config", help="Edit the user config")
    parser.set_defaults(handler=edit, needs_api=False)
