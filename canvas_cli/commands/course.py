"`canvas course ...`"

from __future__ import annotations

import argparse

from ..api import CanvasAPI
from ..errors import NotImplementedCommand


def ls(args: argparse.Namespace, api: CanvasAPI) -> None:
    "Prints `(id) name` for each course"
    for course in api.courses():
        print(f"{f'({course.id})':<10} {course.name}")


def info(args: argparse.Namespace, api: CanvasAPI) -> None:
    raise NotImplementedCommand("course info")


def register(subparsers) -> None:
    parser = subparsers.add_parser(
        "course", help="List courses and view course information"
    )
    commands = parser.add_subparsers(dest="action", metavar="<command>", required=True)

    commands.add_parser("ls", help="List courses").set_defaults(handler=ls)

    info_parser = commands.add_parser("info", help="Display information about a course")
    info_parser.add_argument("course", help="A course title or numeric ID")
    info_parser.set_defaults(handler=info)
