"`canvas assignment ...`"

from __future__ import annotations

import argparse

from ..api import CanvasAPI
from ..errors import NotImplementedCommand
from ..helpers import format_datetime


def ls(args: argparse.Namespace, api: CanvasAPI) -> None:
    "Prints each assignment name, with its due date when it has one"
    course_id = api.find_course_id(args.course)
    for assignment in api.assignments(course_id):
        if assignment.due_at:
            print(f"{assignment.name} (due {format_datetime(assignment.due_at)})")
        else:
            print(assignment.name)


def info(args: argparse.Namespace, api: CanvasAPI) -> None:
    raise NotImplementedCommand("assignment info")


def submit(args: argparse.Namespace, api: CanvasAPI) -> None:
    raise NotImplementedCommand("assignment submit")


def register(subparsers) -> None:
    parser = subparsers.add_parser(
        "assignment", help="List, inspect, or submit assignments"
    )
    commands = parser.add_subparsers(dest="action", metavar="<command>", required=True)

    ls_parser = commands.add_parser("ls", help="List assignments")
    ls_parser.add_argument("course", help="A course title or numeric ID")
    ls_parser.set_defaults(handler=ls)

    info_parser = commands.add_parser(
        "info", help="Display information about an assignment"
    )
    info_parser.add_argument("course", help="A course title or numeric ID")
    info_parser.add_argument("id", help="An assignment ID")
    info_parser.set_defaults(handler=info)

    submit_parser = commands.add_parser("submit", help="Submit files for an assignment")
    submit_parser.add_argument("course", help="A course title or numeric ID")
    submit_parser.add_argument("id", help="An assignment ID")
    submit_parser.add_argument("file", nargs="+", help="The file to submit")
    submit_parser.set_defaults(handler=submit)
