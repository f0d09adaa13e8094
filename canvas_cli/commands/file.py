"`canvas file ...`"

from __future__ import annotations

import argparse

from ..api import CanvasAPI
from ..errors import NotImplementedCommand


def ls(args: argparse.Namespace, api: CanvasAPI) -> None:
    "Prints the sub-folders (with a trailing `/`) and then the files of a folder"
    course_id = api.find_course_id(args.course)
    folder = api.folder_for_path(course_id, args.path)
    files, folders = api.files_and_folders(folder)
    for sub_folder in folders:
        print(f"{sub_folder.name}/")
    for file in files:
        print(file.display_name)


def info(args: argparse.Namespace, api: CanvasAPI) -> None:
    raise NotImplementedCommand("file info")


def download(args: argparse.Namespace, api: CanvasAPI) -> None:
    raise NotImplementedCommand("file download")


def register(subparsers) -> None:
    parser = subparsers.add_parser("file", help="List, inspect, or download files")
    commands = parser.add_subparsers(dest="action", metavar="<command>", required=True)

    ls_parser = commands.add_parser("ls", help="List files")
    ls_parser.add_argument("course", help="A course title or numeric ID")
    ls_parser.add_argument(
        "path", nargs="?", default="/", help="The directory to examine. Defaults to /"
    )
    ls_parser.set_defaults(handler=ls)

    info_parser = commands.add_parser("info", help="Display information about a file")
    info_parser.add_argument("course", help="A course title or numeric ID")
    info_parser.add_argument("path", help="The file or directory to examine")
    info_parser.set_defaults(handler=info)

    download_parser = commands.add_parser("download", help="Download a file")
    download_parser.add_argument("course", help="A course title or numeric ID")
    download_parser.add_argument("path", help="The file or directory to download")
    download_parser.set_defaults(handler=download)
