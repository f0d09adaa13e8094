import pytest

from canvas_cli.api import Folder
from canvas_cli.errors import HttpStatusError, NotFoundError

from .conftest import API_URL, folder_json, json_response


def test_courses_url(api, session):
    session.routes[f"{API_URL}/courses?per_page=32"] = json_response([])
    assert api.courses() == []


def test_root_folder(api, session):
    session.routes[f"{API_URL}/courses/7/folders/root/"] = json_response(
        folder_json(1, "course files", "course files")
    )
    folder = api.course_root_folder(7)
    assert isinstance(folder, Folder)
    assert folder.full_name == "course files"


def test_folder_by_path_is_the_last_element(api, session):
    session.routes[f"{API_URL}/courses/7/folders/by_path/notes/week1"] = json_response(
        [
            folder_json(1, "course files", "course files"),
            folder_json(2, "notes"),
            folder_json(3, "week1", "course files/notes/week1"),
        ]
    )
    folder = api.course_folder(7, "/notes/week1")
    assert folder.id == 3
    assert folder.name == "week1"


def test_folder_by_path_empty_result(api, session):
    session.routes[f"{API_URL}/courses/7/folders/by_path/no/such/path"] = json_response([])
    with pytest.raises(NotFoundError) as info:
        api.course_folder(7, "/no/such/path")
    assert info.value.path == "/no/such/path"
    assert str(info.value) == "No files at path /no/such/path"


@pytest.mark.parametrize("path", [None, "", "/"])
def test_folder_for_root_paths(api, session, path):
    session.routes[f"{API_URL}/courses/7/folders/root/"] = json_response(
        folder_json(1, "course files", "course files")
    )
    assert api.folder_for_path(7, path).id == 1


def test_folder_for_other_paths(api, session):
    session.routes[f"{API_URL}/courses/7/folders/by_path/notes"] = json_response(
        [folder_json(1, "course files"), folder_json(2, "notes")]
    )
    assert api.folder_for_path(7, "notes").id == 2


def test_files_and_folders(api, session):
    folder = Folder.from_json(folder_json(5, "notes"))
    session.routes[folder.files_url] = json_response(
        [{"id": 10, "display_name": "a.pdf", "url": "https://x/a.pdf"}]
    )
    session.routes[folder.folders_url] = json_response([folder_json(6, "week1")])

    files, folders = api.files_and_folders(folder)

    assert [f.display_name for f in files] == ["a.pdf"]
    assert [f.name for f in folders] == ["week1"]
    assert sorted(session.calls) == sorted([folder.files_url, folder.folders_url])


def test_files_and_folders_needs_both(api, session):
    folder = Folder.from_json(folder_json(5, "notes"))
    session.routes[folder.files_url] = json_response([])
    session.routes[folder.folders_url] = json_response(None, status_code=403)
    with pytest.raises(HttpStatusError):
        api.files_and_folders(folder)


def test_assignments(api, session):
    session.routes[f"{API_URL}/courses/7/assignments/"] = json_response(
        [
            {"id": 1, "name": "Essay", "due_at": "2018-03-01T06:59:59Z"},
            {"id": 2, "name": "Quiz", "description": "<p>Read ch. 2</p>", "due_at": None},
        ]
    )
    essay, quiz = api.assignments(7)
    assert essay.due_at.year == 2018
    assert essay.description is None
    assert quiz.due_at is None
    assert quiz.description == "<p>Read ch. 2</p>"
