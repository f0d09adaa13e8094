from unittest.mock import MagicMock

import pytest

from canvas_cli.api import CanvasAPI

API_URL = "https://canvas.example.com/api/v1"
TOKEN = "abc"


def json_response(data, status_code=200):
    "Stub of a `requests.Response`"
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    response.json.return_value = data
    return response


def course_json(id, name, **fields):
    data = {
        "id": id,
        "uuid": f"uuid-{id}",
        "name": name,
        "course_code": f"C{id}",
        "workflow_state": "available",
        "enrollment_term_id": 1,
    }
    data.update(fields)
    return data


def folder_json(id, name, full_name=None):
    return {
        "id": id,
        "name": name,
        "full_name": full_name or f"course files/{name}",
        "files_url": f"{API_URL}/folders/{id}/files",
        "folders_url": f"{API_URL}/folders/{id}/folders",
    }


class FakeSession:
    "Answers each GET with the response (or raises the exception) mapped to its url"

    def __init__(self, routes=None):
        self.headers = {}
        self.routes = dict(routes or {})
        self.calls = []
        self.closed = False

    def get(self, url):
        self.calls.append(url)
        answer = self.routes[url]
        if isinstance(answer, Exception):
            raise answer
        return answer

    def close(self):
        self.closed = True


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def api(session):
    return CanvasAPI(API_URL, TOKEN, session=session)
