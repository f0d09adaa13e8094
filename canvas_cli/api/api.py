"Simple and typed CanvasAPI"

from __future__ import annotations

import logging
import re
from typing import Any, List, Optional, Tuple

import requests
from typing_extensions import Protocol

from ..errors import (
    AmbiguousError,
    DecodeError,
    HttpStatusError,
    NoMatchError,
    NotFoundError,
    TransportError,
)
from .types import Assignment, Course, Decoder, File, Folder, T, list_of

logger = logging.getLogger(__name__)

COURSES_PER_PAGE = 32
MAX_COURSE_ID = 2**64 - 1
NUMERIC_TOKEN = re.compile(r"\+?[0-9]+")


class Credentials(Protocol):
    "Where the API url and the access token come from"

    def api_url(self) -> str:
        ...

    def key(self) -> str:
        ...


class CanvasAPI:
    "A simple interface for the CanvasAPI"

    def __init__(
        self,
        api_url: str,
        access_token: str,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._api_url = api_url.rstrip("/")
        self._session = session or requests.session()
        self._session.headers.update({"Authorization": f"Bearer {access_token}"})

    @classmethod
    def from_config(cls, config: Credentials, **kwargs: Any) -> CanvasAPI:
        "Builds the client from anything with `api_url()` and `key()`"
        return cls(config.api_url(), config.key(), **kwargs)

    def __repr__(self):
        return f"{type(self).__name__}({self._api_url})"

    def __enter__(self) -> CanvasAPI:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._session.close()

    def fetch(self, url: str, decoder: Decoder[T]) -> T:
        "Makes a GET request to Canvas and decodes the JSON body with `decoder`"
        logger.debug("GET %s", url)
        try:
            response = self._session.get(url)
        except requests.RequestException as error:
            logger.debug("GET %s failed: %s", url, error)
            raise TransportError(str(error)) from error

        if not 200 <= response.status_code < 300:
            # The body of an error response is never decoded
            logger.debug("GET %s returned %s", url, response.status_code)
            raise HttpStatusError(url, response.status_code)

        try:
            return decoder(response.json())
        except (KeyError, TypeError, ValueError) as error:
            # JSONDecodeError is a ValueError
            logger.debug("GET %s has an unexpected body: %r", url, error)
            raise DecodeError(_describe(error)) from error

    def courses(self) -> List[Course]:
        "Courses of the user (first page only)"
        url = f"{self._api_url}/courses?per_page={COURSES_PER_PAGE}"
        return self.fetch(url, list_of(Course))

    def course_root_folder(self, course_id: int) -> Folder:
        "Root folder of a course"
        url = f"{self._api_url}/courses/{course_id}/folders/root/"
        return self.fetch(url, Folder.from_json)

    def course_folder(self, course_id: int, path: str) -> Folder:
        "Folder of a course at `path`"
        url = (
            f"{self._api_url}/courses/{course_id}/folders/by_path/{path.lstrip('/')}"
        )
        # Canvas answers with every folder from the root down to `path`
        folders = self.fetch(url, list_of(Folder))
        if not folders:
            raise NotFoundError(path)
        return folders[-1]

    def folder_for_path(self, course_id: int, path: Optional[str] = None) -> Folder:
        "Root folder for an empty path or `/`, the folder at `path` otherwise"
        if path in (None, "", "/"):
            return self.course_root_folder(course_id)
        return self.course_folder(course_id, path)

    def files_and_folders(self, folder: Folder) -> Tuple[List[File], List[Folder]]:
        "Files and sub-folders of a folder"
        files = self.fetch(folder.files_url, list_of(File))
        folders = self.fetch(folder.folders_url, list_of(Folder))
        return files, folders

    def assignments(self, course_id: int) -> List[Assignment]:
        "Assignments of a course"
        url = f"{self._api_url}/courses/{course_id}/assignments/"
        return self.fetch(url, list_of(Assignment))

    def find_course_id(self, token: str) -> int:
        """
        Course id from a numeric id or from the beginning of the course name.

        Numeric tokens are returned as they are, without checking that the
        course exists. Names are matched case-sensitively and a token that is
        the prefix of more than one name is an error, even if one of them is
        an exact match.
        """
        course_id = _course_id(token)
        if course_id is not None:
            return course_id

        matches = [course for course in self.courses() if course.name.startswith(token)]
        logger.debug("%d course(s) start with %r", len(matches), token)
        if not matches:
            raise NoMatchError(token)
        if len(matches) > 1:
            raise AmbiguousError(token)
        return matches[0].id


def _describe(error: Exception) -> str:
    if isinstance(error, KeyError):
        return f"missing field {error}"
    return str(error)


def _course_id(token: str) -> Optional[int]:
    "Id written in the token (`42` or `+42`), `None` if it isn't an unsigned 64-bit integer"
    if not NUMERIC_TOKEN.fullmatch(token):
        return None
    value = int(token)
    if value > MAX_COURSE_ID:
        return None
    return value
