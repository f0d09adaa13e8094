"Typed records of the Canvas REST API"

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, List, Mapping, Optional, Type, TypeVar

from ..helpers import (
    optional_bool,
    optional_datetime,
    optional_str,
    required_int,
    required_str,
)

T = TypeVar("T")
StrMapping = Mapping[str, Any]


def _mapping(data: Any, name: str) -> StrMapping:
    if not isinstance(data, Mapping):
        raise TypeError(f"{name} should be a JSON object, got {type(data).__name__}")
    return data


class WorkflowState(enum.Enum):
    "Lifecycle state of a course"
    UNPUBLISHED = "unpublished"
    AVAILABLE = "available"
    COMPLETED = "completed"
    DELETED = "deleted"


# https://canvas.instructure.com/doc/api/courses.html
@dataclass(frozen=True)
class Course:
    id: int
    uuid: str
    name: str
    course_code: str
    workflow_state: WorkflowState
    enrollment_term_id: int
    start_at: Optional[datetime] = None
    end_at: Optional[datetime] = None
    is_public: Optional[bool] = None
    public_description: Optional[str] = None

    @classmethod
    def from_json(cls, data: Any) -> Course:
        data = _mapping(data, cls.__name__)
        return cls(
            id=required_int(data, "id"),
            uuid=required_str(data, "uuid"),
            name=required_str(data, "name"),
            course_code=required_str(data, "course_code"),
            workflow_state=WorkflowState(required_str(data, "workflow_state")),
            enrollment_term_id=required_int(data, "enrollment_term_id"),
            start_at=optional_datetime(data, "start_at"),
            end_at=optional_datetime(data, "end_at"),
            is_public=optional_bool(data, "is_public"),
            public_description=optional_str(data, "public_description"),
        )


# https://canvas.instructure.com/doc/api/files.html
@dataclass(frozen=True)
class Folder:
    id: int
    folders_url: str
    files_url: str
    name: str
    full_name: str

    @classmethod
    def from_json(cls, data: Any) -> Folder:
        data = _mapping(data, cls.__name__)
        return cls(
            id=required_int(data, "id"),
            folders_url=required_str(data, "folders_url"),
            files_url=required_str(data, "files_url"),
            name=required_str(data, "name"),
            full_name=required_str(data, "full_name"),
        )


# https://canvas.instructure.com/doc/api/files.html
@dataclass(frozen=True)
class File:
    id: int
    display_name: str
    url: str

    @classmethod
    def from_json(cls, data: Any) -> File:
        data = _mapping(data, cls.__name__)
        return cls(
            id=required_int(data, "id"),
            display_name=required_str(data, "display_name"),
            url=required_str(data, "url"),
        )


# https://canvas.instructure.com/doc/api/assignments.html
@dataclass(frozen=True)
class Assignment:
    id: int
    name: str
    description: Optional[str] = None
    due_at: Optional[datetime] = None

    @classmethod
    def from_json(cls, data: Any) -> Assignment:
        data = _mapping(data, cls.__name__)
        return cls(
            id=required_int(data, "id"),
            name=required_str(data, "name"),
            description=optional_str(data, "description"),
            due_at=optional_datetime(data, "due_at"),
        )


Decoder = Callable[[Any], T]


def list_of(record: Type[T]) -> Decoder[List[T]]:
    "Decoder for a JSON array of `record`"

    def decode(data: Any) -> List[T]:
        if not isinstance(data, list):
            raise TypeError(f"expected a JSON array, got {type(data).__name__}")
        return [record.from_json(item) for item in data]

    return decode
