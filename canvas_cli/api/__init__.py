"Canvas REST API client"

from .api import CanvasAPI
from .types import Assignment, Course, File, Folder, WorkflowState, list_of

__all__ = [
    "Assignment",
    "CanvasAPI",
    "Course",
    "File",
    "Folder",
    "WorkflowState",
    "list_of",
]
