"Errors raised by canvas-cli, all of them end the current command"

from __future__ import annotations

import http.client


class CanvasError(Exception):
    "Base class. `str(error)` is the message shown to the user"


class TransportError(CanvasError):
    "The request never got a response (DNS, connection, TLS)"

    def __init__(self, detail: str) -> None:
        super().__init__(f"Failed to request ({detail})")
        self.detail = detail


class HttpStatusError(CanvasError):
    "The response status is not 2xx"

    def __init__(self, url: str, status: int) -> None:
        reason = http.client.responses.get(status, "Unknown")
        super().__init__(f"Failed to fetch {url}: HTTP status {status} {reason}")
        self.url = url
        self.status = status


class DecodeError(CanvasError):
    "The response body doesn't have the expected shape"

    def __init__(self, detail: str) -> None:
        super().__init__(f"Failed to load ({detail})")
        self.detail = detail


class NotFoundError(CanvasError):
    "A by-path folder lookup returned nothing"

    def __init__(self, path: str) -> None:
        super().__init__(f"No files at path {path}")
        self.path = path


class NoMatchError(CanvasError):
    "No course name starts with the token"

    def __init__(self, token: str) -> None:
        super().__init__(f'No course starts with "{token}"')
        self.token = token


class AmbiguousError(CanvasError):
    "More than one course name starts with the token"

    def __init__(self, token: str) -> None:
        super().__init__(f'Multiple courses start with "{token}"')
        self.token = token


class ConfigError(CanvasError):
    "The config file is missing or invalid"


class NotImplementedCommand(CanvasError):
    "A declared subcommand without an implementation"

    def __init__(self, command: str) -> None:
        super().__init__(f"`{command}` is not implemented yet")
        self.command = command
