"""Error taxonomy for the task API and its mapping to HTTP responses."""

from enum import Enum

from fastapi import status


class ErrorKind(str, Enum):
    """Closed set of client errors the task endpoints can report."""
    INVALID_ID = "invalid_id"
    INVALID_BODY = "invalid_body"
    MISSING_TITLE = "missing_title"
    EMPTY_TITLE = "empty_title"
    NOT_FOUND = "not_found"

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_STATUS_CODES = {
    ErrorKind.INVALID_ID: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_BODY: status.HTTP_400_BAD_REQUEST,
    ErrorKind.MISSING_TITLE: status.HTTP_400_BAD_REQUEST,
    ErrorKind.EMPTY_TITLE: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}

_MESSAGES = {
    ErrorKind.INVALID_ID: "ID inválido",
    ErrorKind.INVALID_BODY: "JSON inválido",
    ErrorKind.MISSING_TITLE: "El campo 'titulo' es requerido",
    ErrorKind.EMPTY_TITLE: "El campo 'titulo' no puede estar vacío",
    ErrorKind.NOT_FOUND: "Tarea no encontrada",
}


class TaskError(Exception):
    """Raised by the store and handlers; rendered as ``{"error": ...}``."""

    def __init__(self, kind: ErrorKind):
        self.kind = kind
        super().__init__(kind.message)

    @property
    def status_code(self) -> int:
        return self.kind.status_code

    @property
    def message(self) -> str:
        return self.kind.message
