"""Error types raised by services and storage.

Each error carries the HTTP status it maps to; translating it into a
response is left to the handlers in api/error_handlers.py.
"""

from typing import Optional

from fastapi import status


class TaskboardError(Exception):
    """Base class for every error the API reports to callers."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(TaskboardError):
    """A field is missing, has the wrong type or fails a format rule."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


class ConflictError(TaskboardError):
    """A unique value (id, email, assignment) is already taken."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(TaskboardError):
    status_code = status.HTTP_404_NOT_FOUND


class UnexpectedError(TaskboardError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class StoreError(UnexpectedError):
    """The database rejected or failed a statement."""

    def __init__(self, message: str, operation: str = "query"):
        super().__init__(message)
        self.operation = operation
