"""Error kinds raised by the service layer.

Every error carries the HTTP status it maps to and a user-facing message.
The application registers a single handler for `StudentDirectoryError`
that renders `to_response()` as the JSON body, so controllers never build
error payloads by hand.
"""

from typing import Iterable


class StudentDirectoryError(Exception):
    """Base class for all errors surfaced as JSON error responses."""
    http_status = 500
    default_message = "Internal server error."

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_response(self) -> dict:
        return {"message": self.message}


class MalformedBody(StudentDirectoryError):
    """Request body is present but is not valid JSON."""
    http_status = 400
    default_message = "Invalid JSON in request body."


class MissingRequiredField(StudentDirectoryError):
    """One of `name`, `age` or `major` is absent or falsy."""
    http_status = 400
    default_message = "Name, age and major are required fields."

    def __init__(self, fields: Iterable[str] = ()):
        self.fields = list(fields)
        super().__init__()


class NotFound(StudentDirectoryError):
    """No student has the requested id."""
    http_status = 404
    default_message = "Student not found."


class UnmatchedRoute(StudentDirectoryError):
    http_status = 404
    default_message = "Route not found."


class PayloadTooLarge(StudentDirectoryError):
    """Request body exceeded the configured size cap."""
    http_status = 413
    default_message = "Request body too large."
