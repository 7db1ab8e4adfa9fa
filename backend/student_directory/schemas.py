"""Pydantic request/response schemas used by the API.

Schemas keep API input/output shapes stable and document them in the
generated OpenAPI schema. Write payloads are parsed from the raw body by
the service layer (see `services.StudentService.parse_payload`) so that
missing fields and malformed JSON map onto the API's own error messages.
"""

from typing import Any, Optional

from pydantic import BaseModel


REQUIRED_FIELDS = ("name", "age", "major")


class StudentIn(BaseModel):
    """Payload for create/update. Fields are optional here; presence is
    checked by the service so the error message stays uniform."""
    name: Optional[Any] = None
    age: Optional[Any] = None
    major: Optional[Any] = None


class MessageOut(BaseModel):
    """Body of the welcome response and of every error response."""
    message: str
