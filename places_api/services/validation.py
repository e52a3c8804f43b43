"""Declarative request-body rules.

Each endpoint that accepts a JSON body names a ``PayloadRule``: the pydantic
model listing its required (and, with ``extra="forbid"``, its only allowed)
fields, plus the client-facing message for each kind of failure.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from places_api.models.schemas import PlaceUpsert, UserCreate

M = TypeVar("M", bound=BaseModel)

NOT_AN_OBJECT_MESSAGE = "Request body must be a JSON object"

# Error types that mean "this field carries no usable value".
_MISSING_ERROR_TYPES = {"missing", "string_too_short", "string_type"}


class PayloadError(ValueError):
    """Raised when a request body does not satisfy its rule."""


@dataclass(frozen=True)
class PayloadRule(Generic[M]):
    model: type[M]
    missing_message: str
    extra_message: str | None = None

    def parse(self, payload: Any) -> M:
        if not isinstance(payload, dict):
            raise PayloadError(NOT_AN_OBJECT_MESSAGE)

        try:
            return self.model.model_validate(payload)
        except ValidationError as exc:
            error_types = {err["type"] for err in exc.errors()}
            # Missing fields are reported before unexpected ones.
            if error_types & _MISSING_ERROR_TYPES:
                raise PayloadError(self.missing_message) from exc
            if "extra_forbidden" in error_types and self.extra_message:
                raise PayloadError(self.extra_message) from exc
            raise PayloadError(self.missing_message) from exc


USER_CREATE_RULE: PayloadRule[UserCreate] = PayloadRule(
    model=UserCreate,
    missing_message="Missing required fields: id, Firstname, Surname",
    extra_message="Only id, Firstname, and Surname are allowed in the request body",
)

PLACE_UPSERT_RULE: PayloadRule[PlaceUpsert] = PayloadRule(
    model=PlaceUpsert,
    missing_message="Missing required fields: name, location",
)
