"""Base models for all domain entities."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from forum.domain.error import ValidationError

_MISSING_ERROR_TYPES = {"missing", "string_too_short"}


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability and custom types.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,  # Allow custom value objects
    )


class PayloadModel(DomainModel):
    """Base class for write payloads validated at construction.

    Payloads are strict: values are never coerced, so a number where a string
    is expected is rejected instead of converted. Any failure is raised as a
    domain ValidationError naming the offending property.
    """

    model_config = ConfigDict(
        frozen=True,
        strict=True,
    )

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except PydanticValidationError as e:
            raise ValidationError(_describe(type(self).__name__, e)) from e


def _describe(model_name: str, error: PydanticValidationError) -> str:
    """Build a single message from a pydantic error.

    Missing or falsy properties (None, "", 0, empty collections) are
    reported as missing, before any type mismatch.
    """
    errors = error.errors()
    for err in errors:
        if err["type"] in _MISSING_ERROR_TYPES or not err.get("input"):
            return f"{model_name} is missing required property: {_field(err)}"

    err = errors[0]
    if err["type"] == "string_too_long":
        return f"{model_name} property {_field(err)} is too long"
    return f"{model_name} property {_field(err)} has an invalid type"


def _field(err: Any) -> str:
    return ".".join(str(part) for part in err["loc"]) or "<root>"
