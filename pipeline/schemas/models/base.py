"""Base classes for Pydantic schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """Pydantic base schema with common configuration.

    Fields are snake_case in Python and camelCase on the wire
    (``model_dump(by_alias=True)``); both spellings are accepted on input.
    """

    model_config = ConfigDict(
        from_attributes=True,
        str_strip_whitespace=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class FrozenSchema(BaseSchema):
    """Immutable value schema (derived data, never mutated after creation)."""

    model_config = ConfigDict(frozen=True)


class TimestampedSchema(BaseSchema):
    """Base schema for records that carry created/updated timestamps."""

    created_at: datetime
    updated_at: datetime
