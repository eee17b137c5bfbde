"""Base model for all domain entities."""

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class DomainModel(BaseModel):
    """Base class for all domain models.

    Models are immutable; updates go through ``model_copy(update=...)``.
    Field names are snake_case in Python and camelCase on the wire, which is
    the shape the browser client reads and writes.

    The client store backfills older records lazily, so an explicit ``null``
    is treated like a missing field and falls back to the field default.
    Numeric ids are accepted and kept as strings.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        """Let null fields take their defaults."""
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data
