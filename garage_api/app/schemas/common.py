"""
Shared pydantic building blocks for garage schemas.

JSON payloads use camelCase names (``customerId``, ``createdAt``)
while Python code uses snake_case attributes; ``GarageModel`` maps
between the two.  The annotated types below implement the type rules
applied to every incoming field bag:

* strings must be JSON strings and non‑empty;
* numbers must be finite JSON numbers (booleans are rejected);
* dates must be ISO‑8601 strings.
"""

import uuid
from datetime import datetime, timezone
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StrictFloat, StrictInt, StrictStr
from pydantic.alias_generators import to_camel

RequiredStr = Annotated[StrictStr, Field(min_length=1)]
Number = Annotated[StrictFloat, Field(allow_inf_nan=False)]
Integer = StrictInt


class GarageModel(BaseModel):
    """Base model with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GarageRecord(GarageModel):
    """Base for stored records.  Records are immutable once built."""

    model_config = ConfigDict(frozen=True)

    id: str
    created_at: datetime


def parse_date(value: Any) -> Any:
    """Parse an ISO‑8601 date or datetime string.

    Used as a ``mode="before"`` validator.  ``datetime`` instances pass
    through unchanged (records rebuilt from storage); anything else
    that is not a parseable string raises ``ValueError``.
    """
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not value:
        raise ValueError("date must be an ISO-8601 string")
    text = value[:-1] + "+00:00" if value.endswith(("Z", "z")) else value
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        raise ValueError(f"invalid date {value!r}") from None


DateValue = Annotated[datetime, BeforeValidator(parse_date)]


def new_id() -> str:
    """Return a fresh opaque record identifier."""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
