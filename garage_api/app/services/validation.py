"""
Field bag validation shared by all record services.

``validate_payload`` runs a raw request body through a create schema
and turns any pydantic error into the domain ``ValidationError`` that
carries the schema's client‑facing message.
"""

import logging
from typing import Any, Type, TypeVar

from pydantic import ValidationError as PydanticValidationError

from garage_api.app.core.errors import ValidationError
from garage_api.app.schemas.common import GarageModel

SchemaT = TypeVar("SchemaT", bound=GarageModel)

INVALID_DATE_MESSAGE = "Invalid date format: Ensure 'date' is an ISO-8601 date or datetime string."

logger = logging.getLogger(__name__)


def validate_payload(schema: Type[SchemaT], payload: Any) -> SchemaT:
    """Validate ``payload`` against ``schema``.

    Raises ``ValidationError`` if the payload is not a JSON object, if a
    required field is missing or mistyped, or if a date cannot be
    parsed.
    """
    if not isinstance(payload, dict):
        logger.warning("Rejected %s payload: body is not an object", schema.__name__)
        raise ValidationError(schema.invalid_input_message)
    try:
        return schema.model_validate(payload)
    except PydanticValidationError as exc:
        errors = exc.errors()
        logger.warning(
            "Rejected %s payload: %s",
            schema.__name__,
            ", ".join(".".join(str(part) for part in err["loc"]) for err in errors),
        )
        # A present but unparseable date gets its own message.
        if all(err["loc"] == ("date",) and err["type"] == "value_error" for err in errors):
            raise ValidationError(INVALID_DATE_MESSAGE) from exc
        raise ValidationError(schema.invalid_input_message) from exc
