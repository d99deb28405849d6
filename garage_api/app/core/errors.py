"""
Domain exceptions raised by the service and store layers.

API handlers translate these into HTTP responses: ``ValidationError``
becomes 400, ``RecordNotFoundError`` becomes 404 and anything else is
reported as a 500 server error.
"""


class GarageError(Exception):
    """Base class for all domain errors."""


class ValidationError(GarageError):
    """Client input was missing, mistyped or malformed."""


class DuplicateEmailError(ValidationError):
    """A customer with the same email address is already stored."""


class RecordNotFoundError(GarageError):
    """No record is stored under the requested identifier."""

    def __init__(self, kind: str, record_id: str) -> None:
        super().__init__(f"{kind} {record_id} not found")
        self.kind = kind
        self.record_id = record_id


class RecordExistsError(GarageError):
    """A record is already stored under the identifier being inserted."""

    def __init__(self, collection: str, key: str) -> None:
        super().__init__(f"Record {key} already exists in {collection}")
        self.collection = collection
        self.key = key
