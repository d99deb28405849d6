"""
Pydantic schema definitions for API payloads and stored records.

Each record kind defines a ``*Create`` schema that validates request
bodies, an immutable record model, a factory that builds new records
and the response envelopes returned by the API.
"""
