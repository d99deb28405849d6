"""
Service layer abstraction.

Each service validates incoming field bags for one record kind and
persists the resulting records through the ``RecordStore`` it is given,
so the storage backend can change without touching API handlers.
"""
