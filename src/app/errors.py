"""
Store level failures raised by repository and unit of work implementations.

Use cases translate these into error codes; nothing above the adapter layer
sees SQLAlchemy exceptions.
"""


class StoreError(Exception):
    """The store could not complete the operation"""


class DuplicateRecordError(StoreError):
    """A uniqueness constraint rejected the write"""


class StoreUnavailableError(StoreError):
    """Connectivity or other non-constraint failure"""
