"""Error types shared by the transaction and report features.

Validation errors are raised before the record store is touched and map to
a 400 response. StoreError wraps whatever the persistence layer raised and
maps to a 500 response; the underlying exception is kept as ``__cause__``.
"""


class SalesboardError(Exception):
    """Base class for all errors raised by salesboard."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidRequest(SalesboardError):
    """Bad caller input, detected before any store call."""


class InvalidMonth(InvalidRequest):
    pass


class InvalidPage(InvalidRequest):
    pass


class InvalidPerPage(InvalidRequest):
    pass


class StoreError(SalesboardError):
    """The record store failed (connectivity, malformed query, ORM error)."""


class SeedSourceError(SalesboardError):
    """The remote seed catalog could not be fetched or parsed."""
