"""Shared exceptions for service layer operations."""


class StorageUnavailableError(Exception):
    """
    Raised when the database cannot be reached or a write cannot be committed.

    Distinct from not-found outcomes: callers may retry the same request later.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
