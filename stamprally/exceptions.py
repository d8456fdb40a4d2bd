"""Errors raised by the completion services."""


class InvalidRequest(Exception):
    """A required client-supplied field is missing or empty."""

    def __init__(self, message: str = "Invalid request") -> None:
        super().__init__(message)
        self.message = message


class StorageUnavailable(Exception):
    """The database failed while reading or writing completions."""
