"""Exceptions raised by the extraction, validation and report pipeline.

Every error here is terminal for the request that raised it: nothing is
retried internally and the first failure is propagated to the caller.
"""

from typing import Any


class EmailValidationError(Exception):
    """Base exception for all pipeline errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize the exception.

        Args:
            message: Error message
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class UnsupportedFormatError(EmailValidationError):
    """File extension is not one of the supported tabular formats."""

    def __init__(self, path: str, extension: str) -> None:
        """Initialize with the offending path and extension."""
        super().__init__(
            f"unsupported file format: {extension or '<none>'}",
            {"path": path, "extension": extension},
        )
        self.extension = extension


class ReadError(EmailValidationError):
    """Input file could not be read or has a malformed row structure."""

    pass


class WriteError(EmailValidationError):
    """Report file could not be written."""

    pass
