"""Validation policy protocol.

A policy decides whether a single trimmed address is acceptable. The
validation service receives one at construction, so swapping the shallow
default for a stricter check never needs a branch inside the service.

Implementations:
- ShallowPolicy: exactly one ``@`` (active default)
- StrictPolicy: format regex, disposable domains, optional domain lookup
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ValidationPolicy(Protocol):
    """Protocol for per-address validity checks."""

    @property
    def name(self) -> str:
        """Short identifier used in log lines."""
        ...

    def evaluate(self, email: str) -> tuple[bool, bool, str | None]:
        """Classify a trimmed, non-normalized address.

        Args:
            email: Address with surrounding whitespace removed

        Returns:
            Tuple (is_valid, is_disposable, invalid_reason). The reason is
            None for valid addresses. Must not raise.
        """
        ...
