"""Classified address domain entity."""

from dataclasses import dataclass
from enum import Enum


class Source(str, Enum):
    """Which input file an entry was read from."""

    FIRST_FILE = "First File"
    SECOND_FILE = "Second File"


@dataclass(frozen=True)
class ClassifiedEntry:
    """Domain entity for one address after validation.

    Created once per extracted address by the validation service and never
    mutated afterwards.

    Attributes:
        original: The address as read, with surrounding whitespace trimmed;
            equals the raw input only when it had no such whitespace
        source: The file the address came from
        normalized_key: Comparison identity (see ``normalize_email``)
        is_valid: Whether the active validation policy accepted the address
        is_disposable: Whether the domain is a known throwaway provider
        invalid_reason: Human-readable reason when ``is_valid`` is False
    """

    original: str  # trimmed, so it differs from the raw cell text when padded
    source: Source
    normalized_key: str
    is_valid: bool
    is_disposable: bool = False
    invalid_reason: str | None = None
