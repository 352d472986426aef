"""Domain entities for internal representation.

These are pure dataclasses (frozen) used internally by services
and repositories. They are NOT used for API contracts - use DTOs
from the dto package for that.
"""

from .classified_entry import ClassifiedEntry, Source
from .comparison_result import ComparisonResult, Summary
from .output_format import OutputFormat, media_type_for
from .validation_outcome import ValidationOutcome

__all__ = [
    "ClassifiedEntry",
    "ComparisonResult",
    "OutputFormat",
    "Source",
    "Summary",
    "ValidationOutcome",
    "media_type_for",
]
