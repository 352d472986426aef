"""Validation outcome domain entity."""

from dataclasses import dataclass
from pathlib import Path

from .comparison_result import Summary


@dataclass(frozen=True)
class ValidationOutcome:
    """What a completed validation request hands back to its caller.

    Attributes:
        matching_emails: Addresses present in both files
        missing_in_first_file: Addresses only present in the second file
        missing_in_second_file: Addresses only present in the first file
        file_name: Name of the generated report
        output_path: Full path of the generated report
        summary: Aggregate counts, including processing time
    """

    matching_emails: list[str]
    missing_in_first_file: list[str]
    missing_in_second_file: list[str]
    file_name: str
    output_path: Path
    summary: Summary
