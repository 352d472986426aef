"""Row layout shared by every report format."""

from collections.abc import Iterator

from email_validation.entities import ClassifiedEntry, ComparisonResult

RESULT_HEADERS = ["Email", "Normalized Email", "Source", "Status", "Valid", "Reason"]
SUMMARY_HEADERS = ["Metric", "Value"]

BOTH = "Both"
FIRST_FILE_ONLY = "First File Only"
SECOND_FILE_ONLY = "Second File Only"

MATCHING = "Matching"
MISSING_IN_FIRST = "Missing in First File"
MISSING_IN_SECOND = "Missing in Second File"


def yes_no(value: bool) -> str:
    """Render a flag as 'Yes' or 'No'."""
    return "Yes" if value else "No"


def entry_row(entry: ClassifiedEntry, relationship: str, status: str) -> list[str]:
    """One result row for an entry."""
    return [
        entry.original,
        entry.normalized_key,
        relationship,
        status,
        yes_no(entry.is_valid),
        entry.invalid_reason or "",
    ]


def result_rows(result: ComparisonResult) -> Iterator[list[str]]:
    """Result rows in report order: matched, missing in first, missing in second."""
    for entry in result.matched:
        yield entry_row(entry, BOTH, MATCHING)
    for entry in result.only_in_second:
        yield entry_row(entry, SECOND_FILE_ONLY, MISSING_IN_FIRST)
    for entry in result.only_in_first:
        yield entry_row(entry, FIRST_FILE_ONLY, MISSING_IN_SECOND)
