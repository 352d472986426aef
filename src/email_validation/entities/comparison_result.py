"""Comparison result domain entities."""

from dataclasses import dataclass, replace

from .classified_entry import ClassifiedEntry


@dataclass(frozen=True)
class Summary:
    """Aggregate counts for one comparison.

    Attributes:
        total_first: Addresses extracted from the first file
        total_second: Addresses extracted from the second file
        valid_first: Valid addresses in the first file
        valid_second: Valid addresses in the second file
        matching_count: Distinct keys present in both files
        missing_in_first_count: Distinct keys only in the second file
        missing_in_second_count: Distinct keys only in the first file
        disposable_count: Disposable addresses across both files
        processing_time_seconds: Wall time of the whole request
    """

    total_first: int = 0
    total_second: int = 0
    valid_first: int = 0
    valid_second: int = 0
    matching_count: int = 0
    missing_in_first_count: int = 0
    missing_in_second_count: int = 0
    disposable_count: int = 0
    processing_time_seconds: float = 0.0

    def with_processing_time(self, seconds: float) -> "Summary":
        """Return a copy carrying the given processing time."""
        return replace(self, processing_time_seconds=seconds)

    def metrics(self) -> list[tuple[str, int]]:
        """The eight report metrics as (label, value) pairs, in report order."""
        return [
            ("Total Emails in First File", self.total_first),
            ("Total Emails in Second File", self.total_second),
            ("Valid Emails in First File", self.valid_first),
            ("Valid Emails in Second File", self.valid_second),
            ("Matching Emails", self.matching_count),
            ("Emails Missing in First File", self.missing_in_first_count),
            ("Emails Missing in Second File", self.missing_in_second_count),
            ("Disposable Emails", self.disposable_count),
        ]


@dataclass(frozen=True)
class ComparisonResult:
    """Three-way partition of two classified address lists.

    Attributes:
        matched: One representative per key present in both files, always
            taken from the first file, in second-file order
        only_in_first: Keys absent from the second file, in first-file order
        only_in_second: Keys absent from the first file, in second-file order
        summary: Aggregate counts
    """

    matched: tuple[ClassifiedEntry, ...]
    only_in_first: tuple[ClassifiedEntry, ...]
    only_in_second: tuple[ClassifiedEntry, ...]
    summary: Summary
