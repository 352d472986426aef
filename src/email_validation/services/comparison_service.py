"""Comparison service: reconciles two classified address lists."""

from collections.abc import Sequence

from loguru import logger

from email_validation.entities import ClassifiedEntry, ComparisonResult, Summary
from email_validation.utils import log_execution_time


class ComparisonService:
    """Partitions two lists by normalized key.

    Keys are the comparison identity: two entries with the same
    ``normalized_key`` are the same address. Within one file, a repeated
    key collapses to a single entry, so the summary's matching and missing
    counts are distinct keys while its totals count raw entries.
    """

    def __init__(self, log=None) -> None:
        self._log = log or logger

    def compare(
        self,
        first_entries: Sequence[ClassifiedEntry],
        second_entries: Sequence[ClassifiedEntry],
    ) -> ComparisonResult:
        """Split both lists into matched, first-only and second-only entries.

        Business logic:
        1. Index the first file by key; the last entry seen for a key wins
        2. One pass over the second file: the first occurrence of each key
           goes to ``matched`` (with the first file's entry) or to
           ``only_in_second``
        3. Keys of the first file never seen in the second go to
           ``only_in_first``, in first-file order

        Args:
            first_entries: Classified entries of the first file
            second_entries: Classified entries of the second file

        Returns:
            ComparisonResult with partitions and summary counts. Processing
            time is left at zero for the caller to fill in.
        """
        self._log.info(
            f"Comparing {len(first_entries)} emails from first file "
            f"with {len(second_entries)} emails from second file"
        )

        with log_execution_time("compare", self._log):
            valid_first = 0
            valid_second = 0
            disposable = 0

            first_map: dict[str, ClassifiedEntry] = {}
            for entry in first_entries:
                if entry.is_valid:
                    valid_first += 1
                if entry.is_disposable:
                    disposable += 1
                first_map[entry.normalized_key] = entry

            matched: list[ClassifiedEntry] = []
            only_in_second: list[ClassifiedEntry] = []
            second_map: dict[str, ClassifiedEntry] = {}
            for entry in second_entries:
                if entry.is_valid:
                    valid_second += 1
                if entry.is_disposable:
                    disposable += 1

                key = entry.normalized_key
                if key not in second_map:
                    representative = first_map.get(key)
                    if representative is not None:
                        matched.append(representative)
                    else:
                        only_in_second.append(entry)
                second_map[key] = entry

            only_in_first = [entry for key, entry in first_map.items() if key not in second_map]

        summary = Summary(
            total_first=len(first_entries),
            total_second=len(second_entries),
            valid_first=valid_first,
            valid_second=valid_second,
            matching_count=len(matched),
            missing_in_first_count=len(only_in_second),
            missing_in_second_count=len(only_in_first),
            disposable_count=disposable,
        )

        self._log.info(
            f"Comparison completed: {summary.matching_count} matching, "
            f"{summary.missing_in_first_count} missing in first, "
            f"{summary.missing_in_second_count} missing in second"
        )

        return ComparisonResult(
            matched=tuple(matched),
            only_in_first=tuple(only_in_first),
            only_in_second=tuple(only_in_second),
            summary=summary,
        )


def compare_entries(
    first_entries: Sequence[ClassifiedEntry],
    second_entries: Sequence[ClassifiedEntry],
) -> ComparisonResult:
    """Compare two classified lists with a default ComparisonService."""
    return ComparisonService().compare(first_entries, second_entries)
