"""CSV implementation of ReportWriter."""

import csv
from pathlib import Path

from loguru import logger

from email_validation.entities import ComparisonResult
from email_validation.errors import WriteError

from .report_layout import RESULT_HEADERS, SUMMARY_HEADERS, result_rows


class CsvReportWriter:
    """Writes the comparison as one CSV file.

    Result rows come first, followed by a blank row, a ``Summary`` title
    row, a ``Metric,Value`` header and the eight summary metrics.
    """

    extensions: tuple[str, ...] = (".csv",)

    def write(self, path: Path, result: ComparisonResult) -> None:
        """Render a comparison result to a CSV file.

        Args:
            path: Destination file
            result: Partitions and summary to render

        Raises:
            WriteError: If the file cannot be written
        """
        path = Path(path)
        rows = 0
        try:
            with path.open("w", encoding="utf-8", newline="") as handle:
                writer = csv.writer(handle)
                writer.writerow(RESULT_HEADERS)

                for row in result_rows(result):
                    writer.writerow(row)
                    rows += 1

                writer.writerow([""])
                writer.writerow(["Summary"])
                writer.writerow(SUMMARY_HEADERS)
                for label, value in result.summary.metrics():
                    writer.writerow([label, str(value)])
        except OSError as e:
            raise WriteError(f"failed to write report {path.name}: {e}", {"path": str(path)}) from e

        logger.debug(f"Wrote {rows} result rows to {path}")
