"""Report service: renders a comparison result in the format its path asks for."""

from collections.abc import Sequence
from pathlib import Path

from loguru import logger

from email_validation.entities import ComparisonResult
from email_validation.errors import UnsupportedFormatError
from email_validation.protocols import ReportWriter
from email_validation.repositories import CsvReportWriter, ExcelReportWriter
from email_validation.utils import log_execution_time


class ReportService:
    """Dispatches report rendering to a writer by file extension."""

    def __init__(self, writers: Sequence[ReportWriter], log=None) -> None:
        """Initialize the report service.

        Args:
            writers: Available writers; the first one claiming an extension wins.
            log: Logger to use. Defaults to the loguru logger.
        """
        self._by_extension: dict[str, ReportWriter] = {}
        for writer in writers:
            for extension in writer.extensions:
                self._by_extension.setdefault(extension.lower(), writer)
        self._log = log or logger

    @classmethod
    def create(cls, log=None) -> "ReportService":
        """Factory method wiring the CSV and Excel writers."""
        return cls(writers=[CsvReportWriter(), ExcelReportWriter()], log=log)

    def write(self, path: Path, result: ComparisonResult) -> Path:
        """Write the report for ``result`` to ``path``.

        Args:
            path: Destination; its extension selects the format
            result: Partitions and summary to render

        Returns:
            The path written

        Raises:
            UnsupportedFormatError: If the extension is not supported
            WriteError: If the file cannot be written
        """
        path = Path(path)
        extension = path.suffix.lower()
        writer = self._by_extension.get(extension)
        if writer is None:
            raise UnsupportedFormatError(str(path), extension)

        self._log.info(f"Generating output file: {path}")
        with log_execution_time(f"write_report({path.name})", self._log):
            try:
                writer.write(path, result)
            except Exception as e:
                self._log.error(f"Failed to generate output file: {e}")
                raise

        return path
