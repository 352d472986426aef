"""Extraction service: picks the right extractor for a file and drains it."""

from collections.abc import Iterator, Sequence
from pathlib import Path

from loguru import logger

from email_validation.errors import UnsupportedFormatError
from email_validation.protocols import AddressExtractor
from email_validation.repositories import CsvAddressExtractor, ExcelAddressExtractor
from email_validation.utils import log_execution_time


class ExtractionService:
    """Dispatches files to extractors by extension.

    Example:
        ```python
        service = ExtractionService.create(column=2)
        emails = service.extract_all(Path("contacts.xlsx"))
        ```
    """

    def __init__(self, extractors: Sequence[AddressExtractor], log=None) -> None:
        """Initialize the extraction service.

        Args:
            extractors: Available extractors; the first one claiming an
                extension wins.
            log: Logger to use. Defaults to the loguru logger.
        """
        self._by_extension: dict[str, AddressExtractor] = {}
        for extractor in extractors:
            for extension in extractor.extensions:
                self._by_extension.setdefault(extension.lower(), extractor)
        self._log = log or logger

    @classmethod
    def create(cls, column: int | None = None, log=None) -> "ExtractionService":
        """Factory method wiring the CSV and Excel extractors.

        Args:
            column: Address column. If None, uses settings.
            log: Logger to use.

        Returns:
            Configured ExtractionService
        """
        return cls(
            extractors=[CsvAddressExtractor(column=column), ExcelAddressExtractor(column=column)],
            log=log,
        )

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        """Extensions that have an extractor."""
        return tuple(self._by_extension)

    def extractor_for(self, path: Path) -> AddressExtractor:
        """Look up the extractor for a file.

        Raises:
            UnsupportedFormatError: If no extractor handles the extension
        """
        extension = Path(path).suffix.lower()
        extractor = self._by_extension.get(extension)
        if extractor is None:
            raise UnsupportedFormatError(str(path), extension)
        return extractor

    def extract(self, path: Path) -> Iterator[str]:
        """Stream candidate addresses from a file.

        The format is checked immediately; read errors surface while the
        returned iterator is consumed.

        Raises:
            UnsupportedFormatError: If the extension is not supported
        """
        return self.extractor_for(path).extract(Path(path))

    def extract_all(self, path: Path) -> list[str]:
        """Read every candidate address from a file.

        Raises:
            UnsupportedFormatError: If the extension is not supported
            ReadError: If the file cannot be read
        """
        path = Path(path)
        self._log.info(f"Extracting emails from {path} (format: {path.suffix.lower()})")

        with log_execution_time(f"extract({path.name})", self._log):
            try:
                emails = list(self.extract(path))
            except Exception as e:
                self._log.error(f"Failed to extract emails from {path}: {e}")
                raise

        self._log.info(f"Successfully extracted {len(emails)} emails from {path}")
        return emails
