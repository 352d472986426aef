"""CSV implementation of AddressExtractor.

Streams the file through the stdlib ``csv`` reader one record at a time,
so memory stays flat no matter how large the upload is.
"""

import csv
from collections.abc import Iterator
from pathlib import Path

from loguru import logger

from email_validation.config import settings
from email_validation.errors import ReadError


class CsvAddressExtractor:
    """Delimited-text address source.

    This class satisfies the AddressExtractor protocol through structural
    typing - no explicit inheritance needed.

    Every record must have as many fields as the header row; a ragged
    record aborts extraction, as does a missing or empty file. Blank lines
    are ignored.
    """

    extensions: tuple[str, ...] = (".csv",)

    def __init__(self, column: int | None = None, encoding: str = "utf-8-sig") -> None:
        """Initialize the CSV extractor.

        Args:
            column: Zero-based column holding addresses. Defaults to settings.
            encoding: Text encoding; the default strips a UTF-8 BOM.
        """
        self._column = settings.email_column if column is None else column
        self._encoding = encoding

    @classmethod
    def create(cls, column: int | None = None) -> "CsvAddressExtractor":
        """Factory method to create CsvAddressExtractor with defaults.

        Args:
            column: Address column. If None, uses settings.

        Returns:
            Configured CsvAddressExtractor
        """
        return cls(column=column)

    @property
    def column(self) -> int:
        """Zero-based index of the address column."""
        return self._column

    def extract(self, path: Path) -> Iterator[str]:
        """Stream candidate addresses from a CSV file.

        Args:
            path: CSV file to read

        Yields:
            Raw address strings, header excluded

        Raises:
            ReadError: On I/O failure, empty file or a ragged record
        """
        path = Path(path)
        found = 0
        try:
            with path.open("r", encoding=self._encoding, newline="") as handle:
                reader = csv.reader(handle)

                header = next(reader, None)
                if header is None:
                    raise ReadError(f"file is empty: {path.name}", {"path": str(path)})
                field_count = len(header)

                for record in reader:
                    if not record:
                        continue
                    if len(record) != field_count:
                        raise ReadError(
                            f"record on line {reader.line_num}: wrong number of fields",
                            {
                                "path": str(path),
                                "line": reader.line_num,
                                "expected": field_count,
                                "got": len(record),
                            },
                        )

                    value = record[self._column] if self._column < len(record) else ""
                    if value and "@" in value:
                        found += 1
                        yield value
        except ReadError:
            raise
        except (OSError, csv.Error, UnicodeDecodeError) as e:
            raise ReadError(f"failed to read {path.name}: {e}", {"path": str(path)}) from e

        logger.debug(f"CSV extraction completed, found {found} potential emails in {path.name}")
