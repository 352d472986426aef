"""Excel implementation of AddressExtractor.

Uses openpyxl in read-only mode, which streams rows from the sheet XML
instead of building the whole workbook in memory.
"""

import zipfile
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from loguru import logger
from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from email_validation.config import settings
from email_validation.errors import ReadError


def cell_text(value: Any) -> str:
    """Render a raw cell value as text; empty cells become ''."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


class ExcelAddressExtractor:
    """Spreadsheet address source reading the first worksheet.

    This class satisfies the AddressExtractor protocol through structural
    typing - no explicit inheritance needed.
    """

    extensions: tuple[str, ...] = (".xlsx", ".xls")

    def __init__(self, column: int | None = None) -> None:
        """Initialize the Excel extractor.

        Args:
            column: Zero-based column holding addresses. Defaults to settings.
        """
        self._column = settings.email_column if column is None else column

    @classmethod
    def create(cls, column: int | None = None) -> "ExcelAddressExtractor":
        """Factory method to create ExcelAddressExtractor with defaults."""
        return cls(column=column)

    @property
    def column(self) -> int:
        """Zero-based index of the address column."""
        return self._column

    def extract(self, path: Path) -> Iterator[str]:
        """Stream candidate addresses from the first sheet of a workbook.

        The workbook is opened from a binary handle, so openpyxl decides by
        content rather than by file name and an ``.xls`` name holding Office
        Open XML data is read like ``.xlsx``. Legacy binary (BIFF) workbooks
        are not readable and raise ReadError.

        Args:
            path: Workbook to read

        Yields:
            Raw address strings, header row excluded

        Raises:
            ReadError: If the workbook cannot be opened, has no sheets or
                no header row
        """
        path = Path(path)
        try:
            handle = path.open("rb")
        except OSError as e:
            raise ReadError(f"failed to open workbook {path.name}: {e}", {"path": str(path)}) from e

        with handle:
            try:
                workbook = load_workbook(handle, read_only=True, data_only=True)
            except (OSError, InvalidFileException, zipfile.BadZipFile, KeyError, ValueError) as e:
                raise ReadError(f"failed to open workbook {path.name}: {e}", {"path": str(path)}) from e

            found = 0
            try:
                if not workbook.worksheets:
                    raise ReadError(f"no sheets found in {path.name}", {"path": str(path)})
                sheet = workbook.worksheets[0]

                rows = sheet.iter_rows(values_only=True)
                if next(rows, None) is None:
                    raise ReadError(
                        f"sheet '{sheet.title}' has no header row",
                        {"path": str(path), "sheet": sheet.title},
                    )

                for row in rows:
                    if self._column >= len(row):
                        continue
                    value = cell_text(row[self._column])
                    if value and "@" in value:
                        found += 1
                        yield value
            except ReadError:
                raise
            except (OSError, zipfile.BadZipFile, KeyError, ValueError) as e:
                raise ReadError(f"failed to read workbook {path.name}: {e}", {"path": str(path)}) from e
            finally:
                workbook.close()

        logger.debug(f"Excel extraction completed, found {found} potential emails in {path.name}")
