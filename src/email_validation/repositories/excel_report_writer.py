"""Excel implementation of ReportWriter."""

from pathlib import Path

from loguru import logger
from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from email_validation.entities import ComparisonResult
from email_validation.errors import WriteError

from .report_layout import RESULT_HEADERS, SUMMARY_HEADERS, result_rows

RESULTS_SHEET = "Validation Results"
SUMMARY_SHEET = "Summary"

HEADER_FONT = Font(bold=True)
HEADER_FILL = PatternFill(fill_type="solid", start_color="DDEBF7", end_color="DDEBF7")
HEADER_BORDER = Border(bottom=Side(style="thin", color="000000"))
HEADER_ALIGNMENT = Alignment(horizontal="center")


def style_header(sheet, width: int) -> None:
    """Apply the bold, shaded header style to the first ``width`` cells of row 1."""
    for col in range(1, width + 1):
        cell = sheet.cell(row=1, column=col)
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL
        cell.border = HEADER_BORDER
        cell.alignment = HEADER_ALIGNMENT


def append_text_row(sheet, row: list[str]) -> None:
    """Append a row whose cells are always stored as text, never as formulas."""
    sheet.append(row)
    for cell in sheet[sheet.max_row]:
        cell.data_type = "s"


class ExcelReportWriter:
    """Writes the comparison as an ``.xlsx`` workbook.

    The ``Validation Results`` sheet holds one row per entry; the
    ``Summary`` sheet holds the eight metrics as integers.
    """

    extensions: tuple[str, ...] = (".xlsx", ".xls")

    def write(self, path: Path, result: ComparisonResult) -> None:
        """Render a comparison result to a workbook.

        Args:
            path: Destination file
            result: Partitions and summary to render

        Raises:
            WriteError: If the workbook cannot be saved
        """
        path = Path(path)
        workbook = Workbook()

        # Reuse the default sheet so no empty "Sheet" is left behind
        results = workbook.active
        results.title = RESULTS_SHEET
        results.append(RESULT_HEADERS)
        style_header(results, len(RESULT_HEADERS))

        rows = 0
        for row in result_rows(result):
            append_text_row(results, row)
            rows += 1

        for col in range(1, len(RESULT_HEADERS) + 1):
            results.column_dimensions[get_column_letter(col)].width = 20

        summary = workbook.create_sheet(SUMMARY_SHEET)
        summary.append(SUMMARY_HEADERS)
        style_header(summary, len(SUMMARY_HEADERS))
        for label, value in result.summary.metrics():
            summary.append([label, value])
        summary.column_dimensions["A"].width = 30
        summary.column_dimensions["B"].width = 15

        workbook.active = 0

        try:
            workbook.save(path)
        except OSError as e:
            raise WriteError(f"failed to save workbook {path.name}: {e}", {"path": str(path)}) from e

        logger.debug(f"Wrote {rows} result rows to {path}")
