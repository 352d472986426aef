"""
Tests for the CSV and Excel report writers.
"""

import csv

import pytest
from openpyxl import load_workbook

from email_validation.entities import Source
from email_validation.errors import UnsupportedFormatError, WriteError
from email_validation.repositories import CsvReportWriter, ExcelReportWriter
from email_validation.repositories.excel_report_writer import RESULTS_SHEET, SUMMARY_SHEET
from email_validation.services import ReportService, ValidationService, compare_entries


@pytest.fixture
def result():
    """Comparison of a small pair of lists with one invalid address."""
    validation = ValidationService.create(max_workers=2)
    first = validation.validate_batch(["a@x.com", "b@x.com", "bad"], Source.FIRST_FILE)
    second = validation.validate_batch(["B@x.com", "c@x.com"], Source.SECOND_FILE)
    return compare_entries(first, second)


def read_csv(path):
    with path.open(encoding="utf-8", newline="") as handle:
        return list(csv.reader(handle))


def test_csv_report_layout(tmp_path, result):
    """Results first, then a blank row and the summary block."""
    path = tmp_path / "report.csv"
    CsvReportWriter().write(path, result)
    rows = read_csv(path)

    assert rows[0] == ["Email", "Normalized Email", "Source", "Status", "Valid", "Reason"]
    assert rows[1:5] == [
        ["b@x.com", "b@x.com", "Both", "Matching", "Yes", ""],
        ["c@x.com", "c@x.com", "Second File Only", "Missing in First File", "Yes", ""],
        ["a@x.com", "a@x.com", "First File Only", "Missing in Second File", "Yes", ""],
        ["bad", "bad", "First File Only", "Missing in Second File", "No",
         "Email must contain exactly one @ symbol"],
    ]
    assert rows[5] == [""]
    assert rows[6] == ["Summary"]
    assert rows[7] == ["Metric", "Value"]
    assert rows[8:] == [
        ["Total Emails in First File", "3"],
        ["Total Emails in Second File", "2"],
        ["Valid Emails in First File", "2"],
        ["Valid Emails in Second File", "2"],
        ["Matching Emails", "1"],
        ["Emails Missing in First File", "1"],
        ["Emails Missing in Second File", "2"],
        ["Disposable Emails", "0"],
    ]


def test_csv_report_is_reproducible(tmp_path, result):
    """The same result always renders to the same bytes."""
    first = tmp_path / "one.csv"
    second = tmp_path / "two.csv"
    CsvReportWriter().write(first, result)
    CsvReportWriter().write(second, result)
    assert first.read_bytes() == second.read_bytes()


def test_excel_report_sheets(tmp_path, result):
    """Workbook has a results sheet and an integer summary sheet."""
    path = tmp_path / "report.xlsx"
    ExcelReportWriter().write(path, result)

    workbook = load_workbook(path)
    assert workbook.sheetnames == [RESULTS_SHEET, SUMMARY_SHEET]

    results = workbook[RESULTS_SHEET]
    rows = [list(row) for row in results.iter_rows(values_only=True)]
    assert rows[0] == ["Email", "Normalized Email", "Source", "Status", "Valid", "Reason"]
    assert [row[0] for row in rows[1:]] == ["b@x.com", "c@x.com", "a@x.com", "bad"]
    assert rows[4][5] == "Email must contain exactly one @ symbol"

    summary = workbook[SUMMARY_SHEET]
    values = {label: value for label, value in summary.iter_rows(min_row=2, values_only=True)}
    assert values["Matching Emails"] == 1
    assert values["Total Emails in First File"] == 3


def test_excel_header_style(tmp_path, result):
    """Header cells are bold, shaded and centered; columns are widened."""
    path = tmp_path / "report.xlsx"
    ExcelReportWriter().write(path, result)

    workbook = load_workbook(path)
    results = workbook[RESULTS_SHEET]
    header = results["A1"]
    assert header.font.bold is True
    assert header.fill.start_color.rgb.endswith("DDEBF7")
    assert header.alignment.horizontal == "center"
    assert header.border.bottom.style == "thin"
    assert results.column_dimensions["A"].width == 20

    summary = workbook[SUMMARY_SHEET]
    assert summary["B1"].font.bold is True
    assert summary.column_dimensions["A"].width == 30
    assert summary.column_dimensions["B"].width == 15


def test_write_error_for_missing_directory(tmp_path, result):
    """A destination that cannot be created raises WriteError."""
    with pytest.raises(WriteError):
        CsvReportWriter().write(tmp_path / "missing" / "report.csv", result)
    with pytest.raises(WriteError):
        ExcelReportWriter().write(tmp_path / "missing" / "report.xlsx", result)


def test_report_service_dispatch(tmp_path, result):
    """The report service picks a writer from the extension."""
    service = ReportService.create()

    assert service.write(tmp_path / "r.csv", result).exists()
    assert service.write(tmp_path / "r.xlsx", result).exists()
    with pytest.raises(UnsupportedFormatError):
        service.write(tmp_path / "r.pdf", result)


def sheet_rows(path):
    """Cell values of every sheet, keyed by sheet name."""
    workbook = load_workbook(path)
    return {
        sheet.title: [list(row) for row in sheet.iter_rows(values_only=True)]
        for sheet in workbook.worksheets
    }


def test_excel_report_is_reproducible(tmp_path, result):
    """The same result always renders to the same cells in the same order."""
    first = tmp_path / "one.xlsx"
    second = tmp_path / "two.xlsx"
    ExcelReportWriter().write(first, result)
    ExcelReportWriter().write(second, result)
    assert sheet_rows(first) == sheet_rows(second)


def test_excel_report_keeps_formula_like_text(tmp_path):
    """Addresses starting with '=' are stored as text, not formulas."""
    validation = ValidationService.create(max_workers=1)
    first = validation.validate_batch(["=1+1@x.com", "=HYPERLINK(\"a@x.com\")"], Source.FIRST_FILE)
    path = tmp_path / "report.xlsx"
    ExcelReportWriter().write(path, compare_entries(first, []))

    results = load_workbook(path)[RESULTS_SHEET]
    assert results["A2"].data_type == "s"
    assert results["A2"].value == "=1+1@x.com"
    assert results["B2"].value == "=1+1@x.com"
    assert results["A3"].data_type == "s"
    assert results["A3"].value == "=HYPERLINK(\"a@x.com\")"


def test_csv_and_excel_reports_agree(tmp_path, result):
    """Both formats carry the same email, status and validity tuples."""
    csv_path = tmp_path / "report.csv"
    xlsx_path = tmp_path / "report.xlsx"
    CsvReportWriter().write(csv_path, result)
    ExcelReportWriter().write(xlsx_path, result)

    csv_rows = read_csv(csv_path)[1:5]
    excel_rows = sheet_rows(xlsx_path)[RESULTS_SHEET][1:]
    assert [(r[0], r[3], r[4]) for r in excel_rows] == [(r[0], r[3], r[4]) for r in csv_rows]
