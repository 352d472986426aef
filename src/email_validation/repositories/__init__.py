"""Repository layer for file access.

This layer hides the tabular file formats behind protocol-based
interfaces. This enables:
- Easy swapping of implementations (CSV ↔ Excel, new formats later)
- Unit testing with fake implementations
- Clear separation of concerns

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from email_validation.protocols import AddressExtractor, ReportWriter

from .csv_extractor import CsvAddressExtractor
from .csv_report_writer import CsvReportWriter
from .excel_extractor import ExcelAddressExtractor
from .excel_report_writer import ExcelReportWriter

__all__ = [
    "AddressExtractor",
    "ReportWriter",
    "CsvAddressExtractor",
    "CsvReportWriter",
    "ExcelAddressExtractor",
    "ExcelReportWriter",
]
