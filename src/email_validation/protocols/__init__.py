"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Easy swapping of implementations (CSV → Excel, shallow → strict checks)
- Unit testing with fake implementations
- Clear separation of concerns

Usage:
    ```python
    from email_validation.protocols import AddressExtractor

    extractor: AddressExtractor = CsvAddressExtractor()    # works
    extractor: AddressExtractor = ExcelAddressExtractor()  # also works
    ```
"""

from .address_extractor import AddressExtractor
from .report_writer import ReportWriter
from .validation_policy import ValidationPolicy

__all__ = [
    "AddressExtractor",
    "ReportWriter",
    "ValidationPolicy",
]
