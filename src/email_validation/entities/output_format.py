"""Report output format."""

from enum import Enum


class OutputFormat(str, Enum):
    """Report formats a caller may request."""

    CSV = "csv"
    EXCEL = "excel"

    @property
    def extension(self) -> str:
        """File extension of the generated report."""
        return ".xlsx" if self is OutputFormat.EXCEL else ".csv"

    @property
    def media_type(self) -> str:
        """Content type used when the report is downloaded."""
        return media_type_for(self.extension)


def media_type_for(extension: str) -> str:
    """Content type for a report file extension."""
    extension = extension.lower()
    if extension == ".csv":
        return "text/csv"
    if extension in (".xlsx", ".xls"):
        return "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    return "application/octet-stream"
