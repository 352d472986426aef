"""Report writer protocol."""

from pathlib import Path
from typing import Protocol, runtime_checkable

from email_validation.entities import ComparisonResult


@runtime_checkable
class ReportWriter(Protocol):
    """Protocol for comparison report renderers."""

    @property
    def extensions(self) -> tuple[str, ...]:
        """Lower-case file extensions this writer produces."""
        ...

    def write(self, path: Path, result: ComparisonResult) -> None:
        """Render a comparison result to ``path``.

        Args:
            path: Destination file, overwritten if present
            result: Partitions and summary to render

        Raises:
            WriteError: If the file cannot be created or saved
        """
        ...
