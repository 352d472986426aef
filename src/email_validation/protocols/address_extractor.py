"""Address extractor protocol.

Defines the interface for anything that can stream candidate addresses out
of one tabular file.

Implementations include:
- CSV files (default for ``.csv``)
- Excel workbooks (``.xlsx`` / ``.xls``)
"""

from collections.abc import Iterator
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class AddressExtractor(Protocol):
    """Protocol for tabular address sources.

    Any type that implements these members satisfies the protocol, no
    explicit inheritance needed.
    """

    @property
    def extensions(self) -> tuple[str, ...]:
        """Lower-case file extensions this extractor handles, e.g. (".csv",)."""
        ...

    def extract(self, path: Path) -> Iterator[str]:
        """Stream candidate addresses from a file.

        The header row is skipped. Only non-empty cells of the configured
        column containing ``@`` are yielded.

        Args:
            path: File to read

        Returns:
            Iterator of raw address strings

        Raises:
            ReadError: If the file is missing, empty or malformed
        """
        ...
