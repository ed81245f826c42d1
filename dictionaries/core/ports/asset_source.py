# dictionaries/core/ports/asset_source.py
from typing import Protocol, runtime_checkable


@runtime_checkable
class IAssetSource(Protocol):
    """
    Port for reading raw asset content.
    Implementations could be bundled package resources, a directory on disk,
    or an in-memory fixture in tests.
    """

    def read_text(self, resource: str) -> str:
        """
        Returns the full text of a resource.

        Args:
            resource: File name relative to the source root (e.g. 'periods.json').

        Raises:
            FileNotFoundError: if the resource does not exist.
            OSError / UnicodeDecodeError: if it exists but cannot be read.
        """
        ...

    def locate(self, resource: str) -> str:
        """Returns a human-readable location for messages and logs."""
        ...
