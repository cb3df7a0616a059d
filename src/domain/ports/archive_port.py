"""
Port (interface) for archive builders.
Infrastructure adapters (e.g. ZipArchiveBuilder) must implement this interface.
"""

from abc import ABC, abstractmethod


class IArchiveBuilder(ABC):
    @abstractmethod
    def add(self, path: str, content: bytes) -> None:
        """Add an entry at *path*. An existing entry at the same path is replaced."""
        ...

    @abstractmethod
    def names(self) -> list[str]:
        """Return the entry paths currently in the archive, in insertion order."""
        ...

    @abstractmethod
    def to_bytes(self) -> bytes:
        """Serialize all entries into a single binary blob."""
        ...
