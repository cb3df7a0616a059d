"""
Port (interface) for user-supplied source files (HTML document or JS script).
Infrastructure adapters wrap HTTP uploads or local paths.
"""

from abc import ABC, abstractmethod


class ISourceFile(ABC):
    name: str

    @abstractmethod
    async def read_text(self) -> str:
        """Read the whole file and decode it as UTF-8."""
        ...
