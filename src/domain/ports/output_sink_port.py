"""
Port (interface) for output sinks.
Infrastructure adapters (e.g. FileSystemOutputSink, S3OutputSink) must implement
this interface; the use case never knows how the archive reaches the user.
"""

from abc import ABC, abstractmethod


class IOutputSink(ABC):
    @abstractmethod
    def emit(self, name: str, content: bytes) -> None:
        """Deliver *content* under the file name *name*."""
        ...
