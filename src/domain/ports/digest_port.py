"""
Port (interface) for digest providers.
Infrastructure adapters (e.g. Sha256DigestProvider) must implement this interface.

A single synchronous contract is shared by the packager and the HTML rewriter so
archive folder names and script references always come from the same computation.
"""

from abc import ABC, abstractmethod


class IDigestProvider(ABC):
    @abstractmethod
    def digest(self, value: str) -> str:
        """Return a deterministic hex identifier for *value*."""
        ...
