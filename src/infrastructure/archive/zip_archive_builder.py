"""
Infrastructure adapter: zipfile → IArchiveBuilder.

Entries are buffered until to_bytes() so that re-adding a path replaces its content
instead of producing a duplicate member in the zip.
"""

import io
import zipfile

from src.domain.ports.archive_port import IArchiveBuilder


class ZipArchiveBuilder(IArchiveBuilder):
    """Accumulates named entries and serializes them as a deflated zip archive."""

    def __init__(self, compression: int = zipfile.ZIP_DEFLATED) -> None:
        self._compression = compression
        self._entries: dict[str, bytes] = {}

    def add(self, path: str, content: bytes) -> None:
        self._entries[path] = content

    def names(self) -> list[str]:
        return list(self._entries)

    def to_bytes(self) -> bytes:
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w", compression=self._compression) as zf:
            for path, content in self._entries.items():
                zf.writestr(path, content)
        return buffer.getvalue()
