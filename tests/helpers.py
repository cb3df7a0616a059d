"""Shared helpers for the test suite."""

import hashlib
import io
import zipfile

from src.domain.ports.source_file_port import ISourceFile


class FakeSourceFile(ISourceFile):
    """In-memory ISourceFile; raises *error* on read when given one."""

    def __init__(self, text: str = "", name: str = "file", error: Exception | None = None):
        self.name = name
        self._text = text
        self._error = error

    async def read_text(self) -> str:
        if self._error is not None:
            raise self._error
        return self._text


def sha256_hex(value: str) -> str:
    return hashlib.sha256(value.encode("utf-8")).hexdigest()


def read_zip(data: bytes) -> dict[str, str]:
    """Return {member name: decoded content} for a zip blob."""
    with zipfile.ZipFile(io.BytesIO(data)) as zf:
        return {name: zf.read(name).decode("utf-8") for name in zf.namelist()}
