"""
Infrastructure adapter: local file path → ISourceFile.
"""

from pathlib import Path

from src.domain.ports.source_file_port import ISourceFile


class LocalSourceFile(ISourceFile):
    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self.name = self._path.name

    async def read_text(self) -> str:
        return self._path.read_bytes().decode("utf-8-sig", errors="replace")
