"""
Infrastructure adapter: local directory → IOutputSink.
"""

import logging
from pathlib import Path

from src.domain.ports.output_sink_port import IOutputSink

logger = logging.getLogger(__name__)


class FileSystemOutputSink(IOutputSink):
    """Writes each emitted file into *directory*, creating it on first use."""

    def __init__(self, directory: str | Path) -> None:
        self._directory = Path(directory)

    def emit(self, name: str, content: bytes) -> None:
        self._directory.mkdir(parents=True, exist_ok=True)
        target = self._directory / name
        target.write_bytes(content)
        logger.info("Wrote %d bytes to %s", len(content), target)

    @property
    def directory(self) -> Path:
        return self._directory
