"""
Infrastructure adapter: in-process buffer → IOutputSink.
Used by the HTTP entrypoint, which returns the captured bytes as the response body.
"""

from typing import Optional

from src.domain.ports.output_sink_port import IOutputSink


class InMemoryOutputSink(IOutputSink):
    def __init__(self) -> None:
        self.name: Optional[str] = None
        self.content: Optional[bytes] = None

    def emit(self, name: str, content: bytes) -> None:
        self.name = name
        self.content = content
