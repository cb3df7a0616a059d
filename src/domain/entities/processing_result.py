"""
Domain entity describing the outcome of one processing run.
Returned to the caller instead of being stored as process-wide UI state.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class ProcessingStatus(str, Enum):
    SUCCESS = "success"
    MISSING_INPUT = "missing_input"
    FAILED = "failed"


@dataclass(frozen=True)
class ProcessingResult:
    status: ProcessingStatus
    message: str
    archive_name: Optional[str] = None
    function_count: int = 0
    script_paths: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status is ProcessingStatus.SUCCESS
