"""
Domain entities for extracted JavaScript functions and their archive entries.
Zero external dependencies: pure Python dataclasses only.
"""

import re
from dataclasses import dataclass
from typing import Optional

_NAME_PATTERN = re.compile(r"function\s+(\w+)")


def function_name(text: str) -> Optional[str]:
    """Return the first identifier following the ``function`` keyword, if any."""
    match = _NAME_PATTERN.search(text)
    return match.group(1) if match else None


@dataclass(frozen=True)
class FunctionFragment:
    text: str
    name: str

    @classmethod
    def from_text(cls, text: str) -> Optional["FunctionFragment"]:
        """Build a fragment from raw source, or None when no name can be derived."""
        name = function_name(text)
        if not name:
            return None
        return cls(text=text, name=name)


@dataclass(frozen=True)
class ArchiveEntry:
    path: str
    content: bytes

    @classmethod
    def for_function(cls, digest_key: str, fragment: FunctionFragment) -> "ArchiveEntry":
        return cls(
            path=script_path(digest_key, fragment.name),
            content=fragment.text.encode("utf-8"),
        )


def script_path(digest_key: str, name: str) -> str:
    """Archive path (and script ``src``) of a function: ``{digest_key}/{name}.js``."""
    return f"{digest_key}/{name}.js"
