"""
Application service: locate JavaScript function definitions in raw text.

Function headers are found with a regular expression; each body is then delimited
by a bracket-depth scanner so nested blocks do not end a fragment early. Braces
inside string literals, regex literals and comments are ignored. A body the scanner
cannot close falls back to ending at the first `}` after the header. This is
text-level matching, not a JavaScript parser: arrow functions and methods are not
understood.
"""

import logging
import re
from typing import Optional

from src.domain.entities.function_fragment import FunctionFragment

logger = logging.getLogger(__name__)

_HEADER_PATTERN = re.compile(r"\bfunction\s+(\w+)\s*\(")
_QUOTES = "'\"`"
_REGEX_PRECEDERS = "(,=:[!&|?{};+-*%<>~^"
_REGEX_KEYWORDS = frozenset(
    {"return", "typeof", "case", "do", "else", "in", "of", "new", "delete", "void",
     "throw", "instanceof", "yield", "await"}
)


def extract_functions(content: str) -> list[FunctionFragment]:
    """Return every named function definition in *content*, in document order.

    A fragment runs from the ``function`` keyword through the closing brace of its
    body, plus any whitespace that directly follows. Scanning resumes after each
    fragment, so functions nested in a body stay part of their parent. When the
    body cannot be balanced the fragment ends at the first `}` after the header;
    headers with no `}` after them are skipped without error.
    """
    if not content:
        return []

    fragments: list[FunctionFragment] = []
    position = 0
    while True:
        match = _HEADER_PATTERN.search(content, position)
        if match is None:
            break
        body_end = _find_body_end(content, match.end() - 1)
        if body_end is None:
            body_end = _first_close_brace_end(content, match.end())
        if body_end is None:
            position = match.end()
            continue
        end = _skip_whitespace(content, body_end)
        fragment = FunctionFragment.from_text(content[match.start():end])
        if fragment is not None:
            fragments.append(fragment)
        position = end
    return fragments


def _find_body_end(content: str, open_paren: int) -> Optional[int]:
    """Index just past the body's closing brace, given the parameter list's ``(``."""
    close_paren = _match_bracket(content, open_paren, "(", ")")
    if close_paren is None:
        return None
    body_start = _skip_trivia(content, close_paren + 1)
    if body_start >= len(content) or content[body_start] != "{":
        return None
    close_brace = _match_bracket(content, body_start, "{", "}")
    if close_brace is None:
        return None
    return close_brace + 1


def _first_close_brace_end(content: str, start: int) -> Optional[int]:
    close = content.find("}", start)
    if close == -1:
        return None
    logger.debug("Unbalanced body at %d; ending fragment at first '}'.", start)
    return close + 1


def _match_bracket(content: str, start: int, opener: str, closer: str) -> Optional[int]:
    depth = 0
    index = start
    length = len(content)
    while index < length:
        skipped = _skip_literal(content, index)
        if skipped != index:
            index = skipped
            continue
        char = content[index]
        if char == opener:
            depth += 1
        elif char == closer:
            depth -= 1
            if depth == 0:
                return index
        index += 1
    return None


def _skip_literal(content: str, index: int) -> int:
    """Skip a string, regex literal or comment starting at *index*; return *index* otherwise."""
    char = content[index]
    if char in _QUOTES:
        return _skip_string(content, index)
    if content.startswith("//", index):
        newline = content.find("\n", index)
        return len(content) if newline == -1 else newline
    if content.startswith("/*", index):
        close = content.find("*/", index + 2)
        return len(content) if close == -1 else close + 2
    if content[index] == "/" and _regex_allowed(content, index):
        return _skip_regex(content, index)
    return index


def _skip_string(content: str, index: int) -> int:
    quote = content[index]
    cursor = index + 1
    length = len(content)
    while cursor < length:
        char = content[cursor]
        if char == "\\":
            cursor += 2
            continue
        if char == quote:
            return cursor + 1
        # Plain quotes cannot span lines; stop at the newline so a stray
        # apostrophe does not swallow the rest of the document.
        if char == "\n" and quote != "`":
            return cursor
        cursor += 1
    return length


def _skip_trivia(content: str, index: int) -> int:
    """Skip whitespace and comments."""
    while True:
        index = _skip_whitespace(content, index)
        if index < len(content) and content.startswith(("//", "/*"), index):
            index = _skip_literal(content, index)
            continue
        return index


def _skip_whitespace(content: str, index: int) -> int:
    length = len(content)
    while index < length and content[index].isspace():
        index += 1
    return index


def _regex_allowed(content: str, index: int) -> bool:
    """A ``/`` starts a regex literal unless it follows an operand (division)."""
    cursor = index - 1
    while cursor >= 0 and content[cursor].isspace():
        cursor -= 1
    if cursor < 0:
        return True
    previous = content[cursor]
    if previous in _REGEX_PRECEDERS:
        return True
    if previous.isalnum() or previous in "_$":
        start = cursor
        while start > 0 and (content[start - 1].isalnum() or content[start - 1] in "_$"):
            start -= 1
        return content[start:cursor + 1] in _REGEX_KEYWORDS
    return False


def _skip_regex(content: str, index: int) -> int:
    """Index just past the closing ``/``, or *index* when no literal closes on this line."""
    cursor = index + 1
    in_class = False
    length = len(content)
    while cursor < length:
        char = content[cursor]
        if char == "\\":
            cursor += 2
            continue
        if char == "\n":
            return index
        if in_class:
            if char == "]":
                in_class = False
        elif char == "[":
            in_class = True
        elif char == "/":
            return cursor + 1
        cursor += 1
    return index
