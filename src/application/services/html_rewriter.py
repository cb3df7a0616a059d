"""
Application service: replace inline scripts in an HTML document with references
to the extracted function files.
"""

import logging
import re

from src.domain.entities.function_fragment import FunctionFragment, script_path
from src.domain.ports.digest_port import IDigestProvider

logger = logging.getLogger(__name__)

# Non-nesting-aware: any literal </script> closes the nearest open block.
_SCRIPT_BLOCK = re.compile(r"<script\b[^<]*(?:(?!</script>)<[^<]*)*</script>", re.IGNORECASE)
_BODY_CLOSE = re.compile(r"</body>", re.IGNORECASE)


class HtmlRewriter:
    def __init__(self, digest: IDigestProvider) -> None:
        self._digest = digest

    def script_paths(self, fragments: list[FunctionFragment]) -> list[str]:
        """Script ``src`` values for *fragments*, one per named fragment, in order."""
        return [
            script_path(self._digest.digest(fragment.name), fragment.name)
            for fragment in fragments
            if fragment.name
        ]

    def rewrite(self, html: str, fragments: list[FunctionFragment]) -> str:
        """Strip every ``<script>`` block and reference *fragments* before ``</body>``.

        When the document has no ``</body>`` the generated references are dropped
        and only the script removal is applied.
        """
        paths = self.script_paths(fragments)
        tags = "".join(f'<script src="{path}"></script>\n' for path in paths)
        stripped = _SCRIPT_BLOCK.sub("", html)

        body_close = _BODY_CLOSE.search(stripped)
        if body_close is None:
            if paths:
                logger.warning(
                    "No </body> tag found; %d script reference(s) were not inserted.",
                    len(paths),
                )
            return stripped
        return stripped[: body_close.start()] + tags + stripped[body_close.start():]
