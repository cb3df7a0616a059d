"""
Application service: write each extracted function into its own archive folder.

The folder name is the DigestKey of the function name, computed through the
injected IDigestProvider; the same provider is handed to the HtmlRewriter so the
archive layout and the rewritten script references cannot drift apart.
"""

import logging

from src.domain.entities.function_fragment import ArchiveEntry, FunctionFragment
from src.domain.ports.archive_port import IArchiveBuilder
from src.domain.ports.digest_port import IDigestProvider

logger = logging.getLogger(__name__)


class FunctionPackager:
    def __init__(self, digest: IDigestProvider) -> None:
        self._digest = digest

    def package(
        self,
        fragments: list[FunctionFragment],
        archive: IArchiveBuilder,
    ) -> list[ArchiveEntry]:
        """Add one ``{digest}/{name}.js`` entry per named fragment to *archive*.

        Fragments sharing a name land on the same path; the later one wins.

        Returns:
            The entries written, in the order they were added.
        """
        entries: list[ArchiveEntry] = []
        for fragment in fragments:
            if not fragment.name:
                logger.debug("Skipping unnamed fragment: %.40r", fragment.text)
                continue
            entry = ArchiveEntry.for_function(self._digest.digest(fragment.name), fragment)
            archive.add(entry.path, entry.content)
            entries.append(entry)
        return entries
