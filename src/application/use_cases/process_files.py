"""
Use-case: turn an uploaded HTML document (and optional JS file) into an archive of
per-function script files plus a rewritten HTML page that references them.
Depends only on Domain ports and entities; no infrastructure imports.
"""

import logging
from typing import Callable, Optional

from src.application.services.function_extractor import extract_functions
from src.application.services.function_packager import FunctionPackager
from src.application.services.html_rewriter import HtmlRewriter
from src.domain.entities.processing_result import ProcessingResult, ProcessingStatus
from src.domain.errors import DigestPathMismatchError, MissingRequiredInputError
from src.domain.ports.archive_port import IArchiveBuilder
from src.domain.ports.digest_port import IDigestProvider
from src.domain.ports.output_sink_port import IOutputSink
from src.domain.ports.source_file_port import ISourceFile

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Processing complete! Download your ZIP file."
MISSING_HTML_MESSAGE = "Please upload an HTML file"
FAILURE_MESSAGE = "An error occurred while processing the files."


class ProcessFilesUseCase:
    def __init__(
        self,
        digest: IDigestProvider,
        archive_factory: Callable[[], IArchiveBuilder],
        sink: IOutputSink,
        archive_name: str = "functions.zip",
        html_entry_name: str = "updated_file.html",
    ) -> None:
        """
        Args:
            digest:          IDigestProvider shared by packaging and rewriting.
            archive_factory: Returns a fresh, empty IArchiveBuilder for each run.
            sink:            IOutputSink that receives the serialized archive.
            archive_name:    File name the archive is emitted under.
            html_entry_name: Archive path of the rewritten HTML document.
        """
        self._archive_factory = archive_factory
        self._sink = sink
        self._archive_name = archive_name
        self._html_entry_name = html_entry_name
        self._packager = FunctionPackager(digest)
        self._rewriter = HtmlRewriter(digest)

    async def execute(
        self,
        html_file: Optional[ISourceFile],
        js_file: Optional[ISourceFile] = None,
    ) -> ProcessingResult:
        """Run one extraction and emit the archive through the sink.

        Never raises: a missing HTML file and any processing failure are returned
        as ProcessingResult values for the caller to render.
        """
        try:
            return await self._run(html_file, js_file)
        except MissingRequiredInputError:
            logger.info("Rejected submission without an HTML file.")
            return ProcessingResult(ProcessingStatus.MISSING_INPUT, MISSING_HTML_MESSAGE)
        except Exception:
            logger.exception("Error processing files")
            return ProcessingResult(ProcessingStatus.FAILED, FAILURE_MESSAGE)

    async def _run(
        self,
        html_file: Optional[ISourceFile],
        js_file: Optional[ISourceFile],
    ) -> ProcessingResult:
        if html_file is None:
            raise MissingRequiredInputError("An HTML file is required.")

        html_content = await html_file.read_text()
        js_content = await js_file.read_text() if js_file is not None else ""

        html_functions = extract_functions(html_content)
        js_functions = extract_functions(js_content)
        logger.info(
            "Extracted %d function(s) from %s and %d from %s.",
            len(html_functions),
            html_file.name,
            len(js_functions),
            js_file.name if js_file is not None else "<no js file>",
        )

        archive = self._archive_factory()
        entries = self._packager.package(html_functions, archive)
        entries += self._packager.package(js_functions, archive)

        updated_html = self._rewriter.rewrite(html_content, html_functions)
        script_paths = self._rewriter.script_paths(html_functions)
        self._check_consistency(script_paths, archive)
        archive.add(self._html_entry_name, updated_html.encode("utf-8"))

        self._sink.emit(self._archive_name, archive.to_bytes())
        return ProcessingResult(
            status=ProcessingStatus.SUCCESS,
            message=SUCCESS_MESSAGE,
            archive_name=self._archive_name,
            function_count=len({entry.path for entry in entries}),
            script_paths=script_paths,
        )

    @staticmethod
    def _check_consistency(script_paths: list[str], archive: IArchiveBuilder) -> None:
        """Every script reference in the rewritten HTML must resolve inside the archive."""
        archived = set(archive.names())
        missing = [path for path in script_paths if path not in archived]
        if missing:
            raise DigestPathMismatchError(missing)
