"""
CLI entry point for one-off extraction runs.

This script is the Composition Root for local runs: it wires the digest, archive
and output-sink adapters to ProcessFilesUseCase and processes the given files.
The archive goes to OUTPUT_S3_BUCKET when that variable is set, otherwise into
the --out directory.

    python -m src.infrastructure.entrypoints.cli page.html --js app.js --out dist
"""

import argparse
import asyncio
import logging
import sys
from typing import Optional

from src.application.use_cases.process_files import ProcessFilesUseCase
from src.domain.entities.processing_result import ProcessingStatus
from src.domain.ports.output_sink_port import IOutputSink
from src.infrastructure.archive.zip_archive_builder import ZipArchiveBuilder
from src.infrastructure.config import AppConfig
from src.infrastructure.digest.sha256_digest import Sha256DigestProvider
from src.infrastructure.output.filesystem_sink import FileSystemOutputSink
from src.infrastructure.sources.local_source import LocalSourceFile

_EXIT_CODES = {
    ProcessingStatus.SUCCESS: 0,
    ProcessingStatus.FAILED: 1,
    ProcessingStatus.MISSING_INPUT: 2,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Split inline JavaScript functions out of an HTML page into a zip archive.",
    )
    parser.add_argument("html", nargs="?", help="HTML document to process")
    parser.add_argument("--js", help="optional JavaScript file whose functions are archived too")
    parser.add_argument("--out", help="output directory (defaults to OUTPUT_DIR)")
    return parser


def build_sink(config: AppConfig, out_dir: Optional[str]) -> IOutputSink:
    if config.output_s3_bucket:
        from src.infrastructure.output.s3_sink import S3OutputSink

        return S3OutputSink(config.output_s3_bucket, prefix=config.output_s3_prefix)
    return FileSystemOutputSink(out_dir or config.output_dir)


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = AppConfig.from_env()
    logging.basicConfig(level=config.log_level, format="%(asctime)s - %(levelname)s - %(message)s")

    use_case = ProcessFilesUseCase(
        digest=Sha256DigestProvider(length=config.digest_length),
        archive_factory=ZipArchiveBuilder,
        sink=build_sink(config, args.out),
        archive_name=config.archive_name,
        html_entry_name=config.updated_html_name,
    )
    html_file = LocalSourceFile(args.html) if args.html else None
    js_file = LocalSourceFile(args.js) if args.js else None

    result = asyncio.run(use_case.execute(html_file, js_file))
    print(result.message)
    return _EXIT_CODES[result.status]


if __name__ == "__main__":
    sys.exit(main())
