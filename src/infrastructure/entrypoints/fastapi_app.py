"""
FastAPI entry point: form upload in, functions.zip out.

This module is the Composition Root for HTTP runs: it wires the digest and archive
adapters once at startup and builds a ProcessFilesUseCase per request around an
InMemoryOutputSink whose captured bytes become the response body.

Run locally:
    uvicorn src.infrastructure.entrypoints.fastapi_app:app --reload --port 8000

    curl -F htmlFile=@page.html -F jsFile=@app.js -o functions.zip \\
        http://localhost:8000/extract
"""

import logging
from typing import Optional

from fastapi import FastAPI, File, UploadFile
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel

from src.application.use_cases.process_files import ProcessFilesUseCase
from src.domain.entities.processing_result import ProcessingStatus
from src.infrastructure.archive.zip_archive_builder import ZipArchiveBuilder
from src.infrastructure.config import AppConfig
from src.infrastructure.digest.sha256_digest import Sha256DigestProvider
from src.infrastructure.output.memory_sink import InMemoryOutputSink
from src.infrastructure.sources.upload_source import UploadedSourceFile

# ---------------------------------------------------------------------------
# Composition Root: wire shared dependencies once at startup
# ---------------------------------------------------------------------------
_config = AppConfig.from_env()
logging.basicConfig(level=_config.log_level, format="%(asctime)s - %(levelname)s - %(message)s")

_digest = Sha256DigestProvider(length=_config.digest_length)

_STATUS_CODES = {
    ProcessingStatus.MISSING_INPUT: 400,
    ProcessingStatus.FAILED: 500,
}

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(title="JavaScript Function Extractor")


class StatusResponse(BaseModel):
    status: str
    message: str


def _build_use_case(sink: InMemoryOutputSink) -> ProcessFilesUseCase:
    return ProcessFilesUseCase(
        digest=_digest,
        archive_factory=ZipArchiveBuilder,
        sink=sink,
        archive_name=_config.archive_name,
        html_entry_name=_config.updated_html_name,
    )


@app.post("/extract")
async def extract(
    htmlFile: Optional[UploadFile] = File(None),
    jsFile: Optional[UploadFile] = File(None),
):
    """Extract functions from the uploaded files and return the archive as a download."""
    sink = InMemoryOutputSink()
    result = await _build_use_case(sink).execute(
        UploadedSourceFile.from_upload(htmlFile),
        UploadedSourceFile.from_upload(jsFile),
    )

    if not result.ok or sink.content is None:
        body = StatusResponse(status=result.status.value, message=result.message)
        return JSONResponse(
            status_code=_STATUS_CODES.get(result.status, 500),
            content=body.model_dump(),
        )

    return Response(
        content=sink.content,
        media_type="application/zip",
        headers={
            "Content-Disposition": f'attachment; filename="{sink.name}"',
            "X-Status-Message": result.message,
        },
    )


@app.get("/health")
async def health():
    return {"status": "ok"}
