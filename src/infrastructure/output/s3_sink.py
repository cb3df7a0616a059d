"""
Infrastructure adapter: Amazon S3 → IOutputSink.

The boto3 client is created lazily from AWS_DEFAULT_REGION unless one is injected
(tests pass a stub client).
"""

import logging
import os
from typing import Any, Optional

import boto3

from src.domain.ports.output_sink_port import IOutputSink

logger = logging.getLogger(__name__)


class S3OutputSink(IOutputSink):
    """Uploads emitted files to ``s3://{bucket}/{prefix}{name}``."""

    def __init__(
        self,
        bucket: str,
        prefix: str = "",
        region: str | None = None,
        client: Optional[Any] = None,
    ) -> None:
        if not bucket:
            raise ValueError("bucket must be a non-empty string")
        self._bucket = bucket
        self._prefix = prefix
        self._client = client or boto3.client(
            "s3",
            region_name=region or os.environ.get("AWS_DEFAULT_REGION", "us-east-1"),
        )

    def emit(self, name: str, content: bytes) -> None:
        key = f"{self._prefix}{name}"
        self._client.put_object(
            Bucket=self._bucket,
            Key=key,
            Body=content,
            ContentType="application/zip" if name.endswith(".zip") else "application/octet-stream",
        )
        logger.info("Uploaded %d bytes to s3://%s/%s", len(content), self._bucket, key)
