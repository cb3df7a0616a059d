"""
Runtime configuration read from the environment (and a local .env file).
Composition roots call AppConfig.from_env() once at startup.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


@dataclass(frozen=True)
class AppConfig:
    archive_name: str = "functions.zip"
    updated_html_name: str = "updated_file.html"
    digest_length: Optional[int] = None
    output_dir: str = "output"
    output_s3_bucket: Optional[str] = None
    output_s3_prefix: str = ""
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Build the configuration from environment variables.

        Raises:
            ValueError: if DIGEST_LENGTH is set but is not a positive integer.
        """
        load_dotenv()
        return cls(
            archive_name=os.environ.get("ARCHIVE_NAME", "functions.zip"),
            updated_html_name=os.environ.get("UPDATED_HTML_NAME", "updated_file.html"),
            digest_length=_parse_digest_length(os.environ.get("DIGEST_LENGTH")),
            output_dir=os.environ.get("OUTPUT_DIR", "output"),
            output_s3_bucket=os.environ.get("OUTPUT_S3_BUCKET") or None,
            output_s3_prefix=os.environ.get("OUTPUT_S3_PREFIX", ""),
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        )


def _parse_digest_length(raw: Optional[str]) -> Optional[int]:
    if raw is None or not raw.strip():
        return None
    try:
        length = int(raw)
    except ValueError as exc:
        raise ValueError(f"DIGEST_LENGTH must be an integer, got {raw!r}") from exc
    if length < 1:
        raise ValueError(f"DIGEST_LENGTH must be positive, got {length}")
    return length
