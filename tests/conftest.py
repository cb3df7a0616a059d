"""Pytest fixtures for the function extractor tests."""

import pytest

from src.infrastructure.digest.sha256_digest import Sha256DigestProvider
from tests.helpers import FakeSourceFile


@pytest.fixture
def digest():
    """Return the production SHA-256 digest provider."""
    return Sha256DigestProvider()


@pytest.fixture
def simple_html():
    """Return the canonical single-function HTML document."""
    return "<html><body><script>function foo(){return 1;}</script></body></html>"


@pytest.fixture
def make_source():
    """Return a factory for in-memory source files."""
    return FakeSourceFile


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep configuration tests independent of the caller's environment."""
    for var in (
        "ARCHIVE_NAME",
        "UPDATED_HTML_NAME",
        "DIGEST_LENGTH",
        "OUTPUT_DIR",
        "OUTPUT_S3_BUCKET",
        "OUTPUT_S3_PREFIX",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
