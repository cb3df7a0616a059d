"""
Infrastructure adapter: hashlib SHA-256 → IDigestProvider.
Synchronous and deterministic, so the packager and the HTML rewriter can share one
instance and always agree on DigestKeys.
"""

import hashlib
from typing import Optional

from src.domain.ports.digest_port import IDigestProvider


class Sha256DigestProvider(IDigestProvider):
    """Hex-encoded SHA-256 of the UTF-8 input, optionally truncated."""

    def __init__(self, length: Optional[int] = None) -> None:
        if length is not None and length < 1:
            raise ValueError("digest length must be a positive integer")
        self._length = length

    def digest(self, value: str) -> str:
        hex_digest = hashlib.sha256(value.encode("utf-8")).hexdigest()
        return hex_digest[: self._length] if self._length else hex_digest
