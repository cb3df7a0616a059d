"""
Infrastructure adapter: FastAPI UploadFile → ISourceFile.
"""

from typing import Optional

from fastapi import UploadFile

from src.domain.ports.source_file_port import ISourceFile


class UploadedSourceFile(ISourceFile):
    def __init__(self, upload: UploadFile) -> None:
        self._upload = upload
        self.name = upload.filename or "upload"

    async def read_text(self) -> str:
        data = await self._upload.read()
        return data.decode("utf-8-sig", errors="replace")

    @classmethod
    def from_upload(cls, upload: Optional[UploadFile]) -> Optional["UploadedSourceFile"]:
        """Wrap *upload*, treating a missing part or an unselected file as absent.

        Browsers submit an empty part with an empty filename for file inputs left blank.
        """
        if upload is None or not upload.filename:
            return None
        return cls(upload)
