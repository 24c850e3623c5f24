"""
Files API — managed files.

Uploads take any object exposing `filename` and `read()`; where the bytes
come from (picker, camera, disk) is up to the caller.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, Union

from backdrop_admin.models.envelope import ActionResult
from backdrop_admin.models.page import DEFAULT_LIMIT, Page, page_params
from backdrop_admin.models.site import ManagedFile
from backdrop_admin.transport.envelope import decode_action, decode_envelope
from backdrop_admin.transport.http import HttpClient


class FileSource(Protocol):
    filename: str

    def read(self) -> bytes: ...


class LocalFile:
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self.filename = self.path.name

    def read(self) -> bytes:
        return self.path.read_bytes()


class BytesFile:
    def __init__(self, filename: str, content: bytes):
        self.filename = filename
        self._content = content

    def read(self) -> bytes:
        return self._content


class FilesAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    async def list(self, page: int = 1, limit: int = DEFAULT_LIMIT) -> Page[ManagedFile]:
        """GET files/list"""
        raw = await self._http.get("files/list", params=page_params(page, limit))
        return decode_envelope(raw, Page[ManagedFile], require_data=True)

    async def upload(self, source: FileSource) -> ManagedFile:
        """Multipart upload — POST files/upload"""
        raw = await self._http.upload("files/upload", source.filename, source.read())
        return decode_envelope(raw, ManagedFile, require_data=True)

    async def delete(self, fid: int) -> ActionResult:
        """DELETE files/{fid}"""
        return decode_action(await self._http.delete(f"files/{fid}"))
