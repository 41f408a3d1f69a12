import os
import shutil
import logging
from pathlib import Path
from typing import BinaryIO, Iterable, NamedTuple

from fastapi import UploadFile
from starlette.concurrency import run_in_threadpool

from app.core.config import ALLOWED_EXTENSIONS, COPY_CHUNK_BYTES, FILE_ROUTE_PREFIX
from app.models.file_descriptor import FileDescriptor

log = logging.getLogger("storage")


class InvalidFileName(ValueError):
    ...


class IncomingFile(NamedTuple):
    file_name: str
    extension: str
    stream: BinaryIO
    length: int


def check_file_name(file_name: str) -> str:
    if not file_name or file_name in (".", ".."):
        raise InvalidFileName(f"Invalid file name: {file_name!r}")
    if any(sep in file_name for sep in ("/", "\\", "\x00")):
        raise InvalidFileName(f"File name must not contain path separators: {file_name!r}")
    return file_name


def _stream_length(stream: BinaryIO) -> int:
    pos = stream.tell()
    stream.seek(0, os.SEEK_END)
    end = stream.tell()
    stream.seek(pos)
    return end - pos


def file_extension(file_name: str) -> str:
    # ".pdf" alone counts as a .pdf file; a trailing dot means no extension
    dot = file_name.rfind(".")
    if dot < 0 or dot == len(file_name) - 1:
        return ""
    return file_name[dot:]


def incoming_from_upload(file: UploadFile) -> IncomingFile:
    # clients may send "dir/name.pdf"; only the last segment is kept
    name = os.path.basename((file.filename or "").replace("\\", "/"))
    ext = file_extension(name)
    length = file.size if file.size is not None else _stream_length(file.file)
    return IncomingFile(name, ext, file.file, length)


class StorageGateway:
    """
    Flat on-disk file store rooted at ``base_dir``.

    Files are keyed by their name only; a second upload with the same name
    overwrites the first. Disk work runs in the threadpool so a slow write
    does not hold up other requests.
    """

    def __init__(self, base_dir, allowed_extensions: Iterable[str] = ALLOWED_EXTENSIONS):
        self.base_dir = Path(base_dir)
        self.allowed_extensions = {e.lower() for e in allowed_extensions}

    def path_for(self, file_name: str) -> Path:
        return self.base_dir / check_file_name(file_name)

    def is_allowed(self, extension: str) -> bool:
        return (extension or "").lower() in self.allowed_extensions

    async def upload(
        self,
        file_name: str,
        extension: str,
        stream: BinaryIO,
        length: int,
        request_host: str,
    ) -> FileDescriptor:
        if not self.is_allowed(extension):
            log.info("Rejected %r: extension %r not allowed", file_name, extension)
            return FileDescriptor.rejected("rejected_extension")
        if length <= 0:
            log.info("Rejected %r: empty file", file_name)
            return FileDescriptor.rejected("rejected_empty")

        dest = self.path_for(file_name)
        await run_in_threadpool(self._write, dest, stream)
        log.info("Stored %s (%d bytes)", dest, length)
        return FileDescriptor(
            document_name=file_name,
            document_type=extension,
            document_url=f"{request_host}{FILE_ROUTE_PREFIX}/{file_name}",
            status="stored",
        )

    async def upload_many(self, files: Iterable[IncomingFile], request_host: str) -> list[FileDescriptor]:
        # a failing item stops the batch; files written before it stay on disk
        return [
            await self.upload(f.file_name, f.extension, f.stream, f.length, request_host)
            for f in files
        ]

    async def fetch(self, file_name: str) -> bytes:
        path = self.path_for(file_name)
        return await run_in_threadpool(path.read_bytes)

    def _write(self, dest: Path, stream: BinaryIO) -> None:
        dest.parent.mkdir(parents=True, exist_ok=True)
        with open(dest, "wb") as out:
            shutil.copyfileobj(stream, out, COPY_CHUNK_BYTES)
