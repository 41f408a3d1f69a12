from typing import List

from fastapi import APIRouter, Depends, File, UploadFile

from app.api.deps import get_storage, request_host
from app.core.config import FILE_ROUTE_PREFIX
from app.models.file_descriptor import FileDescriptor
from app.utils.storage import StorageGateway, incoming_from_upload

router = APIRouter(prefix=FILE_ROUTE_PREFIX, tags=["file"])


@router.post("/uploadFile", response_model=FileDescriptor)
async def upload_file(
    file: UploadFile = File(...),
    storage: StorageGateway = Depends(get_storage),
    host: str = Depends(request_host),
):
    # incoming_from_upload reduces the name to a basename, so the gateway's
    # InvalidFileName check cannot trip here
    return await storage.upload(*incoming_from_upload(file), request_host=host)


@router.post("/uploadMultipleFiles", response_model=List[FileDescriptor])
async def upload_multiple_files(
    files: List[UploadFile] = File(...),
    storage: StorageGateway = Depends(get_storage),
    host: str = Depends(request_host),
):
    return await storage.upload_many((incoming_from_upload(f) for f in files), host)
