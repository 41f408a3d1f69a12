from fastapi import APIRouter, Depends, HTTPException, Path
from fastapi.responses import Response

from app.api.deps import get_storage
from app.core.config import FILE_ROUTE_PREFIX
from app.utils.storage import InvalidFileName, StorageGateway, file_extension

router = APIRouter(prefix=FILE_ROUTE_PREFIX, tags=["file"])


def media_type_for(file_name: str) -> str:
    ext = file_extension(file_name).replace(".", "")
    return f"application/{ext}" if ext else "application/octet-stream"


@router.get("/{file_name}")
async def get_file(
    file_name: str = Path(..., description="Name the file was uploaded under, e.g. photo.jpg"),
    storage: StorageGateway = Depends(get_storage),
):
    try:
        data = await storage.fetch(file_name)
    except InvalidFileName as e:
        raise HTTPException(status_code=400, detail=str(e))
    # OSError (missing / unreadable file) goes to the app-level handler
    return Response(content=data, media_type=media_type_for(file_name))
