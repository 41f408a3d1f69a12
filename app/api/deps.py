from fastapi import Request

from app.core import config
from app.utils.storage import StorageGateway


def get_storage() -> StorageGateway:
    # read at call time so UPLOAD_DIR can be swapped (tests patch it)
    return StorageGateway(config.UPLOAD_DIR)


def request_host(request: Request) -> str:
    return request.headers.get("host") or request.url.netloc
