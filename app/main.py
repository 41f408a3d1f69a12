import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from app.api.routes_upload import router as upload_router
from app.middleware.limits import BodySizeLimitMiddleware
from app.api.routes_download import router as download_router

log = logging.getLogger("app")

app = FastAPI(title="FileStorageService")

app.add_middleware(BodySizeLimitMiddleware)

@app.exception_handler(OSError)
async def storage_error(request: Request, exc: OSError):
    log.exception("Storage failure on %s", request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Storage failure"})

@app.get("/health")
def health():
    return {"status": "ok"}

app.include_router(upload_router)
app.include_router(download_router)
