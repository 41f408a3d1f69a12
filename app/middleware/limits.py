import logging

from starlette.requests import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse
from app.core import config

log = logging.getLogger("limits")

class BodySizeLimitMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        cl = request.headers.get("content-length")
        try:
            too_large = cl is not None and int(cl) > config.MAX_UPLOAD_BYTES
        except ValueError:
            return JSONResponse(status_code=400, content={"detail": "Bad Content-Length"})
        if too_large:
            log.warning("Refused %s %s: body of %s bytes", request.method, request.url.path, cl)
            return JSONResponse(status_code=413, content={"detail": "File too large"})
        return await call_next(request)
