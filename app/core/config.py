import os

UPLOAD_DIR = os.getenv("UPLOAD_DIR", "Upload")
ALLOWED_EXTENSIONS = {".pdf", ".jpg", ".png", ".jpeg"}
MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", 50 * 1024 * 1024))  # 50 MB soft cap
COPY_CHUNK_BYTES = 1 << 20  # 1 MB

FILE_ROUTE_PREFIX = "/api/file"
