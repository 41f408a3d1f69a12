# tests/conftest.py
from __future__ import annotations
import shutil
import tempfile
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.core import config
from app.utils.storage import StorageGateway

import fitz  # PyMuPDF

# --------------------------------------------------------------------
# Temporary UPLOAD_DIR so tests don't write into ./Upload
# --------------------------------------------------------------------
@pytest.fixture(scope="session")
def tmp_upload_dir() -> Generator[str, None, None]:
    d = tempfile.mkdtemp(prefix="test-upload-")
    yield d
    shutil.rmtree(d, ignore_errors=True)

@pytest.fixture(autouse=True, scope="session")
def patch_upload_dir(tmp_upload_dir):
    config.UPLOAD_DIR = tmp_upload_dir

# --------------------------------------------------------------------
# FastAPI test client available as fixture `client`
# --------------------------------------------------------------------
@pytest.fixture(scope="session")
def client() -> TestClient:
    return TestClient(app, raise_server_exceptions=False)

# --------------------------------------------------------------------
# Gateway on a per-test directory, for unit tests
# --------------------------------------------------------------------
@pytest.fixture
def storage(tmp_path) -> StorageGateway:
    return StorageGateway(tmp_path / "Upload")

# --------------------------------------------------------------------
# Sample payloads
# --------------------------------------------------------------------
def _pdf_bytes(text: str) -> bytes:
    doc = fitz.open()
    page = doc.new_page()
    page.insert_text((72, 100), text, fontsize=12)
    data = doc.tobytes()
    doc.close()
    return data

@pytest.fixture
def sample_pdf_bytes() -> bytes:
    return _pdf_bytes("Quarterly report, page one.")

@pytest.fixture
def sample_png_bytes() -> bytes:
    # PNG signature plus filler; the service never decodes images
    return b"\x89PNG\r\n\x1a\n" + b"\x00" * 24
