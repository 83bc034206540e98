import os
import shutil
import tempfile

_TMP_DIR = tempfile.mkdtemp(prefix="neighbornotes-tests-")
os.environ["DATABASE_PATH"] = os.path.join(_TMP_DIR, "test.db")
os.environ["DATABASE_URL"] = ""
os.environ["UPLOAD_DIR"] = os.path.join(_TMP_DIR, "uploads")
os.environ["ENV"] = "development"
os.environ["AUTH_MODE"] = "trusted"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.config import settings  # noqa: E402
from app.database import AsyncSessionLocal  # noqa: E402
from app.main import app  # noqa: E402


@pytest.fixture
def client():
    if os.path.exists(settings.DATABASE_PATH):
        os.remove(settings.DATABASE_PATH)
    shutil.rmtree(settings.UPLOAD_DIR, ignore_errors=True)
    os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def run(client):
    """Run ``fn(session, ...)`` on the app's event loop with a fresh session."""
    def _run(fn, *args, **kwargs):
        async def _call():
            async with AsyncSessionLocal() as session:
                return await fn(session, *args, **kwargs)
        return client.portal.call(_call)
    return _run


@pytest.fixture
def make_post(client):
    def _make(author_email="a@x.com", **fields):
        body = {"title": "Block Party", "content": "Sat 3pm", "author_email": author_email}
        body.update(fields)
        resp = client.post("/api/posts", json=body)
        assert resp.status_code == 200, resp.text
        return resp.json()["id"]
    return _make
