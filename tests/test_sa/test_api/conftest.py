import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_cover_storage
from api.main import app
from core.sa.database import get_db
from core.utils.image import CoverStorage

@pytest.fixture
def client(db_session, tmp_path):
    """TestClient bound to the test session. Startup hooks are not run."""
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_cover_storage] = lambda: CoverStorage(str(tmp_path / "covers"))
    yield TestClient(app)
    app.dependency_overrides.clear()

@pytest.fixture
def auth():
    """Build the gateway headers identifying a user."""
    def headers(user) -> dict:
        return {"X-User-Id": str(user.id)}
    return headers
