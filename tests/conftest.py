import pytest
from fastapi.testclient import TestClient
from main import create_app
from repository.file_config_repository import FileConfigRepository
from repository.memory_config_repository import MemoryConfigRepository
from service.token_auth_service import TokenAuthService

ADMIN = "admin-secret"


@pytest.fixture
def auth():
    return TokenAuthService(
        admin_token=ADMIN,
        bindings="dev-token:dev, test-token:test",
        dev_fallback=False,
    )


@pytest.fixture(params=["memory", "file"])
def repo(request, tmp_path):
    if request.param == "memory":
        return MemoryConfigRepository()
    return FileConfigRepository(str(tmp_path / "data"))


@pytest.fixture
def app(repo, auth):
    return create_app(store=repo, auth=auth)


@pytest.fixture
def client(app):
    return TestClient(app)
