from config.settings import settings
from repository.factory import build_config_repository
from repository.file_config_repository import FileConfigRepository
from repository.memory_config_repository import MemoryConfigRepository


def test_memory_backend_by_default():
    cfg = settings.model_copy(update={"USE_FILES": False})
    assert isinstance(build_config_repository(cfg), MemoryConfigRepository)


def test_file_backend_when_enabled(tmp_path):
    cfg = settings.model_copy(update={"USE_FILES": True, "DATA_DIR": str(tmp_path)})
    repo = build_config_repository(cfg)
    assert isinstance(repo, FileConfigRepository)
    assert repo.base_dir == str(tmp_path)
    repo.store("dev", "app.yaml", b"x")
    assert (tmp_path / "dev" / "app.yaml").read_bytes() == b"x"
