# repository/factory.py
import logging
from config.settings import Settings
from repository.config_repository import ConfigRepository
from repository.file_config_repository import FileConfigRepository
from repository.memory_config_repository import MemoryConfigRepository

logger = logging.getLogger(__name__)


def build_config_repository(settings: Settings) -> ConfigRepository:
    """Pick the backend once, at startup, from USE_FILES / DATA_DIR."""
    if settings.USE_FILES:
        logger.info("storage.backend=file dir=%s", settings.DATA_DIR)
        return FileConfigRepository(settings.DATA_DIR)
    logger.info("storage.backend=memory")
    return MemoryConfigRepository()
