# service/config_service.py
import logging
from typing import List, Optional
from repository.config_repository import ConfigRepository
from service.token_auth_service import TokenAuthService
from util.errors import InvalidArgument

logger = logging.getLogger(__name__)


class ConfigService:
    """
    Authorization gate in front of the store: every call validates the
    token against the namespace first and only then touches the repository.
    """

    def __init__(self, store: ConfigRepository, auth: TokenAuthService) -> None:
        self._store = store
        self._auth = auth

    def store_config(
        self, namespace: str, name: str, token: Optional[str], content: bytes
    ) -> int:
        self._auth.validate(namespace, token)
        if not content:
            raise InvalidArgument("request body cannot be empty")
        self._store.store(namespace, name, content)
        logger.info("config.stored ns=%s name=%s bytes=%d", namespace, name, len(content))
        return len(content)

    def get_config(self, namespace: str, name: str, token: Optional[str]) -> bytes:
        self._auth.validate(namespace, token)
        content = self._store.get(namespace, name)
        logger.info("config.read ns=%s name=%s bytes=%d", namespace, name, len(content))
        return content

    def delete_config(self, namespace: str, name: str, token: Optional[str]) -> None:
        self._auth.validate(namespace, token)
        self._store.delete(namespace, name)
        logger.info("config.deleted ns=%s name=%s", namespace, name)

    def list_configs(self, namespace: str, token: Optional[str]) -> List[str]:
        self._auth.validate(namespace, token)
        names = self._store.list(namespace)
        logger.info("config.listed ns=%s count=%d", namespace, len(names))
        return names

    def list_namespaces(self, admin_token: Optional[str]) -> List[str]:
        self._auth.require_admin(admin_token, "listing namespaces")
        return self._store.namespaces()
