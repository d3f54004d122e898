# repository/config_repository.py
from abc import ABC, abstractmethod
from typing import List
from util.enums import Backend
from util.errors import NotFound


class ConfigRepository(ABC):
    """
    Contract shared by every config backend.

    - store: create or fully replace (namespace, name); namespace appears implicitly.
    - get / delete: NotFound when the namespace or the name is missing.
      Both cases carry the same message so callers cannot probe for namespaces.
    - list: names in a namespace, sorted; [] for an unknown namespace, never NotFound.
    - namespaces: namespaces currently holding state.
    """

    backend: Backend

    @abstractmethod
    def store(self, namespace: str, name: str, content: bytes) -> None: ...

    @abstractmethod
    def get(self, namespace: str, name: str) -> bytes: ...

    @abstractmethod
    def delete(self, namespace: str, name: str) -> None: ...

    @abstractmethod
    def list(self, namespace: str) -> List[str]: ...

    @abstractmethod
    def namespaces(self) -> List[str]: ...

    @staticmethod
    def _not_found(namespace: str, name: str) -> NotFound:
        return NotFound(f"config {name} not found in namespace {namespace}")
