# repository/memory_config_repository.py
import logging
from typing import Dict, List
from repository.config_repository import ConfigRepository
from util.enums import Backend
from util.functions import check_segment
from util.locks import ReadWriteLock

logger = logging.getLogger(__name__)


class MemoryConfigRepository(ConfigRepository):
    """
    Two-level dict namespace -> name -> bytes behind one reader/writer lock.
    Contents vanish with the process.
    """

    backend = Backend.MEMORY

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._data: Dict[str, Dict[str, bytes]] = {}

    def store(self, namespace: str, name: str, content: bytes) -> None:
        check_segment(namespace, "namespace")
        check_segment(name, "name")
        # Copy so later mutation of a caller's bytearray cannot leak in.
        blob = bytes(content)
        with self._lock.write():
            self._data.setdefault(namespace, {})[name] = blob
        logger.debug("memory.store ns=%s name=%s bytes=%d", namespace, name, len(blob))

    def get(self, namespace: str, name: str) -> bytes:
        check_segment(namespace, "namespace")
        check_segment(name, "name")
        with self._lock.read():
            entries = self._data.get(namespace)
            if entries is None or name not in entries:
                raise self._not_found(namespace, name)
            return entries[name]

    def delete(self, namespace: str, name: str) -> None:
        check_segment(namespace, "namespace")
        check_segment(name, "name")
        with self._lock.write():
            entries = self._data.get(namespace)
            if entries is None or name not in entries:
                raise self._not_found(namespace, name)
            del entries[name]
            if not entries:
                del self._data[namespace]
        logger.debug("memory.delete ns=%s name=%s", namespace, name)

    def list(self, namespace: str) -> List[str]:
        check_segment(namespace, "namespace")
        with self._lock.read():
            return sorted(self._data.get(namespace, ()))

    def namespaces(self) -> List[str]:
        with self._lock.read():
            return sorted(self._data)
