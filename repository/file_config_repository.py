# repository/file_config_repository.py
import logging
import os
import tempfile
from typing import List
from repository.config_repository import ConfigRepository
from util.constants import RESERVED_SUFFIX
from util.enums import Backend
from util.errors import StorageIOError
from util.functions import check_segment
from util.locks import ReadWriteLock
from util.timing import timed

logger = logging.getLogger(__name__)

TMP_SUFFIX = RESERVED_SUFFIX
DIR_MODE = 0o755
FILE_MODE = 0o644


class FileConfigRepository(ConfigRepository):
    """
    One file per entry at <base_dir>/<namespace>/<name>, bytes as stored.

    Flow (store):
    - mkdir -p the namespace directory.
    - Write into a temp file beside the target, fsync, then os.replace() over it,
      so readers see either the old or the new content.
    - A crash mid-write can leave a *.yamlet-tmp file behind; list() hides those.

    The lock serializes this instance only. Other processes writing the same
    tree are not coordinated with.
    Empty namespace directories are left in place after the last delete.
    """

    backend = Backend.FILE

    def __init__(self, base_dir: str) -> None:
        self._base_dir = os.path.abspath(base_dir)
        self._lock = ReadWriteLock()

    @property
    def base_dir(self) -> str:
        return self._base_dir

    def _namespace_dir(self, namespace: str) -> str:
        return os.path.join(self._base_dir, check_segment(namespace, "namespace"))

    def _path(self, namespace: str, name: str) -> str:
        return os.path.join(self._namespace_dir(namespace), check_segment(name, "name"))

    def store(self, namespace: str, name: str, content: bytes) -> None:
        path = self._path(namespace, name)
        directory = os.path.dirname(path)
        with self._lock.write(), timed(logger, "file.store", ns=namespace, config=name):
            try:
                os.makedirs(directory, mode=DIR_MODE, exist_ok=True)
            except OSError as e:
                logger.error("file.mkdir.error dir=%s err=%s", directory, e)
                raise StorageIOError(f"failed to create directory {directory}") from e
            self._write_replace(directory, path, bytes(content))

    @staticmethod
    def _write_replace(directory: str, path: str, content: bytes) -> None:
        fd, tmp = tempfile.mkstemp(
            dir=directory, prefix=f".{os.path.basename(path)}.", suffix=TMP_SUFFIX
        )
        try:
            with os.fdopen(fd, "wb") as fh:
                fh.write(content)
                fh.flush()
                os.fsync(fh.fileno())
            os.chmod(tmp, FILE_MODE)
            os.replace(tmp, path)
        except OSError as e:
            logger.error("file.write.error path=%s err=%s", path, e)
            try:
                os.unlink(tmp)
            except FileNotFoundError:
                pass
            raise StorageIOError(f"failed to write file {path}") from e

    def get(self, namespace: str, name: str) -> bytes:
        path = self._path(namespace, name)
        with self._lock.read():
            try:
                with open(path, "rb") as fh:
                    return fh.read()
            except FileNotFoundError:
                raise self._not_found(namespace, name) from None
            except OSError as e:
                logger.error("file.read.error path=%s err=%s", path, e)
                raise StorageIOError(f"failed to read file {path}") from e

    def delete(self, namespace: str, name: str) -> None:
        path = self._path(namespace, name)
        with self._lock.write():
            try:
                os.remove(path)
            except FileNotFoundError:
                raise self._not_found(namespace, name) from None
            except OSError as e:
                logger.error("file.delete.error path=%s err=%s", path, e)
                raise StorageIOError(f"failed to delete file {path}") from e
        logger.debug("file.delete ns=%s name=%s", namespace, name)

    def list(self, namespace: str) -> List[str]:
        directory = self._namespace_dir(namespace)
        with self._lock.read():
            try:
                with os.scandir(directory) as it:
                    return sorted(
                        entry.name
                        for entry in it
                        if not entry.is_dir() and not entry.name.endswith(TMP_SUFFIX)
                    )
            except FileNotFoundError:
                return []
            except OSError as e:
                logger.error("file.list.error dir=%s err=%s", directory, e)
                raise StorageIOError(f"failed to read directory {directory}") from e

    def namespaces(self) -> List[str]:
        with self._lock.read():
            try:
                with os.scandir(self._base_dir) as it:
                    return sorted(entry.name for entry in it if entry.is_dir())
            except FileNotFoundError:
                return []
            except OSError as e:
                logger.error("file.namespaces.error dir=%s err=%s", self._base_dir, e)
                raise StorageIOError(f"failed to read directory {self._base_dir}") from e
