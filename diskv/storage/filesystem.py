"""
Filesystem-backed PersistentStore.

Each key is stored as one file directly under the base path, named after
the key. Keys are NOT escaped or validated: a key containing a path
separator or ".." resolves outside the base path. Callers that accept
untrusted keys must encode or reject them before calling the store.
"""

import contextlib
import logging
import os
import tempfile
from typing import Optional

from ..exceptions import DiskvError
from .base import PersistentStore

logger = logging.getLogger(__name__)


class FileSystemStore(PersistentStore):
    """
    Stores blobs as files under a root directory.

    Attributes:
        base_path: Root directory, created recursively on construction
    """

    def __init__(self, base_path: str):
        """
        Initialize the store, creating the root directory if needed.

        Args:
            base_path: Root directory for blobs

        Raises:
            DiskvError: If the directory cannot be created
        """
        try:
            os.makedirs(base_path, exist_ok=True)
        except OSError as e:
            logger.warning(f"Cannot create base path {base_path}: {e}")
            raise DiskvError(e) from e
        self.base_path = base_path

    @property
    def location(self) -> str:
        return self.base_path

    def _path(self, key: str) -> str:
        return os.path.join(self.base_path, key)

    def write(self, key: str, data: bytes) -> None:
        """
        Write to a temp file beside the target, then rename over it.

        Readers see either the old blob or the new one, never a partial file.
        """
        path = self._path(key)
        temp_path = None
        try:
            fd, temp_path = tempfile.mkstemp(
                dir=os.path.dirname(path), prefix=f".{os.path.basename(path)}.", suffix=".tmp"
            )
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.replace(temp_path, path)
        except OSError as e:
            logger.warning(f"Write failed for key {key}: {e}")
            if temp_path is not None:
                with contextlib.suppress(OSError):
                    os.remove(temp_path)
            raise DiskvError(e) from e

    def read(self, key: str) -> Optional[bytes]:
        try:
            with open(self._path(key), "rb") as f:
                return f.read()
        except FileNotFoundError:
            return None
        except OSError as e:
            logger.warning(f"Read failed for key {key}: {e}")
            raise DiskvError(e) from e

    def remove(self, key: str) -> bool:
        try:
            os.remove(self._path(key))
        except FileNotFoundError:
            return False
        except OSError as e:
            logger.warning(f"Remove failed for key {key}: {e}")
            raise DiskvError(e) from e
        return True
