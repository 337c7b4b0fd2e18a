"""
File-based snapshot of the last successful rates response.

The file is shared between processes on the host. Writes replace the whole
file atomically; reads that fail after a positive validity check are treated
as a cache miss.
"""

import logging
import os
import tempfile
import time
from typing import Optional

from apps.exchange.domain.interfaces import BaseSnapshotStore

logger = logging.getLogger(__name__)

# Process umask, read once; os.umask can only be queried by setting it
_UMASK = os.umask(0)
os.umask(_UMASK)

SNAPSHOT_MODE = 0o644 & ~_UMASK


class FileSnapshotStore(BaseSnapshotStore):

    def __init__(self, path: str, ttl_seconds: int):
        self.path = path
        self.ttl_seconds = ttl_seconds

    def is_valid(self) -> bool:
        """
        True if the snapshot exists and is no older than the TTL.
        A missing file is simply invalid, never an error.
        """
        try:
            modified_at = os.path.getmtime(self.path)
        except OSError:
            return False
        return time.time() <= modified_at + self.ttl_seconds

    def read(self) -> Optional[bytes]:
        try:
            with open(self.path, "rb") as f:
                return f.read()
        except OSError as e:
            logger.warning(f"Could not read rates snapshot {self.path}: {e}")
            return None

    def write(self, body: bytes) -> bool:
        directory = os.path.dirname(os.path.abspath(self.path))
        tmp_path = None
        try:
            fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".daily_json.", suffix=".tmp")
            with os.fdopen(fd, "wb") as f:
                f.write(body)
            os.chmod(tmp_path, SNAPSHOT_MODE)
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.warning(f"Could not save rates snapshot {self.path}: {e}")
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            return False

        logger.info(f"Saved rates snapshot to {self.path}")
        return True
