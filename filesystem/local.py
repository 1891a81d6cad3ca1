"""
Local disk backend.

Thin wrapper over os/shutil implementing RawFilesystem. Errors are
left as the OSError subclasses the standard library raises.
"""

import fcntl
import os
import shutil

from core.logging import get_logger
from filesystem.base import Contents, DirectoryEntry, RawFilesystem


logger = get_logger(__name__)


class LocalFilesystem(RawFilesystem):
    """RawFilesystem backed by the real disk."""

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def is_directory(self, path: str) -> bool:
        return os.path.isdir(path)

    def list_children(self, path: str) -> list[DirectoryEntry]:
        with os.scandir(path) as entries:
            return [
                DirectoryEntry(
                    name=entry.name,
                    path=entry.path,
                    is_directory=entry.is_dir(),
                    is_symlink=entry.is_symlink(),
                )
                for entry in entries
            ]

    def change_mode(self, path: str, mode: int) -> None:
        os.chmod(path, mode)

    def create_directory(
        self,
        path: str,
        mode: int = 0o777,
        recursive: bool = False,
        force: bool = False,
    ) -> bool:
        try:
            if recursive:
                os.makedirs(path, mode)
            else:
                os.mkdir(path, mode)
        except OSError as e:
            if not force:
                raise
            logger.debug("Directory creation suppressed", path=path, error=str(e))
            return False
        return True

    def write_file(self, path: str, contents: Contents, lock: bool = False) -> int:
        data = contents.encode("utf-8") if isinstance(contents, str) else contents
        with open(path, "wb") as handle:
            if lock:
                fcntl.flock(handle, fcntl.LOCK_EX)
            try:
                written = handle.write(data)
                handle.flush()
            finally:
                if lock:
                    fcntl.flock(handle, fcntl.LOCK_UN)
        return written

    def read_file(self, path: str) -> bytes:
        with open(path, "rb") as handle:
            return handle.read()

    def copy_file(self, source: str, target: str) -> bool:
        shutil.copy(source, target)
        return True

    def delete(self, path: str) -> bool:
        os.remove(path)
        return True
