"""
Abstract base class for raw filesystem backends.

This defines the primitive I/O contract the rest of the package builds on,
whether the backend is the local disk or an in-memory fake used in tests.

Design principles:
- Primitives only: no permission policy, no path symbols
- Failures are raised as builtin OSError subclasses
- Result objects: listings return DirectoryEntry values, not raw strings
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Union


Contents = Union[str, bytes]


@dataclass(frozen=True)
class DirectoryEntry:
    """
    One immediate child of a directory.

    The self/parent pseudo-entries are never reported. is_directory follows
    symbolic links; is_symlink tells the two apart.
    """
    name: str
    path: str
    is_directory: bool
    is_symlink: bool = False


class RawFilesystem(ABC):
    """
    Abstract interface for raw filesystem primitives.

    Implementations handle the specifics of talking to the actual storage.
    The permission and symbol layers only ever go through these methods.

    Usage:
        raw = LocalFilesystem()

        raw.create_directory("/srv/app/cache", 0o755, recursive=True)
        raw.write_file("/srv/app/cache/index.json", "{}")
        for entry in raw.list_children("/srv/app/cache"):
            print(entry.name, entry.is_directory)
    """

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Check if a file or directory exists at path."""
        pass

    @abstractmethod
    def is_directory(self, path: str) -> bool:
        """Check if path exists and is a directory."""
        pass

    @abstractmethod
    def list_children(self, path: str) -> list[DirectoryEntry]:
        """
        List the immediate children of a directory.

        Args:
            path: Directory to list

        Returns:
            One DirectoryEntry per child, without "." and ".."

        Raises:
            OSError: If the directory is missing, unreadable or not a directory
        """
        pass

    @abstractmethod
    def change_mode(self, path: str, mode: int) -> None:
        """
        Set the POSIX mode bits of path.

        Raises:
            OSError: If the path is missing or the change is not permitted
        """
        pass

    @abstractmethod
    def create_directory(
        self,
        path: str,
        mode: int = 0o777,
        recursive: bool = False,
        force: bool = False,
    ) -> bool:
        """
        Create a directory.

        Args:
            path: Directory to create
            mode: Requested mode (subject to the process umask)
            recursive: Create missing parents as well
            force: Report failure as False instead of raising

        Returns:
            True if the directory was created
        """
        pass

    @abstractmethod
    def write_file(self, path: str, contents: Contents, lock: bool = False) -> int:
        """
        Write contents to a file, replacing it if present.

        Args:
            path: Target file
            contents: Text or bytes to write
            lock: Hold an exclusive lock while writing

        Returns:
            Number of bytes written
        """
        pass

    @abstractmethod
    def read_file(self, path: str) -> bytes:
        """Read the full contents of a file."""
        pass

    @abstractmethod
    def copy_file(self, source: str, target: str) -> bool:
        """Copy a file to a new location. Returns True on success."""
        pass

    @abstractmethod
    def delete(self, path: str) -> bool:
        """Delete a file. Returns True if something was removed."""
        pass


class FilesystemError(Exception):
    """Base exception for filesystem configuration errors."""
    pass


class InvalidPermissionMaskError(FilesystemError, ValueError):
    """Permission mask is not a valid octal mode in 0..0o777."""
    pass


class InvalidPathSymbolError(FilesystemError, ValueError):
    """Path symbol key is not exactly one character."""
    pass
