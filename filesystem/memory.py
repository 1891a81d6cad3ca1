"""
In-memory filesystem backend.

Simulates a POSIX-like tree without touching the disk.
Every primitive call is counted so tests can assert exactly how much I/O an
operation performed.

Key features:
- Configurable umask applied to created files and directories
- Per-call counters and an ordered call log
- Controllable failure modes (unreadable or locked paths) for testing
"""

import posixpath
from collections import Counter
from typing import Optional

from filesystem.base import Contents, DirectoryEntry, RawFilesystem


class MemoryNode:
    """Internal representation of a file or directory."""

    def __init__(self, is_directory: bool, mode: int, data: bytes = b""):
        self.is_directory = is_directory
        self.mode = mode
        self.data = data


class InMemoryFilesystem(RawFilesystem):
    """
    In-memory implementation of RawFilesystem for tests and dry runs.

    Paths are normalized with posixpath. The root "/" and the current
    directory "." always exist.

    Usage:
        raw = InMemoryFilesystem(umask=0o022)
        raw.add_directory("/existing")
        raw.create_directory("/existing/new/deep", 0o777, recursive=True)
        assert raw.mode_of("/existing/new") == 0o755
        assert raw.calls["create_directory"] == 1
    """

    def __init__(self, umask: int = 0o022):
        """
        Initialize the in-memory tree.

        Args:
            umask: Bits cleared from the mode of every created node.
        """
        self._nodes: dict[str, MemoryNode] = {
            "/": MemoryNode(True, 0o755),
            ".": MemoryNode(True, 0o755),
        }
        self._umask = umask
        self._unreadable: set[str] = set()
        self._locked: set[str] = set()
        self.calls: Counter = Counter()
        self.call_log: list[tuple[str, str]] = []

    @staticmethod
    def _normalize(path: str) -> str:
        return posixpath.normpath(path) if path else "."

    def _record(self, operation: str, path: str) -> None:
        self.calls[operation] += 1
        self.call_log.append((operation, path))

    def _get(self, path: str) -> Optional[MemoryNode]:
        return self._nodes.get(self._normalize(path))

    def _require_parent(self, path: str) -> None:
        parent = posixpath.dirname(path) or "."
        node = self._nodes.get(parent)
        if node is None:
            raise FileNotFoundError(f"No such directory: {parent}")
        if not node.is_directory:
            raise NotADirectoryError(f"Not a directory: {parent}")

    def exists(self, path: str) -> bool:
        self._record("exists", path)
        return self._get(path) is not None

    def is_directory(self, path: str) -> bool:
        self._record("is_directory", path)
        node = self._get(path)
        return node is not None and node.is_directory

    def list_children(self, path: str) -> list[DirectoryEntry]:
        self._record("list_children", path)
        key = self._normalize(path)
        node = self._nodes.get(key)
        if node is None:
            raise FileNotFoundError(f"No such directory: {path}")
        if not node.is_directory:
            raise NotADirectoryError(f"Not a directory: {path}")
        if key in self._unreadable:
            raise PermissionError(f"Permission denied: {path}")

        entries = []
        for child_path, child in sorted(self._nodes.items()):
            if child_path in ("/", "."):
                continue
            if (posixpath.dirname(child_path) or ".") != key:
                continue
            entries.append(
                DirectoryEntry(
                    name=posixpath.basename(child_path),
                    path=posixpath.join(path, posixpath.basename(child_path)),
                    is_directory=child.is_directory,
                )
            )
        return entries

    def change_mode(self, path: str, mode: int) -> None:
        self._record("change_mode", path)
        key = self._normalize(path)
        node = self._nodes.get(key)
        if node is None:
            raise FileNotFoundError(f"No such file or directory: {path}")
        if key in self._locked:
            raise PermissionError(f"Operation not permitted: {path}")
        node.mode = mode

    def create_directory(
        self,
        path: str,
        mode: int = 0o777,
        recursive: bool = False,
        force: bool = False,
    ) -> bool:
        self._record("create_directory", path)
        key = self._normalize(path)
        try:
            if key in self._nodes:
                raise FileExistsError(f"File exists: {path}")
            if recursive:
                missing = []
                current = key
                while current not in self._nodes:
                    missing.append(current)
                    parent = posixpath.dirname(current) or "."
                    if parent == current:
                        break
                    current = parent
                if not self._nodes[current].is_directory:
                    raise NotADirectoryError(f"Not a directory: {current}")
                for directory in reversed(missing):
                    self._nodes[directory] = MemoryNode(True, mode & ~self._umask)
            else:
                self._require_parent(key)
                self._nodes[key] = MemoryNode(True, mode & ~self._umask)
        except OSError:
            if force:
                return False
            raise
        return True

    def write_file(self, path: str, contents: Contents, lock: bool = False) -> int:
        self._record("write_file", path)
        key = self._normalize(path)
        data = contents.encode("utf-8") if isinstance(contents, str) else contents
        node = self._nodes.get(key)
        if node is not None:
            if node.is_directory:
                raise IsADirectoryError(f"Is a directory: {path}")
            node.data = data
        else:
            self._require_parent(key)
            self._nodes[key] = MemoryNode(False, 0o666 & ~self._umask, data)
        return len(data)

    def read_file(self, path: str) -> bytes:
        self._record("read_file", path)
        node = self._get(path)
        if node is None:
            raise FileNotFoundError(f"No such file: {path}")
        if node.is_directory:
            raise IsADirectoryError(f"Is a directory: {path}")
        return node.data

    def copy_file(self, source: str, target: str) -> bool:
        self._record("copy_file", target)
        node = self._get(source)
        if node is None:
            raise FileNotFoundError(f"No such file: {source}")
        if node.is_directory:
            raise IsADirectoryError(f"Is a directory: {source}")
        key = self._normalize(target)
        existing = self._nodes.get(key)
        if existing is not None and existing.is_directory:
            key = posixpath.join(key, posixpath.basename(self._normalize(source)))
        else:
            self._require_parent(key)
        self._nodes[key] = MemoryNode(False, node.mode, node.data)
        return True

    def delete(self, path: str) -> bool:
        self._record("delete", path)
        key = self._normalize(path)
        node = self._nodes.get(key)
        if node is None:
            raise FileNotFoundError(f"No such file: {path}")
        if node.is_directory:
            raise IsADirectoryError(f"Is a directory: {path}")
        del self._nodes[key]
        return True

    # =========================================
    # Testing utilities
    # =========================================

    def add_directory(self, path: str, mode: int = 0o755) -> None:
        """Create a directory and its parents without counting calls."""
        key = self._normalize(path)
        parent = posixpath.dirname(key) or "."
        if parent != key and parent not in self._nodes:
            self.add_directory(parent, mode)
        self._nodes[key] = MemoryNode(True, mode)

    def add_file(self, path: str, data: Contents = b"", mode: int = 0o644) -> None:
        """Create a file (and missing parents) without counting calls."""
        key = self._normalize(path)
        parent = posixpath.dirname(key) or "."
        if parent not in self._nodes:
            self.add_directory(parent)
        payload = data.encode("utf-8") if isinstance(data, str) else data
        self._nodes[key] = MemoryNode(False, mode, payload)

    def mode_of(self, path: str) -> Optional[int]:
        """Current mode of a node, or None if it does not exist."""
        node = self._get(path)
        return node.mode if node else None

    def make_unreadable(self, path: str) -> None:
        """Make list_children fail for a directory."""
        self._unreadable.add(self._normalize(path))

    def lock(self, path: str) -> None:
        """Make change_mode fail for a path."""
        self._locked.add(self._normalize(path))

    def reset_calls(self) -> None:
        """Clear the call counters and log."""
        self.calls.clear()
        self.call_log.clear()
