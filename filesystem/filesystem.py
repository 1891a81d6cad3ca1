"""
Filesystem facade.

Combines a raw backend with the permission and symbol layers behind one
object. Callers create it once (usually through the factory) and use it for
every mutation that should end up at the configured permission levels.
"""

from typing import Any, Literal, Mapping, Optional, Union

from filesystem import helpers
from filesystem.base import Contents, DirectoryEntry, RawFilesystem
from filesystem.permissions import PermissionNormalizer
from filesystem.policy import PermissionPolicy
from filesystem.symbols import PathSymbolResolver


class Filesystem:
    """
    File helper with permission policy and path symbols.

    Configuration is fixed at construction time.

    Usage:
        fs = Filesystem(
            LocalFilesystem(),
            policy=PermissionPolicy.from_masks("644", "755"),
            symbols={"$": "/srv/app/plugins"},
        )
        target = fs.symbolize_path("$/acme/crm/config.yaml")
        fs.make_directory(os.path.dirname(target), recursive=True)
        fs.put(target, "enabled: true\\n")
    """

    def __init__(
        self,
        raw: RawFilesystem,
        policy: Optional[PermissionPolicy] = None,
        symbols: Optional[Mapping[str, str]] = None,
        base_path: Optional[str] = None,
        public_path: Optional[str] = None,
    ):
        self._raw = raw
        self._permissions = PermissionNormalizer(raw, policy)
        self._resolver = PathSymbolResolver(symbols)
        self._base_path = base_path
        self._public_path = public_path

    @property
    def raw(self) -> RawFilesystem:
        return self._raw

    @property
    def policy(self) -> PermissionPolicy:
        return self._permissions.policy

    @property
    def symbols(self) -> Mapping[str, str]:
        return self._resolver.symbols

    @property
    def base_path(self) -> Optional[str]:
        return self._base_path

    @property
    def public_path(self) -> Optional[str]:
        return self._public_path

    # Path symbols

    def is_path_symbol(self, path: str) -> Optional[str]:
        return self._resolver.is_symbol(path)

    def symbolize_path(self, path: str, default: Optional[str] = None) -> Optional[str]:
        return self._resolver.resolve(path, default)

    # Mutations

    def put(self, path: str, contents: Contents, lock: bool = False) -> int:
        return self._permissions.put(path, contents, lock)

    def copy(self, path: str, target: str) -> bool:
        return self._permissions.copy(path, target)

    def make_directory(
        self,
        path: str,
        mode: int = 0o777,
        recursive: bool = False,
        force: bool = False,
    ) -> bool:
        return self._permissions.make_directory(path, mode, recursive, force)

    def chmod(self, path: str, mode: Optional[int] = None) -> None:
        self._permissions.chmod(path, mode)

    def chmod_recursive(
        self,
        path: str,
        file_mode: Optional[int] = None,
        directory_mode: Optional[int] = None,
    ) -> None:
        self._permissions.chmod_recursive(path, file_mode, directory_mode)

    # Raw pass-throughs

    def get(self, path: str) -> bytes:
        return self._raw.read_file(path)

    def exists(self, path: str) -> bool:
        return self._raw.exists(path)

    def is_directory(self, path: str) -> bool:
        return self._raw.is_directory(path)

    def files(self, directory: str) -> list[DirectoryEntry]:
        """Files (not directories) directly inside directory."""
        return [entry for entry in self._raw.list_children(directory) if not entry.is_directory]

    def delete(self, path: str) -> bool:
        return self._raw.delete(path)

    # Helpers

    def is_directory_empty(self, path: str) -> Optional[bool]:
        return helpers.is_directory_empty(self._raw, path)

    def size_to_string(self, size: int) -> str:
        return helpers.size_to_string(size)

    def exists_insensitive(self, path: str) -> Union[str, Literal[False]]:
        return helpers.exists_insensitive(self._raw, path)

    def normalize_path(self, path: str) -> str:
        return helpers.normalize_path(path)

    def local_to_public(self, path: str) -> Optional[str]:
        """Public path for an absolute one, None if outside the public root."""
        if self._public_path is None:
            return None
        return helpers.local_to_public(path, self._public_path)

    def is_local_path(self, path: str) -> bool:
        """Check if path lives under the application base path."""
        if self._base_path is None:
            return False
        return helpers.is_local_path(path, self._base_path)

    def from_class(self, target: Any) -> Optional[str]:
        return helpers.from_class(target)
