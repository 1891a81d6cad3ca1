"""
Filesystem abstraction layer.

Provides:
- Raw backends (local disk, in-memory) behind the RawFilesystem interface
- Permission policy applied after write, copy and create-directory
- Path symbol resolution

Only the dependency-free pieces are exported here, since core.config
imports this package. Import the facade and factory from their modules:

    from filesystem.filesystem import Filesystem
    from filesystem.factory import create_filesystem
"""

from filesystem.base import (
    DirectoryEntry,
    FilesystemError,
    InvalidPathSymbolError,
    InvalidPermissionMaskError,
    RawFilesystem,
)
from filesystem.policy import PermissionPolicy, parse_mode
from filesystem.symbols import PathSymbolResolver

__all__ = [
    # Abstract interface
    "RawFilesystem",
    "DirectoryEntry",
    # Errors
    "FilesystemError",
    "InvalidPathSymbolError",
    "InvalidPermissionMaskError",
    # Configuration values
    "PermissionPolicy",
    "parse_mode",
    "PathSymbolResolver",
]
