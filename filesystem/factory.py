"""
Filesystem factory for creating configured instances.

This module provides factory functions to create the raw backend and the
Filesystem facade based on configuration.
"""

import os
from enum import Enum
from typing import TYPE_CHECKING

from core.logging import configure_logging, get_logger
from filesystem.base import RawFilesystem
from filesystem.filesystem import Filesystem
from filesystem.policy import PermissionPolicy


if TYPE_CHECKING:
    from core.config import Settings


logger = get_logger(__name__)


class FilesystemBackend(str, Enum):
    """Supported raw filesystem backends."""
    LOCAL = "local"
    MEMORY = "memory"


def get_filesystem_backend(settings: "Settings") -> FilesystemBackend:
    """
    Determine which raw backend to use based on settings.

    Args:
        settings: Application settings

    Returns:
        The configured backend
    """
    backend_str = settings.filesystem_backend.lower()

    try:
        return FilesystemBackend(backend_str)
    except ValueError:
        raise ValueError(
            f"Unsupported filesystem backend: {backend_str}. "
            f"Supported backends: {[b.value for b in FilesystemBackend]}"
        )


def create_raw_filesystem(settings: "Settings") -> RawFilesystem:
    """
    Create a raw filesystem instance based on settings.

    Args:
        settings: Application settings

    Returns:
        Raw backend instance
    """
    backend = get_filesystem_backend(settings)

    if backend == FilesystemBackend.LOCAL:
        from filesystem.local import LocalFilesystem

        logger.info("Creating local filesystem backend")
        return LocalFilesystem()

    elif backend == FilesystemBackend.MEMORY:
        from filesystem.memory import InMemoryFilesystem

        logger.info("Creating in-memory filesystem backend")
        return InMemoryFilesystem()

    else:
        raise ValueError(f"Unsupported backend: {backend}")


def create_filesystem(settings: "Settings") -> Filesystem:
    """
    Create a Filesystem facade based on settings.

    This is the application entry point into the package, so it also
    configures structlog from the same settings.

    Args:
        settings: Application settings

    Returns:
        Filesystem with the configured policy, symbols and roots
    """
    configure_logging(settings)

    policy = PermissionPolicy.from_masks(
        settings.file_permissions,
        settings.folder_permissions,
    )

    logger.info(
        "Creating filesystem",
        backend=settings.filesystem_backend,
        file_mode=oct(policy.file_mode) if policy.file_mode is not None else None,
        directory_mode=oct(policy.directory_mode) if policy.directory_mode is not None else None,
        symbols=sorted(settings.path_symbols),
    )

    return Filesystem(
        create_raw_filesystem(settings),
        policy=policy,
        symbols=settings.path_symbols,
        base_path=os.path.abspath(settings.base_path),
        public_path=os.path.abspath(settings.public_path),
    )
