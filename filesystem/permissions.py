"""
Permission normalization after mutating operations.

Wraps the raw write/copy/create-directory primitives and applies the
configured default modes to whatever they produced, regardless of the
process umask. Mode fix-ups are best effort: a chmod that fails is logged
and ignored, while errors from the wrapped primitive itself propagate.
"""

import os
from typing import Optional

from core.logging import get_logger
from filesystem.base import Contents, RawFilesystem
from filesystem.policy import PermissionPolicy


logger = get_logger(__name__)


class PermissionNormalizer:
    """
    Applies a PermissionPolicy through a RawFilesystem.

    Usage:
        normalizer = PermissionNormalizer(
            LocalFilesystem(),
            PermissionPolicy.from_masks("644", "755"),
        )
        normalizer.put("/srv/app/storage/cache.json", "{}")
        normalizer.make_directory("/srv/app/storage/a/b/c", recursive=True)
    """

    def __init__(self, raw: RawFilesystem, policy: Optional[PermissionPolicy] = None):
        self._raw = raw
        self._policy = policy or PermissionPolicy()

    @property
    def policy(self) -> PermissionPolicy:
        return self._policy

    def chmod(self, path: str, mode: Optional[int] = None) -> None:
        """
        Set the mode of a single path.

        Without an explicit mode the policy's directory or file mode is used,
        depending on what path currently is. Nothing happens when the chosen
        mode is not configured.

        Args:
            path: File or directory to update
            mode: Explicit mode overriding the policy
        """
        if mode is None:
            if not self._policy.is_configured:
                return
            mode = self._policy.mode_for(self._raw.is_directory(path))

        if mode is None:
            return

        try:
            self._raw.change_mode(path, mode)
        except OSError as e:
            logger.debug(
                "chmod failed, ignoring",
                path=path,
                mode=oct(mode),
                error=str(e),
            )

    def chmod_recursive(
        self,
        path: str,
        file_mode: Optional[int] = None,
        directory_mode: Optional[int] = None,
    ) -> None:
        """
        Set modes on everything below path.

        Directories are updated before their contents are visited. The
        directory passed in is not itself changed; a file passed in gets
        the file mode. Symbolic links are skipped, so nothing outside the
        tree is changed.

        Args:
            path: Starting file or directory
            file_mode: Mode for files, defaults to the policy file mode
            directory_mode: Mode for directories, defaults to the policy
                directory mode and then to the file mode
        """
        if file_mode is None:
            file_mode = self._policy.file_mode

        if directory_mode is None:
            directory_mode = self._policy.directory_mode
            if directory_mode is None:
                directory_mode = file_mode

        if file_mode is None:
            return

        if not self._raw.is_directory(path):
            self.chmod(path, file_mode)
            return

        try:
            children = self._raw.list_children(path)
        except OSError as e:
            logger.debug("Cannot list directory, skipping", path=path, error=str(e))
            return

        for child in children:
            if child.is_symlink:
                continue
            if child.is_directory:
                self.chmod(child.path, directory_mode)
                self.chmod_recursive(child.path, file_mode, directory_mode)
            else:
                self.chmod(child.path, file_mode)

    def _chmod_directories(self, path: str, directory_mode: int) -> None:
        """Set directory_mode on every directory below path, leaving files alone."""
        try:
            children = self._raw.list_children(path)
        except OSError as e:
            logger.debug("Cannot list directory, skipping", path=path, error=str(e))
            return

        for child in children:
            if child.is_directory and not child.is_symlink:
                self.chmod(child.path, directory_mode)
                self._chmod_directories(child.path, directory_mode)

    def make_directory(
        self,
        path: str,
        mode: int = 0o777,
        recursive: bool = False,
        force: bool = False,
    ) -> bool:
        """
        Create a directory and apply the policy directory mode.

        With recursive creation, the topmost directory that does not exist
        yet is found first; that directory and everything created below it
        get the policy mode afterwards. Files below the anchor are only
        touched when the policy sets a file mode.

        Args:
            path: Directory to create
            mode: Requested mode, replaced by the policy mode when one is set
            recursive: Create missing parents as well
            force: Let the raw backend report failure as False

        Returns:
            Result of the raw create_directory call
        """
        mask = self._policy.directory_mode
        if mask is not None:
            mode = mask

        anchor = path
        if recursive and mask is not None:
            anchor = self._find_anchor(path)

        result = self._raw.create_directory(path, mode, recursive, force)

        logger.debug(
            "Directory created" if result else "Directory not created",
            path=path,
            mode=oct(mode),
            recursive=recursive,
        )

        if mask is not None:
            self.chmod(anchor, mask)
            if recursive:
                if self._policy.file_mode is None:
                    self._chmod_directories(anchor, mask)
                else:
                    self.chmod_recursive(anchor, self._policy.file_mode, mask)

        return result

    def _find_anchor(self, path: str) -> str:
        """Walk up from path to the topmost ancestor that does not exist yet."""
        anchor = path
        while True:
            parent = os.path.dirname(anchor)
            if not parent or parent == anchor:
                break
            if self._raw.is_directory(parent):
                break
            anchor = parent
        return anchor

    def put(self, path: str, contents: Contents, lock: bool = False) -> int:
        """Write a file, then apply the policy file mode."""
        result = self._raw.write_file(path, contents, lock)
        self.chmod(path)
        return result

    def copy(self, path: str, target: str) -> bool:
        """Copy a file, then apply the policy mode to the target."""
        result = self._raw.copy_file(path, target)
        self.chmod(target)
        return result
