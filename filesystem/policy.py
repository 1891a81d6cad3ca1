"""
Permission policy.

Holds the administrator-configured default modes applied after mutating
operations. Masks arrive as octal strings ("755") and are converted once,
here; an empty or missing mask means "not configured", which is not the
same thing as "000".
"""

from dataclasses import dataclass
from typing import Optional, Union

from filesystem.base import InvalidPermissionMaskError


MAX_MODE = 0o777

Mask = Union[str, int, None]


def parse_mode(mask: Mask) -> Optional[int]:
    """
    Convert a permission mask to an integer mode.

    Args:
        mask: Octal string ("644", "0755", "0o700", "000"), int, or None

    Returns:
        The mode, or None when the mask is unset

    Raises:
        InvalidPermissionMaskError: If the mask is not octal or exceeds 0o777
    """
    if mask is None:
        return None

    if isinstance(mask, bool):
        raise InvalidPermissionMaskError(f"Invalid permission mask: {mask!r}")

    if isinstance(mask, int):
        mode = mask
    else:
        text = mask.strip()
        if not text:
            return None
        if text[:2].lower() == "0o":
            text = text[2:]
        try:
            mode = int(text, 8)
        except ValueError:
            raise InvalidPermissionMaskError(
                f"Invalid permission mask: {mask!r} is not an octal number"
            )

    if not 0 <= mode <= MAX_MODE:
        raise InvalidPermissionMaskError(
            f"Invalid permission mask: {mask!r} is outside 0..0o777"
        )
    return mode


@dataclass(frozen=True)
class PermissionPolicy:
    """
    Default modes for files and directories.

    None for either mode means the mode is left untouched.
    """
    file_mode: Optional[int] = None
    directory_mode: Optional[int] = None

    def __post_init__(self) -> None:
        # Route ints through the same range check as strings
        parse_mode(self.file_mode)
        parse_mode(self.directory_mode)

    @classmethod
    def from_masks(
        cls,
        file_mask: Mask = None,
        folder_mask: Mask = None,
    ) -> "PermissionPolicy":
        """Create from octal mask strings."""
        return cls(
            file_mode=parse_mode(file_mask),
            directory_mode=parse_mode(folder_mask),
        )

    @property
    def is_configured(self) -> bool:
        """Check if at least one default mode is set."""
        return self.file_mode is not None or self.directory_mode is not None

    def mode_for(self, is_directory: bool) -> Optional[int]:
        """Pick the default mode for a directory or a file."""
        return self.directory_mode if is_directory else self.file_mode
