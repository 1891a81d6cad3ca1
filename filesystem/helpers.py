"""
Small path and size helpers.
"""

import inspect
import os
from typing import Any, Literal, Optional, Union

from filesystem.base import RawFilesystem


GB = 1 << 30
MB = 1 << 20
KB = 1 << 10


def is_directory_empty(raw: RawFilesystem, path: str) -> Optional[bool]:
    """
    Check whether a directory has no entries.

    Returns:
        True if empty, False if it has any entry, None if it cannot be read
    """
    try:
        children = raw.list_children(path)
    except OSError:
        return None
    return not children


def size_to_string(size: int) -> str:
    """
    Format a byte count for humans.

    Examples:
        size_to_string(0)     -> "0 bytes"
        size_to_string(1)     -> "1 byte"
        size_to_string(2048)  -> "2.00 KB"
    """
    if size >= GB:
        return f"{size / GB:,.2f} GB"
    if size >= MB:
        return f"{size / MB:,.2f} MB"
    if size >= KB:
        return f"{size / KB:,.2f} KB"
    if size > 1:
        return f"{size} bytes"
    if size == 1:
        return "1 byte"
    return "0 bytes"


def exists_insensitive(raw: RawFilesystem, path: str) -> Union[str, Literal[False]]:
    """
    Find a file ignoring the case of its name.

    Only the sibling entries of the parent directory are scanned.

    Returns:
        The path as it exists on disk, or False
    """
    if raw.exists(path):
        return path

    directory = os.path.dirname(path)
    path_lower = path.lower()

    try:
        children = raw.list_children(directory or ".")
    except OSError:
        return False

    for child in children:
        candidate = os.path.join(directory, child.name)
        if candidate.lower() == path_lower:
            return candidate

    return False


def normalize_path(path: str) -> str:
    """Use forward slashes as the directory separator."""
    return path.replace("\\", "/")


def local_to_public(path: str, public_path: str) -> Optional[str]:
    """
    Turn an absolute path under the public root into a public one.

    e.g. /home/mysite/public_html/welcome -> /welcome
    """
    if not path.startswith(public_path):
        return None
    return normalize_path(path[len(public_path):])


def is_local_path(path: str, base_path: str) -> bool:
    """Check if path lives under the application base path."""
    return path.startswith(base_path)


def from_class(target: Any) -> Optional[str]:
    """
    Source file that defines a class.

    Accepts a class or an instance. Returns None for builtins and classes
    created at runtime, which have no source file.
    """
    cls = target if inspect.isclass(target) else type(target)
    try:
        return inspect.getfile(cls)
    except (TypeError, OSError):
        return None
