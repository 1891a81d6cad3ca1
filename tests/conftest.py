"""
Pytest configuration and fixtures.
"""

import os
import sys
from pathlib import Path

import pytest

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Set test environment
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("FILESYSTEM_BACKEND", "memory")


@pytest.fixture
def memory_fs():
    """In-memory raw filesystem with a 022 umask."""
    from filesystem.memory import InMemoryFilesystem
    return InMemoryFilesystem(umask=0o022)


@pytest.fixture
def local_fs():
    """Raw filesystem backed by the real disk."""
    from filesystem.local import LocalFilesystem
    return LocalFilesystem()
