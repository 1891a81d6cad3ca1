"""
Tests for InMemoryFilesystem.

Verifies that the fake behaves like a POSIX tree for the primitives the
permission layer relies on.
"""

import pytest


def test_create_directory_applies_umask(memory_fs):
    """Test that created directories lose the umask bits."""
    assert memory_fs.create_directory("/srv", 0o777)
    assert memory_fs.mode_of("/srv") == 0o755


def test_create_directory_requires_parent(memory_fs):
    """Test non-recursive creation without a parent."""
    with pytest.raises(FileNotFoundError):
        memory_fs.create_directory("/a/b")
    assert memory_fs.create_directory("/a/b", force=True) is False


def test_create_directory_recursive(memory_fs):
    """Test that every missing level is created."""
    assert memory_fs.create_directory("/a/b/c", 0o770, recursive=True)

    for path in ("/a", "/a/b", "/a/b/c"):
        assert memory_fs.is_directory(path)
        assert memory_fs.mode_of(path) == 0o750


def test_create_directory_under_file(memory_fs):
    """Test that a file cannot act as a parent."""
    memory_fs.add_file("/srv/file")

    with pytest.raises(NotADirectoryError):
        memory_fs.create_directory("/srv/file/sub", recursive=True)


def test_list_children_immediate_only(memory_fs):
    """Test that listings contain direct children only."""
    memory_fs.add_file("/srv/a.txt")
    memory_fs.add_file("/srv/sub/b.txt")

    names = [(entry.name, entry.is_directory) for entry in memory_fs.list_children("/srv")]

    assert names == [("a.txt", False), ("sub", True)]


def test_list_children_of_file(memory_fs):
    """Test listing something that is not a directory."""
    memory_fs.add_file("/srv/a.txt")

    with pytest.raises(NotADirectoryError):
        memory_fs.list_children("/srv/a.txt")


def test_write_read_delete(memory_fs):
    """Test the file lifecycle."""
    memory_fs.add_directory("/srv")

    assert memory_fs.write_file("/srv/a.txt", "héllo") == len("héllo".encode("utf-8"))
    assert memory_fs.read_file("/srv/a.txt") == "héllo".encode("utf-8")
    assert memory_fs.delete("/srv/a.txt")
    assert not memory_fs.exists("/srv/a.txt")


def test_copy_into_directory(memory_fs):
    """Test copying a file into an existing directory."""
    memory_fs.add_file("/srv/a.txt", "a", mode=0o600)
    memory_fs.add_directory("/backup")

    assert memory_fs.copy_file("/srv/a.txt", "/backup")

    assert memory_fs.read_file("/backup/a.txt") == b"a"
    assert memory_fs.mode_of("/backup/a.txt") == 0o600


def test_call_counting(memory_fs):
    """Test that primitives are counted and helpers are not."""
    memory_fs.add_file("/srv/a.txt")
    assert sum(memory_fs.calls.values()) == 0

    memory_fs.exists("/srv/a.txt")
    memory_fs.change_mode("/srv/a.txt", 0o600)

    assert memory_fs.calls["exists"] == 1
    assert memory_fs.call_log == [("exists", "/srv/a.txt"), ("change_mode", "/srv/a.txt")]

    memory_fs.reset_calls()
    assert not memory_fs.calls


def test_locked_path(memory_fs):
    """Test forced chmod failures."""
    memory_fs.add_file("/srv/a.txt")
    memory_fs.lock("/srv/a.txt")

    with pytest.raises(PermissionError):
        memory_fs.change_mode("/srv/a.txt", 0o600)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
