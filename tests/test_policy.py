"""
Tests for permission mask parsing and PermissionPolicy.
"""

import dataclasses

import pytest

from filesystem.base import InvalidPermissionMaskError
from filesystem.policy import PermissionPolicy, parse_mode


@pytest.mark.parametrize("mask, expected", [
    ("644", 0o644),
    ("755", 0o755),
    ("0755", 0o755),
    ("0o700", 0o700),
    ("777", 0o777),
    (" 640 ", 0o640),
    (0o600, 0o600),
])
def test_parse_mode(mask, expected):
    """Test octal masks convert to integer modes."""
    assert parse_mode(mask) == expected


def test_parse_mode_zero_is_not_unset():
    """Test that "000" is a real mode, distinct from an unset mask."""
    assert parse_mode("000") == 0
    assert parse_mode("0") == 0
    assert parse_mode(0) == 0


@pytest.mark.parametrize("mask", [None, "", "   "])
def test_parse_mode_unset(mask):
    """Test that missing or empty masks mean "not configured"."""
    assert parse_mode(mask) is None


@pytest.mark.parametrize("mask", ["abc", "8", "999", "1000", 0o1000, -1, True])
def test_parse_mode_invalid(mask):
    """Test that invalid masks are rejected."""
    with pytest.raises(InvalidPermissionMaskError):
        parse_mode(mask)


def test_invalid_mask_is_value_error():
    """Test that the error can be caught as ValueError."""
    with pytest.raises(ValueError):
        parse_mode("rwx")


def test_policy_from_masks():
    """Test building a policy from mask strings."""
    policy = PermissionPolicy.from_masks("644", "755")
    assert policy.file_mode == 0o644
    assert policy.directory_mode == 0o755
    assert policy.is_configured


def test_policy_unconfigured():
    """Test the empty policy."""
    policy = PermissionPolicy.from_masks(None, "")
    assert policy.file_mode is None
    assert policy.directory_mode is None
    assert not policy.is_configured


def test_policy_zero_counts_as_configured():
    """Test that a 000 mask still activates the policy."""
    policy = PermissionPolicy.from_masks("000", None)
    assert policy.file_mode == 0
    assert policy.is_configured


def test_policy_mode_for():
    """Test picking the mode for directories and files."""
    policy = PermissionPolicy(file_mode=0o640, directory_mode=0o750)
    assert policy.mode_for(True) == 0o750
    assert policy.mode_for(False) == 0o640


def test_policy_is_immutable():
    """Test that the policy cannot be changed after creation."""
    policy = PermissionPolicy(file_mode=0o644)
    with pytest.raises(dataclasses.FrozenInstanceError):
        policy.file_mode = 0o600


def test_policy_rejects_out_of_range_mode():
    """Test range checking on integer modes."""
    with pytest.raises(InvalidPermissionMaskError):
        PermissionPolicy(file_mode=0o4755)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
