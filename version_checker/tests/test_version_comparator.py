"""
Tests for version comparison in Version Checker

Tests parsing, ordering and update detection of version strings.
"""

import sys
import itertools
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from version_checker.version_comparator import (
    SemanticVersion,
    parse_version,
    compare_versions,
    is_valid_version,
    is_update_available
)


def test_parse_version():
    """Test parsing into components and suffix"""
    assert parse_version("1.2.3") == SemanticVersion((1, 2, 3), None)
    assert parse_version("1.0.0-beta") == SemanticVersion((1, 0, 0), "beta")
    assert parse_version("2.0.0-rc.1") == SemanticVersion((2, 0, 0), "rc.1")
    assert parse_version("1.2.3.4.5") == SemanticVersion((1, 2, 3, 4, 5), None)
    assert parse_version("01.002") == SemanticVersion((1, 2), None)
    assert parse_version("") is None
    assert parse_version(None) is None


def test_is_valid_version():
    """Test version validation"""
    assert is_valid_version("1.0.0")
    assert is_valid_version("1")
    assert is_valid_version("1.0.0-beta")
    assert is_valid_version("1.0.0+build.5")

    assert not is_valid_version("")
    assert not is_valid_version("1.0.a")
    assert not is_valid_version("1..0")
    assert not is_valid_version(".1.0")
    assert not is_valid_version("1.0.")
    assert not is_valid_version("v1.0.0")
    assert not is_valid_version("1.0.0-")
    assert not is_valid_version("1.0a")
    assert not is_valid_version(" 1.0.0")
    assert not is_valid_version("1.0.0\n")
    assert not is_valid_version("1.0.0-beta\n")
    assert not is_valid_version("\u0661.\u0662")


def test_numeric_ordering():
    """Test that components compare numerically, not lexicographically"""
    assert compare_versions("1.2.3", "1.2.10") < 0
    assert compare_versions("1.10.0", "1.9.9") > 0
    assert compare_versions("2.0.0", "10.0.0") < 0
    assert compare_versions("1.0.0", "1.0.0") == 0


def test_missing_components_are_zero():
    """Test that shorter versions are padded with zeros"""
    assert compare_versions("1.2", "1.2.0") == 0
    assert compare_versions("1", "1.0.0.0") == 0
    assert compare_versions("1.2", "1.2.0.1") < 0
    assert compare_versions("01", "1") == 0


def test_prerelease_ordering():
    """Test that pre-releases precede final releases"""
    assert compare_versions("1.0.0-beta", "1.0.0") < 0
    assert compare_versions("1.0.0", "1.0.0-beta") > 0
    assert compare_versions("1.0.0-alpha", "1.0.0-beta") < 0
    assert compare_versions("1.0.0-beta", "1.0.0-beta") == 0
    # Numeric components take precedence over suffixes
    assert compare_versions("1.0.1-alpha", "1.0.0") > 0


def test_invalid_versions_are_incomparable():
    """Test that invalid input yields None instead of raising"""
    assert compare_versions("1.0.a", "1.0.0") is None
    assert compare_versions("1.0.0", "") is None
    assert compare_versions(None, "1.0.0") is None


def test_ordering_properties():
    """Test antisymmetry, reflexivity and transitivity over a sample of versions"""
    versions = [
        "0.9", "1", "1.0.0-alpha", "1.0.0-beta", "1.0.0", "1.0.1",
        "1.2", "1.2.0.1", "1.2.10", "2.0.0-rc.1", "2.0.0", "10.0"
    ]

    for a in versions:
        assert compare_versions(a, a) == 0

    for a, b in itertools.product(versions, repeat=2):
        assert compare_versions(a, b) == -compare_versions(b, a)

    for a, b, c in itertools.product(versions, repeat=3):
        if compare_versions(a, b) < 0 and compare_versions(b, c) < 0:
            assert compare_versions(a, c) < 0


def test_is_update_available():
    """Test update detection"""
    assert is_update_available("1.0.0", "1.1.0")
    assert is_update_available("1.0.0-beta", "1.0.0")
    assert not is_update_available("2.0.0", "1.9.9")
    assert not is_update_available("1.0.0", "1.0.0")
    assert not is_update_available("1.0.0", None)
    assert not is_update_available("1.0.0", "")
    assert not is_update_available("1.0.0", "latest")
    assert not is_update_available("bogus", "2.0.0")
    assert not is_update_available("1.0.0", "2.0.0\n")
    assert compare_versions("1.0.0", "2.0.0\n") is None
