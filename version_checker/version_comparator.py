"""
Version Checker - Version Comparator Module

Parses dotted version strings such as "1.2.10" or "2.0.0-beta.1" and
orders them. Every function here is pure and never raises on bad input:
invalid strings are reported as invalid or incomparable instead.

Author: Version Checker Project
"""

import re
from typing import NamedTuple, Optional, Tuple

# One or more dot-separated numeric components, optionally followed by a
# suffix introduced by '-' (pre-release) or '+' (build metadata)
VERSION_PATTERN = re.compile(r'(\d+(?:\.\d+)*)(?:[-+]([0-9A-Za-z.-]+))?', re.ASCII)


class SemanticVersion(NamedTuple):
    """
    Parsed form of a version string.

    Attributes:
        components: Numeric components, any number of them (major, minor, patch, ...)
        suffix: Pre-release or build suffix without its delimiter, or None
    """
    components: Tuple[int, ...]
    suffix: Optional[str] = None


def parse_version(version: Optional[str]) -> Optional[SemanticVersion]:
    """
    Parse a version string.

    Leading zeros are accepted ("01" parses as 1).

    Args:
        version: Version string (e.g., "1.0.0" or "1.0.0-beta")

    Returns:
        SemanticVersion, or None if the string is not a valid version
    """
    if not isinstance(version, str):
        return None

    match = VERSION_PATTERN.fullmatch(version)
    if not match:
        return None

    core, suffix = match.groups()
    components = tuple(int(part) for part in core.split('.'))
    return SemanticVersion(components=components, suffix=suffix)


def is_valid_version(version: Optional[str]) -> bool:
    """
    Check whether a string is a valid version.

    Args:
        version: Version string to validate

    Returns:
        True if the string parses, False otherwise (including empty strings)
    """
    return parse_version(version) is not None


def _compare_parsed(left: SemanticVersion, right: SemanticVersion) -> int:
    length = max(len(left.components), len(right.components))
    left_parts = left.components + (0,) * (length - len(left.components))
    right_parts = right.components + (0,) * (length - len(right.components))

    if left_parts != right_parts:
        return -1 if left_parts < right_parts else 1

    # Pre-releases precede the final release
    if left.suffix == right.suffix:
        return 0
    if left.suffix is None:
        return 1
    if right.suffix is None:
        return -1
    return -1 if left.suffix < right.suffix else 1


def compare_versions(version1: str, version2: str) -> Optional[int]:
    """
    Compare two version strings.

    Components are compared numerically from left to right, missing
    components count as 0 ("1.2" equals "1.2.0"). When all numeric
    components match, a version with a suffix sorts before the same
    version without one, and two suffixes are compared lexicographically.

    Args:
        version1: First version string
        version2: Second version string

    Returns:
        -1 if version1 < version2, 0 if equal, 1 if version1 > version2,
        or None if either string is not a valid version
    """
    left = parse_version(version1)
    right = parse_version(version2)
    if left is None or right is None:
        return None
    return _compare_parsed(left, right)


def is_update_available(current_version: Optional[str], latest_version: Optional[str]) -> bool:
    """
    Check whether latest_version is newer than current_version.

    Args:
        current_version: Installed version
        latest_version: Latest version reported by the server (may be None)

    Returns:
        True only if both versions are valid and current < latest
    """
    if not latest_version:
        return False

    result = compare_versions(current_version, latest_version)
    return result is not None and result < 0
