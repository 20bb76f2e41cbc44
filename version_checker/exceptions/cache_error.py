"""
Version Checker - Cache Error Exception

Exception raised by cache stores when the underlying storage cannot be
read or written.

Author: Version Checker Project
"""

from .version_checker_error import VersionCheckerError


class CacheError(VersionCheckerError):
    """Exception for cache storage errors."""
    pass
