"""
Version Checker - Exceptions Package

Contains all exception classes for the version checker.

Author: Version Checker Project
"""

from .version_checker_error import VersionCheckerError
from .fetch_error import FetchError
from .cache_error import CacheError
from .config_error import ConfigError

__all__ = [
    'VersionCheckerError',
    'FetchError',
    'CacheError',
    'ConfigError'
]
