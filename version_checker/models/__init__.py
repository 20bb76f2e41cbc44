"""
Version Checker - Models Package

Contains data models and enumerations used by the version checker.

Author: Version Checker Project
"""

from .platform import Platform
from .version_check_request import VersionCheckRequest
from .version_check_result import VersionCheckResult, UNKNOWN_ERROR
from .version_checker_config import (
    VersionCheckerConfig,
    VersionSource,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_CACHE_DURATION_MINUTES,
    DEFAULT_CACHE_NAMESPACE
)
from .cache_entry import CacheEntry
from .update_action import UpdateAction, get_update_action

__all__ = [
    'Platform',
    'VersionCheckRequest',
    'VersionCheckResult',
    'UNKNOWN_ERROR',
    'VersionCheckerConfig',
    'VersionSource',
    'DEFAULT_TIMEOUT_SECONDS',
    'DEFAULT_CACHE_DURATION_MINUTES',
    'DEFAULT_CACHE_NAMESPACE',
    'CacheEntry',
    'UpdateAction',
    'get_update_action'
]
