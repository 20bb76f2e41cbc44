"""
Version Checker

Checks whether a newer version of an app exists: compares version
strings and runs cached version checks against an endpoint or an
offline source.
"""

from .version import VERSION
from .version_comparator import (
    SemanticVersion,
    parse_version,
    compare_versions,
    is_valid_version,
    is_update_available
)
from .models import (
    Platform,
    VersionCheckRequest,
    VersionCheckResult,
    VersionCheckerConfig,
    CacheEntry,
    UpdateAction,
    get_update_action
)
from .api import Fetcher, HttpFetcher, CallableFetcher, ManifestVersionSource
from .managers import CacheStore, MemoryCacheStore, JsonFileCacheStore, ConfigManager
from .services import VersionCheckerService
from .exceptions import VersionCheckerError, FetchError, CacheError, ConfigError

__version__ = VERSION

__all__ = [
    'VERSION',
    'SemanticVersion',
    'parse_version',
    'compare_versions',
    'is_valid_version',
    'is_update_available',
    'Platform',
    'VersionCheckRequest',
    'VersionCheckResult',
    'VersionCheckerConfig',
    'CacheEntry',
    'UpdateAction',
    'get_update_action',
    'Fetcher',
    'HttpFetcher',
    'CallableFetcher',
    'ManifestVersionSource',
    'CacheStore',
    'MemoryCacheStore',
    'JsonFileCacheStore',
    'ConfigManager',
    'VersionCheckerService',
    'VersionCheckerError',
    'FetchError',
    'CacheError',
    'ConfigError'
]
