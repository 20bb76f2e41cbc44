"""
Version Checker - Managers Package

Contains manager classes for configuration files and cache storage.

Author: Version Checker Project
"""

from .config_manager import ConfigManager, DEFAULT_CONFIG_FILENAME
from .cache_store import CacheStore, MemoryCacheStore, JsonFileCacheStore

__all__ = [
    'ConfigManager',
    'DEFAULT_CONFIG_FILENAME',
    'CacheStore',
    'MemoryCacheStore',
    'JsonFileCacheStore'
]
