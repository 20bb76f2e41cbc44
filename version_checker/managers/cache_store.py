"""
Version Checker - Cache Store Module

Key-value stores holding serialized version check results together with
the time they were stored. The service decides freshness; stores only
keep entries.

Author: Version Checker Project
"""

import json
import logging
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from threading import RLock
from typing import Dict, List, Optional, Union

from pydantic import ValidationError

from ..exceptions import CacheError
from ..models import CacheEntry

# Configure logging
logger = logging.getLogger(__name__)


class CacheStore(ABC):
    """
    Interface for cache storage backends.

    Implementations may raise on storage failures; callers are expected
    to treat any failure as a cache miss.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[CacheEntry]:
        """Return the entry stored under key, or None."""

    @abstractmethod
    def set(self, key: str, payload: str, stored_at: datetime):
        """Store payload under key, replacing any existing entry."""

    @abstractmethod
    def delete(self, key: str):
        """Remove the entry stored under key. Missing keys are ignored."""

    @abstractmethod
    def keys_with_prefix(self, prefix: str) -> List[str]:
        """Return all keys starting with prefix."""


class MemoryCacheStore(CacheStore):
    """Process-local cache store backed by a dict."""

    def __init__(self):
        self._entries: Dict[str, CacheEntry] = {}
        self._lock = RLock()

    def get(self, key: str) -> Optional[CacheEntry]:
        with self._lock:
            return self._entries.get(key)

    def set(self, key: str, payload: str, stored_at: datetime):
        with self._lock:
            self._entries[key] = CacheEntry(key=key, payload=payload, stored_at=stored_at)

    def delete(self, key: str):
        with self._lock:
            self._entries.pop(key, None)

    def keys_with_prefix(self, prefix: str) -> List[str]:
        with self._lock:
            return [key for key in self._entries if key.startswith(prefix)]

    def __len__(self) -> int:
        return len(self._entries)


class JsonFileCacheStore(CacheStore):
    """
    Cache store persisted to a single JSON file.

    The file is re-read on every operation so that separate processes
    sharing the file see each other's writes. Concurrent writers are not
    coordinated; the last write wins.

    File format:
        {"<key>": {"payload": "<json>", "stored_at": "<iso timestamp>"}, ...}
    """

    def __init__(self, cache_file: Union[str, Path]):
        """
        Initialize file cache store.

        Args:
            cache_file: Path of the JSON file (created on first write)
        """
        self.cache_file = Path(cache_file)
        self._lock = RLock()
        logger.debug(f"Using cache file {self.cache_file}")

    def _load(self) -> Dict[str, dict]:
        if not self.cache_file.exists():
            return {}

        try:
            with open(self.cache_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise CacheError(f"Failed to read cache file {self.cache_file}: {e}") from e

        if not isinstance(data, dict):
            raise CacheError(f"Cache file {self.cache_file} does not contain a JSON object")
        return data

    def _save(self, data: Dict[str, dict]):
        try:
            self.cache_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.cache_file, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise CacheError(f"Failed to write cache file {self.cache_file}: {e}") from e

    def get(self, key: str) -> Optional[CacheEntry]:
        with self._lock:
            record = self._load().get(key)
            if record is None:
                return None
            try:
                return CacheEntry(key=key, **record)
            except (TypeError, ValidationError) as e:
                raise CacheError(f"Corrupt cache entry {key}: {e}") from e

    def set(self, key: str, payload: str, stored_at: datetime):
        with self._lock:
            data = self._load()
            data[key] = {"payload": payload, "stored_at": stored_at.isoformat()}
            self._save(data)

    def delete(self, key: str):
        with self._lock:
            data = self._load()
            if data.pop(key, None) is not None:
                self._save(data)

    def keys_with_prefix(self, prefix: str) -> List[str]:
        with self._lock:
            return [key for key in self._load() if key.startswith(prefix)]
