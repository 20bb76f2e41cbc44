"""
Version Checker - Service Module

Orchestrates a version check: serve a fresh cached result, otherwise
fetch, cache successful results, and fall back to any cached result
(however old) when the fetch fails.

Author: Version Checker Project
"""

import asyncio
import hashlib
import json
import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from pydantic import ValidationError

from ..api import CallableFetcher, Fetcher, HttpFetcher
from ..managers import CacheStore, MemoryCacheStore
from ..models import CacheEntry, VersionCheckRequest, VersionCheckResult, VersionCheckerConfig
from .. import version_comparator

# Configure logging
logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def clear_cached_results(cache: CacheStore, namespace: str):
    """
    Remove all entries whose key starts with namespace.

    Never raises; storage failures are logged and ignored.

    Args:
        cache: Cache store to clear
        namespace: Cache key prefix
    """
    try:
        keys = cache.keys_with_prefix(namespace)
        for key in keys:
            cache.delete(key)
        logger.info(f"Cleared {len(keys)} cached version check results")
    except Exception as e:
        logger.warning(f"Failed to clear version check cache: {e}")


class VersionCheckerService:
    """
    Produces version check results, applying caching and offline fallback.

    Responsibilities:
    - Prepare the outbound request from the configuration
    - Serve fresh cache hits without fetching
    - Fetch through the configured fetcher and cache successful results
    - Serve stale cache entries when the fetch fails
    - Never raise from check(); failures end in a result with success=False

    Cache store failures are logged and treated as a miss.
    """

    def __init__(self, config: VersionCheckerConfig,
                 fetcher: Optional[Fetcher] = None,
                 cache: Optional[CacheStore] = None,
                 clock: Optional[Callable[[], datetime]] = None):
        """
        Initialize service.

        Args:
            config: Version checker configuration
            fetcher: Fetcher to use; defaults to the config's version_source
                if set, else an HttpFetcher for config.api_url
            cache: Cache store; defaults to a process-local MemoryCacheStore
            clock: Returns the current aware datetime (for tests)
        """
        self.config = config
        if fetcher is None:
            if config.version_source is not None:
                fetcher = CallableFetcher(config.version_source)
            else:
                fetcher = HttpFetcher(config)
        self.fetcher = fetcher
        self.cache = cache if cache is not None else MemoryCacheStore()
        self.clock = clock or utc_now

    def close(self):
        """Release resources held by the fetcher."""
        self.fetcher.close()

    # ==================== Version Checks ====================

    def check(self, request: VersionCheckRequest) -> VersionCheckResult:
        """
        Check for updates.

        Args:
            request: Version check request

        Returns:
            Fresh cached result, fetched result, stale cached result after a
            failed fetch, or a failed result when nothing else is available
        """
        logger.info(f"Checking for updates (current version: {request.current_version}, "
                    f"platform: {request.platform})")

        caching = self.config.enable_caching
        prepared = self.prepare_request(request)
        cache_key = self.get_cache_key(prepared)
        expired_entry_found = False

        if caching:
            cached, expired_entry_found = self._get_cached_result(cache_key)
            if cached is not None:
                logger.info("Returning cached version check result")
                return cached

        try:
            result = self.fetcher.fetch(prepared)
        except Exception as e:
            logger.error(f"Failed to check for updates: {e}")
            if caching:
                stale, _ = self._get_cached_result(cache_key, ignore_age=True)
                if stale is not None:
                    logger.warning("Returning stale cached result after failed check")
                    return stale
            return VersionCheckResult.failure(
                request.current_version,
                str(request.platform),
                str(e) or type(e).__name__
            )

        if result.checked_at is None:
            result = result.model_copy(update={"checked_at": self.clock()})

        if caching:
            if result.success:
                self._cache_result(cache_key, result)
            elif expired_entry_found:
                # The stale fallback was not needed, drop the expired entry
                self._evict(cache_key)

        if result.success:
            if result.update_available:
                logger.info(f"Update available: {result.latest_version}")
            else:
                logger.info("No updates available")
        else:
            logger.warning(f"Version check reported failure: {result.error}")

        return result

    def check_for_updates(self, current_version: str, platform: str,
                          build_number: Optional[str] = None,
                          locale: Optional[str] = None) -> VersionCheckResult:
        """
        Check for updates from plain values.

        Args:
            current_version: Installed app version
            platform: "ios" or "android"
            build_number: Installed build number
            locale: Preferred locale for the response

        Returns:
            VersionCheckResult; invalid arguments give a failed result
        """
        try:
            request = VersionCheckRequest(
                current_version=current_version,
                platform=platform,
                build_number=build_number,
                locale=locale
            )
        except ValidationError as e:
            logger.error(f"Invalid version check request: {e}")
            return VersionCheckResult.failure(current_version or "", platform or "",
                                              f"Invalid request: {e}")
        return self.check(request)

    async def check_async(self, request: VersionCheckRequest) -> VersionCheckResult:
        """Run check() in a worker thread."""
        return await asyncio.to_thread(self.check, request)

    def is_update_available(self, current_version: str, latest_version: Optional[str]) -> bool:
        """
        Compare two version strings without any network access.

        Returns:
            True if latest_version is a valid version newer than current_version
        """
        return version_comparator.is_update_available(current_version, latest_version)

    def prepare_request(self, request: VersionCheckRequest) -> VersionCheckRequest:
        """
        Apply configuration to a request before it is sent.

        The build number is dropped unless include_build_number is set, and
        a missing locale is filled from the configuration.

        Args:
            request: Caller's request

        Returns:
            Request as sent to the fetcher and used for the cache key
        """
        changes = {}
        if not self.config.include_build_number and request.build_number is not None:
            changes["build_number"] = None
        if request.locale is None and self.config.locale:
            changes["locale"] = self.config.locale
        if not changes:
            return request
        return request.model_copy(update=changes)

    # ==================== Cache ====================

    def get_cache_key(self, request: VersionCheckRequest) -> str:
        """
        Build the cache key for a request.

        Absent build number and locale count as empty strings. The fields
        are hashed together so that values containing the separator cannot
        collide.

        Args:
            request: Prepared request

        Returns:
            Cache key starting with the configured namespace
        """
        material = json.dumps([
            str(request.platform),
            request.current_version,
            request.build_number or "",
            request.locale or ""
        ])
        digest = hashlib.sha256(material.encode('utf-8')).hexdigest()
        return f"{self.config.cache_namespace}{request.platform}_{digest}"

    def _get_cached_result(self, cache_key: str, ignore_age: bool = False):
        """
        Look up a cached result.

        A fresh lookup only returns entries younger than
        cache_duration_minutes. A stale lookup (ignore_age) returns any
        entry. Expired entries are left in place; check() decides whether
        to evict them once the fetch outcome is known.

        Args:
            cache_key: Cache key
            ignore_age: Whether to ignore the entry's age

        Returns:
            Tuple of (result or None, whether an expired entry was found)
        """
        try:
            entry = self.cache.get(cache_key)
            if entry is None:
                logger.debug(f"Cache miss: {cache_key}")
                return None, False

            if not ignore_age and not self._is_fresh(entry):
                logger.debug(f"Cache entry expired: {cache_key}")
                return None, True

            result = VersionCheckResult.model_validate_json(entry.payload)
            logger.debug(f"Cache hit: {cache_key}")
            return result, False
        except Exception as e:
            logger.warning(f"Failed to read version check cache: {e}")
            return None, False

    def _is_fresh(self, entry: CacheEntry) -> bool:
        max_age = timedelta(minutes=self.config.cache_duration_minutes)
        return self.clock() - entry.stored_at < max_age

    def _cache_result(self, cache_key: str, result: VersionCheckResult):
        try:
            self.cache.set(cache_key, result.model_dump_json(exclude_none=True), self.clock())
            logger.debug(f"Cached version check result: {cache_key}")
        except Exception as e:
            logger.warning(f"Failed to write version check cache: {e}")

    def _evict(self, cache_key: str):
        try:
            self.cache.delete(cache_key)
            logger.debug(f"Evicted expired cache entry: {cache_key}")
        except Exception as e:
            logger.warning(f"Failed to evict version check cache entry: {e}")

    def clear_cache(self):
        """
        Remove all cached results in this service's namespace.

        Never raises; storage failures are logged and ignored.
        """
        clear_cached_results(self.cache, self.config.cache_namespace)

    async def clear_cache_async(self):
        """Run clear_cache() in a worker thread."""
        await asyncio.to_thread(self.clear_cache)
