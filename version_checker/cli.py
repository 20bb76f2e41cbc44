"""
Version Checker - CLI Mode Module

Implements the command-line operations: check for updates, compare two
versions and clear the result cache. Logging goes to stderr (and an
optional log file) so that stdout only carries results.

Author: Version Checker Project
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

from .api import ManifestVersionSource
from .exceptions import ConfigError
from .managers import ConfigManager, JsonFileCacheStore
from .models import DEFAULT_CACHE_NAMESPACE, UpdateAction, VersionCheckResult, get_update_action
from .services import VersionCheckerService, clear_cached_results
from .version_comparator import compare_versions


# Exit codes
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_CONFIG_ERROR = 2
EXIT_UPDATE_AVAILABLE = 10
EXIT_FORCE_UPDATE = 11

DEFAULT_CACHE_FILENAME = "version_checker_cache.json"

ACTION_EXIT_CODES = {
    UpdateAction.NONE: EXIT_SUCCESS,
    UpdateAction.OPTIONAL: EXIT_UPDATE_AVAILABLE,
    UpdateAction.FORCE: EXIT_FORCE_UPDATE,
    UpdateAction.ERROR: EXIT_FAILURE
}


def setup_cli_logging(log_level: str = "WARNING", log_file: Optional[Path] = None):
    """
    Setup logging for CLI mode.

    Args:
        log_level: Level name (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional file receiving the log as well
    """
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True
    )


def format_result(result: VersionCheckResult, locale: Optional[str] = None) -> str:
    """
    Format a result for terminal output.

    Args:
        result: Version check result
        locale: Locale used to pick localized release notes

    Returns:
        Multi-line human readable summary
    """
    action = get_update_action(result)
    if action == UpdateAction.ERROR:
        return f"Version check failed: {result.error}"
    if action == UpdateAction.NONE:
        return f"Up to date ({result.current_version})"

    label = "Required update" if action == UpdateAction.FORCE else "Update available"
    lines = [f"{label}: {result.current_version} -> {result.latest_version}"]
    if result.download_url:
        lines.append(f"Download: {result.download_url}")
    if result.message:
        lines.append(result.message)
    notes = result.get_release_notes(locale)
    if notes:
        lines.append("")
        lines.append(notes)
    return "\n".join(lines)


def run_check(current_version: str, platform: str,
              build_number: Optional[str] = None,
              locale: Optional[str] = None,
              api_url: Optional[str] = None,
              config_file: Optional[str] = None,
              manifest_file: Optional[str] = None,
              cache_file: Optional[str] = None,
              no_cache: bool = False,
              timeout: Optional[int] = None,
              as_json: bool = False) -> int:
    """
    Execute a version check and print the result.

    Args:
        current_version: Installed app version
        platform: "ios" or "android"
        build_number: Installed build number
        locale: Preferred locale
        api_url: Endpoint URL (overrides config file)
        config_file: Path of JSON config file
        manifest_file: Offline manifest used instead of the endpoint
        cache_file: Cache file path (default: version_checker_cache.json)
        no_cache: Disable caching
        timeout: Request timeout in seconds (overrides config file)
        as_json: Print the raw result as JSON

    Returns:
        Exit code reflecting the update action
    """
    logger = logging.getLogger(__name__)

    try:
        version_source = ManifestVersionSource.from_file(manifest_file) if manifest_file else None
        config = ConfigManager(config_file).load_config(
            api_url=api_url,
            timeout_seconds=timeout,
            enable_caching=False if no_cache else None,
            version_source=version_source
        )
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    cache = JsonFileCacheStore(cache_file or Path.cwd() / DEFAULT_CACHE_FILENAME)
    service = VersionCheckerService(config, cache=cache)
    try:
        result = service.check_for_updates(current_version, platform, build_number, locale)
    finally:
        service.close()

    if as_json:
        print(json.dumps(result.to_json(), indent=2, ensure_ascii=False))
    else:
        print(format_result(result, locale or config.locale))

    return ACTION_EXIT_CODES[get_update_action(result)]


def run_compare(version1: str, version2: str) -> int:
    """
    Print the comparison of two versions (-1, 0 or 1).

    Returns:
        Exit code (EXIT_FAILURE if either version is invalid)
    """
    result = compare_versions(version1, version2)
    if result is None:
        print(f"Invalid version: {version1!r} or {version2!r}", file=sys.stderr)
        return EXIT_FAILURE
    print(result)
    return EXIT_SUCCESS


def run_clear_cache(cache_file: Optional[str] = None, config_file: Optional[str] = None) -> int:
    """
    Remove all cached results from the cache file.

    Returns:
        Exit code
    """
    try:
        namespace = ConfigManager(config_file).read_file().get("cache_namespace") or DEFAULT_CACHE_NAMESPACE
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    cache = JsonFileCacheStore(cache_file or Path.cwd() / DEFAULT_CACHE_FILENAME)
    clear_cached_results(cache, namespace)
    print("Cache cleared")
    return EXIT_SUCCESS
