"""
Version Checker - Manifest Version Source

Offline version source answering checks from a local manifest, for apps
that ship or download their version information as a JSON file instead
of calling an endpoint.

Manifest format:
    {
        "android": {
            "latest_version": "1.2.0",
            "min_version": "1.0.0",
            "download_url": "https://play.google.com/store/apps/details?id=...",
            "release_notes": {"en": "Bug fixes", "es": "Correcciones"},
            "message": "A new version is available"
        },
        "ios": {...}
    }

Only latest_version is required per platform. A current version below
min_version turns the update into a forced one.

Author: Version Checker Project
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Mapping, Union

from ..exceptions import ConfigError
from ..models import VersionCheckRequest, VersionCheckResult
from ..version_comparator import compare_versions, is_update_available, is_valid_version

# Configure logging
logger = logging.getLogger(__name__)


class ManifestVersionSource:
    """Version source backed by a manifest dict. Usable as config.version_source."""

    def __init__(self, manifest: Mapping[str, Any]):
        """
        Initialize manifest source.

        Args:
            manifest: Mapping of platform name to platform entry

        Raises:
            ConfigError: If the manifest is malformed
        """
        if not isinstance(manifest, Mapping):
            raise ConfigError("Version manifest must be a JSON object")

        for platform, entry in manifest.items():
            if not isinstance(entry, Mapping):
                raise ConfigError(f"Manifest entry for '{platform}' must be an object")
            if not is_valid_version(entry.get("latest_version")):
                raise ConfigError(f"Manifest entry for '{platform}' has an invalid latest_version")
            min_version = entry.get("min_version")
            if min_version is not None and not is_valid_version(min_version):
                raise ConfigError(f"Manifest entry for '{platform}' has an invalid min_version")

        self.manifest: Dict[str, Any] = dict(manifest)

    @classmethod
    def from_file(cls, manifest_file: Union[str, Path]) -> "ManifestVersionSource":
        """
        Load a manifest from a JSON file.

        Args:
            manifest_file: Path of the manifest

        Returns:
            ManifestVersionSource

        Raises:
            ConfigError: If the file cannot be read or is malformed
        """
        path = Path(manifest_file)
        logger.debug(f"Loading version manifest from {path}")
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigError(f"Failed to read version manifest {path}: {e}") from e
        return cls(data)

    def __call__(self, request: VersionCheckRequest) -> VersionCheckResult:
        """
        Answer a version check from the manifest.

        Args:
            request: Version check request

        Returns:
            VersionCheckResult; success=False if the platform is not listed
        """
        platform = str(request.platform)
        entry = self.manifest.get(platform)
        if entry is None:
            logger.warning(f"Version manifest has no entry for platform {platform}")
            return VersionCheckResult.failure(
                request.current_version,
                platform,
                f"No version information for platform: {platform}"
            )

        latest_version = entry["latest_version"]
        update_available = is_update_available(request.current_version, latest_version)

        min_version = entry.get("min_version")
        force_update = (
            update_available
            and min_version is not None
            and compare_versions(request.current_version, min_version) == -1
        )

        return VersionCheckResult(
            success=True,
            current_version=request.current_version,
            platform=platform,
            update_available=update_available,
            force_update=force_update,
            latest_version=latest_version,
            download_url=entry.get("download_url"),
            release_notes=entry.get("release_notes"),
            message=entry.get("message"),
            checked_at=datetime.now(timezone.utc)
        )
