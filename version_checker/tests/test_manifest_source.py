"""
Tests for the manifest version source in Version Checker

Tests offline checks answered from a local version manifest.
"""

import sys
import json
from pathlib import Path

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from version_checker.api import ManifestVersionSource
from version_checker.exceptions import ConfigError
from version_checker.models import VersionCheckRequest, VersionCheckerConfig
from version_checker.services import VersionCheckerService

MANIFEST = {
    "android": {
        "latest_version": "2.1.0",
        "min_version": "2.0.0",
        "download_url": "https://play.google.com/store/apps/details?id=com.example",
        "release_notes": {"en": "New features", "es": "Nuevas funciones"},
        "message": "A new version is available"
    },
    "ios": {
        "latest_version": "2.1.0"
    }
}


def check(source, current_version, platform="android"):
    return source(VersionCheckRequest(current_version=current_version, platform=platform))


def test_optional_update():
    """Test an update above the minimum version"""
    result = check(ManifestVersionSource(MANIFEST), "2.0.5")

    assert result.success is True
    assert result.update_available is True
    assert result.force_update is False
    assert result.latest_version == "2.1.0"
    assert result.get_release_notes("es") == "Nuevas funciones"
    assert result.checked_at is not None


def test_forced_update_below_min_version():
    """Test that versions below min_version must update"""
    result = check(ManifestVersionSource(MANIFEST), "1.9.9")

    assert result.update_available is True
    assert result.force_update is True


def test_up_to_date():
    """Test a current version at or above the latest"""
    source = ManifestVersionSource(MANIFEST)
    assert check(source, "2.1.0").update_available is False
    assert check(source, "2.1.0", platform="ios").update_available is False
    assert check(source, "3.0.0").force_update is False


def test_missing_platform():
    """Test that unlisted platforms give a failed result"""
    result = check(ManifestVersionSource({"android": MANIFEST["android"]}), "1.0.0", platform="ios")

    assert result.success is False
    assert "ios" in result.error
    assert result.update_available is False


def test_invalid_manifest():
    """Test manifest validation"""
    with pytest.raises(ConfigError):
        ManifestVersionSource(["android"])
    with pytest.raises(ConfigError):
        ManifestVersionSource({"android": "2.0.0"})
    with pytest.raises(ConfigError):
        ManifestVersionSource({"android": {"min_version": "1.0.0"}})
    with pytest.raises(ConfigError):
        ManifestVersionSource({"android": {"latest_version": "2.0", "min_version": "one"}})


def test_from_file(tmp_path):
    """Test loading a manifest file and using it as the version source"""
    manifest_file = tmp_path / "versions.json"
    manifest_file.write_text(json.dumps(MANIFEST), encoding="utf-8")

    source = ManifestVersionSource.from_file(manifest_file)
    service = VersionCheckerService(VersionCheckerConfig(version_source=source))
    result = service.check_for_updates("2.0.0", "android")

    assert result.update_available is True
    assert result.download_url == MANIFEST["android"]["download_url"]

    with pytest.raises(ConfigError):
        ManifestVersionSource.from_file(tmp_path / "absent.json")
