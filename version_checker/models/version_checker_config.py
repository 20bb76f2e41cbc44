"""
Version Checker - Configuration Model

Immutable configuration for the version checker service: endpoint,
timeout, caching behaviour and request customization.

Author: Version Checker Project
"""

from typing import Any, Callable, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .version_check_request import VersionCheckRequest
from .version_check_result import VersionCheckResult

# Signature of an offline version source: called instead of the HTTP endpoint
VersionSource = Callable[[VersionCheckRequest], VersionCheckResult]

DEFAULT_TIMEOUT_SECONDS = 30
DEFAULT_CACHE_DURATION_MINUTES = 5
DEFAULT_CACHE_NAMESPACE = "version_check_"


class VersionCheckerConfig(BaseModel):
    """
    Configuration for the version checker.

    Either api_url or version_source must be set. When version_source is
    set, api_url is ignored and no HTTP request is made.
    """
    model_config = ConfigDict(frozen=True)

    api_url: str = ""
    timeout_seconds: int = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)
    enable_caching: bool = True
    cache_duration_minutes: int = Field(default=DEFAULT_CACHE_DURATION_MINUTES, ge=0)
    locale: Optional[str] = None  # Used when a request carries no locale
    custom_headers: Optional[Dict[str, str]] = None
    include_build_number: bool = True
    user_agent: Optional[str] = None
    version_source: Optional[VersionSource] = None
    cache_namespace: str = Field(default=DEFAULT_CACHE_NAMESPACE, min_length=1)

    @model_validator(mode="after")
    def _require_source(self) -> "VersionCheckerConfig":
        if not self.api_url and self.version_source is None:
            raise ValueError("api_url is required when no version_source is configured")
        return self

    def copy_with(self, **changes: Any) -> "VersionCheckerConfig":
        """
        Create a validated copy with modified fields.

        Args:
            **changes: Field values to replace

        Returns:
            New VersionCheckerConfig
        """
        values = {name: getattr(self, name) for name in type(self).model_fields}
        values.update(changes)
        return type(self)(**values)

    def __str__(self) -> str:
        return (
            f"VersionCheckerConfig(api_url: {self.api_url}, "
            f"timeout_seconds: {self.timeout_seconds}, "
            f"enable_caching: {self.enable_caching}, "
            f"cache_duration_minutes: {self.cache_duration_minutes}, "
            f"has_version_source: {self.version_source is not None})"
        )
