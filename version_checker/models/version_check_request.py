"""
Version Checker - Version Check Request Model

The request sent to the version check endpoint. The same request is the
material for the cache key, so identical requests share a cache entry.

Author: Version Checker Project
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict

from .platform import Platform


class VersionCheckRequest(BaseModel):
    """Request model for the version check endpoint"""
    model_config = ConfigDict(frozen=True, use_enum_values=True)

    current_version: str
    platform: Platform
    build_number: Optional[str] = None
    locale: Optional[str] = None

    def to_json(self) -> Dict[str, Any]:
        """
        Serialize to the wire format.

        Returns:
            Dict with snake_case keys; build_number and locale are omitted when unset
        """
        return self.model_dump(mode="json", exclude_none=True)
