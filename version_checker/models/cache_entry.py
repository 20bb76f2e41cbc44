"""
Version Checker - Cache Entry Model

A serialized version check result as held by a cache store.

Author: Version Checker Project
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class CacheEntry(BaseModel):
    """One cached result and the time it was stored"""
    model_config = ConfigDict(frozen=True)

    key: str
    payload: str  # JSON encoded VersionCheckResult
    stored_at: datetime
