"""
Version Checker - Version Check Result Model

The outcome of a version check, as returned by the server, by an offline
version source, or synthesized locally when the check failed.

Author: Version Checker Project
"""

from datetime import datetime
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError, model_validator

UNKNOWN_ERROR = "Unknown error occurred"

_BOOL_ADAPTER = TypeAdapter(bool)


def _reports_failure(value: Any) -> bool:
    """Whether a raw success value parses (laxly, as the field does) to False."""
    try:
        return not _BOOL_ADAPTER.validate_python(value)
    except ValidationError:
        # Left for field validation to reject
        return False


class VersionCheckResult(BaseModel):
    """
    Response model for a version check.

    A failed result (success=False) never reports an update and always
    carries a non-empty error message.
    """
    model_config = ConfigDict(frozen=True)

    success: bool
    current_version: str = ""
    platform: str = ""
    update_available: bool = False
    force_update: bool = False
    latest_version: Optional[str] = None
    download_url: Optional[str] = None
    release_notes: Union[str, Dict[str, str], None] = None  # Plain text or locale -> text
    message: Optional[str] = None
    error: Optional[str] = None
    checked_at: Optional[datetime] = None

    @model_validator(mode="before")
    @classmethod
    def _normalize_failure(cls, data: Any) -> Any:
        if isinstance(data, Mapping) and _reports_failure(data.get("success")):
            data = dict(data)
            data["update_available"] = False
            data["force_update"] = False
            if not data.get("error"):
                data["error"] = UNKNOWN_ERROR
        return data

    @classmethod
    def failure(cls, current_version: str, platform: str, error: str) -> "VersionCheckResult":
        """
        Build a failed result for a request.

        Args:
            current_version: Version echoed from the request
            platform: Platform echoed from the request
            error: Description of the failure

        Returns:
            Result with success=False and no update flags set
        """
        return cls(
            success=False,
            current_version=current_version,
            platform=platform,
            error=error or UNKNOWN_ERROR
        )

    @classmethod
    def from_json(cls, data: Any) -> "VersionCheckResult":
        """Parse a decoded JSON body. Raises pydantic.ValidationError on schema mismatch."""
        return cls.model_validate(data)

    def to_json(self) -> Dict[str, Any]:
        """Serialize to the wire format, omitting unset optional fields."""
        return self.model_dump(mode="json", exclude_none=True)

    def get_release_notes(self, locale: Optional[str] = None,
                          fallback_locale: str = "en") -> Optional[str]:
        """
        Get the release notes for a locale.

        Plain string notes are returned as-is. For localized notes the
        lookup order is: exact locale, its language part ("pt" for "pt-BR"),
        the fallback locale, then the first entry.

        Args:
            locale: Preferred locale code
            fallback_locale: Locale used when the preferred one is missing

        Returns:
            Release notes text, or None if there are none
        """
        notes = self.release_notes
        if notes is None or isinstance(notes, str):
            return notes
        if not notes:
            return None

        candidates = []
        if locale:
            candidates.append(locale)
            language = locale.replace('_', '-').split('-')[0]
            if language != locale:
                candidates.append(language)
        candidates.append(fallback_locale)

        for candidate in candidates:
            if candidate in notes:
                return notes[candidate]

        return next(iter(notes.values()))
