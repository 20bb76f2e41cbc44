"""
Version Checker - Update Action Model

Contains the UpdateAction enum and the helper that decides which kind of
prompt a result calls for. Rendering the prompt is up to the caller.

Author: Version Checker Project
"""

from enum import Enum

from .version_check_result import VersionCheckResult


class UpdateAction(Enum):
    """
    Enum of prompts a version check result can lead to.

    States:
    - NONE: App is up to date, nothing to show
    - OPTIONAL: Update available, user may postpone it
    - FORCE: Update is mandatory
    - ERROR: The check failed
    """
    NONE = "none"
    OPTIONAL = "optional"
    FORCE = "force"
    ERROR = "error"


def get_update_action(result: VersionCheckResult) -> UpdateAction:
    """
    Decide which prompt a result calls for.

    Args:
        result: Version check result

    Returns:
        UpdateAction for the result
    """
    if not result.success:
        return UpdateAction.ERROR
    if not result.update_available:
        return UpdateAction.NONE
    if result.force_update:
        return UpdateAction.FORCE
    return UpdateAction.OPTIONAL
