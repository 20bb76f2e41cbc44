"""
Version Checker - Fetch Error Exception

Exception raised when version data could not be obtained: the server was
unreachable, answered with a non-2xx status, or sent a body that does not
match the result schema.

Author: Version Checker Project
"""

from typing import Optional

from .version_checker_error import VersionCheckerError


class FetchError(VersionCheckerError):
    """Exception for transport, protocol and schema failures."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
