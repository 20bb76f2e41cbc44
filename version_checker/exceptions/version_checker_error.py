"""
Version Checker - Base Error Exception

Base exception class for all version checker errors.

Author: Version Checker Project
"""


class VersionCheckerError(Exception):
    """Base exception for version checker errors."""
    pass
