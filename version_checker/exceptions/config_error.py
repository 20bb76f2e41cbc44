"""
Version Checker - Configuration Error Exception

Exception raised when the configuration is invalid or incomplete.

Author: Version Checker Project
"""

from .version_checker_error import VersionCheckerError


class ConfigError(VersionCheckerError):
    """Exception for configuration errors."""
    pass
