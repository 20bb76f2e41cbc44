"""
Version Checker - Services Package

Contains the version checker service orchestrating cache and fetch.

Author: Version Checker Project
"""

from .version_checker_service import VersionCheckerService, clear_cached_results, utc_now

__all__ = ['VersionCheckerService', 'clear_cached_results', 'utc_now']
