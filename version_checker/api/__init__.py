"""
Version Checker - API Package

This package contains the fetchers that obtain version data, over HTTP
or from an offline source.
"""

from .fetcher import Fetcher, HttpFetcher, CallableFetcher, parse_result
from .manifest_source import ManifestVersionSource

__all__ = ['Fetcher', 'HttpFetcher', 'CallableFetcher', 'parse_result', 'ManifestVersionSource']
