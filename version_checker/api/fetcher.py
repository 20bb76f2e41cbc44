"""
Version Checker - Fetcher Module

Fetchers obtain version data for a request. HttpFetcher posts the request
to the configured endpoint; CallableFetcher delegates to an offline
version source. Both report every failure as FetchError.

Author: Version Checker Project
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import requests
from pydantic import ValidationError

from ..exceptions import FetchError
from ..models import VersionCheckRequest, VersionCheckResult, VersionCheckerConfig, VersionSource

# Configure logging
logger = logging.getLogger(__name__)


class Fetcher(ABC):
    """Interface for obtaining version data."""

    @abstractmethod
    def fetch(self, request: VersionCheckRequest) -> VersionCheckResult:
        """
        Obtain the version check result for a request.

        Raises:
            FetchError: If no well-formed result could be obtained
        """

    def close(self):
        """Release resources held by the fetcher."""


class HttpFetcher(Fetcher):
    """
    Fetcher posting requests to the version check endpoint.

    Responsibilities:
    - Build request headers from the configuration
    - POST the serialized request with the configured timeout
    - Parse and validate the response body
    - Translate transport, status and schema failures into FetchError
    """

    def __init__(self, config: VersionCheckerConfig, session: Optional[requests.Session] = None):
        """
        Initialize HTTP fetcher.

        Args:
            config: Version checker configuration (api_url, timeout, headers)
            session: Optional requests session; a new one is created if omitted
        """
        self.config = config
        # Use session for connection pooling across checks
        self.session = session if session is not None else requests.Session()
        logger.debug(f"Initialized HTTP fetcher for {self.config.api_url}")

    def close(self):
        """Close the session and release resources."""
        if self.session:
            self.session.close()
            logger.debug("HTTP fetcher session closed")

    def build_headers(self) -> Dict[str, str]:
        """
        Build request headers.

        Custom headers are applied last and may override the defaults.

        Returns:
            Header dict
        """
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json"
        }
        if self.config.user_agent:
            headers["User-Agent"] = self.config.user_agent
        if self.config.custom_headers:
            headers.update(self.config.custom_headers)
        return headers

    def fetch(self, request: VersionCheckRequest) -> VersionCheckResult:
        url = self.config.api_url
        logger.debug(f"API request: POST {url}")

        try:
            response = self.session.post(
                url,
                json=request.to_json(),
                headers=self.build_headers(),
                timeout=self.config.timeout_seconds
            )
        except requests.exceptions.ConnectionError as e:
            logger.error(f"Cannot connect to server at {url}: {e}")
            raise FetchError(f"Cannot connect to server at {url}: {e}") from e
        except requests.exceptions.Timeout as e:
            logger.error("Request timed out")
            raise FetchError(f"Request timed out after {self.config.timeout_seconds} seconds") from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Request error: {str(e)}")
            raise FetchError(f"Request error: {str(e)}") from e

        if not 200 <= response.status_code < 300:
            logger.error(f"Version check failed with status {response.status_code}")
            raise FetchError(
                f"API request failed with status {response.status_code}: {response.text}",
                status_code=response.status_code
            )

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Version check returned invalid JSON: {e}")
            raise FetchError(f"Invalid response format: {e}", status_code=response.status_code) from e

        return parse_result(data)


class CallableFetcher(Fetcher):
    """Fetcher delegating to an offline version source."""

    def __init__(self, source: VersionSource):
        """
        Initialize callable fetcher.

        Args:
            source: Callable taking a VersionCheckRequest and returning a
                VersionCheckResult (or a dict in the response format)
        """
        self.source = source

    def fetch(self, request: VersionCheckRequest) -> VersionCheckResult:
        try:
            result = self.source(request)
        except FetchError:
            raise
        except Exception as e:
            logger.error(f"Version source failed: {e}")
            raise FetchError(f"Version source failed: {e}") from e

        if isinstance(result, VersionCheckResult):
            return result
        return parse_result(result)


def parse_result(data: Any) -> VersionCheckResult:
    """
    Validate a decoded response body.

    Args:
        data: Decoded JSON body

    Returns:
        VersionCheckResult

    Raises:
        FetchError: If the body does not match the result schema
    """
    try:
        return VersionCheckResult.from_json(data)
    except ValidationError as e:
        logger.error(f"Version check response does not match schema: {e}")
        raise FetchError(f"Invalid response format: {e}") from e
