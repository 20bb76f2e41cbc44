"""
Shared fixtures for Version Checker tests

Provides fakes for the HTTP session, the fetcher and the clock so that
tests never touch the network or depend on wall-clock time.
"""

import sys
import json
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from version_checker.api import Fetcher
from version_checker.models import VersionCheckResult


class FakeResponse:
    """Minimal stand-in for requests.Response"""

    def __init__(self, status_code=200, body=None, text=None):
        self.status_code = status_code
        self.text = text if text is not None else json.dumps(body)

    def json(self):
        return json.loads(self.text)


class FakeSession:
    """Records POST calls and replays queued responses or exceptions"""

    def __init__(self):
        self.responses = []
        self.calls = []
        self.closed = False

    def queue(self, response):
        self.responses.append(response)

    def post(self, url, json=None, headers=None, timeout=None):
        self.calls.append({"url": url, "json": json, "headers": headers, "timeout": timeout})
        response = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(response, Exception):
            raise response
        return response

    def close(self):
        self.closed = True


class StubFetcher(Fetcher):
    """Fetcher returning queued results or raising queued exceptions"""

    def __init__(self):
        self.results = []
        self.requests = []

    def queue(self, result):
        self.results.append(result)

    def fetch(self, request):
        self.requests.append(request)
        result = self.results.pop(0) if len(self.results) > 1 else self.results[0]
        if isinstance(result, Exception):
            raise result
        return result


class FakeClock:
    """Clock that only moves when told to"""

    def __init__(self):
        self.now = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def stub_fetcher():
    return StubFetcher()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def make_response():
    return FakeResponse


@pytest.fixture
def update_result():
    return VersionCheckResult(
        success=True,
        current_version="1.0.0",
        platform="android",
        update_available=True,
        force_update=False,
        latest_version="1.2.0",
        download_url="https://play.google.com/store/apps/details?id=com.example",
        release_notes={"en": "Bug fixes", "es": "Correcciones"}
    )
