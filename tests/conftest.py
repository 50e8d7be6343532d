"""Shared pytest fixtures for the Jira REST client tests.

Fixture Organization:
    - Config fixtures: explicit JiraConfig instances, isolated from env/.env
    - Transport fixtures: scripted transport double replaying canned responses
    - Response helpers: build Response/ErrorResponse values for scripts
"""

import json
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pytest

from jira_rest.config import JiraConfig, reset_config
from jira_rest.request import JSON_CONTENT_TYPE
from jira_rest.transport import ErrorResponse, Response

# Test modules import the helpers below with "from conftest import ..."
tests_dir = Path(__file__).parent
if str(tests_dir) not in sys.path:
    sys.path.insert(0, str(tests_dir))

# =============================================================================
# Response helpers
# =============================================================================


def json_response(data: Any, status_code: int = 200) -> Response:
    """Response carrying ``data`` as JSON with Jira's content-type."""
    return Response(
        status_code=status_code,
        body=json.dumps(data),
        headers={"content-type": JSON_CONTENT_TYPE},
    )


def page_response(field_name: str, items: list, total: int) -> Response:
    """Paginated envelope response."""
    return json_response({"total": total, field_name: items, "maxResults": len(items)})


def error_response(message: str) -> ErrorResponse:
    return ErrorResponse(message=message)


# =============================================================================
# Transport double
# =============================================================================


@dataclass
class RecordedCall:
    method: str
    url: str
    timeout: int
    headers: dict[str, str]
    body: str | None = None


@dataclass
class ScriptedTransport:
    """Transport returning pre-scripted results in order, recording every call."""

    responses: list = field(default_factory=list)
    calls: list[RecordedCall] = field(default_factory=list)
    name: str = "scripted"
    closed: bool = False

    def _next(self):
        if not self.responses:
            raise AssertionError("ScriptedTransport ran out of responses")
        return self.responses.pop(0)

    def get(self, url, *, timeout, headers):
        self.calls.append(RecordedCall("GET", url, timeout, dict(headers)))
        return self._next()

    def post(self, url, *, body, timeout, headers):
        self.calls.append(RecordedCall("POST", url, timeout, dict(headers), body))
        return self._next()

    def close(self):
        self.closed = True


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch, tmp_path):
    """Keep real JIRA_* env vars and any local .env out of every test."""
    for key in list(os.environ):
        if key.upper().startswith("JIRA_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def jira_config():
    return JiraConfig(
        jira_account="test.atlassian.net",
        jira_username="test@example.com",
        jira_password="test-token-123",
    )


@pytest.fixture
def transport():
    return ScriptedTransport()
