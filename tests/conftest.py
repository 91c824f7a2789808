"""
Shared fixtures: a plain session state for controllers and an HTTP mock
transport for the API client.
"""

from __future__ import annotations

import json
from typing import Callable
from unittest.mock import patch

import httpx
import pytest

from services.api_client import ApiClient


class SessionState(dict):
    """Dict with attribute access, standing in for st.session_state."""

    def __getattr__(self, key):
        try:
            return self[key]
        except KeyError:
            raise AttributeError(key)

    def __setattr__(self, key, value):
        self[key] = value


@pytest.fixture
def session_state():
    state = SessionState()
    with patch("streamlit.session_state", state):
        yield state


def json_response(status_code: int, payload) -> httpx.Response:
    return httpx.Response(
        status_code,
        content=json.dumps(payload).encode(),
        headers={"content-type": "application/json"},
    )


@pytest.fixture
def make_api() -> Callable[..., tuple[ApiClient, list[httpx.Request]]]:
    """
    Build an ApiClient whose requests go to `handler`.

    Returns the client and the list of requests it has sent.
    """
    def factory(handler, token: str | None = "test-token"):
        sent: list[httpx.Request] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            return handler(request)

        api = ApiClient(
            base_url="http://api.test/api",
            token_provider=lambda: token,
            timeout=5.0,
            transport=httpx.MockTransport(recording_handler),
        )
        return api, sent

    return factory
