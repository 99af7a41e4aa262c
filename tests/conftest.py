"""Test configuration and fixtures.

Provides reusable fixtures for:
- Genius search API envelopes
- Lyrics page HTML
- Fake requests sessions/responses
- Credentials
"""

import os

import pytest
import requests

from genius_lyrics.config import GeniusCredentials


def pytest_addoption(parser):
    parser.addoption(
        "--run-network",
        action="store_true",
        default=False,
        help="Run tests that require network access",
    )


def pytest_collection_modifyitems(config, items):
    run_network = config.getoption("--run-network") or os.getenv(
        "RUN_INTEGRATION_TESTS"
    ) == "1"
    if run_network:
        return

    skip_network = pytest.mark.skip(
        reason="requires network access (use --run-network or RUN_INTEGRATION_TESTS=1)"
    )
    for item in items:
        if "network" in item.keywords or "integration" in item.keywords:
            item.add_marker(skip_network)


# =============================================================================
# Fake transport
# =============================================================================


class FakeResponse:
    def __init__(self, text="", json_data=None, status_code=200, headers=None):
        self.text = text
        self._json_data = json_data
        self.status_code = status_code
        self.headers = headers if headers is not None else {}

    def json(self):
        if isinstance(self._json_data, Exception):
            raise self._json_data
        return self._json_data


class FakeSession:
    """Returns queued responses; an Exception in the queue is raised instead."""

    def __init__(self, responses):
        self._responses = list(responses)
        self.calls = []

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append(
            {"url": url, "params": params, "headers": headers, "timeout": timeout}
        )
        if not self._responses:
            raise requests.exceptions.ConnectionError("no response")
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def fake_response():
    return FakeResponse


@pytest.fixture
def fake_session():
    return FakeSession


# =============================================================================
# Credentials
# =============================================================================


@pytest.fixture
def credentials():
    return GeniusCredentials(
        client_id="client-id",
        client_secret="client-secret",
        access_token="token-123",
    )


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Remove Genius variables from the environment and run from an empty dir."""
    for name in (
        "GENIUS_CLIENT_ID",
        "GENIUS_CLIENT_SECRET",
        "GENIUS_ACCESS_TOKEN",
        "GENIUS_LYRICS_TIMEOUT",
        "GENIUS_LYRICS_SEARCH_URL",
        "GENIUS_LYRICS_USER_AGENT",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


# =============================================================================
# Genius search API fixtures
# =============================================================================


@pytest.fixture
def track_payload_unpeeled():
    """Search result object for Cage the Elephant - Unpeeled."""
    return {
        "title": "Unpeeled",
        "full_title": "Unpeeled by Cage the Elephant",
        "artist_names": "Cage the Elephant",
        "id": 3182401,
        "api_path": "/songs/3182401",
        "lyrics_state": "complete",
        "song_art_image_url": "https://images.genius.com/unpeeled.1000x1000x1.jpg",
        "url": "https://genius.com/Cage-the-elephant-unpeeled-lyrics",
        "annotation_count": 1,
        "primary_artist": {"name": "Cage the Elephant"},
    }


@pytest.fixture
def track_payload_other():
    return {
        "title": "Unpeeled (Live)",
        "full_title": "Unpeeled (Live) by Someone Else",
        "artist_names": "Someone Else",
        "id": 42,
        "api_path": "/songs/42",
        "lyrics_state": "unreleased",
        "song_art_image_url": "https://images.genius.com/other.jpg",
        "url": "https://genius.com/Someone-else-unpeeled-live-lyrics",
    }


@pytest.fixture
def search_envelope(track_payload_unpeeled, track_payload_other):
    return {
        "meta": {"status": 200},
        "response": {
            "hits": [
                {"type": "song", "index": "song", "result": track_payload_unpeeled},
                {"type": "song", "index": "song", "result": track_payload_other},
            ]
        },
    }


@pytest.fixture
def empty_search_envelope():
    return {"meta": {"status": 200}, "response": {"hits": []}}


# =============================================================================
# Lyrics page fixtures
# =============================================================================


@pytest.fixture
def lyrics_page_html():
    return """
    <html>
      <head><title>Cage the Elephant – Unpeeled Lyrics | Genius Lyrics</title></head>
      <body>
        <div class="LyricsHeader">1 Contributor</div>
        <div data-lyrics-container="true">[Verse 1]<br/>Hello there<br/>General Kenobi</div>
        <div class="Ad">Advertisement</div>
        <div data-lyrics-container="true">[Chorus: Both]<br/>Sing along</div>
      </body>
    </html>
    """
