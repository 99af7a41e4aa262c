"""Genius search and lyrics scraping pipeline."""

from typing import Optional

import requests  # type: ignore[import-untyped]

from ..config import (
    GeniusCredentials,
    get_search_url,
    get_timeout,
    get_user_agent,
    load_credentials,
)
from ..exceptions import NoResults
from ..utils.logging import get_logger
from .fetch import JSON_HEADERS, fetch_html, fetch_json
from .lyrics_processing import extract_lyrics, normalize_lyrics
from .models import SearchResponse, TrackResult

logger = get_logger(__name__)


def first_hit(response: SearchResponse) -> TrackResult:
    """Return the best-ranked track of a search response, or raise NoResults."""
    if not response.hits:
        raise NoResults("no songs returned from search")
    return response.hits[0].result


class GeniusClient:
    """
    Client for the Genius search API and lyrics pages.

    Credentials are read once (or passed in) and never mutated. A single
    client may be shared between threads as long as the session is.
    """

    def __init__(
        self,
        credentials: Optional[GeniusCredentials] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        search_url: Optional[str] = None,
    ):
        self.credentials = credentials if credentials is not None else load_credentials()
        self.timeout = timeout if timeout is not None else get_timeout()
        self.search_url = search_url or get_search_url()
        self._owns_session = session is None
        self.session = session or requests.Session()

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "GeniusClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def search(self, term: str) -> SearchResponse:
        """
        Query the search endpoint for ``term``.

        Raises TransportFailure, UnsuccessfulStatus or DeserializationFailure.
        """
        params = {"q": term, "access_token": self.credentials.access_token}
        data = fetch_json(
            self.search_url,
            params=params,
            headers=JSON_HEADERS,
            timeout=self.timeout,
            session=self.session,
        )
        response = SearchResponse.from_dict(data)
        logger.debug(f"Search '{term}' returned {len(response.hits)} hits")
        return response

    search_songs = search

    def search_song_first_res(self, term: str) -> TrackResult:
        track = first_hit(self.search(term))
        logger.info(f"Selected: {track.full_title} ({track.lyrics_state})")
        return track

    def fetch_page(self, url: str) -> str:
        """GET a lyrics page and return its HTML. Raises FetchFailure."""
        headers = {"Accept": "*/*", "User-Agent": get_user_agent()}
        return fetch_html(url, headers=headers, timeout=self.timeout, session=self.session)

    def scrape_song_lyrics(self, song_url: str) -> str:
        """Fetch a lyrics page and return the raw extracted lyrics."""
        return extract_lyrics(self.fetch_page(song_url))

    def scrape_song_lyrics_processed(self, song_url: str) -> str:
        return normalize_lyrics(self.scrape_song_lyrics(song_url))

    def get_lyrics_for(self, term: str) -> str:
        """
        Search for ``term`` and return the normalized lyrics of the first hit.

        The first failing stage raises its own exception; nothing is
        fetched after a failed search or selection.
        """
        track = self.search_song_first_res(term)
        lyrics = self.scrape_song_lyrics_processed(track.lyrics_page_url)
        if not lyrics:
            logger.warning(f"No lyrics text found for {track.full_title}")
        return lyrics


def get_lyrics_for(term: str, client: Optional[GeniusClient] = None) -> str:
    """Convenience wrapper around ``GeniusClient.get_lyrics_for``."""
    if client is not None:
        return client.get_lyrics_for(term)
    with GeniusClient() as owned:
        return owned.get_lyrics_for(term)
