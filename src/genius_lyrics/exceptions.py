"""Custom exceptions for genius_lyrics.

Every pipeline stage raises a subclass of ``GeniusLyricsError`` whose
``stage`` attribute names the stage that failed.
"""


class GeniusLyricsError(Exception):
    """Base exception for genius_lyrics."""

    stage = ""


PipelineError = GeniusLyricsError


class ConfigError(GeniusLyricsError):
    """Invalid configuration value."""

    stage = "config"


class SearchError(GeniusLyricsError):
    """Error querying the search endpoint."""

    stage = "search"


class TransportFailure(SearchError):
    """No response was received from the search endpoint."""
    pass


class UnsuccessfulStatus(SearchError):
    """The search endpoint answered with a non-2xx status."""

    def __init__(self, status_code: int, message: str = ""):
        self.status_code = status_code
        super().__init__(message or f"unsuccessful request, status: {status_code}")


class DeserializationFailure(SearchError):
    """The response body does not match the expected envelope."""
    pass


class SelectionError(GeniusLyricsError):
    """Error selecting a track from a search response."""

    stage = "select"


class NoResults(SelectionError):
    """The search succeeded but returned zero hits."""
    pass


class FetchError(GeniusLyricsError):
    """Error fetching a lyrics page."""

    stage = "fetch"


class FetchFailure(FetchError):
    """Transport failure or non-text response while fetching a page."""
    pass
