"""genius_lyrics - fetch song lyrics through the Genius search API."""

__version__ = "0.1.0"

from .config import GeniusCredentials, load_credentials
from .core import (
    GeniusClient,
    SearchHit,
    SearchResponse,
    TrackResult,
    extract_lyrics,
    first_hit,
    get_lyrics_for,
    normalize_lyrics,
)
from .exceptions import (
    GeniusLyricsError,
    PipelineError,
    SearchError,
    TransportFailure,
    UnsuccessfulStatus,
    DeserializationFailure,
    SelectionError,
    NoResults,
    FetchError,
    FetchFailure,
)

__all__ = [
    "__version__",
    "GeniusCredentials",
    "load_credentials",
    "GeniusClient",
    "SearchHit",
    "SearchResponse",
    "TrackResult",
    "extract_lyrics",
    "first_hit",
    "get_lyrics_for",
    "normalize_lyrics",
    "GeniusLyricsError",
    "PipelineError",
    "SearchError",
    "TransportFailure",
    "UnsuccessfulStatus",
    "DeserializationFailure",
    "SelectionError",
    "NoResults",
    "FetchError",
    "FetchFailure",
]
