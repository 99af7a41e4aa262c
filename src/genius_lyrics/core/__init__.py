"""Core functionality modules."""

from .models import SearchHit, SearchResponse, TrackResult
from .lyrics_processing import extract_lyrics, find_lyrics_containers, normalize_lyrics
from .genius import GeniusClient, first_hit, get_lyrics_for

__all__ = [
    "SearchHit",
    "SearchResponse",
    "TrackResult",
    "extract_lyrics",
    "find_lyrics_containers",
    "normalize_lyrics",
    "GeniusClient",
    "first_hit",
    "get_lyrics_for",
]
