"""Data models for Genius search responses."""

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Tuple

from ..exceptions import DeserializationFailure

# JSON keys accepted for the lyrics page URL, in lookup order
LYRICS_URL_KEYS = ("lyrics_url", "url")


def _require(data: Any, key: str, expected: type, where: str) -> Any:
    if not isinstance(data, dict):
        raise DeserializationFailure(f"{where}: expected an object")
    if key not in data:
        raise DeserializationFailure(f"{where}: missing field '{key}'")
    value = data[key]
    # bool is an int subclass; reject it where an integer is expected
    if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
        raise DeserializationFailure(
            f"{where}: field '{key}' should be {expected.__name__}"
        )
    return value


@dataclass(frozen=True)
class TrackResult:
    """One song as described by the search endpoint."""

    title: str
    full_title: str
    artist_names: str
    id: int
    api_path: str
    lyrics_state: str
    art_image_url: str
    lyrics_page_url: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TrackResult":
        where = "result"
        track_id = _require(data, "id", int, where)
        if track_id < 0:
            raise DeserializationFailure(f"{where}: field 'id' must be non-negative")

        for key in LYRICS_URL_KEYS:
            if key in data:
                lyrics_page_url = _require(data, key, str, where)
                break
        else:
            raise DeserializationFailure(
                f"{where}: missing field '{LYRICS_URL_KEYS[0]}' (or '{LYRICS_URL_KEYS[1]}')"
            )

        return cls(
            title=_require(data, "title", str, where),
            full_title=_require(data, "full_title", str, where),
            artist_names=_require(data, "artist_names", str, where),
            id=track_id,
            api_path=_require(data, "api_path", str, where),
            lyrics_state=_require(data, "lyrics_state", str, where),
            art_image_url=_require(data, "song_art_image_url", str, where),
            lyrics_page_url=lyrics_page_url,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class SearchHit:
    """A ranked search hit wrapping one track."""

    result: TrackResult

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SearchHit":
        return cls(result=TrackResult.from_dict(_require(data, "result", dict, "hit")))


@dataclass(frozen=True)
class SearchResponse:
    """Search envelope: ``meta.status`` and ``response.hits`` in ranking order."""

    status: int
    hits: Tuple[SearchHit, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SearchResponse":
        meta = _require(data, "meta", dict, "envelope")
        status = _require(meta, "status", int, "meta")
        response = _require(data, "response", dict, "envelope")
        raw_hits: List[Any] = _require(response, "hits", list, "response")
        return cls(
            status=status,
            hits=tuple(SearchHit.from_dict(hit) for hit in raw_hits),
        )

    @property
    def tracks(self) -> List[TrackResult]:
        return [hit.result for hit in self.hits]
