"""
Shared pytest fixtures and payload builders.
Payloads mimic the shape of Genius' /search/multi response so no test touches the network.
"""
from typing import Any, Dict, List, Optional

import pytest

from songfinder.src.services.base import SearchFetcher


# =============================================================================
# Payload builders
# =============================================================================

def make_artist(name: str, verified: bool = False) -> Dict[str, Any]:
    slug = name.lower().replace(" ", "-")
    return {
        "id": abs(hash(name)) % 100000,
        "name": name,
        "slug": slug,
        "is_verified": verified,
        "is_meme_verified": False,
        "iq": 100,
        "image_url": f"https://images.genius.com/{slug}-avatar.jpg",
        "header_image_url": f"https://images.genius.com/{slug}-header.jpg",
        "url": f"https://genius.com/artists/{slug}",
        "api_path": f"/artists/{slug}",
        "index_character": slug[0],
    }


def make_song(title: str, artists: Optional[List[Dict[str, Any]]] = None) -> Dict[str, Any]:
    slug = title.lower().replace(" ", "-")
    artists = artists if artists is not None else [make_artist("Some Artist")]
    artist_names = " & ".join(a["name"] for a in artists)
    return {
        "_type": "song",
        "annotation_count": 3,
        "api_path": f"/songs/{slug}",
        "artist_names": artist_names,
        "full_title": f"{title} by {artist_names}",
        "header_image_thumbnail_url": f"https://images.genius.com/{slug}-300x300.jpg",
        "header_image_url": f"https://images.genius.com/{slug}-1000x1000.jpg",
        "instrumental": False,
        "lyrics_state": "complete",
        "path": f"/{slug}-lyrics",
        "relationships_index_url": f"https://genius.com/{slug}-sample",
        "release_date_components": {"year": 1975, "month": 10, "day": 31},
        "release_date_for_display": "October 31, 1975",
        "stats": {"unreviewed_annotations": 0, "hot": False, "pageviews": 1000},
        "title": title,
        "title_with_featured": title,
        "url": f"https://genius.com/{slug}-lyrics",
        "featured_artists": [],
        "primary_artist": artists[0] if artists else None,
        "primary_artists": artists,
    }


def song_hit(title: str, artists: Optional[List[Dict[str, Any]]] = None) -> Dict[str, Any]:
    return {"highlights": [], "index": "song", "type": "song", "result": make_song(title, artists)}


def artist_hit(name: str) -> Dict[str, Any]:
    return {"highlights": [], "index": "artist", "type": "artist", "result": make_artist(name)}


def album_hit(name: str) -> Dict[str, Any]:
    return {
        "highlights": [],
        "index": "album",
        "type": "album",
        "result": {"name": name, "full_title": name, "url": "https://genius.com/albums/x"},
    }


def section(kind: str, *hits: Dict[str, Any]) -> Dict[str, Any]:
    return {"type": kind, "hits": list(hits)}


def make_payload(*sections: Dict[str, Any], status: int = 200) -> Dict[str, Any]:
    return {"meta": {"status": status}, "response": {"sections": list(sections)}}


class FakeFetcher(SearchFetcher):
    """Returns a canned payload (or raises) and records the queries it saw."""

    name = "fake"

    def __init__(self, payload: Any = None, error: Optional[Exception] = None):
        self.payload = payload
        self.error = error
        self.queries: List[str] = []

    def fetch(self, query: str) -> Dict[str, Any]:
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return self.payload


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def mixed_payload() -> Dict[str, Any]:
    """All three relevant sections plus noise: non-song hits and an unrelated section."""
    return make_payload(
        section("top_hit", artist_hit("Queen"), song_hit("Top Song")),
        section("song", song_hit("Song One"), album_hit("A Night at the Opera"), song_hit("Song Two")),
        section("lyric", song_hit("Lyric Song")),
        section("artist", artist_hit("Queen")),
        section("video", song_hit("Video Song")),
    )


@pytest.fixture
def bohemian_payload() -> Dict[str, Any]:
    return make_payload(
        section("top_hit", song_hit("Bohemian Rhapsody", [make_artist("Queen", verified=True)])),
        section("song", song_hit("Bohemian Rhapsody (Live)", [make_artist("Queen", verified=True)])),
    )
