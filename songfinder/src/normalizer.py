"""Clasificación y normalización de la respuesta de /search/multi.

De todas las secciones que devuelve Genius solo interesan `top_hit`, `song`
y `lyric`, en ese orden. Dentro de ellas se descartan los hits que no son
canciones (artistas, álbumes, ...).
"""

import logging
from typing import Iterable, List, Optional, Sequence, Tuple, TypeVar

from pydantic import ValidationError

from .models import ArtistSummary, RawHit, RawSection, RawSong, SearchPayload, SongResult

SECTION_PRIORITY: Tuple[str, ...] = ("top_hit", "song", "lyric")

T = TypeVar("T")

log = logging.getLogger(__name__)


def first_section(sections: Iterable[RawSection], kind: str) -> Optional[RawSection]:
    """Primera sección con ese tipo; las repetidas se ignoran."""
    for section in sections:
        if section.type == kind:
            return section
    return None


def collect_song_hits(payload: SearchPayload, logger: Optional[logging.Logger] = None) -> List[RawSong]:
    sections = payload.response.sections
    hits: List[RawHit] = []
    for kind in SECTION_PRIORITY:
        section = first_section(sections, kind)
        if section is not None:
            hits.extend(section.hits)
    songs: List[RawSong] = []
    for hit in hits:
        if not hit.is_song:
            continue
        try:
            songs.append(hit.song())
        except ValidationError as exc:
            (logger or log).warning("Hit de canción descartado, no se pudo decodificar: %s", exc)
    return songs


def project_artists(song: RawSong) -> Tuple[ArtistSummary, ...]:
    return tuple(
        ArtistSummary(
            name=artist.name,
            is_verified=artist.is_verified,
            header_image_url=artist.header_image_url,
            image_url=artist.image_url,
        )
        for artist in song.primary_artists
    )


def build_song_result(song: RawSong) -> SongResult:
    return SongResult(
        title=song.title,
        full_title=song.full_title,
        url_song=song.relationships_index_url,
        url_lyric=song.url,
        header_image_url=song.header_image_url,
        header_image_thumbnail_url=song.header_image_thumbnail_url,
        release_date=song.release_date_for_display,
        artists=project_artists(song),
    )


def normalize_payload(payload: SearchPayload, logger: Optional[logging.Logger] = None) -> List[SongResult]:
    return [build_song_result(song) for song in collect_song_hits(payload, logger)]


def truncate(results: Sequence[T], limit: int) -> List[T]:
    """Primeros `limit` resultados, sin reordenar."""
    if limit < 0:
        raise ValueError("limit debe ser >= 0")
    if limit >= len(results):
        return list(results)
    return list(results[:limit])
