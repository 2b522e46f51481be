"""Modelos de la búsqueda: payload crudo de Genius y registros de salida.

El payload se valida en la frontera con pydantic. Los campos desconocidos se
ignoran, los ausentes (o `null`) quedan como `None` o como colección vacía y
los de tipo inesperado se convierten a texto o se descartan. Así la deriva de
forma de un hit no tumba el resto de la búsqueda.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _objects_only(value: Any) -> Any:
    """`null` -> lista vacía; descarta elementos que no son objetos."""
    if value is None:
        return []
    if isinstance(value, list):
        return [item for item in value if isinstance(item, dict)]
    return value


def _text_or_none(value: Any) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def _bool_or_none(value: Any) -> Optional[bool]:
    return value if isinstance(value, bool) else None


class _RawModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class RawArtist(_RawModel):
    name: Optional[str] = None
    is_verified: Optional[bool] = None
    header_image_url: Optional[str] = None
    image_url: Optional[str] = None

    lenient_text = field_validator("name", "header_image_url", "image_url", mode="before")(_text_or_none)
    lenient_flag = field_validator("is_verified", mode="before")(_bool_or_none)


class RawSong(_RawModel):
    title: Optional[str] = None
    full_title: Optional[str] = None
    url: Optional[str] = None
    relationships_index_url: Optional[str] = None
    header_image_url: Optional[str] = None
    header_image_thumbnail_url: Optional[str] = None
    release_date_for_display: Optional[str] = None
    primary_artists: List[RawArtist] = Field(default_factory=list)

    null_artists = field_validator("primary_artists", mode="before")(_objects_only)
    lenient_text = field_validator(
        "title",
        "full_title",
        "url",
        "relationships_index_url",
        "header_image_url",
        "header_image_thumbnail_url",
        "release_date_for_display",
        mode="before",
    )(_text_or_none)


class RawHit(_RawModel):
    """Un resultado de sección. `result` depende de `type` (song, artist, album...)."""

    type: Optional[str] = None
    result: Dict[str, Any] = Field(default_factory=dict)

    lenient_type = field_validator("type", mode="before")(_text_or_none)

    @field_validator("result", mode="before")
    @classmethod
    def null_result(cls, value: Any) -> Any:
        return value if isinstance(value, dict) else {}

    @property
    def is_song(self) -> bool:
        return self.type == "song"

    def song(self) -> RawSong:
        """Decodifica `result` como canción. Solo tiene sentido si `is_song`."""
        return RawSong.model_validate(self.result)


class RawSection(_RawModel):
    type: Optional[str] = None
    hits: List[RawHit] = Field(default_factory=list)

    null_hits = field_validator("hits", mode="before")(_objects_only)
    lenient_type = field_validator("type", mode="before")(_text_or_none)


class RawMeta(_RawModel):
    status: Optional[int] = None


class RawResponse(_RawModel):
    sections: List[RawSection] = Field(default_factory=list)

    null_sections = field_validator("sections", mode="before")(_objects_only)


class SearchPayload(_RawModel):
    """Documento completo devuelto por /search/multi."""

    meta: RawMeta = Field(default_factory=RawMeta)
    response: RawResponse = Field(default_factory=RawResponse)

    @field_validator("meta", "response", mode="before")
    @classmethod
    def null_object(cls, value: Any) -> Any:
        return {} if value is None else value


class ArtistSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    is_verified: Optional[bool] = None
    header_image_url: Optional[str] = None
    image_url: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")


class SongResult(BaseModel):
    """Registro normalizado de una canción, listo para el consumidor."""

    model_config = ConfigDict(frozen=True)

    title: Optional[str] = None
    full_title: Optional[str] = None
    url_song: Optional[str] = None
    url_lyric: Optional[str] = None
    header_image_url: Optional[str] = None
    header_image_thumbnail_url: Optional[str] = None
    release_date: Optional[str] = Field(default=None, serialization_alias="date")
    artists: Tuple[ArtistSummary, ...] = Field(default=(), serialization_alias="artist")

    def to_dict(self) -> Dict[str, Any]:
        """Forma original de la respuesta (`date`, `artist`)."""
        return self.model_dump(mode="json", by_alias=True)


class SearchOptions(BaseModel):
    """`limit` ausente significa sin tope."""

    model_config = ConfigDict(frozen=True)

    limit: Optional[int] = Field(default=None, ge=0)


class OutcomeReason(str, Enum):
    OK = "ok"
    EMPTY = "empty"
    NO_LIMIT = "no_limit"
    FAILED = "failed"


class SearchOutcome(BaseModel):
    """Resultado de `search_songs`: siempre una secuencia más el motivo."""

    model_config = ConfigDict(frozen=True)

    results: Tuple[SongResult, ...] = ()
    reason: OutcomeReason = OutcomeReason.OK

    @property
    def failed(self) -> bool:
        return self.reason is OutcomeReason.FAILED

    def legacy_value(self) -> Optional[List[SongResult]]:
        """Contrato histórico: `None` si falló o si no se pasó `limit`."""
        if self.reason in (OutcomeReason.FAILED, OutcomeReason.NO_LIMIT):
            return None
        return list(self.results)
