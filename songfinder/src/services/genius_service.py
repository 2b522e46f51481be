"""Servicio de búsqueda de canciones sobre Genius.

Une el fetcher HTTP con la normalización. Ningún error sale de aquí: los
fallos se registran en el logger inyectado y se reportan como
`OutcomeReason.FAILED` (o `None` en el contrato histórico de `search`).
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Union

from pydantic import ValidationError

from ..models import OutcomeReason, SearchOptions, SearchOutcome, SearchPayload, SongResult
from ..normalizer import normalize_payload, truncate
from .base import SearchFetcher
from .genius_fetcher import GeniusFetcher

log = logging.getLogger(__name__)

OptionsLike = Union[SearchOptions, Mapping[str, Any], None]


def _coerce_options(options: OptionsLike) -> SearchOptions:
    if options is None:
        return SearchOptions()
    if isinstance(options, SearchOptions):
        return options
    return SearchOptions.model_validate(options)


class GeniusSearchService:
    name = "genius"

    def __init__(self, fetcher: SearchFetcher | None = None, logger: logging.Logger | None = None):
        self.fetcher = fetcher or GeniusFetcher()
        self.logger = logger or log

    def search_songs(self, query: str, options: OptionsLike = None) -> SearchOutcome:
        """Busca canciones y devuelve siempre una secuencia más el motivo.

        Sin `limit` se devuelven todos los resultados con motivo `no_limit`;
        con `limit` se truncan respetando el orden de las secciones.
        """
        try:
            opts = _coerce_options(options)
        except ValidationError as exc:
            self.logger.warning("Opciones de búsqueda inválidas %r: %s", options, exc)
            return SearchOutcome(reason=OutcomeReason.FAILED)
        if not query or not query.strip():
            self.logger.warning("Búsqueda vacía, no se consulta %s", self.fetcher.name)
            return SearchOutcome(reason=OutcomeReason.FAILED)
        try:
            payload = SearchPayload.model_validate(self.fetcher.fetch(query))
            status = payload.meta.status
            if status is not None and status >= 400:
                self.logger.warning("%s respondió meta.status=%s para %r", self.fetcher.name, status, query)
                return SearchOutcome(reason=OutcomeReason.FAILED)
            results = normalize_payload(payload, self.logger)
        except Exception:
            self.logger.exception("Error buscando %r en %s", query, self.fetcher.name)
            return SearchOutcome(reason=OutcomeReason.FAILED)

        self.logger.debug("%s: %d canciones para %r", self.fetcher.name, len(results), query)
        if opts.limit is None:
            return SearchOutcome(results=tuple(results), reason=OutcomeReason.NO_LIMIT)
        limited = truncate(results, opts.limit)
        reason = OutcomeReason.OK if limited else OutcomeReason.EMPTY
        return SearchOutcome(results=tuple(limited), reason=reason)

    def search(self, query: str, options: OptionsLike = None) -> Optional[List[SongResult]]:
        """Contrato histórico: lista de resultados, o `None` si falla o falta `limit`."""
        return self.search_songs(query, options).legacy_value()


def search_songs(
    query: str,
    options: OptionsLike = None,
    *,
    fetcher: SearchFetcher | None = None,
    logger: logging.Logger | None = None,
) -> SearchOutcome:
    return GeniusSearchService(fetcher=fetcher, logger=logger).search_songs(query, options)


def search(
    query: str,
    options: OptionsLike = None,
    *,
    fetcher: SearchFetcher | None = None,
    logger: logging.Logger | None = None,
) -> Optional[List[SongResult]]:
    return GeniusSearchService(fetcher=fetcher, logger=logger).search(query, options)
