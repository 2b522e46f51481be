"""Cliente HTTP para el endpoint público de búsqueda de Genius.

Solo hace la petición; la clasificación de resultados vive en `normalizer`.
"""

from typing import Any, Dict
import requests

from ..config import Config
from .base import SearchFetcher


class GeniusError(RuntimeError):
    """Fallo de transporte o de parseo al consultar Genius."""


class GeniusFetcher(SearchFetcher):
    SEARCH_ROUTE = "search/multi"
    name = "genius"

    def __init__(self, api_base: str | None = None, timeout: float | None = None):
        self.api_base = (api_base or Config.GENIUS_API_BASE).rstrip("/")
        self.timeout = timeout if timeout is not None else Config.GENIUS_TIMEOUT

    def _headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/json",
            "User-Agent": Config.GENIUS_USER_AGENT,
        }

    def fetch(self, query: str) -> Dict[str, Any]:
        """GET /search/multi?q=<query>. `requests` codifica el parámetro."""
        try:
            r = requests.get(
                f"{self.api_base}/{self.SEARCH_ROUTE}",
                params={"q": query},
                headers=self._headers(),
                timeout=self.timeout,
            )
            r.raise_for_status()
            return r.json()
        except requests.RequestException as exc:
            raise GeniusError(f"Genius no respondió correctamente: {exc}") from exc
        except ValueError as exc:
            raise GeniusError(f"Respuesta de Genius no es JSON válido: {exc}") from exc
