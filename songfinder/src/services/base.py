from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict


class SearchFetcher(ABC):
    """Clase base para clientes que consultan un endpoint de búsqueda.

    Un fetcher hace una sola petición y devuelve el JSON crudo; no interpreta
    la respuesta. Los errores de transporte o de parseo se levantan.
    """

    name: str = "fetcher"

    @abstractmethod
    def fetch(self, query: str) -> Dict[str, Any]:
        """Ejecuta la búsqueda y devuelve el documento JSON decodificado."""
        raise NotImplementedError
