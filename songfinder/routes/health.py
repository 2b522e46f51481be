from flask import Blueprint, jsonify
from ..src.config import Config
from ..src.services.genius_fetcher import GeniusFetcher


bp = Blueprint("health", __name__)


@bp.get("/health")
def health():
    """Estado del servicio y destino configurado de la búsqueda (no consulta Genius)."""
    fetcher = GeniusFetcher()
    return jsonify({
        "status": "ok",
        "service": "songfinder",
        "debug": Config.DEBUG,
        "upstream": {
            "provider": fetcher.name,
            "search_url": f"{fetcher.api_base}/{fetcher.SEARCH_ROUTE}",
            "timeout": fetcher.timeout,
        },
    }), 200
