"""Endpoint de búsqueda de canciones en Genius.

Expone el contrato con motivo (`reason`) para que el cliente distinga
"sin coincidencias", "sin limit" y "falló la búsqueda".
"""

from flask import Blueprint, jsonify, request

from ..src.models import SearchOptions
from ..src.services.genius_service import GeniusSearchService


bp = Blueprint("search", __name__)


def _parse_limit(raw):
    if raw is None or raw == "":
        return None
    limit = int(raw)
    if limit < 0:
        raise ValueError("limit debe ser >= 0")
    return limit


@bp.get("/search")
def search_route():
    """Query: q (requerido), limit (opcional, >= 0).

    Respuesta: { query, items: [ song... ], returned, reason }
    """
    q = (request.args.get("q") or "").strip()
    if not q:
        return jsonify({"error": "q requerido"}), 400
    try:
        limit = _parse_limit(request.args.get("limit"))
    except ValueError:
        return jsonify({"error": "limit debe ser un entero >= 0"}), 400

    outcome = GeniusSearchService().search_songs(q, SearchOptions(limit=limit))
    body = {
        "query": q,
        "items": [song.to_dict() for song in outcome.results],
        "returned": len(outcome.results),
        "reason": outcome.reason.value,
    }
    if outcome.failed:
        body["error"] = "No se pudo consultar Genius"
        return jsonify(body), 502
    return jsonify(body), 200
