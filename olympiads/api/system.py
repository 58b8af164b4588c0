# olympiads/api/system.py
# Health probe and the JSON 404/405 for unmatched API requests.

from flask import Blueprint, request, jsonify, current_app
from werkzeug.exceptions import HTTPException, MethodNotAllowed
from olympiads.errors import StorageError
from olympiads.storage import get_storage

bp = Blueprint('system', __name__)

ALL_METHODS = ['GET', 'POST', 'PUT', 'PATCH', 'DELETE']


@bp.route('/health', methods=['GET'])
def health_route():
    """
    Reports whether the database answers. Used by scripts/health_check.py.
    """
    storage = get_storage()
    try:
        storage.ping()
    except StorageError:
        return jsonify({
            "status": "degraded",
            "database": {"status": "disconnected", "backend": storage.backend},
        }), 503
    return jsonify({
        "status": "ok",
        "database": {"status": "connected", "backend": storage.backend},
    }), 200


def _methods_routed_elsewhere(path):
    """Methods for which `path` resolves to a real API route."""
    adapter = current_app.url_map.bind_to_environ(request.environ)
    allowed = []
    for method in ALL_METHODS:
        try:
            endpoint, _ = adapter.match(path, method=method)
        except HTTPException:
            continue
        if endpoint != request.endpoint:
            allowed.append(method)
    return allowed


@bp.route('/<path:unknown_path>', methods=ALL_METHODS)
def api_not_found_route(unknown_path):
    allowed = _methods_routed_elsewhere(request.path)
    if allowed:
        current_app.logger.warning(f"405 - {request.method} not allowed on {request.path}")
        raise MethodNotAllowed(valid_methods=allowed)
    current_app.logger.warning(f"404 - API route not found: {request.method} {request.path}")
    return jsonify({"success": False, "error": "API route not found"}), 404
