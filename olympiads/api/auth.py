# olympiads/api/auth.py
# (This file holds the admin login/logout routes.)

from flask import Blueprint, jsonify
from olympiads.storage import get_storage
from olympiads.utils import _handle_service_result, get_request_data
from olympiads.services.admins import login, logout, session_status

bp = Blueprint('auth', __name__)


@bp.route('/login', methods=['POST'])
def login_route():
    """
    Logs the admin in. Accepts a JSON or form body with username/password.

    Response:
        200: {"success": true} and a session cookie
        400: username or password missing
        401: invalid credentials (no hint about which one)
    """
    data = get_request_data()
    result = login(get_storage(), data.get('username'), data.get('password'))
    return _handle_service_result(result)


@bp.route('/logout', methods=['POST'])
def logout_route():
    return _handle_service_result(logout())


@bp.route('/session', methods=['GET'])
def session_route():
    """Lets the dashboard check whether its session is still alive."""
    return jsonify(session_status()), 200
