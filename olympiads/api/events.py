# olympiads/api/events.py
# (This file is for all event routes.)

from flask import Blueprint, request, jsonify
from flask_login import login_required
from olympiads.storage import get_storage
from olympiads.utils import _handle_service_result, filter_value
from olympiads.services.events import list_events, get_event, create_event, delete_event

bp = Blueprint('events', __name__)


@bp.route('/events', methods=['GET'])
def list_events_route():
    event_type = filter_value(request.args.get('type'))
    return jsonify(list_events(get_storage(), event_type)), 200


@bp.route('/events/<int:event_id>', methods=['GET'])
def get_event_route(event_id):
    return jsonify(get_event(get_storage(), event_id)), 200


@bp.route('/events', methods=['POST'])
@login_required
def create_event_route():
    """
    Multipart form: title, description, event_date (YYYY-MM-DD), event_type,
    plus optional 'image' and 'certificate' files.
    """
    result = create_event(get_storage(), request.form, request.files)
    return _handle_service_result(result)


@bp.route('/events/<int:event_id>', methods=['DELETE'])
@login_required
def delete_event_route(event_id):
    return _handle_service_result(delete_event(get_storage(), event_id))
