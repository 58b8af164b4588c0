# olympiads/api/olympiad_dates.py
# (This file is for the key olympiad date routes.)

from flask import Blueprint, jsonify
from flask_login import login_required
from olympiads.storage import get_storage
from olympiads.utils import _handle_service_result, get_request_data
from olympiads.services.olympiad_dates import (
    list_upcoming_dates,
    list_all_dates,
    get_olympiad_date,
    create_olympiad_date,
    delete_olympiad_date
)

bp = Blueprint('olympiad_dates', __name__)


@bp.route('/olympiad-dates', methods=['GET'])
def upcoming_dates_route():
    """Public: only dates from today onwards."""
    return jsonify(list_upcoming_dates(get_storage())), 200


@bp.route('/all-olympiad-dates', methods=['GET'])
@login_required
def all_dates_route():
    """Admin: every date including past ones."""
    return jsonify(list_all_dates(get_storage())), 200


@bp.route('/olympiad-dates/<int:date_id>', methods=['GET'])
def get_olympiad_date_route(date_id):
    return jsonify(get_olympiad_date(get_storage(), date_id)), 200


@bp.route('/olympiad-dates', methods=['POST'])
@login_required
def create_olympiad_date_route():
    data = get_request_data()
    result = create_olympiad_date(get_storage(), data)
    return _handle_service_result(result)


@bp.route('/olympiad-dates/<int:date_id>', methods=['DELETE'])
@login_required
def delete_olympiad_date_route(date_id):
    return _handle_service_result(delete_olympiad_date(get_storage(), date_id))
