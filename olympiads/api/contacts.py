# olympiads/api/contacts.py
# (This file holds the public contact form and the admin inbox routes.)

from flask import Blueprint, jsonify
from flask_login import login_required
from olympiads.storage import get_storage
from olympiads.utils import _handle_service_result, get_request_data
from olympiads.services.contacts import (
    submit_contact,
    list_submissions,
    mark_submission_read,
    delete_submission
)

bp = Blueprint('contacts', __name__)


@bp.route('/contact', methods=['POST'])
def submit_contact_route():
    """
    Public contact form. Requires name, email, phone, subject and message.

    Response:
        200: {"success": true, "message": ...}
        400: a field is missing
        500: the row could not be stored
    """
    data = get_request_data()
    return _handle_service_result(submit_contact(get_storage(), data))


@bp.route('/contact-submissions', methods=['GET'])
@login_required
def list_submissions_route():
    return jsonify(list_submissions(get_storage())), 200


@bp.route('/contact-submissions/<int:submission_id>/read', methods=['PUT'])
@login_required
def mark_submission_read_route(submission_id):
    return _handle_service_result(mark_submission_read(get_storage(), submission_id))


@bp.route('/contact-submissions/<int:submission_id>', methods=['DELETE'])
@login_required
def delete_submission_route(submission_id):
    return _handle_service_result(delete_submission(get_storage(), submission_id))
