# olympiads/api/resources.py
# (This file is for all downloadable resource routes.)

from flask import Blueprint, request, jsonify
from flask_login import login_required
from olympiads.storage import get_storage
from olympiads.utils import _handle_service_result, filter_value
from olympiads.services.resources import (
    list_resources,
    get_resource,
    create_resource,
    delete_resource
)

bp = Blueprint('resources', __name__)


@bp.route('/resources', methods=['GET'])
def list_resources_route():
    resource_type = filter_value(request.args.get('type'))
    return jsonify(list_resources(get_storage(), resource_type)), 200


@bp.route('/resources/<int:resource_id>', methods=['GET'])
def get_resource_route(resource_id):
    return jsonify(get_resource(get_storage(), resource_id)), 200


@bp.route('/resources', methods=['POST'])
@login_required
def create_resource_route():
    """Multipart form: title, description, resource_type and an optional 'file'."""
    result = create_resource(get_storage(), request.form, request.files)
    return _handle_service_result(result)


@bp.route('/resources/<int:resource_id>', methods=['DELETE'])
@login_required
def delete_resource_route(resource_id):
    return _handle_service_result(delete_resource(get_storage(), resource_id))
