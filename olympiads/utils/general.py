# olympiads/utils/general.py
"""
General-purpose utility functions.

This module contains helpers for service result handling, request field
cleanup/validation and JSON-safe row conversion.
"""

from datetime import date, datetime

from flask import jsonify, request

from olympiads.errors import ValidationError


def _handle_service_result(result, default_error_status=500):
    """
    Parses the result from a service function.
    If it's a tuple (result_dict, status_code), it uses the custom status code.
    Otherwise, it assumes success (status 200) or uses the default error status.
    """
    # Check if the result is a tuple (result_dict, status_code)
    if isinstance(result, tuple) and len(result) == 2:
        result_dict, status_code = result
        return jsonify(result_dict), status_code

    if result.get("success"):
        return jsonify(result), 200
    else:
        return jsonify(result), default_error_status


def row_to_dict(row):
    """
    Converts a storage row to a JSON-safe dict.
    Dates and timestamps are rendered as ISO-8601 strings.
    """
    if row is None:
        return None
    converted = {}
    for key, value in row.items():
        if isinstance(value, (datetime, date)):
            converted[key] = value.isoformat()
        else:
            converted[key] = value
    return converted


def get_request_data():
    """
    Body of a JSON or form request as a mapping.
    A JSON body must be an object; anything else is a 400.
    """
    if not request.is_json:
        return request.form
    data = request.get_json(silent=True)
    if data is None:
        return request.form
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def clean_fields(data, names):
    """
    Picks the named fields out of a form/JSON mapping.
    Strings are stripped; blank strings become None. Any other non-null
    value (numbers, lists, objects from JSON) is rejected.
    """
    data = data or {}
    cleaned = {}
    for name in names:
        value = data.get(name)
        if value is not None and not isinstance(value, str):
            raise ValidationError(f"Field '{name}' must be a string")
        if isinstance(value, str):
            value = value.strip() or None
        cleaned[name] = value
    return cleaned


def require_fields(fields, required, message=None):
    """Raises ValidationError if any of the required fields is missing."""
    missing = [name for name in required if fields.get(name) in (None, '')]
    if missing:
        raise ValidationError(message or f"Missing required field(s): {', '.join(missing)}")


def parse_date(value, field_name):
    """Parses a YYYY-MM-DD string. None passes through."""
    if value is None:
        return None
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(str(value), '%Y-%m-%d').date()
    except ValueError:
        raise ValidationError(f"Invalid date for '{field_name}'. Expected YYYY-MM-DD.")


def filter_value(value):
    """Query-string filter; empty or 'all' disables filtering."""
    if value is None:
        return None
    value = value.strip()
    if not value or value.lower() == 'all':
        return None
    return value
