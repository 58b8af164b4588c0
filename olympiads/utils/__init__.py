# olympiads/utils/__init__.py
"""
Utility functions package.

- general.py: result handling, request body parsing, field cleanup, row serialization
"""

# Import commonly used utilities for convenient access
from .general import clean_fields, filter_value, get_request_data, parse_date, require_fields, row_to_dict
from .general import _handle_service_result

__all__ = [
    'clean_fields',
    'filter_value',
    'get_request_data',
    'parse_date',
    'require_fields',
    'row_to_dict',
    '_handle_service_result',
]
