# errors.py
"""
Error taxonomy for the Olympiads backend.

Services and the storage adapter raise these; the handlers registered in
create_app() turn them into JSON bodies of the form
{"success": False, "error": <message>} with the matching status code.
"""


class OlympiadsError(Exception):
    """Base class for errors that map onto an HTTP status."""
    status_code = 500

    def __init__(self, message, status_code=None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self):
        return {"success": False, "error": self.message}


class ValidationError(OlympiadsError):
    """Missing or malformed input."""
    status_code = 400


class AuthorizationError(OlympiadsError):
    """Missing session or bad credentials."""
    status_code = 401


class NotFoundError(OlympiadsError):
    status_code = 404


class StorageError(OlympiadsError):
    """Any failure raised by the underlying database engine."""
    status_code = 500

    def __init__(self, message="Database error", status_code=None):
        super().__init__(message, status_code)
