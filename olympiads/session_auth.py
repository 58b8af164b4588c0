"""
Session-based Authentication for the Admin Account

Flask-Login keeps only an opaque session id in the signed cookie. The id is
resolved against a server-side registry on every request, so logging out
(or expiry) invalidates the cookie even if a copy of it is replayed.
"""

import secrets
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone

from flask import current_app, jsonify, redirect, request, url_for
from flask_login import UserMixin


@dataclass(eq=False)
class AdminContext(UserMixin):
    """
    Lightweight identity resolved from a server-side session record.

    Flask-Login stores get_id() in the cookie, which here is the session id,
    not the admin's primary key.
    """
    admin_id: int
    username: str
    session_id: str

    def get_id(self):
        return self.session_id


@dataclass
class _SessionRecord:
    admin_id: int
    username: str
    expires_at: datetime
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class SessionRegistry:
    """
    In-process store of active admin sessions.

    Shared by all requests of one process; access is serialized by a lock.
    """

    def __init__(self, lifetime):
        self.lifetime = lifetime
        self._records = {}
        self._lock = threading.Lock()

    def create(self, admin_id, username):
        session_id = secrets.token_urlsafe(32)
        now = datetime.now(timezone.utc)
        with self._lock:
            self._prune_expired(now)
            self._records[session_id] = _SessionRecord(
                admin_id=admin_id,
                username=username,
                expires_at=now + self.lifetime,
                created_at=now,
            )
        return session_id

    def _prune_expired(self, now):
        # Caller holds the lock.
        expired = [sid for sid, record in self._records.items() if record.expires_at <= now]
        for sid in expired:
            del self._records[sid]

    def resolve(self, session_id):
        """Returns an AdminContext for a live session id, or None."""
        if not session_id:
            return None
        with self._lock:
            record = self._records.get(session_id)
            if record is None:
                return None
            if record.expires_at <= datetime.now(timezone.utc):
                del self._records[session_id]
                return None
        return AdminContext(admin_id=record.admin_id, username=record.username, session_id=session_id)

    def revoke(self, session_id):
        with self._lock:
            return self._records.pop(session_id, None) is not None

    def active_count(self):
        with self._lock:
            return len(self._records)


def get_session_registry():
    return current_app.extensions['session_registry']


def init_login_manager(app, login_manager):
    """
    Wires Flask-Login to the session registry.

    API calls without a live session get a 401 JSON body; page requests are
    sent back to the admin login page.
    """
    app.extensions['session_registry'] = SessionRegistry(app.config['PERMANENT_SESSION_LIFETIME'])
    login_manager.init_app(app)

    @login_manager.user_loader
    def load_admin(session_id):
        return get_session_registry().resolve(session_id)

    @login_manager.unauthorized_handler
    def unauthorized():
        if request.path.startswith('/api/'):
            return jsonify({"success": False, "error": "Unauthorized"}), 401
        return redirect(url_for('pages.admin_login'))
