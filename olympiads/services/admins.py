# olympiads/services/admins.py
# Admin credential lookup, login/logout and the startup seed.

from flask import current_app, session
from flask_login import current_user, login_user, logout_user
from sqlalchemy import insert, select
from werkzeug.security import check_password_hash, generate_password_hash

from olympiads.errors import AuthorizationError, StorageError, ValidationError
from olympiads.models import Admin
from olympiads.session_auth import get_session_registry

admins = Admin.__table__


def find_admin_by_username(storage, username):
    return storage.get(select(admins).where(admins.c.username == username))


def seed_default_admin(storage, username, password):
    """
    Inserts the default admin if no row with that username exists.
    Returns True when a row was created.
    """
    if find_admin_by_username(storage, username):
        return False
    try:
        storage.run(insert(admins).values(username=username, password=generate_password_hash(password)))
    except StorageError:
        # Another process may have seeded it between the check and the insert.
        if find_admin_by_username(storage, username):
            return False
        raise
    current_app.logger.info(f"Seeded default admin '{username}'")
    return True


def login(storage, username, password):
    """
    Checks the credentials and opens a server-side session.

    Wrong username and wrong password produce the same error.
    """
    for value in (username, password):
        if value is not None and not isinstance(value, str):
            raise ValidationError("Username and password must be strings")
    if not username or not password:
        raise ValidationError("Username and password are required")

    admin = find_admin_by_username(storage, username)
    if not admin or not check_password_hash(admin['password'], password):
        current_app.logger.warning(f"Failed login attempt for '{username}'")
        raise AuthorizationError("Invalid credentials")

    registry = get_session_registry()
    session_id = registry.create(admin['id'], admin['username'])
    session.permanent = True
    login_user(registry.resolve(session_id))

    current_app.logger.info(f"Admin '{admin['username']}' logged in")
    return {"success": True}


def logout():
    """Revokes the server-side record and clears the cookie session."""
    if current_user.is_authenticated:
        get_session_registry().revoke(current_user.session_id)
        current_app.logger.info(f"Admin '{current_user.username}' logged out")
    logout_user()
    session.clear()
    return {"success": True}


def session_status():
    if current_user.is_authenticated:
        return {"authenticated": True, "username": current_user.username}
    return {"authenticated": False}
