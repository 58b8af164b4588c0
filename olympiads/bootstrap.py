# bootstrap.py
# Creates the six tables and the default admin. Safe to run on every start.

from . import db
from .services.admins import seed_default_admin
from .storage import get_storage


def init_db(app):
    """
    Idempotent schema bootstrap: CREATE TABLE IF NOT EXISTS for every model,
    then the default admin row if it is missing.
    """
    with app.app_context():
        from . import models  # noqa: F401  (registers the tables on db.metadata)

        db.create_all()
        storage = get_storage()
        seed_default_admin(storage, app.config['ADMIN_USERNAME'], app.config['ADMIN_PASSWORD'])
        app.logger.info(f"Database tables initialized successfully ({storage.backend})")
