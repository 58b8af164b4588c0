# config.py

import os
from datetime import timedelta
from dotenv import load_dotenv

# Get the base directory of the application
basedir = os.path.abspath(os.path.dirname(__file__))
rootdir = os.path.abspath(os.path.join(basedir, '..'))

# This line finds the .env file in the project root and loads it.
load_dotenv(os.path.join(rootdir, '.env'))


def _env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _database_url():
    """
    Picks the database backend.

    A Postgres URL (Netlify-style NETLIFY_DATABASE_URL first, then DATABASE_URL)
    selects Postgres; otherwise a local SQLite file is used.
    """
    url = os.environ.get('NETLIFY_DATABASE_URL') or os.environ.get('DATABASE_URL')
    if url:
        # SQLAlchemy only accepts the 'postgresql' scheme name
        if url.startswith('postgres://'):
            url = 'postgresql://' + url[len('postgres://'):]
        return url
    sqlite_path = os.environ.get('SQLITE_PATH') or 'olympiads.db'
    if not os.path.isabs(sqlite_path):
        sqlite_path = os.path.join(rootdir, sqlite_path)
    return 'sqlite:///' + sqlite_path


def engine_options_for(database_url, production):
    """Engine options for the selected backend."""
    if database_url.startswith('sqlite'):
        return {}
    options = {'pool_pre_ping': True, 'pool_recycle': 1800}
    if production:
        options['connect_args'] = {'sslmode': 'require'}
    return options


class Config:
    """
    Contains all the configuration variables for the application.
    Everything is read from the environment (or the .env file).
    """
    APP_ENV = os.environ.get('APP_ENV') or 'development'
    IS_PRODUCTION = APP_ENV == 'production'

    # --- Database Settings ---
    SQLALCHEMY_DATABASE_URI = _database_url()
    SQLALCHEMY_ENGINE_OPTIONS = engine_options_for(SQLALCHEMY_DATABASE_URI, IS_PRODUCTION)
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Create tables and seed the admin when the app starts.
    AUTO_INIT_DB = _env_flag('AUTO_INIT_DB', True)

    # --- Session Settings ---
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'olympiads-secret-key-change-in-production'
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SECURE = _env_flag('SESSION_COOKIE_SECURE', IS_PRODUCTION)
    SESSION_COOKIE_SAMESITE = 'Lax'
    PERMANENT_SESSION_LIFETIME = timedelta(hours=int(os.environ.get('SESSION_LIFETIME_HOURS') or 24))

    # --- Seed Admin ---
    ADMIN_USERNAME = os.environ.get('ADMIN_USERNAME') or 'admin'
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD') or 'admin123'

    # --- Static Site & Uploads ---
    PUBLIC_DIR = os.environ.get('PUBLIC_DIR') or os.path.join(rootdir, 'public')
    UPLOAD_FOLDER = os.environ.get('UPLOAD_FOLDER') or os.path.join(PUBLIC_DIR, 'uploads')
    UPLOAD_URL_PREFIX = '/uploads'
    # None means no limit beyond what Werkzeug enforces
    MAX_CONTENT_LENGTH = int(os.environ['MAX_CONTENT_LENGTH']) if os.environ.get('MAX_CONTENT_LENGTH') else None

    # --- CORS ---
    CORS_ORIGINS = [
        origin.strip()
        for origin in (os.environ.get('CORS_ORIGINS') or
                       'http://localhost:3000,http://127.0.0.1:3000,http://localhost:5000,http://127.0.0.1:5000').split(',')
        if origin.strip()
    ]

    # --- Logging ---
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'
