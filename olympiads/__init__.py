# olympiads/__init__.py

import logging
from flask import Flask, jsonify, request
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_cors import CORS
from flask_login import LoginManager
from werkzeug.exceptions import HTTPException
from .config import Config

db = SQLAlchemy()
migrate = Migrate()
login_manager = LoginManager()


def create_app(config_class=Config, test_config=None):
    # Static files are served by the pages blueprint from PUBLIC_DIR,
    # so Flask's own static route is disabled.
    app = Flask(__name__, static_folder=None)
    app.config.from_object(config_class)
    if test_config:
        app.config.update(test_config)

    # Configure logging to show INFO level messages
    app.logger.setLevel(app.config['LOG_LEVEL'])
    handler = logging.StreamHandler()
    handler.setLevel(app.config['LOG_LEVEL'])
    formatter = logging.Formatter('[%(asctime)s] %(levelname)s: %(message)s')
    handler.setFormatter(formatter)
    app.logger.addHandler(handler)

    db.init_app(app)
    migrate.init_app(app, db)

    # The admin dashboard calls the API with its session cookie.
    CORS(app, supports_credentials=True, origins=app.config['CORS_ORIGINS'])

    from .storage import Storage
    app.extensions['storage'] = Storage(db)

    from .session_auth import init_login_manager
    init_login_manager(app, login_manager)

    # --- REGISTER BLUEPRINTS ---
    from .api.auth import bp as auth_bp
    from .api.blog_posts import bp as blog_posts_bp
    from .api.events import bp as events_bp
    from .api.resources import bp as resources_bp
    from .api.olympiad_dates import bp as olympiad_dates_bp
    from .api.contacts import bp as contacts_bp
    from .api.system import bp as system_bp

    app.register_blueprint(auth_bp, url_prefix='/api')
    app.register_blueprint(blog_posts_bp, url_prefix='/api')
    app.register_blueprint(events_bp, url_prefix='/api')
    app.register_blueprint(resources_bp, url_prefix='/api')
    app.register_blueprint(olympiad_dates_bp, url_prefix='/api')
    app.register_blueprint(contacts_bp, url_prefix='/api')
    # Registered last: holds the /api catch-all.
    app.register_blueprint(system_bp, url_prefix='/api')

    from .routes.pages import bp as pages_bp
    app.register_blueprint(pages_bp)

    _register_error_handlers(app)

    from .bootstrap import init_db

    @app.cli.command('init-db')
    def init_db_command():
        """Create the tables and seed the default admin."""
        init_db(app)

    if app.config.get('AUTO_INIT_DB'):
        init_db(app)

    return app


def _register_error_handlers(app):
    from .errors import OlympiadsError

    @app.errorhandler(OlympiadsError)
    def handle_olympiads_error(e):
        if e.status_code >= 500:
            app.logger.error(f"{request.method} {request.path} failed: {e.message}")
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        # Pages keep Werkzeug's HTML errors; API callers always get JSON.
        if not request.path.startswith('/api/'):
            return e
        response = jsonify({"success": False, "error": e.description})
        response.status_code = e.code
        # Keep Allow and similar headers; the body is ours.
        for key, value in e.get_headers():
            if key.lower() != 'content-type':
                response.headers[key] = value
        return response

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        app.logger.exception(f"Unhandled error on {request.method} {request.path}: {str(e)}")
        return jsonify({"success": False, "error": "Internal server error"}), 500
