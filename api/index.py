"""
Serverless Entry Point

Bridge between a serverless Python runtime and the Flask application.
The platform routes every request (pages and /api/*) to this module.

Architecture:
- The runtime imports this file and looks for a WSGI callable named 'app'
- DATABASE_URL / NETLIFY_DATABASE_URL points the app at Postgres
- Uploads land in UPLOAD_FOLDER, which must be writable on the platform
"""

from olympiads import create_app

# Create the Flask application instance
app = create_app()
