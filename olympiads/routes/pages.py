# olympiads/routes/pages.py
# (This file serves the static site: fixed HTML pages, assets and uploads.)

import os

from flask import Blueprint, current_app, send_from_directory
from flask_login import login_required

bp = Blueprint('pages', __name__)

# URL -> document under PUBLIC_DIR
SITE_PAGES = {
    '/': 'index.html',
    '/blog': 'blog.html',
    '/about': 'about.html',
    '/events': 'events.html',
    '/resources': 'resources.html',
    '/contact': 'contact.html',
}


def _send_public(relative_path):
    return send_from_directory(current_app.config['PUBLIC_DIR'], relative_path)


def _make_page_view(filename):
    def view():
        return _send_public(filename)
    return view


for url, filename in SITE_PAGES.items():
    endpoint = os.path.splitext(filename)[0]
    bp.add_url_rule(url, endpoint=endpoint, view_func=_make_page_view(filename), methods=['GET'])


@bp.route('/admin', methods=['GET'])
def admin_login():
    return _send_public('admin/login.html')


@bp.route('/admin/dashboard', methods=['GET'])
@login_required
def admin_dashboard():
    return _send_public('admin/dashboard.html')


@bp.route('/uploads/<path:filename>', methods=['GET'])
def uploaded_file(filename):
    return send_from_directory(current_app.config['UPLOAD_FOLDER'], filename)


@bp.route('/<path:filename>', methods=['GET'])
def public_asset(filename):
    """Any other file under PUBLIC_DIR (css, js, images)."""
    return _send_public(filename)
