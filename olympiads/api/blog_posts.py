# olympiads/api/blog_posts.py
# (This file is for all blog post routes.)

from flask import Blueprint, request, jsonify
from flask_login import login_required
from olympiads.storage import get_storage
from olympiads.utils import _handle_service_result, filter_value
from olympiads.services.blog_posts import (
    list_blog_posts,
    get_blog_post,
    create_blog_post,
    delete_blog_post
)

bp = Blueprint('blog_posts', __name__)


@bp.route('/blog-posts', methods=['GET'])
def list_blog_posts_route():
    """Returns all posts, newest first. ?category=<name> narrows the list ('all' disables it)."""
    category = filter_value(request.args.get('category'))
    return jsonify(list_blog_posts(get_storage(), category)), 200


@bp.route('/blog-posts/<int:post_id>', methods=['GET'])
def get_blog_post_route(post_id):
    return jsonify(get_blog_post(get_storage(), post_id)), 200


@bp.route('/blog-posts', methods=['POST'])
@login_required
def create_blog_post_route():
    """Multipart form: title, content, category, author and an optional 'image' file."""
    result = create_blog_post(get_storage(), request.form, request.files)
    return _handle_service_result(result)


@bp.route('/blog-posts/<int:post_id>', methods=['DELETE'])
@login_required
def delete_blog_post_route(post_id):
    return _handle_service_result(delete_blog_post(get_storage(), post_id))
