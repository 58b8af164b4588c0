# olympiads/services/blog_posts.py

from flask import current_app
from sqlalchemy import delete, insert, select

from olympiads.errors import NotFoundError
from olympiads.models import BlogPost
from olympiads.utils import clean_fields, require_fields, row_to_dict
from .uploads import save_upload

blog_posts = BlogPost.__table__

FIELDS = ('title', 'content', 'category', 'author')
REQUIRED = ('title', 'content', 'category')


def list_blog_posts(storage, category=None):
    """Newest first, optionally restricted to one category."""
    stmt = select(blog_posts)
    if category:
        stmt = stmt.where(blog_posts.c.category == category)
    stmt = stmt.order_by(blog_posts.c.created_at.desc(), blog_posts.c.id.desc())
    return [row_to_dict(row) for row in storage.query(stmt)]


def get_blog_post(storage, post_id):
    row = storage.get(select(blog_posts).where(blog_posts.c.id == post_id))
    if row is None:
        raise NotFoundError("Blog post not found")
    return row_to_dict(row)


def create_blog_post(storage, form, files):
    fields = clean_fields(form, FIELDS)
    require_fields(fields, REQUIRED)

    fields['image_url'] = save_upload(files.get('image'))
    result = storage.run(insert(blog_posts).values(**fields))

    current_app.logger.info(f"Created blog post {result.inserted_id}: {fields['title']}")
    return {"id": result.inserted_id, "success": True}


def delete_blog_post(storage, post_id):
    result = storage.run(delete(blog_posts).where(blog_posts.c.id == post_id))
    current_app.logger.info(f"Deleted blog post {post_id} ({result.affected_count} row(s))")
    return {"success": True}
