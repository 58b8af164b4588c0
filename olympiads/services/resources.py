# olympiads/services/resources.py

from flask import current_app
from sqlalchemy import delete, insert, select

from olympiads.errors import NotFoundError
from olympiads.models import Resource
from olympiads.utils import clean_fields, require_fields, row_to_dict
from .uploads import save_upload

resources = Resource.__table__

FIELDS = ('title', 'description', 'resource_type')


def list_resources(storage, resource_type=None):
    stmt = select(resources)
    if resource_type:
        stmt = stmt.where(resources.c.resource_type == resource_type)
    stmt = stmt.order_by(resources.c.created_at.desc(), resources.c.id.desc())
    return [row_to_dict(row) for row in storage.query(stmt)]


def get_resource(storage, resource_id):
    row = storage.get(select(resources).where(resources.c.id == resource_id))
    if row is None:
        raise NotFoundError("Resource not found")
    return row_to_dict(row)


def create_resource(storage, form, files):
    fields = clean_fields(form, FIELDS)
    require_fields(fields, ('title',))

    fields['file_url'] = save_upload(files.get('file'))
    result = storage.run(insert(resources).values(**fields))

    current_app.logger.info(f"Created resource {result.inserted_id}: {fields['title']}")
    return {"id": result.inserted_id, "success": True}


def delete_resource(storage, resource_id):
    result = storage.run(delete(resources).where(resources.c.id == resource_id))
    current_app.logger.info(f"Deleted resource {resource_id} ({result.affected_count} row(s))")
    return {"success": True}
