# olympiads/services/events.py

from flask import current_app
from sqlalchemy import delete, insert, select

from olympiads.errors import NotFoundError
from olympiads.models import Event
from olympiads.utils import clean_fields, parse_date, require_fields, row_to_dict
from .uploads import save_uploads

events = Event.__table__

FIELDS = ('title', 'description', 'event_date', 'event_type')
# Each event may carry a cover image and a participation certificate.
FILE_FIELDS = {'image': 'image_url', 'certificate': 'certificate_url'}


def list_events(storage, event_type=None):
    """Latest event date first; undated events last on every backend."""
    stmt = select(events)
    if event_type:
        stmt = stmt.where(events.c.event_type == event_type)
    stmt = stmt.order_by(events.c.event_date.desc().nulls_last(), events.c.id.desc())
    return [row_to_dict(row) for row in storage.query(stmt)]


def get_event(storage, event_id):
    row = storage.get(select(events).where(events.c.id == event_id))
    if row is None:
        raise NotFoundError("Event not found")
    return row_to_dict(row)


def create_event(storage, form, files):
    fields = clean_fields(form, FIELDS)
    require_fields(fields, ('title',))
    fields['event_date'] = parse_date(fields['event_date'], 'event_date')

    stored = save_uploads(files, FILE_FIELDS)
    for field_name, column in FILE_FIELDS.items():
        fields[column] = stored[field_name]

    result = storage.run(insert(events).values(**fields))

    current_app.logger.info(f"Created event {result.inserted_id}: {fields['title']}")
    return {"id": result.inserted_id, "success": True}


def delete_event(storage, event_id):
    result = storage.run(delete(events).where(events.c.id == event_id))
    current_app.logger.info(f"Deleted event {event_id} ({result.affected_count} row(s))")
    return {"success": True}
