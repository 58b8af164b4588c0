# olympiads/services/olympiad_dates.py
# Key dates shown on the home page (competition rounds, registration windows).

from datetime import date

from flask import current_app
from sqlalchemy import delete, insert, select

from olympiads.errors import NotFoundError
from olympiads.models import OlympiadDate
from olympiads.utils import clean_fields, parse_date, require_fields, row_to_dict

olympiad_dates = OlympiadDate.__table__

FIELDS = ('title', 'date', 'registration_deadline', 'description')


def list_upcoming_dates(storage, today=None):
    """
    Public listing: only dates from today on, soonest first.
    """
    today = today or date.today()
    stmt = (
        select(olympiad_dates)
        .where(olympiad_dates.c.date >= today)
        .order_by(olympiad_dates.c.date.asc(), olympiad_dates.c.id.asc())
    )
    return [row_to_dict(row) for row in storage.query(stmt)]


def list_all_dates(storage):
    """Admin listing: every date, latest first."""
    stmt = select(olympiad_dates).order_by(olympiad_dates.c.date.desc(), olympiad_dates.c.id.desc())
    return [row_to_dict(row) for row in storage.query(stmt)]


def get_olympiad_date(storage, date_id):
    row = storage.get(select(olympiad_dates).where(olympiad_dates.c.id == date_id))
    if row is None:
        raise NotFoundError("Olympiad date not found")
    return row_to_dict(row)


def create_olympiad_date(storage, data):
    fields = clean_fields(data, FIELDS)
    require_fields(fields, ('title', 'date'))
    fields['date'] = parse_date(fields['date'], 'date')
    fields['registration_deadline'] = parse_date(fields['registration_deadline'], 'registration_deadline')

    result = storage.run(insert(olympiad_dates).values(**fields))

    current_app.logger.info(f"Created olympiad date {result.inserted_id}: {fields['title']} on {fields['date']}")
    return {"id": result.inserted_id, "success": True}


def delete_olympiad_date(storage, date_id):
    result = storage.run(delete(olympiad_dates).where(olympiad_dates.c.id == date_id))
    current_app.logger.info(f"Deleted olympiad date {date_id} ({result.affected_count} row(s))")
    return {"success": True}
