# olympiads/services/contacts.py
# Public contact form submissions and their admin inbox.

from flask import current_app
from sqlalchemy import delete, insert, select, update

from olympiads.errors import StorageError
from olympiads.models import ContactSubmission
from olympiads.utils import clean_fields, require_fields, row_to_dict

contact_submissions = ContactSubmission.__table__

FIELDS = ('name', 'email', 'phone', 'subject', 'message')

THANK_YOU_MESSAGE = "Thank you for your message! We will get back to you soon."


def submit_contact(storage, data):
    """
    Stores a public submission. All five fields are mandatory.
    New rows start unread (read=0).
    """
    fields = clean_fields(data, FIELDS)
    require_fields(fields, FIELDS, message="All fields are required")

    try:
        result = storage.run(insert(contact_submissions).values(read=0, **fields))
    except StorageError:
        raise StorageError("Failed to submit message")

    current_app.logger.info(f"Contact submission {result.inserted_id} received from {fields['email']}")
    return {"success": True, "message": THANK_YOU_MESSAGE}


def list_submissions(storage):
    stmt = select(contact_submissions).order_by(
        contact_submissions.c.created_at.desc(), contact_submissions.c.id.desc()
    )
    rows = [row_to_dict(row) for row in storage.query(stmt)]
    current_app.logger.info(f"Returning {len(rows)} contact submissions")
    return rows


def mark_submission_read(storage, submission_id):
    """Idempotent: marking an already-read submission is still a success."""
    storage.run(
        update(contact_submissions)
        .where(contact_submissions.c.id == submission_id)
        .values(read=1)
    )
    return {"success": True}


def delete_submission(storage, submission_id):
    result = storage.run(delete(contact_submissions).where(contact_submissions.c.id == submission_id))
    current_app.logger.info(f"Deleted contact submission {submission_id} ({result.affected_count} row(s))")
    return {"success": True}
