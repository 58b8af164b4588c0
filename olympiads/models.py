# models.py

from . import db

# This file defines the six tables of the site. They are independent of each
# other: no foreign keys, every row has an integer id and a created_at
# timestamp filled in by the database at insert time.

# --- 1. ADMIN MODEL ---

class Admin(db.Model):
    """
    The single privileged account. Seeded at startup, never created via the API.
    The password column holds a werkzeug hash, never the plaintext.
    """
    __tablename__ = 'admins'

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.Text, unique=True, nullable=False)
    password = db.Column(db.Text, nullable=False)

    def __repr__(self):
        return f'<Admin {self.username}>'


# --- 2. BLOG POST MODEL ---

class BlogPost(db.Model):
    __tablename__ = 'blog_posts'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.Text, nullable=False)
    content = db.Column(db.Text, nullable=False)
    category = db.Column(db.Text, nullable=False, index=True)
    author = db.Column(db.Text, nullable=True)
    image_url = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, server_default=db.func.now())


# --- 3. EVENT MODEL ---

class Event(db.Model):
    __tablename__ = 'events'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.Text, nullable=False)
    description = db.Column(db.Text, nullable=True)
    event_date = db.Column(db.Date, nullable=True)
    event_type = db.Column(db.Text, nullable=True, index=True)
    image_url = db.Column(db.Text, nullable=True)
    certificate_url = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, server_default=db.func.now())


# --- 4. RESOURCE MODEL ---

class Resource(db.Model):
    """A downloadable asset (past papers, syllabi, ...)."""
    __tablename__ = 'resources'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.Text, nullable=False)
    description = db.Column(db.Text, nullable=True)
    resource_type = db.Column(db.Text, nullable=True, index=True)
    file_url = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, server_default=db.func.now())


# --- 5. OLYMPIAD DATE MODEL ---

class OlympiadDate(db.Model):
    __tablename__ = 'olympiad_dates'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.Text, nullable=False)
    date = db.Column(db.Date, nullable=False, index=True)
    registration_deadline = db.Column(db.Date, nullable=True)
    description = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, server_default=db.func.now())


# --- 6. CONTACT SUBMISSION MODEL ---

class ContactSubmission(db.Model):
    __tablename__ = 'contact_submissions'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.Text, nullable=False)
    email = db.Column(db.Text, nullable=False)
    phone = db.Column(db.Text, nullable=False)
    subject = db.Column(db.Text, nullable=False)
    message = db.Column(db.Text, nullable=False)
    # Kept as 0/1 so both backends return the same JSON value
    read = db.Column(db.Integer, nullable=False, default=0, server_default='0')
    created_at = db.Column(db.DateTime, nullable=False, server_default=db.func.now())
