"""Initial schema: admins, blog posts, events, resources, olympiad dates, contact submissions

Revision ID: 001_initial_schema
Revises:
Create Date: 2025-01-01 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '001_initial_schema'
down_revision = None
branch_labels = None
depends_on = None


def _created_at():
    return sa.Column('created_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False)


def upgrade():
    """
    Creates the six independent tables. No foreign keys between them.

    The default admin row is not inserted here; it is seeded by
    `flask init-db` (or on app start) so the password hash is generated with
    the configured credentials.
    """
    op.create_table(
        'admins',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('username', sa.Text(), nullable=False),
        sa.Column('password', sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('username'),
    )

    op.create_table(
        'blog_posts',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('category', sa.Text(), nullable=False),
        sa.Column('author', sa.Text(), nullable=True),
        sa.Column('image_url', sa.Text(), nullable=True),
        _created_at(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_blog_posts_category', 'blog_posts', ['category'])

    op.create_table(
        'events',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('event_date', sa.Date(), nullable=True),
        sa.Column('event_type', sa.Text(), nullable=True),
        sa.Column('image_url', sa.Text(), nullable=True),
        sa.Column('certificate_url', sa.Text(), nullable=True),
        _created_at(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_events_event_type', 'events', ['event_type'])

    op.create_table(
        'resources',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('resource_type', sa.Text(), nullable=True),
        sa.Column('file_url', sa.Text(), nullable=True),
        _created_at(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_resources_resource_type', 'resources', ['resource_type'])

    op.create_table(
        'olympiad_dates',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('registration_deadline', sa.Date(), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        _created_at(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_olympiad_dates_date', 'olympiad_dates', ['date'])

    op.create_table(
        'contact_submissions',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('email', sa.Text(), nullable=False),
        sa.Column('phone', sa.Text(), nullable=False),
        sa.Column('subject', sa.Text(), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('read', sa.Integer(), server_default='0', nullable=False),
        _created_at(),
        sa.PrimaryKeyConstraint('id'),
    )


def downgrade():
    op.drop_table('contact_submissions')
    op.drop_index('ix_olympiad_dates_date', table_name='olympiad_dates')
    op.drop_table('olympiad_dates')
    op.drop_index('ix_resources_resource_type', table_name='resources')
    op.drop_table('resources')
    op.drop_index('ix_events_event_type', table_name='events')
    op.drop_table('events')
    op.drop_index('ix_blog_posts_category', table_name='blog_posts')
    op.drop_table('blog_posts')
    op.drop_table('admins')
