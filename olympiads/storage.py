"""
Storage adapter over Flask-SQLAlchemy.

One call shape for both backends:

    storage.query(statement, params)  -> list of row dicts
    storage.get(statement, params)    -> row dict or None
    storage.run(statement, params)    -> RunResult(inserted_id, affected_count)

Statements are SQLAlchemy Core constructs, or raw SQL strings using ':name'
bind parameters. SQLAlchemy renders the placeholder style of whichever
dialect the engine was configured with, so callers never deal with '?'
versus '$n' themselves.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from flask import current_app
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from .errors import StorageError


def _is_raw_insert(statement):
    return isinstance(statement, str) and statement.lstrip().upper().startswith('INSERT')


@dataclass
class RunResult:
    inserted_id: Optional[int]
    affected_count: int


class Storage:
    """Executes single statements against the configured database."""

    def __init__(self, database):
        self._db = database

    @property
    def backend(self) -> str:
        name = self._db.engine.dialect.name
        return 'postgres' if name == 'postgresql' else name

    def _execute(self, statement, params: Optional[Mapping[str, Any]] = None):
        if isinstance(statement, str):
            statement = text(statement)
        try:
            return self._db.session.execute(statement, dict(params or {}))
        except SQLAlchemyError as e:
            self._db.session.rollback()
            current_app.logger.error(f"Storage failure ({self.backend}): {str(e)}")
            raise StorageError() from e

    def query(self, statement, params=None) -> list:
        result = self._execute(statement, params)
        return [dict(row) for row in result.mappings().all()]

    def get(self, statement, params=None) -> Optional[dict]:
        result = self._execute(statement, params)
        row = result.mappings().first()
        return dict(row) if row is not None else None

    def run(self, statement, params=None) -> RunResult:
        result = self._execute(statement, params)
        inserted_id = None
        if result.is_insert:
            # Core insert(): SQLAlchemy fetched the key (lastrowid or RETURNING)
            inserted_id = result.inserted_primary_key[0]
        elif result.returns_rows:
            # raw 'INSERT ... RETURNING id'
            row = result.first()
            inserted_id = row[0] if row is not None else None
        elif _is_raw_insert(statement):
            # SQLite; psycopg2 has no usable lastrowid, use RETURNING there
            inserted_id = result.lastrowid or None
        affected = result.rowcount if result.rowcount is not None and result.rowcount >= 0 else 0
        try:
            self._db.session.commit()
        except SQLAlchemyError as e:
            self._db.session.rollback()
            current_app.logger.error(f"Storage commit failed ({self.backend}): {str(e)}")
            raise StorageError() from e
        return RunResult(inserted_id=inserted_id, affected_count=affected)

    def ping(self) -> bool:
        """Round-trips a trivial query; used by the health endpoint."""
        self.get('SELECT 1 AS ok')
        return True


def get_storage() -> Storage:
    """Returns the storage handle bound to the current application."""
    return current_app.extensions['storage']
