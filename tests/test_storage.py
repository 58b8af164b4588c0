import unittest

from sqlalchemy import insert, select
from werkzeug.security import check_password_hash

from olympiads.bootstrap import init_db
from olympiads.errors import StorageError
from olympiads.models import Admin, Resource
from olympiads.storage import get_storage
from tests.base import ADMIN_PASSWORD, ADMIN_USERNAME, OlympiadsTestCase

resources = Resource.__table__


class StorageAdapterTests(OlympiadsTestCase):

    def test_backend_is_sqlite_without_database_url(self):
        with self.app.app_context():
            self.assertEqual(get_storage().backend, 'sqlite')

    def test_run_reports_inserted_id_and_affected_count(self):
        with self.app.app_context():
            storage = get_storage()
            first = storage.run(insert(resources).values(title='Past papers'))
            second = storage.run(insert(resources).values(title='Syllabus'))
            self.assertEqual(first.affected_count, 1)
            self.assertEqual(second.inserted_id, first.inserted_id + 1)

    def test_text_sql_uses_named_parameters(self):
        with self.app.app_context():
            storage = get_storage()
            result = storage.run(
                'INSERT INTO resources (title, resource_type) VALUES (:title, :kind)',
                {'title': 'Formula sheet', 'kind': 'pdf'},
            )
            self.assertIsNotNone(result.inserted_id)

            row = storage.get('SELECT * FROM resources WHERE id = :id', {'id': result.inserted_id})
            self.assertEqual(row['title'], 'Formula sheet')
            self.assertEqual(row['resource_type'], 'pdf')

            rows = storage.query('SELECT title FROM resources WHERE resource_type = :kind', {'kind': 'pdf'})
            self.assertEqual(rows, [{'title': 'Formula sheet'}])

    def test_get_returns_none_for_missing_row(self):
        with self.app.app_context():
            self.assertIsNone(get_storage().get(select(resources).where(resources.c.id == 999)))

    def test_engine_failure_becomes_storage_error(self):
        with self.app.app_context():
            storage = get_storage()
            with self.assertRaises(StorageError) as ctx:
                storage.query('SELECT * FROM no_such_table')
            self.assertEqual(ctx.exception.status_code, 500)

            # The session is usable again after the failure.
            self.assertEqual(storage.query(select(resources)), [])

    def test_delete_of_missing_row_affects_nothing(self):
        with self.app.app_context():
            result = get_storage().run('DELETE FROM resources WHERE id = :id', {'id': 42})
            self.assertEqual(result.affected_count, 0)


class SchemaBootstrapTests(OlympiadsTestCase):

    def test_creates_all_tables(self):
        with self.app.app_context():
            storage = get_storage()
            rows = storage.query("SELECT name FROM sqlite_master WHERE type = 'table'")
            names = {row['name'] for row in rows}
        for table in ('admins', 'blog_posts', 'events', 'resources', 'olympiad_dates', 'contact_submissions'):
            self.assertIn(table, names)

    def test_seeds_one_hashed_admin(self):
        with self.app.app_context():
            admins = get_storage().query(select(Admin.__table__))
        self.assertEqual(len(admins), 1)
        self.assertEqual(admins[0]['username'], ADMIN_USERNAME)
        self.assertNotEqual(admins[0]['password'], ADMIN_PASSWORD)
        self.assertTrue(check_password_hash(admins[0]['password'], ADMIN_PASSWORD))

    def test_bootstrap_is_idempotent(self):
        init_db(self.app)
        init_db(self.app)
        with self.app.app_context():
            admins = get_storage().query(select(Admin.__table__))
        self.assertEqual(len(admins), 1)


if __name__ == '__main__':
    unittest.main()
