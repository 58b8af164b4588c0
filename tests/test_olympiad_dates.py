import unittest
from datetime import date, timedelta

from tests.base import OlympiadsTestCase


class OlympiadDateTests(OlympiadsTestCase):

    def setUp(self):
        super().setUp()
        self.login()
        self.today = date.today()

    def _create(self, title, day, **extra):
        payload = {'title': title, 'date': day.isoformat()}
        payload.update(extra)
        return self.client.post('/api/olympiad-dates', json=payload)

    def test_create_and_fetch(self):
        deadline = self.today + timedelta(days=10)
        response = self._create(
            'School round',
            self.today + timedelta(days=30),
            registration_deadline=deadline.isoformat(),
            description='First stage',
        )
        self.assertEqual(response.status_code, 200)
        date_id = response.get_json()["id"]

        item = self.client.get(f'/api/olympiad-dates/{date_id}').get_json()
        self.assertEqual(item["title"], 'School round')
        self.assertEqual(item["date"], (self.today + timedelta(days=30)).isoformat())
        self.assertEqual(item["registration_deadline"], deadline.isoformat())
        self.assertEqual(item["description"], 'First stage')

    def test_public_listing_only_shows_upcoming_soonest_first(self):
        past = self._create('Last year', self.today - timedelta(days=365)).get_json()["id"]
        today = self._create('Today', self.today).get_json()["id"]
        later = self._create('Final', self.today + timedelta(days=90)).get_json()["id"]
        soon = self._create('Regional', self.today + timedelta(days=7)).get_json()["id"]

        public = self.app.test_client().get('/api/olympiad-dates').get_json()
        self.assertEqual([d["id"] for d in public], [today, soon, later])
        self.assertNotIn(past, [d["id"] for d in public])

    def test_admin_listing_shows_everything_latest_first(self):
        past = self._create('Last year', self.today - timedelta(days=365)).get_json()["id"]
        later = self._create('Final', self.today + timedelta(days=90)).get_json()["id"]

        everything = self.client.get('/api/all-olympiad-dates').get_json()
        self.assertEqual([d["id"] for d in everything], [later, past])

    def test_date_is_required_and_validated(self):
        missing = self.client.post('/api/olympiad-dates', json={'title': 'No date'})
        self.assertEqual(missing.status_code, 400)

        malformed = self.client.post('/api/olympiad-dates', json={'title': 'Bad', 'date': 'next week'})
        self.assertEqual(malformed.status_code, 400)

        bad_deadline = self._create('Bad deadline', self.today, registration_deadline='soon')
        self.assertEqual(bad_deadline.status_code, 400)

    def test_body_must_be_a_json_object_of_strings(self):
        not_an_object = self.client.post('/api/olympiad-dates', json='2030-01-01')
        self.assertEqual(not_an_object.status_code, 400)

        numeric_title = self._create(2030, self.today)
        self.assertEqual(numeric_title.status_code, 400)
        self.assertEqual(self.client.get('/api/all-olympiad-dates').get_json(), [])

    def test_delete(self):
        date_id = self._create('Round', self.today + timedelta(days=1)).get_json()["id"]
        self.assertEqual(self.client.delete(f'/api/olympiad-dates/{date_id}').get_json(), {"success": True})
        self.assertEqual(self.client.get('/api/all-olympiad-dates').get_json(), [])


if __name__ == '__main__':
    unittest.main()
