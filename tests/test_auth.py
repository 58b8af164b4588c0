import unittest
from datetime import timedelta

from olympiads.session_auth import SessionRegistry
from tests.base import OlympiadsTestCase


class LoginTests(OlympiadsTestCase):

    def test_login_with_correct_credentials_opens_session(self):
        response = self.login()
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json(), {"success": True})

        protected = self.client.get('/api/contact-submissions')
        self.assertEqual(protected.status_code, 200)

        status = self.client.get('/api/session').get_json()
        self.assertEqual(status, {"authenticated": True, "username": "admin"})

    def test_wrong_password_and_unknown_user_look_the_same(self):
        wrong_password = self.login(password='nope')
        unknown_user = self.login(username='ghost')

        self.assertEqual(wrong_password.status_code, 401)
        self.assertEqual(unknown_user.status_code, 401)
        self.assertEqual(wrong_password.get_json(), unknown_user.get_json())
        self.assertEqual(wrong_password.get_json()["error"], "Invalid credentials")

        # No session was created
        self.assertEqual(self.client.get('/api/contact-submissions').status_code, 401)
        self.assertEqual(self.client.get('/api/session').get_json(), {"authenticated": False})

    def test_login_requires_both_fields(self):
        response = self.client.post('/api/login', json={'username': 'admin'})
        self.assertEqual(response.status_code, 400)

    def test_login_accepts_form_body(self):
        response = self.client.post('/api/login', data={'username': 'admin', 'password': 'admin123'})
        self.assertEqual(response.status_code, 200)

    def test_non_string_credentials_are_rejected(self):
        response = self.client.post('/api/login', json={'username': 'admin', 'password': 123})
        self.assertEqual(response.status_code, 400)
        self.assertFalse(response.get_json()["success"])

        response = self.client.post('/api/login', json={'username': ['admin'], 'password': 'admin123'})
        self.assertEqual(response.status_code, 400)

    def test_json_body_must_be_an_object(self):
        response = self.client.post('/api/login', json=['admin', 'admin123'])
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json()["error"], "Request body must be a JSON object")


class SessionGateTests(OlympiadsTestCase):

    def test_mutations_without_session_are_rejected(self):
        calls = [
            ('post', '/api/blog-posts'),
            ('delete', '/api/blog-posts/1'),
            ('post', '/api/events'),
            ('delete', '/api/events/1'),
            ('post', '/api/resources'),
            ('delete', '/api/resources/1'),
            ('post', '/api/olympiad-dates'),
            ('delete', '/api/olympiad-dates/1'),
            ('get', '/api/all-olympiad-dates'),
            ('get', '/api/contact-submissions'),
            ('put', '/api/contact-submissions/1/read'),
            ('delete', '/api/contact-submissions/1'),
        ]
        for method, path in calls:
            with self.subTest(method=method, path=path):
                response = getattr(self.client, method)(path)
                self.assertEqual(response.status_code, 401)
                self.assertEqual(response.get_json()["error"], "Unauthorized")

    def test_logout_invalidates_session(self):
        self.login()
        response = self.client.post('/api/logout')
        self.assertEqual(response.get_json(), {"success": True})
        self.assertEqual(self.client.get('/api/contact-submissions').status_code, 401)

    def test_logout_without_session_still_succeeds(self):
        response = self.client.post('/api/logout')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json(), {"success": True})

    def test_replayed_cookie_is_rejected_after_logout(self):
        self.login()
        cookie = self.client.get_cookie('session')
        self.assertIsNotNone(cookie)

        replay = self.app.test_client()
        replay.set_cookie('session', cookie.value)
        self.assertEqual(replay.get('/api/contact-submissions').status_code, 200)

        self.client.post('/api/logout')
        self.assertEqual(replay.get('/api/contact-submissions').status_code, 401)

    def test_session_cookie_is_http_only(self):
        response = self.login()
        set_cookie = response.headers.get('Set-Cookie', '')
        self.assertIn('HttpOnly', set_cookie)


class SessionRegistryTests(unittest.TestCase):

    def test_expired_sessions_are_pruned_on_create(self):
        registry = SessionRegistry(timedelta(seconds=-1))
        abandoned = [registry.create(1, 'admin') for _ in range(3)]
        self.assertEqual(registry.active_count(), 1)

        registry.lifetime = timedelta(hours=1)
        live = registry.create(1, 'admin')
        self.assertEqual(registry.active_count(), 1)
        self.assertIsNone(registry.resolve(abandoned[-1]))
        self.assertEqual(registry.resolve(live).session_id, live)

    def test_revoked_session_no_longer_resolves(self):
        registry = SessionRegistry(timedelta(hours=1))
        session_id = registry.create(1, 'admin')
        self.assertTrue(registry.revoke(session_id))
        self.assertFalse(registry.revoke(session_id))
        self.assertIsNone(registry.resolve(session_id))


if __name__ == '__main__':
    unittest.main()
