import unittest

from tests.base import OlympiadsTestCase


class StaticPageTests(OlympiadsTestCase):

    def test_site_pages_are_served(self):
        for path, marker in [
            ('/', b'data-page="index"'),
            ('/blog', b'data-page="blog"'),
            ('/about', b'data-page="about"'),
            ('/events', b'data-page="events"'),
            ('/resources', b'data-page="resources"'),
            ('/contact', b'data-page="contact"'),
            ('/admin', b'data-page="admin-login"'),
        ]:
            with self.subTest(path=path):
                response = self.client.get(path)
                self.assertEqual(response.status_code, 200)
                self.assertIn(marker, response.data)
                response.close()

    def test_dashboard_requires_session(self):
        response = self.client.get('/admin/dashboard')
        self.assertEqual(response.status_code, 302)
        self.assertTrue(response.headers['Location'].endswith('/admin'))

        self.login()
        response = self.client.get('/admin/dashboard')
        self.assertEqual(response.status_code, 200)
        self.assertIn(b'data-page="admin-dashboard"', response.data)
        response.close()

    def test_missing_asset_is_404(self):
        self.assertEqual(self.client.get('/css/missing.css').status_code, 404)


class ApiErrorTests(OlympiadsTestCase):

    def test_unknown_api_route_is_json_404(self):
        for method in ('get', 'post', 'delete'):
            with self.subTest(method=method):
                response = getattr(self.client, method)('/api/does-not-exist')
                self.assertEqual(response.status_code, 404)
                self.assertEqual(response.get_json()["error"], "API route not found")

    def test_wrong_method_on_known_route_is_json_405(self):
        response = self.client.put('/api/blog-posts')
        self.assertEqual(response.status_code, 405)
        self.assertFalse(response.get_json()["success"])
        self.assertIn('GET', response.headers['Allow'])
        self.assertIn('POST', response.headers['Allow'])

    def test_health_reports_database(self):
        response = self.client.get('/api/health')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()["database"], {"status": "connected", "backend": "sqlite"})


if __name__ == '__main__':
    unittest.main()
