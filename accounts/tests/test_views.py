"""Tests for the session auth endpoints."""
import json

from django.contrib.auth import get_user_model
from django.test import TestCase, Client
from django.urls import reverse

User = get_user_model()

PASSWORD = 'Tr4ck-every-day'


class AuthViewTestBase(TestCase):

    def setUp(self):
        self.client = Client()

    def post_json(self, url, data=None):
        return self.client.post(
            url,
            data=json.dumps(data or {}),
            content_type='application/json'
        )


class RegisterTests(AuthViewTestBase):

    def test_register_creates_user_and_logs_in(self):
        resp = self.post_json(reverse('accounts:register'), {
            'username': 'alice',
            'email': 'alice@example.com',
            'password': PASSWORD,
            'first_name': 'Alice',
        })
        self.assertEqual(resp.status_code, 201)
        data = resp.json()
        self.assertTrue(data['success'])
        self.assertEqual(data['user']['username'], 'alice')
        self.assertNotIn('password', data['user'])

        me = self.client.get(reverse('accounts:me'))
        self.assertEqual(me.status_code, 200)
        self.assertEqual(me.json()['user']['email'], 'alice@example.com')

    def test_duplicate_username_rejected(self):
        User.objects.create_user('alice', 'first@example.com', PASSWORD)
        resp = self.post_json(reverse('accounts:register'), {
            'username': 'alice',
            'email': 'second@example.com',
            'password': PASSWORD,
        })
        self.assertEqual(resp.status_code, 400)
        self.assertIn('username', resp.json()['errors'])

    def test_duplicate_email_rejected(self):
        User.objects.create_user('alice', 'alice@example.com', PASSWORD)
        resp = self.post_json(reverse('accounts:register'), {
            'username': 'alice2',
            'email': 'ALICE@example.com',
            'password': PASSWORD,
        })
        self.assertEqual(resp.status_code, 400)
        self.assertIn('email', resp.json()['errors'])

    def test_weak_password_rejected(self):
        resp = self.post_json(reverse('accounts:register'), {
            'username': 'alice',
            'email': 'alice@example.com',
            'password': '123',
        })
        self.assertEqual(resp.status_code, 400)
        self.assertIn('password', resp.json()['errors'])
        self.assertFalse(User.objects.exists())


class LoginLogoutTests(AuthViewTestBase):

    def setUp(self):
        super().setUp()
        self.user = User.objects.create_user('alice', 'alice@example.com', PASSWORD)

    def test_login_with_username(self):
        resp = self.post_json(reverse('accounts:login'), {'username': 'alice', 'password': PASSWORD})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()['user']['id'], self.user.id)

    def test_login_with_email(self):
        resp = self.post_json(reverse('accounts:login'), {'email': 'alice@example.com', 'password': PASSWORD})
        self.assertEqual(resp.status_code, 200)

    def test_wrong_password_rejected(self):
        resp = self.post_json(reverse('accounts:login'), {'username': 'alice', 'password': 'nope'})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()['error'], 'Invalid login credentials')
        self.assertEqual(self.client.get(reverse('accounts:me')).status_code, 401)

    def test_unknown_email_rejected(self):
        resp = self.post_json(reverse('accounts:login'), {'email': 'who@example.com', 'password': PASSWORD})
        self.assertEqual(resp.status_code, 400)

    def test_logout_ends_session(self):
        self.client.force_login(self.user)
        resp = self.client.post(reverse('accounts:logout'))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(self.client.get(reverse('accounts:me')).status_code, 401)

    def test_me_requires_login(self):
        resp = self.client.get(reverse('accounts:me'))
        self.assertEqual(resp.status_code, 401)
        self.assertFalse(resp.json()['success'])
