# users/tests/test_auth.py

from datetime import timedelta

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import AccessToken

from users.tokens import issue_access_token

User = get_user_model()


class LoginTests(TestCase):
    """
    Login contract.

    GUARANTEES:
    - Token carries user_id + roles and expires 24h ahead
    - Unknown / deleted users and wrong passwords look the same (401)
    - Inactive users get 403
    """

    def setUp(self):
        self.client = APIClient()
        self.url = "/api/auth/login/"
        self.user = User.objects.create_user(
            email="cashier@example.com",
            password="secret-pass",
            name="Counter One",
            role="cashier",
        )

    def test_login_returns_token_and_user_block(self):
        response = self.client.post(
            self.url,
            {"email": "cashier@example.com", "password": "secret-pass"},
            format="json",
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.data["user"],
            {"id": self.user.id, "email": "cashier@example.com", "roles": ["cashier"]},
        )

        token = AccessToken(response.data["token"])
        self.assertEqual(int(token["user_id"]), self.user.id)
        self.assertEqual(token["roles"], ["cashier"])

        lifetime = token["exp"] - int(timezone.now().timestamp())
        self.assertGreater(lifetime, int(timedelta(hours=23).total_seconds()))
        self.assertLessEqual(lifetime, int(timedelta(hours=24).total_seconds()))

    def test_wrong_password_is_401(self):
        response = self.client.post(
            self.url,
            {"email": "cashier@example.com", "password": "nope"},
            format="json",
        )
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.data["error"], "invalid email or password")

    def test_unknown_email_is_401(self):
        response = self.client.post(
            self.url,
            {"email": "ghost@example.com", "password": "secret-pass"},
            format="json",
        )
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.data["error"], "invalid email or password")

    def test_soft_deleted_user_cannot_login(self):
        self.user.soft_delete()
        response = self.client.post(
            self.url,
            {"email": "cashier@example.com", "password": "secret-pass"},
            format="json",
        )
        self.assertEqual(response.status_code, 401)

    def test_inactive_user_is_403(self):
        self.user.is_active = False
        self.user.save(update_fields=["is_active"])

        response = self.client.post(
            self.url,
            {"email": "cashier@example.com", "password": "secret-pass"},
            format="json",
        )
        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.data["error"], "user is inactive")

    def test_malformed_json_is_400(self):
        response = self.client.post(
            self.url,
            data="{not json",
            content_type="application/json",
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["message"], "Invalid JSON")


class RegisterTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.url = "/api/auth/register/"
        self.admin = User.objects.create_user(
            email="admin@example.com",
            password="pass",
            role="admin",
        )
        self.cashier = User.objects.create_user(
            email="cashier@example.com",
            password="pass",
            role="cashier",
        )

    def _auth(self, user):
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_access_token(user)}")

    def test_admin_registers_cashier(self):
        self._auth(self.admin)
        response = self.client.post(
            self.url,
            {
                "name": "New Cashier",
                "email": "new@example.com",
                "password": "pw-12345",
                "role": "cashier",
            },
            format="json",
        )

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.data["message"], "user created")

        created = User.objects.get(id=response.data["user_id"])
        self.assertEqual(created.role, "cashier")
        self.assertEqual(created.created_by, self.admin)
        self.assertTrue(created.check_password("pw-12345"))

    def test_unknown_role_is_rejected(self):
        self._auth(self.admin)
        response = self.client.post(
            self.url,
            {"name": "X", "email": "x@example.com", "password": "pw", "role": "owner"},
            format="json",
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["message"], "invalid role")
        self.assertFalse(User.objects.filter(email="x@example.com").exists())

    def test_duplicate_email_is_rejected(self):
        self._auth(self.admin)
        response = self.client.post(
            self.url,
            {"name": "Dup", "email": "cashier@example.com", "password": "pw", "role": "cashier"},
            format="json",
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["message"], "invalid payload")
        self.assertIn("email", response.data["details"])

    def test_cashier_cannot_register(self):
        self._auth(self.cashier)
        response = self.client.post(
            self.url,
            {"name": "X", "email": "x@example.com", "password": "pw", "role": "cashier"},
            format="json",
        )
        self.assertEqual(response.status_code, 403)

    def test_anonymous_cannot_register(self):
        response = self.client.post(
            self.url,
            {"name": "X", "email": "x@example.com", "password": "pw", "role": "cashier"},
            format="json",
        )
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.data["message"], "missing or invalid token")


class AuthGuardTests(TestCase):
    """
    Bearer token guard on a protected endpoint (/api/auth/me/).
    """

    def setUp(self):
        self.client = APIClient()
        self.url = "/api/auth/me/"
        self.user = User.objects.create_user(
            email="cashier@example.com",
            password="pass",
            name="Counter One",
            role="cashier",
        )

    def test_me_with_valid_token(self):
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_access_token(self.user)}")
        response = self.client.get(self.url)

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["code"], 200)
        self.assertEqual(response.data["data"]["email"], "cashier@example.com")
        self.assertEqual(response.data["data"]["roles"], ["cashier"])

    def test_missing_header(self):
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.data, {"code": 401, "message": "missing or invalid token"})

    def test_wrong_scheme(self):
        self.client.credentials(HTTP_AUTHORIZATION=f"Token {issue_access_token(self.user)}")
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.data["message"], "missing or invalid token")

    def test_bad_signature(self):
        token = issue_access_token(self.user)
        tampered = token[:-2] + ("aa" if not token.endswith("aa") else "bb")
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {tampered}")
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.data["message"], "invalid token")

    def test_expired_token(self):
        token = AccessToken.for_user(self.user)
        token.set_exp(lifetime=-timedelta(minutes=1))
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.data["message"], "invalid token")

    def test_soft_deleted_user_token_rejected(self):
        token = issue_access_token(self.user)
        self.user.soft_delete()
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.data["message"], "invalid token")
