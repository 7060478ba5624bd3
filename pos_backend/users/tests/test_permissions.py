from django.contrib.auth import get_user_model
from django.test import TestCase
from rest_framework.test import APIRequestFactory

from permissions.roles import IsAdmin, IsStaff

User = get_user_model()


class PermissionRoleTests(TestCase):
    """
    Tests for role-based permissions.

    GUARANTEES:
    - Correct role access
    - No privilege escalation
    - Anonymous users denied everywhere
    - Token roles claim wins over the stored role
    """

    def setUp(self):
        self.factory = APIRequestFactory()

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

    # --------------------------------------------------
    # Helpers
    # --------------------------------------------------

    def _request_for(self, user=None, auth=None):
        request = self.factory.get("/")
        request.user = user
        request.auth = auth
        return request

    def test_admin_permissions(self):
        request = self._request_for(self.admin)

        self.assertTrue(IsAdmin().has_permission(request, None))
        self.assertTrue(IsStaff().has_permission(request, None))

    def test_cashier_permissions(self):
        request = self._request_for(self.cashier)

        self.assertTrue(IsStaff().has_permission(request, None))
        self.assertFalse(IsAdmin().has_permission(request, None))

    def test_token_roles_claim_is_used(self):
        request = self._request_for(self.admin, auth={"roles": ["cashier"]})

        self.assertFalse(IsAdmin().has_permission(request, None))
        self.assertTrue(IsStaff().has_permission(request, None))

    def test_anonymous_user_denied_everywhere(self):
        request = self._request_for(None)

        self.assertFalse(IsAdmin().has_permission(request, None))
        self.assertFalse(IsStaff().has_permission(request, None))
