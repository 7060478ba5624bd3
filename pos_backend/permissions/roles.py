# permissions/roles.py

from __future__ import annotations

from typing import Optional

from rest_framework.permissions import BasePermission


# =========================================================
# ROLE CONSTANTS (STAFF JOB ROLES)
# =========================================================
ROLE_ADMIN = "admin"
ROLE_CASHIER = "cashier"

STAFF_ROLES = {
    ROLE_ADMIN,
    ROLE_CASHIER,
}


# =========================================================
# Helpers
# =========================================================
def get_request_roles(request) -> set[str]:
    """
    Roles for the current request.

    The validated token carries a `roles` claim; prefer it so the check
    reflects what was issued at login. Fall back to the user's role for
    sessions (Django admin, force_authenticate in tests).
    """
    token = getattr(request, "auth", None)
    if token is not None:
        try:
            claim = token.get("roles")
        except AttributeError:
            claim = None
        if claim:
            return {str(r) for r in claim}

    role = get_user_role(getattr(request, "user", None))
    return {role} if role else set()


def get_user_role(user) -> Optional[str]:
    return getattr(user, "role", None)


# =========================================================
# Base Role Permission
# =========================================================
class HasRole(BasePermission):
    """
    Base permission for role-based access control.

    Subclasses must define:
    - allowed_roles (set)
    """

    allowed_roles: set[str] = set()

    def has_permission(self, request, view):
        user = request.user

        if not user or not user.is_authenticated:
            return False

        return bool(get_request_roles(request) & self.allowed_roles)


class IsAdmin(HasRole):
    allowed_roles = {ROLE_ADMIN}


class IsStaff(HasRole):
    allowed_roles = STAFF_ROLES
