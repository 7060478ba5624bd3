"""
PATH: users/authentication.py

JWT AUTHENTICATION (Bearer)

SimpleJWT does the header parsing + signature/expiry validation.
On top of it:
- soft-deleted users are rejected even if their token is still valid
- `request.auth` carries the validated token, so views can read
  `request.auth["roles"]` without another DB hit
"""

from __future__ import annotations

from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import AuthenticationFailed


class PosJWTAuthentication(JWTAuthentication):
    def get_user(self, validated_token):
        user = super().get_user(validated_token)

        if user.deleted_at is not None:
            raise AuthenticationFailed("User not found", code="user_not_found")

        return user
