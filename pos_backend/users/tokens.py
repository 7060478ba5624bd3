# users/tokens.py

from __future__ import annotations

from rest_framework_simplejwt.tokens import AccessToken


def issue_access_token(user) -> str:
    """
    Single HS256 access token (lifetime from SIMPLE_JWT, 24h by default).

    Claims: user_id, roles, exp (+ SimpleJWT bookkeeping: token_type, jti, iat).
    """
    token = AccessToken.for_user(user)
    token["roles"] = user.roles
    return str(token)
