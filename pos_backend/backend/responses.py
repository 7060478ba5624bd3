# backend/responses.py

"""
API RESPONSE ENVELOPE

Every endpoint (except the auth token endpoints) answers with:

    {"code": <http status>, "data": <payload>, "message": "<text>"}

- `data` is omitted when there is nothing to return (None).
- Errors carry no `data`; validation errors add `details`.
"""

from __future__ import annotations

from rest_framework.response import Response


def envelope(code: int, message: str, data=None, details=None) -> dict:
    body = {"code": code}
    if data is not None:
        body["data"] = data
    body["message"] = message
    if details is not None:
        body["details"] = details
    return body


def success_response(data=None, message: str = "", status: int = 200) -> Response:
    return Response(envelope(status, message, data=data), status=status)


def error_response(message: str, status: int = 400, details=None) -> Response:
    return Response(envelope(status, message, details=details), status=status)
