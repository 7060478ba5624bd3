# backend/exceptions.py

"""
GLOBAL DRF EXCEPTION HANDLER

Converts framework errors into the project envelope so clients only ever see:

    {"code": 401, "message": "invalid token"}
    {"code": 400, "message": "invalid payload", "details": {...}}

Mapping:
- NotAuthenticated (no / malformed Authorization header) -> "missing or invalid token"
- AuthenticationFailed / InvalidToken                     -> "invalid token"
- ParseError (malformed JSON body)                       -> "Invalid JSON"
- ValidationError                                        -> "invalid payload" + details
- Anything else DRF knows about                          -> its own detail text

Unhandled (non-DRF) exceptions are left to Django (500) after being logged.
"""

from __future__ import annotations

import logging

from rest_framework import exceptions
from rest_framework.views import exception_handler

from backend.responses import envelope

logger = logging.getLogger(__name__)


def _message_for(exc) -> str:
    if isinstance(exc, exceptions.NotAuthenticated):
        return "missing or invalid token"
    if isinstance(exc, exceptions.AuthenticationFailed):
        return "invalid token"
    if isinstance(exc, exceptions.ParseError):
        return "Invalid JSON"
    if isinstance(exc, exceptions.ValidationError):
        return "invalid payload"

    detail = getattr(exc, "detail", None)
    if isinstance(detail, str):
        return detail
    return str(detail or exc)


def envelope_exception_handler(exc, context):
    response = exception_handler(exc, context)

    if response is None:
        view = context.get("view")
        logger.exception(
            "Unhandled API error",
            extra={"view": view.__class__.__name__ if view else None},
        )
        return None

    details = None
    if isinstance(exc, exceptions.ValidationError):
        details = response.data

    response.data = envelope(
        response.status_code,
        _message_for(exc),
        details=details,
    )
    return response
