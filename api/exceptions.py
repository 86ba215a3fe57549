"""JSON error bodies for the REST API.

- validation failures: 400 `{"errors": [{"field": ..., "msg": ...}]}`
- unknown resources: 404 `{"error": "not found"}`
- malformed request JSON: 400 `{"error": "invalid json"}`
- anything else DRF knows about: `{"error": <detail>}`
"""
from __future__ import annotations

import logging

from rest_framework import exceptions, status
from rest_framework.settings import api_settings
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def flatten_errors(detail, field: str | None = None):
    """Yield `{"field", "msg"}` pairs from a (possibly nested) DRF error detail."""
    if isinstance(detail, dict):
        for key, value in detail.items():
            if key == api_settings.NON_FIELD_ERRORS_KEY:
                key = None
            elif field:
                key = f"{field}.{key}"
            yield from flatten_errors(value, key or field)
    elif isinstance(detail, list):
        for item in detail:
            yield from flatten_errors(item, field)
    else:
        yield {"field": field, "msg": str(detail)}


def json_exception_handler(exc, context):
    response = exception_handler(exc, context)
    if response is None:
        # Not an API exception; JsonErrorMiddleware logs it and answers 500
        return None

    if isinstance(exc, exceptions.ValidationError):
        response.data = {"errors": list(flatten_errors(exc.detail))}
    elif isinstance(exc, exceptions.ParseError):
        response.data = {"error": "invalid json"}
    elif response.status_code == status.HTTP_404_NOT_FOUND:
        response.data = {"error": "not found"}
    else:
        detail = response.data.get("detail") if isinstance(response.data, dict) else response.data
        response.data = {"error": str(detail)}
    if response.status_code >= 500:
        logger.error("error handling route: %s", exc)
    return response
