from __future__ import annotations

import logging

from django.conf import settings
from django.core.exceptions import PermissionDenied
from django.http import Http404, JsonResponse
from django.utils.deprecation import MiddlewareMixin

logger = logging.getLogger(__name__)


class JsonErrorMiddleware(MiddlewareMixin):
    """Keep every response JSON and open to cross-origin clients.

    DRF views render their own errors through `api.exceptions`; this
    layer catches what never reaches a view: unmatched routes and
    exceptions raised outside DRF's handler.
    """

    def process_exception(self, request, exception):
        # Django turns these into 404/403 responses itself
        if isinstance(exception, (Http404, PermissionDenied)):
            return None
        logger.error("error handling route %s", request.path, exc_info=exception)
        return JsonResponse({"error": "internal server error"}, status=500)

    def process_response(self, request, response):
        # Django's own 404 page (no route matched) becomes a JSON body
        content_type = response.get("Content-Type", "")
        if response.status_code == 404 and not content_type.startswith("application/json"):
            response = JsonResponse({"error": "not found"}, status=404)

        response["Access-Control-Allow-Origin"] = settings.CORS_ALLOWED_ORIGIN
        response["Access-Control-Allow-Methods"] = "GET, POST, PATCH, DELETE, OPTIONS"
        response["Access-Control-Allow-Headers"] = "Content-Type"
        return response
