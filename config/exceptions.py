"""Project-wide DRF exception handler.

Every error payload carries a top-level ``message`` so clients can show a
single notification without walking the field errors.
"""

from __future__ import annotations

import logging
from typing import Any

from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)

DEFAULT_MESSAGE = "Request could not be processed"


def _first_message(detail: Any) -> str | None:
    if isinstance(detail, dict):
        for value in detail.values():
            found = _first_message(value)
            if found:
                return found
        return None
    if isinstance(detail, list):
        for value in detail:
            found = _first_message(value)
            if found:
                return found
        return None
    text = str(detail).strip()
    return text or None


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)
    if response is None:
        return None

    data = response.data
    if isinstance(data, dict) and "detail" in data and len(data) == 1:
        response.data = {"message": str(data["detail"])}
    elif isinstance(data, dict) and "message" not in data:
        response.data = {
            "message": _first_message(data) or DEFAULT_MESSAGE,
            "errors": data,
        }
    elif isinstance(data, list):
        response.data = {
            "message": _first_message(data) or DEFAULT_MESSAGE,
            "errors": data,
        }

    view = context.get("view")
    logger.info(
        "API error %s in %s: %s",
        response.status_code,
        type(view).__name__ if view is not None else "unknown view",
        response.data.get("message") if isinstance(response.data, dict) else "",
    )
    return response
