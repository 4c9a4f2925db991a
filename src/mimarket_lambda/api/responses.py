# src/mimarket_lambda/api/responses.py
"""
Response formatter shared by the HTTP app and the Lambda entry point.

Produces a transport-neutral FormattedResponse; each transport wraps it in
its own response type.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict

from pydantic_core import PydanticSerializationError

from mimarket_lambda.models import ResponsePayload

logger = logging.getLogger(__name__)

CORS_HEADERS: Dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}

# Used verbatim when the envelope itself cannot be serialized.
FALLBACK_ERROR_BODY = (
    '{"status":"error","message":"Failed to serialize response",'
    '"timestamp":"1970-01-01T00:00:00Z"}'
)


@dataclass
class FormattedResponse:
    status_code: int
    body: str
    headers: Dict[str, str] = field(default_factory=dict)


def _render(payload: ResponsePayload, status_code: int, headers: Dict[str, str]) -> FormattedResponse:
    try:
        body = payload.model_dump_json()
    except (PydanticSerializationError, TypeError, ValueError):
        logger.exception("failed to serialize %s response", payload.status)
        return FormattedResponse(
            status_code=500,
            body=FALLBACK_ERROR_BODY,
            headers={"Content-Type": "application/json"},
        )
    return FormattedResponse(status_code=status_code, body=body, headers=headers)


def format_success(message: str) -> FormattedResponse:
    headers = {"Content-Type": "application/json", **CORS_HEADERS}
    return _render(ResponsePayload(status="success", message=message), 200, headers)


def format_error(message: str, status_code: int = 400) -> FormattedResponse:
    headers = {
        "Content-Type": "application/json",
        "Access-Control-Allow-Origin": CORS_HEADERS["Access-Control-Allow-Origin"],
    }
    return _render(ResponsePayload(status="error", message=message), status_code, headers)


def preflight() -> FormattedResponse:
    return FormattedResponse(status_code=204, body="", headers=dict(CORS_HEADERS))
