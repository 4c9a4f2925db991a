# src/mimarket_lambda/lambda_handler.py
"""
AWS Lambda entry point for API Gateway REST (v1) proxy events.

Runs the same parse -> process -> format pipeline as the HTTP app. Adapters
and the processor are process-wide singletons, so warm invocations reuse the
boto3 clients.
"""

from __future__ import annotations

import base64
import binascii
import logging
from typing import Any, Dict, Mapping, Optional

from mimarket_lambda.api.errors import RequestError
from mimarket_lambda.api.handler import BINARY_BODY, INVALID_JSON, parse_body
from mimarket_lambda.api.responses import FormattedResponse, format_error, format_success
from mimarket_lambda.application.processor import RequestProcessor
from mimarket_lambda.config.logging_config import setup_logging
from mimarket_lambda.infra.providers import get_processor

logger = logging.getLogger(__name__)


def _raw_body(event: Mapping[str, Any]) -> Optional[bytes]:
    body = event.get("body")
    if body is None:
        return None
    if event.get("isBase64Encoded"):
        try:
            return base64.b64decode(body, validate=True)
        except (binascii.Error, ValueError):
            raise RequestError(BINARY_BODY)
    try:
        return body.encode("utf-8")
    except UnicodeEncodeError:
        # lone surrogates from \uXXXX escapes in the event JSON
        raise RequestError(INVALID_JSON)


def _params(event: Mapping[str, Any], name: str) -> Dict[str, str]:
    # API Gateway sends null instead of {} when there are none.
    return dict(event.get(name) or {})


def _to_proxy_result(formatted: FormattedResponse) -> Dict[str, Any]:
    return {
        "statusCode": formatted.status_code,
        "headers": formatted.headers,
        "body": formatted.body,
        "isBase64Encoded": False,
    }


def handle_event(event: Mapping[str, Any], processor: RequestProcessor) -> Dict[str, Any]:
    try:
        payload = parse_body(_raw_body(event))
    except RequestError as e:
        logger.error("rejected event: %s", e.message)
        return _to_proxy_result(format_error(e.message, e.status_code))

    try:
        message = processor.process(
            payload,
            _params(event, "queryStringParameters"),
            _params(event, "pathParameters"),
        )
    except Exception as e:
        logger.exception("processing failed")
        return _to_proxy_result(format_error(f"Processing failed: {e}", 500))
    return _to_proxy_result(format_success(message))


def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    setup_logging()
    logger.info(
        "processing %s %s",
        event.get("httpMethod", "-"),
        event.get("path", "-"),
    )
    return handle_event(event, get_processor())
