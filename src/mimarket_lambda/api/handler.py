# src/mimarket_lambda/api/handler.py
import logging
from typing import Dict, Mapping, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from mimarket_lambda.api.errors import RequestError, to_response
from mimarket_lambda.api.responses import format_success, preflight
from mimarket_lambda.application.processor import RequestProcessor
from mimarket_lambda.infra.providers import get_processor
from mimarket_lambda.models import RequestPayload

logger = logging.getLogger(__name__)

INVALID_JSON = "Invalid JSON in request body"
BINARY_BODY = "Binary body not supported"


def parse_body(raw: Optional[bytes]) -> Optional[RequestPayload]:
    """
    Turn a raw request body into a payload.

    An empty body means "no payload". Anything that is not a JSON object
    matching RequestPayload is rejected here, so the processor only ever sees
    None or a validated payload.
    """
    if not raw:
        return None
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError:
        raise RequestError(BINARY_BODY)
    try:
        return RequestPayload.model_validate_json(text)
    except ValidationError as e:
        logger.error("failed to parse request body: %s", e.errors(include_url=False))
        raise RequestError(INVALID_JSON)


def single_valued(params: Mapping[str, str]) -> Dict[str, str]:
    # Starlette's QueryParams is a multi-dict; the last value wins.
    return {k: v for k, v in params.items()}


router = APIRouter(tags=["handler"])

_METHODS = ["GET", "POST", "PUT", "DELETE"]


@router.options("/")
@router.options("/{proxy:path}")
def cors_preflight() -> Response:
    return to_response(preflight())


@router.api_route("/", methods=_METHODS)
@router.api_route("/{proxy:path}", methods=_METHODS)
async def handle(
    request: Request,
    processor: RequestProcessor = Depends(get_processor),
) -> Response:
    logger.info("processing %s %s", request.method, request.url.path)

    payload = parse_body(await request.body())
    query_params = single_valued(request.query_params)
    proxy = request.path_params.get("proxy")
    path_params = {"proxy": proxy} if proxy else {}

    message = await run_in_threadpool(processor.process, payload, query_params, path_params)
    return to_response(format_success(message))
