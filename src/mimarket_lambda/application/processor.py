# src/mimarket_lambda/application/processor.py
"""
RequestProcessor: the request pipeline behind every transport.

process() never fails because of a backend: each lookup's BackendError is
rendered into its own section of the response text.
"""

from __future__ import annotations

import json
import logging
from typing import Dict, Mapping, Optional

from mimarket_lambda.config.settings import LookupTarget, lookup_target_from_env
from mimarket_lambda.models import RequestPayload
from mimarket_lambda.ports.blob import BlobPort
from mimarket_lambda.ports.errors import BackendError
from mimarket_lambda.ports.key_value import KeyValuePort

logger = logging.getLogger(__name__)

HEALTHY = "Service is healthy"
NO_PAYLOAD = "No payload provided"
NO_MESSAGE = "No message provided"
ITEM_NOT_FOUND = "Item not found"


def resolve_message(payload: Optional[RequestPayload]) -> str:
    if payload is None:
        return NO_PAYLOAD
    if payload.message is None:
        return NO_MESSAGE
    return payload.message


def render_record(record: Dict[str, str]) -> str:
    return "Item found:\n" + json.dumps(record, indent=2, sort_keys=True, ensure_ascii=False)


def render_blob(body: bytes) -> str:
    text = body.decode("utf-8", errors="replace")
    return f"Object found ({len(body)} bytes):\n{text}"


def render_error(err: BackendError) -> str:
    return f"Error: {err.message}"


class RequestProcessor:
    """
    Owns one KeyValuePort and one BlobPort for its whole lifetime.

    Holds no other mutable state, so a single instance can serve concurrent
    invocations as long as the adapters allow concurrent reads.
    """

    def __init__(
        self,
        key_value: KeyValuePort,
        blob: BlobPort,
        lookup: Optional[LookupTarget] = None,
    ) -> None:
        self._key_value = key_value
        self._blob = blob
        self._lookup = lookup or lookup_target_from_env()

    @property
    def lookup(self) -> LookupTarget:
        return self._lookup

    def process(
        self,
        payload: Optional[RequestPayload],
        query_params: Mapping[str, str],
        path_params: Mapping[str, str],
    ) -> str:
        # path_params is accepted for routing by request content later on;
        # today the lookup target comes from configuration only.
        message = resolve_message(payload)

        if query_params.get("health") == "true":
            return HEALTHY

        sections = [
            f"Received message: {message}",
            self._key_value_section(),
            self._blob_section(),
        ]
        return "\n\n".join(sections)

    def _key_value_section(self) -> str:
        t = self._lookup
        header = f"Key-value lookup ({t.table_name}/{t.item_key}):"
        try:
            record = self._key_value.get(t.table_name, {t.item_key_attribute: t.item_key})
        except BackendError as e:
            logger.warning("key-value lookup failed on %s: %s", t.table_name, e)
            return f"{header}\n{render_error(e)}"
        if record is None:
            return f"{header}\n{ITEM_NOT_FOUND}"
        return f"{header}\n{render_record(record)}"

    def _blob_section(self) -> str:
        t = self._lookup
        header = f"Blob lookup ({t.bucket_name}/{t.object_key}):"
        try:
            body = self._blob.get(t.bucket_name, t.object_key)
        except BackendError as e:
            logger.warning("blob lookup failed on %s/%s: %s", t.bucket_name, t.object_key, e)
            return f"{header}\n{render_error(e)}"
        return f"{header}\n{render_blob(body)}"
