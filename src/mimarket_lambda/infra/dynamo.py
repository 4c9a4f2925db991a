"""DynamoDB adapter implementing KeyValuePort.

Layer: Infrastructure

Records are flat string maps, so every attribute travels as a DynamoDB
string attribute ({"S": ...}). Non-string attributes on stored items are
skipped on read.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from botocore.exceptions import BotoCoreError, ClientError

from mimarket_lambda.ports.errors import BackendError, ErrorKind
from mimarket_lambda.ports.key_value import KeyValuePort

logger = logging.getLogger(__name__)

_ERROR_KINDS = {
    "ResourceNotFoundException": ErrorKind.NOT_FOUND,
    "ValidationException": ErrorKind.MALFORMED,
    "SerializationException": ErrorKind.MALFORMED,
    "ProvisionedThroughputExceededException": ErrorKind.UNAVAILABLE,
    "RequestLimitExceeded": ErrorKind.UNAVAILABLE,
    "ThrottlingException": ErrorKind.UNAVAILABLE,
    "InternalServerError": ErrorKind.UNAVAILABLE,
}


def to_attributes(values: Mapping[str, str]) -> Dict[str, Dict[str, str]]:
    return {k: {"S": v} for k, v in values.items()}


def from_attributes(item: Mapping[str, Mapping[str, Any]]) -> Dict[str, str]:
    return {k: v["S"] for k, v in item.items() if "S" in v}


def _translate(exc: Exception, table_name: str) -> BackendError:
    if isinstance(exc, ClientError):
        error = exc.response.get("Error", {})
        code = error.get("Code", "")
        message = error.get("Message") or str(exc)
        return BackendError(
            f"DynamoDB {code or 'error'} on table {table_name}: {message}",
            kind=_ERROR_KINDS.get(code, ErrorKind.UNKNOWN),
            backend="dynamodb",
        )
    return BackendError(
        f"DynamoDB unavailable: {exc}",
        kind=ErrorKind.UNAVAILABLE,
        backend="dynamodb",
    )


class DynamoKeyValueStore(KeyValuePort):
    """KeyValuePort over a boto3 DynamoDB client (clients are thread-safe)."""

    def __init__(self, client: Any) -> None:
        self._client = client

    def get(self, table_name: str, key: Mapping[str, str]) -> Optional[Dict[str, str]]:
        try:
            resp = self._client.get_item(TableName=table_name, Key=to_attributes(key))
        except (ClientError, BotoCoreError) as e:
            raise _translate(e, table_name) from e

        item = resp.get("Item")
        if item is None:
            return None
        return from_attributes(item)

    def put(self, table_name: str, item: Mapping[str, str]) -> None:
        try:
            self._client.put_item(TableName=table_name, Item=to_attributes(item))
        except (ClientError, BotoCoreError) as e:
            raise _translate(e, table_name) from e
        logger.debug("put item into %s", table_name)
