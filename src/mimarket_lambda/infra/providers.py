# src/mimarket_lambda/infra/providers.py
from __future__ import annotations

import logging
import os
from typing import Optional

from mimarket_lambda.application.processor import RequestProcessor
from mimarket_lambda.config import settings
from mimarket_lambda.ports.blob import BlobPort
from mimarket_lambda.ports.key_value import KeyValuePort

logger = logging.getLogger(__name__)

# singletons per-process (reused across warm Lambda invocations)
_key_value: Optional[KeyValuePort] = None
_blob: Optional[BlobPort] = None
_processor: Optional[RequestProcessor] = None


def _backend() -> str:
    """
    Adapter selector. Default: AWS (DynamoDB + S3).
    Set MIMARKET_BACKEND=memory for local development without AWS.
    """
    backend = os.getenv("MIMARKET_BACKEND", settings.STORAGE_BACKEND).lower()
    if backend in ("memory", "mem", "inmemory", "in-memory"):
        return "memory"
    if backend not in ("", "aws"):
        logger.warning("unknown MIMARKET_BACKEND=%r, using aws", backend)
    return "aws"


def _boto_client(service: str):
    import boto3

    return boto3.client(
        service,
        region_name=os.getenv("AWS_REGION", settings.AWS_REGION),
        endpoint_url=os.getenv("AWS_ENDPOINT_URL") or settings.AWS_ENDPOINT_URL,
    )


def get_key_value_store() -> KeyValuePort:
    global _key_value
    if _key_value is None:
        if _backend() == "memory":
            from .memory_storage import MemoryKeyValueStore
            _key_value = MemoryKeyValueStore()
        else:
            from .dynamo import DynamoKeyValueStore
            _key_value = DynamoKeyValueStore(_boto_client("dynamodb"))
        logger.info("key-value adapter: %s", type(_key_value).__name__)
    return _key_value


def get_blob_store() -> BlobPort:
    global _blob
    if _blob is None:
        if _backend() == "memory":
            from .memory_storage import MemoryBlobStore
            _blob = MemoryBlobStore()
        else:
            from .s3 import S3BlobStore
            _blob = S3BlobStore(_boto_client("s3"))
        logger.info("blob adapter: %s", type(_blob).__name__)
    return _blob


def get_processor() -> RequestProcessor:
    global _processor
    if _processor is None:
        _processor = RequestProcessor(get_key_value_store(), get_blob_store())
    return _processor


def reset_providers() -> None:
    global _key_value, _blob, _processor
    _key_value = None
    _blob = None
    _processor = None
