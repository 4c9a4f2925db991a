"""S3 adapter implementing BlobPort.

Layer: Infrastructure

Works against AWS S3 or any S3-compatible endpoint (MinIO, LocalStack) via
AWS_ENDPOINT_URL.
"""

from __future__ import annotations

from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from mimarket_lambda.ports.blob import BlobPort
from mimarket_lambda.ports.errors import BackendError, ErrorKind, ObjectNotFoundError

_MISSING_OBJECT = {"NoSuchKey", "404", "NotFound"}


def _translate(exc: Exception, bucket: str, key: str) -> BackendError:
    if isinstance(exc, ClientError):
        error = exc.response.get("Error", {})
        code = str(error.get("Code", ""))
        if code in _MISSING_OBJECT:
            return ObjectNotFoundError(f"Object not found: {bucket}/{key}", backend="s3")
        message = error.get("Message") or str(exc)
        kind = ErrorKind.NOT_FOUND if code == "NoSuchBucket" else ErrorKind.UNKNOWN
        return BackendError(f"S3 {code or 'error'} on {bucket}/{key}: {message}", kind=kind, backend="s3")
    return BackendError(f"S3 unavailable: {exc}", kind=ErrorKind.UNAVAILABLE, backend="s3")


class S3BlobStore(BlobPort):
    """BlobPort over a boto3 S3 client."""

    def __init__(self, client: Any) -> None:
        self._client = client

    def get(self, container: str, key: str) -> bytes:
        try:
            resp = self._client.get_object(Bucket=container, Key=key)
            return resp["Body"].read()
        except (ClientError, BotoCoreError) as e:
            raise _translate(e, container, key) from e

    def put(self, container: str, key: str, body: bytes) -> None:
        try:
            self._client.put_object(Bucket=container, Key=key, Body=body)
        except (ClientError, BotoCoreError) as e:
            raise _translate(e, container, key) from e
