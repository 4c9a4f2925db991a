from .payloads import (
    RequestPayload,
    ResponsePayload,
    rfc3339_now,
)
__all__ = [
    "RequestPayload",
    "ResponsePayload",
    "rfc3339_now",
]
