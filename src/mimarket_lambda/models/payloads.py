from __future__ import annotations
from typing import Any, Dict, Optional
from datetime import datetime, UTC
from pydantic import BaseModel, ConfigDict, Field


def rfc3339_now() -> str:
    return datetime.now(UTC).isoformat()


class RequestPayload(BaseModel):
    """Inbound JSON body. Both fields are optional; unknown fields are ignored."""

    message: Optional[str] = None
    data: Optional[Dict[str, Any]] = None

    model_config = ConfigDict(extra="ignore")


class ResponsePayload(BaseModel):
    """Outbound envelope; `data` is always present on the wire (null when unset)."""

    status: str                                     # "success" | "error"
    message: str
    data: Optional[Dict[str, Any]] = None
    timestamp: str = Field(default_factory=rfc3339_now)
