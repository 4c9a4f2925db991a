# src/mimarket_lambda/config/logging_config.py
import logging
from typing import Optional

from mimarket_lambda.config import settings

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

_configured = False


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure the root logger once per process.

    No timestamps in the format; uvicorn and the Lambda runtime add them.
    """
    global _configured
    if _configured:
        return
    logging.basicConfig(level=(level or settings.LOG_LEVEL), format=LOG_FORMAT)
    # boto3 is chatty at INFO
    logging.getLogger("botocore").setLevel(logging.WARNING)
    logging.getLogger("boto3").setLevel(logging.WARNING)
    _configured = True
