import os
from dataclasses import dataclass
from pathlib import Path
from dotenv import load_dotenv

# Load .env file if present
BASE_DIR = Path(__file__).resolve().parent.parent
load_dotenv(BASE_DIR / ".env")

# --- Core Server Config ---
SERVER_HOST = os.getenv("MIMARKET_SERVER_HOST", "0.0.0.0")
SERVER_PORT = int(os.getenv("MIMARKET_SERVER_PORT", 8080))
DEBUG = os.getenv("MIMARKET_DEBUG", "false").lower() == "true"
LOG_LEVEL = os.getenv("MIMARKET_LOG_LEVEL", "INFO").upper()

# --- Storage ---
STORAGE_BACKEND = os.getenv("MIMARKET_BACKEND", "aws")  # aws | memory
AWS_REGION = os.getenv("AWS_REGION", "us-east-1")
AWS_ENDPOINT_URL = os.getenv("AWS_ENDPOINT_URL") or None  # localstack / minio

# --- Demo lookup target defaults ---
DEFAULT_TABLE_NAME = "mimarket-items"
DEFAULT_ITEM_KEY_ATTRIBUTE = "id"
DEFAULT_ITEM_KEY = "demo-item"
DEFAULT_BUCKET_NAME = "mimarket-assets"
DEFAULT_OBJECT_KEY = "demo/object.txt"


@dataclass(frozen=True)
class LookupTarget:
    """Where the request processor looks on each invocation."""

    table_name: str = DEFAULT_TABLE_NAME
    item_key_attribute: str = DEFAULT_ITEM_KEY_ATTRIBUTE
    item_key: str = DEFAULT_ITEM_KEY
    bucket_name: str = DEFAULT_BUCKET_NAME
    object_key: str = DEFAULT_OBJECT_KEY


def lookup_target_from_env() -> LookupTarget:
    # Read at call time, not import time.
    return LookupTarget(
        table_name=os.getenv("TABLE_NAME", DEFAULT_TABLE_NAME),
        item_key_attribute=os.getenv("ITEM_KEY_ATTRIBUTE", DEFAULT_ITEM_KEY_ATTRIBUTE),
        item_key=os.getenv("ITEM_KEY", DEFAULT_ITEM_KEY),
        bucket_name=os.getenv("BUCKET_NAME", DEFAULT_BUCKET_NAME),
        object_key=os.getenv("OBJECT_KEY", DEFAULT_OBJECT_KEY),
    )
