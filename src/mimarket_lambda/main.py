# src/mimarket_lambda/main.py
import os

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from mimarket_lambda.api.errors import (
    RequestError,
    http_exception_handler,
    request_error_handler,
    unhandled_exception_handler,
)
from mimarket_lambda.api.handler import router as handler_router
from mimarket_lambda.config import settings
from mimarket_lambda.config.logging_config import setup_logging

setup_logging()

app = FastAPI(
    title="MiMarket Lambda Handler",
    description="Single-request handler that reports what the key-value and blob stores hold.",
    version="0.1.0",
)

app.include_router(handler_router)
app.add_exception_handler(RequestError, request_error_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "mimarket_lambda.main:app",
        host=os.getenv("MIMARKET_SERVER_HOST", settings.SERVER_HOST),
        port=int(os.getenv("MIMARKET_SERVER_PORT", settings.SERVER_PORT)),
        reload=settings.DEBUG,
    )
