from __future__ import annotations

import logging
import time

from fastapi import Request

logger = logging.getLogger("user_service")


def configure_logging(level: str = "INFO") -> None:
    """Dev-friendly defaults; uvicorn's own config can still override them."""
    numeric_level = getattr(logging, (level or "INFO").upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
    logger.setLevel(numeric_level)


async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "%s %s -> %s (%.1f ms)",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response
