import logging
import time
import uuid

from fastapi import Request

from lumina.config.settings import settings
from lumina.utils.logger import get_logger

logger = get_logger("lumina.requests")


async def log_requests_middleware(request: Request, call_next):
    """Tag every request with an X-Request-Id and log method, path, status and duration."""
    request_id = request.headers.get("x-request-id") or uuid.uuid4().hex[:12]
    started = time.perf_counter()

    if logger.isEnabledFor(logging.DEBUG) and request.method in {"POST", "PUT", "PATCH"}:
        body = await request.body()
        logger.debug(
            "[%s] %s %s body=%s",
            request_id,
            request.method,
            request.url.path,
            body[: settings.request_log_body_limit].decode("utf-8", errors="replace"),
        )

    try:
        response = await call_next(request)
    except Exception:
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.exception("[%s] %s %s failed after %.1fms", request_id, request.method, request.url.path, elapsed_ms)
        raise

    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "[%s] %s %s → %d (%.1fms)",
        request_id,
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    response.headers["X-Request-Id"] = request_id
    return response
