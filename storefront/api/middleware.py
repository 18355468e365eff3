import json
import logging
import time
from typing import Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import Message

from storefront.utils.logger import set_app_context, AppLogger, get_current_logger

MAX_LOG_BYTES = 4096
MASKED_FIELDS = {"password", "confirmPassword", "confirm_password"}


class AppContextMiddleware(BaseHTTPMiddleware):
    """Middleware to set app logger context for all requests."""

    async def dispatch(self, request, call_next):
        with set_app_context(AppLogger.API):
            response = await call_next(request)
        return response


def mask_body(raw: bytes) -> str:
    """Render a request body for the log with credential fields masked."""
    try:
        parsed = json.loads(raw.decode("utf-8", "ignore"))
    except ValueError:
        # Not JSON; only keep the size so credentials never reach the log
        return f"<{len(raw)} bytes>"

    if isinstance(parsed, dict):
        parsed = {
            key: "[masked]" if key in MASKED_FIELDS else value
            for key, value in parsed.items()
        }
    text = json.dumps(parsed, ensure_ascii=False)
    if len(text) > MAX_LOG_BYTES:
        text = text[:MAX_LOG_BYTES] + f"... [truncated to {MAX_LOG_BYTES} chars]"
    return text


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        logger = get_current_logger()
        client_ip = request.client.host if request.client else "unknown"
        method = request.method
        url = str(request.url)

        try:
            req_body_bytes: bytes = await request.body()
        except Exception:
            req_body_bytes = b""

        sent_once = False

        async def receive_with_body() -> Message:
            nonlocal sent_once
            if not sent_once:
                sent_once = True
                return {"type": "http.request", "body": req_body_bytes, "more_body": False}
            return {"type": "http.request", "body": b"", "more_body": False}

        request = Request(request.scope, receive=receive_with_body)

        body_for_log: Optional[str] = None
        if method in {"POST", "PUT", "PATCH"} and req_body_bytes:
            body_for_log = mask_body(req_body_bytes)

        if logger.isEnabledFor(logging.DEBUG):
            parts = [f"IP: {client_ip}", f"URL: {url}", f"Method: {method}"]
            if body_for_log is not None:
                parts.append(f"Body: {body_for_log}")
            logger.debug("Request Detail: " + ", ".join(parts))

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        logger.info(f"{method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)")
        return response
