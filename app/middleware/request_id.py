from __future__ import annotations

import time
import uuid
from collections.abc import Callable

import sentry_sdk
import structlog
from fastapi import Request, Response

REQUEST_ID_HEADER = "X-Request-ID"


def _duration_ms(start_ns: int) -> float:
    return round((time.perf_counter_ns() - start_ns) / 1_000_000.0, 3)


async def request_id_middleware(request: Request, call_next: Callable) -> Response:
    """Attach/propagate Request-ID and emit structured access log.

    - Prefer inbound X-Request-ID; generate UUID4 if absent
    - Bind request_id, path, method to contextvars so service and error logs include it
    - Emit one-line access log event="http_request" with basic metrics
    - Always set X-Request-ID on the response
    """
    logger = structlog.get_logger(__name__)

    rid = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
    client_ip = (request.client.host if request.client else None) or "-"

    structlog.contextvars.bind_contextvars(
        request_id=rid, path=request.url.path, method=request.method
    )
    # Tag Sentry events raised while handling this request
    sentry_sdk.set_tag("request_id", rid)

    start_ns = time.perf_counter_ns()
    try:
        response = await call_next(request)
    except Exception:
        # Only reachable if error dispatch itself failed
        logger.error(
            "http_request",
            status=500,
            duration_ms=_duration_ms(start_ns),
            client_ip=client_ip,
            exc_info=True,
        )
        raise
    finally:
        # Clear per-request bindings to avoid leakage across tasks
        structlog.contextvars.clear_contextvars()

    logger.info(
        "http_request",
        request_id=rid,
        path=request.url.path,
        method=request.method,
        status=response.status_code,
        duration_ms=_duration_ms(start_ns),
        client_ip=client_ip,
    )
    response.headers[REQUEST_ID_HEADER] = rid
    return response
