import time
import uuid

import structlog
from fastapi import Request

from src.utils.logger import get_client_ip, get_logger

logger = get_logger(__name__)


async def logging_middleware(request: Request, call_next):
    start_time = time.time()

    if request.url.path == "/health" or request.url.path.startswith("/uploads/"):
        return await call_next(request)

    structlog.contextvars.clear_contextvars()
    request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
    ip_address = get_client_ip(request)
    structlog.contextvars.bind_contextvars(
        ip_address=ip_address,
        method=request.method,
        path=request.url.path,
        request_id=request_id,
    )

    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id

    logger.info(
        "request",
        status_code=response.status_code,
        duration=int((time.time() - start_time) * 1000),
    )

    return response
