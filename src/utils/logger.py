import logging
import sys
import structlog
from fastapi import Request
from structlog.stdlib import ProcessorFormatter


def get_client_ip(request: Request) -> str:
    if "x-forwarded-for" in request.headers:
        return request.headers["x-forwarded-for"]
    elif request.client and request.client.host:
        return request.client.host
    return "127.0.0.1"  # localhost for development


def add_request_info(
    logger: structlog.BoundLogger, method_name: str, event_dict: dict
) -> dict:
    context_vars = structlog.contextvars.get_contextvars()
    request_id = context_vars.get("request_id")
    if request_id:
        event_dict["request_id"] = request_id
    return event_dict


def setup_logging(is_production: bool = False):
    """Setup structlog configuration with different formats for dev/prod."""
    log_level = logging.INFO

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    shared_processors: list = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        add_request_info,
        structlog.processors.UnicodeDecoder(),
    ]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.handlers = []

    if is_production:
        # JSON lines for log shipping
        formatter = ProcessorFormatter(
            processor=structlog.processors.JSONRenderer(sort_keys=False),
        )
    else:
        formatter = ProcessorFormatter(
            processor=structlog.dev.ConsoleRenderer(colors=True, pad_event=8),
        )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)

    logging.getLogger("uvicorn").handlers = []
    logging.getLogger("uvicorn.access").handlers = []

    # aiosqlite logs every statement at DEBUG, aiohttp is chatty on retries
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("aiohttp").setLevel(logging.WARNING)

    logger = structlog.get_logger()
    return logger


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a logger instance with optional name."""
    return structlog.get_logger(name)
