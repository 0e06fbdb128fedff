"""Global exception handlers for the FastAPI application."""

import traceback

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..messages import MessageCode, get_default_message
from src.utils.logger import get_logger

logger = get_logger(__name__)


class BoatIdentifierException(Exception):
    """Base exception for the API; the message code's text becomes ``error``."""

    def __init__(
        self,
        message_code: MessageCode,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        description: str | None = None,
        headers: dict | None = None,
    ):
        self.message_code = message_code
        self.status_code = status_code
        self.message: str = get_default_message(message_code)
        self.description = description
        self.headers = headers or {}
        super().__init__(self.message)

    def to_response_dict(self) -> dict:
        """Convert exception to API response format."""
        content: dict = {"error": self.message}
        if self.description:
            content["message"] = self.description
        return content


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""

    @app.exception_handler(BoatIdentifierException)
    async def boat_identifier_exception_handler(
        request: Request, exc: BoatIdentifierException
    ) -> JSONResponse:
        """Handle application exceptions."""
        log_event = f"Request failed: {exc.message_code.value}"
        log_extra = {
            "path": request.url.path,
            "method": request.method,
            "message_code": exc.message_code.value,
            "description": exc.description,
        }
        # Client errors are expected outcomes, only server errors are logged as such
        if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(log_event, extra=log_extra)
        else:
            logger.info(log_event, extra=log_extra)

        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_response_dict(),
            headers=exc.headers,
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle FastAPI and Starlette HTTP exceptions."""
        logger.warning(
            f"HTTP exception {exc.status_code}: {exc.detail}",
            extra={
                "path": request.url.path,
                "method": request.method,
            },
        )

        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle request validation errors."""
        try:
            errors = exc.errors()
            serializable_errors = []
            for error in errors:
                error_dict = dict(error)
                # ctx may hold the raw exception object
                error_dict.pop("ctx", None)
                if isinstance(error_dict.get("input"), bytes):
                    error_dict["input"] = "<bytes>"
                serializable_errors.append(error_dict)
        except Exception:
            serializable_errors = [
                {"msg": "Validation error occurred", "type": "validation_error"}
            ]

        logger.warning(
            "Validation error occurred",
            extra={
                "path": request.url.path,
                "method": request.method,
            },
        )

        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={
                "error": get_default_message(MessageCode.INVALID_INPUT),
                "details": serializable_errors,
            },
        )

    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_exception_handler(
        request: Request, exc: SQLAlchemyError
    ) -> JSONResponse:
        """Handle database errors; there is no fallback store."""
        logger.error(
            f"Database error: {str(exc)}",
            extra={
                "path": request.url.path,
                "method": request.method,
                "exception_type": type(exc).__name__,
            },
        )

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": get_default_message(MessageCode.DATABASE_ERROR)},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle all other unhandled exceptions."""
        logger.error(
            f"Unhandled exception: {str(exc)}",
            extra={
                "path": request.url.path,
                "method": request.method,
                "exception_type": type(exc).__name__,
                "traceback": traceback.format_exc(),
            },
        )

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": get_default_message(MessageCode.INTERNAL_ERROR),
                "message": type(exc).__name__,
            },
        )
