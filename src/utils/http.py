"""Shared plumbing for the serverless JSON handlers."""

import asyncio
import json
from http.server import BaseHTTPRequestHandler
from typing import Any, Awaitable, Callable, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from src.utils.error_tracking import capture_exception, init_error_tracking
from src.utils.errors import InvalidRequest, OperationError
from src.utils.logging import correlation_context, get_structured_logger, mask_sensitive_data
from src.utils.logging_config import LoggingConfig

logger = get_structured_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)
OperationResult = tuple[int, dict]


def setup_runtime() -> None:
    """Configure logging and error tracking for a handler module."""
    LoggingConfig.setup_logging()
    init_error_tracking()


def parse_input(model: Type[ModelT], body: Any) -> ModelT:
    """Validate a JSON body against an operation's input schema."""
    if not isinstance(body, dict):
        body = {}
    try:
        return model.model_validate(body)
    except ValidationError as e:
        logger.info("Rejected request body", schema=model.__name__, errors=e.error_count())
        raise InvalidRequest()


def failure(message: str) -> dict:
    return {"success": False, "message": message}


def run_operation(
    operation_name: str,
    failure_message: str,
    operation: Callable[[], Awaitable[OperationResult]],
) -> OperationResult:
    """
    Run one operation and translate its outcome into (status, body).

    OperationError subclasses map to their own status and public message.
    Anything else is logged, reported, and becomes a 500 carrying only
    ``failure_message``.
    """
    try:
        return asyncio.run(operation())
    except OperationError as e:
        logger.info(
            f"{operation_name} rejected",
            operation=operation_name,
            status_code=e.status_code,
            reason=e.message,
        )
        return e.status_code, failure(e.message)
    except Exception as e:
        logger.error(
            f"{operation_name} error: {mask_sensitive_data(str(e))}",
            exc_info=True,
            operation=operation_name,
        )
        capture_exception(e)
        return 500, failure(failure_message)


class JsonRequestHandler(BaseHTTPRequestHandler):
    """BaseHTTPRequestHandler with JSON body and response helpers."""

    def read_json_body(self) -> Any:
        """Parse the request body; empty, undecodable, or invalid JSON reads as {}."""
        try:
            content_length = int(self.headers.get('Content-Length', 0) or 0)
            raw_body = self.rfile.read(content_length).decode('utf-8') if content_length > 0 else ""
            return json.loads(raw_body) if raw_body else {}
        except (ValueError, UnicodeDecodeError):
            return {}

    def internal_error(self, error: Exception) -> OperationResult:
        """Last-resort 500 for failures outside an operation."""
        logger.error(f"Unhandled handler error: {mask_sensitive_data(str(error))}", exc_info=True)
        capture_exception(error)
        return 500, failure("Internal server error")

    def send_json(self, status: int, payload: dict) -> None:
        self.send_response(status)
        self.send_header('Content-Type', 'application/json')
        self.end_headers()
        self.wfile.write(json.dumps(payload).encode('utf-8'))

    def correlation(self):
        """Correlation context seeded from the request header when present."""
        header_value: Optional[str] = None
        if self.headers is not None:
            header_value = self.headers.get(LoggingConfig.LOG_CORRELATION_ID_HEADER)
        return correlation_context(header_value)
