"""Test helper functions."""

import json
from contextlib import contextmanager
from io import BytesIO
from typing import Any, Dict, List, Optional, Tuple
from unittest.mock import Mock, patch

import httpx


def call_handler(
    handler_cls,
    method: str = "POST",
    body: Any = None,
    headers: Optional[Dict[str, str]] = None,
) -> Tuple[int, Dict[str, Any]]:
    """
    Invoke a BaseHTTPRequestHandler subclass without a socket.

    ``body`` may be a dict (sent as JSON), raw bytes, or None for an empty
    body. Returns (status code, decoded JSON response).
    """
    if body is None:
        raw = b""
    elif isinstance(body, bytes):
        raw = body
    else:
        raw = json.dumps(body).encode("utf-8")

    h = handler_cls.__new__(handler_cls)
    h.headers = {"Content-Type": "application/json", "Content-Length": str(len(raw)), **(headers or {})}
    h.rfile = BytesIO(raw)
    h.wfile = BytesIO()
    h.send_response = Mock()
    h.send_header = Mock()
    h.end_headers = Mock()

    getattr(h, f"do_{method}")()

    assert h.send_response.called
    h.wfile.seek(0)
    return h.send_response.call_args[0][0], json.loads(h.wfile.read().decode("utf-8"))


@contextmanager
def mock_ai_service(responder: Any):
    """
    Serve the AI health client from an in-process httpx transport.

    ``responder`` is an httpx.Response, an exception to raise, or a callable
    taking the request. Yields the list of requests the client sent.
    """
    real_client = httpx.AsyncClient
    requests: List[httpx.Request] = []

    def handle(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        if isinstance(responder, Exception):
            raise responder
        if callable(responder):
            return responder(request)
        return responder

    def client_factory(**kwargs):
        return real_client(transport=httpx.MockTransport(handle), **kwargs)

    with patch("src.services.ai_health.httpx.AsyncClient", side_effect=client_factory):
        yield requests
