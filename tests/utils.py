"""Test utilities for chromepdf test suite.

This module provides a recording fake of the rendering service built on
``httpx.MockTransport`` so client tests never touch the network.
"""

import json
from typing import Any, Callable

import httpx

# Smallest byte string that looks like a PDF to a human reader
MINIMAL_PDF_BYTES = b"%PDF-1.4\n1 0 obj << /Type /Catalog >> endobj\ntrailer << /Root 1 0 R >>\n%%EOF"


class FakeRenderService:
    """Fake PDF endpoint that records every request it receives.

    Parameters
    ----------
    status_code : int, default 200
        Status code returned for every request
    content : bytes, default MINIMAL_PDF_BYTES
        Response body returned for every request
    error : Exception, optional
        If set, raised instead of producing a response (simulates
        connection failures)

    """

    def __init__(
        self,
        status_code: int = 200,
        content: bytes = MINIMAL_PDF_BYTES,
        error: Exception | None = None,
    ):
        self.status_code = status_code
        self.content = content
        self.error = error
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, content=self.content, headers={"Content-Type": "application/pdf"})

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    @property
    def last_payload(self) -> dict[str, Any]:
        return json.loads(self.last_request.content.decode("utf-8"))

    def client(self) -> httpx.Client:
        """Create an httpx client wired to this fake."""
        return httpx.Client(transport=httpx.MockTransport(self))


def raising_handler(error: Exception) -> Callable[[httpx.Request], httpx.Response]:
    """Build a transport handler that always raises ``error``."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise error

    return handler
