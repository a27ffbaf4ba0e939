"""chromepdf - A Python client for Browserless-style PDF rendering services.

chromepdf turns a set of rendering options into the JSON document expected
by a headless-browser "PDF as a service" endpoint, posts it together with
inline HTML or a URL, and returns the rendered PDF bytes. All layout and
rasterization happens on the remote service.

Key Features
------------
- Immutable, individually nullable rendering options with fluent setters
- CSS shorthand margins (1 to 4 values)
- Header/footer display derived from the templates that are set
- Selective payload assembly: unset options never reach the wire
- Single ``ApiError`` for connection failures and HTTP error statuses
- Configuration from files (TOML, YAML, JSON) and ``CHROMEPDF_*`` variables

Examples
--------
Render inline HTML:

    >>> from chromepdf import BrowserlessClient
    >>> client = BrowserlessClient(api_key="...")
    >>> pdf = client.set_margin("1cm").set_footer("<span class='pageNumber'></span>").render_content("<h1>Hi</h1>")

Inspect the request document:

    >>> from chromepdf import PdfOptions, RenderTarget, assemble_payload
    >>> assemble_payload(PdfOptions(landscape=True), RenderTarget.from_url("https://example.com"))
    {'options': {'format': 'A4', 'landscape': True}, 'safeMode': False, 'url': 'https://example.com'}

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

__version__ = "1.0.0"

from chromepdf.client import BrowserlessClient, RenderClient, SelfHostedBrowserlessClient
from chromepdf.constants import ALWAYS_EMIT_PRINT_BACKGROUND, DEFAULT_API_URL, PDF_ENDPOINT
from chromepdf.exceptions import (
    ApiError,
    ChromePdfError,
    ConfigurationError,
    EncodingError,
    FileAccessError,
    FileError,
    FileNotFoundError,
    ValidationError,
)
from chromepdf.options import ConnectionOptions, MarginOptions, PdfOptions
from chromepdf.payload import RenderTarget, assemble_payload, build_options_payload, encode_payload

__all__ = [
    "__version__",
    "ALWAYS_EMIT_PRINT_BACKGROUND",
    "DEFAULT_API_URL",
    "PDF_ENDPOINT",
    "ApiError",
    "BrowserlessClient",
    "ChromePdfError",
    "ConfigurationError",
    "ConnectionOptions",
    "EncodingError",
    "FileAccessError",
    "FileError",
    "FileNotFoundError",
    "MarginOptions",
    "PdfOptions",
    "RenderClient",
    "RenderTarget",
    "SelfHostedBrowserlessClient",
    "ValidationError",
    "assemble_payload",
    "build_options_payload",
    "encode_payload",
]
