#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Rendering clients for Browserless-style PDF services.

The client owns the current ``PdfOptions`` snapshot and exposes fluent
setters that swap in an updated snapshot and return the client, so calls can
be chained. A render reads one snapshot, assembles the JSON document and
posts it to the service's PDF endpoint.

Examples
--------
Render inline HTML with custom margins:

    >>> from chromepdf import BrowserlessClient
    >>> with BrowserlessClient(api_key="secret") as client:
    ...     pdf = client.set_format("Letter").set_margin("1cm", "2cm").render_content("<h1>Hi</h1>")

Render a web page on a self-hosted instance:

    >>> client = SelfHostedBrowserlessClient("http://localhost:3000")
    >>> pdf = client.set_landscape(True).set_wait_until("networkidle0").render_url("https://example.com")

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Mapping, Union
from urllib.parse import quote

import httpx

from chromepdf.config import load_config, resolve_options
from chromepdf.constants import API_KEY_QUERY_PARAM, DEFAULT_API_URL, ENV_DISABLE_NETWORK, JSON_CONTENT_TYPE
from chromepdf.exceptions import ApiError
from chromepdf.options import ConnectionOptions, MarginOptions, PdfOptions
from chromepdf.payload import RenderTarget, assemble_payload, build_options_payload, encode_payload
from chromepdf.utils.http import create_http_client, is_network_disabled
from chromepdf.utils.io_utils import read_text_file

logger = logging.getLogger(__name__)


class RenderClient(ABC):
    """Interface shared by every PDF rendering client."""

    @abstractmethod
    def render_content(self, content: str) -> bytes:
        """Render a string of HTML to PDF bytes."""

    @abstractmethod
    def render_url(self, url: str) -> bytes:
        """Render the page at ``url`` to PDF bytes."""

    @abstractmethod
    def render_file(self, path: Union[str, Path]) -> bytes:
        """Render a local HTML file to PDF bytes."""


class BrowserlessClient(RenderClient):
    """Client for the hosted Browserless PDF API.

    Parameters
    ----------
    http_client : httpx.Client, optional
        Transport to use. When omitted, a client is created on first use and
        closed by ``close()``; an injected client is never closed here.
    api_key : str, optional
        API key sent as the ``token`` query parameter
    api_url : str, default "https://chrome.browserless.io"
        Base URL of the service
    options : PdfOptions, optional
        Initial rendering options, defaults to ``PdfOptions()``
    connection : ConnectionOptions, optional
        Full connection settings; takes precedence over ``api_key`` and
        ``api_url`` when given

    Notes
    -----
    Setters replace the options snapshot rather than mutating it, so a render
    always serializes a consistent set of options. Calling setters from
    several threads at once still needs external locking.

    """

    def __init__(
        self,
        http_client: httpx.Client | None = None,
        api_key: str | None = None,
        api_url: str = DEFAULT_API_URL,
        options: PdfOptions | None = None,
        connection: ConnectionOptions | None = None,
    ):
        """Initialize the client."""
        self._connection = connection or ConnectionOptions(api_key=api_key, api_url=api_url)
        self._options = options or PdfOptions()
        self._http_client = http_client
        self._owns_http_client = http_client is None

    @classmethod
    def from_config(
        cls,
        config: Mapping[str, Any] | None = None,
        http_client: httpx.Client | None = None,
    ) -> BrowserlessClient:
        """Create a client from a configuration mapping.

        Parameters
        ----------
        config : Mapping[str, Any], optional
            Configuration as returned by ``chromepdf.config.load_config``.
            When omitted, configuration is discovered from files and the
            environment.
        http_client : httpx.Client, optional
            Transport to inject

        Returns
        -------
        BrowserlessClient
            Configured client

        """
        if config is None:
            config = load_config()
        connection, options = resolve_options(config)
        return cls(http_client=http_client, options=options, connection=connection)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def options(self) -> PdfOptions:
        """Current rendering options snapshot."""
        return self._options

    @property
    def connection(self) -> ConnectionOptions:
        return self._connection

    @property
    def api_key(self) -> str | None:
        return self._connection.api_key

    @property
    def api_url(self) -> str:
        return self._connection.api_url

    def with_options(self, options: PdfOptions) -> BrowserlessClient:
        """Replace the whole options snapshot."""
        self._options = options
        return self

    def _update(self, **changes: Any) -> BrowserlessClient:
        self._options = self._options.create_updated(**changes)
        return self

    # ------------------------------------------------------------------
    # Fluent setters
    # ------------------------------------------------------------------

    def set_api_key(self, api_key: str | None) -> BrowserlessClient:
        self._connection = self._connection.create_updated(api_key=api_key)
        return self

    def set_format(self, format: str) -> BrowserlessClient:
        """Set the paper format keyword, e.g. ``"A4"`` or ``"Letter"``."""
        return self._update(format=format)

    def set_margin(self, *values: str | None) -> BrowserlessClient:
        """Set page margins using CSS shorthand.

        One value sets all sides; two set top/bottom and left/right; three set
        top, left/right and bottom; four set top, right, bottom and left.

        Raises
        ------
        ValidationError
            If zero or more than four values are given

        """
        return self._update(margin=MarginOptions.from_shorthand(*values))

    def set_print_background(self, print_background: bool) -> BrowserlessClient:
        """Set whether background graphics are rendered."""
        return self._update(print_background=print_background)

    def set_wait_until(self, wait_until: str | None) -> BrowserlessClient:
        """Set the navigation event after which rendering starts.

        Common values are ``load``, ``domcontentloaded``, ``networkidle0``
        and ``networkidle2``.
        """
        return self._update(wait_until=wait_until)

    def set_page_ranges(self, page_ranges: str | None) -> BrowserlessClient:
        """Set the pages to render, e.g. ``"1,2,5-7"``; other pages are dropped."""
        return self._update(page_ranges=page_ranges)

    def set_media_emulation(self, emulate_media: str | None) -> BrowserlessClient:
        """Set the media type to emulate (``print`` or ``screen``)."""
        return self._update(emulate_media=emulate_media)

    def set_scale(self, scale: float | None) -> BrowserlessClient:
        return self._update(scale=scale)

    def set_header(self, header: str | None) -> BrowserlessClient:
        """Set the header template; header display follows automatically."""
        return self._update(header=header)

    def set_footer(self, footer: str | None) -> BrowserlessClient:
        """Set the footer template; footer display follows automatically."""
        return self._update(footer=footer)

    def set_width(self, width: str | None) -> BrowserlessClient:
        """Set the paper width; the service lets ``format`` take precedence."""
        return self._update(width=width)

    def set_height(self, height: str | None) -> BrowserlessClient:
        """Set the paper height; the service lets ``format`` take precedence."""
        return self._update(height=height)

    def set_prefer_css_page_size(self, prefer: bool | None) -> BrowserlessClient:
        """Set whether ``@page`` CSS rules win over width, height and format."""
        return self._update(prefer_css_page_size=prefer)

    def set_landscape(self, landscape: bool | None) -> BrowserlessClient:
        return self._update(landscape=landscape)

    def set_safe_mode(self, safe_mode: bool) -> BrowserlessClient:
        """Ask the service to render in safe mode (slower, handles huge pages)."""
        return self._update(safe_mode=safe_mode)

    def set_rotation(self, rotate: int | None) -> BrowserlessClient:
        """Set the number of degrees to rotate the document by."""
        return self._update(rotate=rotate)

    def set_timeout(self, milliseconds: int | None) -> BrowserlessClient:
        """Set the navigation timeout the service applies, in milliseconds."""
        return self._update(timeout=milliseconds)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def get_formatted_options(self) -> dict[str, Any]:
        """Return the request document minus the ``html``/``url`` target."""
        return build_options_payload(self._options)

    def render_content(self, content: str) -> bytes:
        """Render a string of HTML to a PDF.

        Parameters
        ----------
        content : str
            HTML document to render

        Returns
        -------
        bytes
            PDF document returned by the service

        Raises
        ------
        EncodingError
            If the request cannot be encoded as JSON
        ApiError
            If the request fails or the service answers with an error status

        """
        return self._render(RenderTarget.from_html(content))

    def render_url(self, url: str) -> bytes:
        """Render the page at ``url`` to a PDF.

        Raises
        ------
        EncodingError
            If the request cannot be encoded as JSON
        ApiError
            If the request fails or the service answers with an error status

        """
        return self._render(RenderTarget.from_url(url))

    def render_file(self, path: Union[str, Path]) -> bytes:
        """Read a local HTML file and render its content to a PDF.

        Raises
        ------
        FileNotFoundError
            If the file does not exist
        FileAccessError
            If the file cannot be read as UTF-8 text
        EncodingError
            If the request cannot be encoded as JSON
        ApiError
            If the request fails or the service answers with an error status

        """
        logger.debug("Reading %s for rendering", path)
        return self.render_content(read_text_file(path))

    def _render(self, target: RenderTarget) -> bytes:
        payload = assemble_payload(self._options, target)
        body = encode_payload(payload)
        return self._post(body, target)

    def _get_http_client(self) -> httpx.Client:
        if self._http_client is None:
            self._http_client = create_http_client(
                timeout=self._connection.request_timeout, user_agent=self._connection.user_agent
            )
        return self._http_client

    def _redact(self, message: str) -> str:
        """Mask the API key in ``message``, raw or as it appears in an encoded URL."""
        if not self.api_key:
            return message
        # httpx percent-encodes the key in the query string
        encoded = str(httpx.QueryParams({API_KEY_QUERY_PARAM: self.api_key})).split("=", 1)[1]
        for form in sorted({self.api_key, encoded, quote(self.api_key, safe="")}, key=len, reverse=True):
            message = message.replace(form, "***")
        return message

    def _post(self, body: bytes, target: RenderTarget) -> bytes:
        if is_network_disabled():
            raise ApiError(f"Network access is globally disabled via {ENV_DISABLE_NETWORK} environment variable")

        url = self._connection.pdf_url
        logger.debug(f"Posting {target.kind} render request to {url}")

        try:
            response = self._get_http_client().post(
                url,
                content=body,
                headers={"Content-Type": JSON_CONTENT_TYPE},
                params=self._connection.query_params,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ApiError(
                f"Failed to render PDF: {self._redact(str(e))}",
                status_code=e.response.status_code,
                original_error=e,
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise ApiError(f"Failed to render PDF: {self._redact(str(e))}", original_error=e) from e

        content = response.content
        logger.info(f"Rendered PDF from {target.kind}: {len(content)} bytes")
        return content

    # ------------------------------------------------------------------
    # Resource management
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_http_client and self._http_client is not None:
            self._http_client.close()
            self._http_client = None

    def __enter__(self) -> BrowserlessClient:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()


class SelfHostedBrowserlessClient(BrowserlessClient):
    """Client for a self-hosted Browserless instance.

    Identical to ``BrowserlessClient`` except that the service URL is
    required and the API key is optional.

    Parameters
    ----------
    api_url : str
        Base URL of the self-hosted service, e.g. ``http://localhost:3000``
    api_key : str, optional
        API key, if the instance is configured with one
    http_client : httpx.Client, optional
        Transport to use
    options : PdfOptions, optional
        Initial rendering options

    """

    def __init__(
        self,
        api_url: str,
        api_key: str | None = None,
        http_client: httpx.Client | None = None,
        options: PdfOptions | None = None,
    ):
        """Initialize the client for a self-hosted instance."""
        super().__init__(http_client=http_client, api_key=api_key, api_url=api_url, options=options)
