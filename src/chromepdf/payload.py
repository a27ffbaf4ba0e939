#  Copyright (c) 2025 Tom Villani, Ph.D.
"""JSON payload assembly for the remote PDF endpoint.

This module turns a ``PdfOptions`` snapshot into the nested request document
expected by the rendering service. Options are included selectively: unset
values are omitted, margins and navigation settings are grouped, and
``printBackground`` follows the policy in
``chromepdf.constants.ALWAYS_EMIT_PRINT_BACKGROUND``.

Document layout
---------------
::

    {
        "options": {"format": ..., "margin": {...}, ...},
        "safeMode": false,
        "gotoOptions": {"waitUntil": ..., "timeout": ...},
        "rotate": ...,
        "emulateMedia": ...,
        "html" | "url": ...
    }

"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

from chromepdf.constants import ALWAYS_EMIT_PRINT_BACKGROUND, RenderTargetKind
from chromepdf.exceptions import EncodingError, ValidationError
from chromepdf.options.pdf import PdfOptions

logger = logging.getLogger(__name__)

# Optional page options copied as-is when set: (field name, wire key)
_OPTIONAL_PAGE_KEYS = (
    ("landscape", "landscape"),
    ("page_ranges", "pageRanges"),
    ("prefer_css_page_size", "preferCSSPageSize"),
    ("scale", "scale"),
    ("width", "width"),
    ("height", "height"),
)


@dataclass(frozen=True)
class RenderTarget:
    """What the service should render: inline HTML or a remote URL.

    Exactly one of ``html`` and ``url`` must be set.

    Parameters
    ----------
    html : str or None, default None
        HTML document to render
    url : str or None, default None
        Address of the page to render

    Raises
    ------
    ValidationError
        If neither or both of ``html`` and ``url`` are given

    """

    html: str | None = None
    url: str | None = None

    def __post_init__(self) -> None:
        if (self.html is None) == (self.url is None):
            raise ValidationError(
                "Exactly one of 'html' or 'url' must be provided as render target",
                parameter_name="target",
                parameter_value={"html": self.html, "url": self.url},
            )

    @classmethod
    def from_html(cls, content: str) -> RenderTarget:
        return cls(html=content)

    @classmethod
    def from_url(cls, url: str) -> RenderTarget:
        return cls(url=url)

    @property
    def kind(self) -> RenderTargetKind:
        return "html" if self.html is not None else "url"

    def as_dict(self) -> dict[str, str]:
        if self.html is not None:
            return {"html": self.html}
        return {"url": self.url}  # type: ignore[dict-item]


def build_page_options(options: PdfOptions) -> dict[str, Any]:
    """Build the nested ``options`` object of the request.

    Parameters
    ----------
    options : PdfOptions
        Options snapshot to read

    Returns
    -------
    dict[str, Any]
        Page options keyed by their wire names

    """
    page: dict[str, Any] = {"format": options.format}

    if options.display_header_footer:
        page["displayHeaderFooter"] = True
    if options.footer is not None:
        page["footerTemplate"] = options.footer
    if options.header is not None:
        page["headerTemplate"] = options.header

    margin = options.margin.as_dict()
    if margin:
        page["margin"] = margin

    if ALWAYS_EMIT_PRINT_BACKGROUND or not options.print_background:
        page["printBackground"] = options.print_background

    for field_name, wire_key in _OPTIONAL_PAGE_KEYS:
        value = getattr(options, field_name)
        if value is not None:
            page[wire_key] = value

    return page


def build_goto_options(options: PdfOptions) -> dict[str, Any]:
    """Build the ``gotoOptions`` object; empty when nothing is set."""
    goto: dict[str, Any] = {}
    if options.wait_until is not None:
        goto["waitUntil"] = options.wait_until
    if options.timeout is not None:
        goto["timeout"] = options.timeout
    return goto


def build_options_payload(options: PdfOptions) -> dict[str, Any]:
    """Build the request document minus the ``html``/``url`` render target.

    Parameters
    ----------
    options : PdfOptions
        Options snapshot to read; it is never modified

    Returns
    -------
    dict[str, Any]
        Request document without render target

    """
    payload: dict[str, Any] = {
        "options": build_page_options(options),
        "safeMode": options.safe_mode,
    }

    goto = build_goto_options(options)
    if goto:
        payload["gotoOptions"] = goto

    if options.rotate is not None:
        payload["rotate"] = options.rotate
    if options.emulate_media is not None:
        payload["emulateMedia"] = options.emulate_media

    return payload


def assemble_payload(options: PdfOptions, target: RenderTarget) -> dict[str, Any]:
    """Assemble the complete request document for a render target.

    Parameters
    ----------
    options : PdfOptions
        Options snapshot to read
    target : RenderTarget
        HTML content or URL to render, merged into the document last

    Returns
    -------
    dict[str, Any]
        Complete request document

    Examples
    --------
    >>> assemble_payload(PdfOptions(), RenderTarget.from_html("<p>hi</p>"))
    {'options': {'format': 'A4'}, 'safeMode': False, 'html': '<p>hi</p>'}

    """
    payload = build_options_payload(options)
    payload.update(target.as_dict())
    return payload


def encode_payload(payload: dict[str, Any]) -> bytes:
    """Serialize a request document to UTF-8 JSON bytes.

    Parameters
    ----------
    payload : dict[str, Any]
        Request document

    Returns
    -------
    bytes
        Encoded JSON body

    Raises
    ------
    EncodingError
        If the document holds values JSON cannot represent (non-finite
        floats, non-JSON types) or text that is not valid Unicode (lone
        surrogates)

    """
    try:
        body = json.dumps(payload, ensure_ascii=False, allow_nan=False).encode("utf-8")
    except (TypeError, ValueError) as e:
        # UnicodeEncodeError is a ValueError
        raise EncodingError(f"Failed to encode JSON data: {e}", original_error=e) from e

    logger.debug("Encoded render payload: %d bytes, keys=%s", len(body), sorted(payload))
    return body
