#  Copyright (c) 2025 Tom Villani, Ph.D.

# chromepdf/options/pdf.py
"""Rendering options for remote PDF generation.

This module defines ``PdfOptions``, the immutable snapshot of every option
that shapes a render request: paper format and size, margins, header and
footer templates, scaling, media emulation, rotation, safe mode and
navigation wait conditions.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Mapping

from chromepdf.constants import (
    DEFAULT_PAGE_FORMAT,
    DEFAULT_PRINT_BACKGROUND,
    DEFAULT_SAFE_MODE,
    EMULATE_MEDIA_CHOICES,
    WAIT_UNTIL_CHOICES,
    EmulatedMedia,
    WaitUntilEvent,
)
from chromepdf.options.base import CloneFrozenMixin
from chromepdf.options.margin import MarginOptions


@dataclass(frozen=True)
class PdfOptions(CloneFrozenMixin):
    """Configuration options for a remote PDF render.

    None means "not set": the option is left out of the request and the
    rendering service applies its own default.

    Parameters
    ----------
    format : str, default "A4"
        Paper size keyword (A4, Letter, Legal, ...). Always sent.
    margin : MarginOptions, default MarginOptions()
        Page margins as CSS length strings; unset sides are omitted.
    print_background : bool, default True
        Whether background graphics are printed.
    wait_until : str or None, default None
        Navigation lifecycle event to wait for before rendering.
    page_ranges : str or None, default None
        Pages to include, e.g. ``"1,2,5-7"``.
    emulate_media : str or None, default None
        Media type to emulate, ``"print"`` or ``"screen"``.
    scale : float or None, default None
        Rendering scale factor.
    header : str or None, default None
        HTML template for the page header.
    footer : str or None, default None
        HTML template for the page footer.
    prefer_css_page_size : bool or None, default None
        Whether ``@page`` CSS declarations win over width/height/format.
    landscape : bool or None, default None
        Paper orientation.
    width : str or None, default None
        Paper width, the service lets ``format`` take precedence.
    height : str or None, default None
        Paper height, the service lets ``format`` take precedence.
    safe_mode : bool, default False
        Ask the service to render in its slower, more robust safe mode.
    rotate : int or None, default None
        Degrees to rotate the resulting document by.
    timeout : int or None, default None
        Navigation timeout in milliseconds, enforced by the service.

    Notes
    -----
    ``display_header_footer`` is not a field. It is derived from ``header``
    and ``footer`` so it can never disagree with them.

    """

    format: str = field(
        default=DEFAULT_PAGE_FORMAT,
        metadata={"help": "Paper format keyword (A4, Letter, Legal, ...)", "importance": "core"},
    )
    margin: MarginOptions = field(
        default_factory=MarginOptions,
        metadata={"help": "Page margins, 1-4 CSS lengths in shorthand order", "importance": "core"},
    )
    print_background: bool = field(
        default=DEFAULT_PRINT_BACKGROUND,
        metadata={"help": "Print background graphics", "importance": "core"},
    )
    wait_until: WaitUntilEvent | None = field(
        default=None,
        metadata={
            "help": "Navigation event to wait for before rendering",
            "choices": list(WAIT_UNTIL_CHOICES),
            "importance": "advanced",
        },
    )
    page_ranges: str | None = field(
        default=None,
        metadata={"help": "Page ranges to render, e.g. '1,2,5-7'", "importance": "core"},
    )
    emulate_media: EmulatedMedia | None = field(
        default=None,
        metadata={"help": "Media type to emulate", "choices": list(EMULATE_MEDIA_CHOICES), "importance": "advanced"},
    )
    scale: float | None = field(
        default=None,
        metadata={"help": "Rendering scale factor", "type": float, "importance": "advanced"},
    )
    header: str | None = field(
        default=None,
        metadata={"help": "HTML template for the page header", "importance": "core"},
    )
    footer: str | None = field(
        default=None,
        metadata={"help": "HTML template for the page footer", "importance": "core"},
    )
    prefer_css_page_size: bool | None = field(
        default=None,
        metadata={"help": "Let @page CSS rules override width, height and format", "importance": "advanced"},
    )
    landscape: bool | None = field(
        default=None,
        metadata={"help": "Use landscape orientation", "importance": "core"},
    )
    width: str | None = field(
        default=None,
        metadata={"help": "Paper width (format takes precedence on the service)", "importance": "advanced"},
    )
    height: str | None = field(
        default=None,
        metadata={"help": "Paper height (format takes precedence on the service)", "importance": "advanced"},
    )
    safe_mode: bool = field(
        default=DEFAULT_SAFE_MODE,
        metadata={"help": "Render in the service's safe mode", "importance": "advanced"},
    )
    rotate: int | None = field(
        default=None,
        metadata={"help": "Rotate the document by this many degrees", "type": int, "importance": "advanced"},
    )
    timeout: int | None = field(
        default=None,
        metadata={"help": "Navigation timeout in milliseconds", "type": int, "importance": "advanced"},
    )

    @property
    def display_header_footer(self) -> bool:
        """Whether header/footer templates are displayed.

        True exactly when a header or a footer template is set.
        """
        return self.header is not None or self.footer is not None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PdfOptions:
        """Build options from a configuration mapping keyed by field name.

        Parameters
        ----------
        data : Mapping[str, Any]
            Field values; ``margin`` may be a string, a list of 1-4 values,
            a mapping of sides or a ``MarginOptions``.
            None for ``format``, ``margin``, ``print_background`` or
            ``safe_mode`` falls back to the default.

        Returns
        -------
        PdfOptions
            New options instance

        Raises
        ------
        ValidationError
            If ``data`` contains keys that are not option fields or an
            unusable margin value

        """
        cls._check_known_keys(data)
        # None means "use the default" for fields the wire always carries
        required = {f.name for f in fields(cls) if f.default is not None}
        values = {key: value for key, value in data.items() if value is not None or key not in required}
        if "margin" in values:
            values["margin"] = MarginOptions.from_value(values["margin"])
        return cls(**values)
