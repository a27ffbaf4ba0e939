#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for chromepdf render requests.

This module provides dataclass-based options for the rendering client.
Options are frozen; use ``create_updated`` to derive a modified copy.
"""

from __future__ import annotations

from chromepdf.options.base import CloneFrozenMixin
from chromepdf.options.connection import ConnectionOptions
from chromepdf.options.margin import MARGIN_SIDES, MarginOptions
from chromepdf.options.pdf import PdfOptions

__all__ = [
    "CloneFrozenMixin",
    "ConnectionOptions",
    "MARGIN_SIDES",
    "MarginOptions",
    "PdfOptions",
]
