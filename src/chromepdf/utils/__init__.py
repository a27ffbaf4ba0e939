#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/chromepdf/utils/__init__.py
"""Utility modules for chromepdf package.

This package contains the HTTP client factory and the local file reader used
by the rendering client.
"""

from chromepdf.utils.http import create_http_client, is_network_disabled
from chromepdf.utils.io_utils import read_text_file

__all__ = [
    "create_http_client",
    "is_network_disabled",
    "read_text_file",
]
