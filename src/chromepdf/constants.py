#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for chromepdf library.

This module centralizes the wire-level constants, default option values and
environment variable names used across the chromepdf library.

Constants are organized by category:
1. Type Definitions - Literal types used by option fields
2. Service Endpoint - Remote rendering service location and wire policy
3. PDF Option Defaults - Defaults for the rendering option model
4. Connection Defaults - Local HTTP client settings
5. Environment Variables - Names read by the configuration layer
"""

from __future__ import annotations

from typing import Literal, get_args

# =============================================================================
# Type Definitions
# =============================================================================

# Navigation lifecycle events understood by the headless browser
WaitUntilEvent = Literal["load", "domcontentloaded", "networkidle0", "networkidle2"]

# Media types the page can be emulated with
EmulatedMedia = Literal["print", "screen"]

# Render target kinds, exactly one per request
RenderTargetKind = Literal["html", "url"]

# =============================================================================
# Service Endpoint
# =============================================================================

DEFAULT_API_URL = "https://chrome.browserless.io"

# Canonical PDF endpoint path, appended to the API URL
PDF_ENDPOINT = "/chrome/pdf"

# Query parameter carrying the API key
API_KEY_QUERY_PARAM = "token"

# printBackground is only sent when it deviates from its default (True).
# Set to True to always send it explicitly.
ALWAYS_EMIT_PRINT_BACKGROUND = False

JSON_CONTENT_TYPE = "application/json"

# =============================================================================
# PDF Option Defaults
# =============================================================================

DEFAULT_PAGE_FORMAT = "A4"
DEFAULT_PRINT_BACKGROUND = True
DEFAULT_SAFE_MODE = False

WAIT_UNTIL_CHOICES: tuple[str, ...] = get_args(WaitUntilEvent)
EMULATE_MEDIA_CHOICES: tuple[str, ...] = get_args(EmulatedMedia)

# =============================================================================
# Connection Defaults
# =============================================================================

DEFAULT_REQUEST_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "chromepdf-client/1.0"

# =============================================================================
# Environment Variables
# =============================================================================

ENV_API_KEY = "CHROMEPDF_API_KEY"
ENV_API_URL = "CHROMEPDF_API_URL"
ENV_REQUEST_TIMEOUT = "CHROMEPDF_TIMEOUT"
ENV_USER_AGENT = "CHROMEPDF_USER_AGENT"
ENV_CONFIG_PATH = "CHROMEPDF_CONFIG"
ENV_DISABLE_NETWORK = "CHROMEPDF_DISABLE_NETWORK"

CONFIG_FILENAMES = [".chromepdf.toml", ".chromepdf.yaml", ".chromepdf.yml", ".chromepdf.json"]
PYPROJECT_TOOL_SECTION = "chromepdf"
