"""HTTP client helpers for talking to the rendering service.

Functions
---------
- create_http_client: Create an httpx client for the rendering service
- is_network_disabled: Check the global network kill switch
"""

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/chromepdf/utils/http.py

import logging
import os

import httpx

from chromepdf.constants import DEFAULT_REQUEST_TIMEOUT, DEFAULT_USER_AGENT, ENV_DISABLE_NETWORK, ENV_USER_AGENT

logger = logging.getLogger(__name__)


def _log_request(request: httpx.Request) -> None:
    """Event hook logging outgoing requests without their query string."""
    logger.debug(f"{request.method} {request.url.scheme}://{request.url.host}{request.url.path}")


def _log_response(response: httpx.Response) -> None:
    """Event hook logging response status codes."""
    logger.debug(f"Response {response.status_code} from {response.request.url.path}")


def create_http_client(
    timeout: float = DEFAULT_REQUEST_TIMEOUT,
    user_agent: str | None = None,
) -> httpx.Client:
    """Create an httpx client configured for the rendering service.

    Redirects are not followed: the PDF endpoint answers POST requests
    directly and a redirect would drop the request body.

    Parameters
    ----------
    timeout : float, default 30.0
        Request timeout in seconds
    user_agent : str | None, default None
        User-Agent header; falls back to ``CHROMEPDF_USER_AGENT`` and then
        the library default

    Returns
    -------
    httpx.Client
        Configured HTTP client, owned by the caller

    """
    effective_user_agent = user_agent or os.getenv(ENV_USER_AGENT) or DEFAULT_USER_AGENT
    return httpx.Client(
        timeout=timeout,
        follow_redirects=False,
        event_hooks={"request": [_log_request], "response": [_log_response]},
        headers={"User-Agent": effective_user_agent},
    )


def is_network_disabled() -> bool:
    """Check if network access is globally disabled via environment variable.

    Returns
    -------
    bool
        True if network access should be disabled, False otherwise

    """
    return os.getenv(ENV_DISABLE_NETWORK, "").lower() in ("true", "1", "yes", "on")
