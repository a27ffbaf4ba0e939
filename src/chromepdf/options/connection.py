#  Copyright (c) 2025 Tom Villani, Ph.D.

# chromepdf/options/connection.py
"""Connection options for reaching the rendering service."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from chromepdf.constants import (
    API_KEY_QUERY_PARAM,
    DEFAULT_API_URL,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_USER_AGENT,
    PDF_ENDPOINT,
)
from chromepdf.exceptions import ValidationError
from chromepdf.options.base import CloneFrozenMixin


@dataclass(frozen=True)
class ConnectionOptions(CloneFrozenMixin):
    """Where and how to reach the rendering service.

    Parameters
    ----------
    api_key : str or None, default None
        API key, sent as the ``token`` query parameter when set.
    api_url : str, default "https://chrome.browserless.io"
        Base URL of the service; the PDF endpoint path is appended.
    request_timeout : float, default 30.0
        Timeout in seconds for the local HTTP client.
    user_agent : str, default "chromepdf-client/1.0"
        User-Agent header sent with each request.

    """

    api_key: str | None = field(
        default=None,
        metadata={"help": "API key sent as the 'token' query parameter", "importance": "core"},
    )
    api_url: str = field(
        default=DEFAULT_API_URL,
        metadata={"help": "Base URL of the rendering service", "importance": "core"},
    )
    request_timeout: float = field(
        default=DEFAULT_REQUEST_TIMEOUT,
        metadata={"help": "HTTP client timeout in seconds", "type": float, "importance": "advanced"},
    )
    user_agent: str = field(
        default=DEFAULT_USER_AGENT,
        metadata={"help": "User-Agent header for requests", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Normalize the API URL and validate the timeout.

        Raises
        ------
        ValidationError
            If the timeout is not positive or the API URL is empty.

        """
        if not self.api_url:
            raise ValidationError("api_url must not be empty", parameter_name="api_url", parameter_value=self.api_url)
        object.__setattr__(self, "api_url", self.api_url.rstrip("/"))

        if self.request_timeout <= 0:
            raise ValidationError(
                f"request_timeout must be positive, got {self.request_timeout}",
                parameter_name="request_timeout",
                parameter_value=self.request_timeout,
            )

    @property
    def pdf_url(self) -> str:
        """Full URL of the PDF endpoint."""
        return f"{self.api_url}{PDF_ENDPOINT}"

    @property
    def query_params(self) -> dict[str, str]:
        """Query parameters attached to every render request."""
        if self.api_key is None:
            return {}
        return {API_KEY_QUERY_PARAM: self.api_key}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ConnectionOptions:
        """Build connection options from a mapping keyed by field name.

        None values fall back to the field defaults.
        """
        cls._check_known_keys(data)
        values = {key: value for key, value in data.items() if value is not None}
        if "request_timeout" in values:
            try:
                values["request_timeout"] = float(values["request_timeout"])
            except (TypeError, ValueError) as e:
                raise ValidationError(
                    f"request_timeout must be a number, got {values['request_timeout']!r}",
                    parameter_name="request_timeout",
                    parameter_value=values["request_timeout"],
                    original_error=e,
                ) from e
        return cls(**values)
