"""
Client configuration.

Resolves the server the client talks to and the request timeout, then
validates both before any request is built.

Resolution order for the server, highest precedence first:
1. the ``server`` argument passed to the client
2. the ``TAPPAY_SERVER`` environment variable
3. ``API_URL`` (production)
"""

from __future__ import annotations

import logging
import os
from typing import Optional
from urllib.parse import urlsplit, urlunsplit

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from tappay.errors import ConfigurationError

logger = logging.getLogger(__name__)

# TapPay server for testing.
SANDBOX_API_URL = "https://sandbox.tappaysdk.com/"

# TapPay server for production transactions.
API_URL = "https://prod.tappaysdk.com/"

SERVER_ENV_VAR = "TAPPAY_SERVER"

# See https://docs.tappaysdk.com/tutorial/zh/back.html
DEFAULT_TIMEOUT_SECONDS = 30.0


class ClientConfig(BaseModel):
    """Validated settings for a TapPayClient."""

    model_config = ConfigDict(frozen=True)

    partner_key: str
    server: str = API_URL
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)

    @field_validator("server")
    @classmethod
    def _absolute_url(cls, value: str) -> str:
        try:
            parts = urlsplit(value.strip())
            # raises on a non-numeric or out-of-range port
            parts.port
        except ValueError as exc:
            raise ValueError(f"supplied server {value!r} is not valid: {exc}") from exc
        if not parts.scheme or not parts.netloc:
            raise ValueError(f"supplied server {value!r} is not valid: an absolute URL is required")
        return urlunsplit(parts)


def resolve_server(server: Optional[str] = None) -> str:
    if server is not None:
        return server
    from_env = os.getenv(SERVER_ENV_VAR, "")
    if from_env:
        return from_env
    return API_URL


def load_client_config(
    partner_key: str,
    server: Optional[str] = None,
    timeout_seconds: Optional[float] = None,
) -> ClientConfig:
    """
    Build and validate a ClientConfig.

    Raises:
        ConfigurationError: If the resolved server is not an absolute URL or
            the timeout is not positive.
    """
    payload = {"partner_key": partner_key, "server": resolve_server(server)}
    if timeout_seconds is not None:
        payload["timeout_seconds"] = timeout_seconds

    try:
        config = ClientConfig(**payload)
    except ValidationError as exc:
        errors = "; ".join(str(err.get("msg", "")) for err in exc.errors())
        raise ConfigurationError(
            f"Invalid TapPay client configuration: {errors}",
            payload={"server": payload["server"]},
        ) from exc

    logger.debug("TapPay client configured for %s (timeout=%.1fs)", config.server, config.timeout_seconds)
    return config
