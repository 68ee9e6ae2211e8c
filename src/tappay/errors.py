"""
Errors raised by the TapPay client.

Only local failures are raised. A request the server rejects still decodes
into a response whose non-zero ``status`` tells the caller what went wrong.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class TapPayError(ValueError):
    def __init__(self, message: str, *, payload: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.payload = payload or {}


class ConfigurationError(TapPayError):
    """The client could not be built from the supplied options or environment."""


class MarshalError(TapPayError):
    """Request parameters could not be turned into a JSON body."""


class TransportError(TapPayError):
    """The request never produced a readable response body."""


class ResponseDecodeError(TapPayError):
    def __init__(self, message: str, *, raw: bytes = b"", payload: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, payload=payload)
        self.raw = raw
