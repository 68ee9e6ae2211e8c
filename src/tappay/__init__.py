"""
TapPay client library.

    async with TapPayClient(partner_key, server=SANDBOX_API_URL) as client:
        resp = await client.pay_by_prime(PaymentPrimeParams(prime=..., ...))
        if resp.status != 0:
            ...
"""

from .client import SERVICE_PATHS, Service, TapPayClient
from .config import API_URL, SANDBOX_API_URL, SERVER_ENV_VAR, ClientConfig
from .contracts import *  # noqa: F401,F403
from .contracts import __all__ as _contracts_all
from .errors import ConfigurationError, MarshalError, ResponseDecodeError, TapPayError, TransportError

__all__ = [
    "API_URL",
    "SANDBOX_API_URL",
    "SERVER_ENV_VAR",
    "SERVICE_PATHS",
    "ClientConfig",
    "ConfigurationError",
    "MarshalError",
    "ResponseDecodeError",
    "Service",
    "TapPayClient",
    "TapPayError",
    "TransportError",
    *_contracts_all,
]
