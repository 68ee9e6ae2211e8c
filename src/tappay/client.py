"""
TapPay HTTP Client.

Talks to the TapPay backend APIs on behalf of one merchant partner key:
- pay_by_prime(...) charges a card token
- records(...) queries transaction records
- refund(...) refunds a captured transaction

Every request carries the partner key twice, as the ``x-api-key`` header and
as the ``partner_key`` body field. TapPay reports business failures inside a
successful HTTP exchange through a non-zero ``status``, so HTTP status codes
are never interpreted here and the decoded response always reaches the caller.
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Any, Dict, Optional, Type, TypeVar, Union
from urllib.parse import urljoin

import httpx

from tappay.config import load_client_config
from tappay.contracts.base import Marshaler, TapPayResponse
from tappay.contracts.payment import PaymentPrimeParams, PaymentPrimeResponse
from tappay.contracts.record import RecordParams, RecordResponse
from tappay.contracts.refund import RefundParams, RefundResponse
from tappay.errors import MarshalError, TapPayError, TransportError

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=TapPayResponse)


class Service(str, Enum):
    PAY_BY_PRIME = "pay_by_prime"
    RECORD = "record"
    REFUND = "refund"


SERVICE_PATHS: Dict[Service, str] = {
    Service.PAY_BY_PRIME: "/tpc/payment/pay-by-prime",
    Service.RECORD: "/tpc/transaction/query",
    Service.REFUND: "/tpc/transaction/refund",
}


class TapPayClient:
    """
    Client for the TapPay backend APIs.

    Parameters
    ----------
    partner_key : str
        Merchant credential issued by TapPay.
    server : str, optional
        Base URL overriding ``TAPPAY_SERVER`` and the production default.
    http_client : httpx.AsyncClient, optional
        Fully custom transport, shared by every call and closed by aclose().
        When given, its own timeout applies instead of timeout_seconds.
    timeout_seconds : float, optional
        Timeout for the per-request client used when no http_client is
        given. Defaults to 30 seconds.
    """

    def __init__(
        self,
        partner_key: str,
        *,
        server: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout_seconds: Optional[float] = None,
    ) -> None:
        self._config = load_client_config(partner_key, server=server, timeout_seconds=timeout_seconds)
        self._http_client = http_client

    @property
    def partner_key(self) -> str:
        return self._config.partner_key

    @property
    def url(self) -> str:
        return self._config.server

    @property
    def timeout_seconds(self) -> float:
        return self._config.timeout_seconds

    def __repr__(self) -> str:
        return f"TapPayClient(url={self.url!r})"

    async def __aenter__(self) -> "TapPayClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._http_client is not None:
            await self._http_client.aclose()

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def pay_by_prime(
        self, params: PaymentPrimeParams, *, timeout: Optional[float] = None
    ) -> PaymentPrimeResponse:
        """Charge the card behind a prime token."""
        return await self._call(Service.PAY_BY_PRIME, params, PaymentPrimeResponse, timeout)

    async def records(self, params: RecordParams, *, timeout: Optional[float] = None) -> RecordResponse:
        """Query trade records. Records come back in the order TapPay sorted them."""
        return await self._call(Service.RECORD, params, RecordResponse, timeout)

    async def refund(self, params: RefundParams, *, timeout: Optional[float] = None) -> RefundResponse:
        return await self._call(Service.REFUND, params, RefundResponse, timeout)

    async def _call(
        self,
        service: Service,
        params: Marshaler,
        response_type: Type[ResponseT],
        timeout: Optional[float],
    ) -> ResponseT:
        raw = await self.send("POST", service, params, timeout=timeout)
        resp = response_type.from_raw(raw)
        logger.debug("TapPay %s returned status=%s", service.value, resp.status)
        return resp

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    async def send(
        self,
        method: str,
        service: Union[Service, str],
        params: Marshaler,
        *,
        timeout: Optional[float] = None,
    ) -> bytes:
        """
        Issue one request and return the raw response body.

        ``timeout`` bounds the whole exchange on top of the client timeout;
        whichever expires first ends the call with a TransportError.

        Raises:
            MarshalError: If params cannot be serialized.
            TapPayError: If service is not a known TapPay service.
            TransportError: On network failure, invalid URL or timeout.
        """
        try:
            service = Service(service)
        except ValueError as exc:
            raise TapPayError(f"unknown TapPay service {service!r}") from exc

        try:
            if timeout is None:
                return await self._send(method, service, params)
            return await asyncio.wait_for(self._send(method, service, params), timeout)
        except asyncio.TimeoutError as exc:
            raise TransportError(f"TapPay {service.value} request timed out after {timeout}s") from exc

    async def _send(self, method: str, service: Service, params: Marshaler) -> bytes:
        if self._http_client is not None:
            return await self._do(self._http_client, method, service, params)
        async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
            return await self._do(client, method, service, params)

    async def _do(self, client: httpx.AsyncClient, method: str, service: Service, params: Marshaler) -> bytes:
        request = self._new_request(client, method, service, params)
        logger.debug("Sending TapPay %s request to %s", service.value, request.url)
        try:
            response = await client.send(request)
        except httpx.HTTPError as exc:
            raise TransportError(f"TapPay {service.value} request failed: {exc}") from exc
        logger.debug("TapPay %s responded with HTTP %s", service.value, response.status_code)
        return response.content

    def _new_request(
        self, client: httpx.AsyncClient, method: str, service: Service, params: Marshaler
    ) -> httpx.Request:
        """Build the request, injecting the partner key header and body field."""
        path = SERVICE_PATHS[service]
        body = dict(params.marshal_map())
        body["partner_key"] = self.partner_key

        headers = {
            "x-api-key": self.partner_key,
            "Content-Type": "application/json",
        }
        try:
            return client.build_request(method, urljoin(self.url, path), json=body, headers=headers)
        except httpx.InvalidURL as exc:
            raise TransportError(f"cannot create a TapPay request: {exc}") from exc
        except (TypeError, ValueError) as exc:
            raise MarshalError(f"cannot encode TapPay {service.value} body: {exc}") from exc
