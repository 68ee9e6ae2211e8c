"""Pytest fixtures for the TapPay client tests."""

import json
import os
import time

import httpx
import pytest
from dotenv import load_dotenv

from tappay import (
    SANDBOX_API_URL,
    PaymentParamsCardholder,
    PaymentPrimeParams,
    TapPayClient,
)

load_dotenv()

TEST_PARTNER_KEY = "partner_test_key"

# Sandbox test prime accepted by the GlobalTesting_CTBC merchant.
SANDBOX_TEST_PRIME = "test_3a2fb2b7e892b914a03c95dd4dd5dc7970c908df67a49527c0a648b2bc9"
SANDBOX_MERCHANT_ID = "GlobalTesting_CTBC"


class RecordingTransport:
    """Replies with canned JSON and keeps every request it saw."""

    def __init__(self, body=None, status_code=200):
        self.body = body if body is not None else {"status": 0, "msg": "Success"}
        self.status_code = status_code
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.body, (bytes, str)):
            return httpx.Response(self.status_code, content=self.body)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last_body(self):
        return json.loads(self.requests[-1].content)


@pytest.fixture
def make_client(monkeypatch):
    """Build a TapPayClient whose HTTP traffic goes to a RecordingTransport."""
    monkeypatch.delenv("TAPPAY_SERVER", raising=False)

    def _make(body=None, status_code=200, server="https://sandbox.tappaysdk.com/"):
        transport = RecordingTransport(body=body, status_code=status_code)
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(transport), timeout=30)
        client = TapPayClient(TEST_PARTNER_KEY, server=server, http_client=http_client)
        return client, transport

    return _make


@pytest.fixture
def sandbox_client():
    """Live sandbox client; skipped unless TAPPAY_SANDBOX_PARTNER_KEY is set."""
    partner_key = os.getenv("TAPPAY_SANDBOX_PARTNER_KEY", "")
    if not partner_key:
        pytest.skip("TAPPAY_SANDBOX_PARTNER_KEY is not configured")
    return TapPayClient(partner_key, server=SANDBOX_API_URL)


@pytest.fixture
def sandbox_payment_params():
    """Factory for a sandbox charge that the test merchant always accepts."""

    def _params(amount: int = 100) -> PaymentPrimeParams:
        return PaymentPrimeParams(
            prime=SANDBOX_TEST_PRIME,
            merchant_id=SANDBOX_MERCHANT_ID,
            amount=amount,
            order_number=f"tappay-py-{time.time_ns()}",
            details="test-tappay-py-package",
            cardholder=PaymentParamsCardholder(
                phone_number="0912345678",
                name="tappay-py",
                email="tappaypy@example.com",
            ),
            remember=False,
        )

    return _params
