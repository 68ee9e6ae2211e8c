"""
Pay-by-prime contracts.

A prime is a one-time token standing in for the card details the frontend
SDK collected. Charging it is the only way this client moves money in.
More details in: https://docs.tappaysdk.com/tutorial/zh/back.html#pay-by-prime-api
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import Field

from .base import OmitEmptyParams, TapPayModel, TapPayParams, TapPayResponse
from .record import (
    RecordCardInfo,
    RecordInstalmentInfo,
    RecordMerchandiseDetails,
    RecordMerchantReferenceInfo,
    RecordRedeemInfo,
)


# ---------------------------------------------------------------------------
# Request
# ---------------------------------------------------------------------------


class PaymentParamsCardholder(TapPayParams):
    phone_number: str = ""
    name: str = ""
    email: str = ""
    zip_code: Optional[str] = None
    address: Optional[str] = None
    national_id: Optional[str] = None
    member_id: Optional[str] = None


class PaymentParamsResultUrl(TapPayParams):
    """Where 3-D Secure and redirect-based payments send the buyer afterwards."""

    frontend_redirect_url: str = ""
    backend_notify_url: str = ""


class PaymentParamsCardholderVerify(OmitEmptyParams):
    phone_number: Optional[bool] = None
    national_id: Optional[bool] = None


class PaymentPrimeParams(TapPayParams):
    prime: str = ""
    merchant_id: str = ""
    merchant_group_id: Optional[str] = None
    amount: int = 0
    merchandise_details: Optional[RecordMerchandiseDetails] = None
    currency: Optional[str] = None
    order_number: Optional[str] = None
    bank_transaction_id: Optional[str] = None
    details: str = ""
    cardholder: PaymentParamsCardholder = Field(default_factory=PaymentParamsCardholder)
    cardholder_verify: Optional[PaymentParamsCardholderVerify] = None
    instalment: Optional[int] = None
    delay_capture_in_days: Optional[int] = None
    three_domain_secure: Optional[bool] = None
    result_url: Optional[PaymentParamsResultUrl] = None
    remember: Optional[bool] = None
    redeem: Optional[bool] = None
    additional_data: Optional[Dict[str, Any]] = None
    event_code: Optional[str] = None
    product_image_url: Optional[str] = None


# ---------------------------------------------------------------------------
# Response
# ---------------------------------------------------------------------------


class PaymentCardSecret(TapPayModel):
    """Returned only when the request asked to remember the card."""

    card_token: str = ""
    card_key: str = ""


class PaymentCardInfo(RecordCardInfo):
    expiry_date: str = ""


class PaymentBankTransactionTime(TapPayModel):
    start_time_millis: str = ""
    end_time_millis: str = ""


class PaymentRedeemExtraInfo(TapPayModel):
    redeem_used: str = ""
    credit_amt: str = ""
    redeem_balance: str = ""
    redeem_type: str = ""


class PaymentRedeemInfo(RecordRedeemInfo):
    extra_info: PaymentRedeemExtraInfo = Field(default_factory=PaymentRedeemExtraInfo)


class PaymentPrimeResponse(TapPayResponse):
    rec_trade_id: str = ""
    bank_transaction_id: str = ""
    auth_code: str = ""
    card_secret: PaymentCardSecret = Field(default_factory=PaymentCardSecret)
    amount: int = 0
    currency: str = ""
    card_info: PaymentCardInfo = Field(default_factory=PaymentCardInfo)
    order_number: str = ""
    acquirer: str = ""
    transaction_time_millis: int = 0
    bank_transaction_time: PaymentBankTransactionTime = Field(default_factory=PaymentBankTransactionTime)
    bank_result_code: str = ""
    bank_result_msg: str = ""
    payment_url: str = ""
    instalment_info: RecordInstalmentInfo = Field(default_factory=RecordInstalmentInfo)
    redeem_info: PaymentRedeemInfo = Field(default_factory=PaymentRedeemInfo)
    card_identifier: str = ""
    merchant_reference_info: RecordMerchantReferenceInfo = Field(default_factory=RecordMerchantReferenceInfo)
    event_code: str = ""
