"""
Record query contracts.

Request and response shapes for the transaction record query API.
More details in: https://docs.tappaysdk.com/tutorial/zh/back.html#record-api

The nested record types here are shared with the pay-by-prime response,
which reports the same card, instalment, redeem and merchant reference
blocks for a single transaction.
"""

from __future__ import annotations

from enum import IntEnum
from typing import ClassVar, FrozenSet, List, Optional

from pydantic import Field

from .base import OmitEmptyParams, TapPayModel, TapPayResponse


class RecordStatus(IntEnum):
    ERROR = -1
    AUTH = 0
    OK = 1
    PARTIAL_REFUNDED = 2
    REFUNDED = 3
    PENDING = 4
    CANCEL = 5


# ---------------------------------------------------------------------------
# Query parameters
# ---------------------------------------------------------------------------


class RecordFilterTime(OmitEmptyParams):
    """Transaction time range, in epoch milliseconds."""

    start_time: Optional[int] = None
    end_time: Optional[int] = None


class RecordFilterAmount(OmitEmptyParams):
    upper_limit: Optional[int] = None
    lower_limit: Optional[int] = None


class RecordFilterCardholder(OmitEmptyParams):
    phone_number: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None


class RecordFilters(OmitEmptyParams):
    # RecordStatus.AUTH is 0 and still a meaningful filter
    keep_zero_fields: ClassVar[FrozenSet[str]] = frozenset({"record_status"})

    time: Optional[RecordFilterTime] = None
    amount: Optional[RecordFilterAmount] = None
    cardholder: Optional[RecordFilterCardholder] = None
    merchant_id: Optional[List[str]] = None
    record_status: Optional[int] = None
    rec_trade_id: Optional[str] = None
    order_number: Optional[str] = None
    bank_transaction_id: Optional[str] = None
    currency: Optional[str] = None


class RecordSort(OmitEmptyParams):
    """Sort by ``time`` or ``amount``, ascending unless is_descending."""

    attribute: Optional[str] = None
    is_descending: Optional[bool] = None


class RecordParams(OmitEmptyParams):
    records_per_page: Optional[int] = None
    page: Optional[int] = None
    filters: Optional[RecordFilters] = None
    order_by: Optional[RecordSort] = None


# ---------------------------------------------------------------------------
# Trade record
# ---------------------------------------------------------------------------


class RecordCardholder(TapPayModel):
    name: str = ""
    phone_number: str = ""
    email: str = ""


class RecordMerchandiseDetails(TapPayModel):
    no_rebate_amount: int = 0


class RecordMerchantReferenceInfo(TapPayModel):
    affiliate_codes: List[str] = Field(default_factory=list)


class RecordEInvoiceCarrier(TapPayModel):
    type: int = 0
    number: str = ""
    donation: bool = False
    donation_id: str = ""


class RecordInstalmentInfo(TapPayModel):
    number_of_instalments: int = 0
    first_payment: int = 0
    each_payment: int = 0


class RecordPayInfo(TapPayModel):
    method: str = ""
    masked_credit_card_number: str = ""
    point: int = 0
    discount: int = 0
    credit_card: int = 0
    balance: int = 0
    bank_account: int = 0


class RecordRedeemInfo(TapPayModel):
    used_point: str = ""
    balance: str = ""
    offset_amount: str = ""
    due_amount: str = ""


class RecordCardInfo(TapPayModel):
    bin_code: str = ""
    last_four: str = ""
    issuer: str = ""
    issuer_zh_tw: str = ""
    bank_id: str = ""
    funding: int = 0
    type: int = 0
    level: str = ""
    country: str = ""
    country_code: str = ""


class Record(TapPayModel):
    """A single trade record, see https://docs.tappaysdk.com/tutorial/zh/reference.html#trade_records"""

    rec_trade_id: str = ""
    auth_code: str = ""
    merchant_id: str = ""
    merchant_name: str = ""
    app_name: str = ""
    time: int = 0
    amount: int = 0
    refunded_amount: int = 0
    record_status: int = RecordStatus.AUTH
    bank_transaction_id: str = ""
    cap_millis: int = 0
    original_amount: int = 0
    bank_transaction_start_millis: int = 0
    bank_transaction_end_millis: int = 0
    is_captured: bool = False
    bank_result_code: str = ""
    bank_result_msg: str = ""
    partial_card_number: str = ""
    payment_method: str = ""
    details: str = ""
    cardholder: RecordCardholder = Field(default_factory=RecordCardholder)
    merchandise_details: RecordMerchandiseDetails = Field(default_factory=RecordMerchandiseDetails)
    currency: str = ""
    merchant_reference_info: RecordMerchantReferenceInfo = Field(default_factory=RecordMerchantReferenceInfo)
    e_invoice_carrier: RecordEInvoiceCarrier = Field(default_factory=RecordEInvoiceCarrier)
    three_domain_secure: bool = False
    pay_by_instalment: bool = False
    instalment_info: RecordInstalmentInfo = Field(default_factory=RecordInstalmentInfo)
    order_number: str = ""
    pay_info: RecordPayInfo = Field(default_factory=RecordPayInfo)
    pay_by_redeem: bool = False
    redeem_info: RecordRedeemInfo = Field(default_factory=RecordRedeemInfo)
    card_identifier: str = ""
    card_info: RecordCardInfo = Field(default_factory=RecordCardInfo)


class RecordResponse(TapPayResponse):
    records_per_page: int = 0
    page: int = 0
    total_page_count: int = 0
    number_of_transactions: int = 0
    # Server order, as requested by RecordParams.order_by.
    trade_records: List[Record] = Field(default_factory=list)
