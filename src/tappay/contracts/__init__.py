"""
Contracts (data models).

This folder defines the request/response shapes for the TapPay backend APIs:
- pay-by-prime (charge a card token)
- transaction record query
- refund

Request models serialize themselves through ``marshal_map()`` so the client
can add the partner key in one place. Response models decode leniently: a
field TapPay leaves out simply keeps its zero value.
"""

from .base import Marshaler, OmitEmptyParams, TapPayModel, TapPayParams, TapPayResponse
from .payment import (
    PaymentBankTransactionTime,
    PaymentCardInfo,
    PaymentCardSecret,
    PaymentParamsCardholder,
    PaymentParamsCardholderVerify,
    PaymentParamsResultUrl,
    PaymentPrimeParams,
    PaymentPrimeResponse,
    PaymentRedeemExtraInfo,
    PaymentRedeemInfo,
)
from .record import (
    Record,
    RecordCardholder,
    RecordCardInfo,
    RecordEInvoiceCarrier,
    RecordFilterAmount,
    RecordFilterCardholder,
    RecordFilters,
    RecordFilterTime,
    RecordInstalmentInfo,
    RecordMerchandiseDetails,
    RecordMerchantReferenceInfo,
    RecordParams,
    RecordPayInfo,
    RecordRedeemInfo,
    RecordResponse,
    RecordSort,
    RecordStatus,
)
from .refund import RefundParams, RefundResponse

__all__ = [
    "Marshaler",
    "OmitEmptyParams",
    "TapPayModel",
    "TapPayParams",
    "TapPayResponse",
    "PaymentBankTransactionTime",
    "PaymentCardInfo",
    "PaymentCardSecret",
    "PaymentParamsCardholder",
    "PaymentParamsCardholderVerify",
    "PaymentParamsResultUrl",
    "PaymentPrimeParams",
    "PaymentPrimeResponse",
    "PaymentRedeemExtraInfo",
    "PaymentRedeemInfo",
    "Record",
    "RecordCardholder",
    "RecordCardInfo",
    "RecordEInvoiceCarrier",
    "RecordFilterAmount",
    "RecordFilterCardholder",
    "RecordFilters",
    "RecordFilterTime",
    "RecordInstalmentInfo",
    "RecordMerchandiseDetails",
    "RecordMerchantReferenceInfo",
    "RecordParams",
    "RecordPayInfo",
    "RecordRedeemInfo",
    "RecordResponse",
    "RecordSort",
    "RecordStatus",
    "RefundParams",
    "RefundResponse",
]
