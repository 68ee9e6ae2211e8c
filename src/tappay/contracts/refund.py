"""
Refund contracts.

More details in: https://docs.tappaysdk.com/tutorial/zh/back.html#refund-api
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from .base import TapPayParams, TapPayResponse


class RefundParams(TapPayParams):
    rec_trade_id: str = ""
    bank_refund_id: Optional[str] = None
    # Leave unset to refund the full transaction amount.
    amount: Optional[int] = None
    additional_data: Optional[Dict[str, Any]] = None


class RefundResponse(TapPayResponse):
    refund_id: str = ""
    refund_amount: int = 0
    is_captured: bool = False
    bank_result_code: str = ""
    bank_result_msg: str = ""
    currency: str = ""
