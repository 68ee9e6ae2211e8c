import pytest

from tappay import RefundParams, RefundResponse


def test_refund_params_omit_amount_for_full_refund():
    assert RefundParams(rec_trade_id="D20240101abc").marshal_map() == {"rec_trade_id": "D20240101abc"}


def test_refund_params_with_partial_amount():
    body = RefundParams(rec_trade_id="D20240101abc", amount=40, bank_refund_id="R-1").marshal_map()

    assert body == {"rec_trade_id": "D20240101abc", "amount": 40, "bank_refund_id": "R-1"}


@pytest.mark.asyncio
async def test_refund_decodes_success(make_client):
    client, transport = make_client(
        body={
            "status": 0,
            "msg": "Success",
            "refund_id": "RF20240101abc",
            "refund_amount": 100,
            "is_captured": False,
            "bank_result_code": "",
            "bank_result_msg": "",
            "currency": "TWD",
        }
    )

    resp = await client.refund(RefundParams(rec_trade_id="D20240101abc"))

    assert isinstance(resp, RefundResponse)
    assert resp.status == 0
    assert resp.refund_id == "RF20240101abc"
    assert resp.refund_amount == 100
    assert str(transport.requests[0].url).endswith("/tpc/transaction/refund")
    assert transport.last_body == {"rec_trade_id": "D20240101abc", "partner_key": client.partner_key}


@pytest.mark.asyncio
async def test_refund_invalid_trade_id_is_a_status_not_an_exception(make_client):
    client, _ = make_client(body={"status": 11000, "msg": "Invalid rec_trade_id"})

    resp = await client.refund(RefundParams(rec_trade_id="Invalid_trade_id"))

    assert resp.status == 11000
    assert resp.refund_id == ""


@pytest.mark.integration
@pytest.mark.asyncio
async def test_refund_sandbox_invalid_trade_id(sandbox_client):
    resp = await sandbox_client.refund(RefundParams(rec_trade_id="Invalid_trade_id"))

    assert resp.status == 11000


@pytest.mark.integration
@pytest.mark.asyncio
async def test_refund_sandbox_after_payment(sandbox_client, sandbox_payment_params):
    payment = await sandbox_client.pay_by_prime(sandbox_payment_params())
    assert payment.status == 0, payment.msg

    resp = await sandbox_client.refund(RefundParams(rec_trade_id=payment.rec_trade_id))

    assert resp.status == 0, resp.msg
