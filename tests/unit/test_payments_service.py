import asyncio

import httpx
import pytest

from storefront import config
from storefront.payments import service
from storefront.payments.exceptions import PaymentConfigError, PaymentInputError, PaystackError
from storefront.payments.schemas import InitializeRequest

PAYSTACK = "https://api.paystack.co"


def _req(amount=100.5):
    return InitializeRequest(
        email="buyer@example.com",
        amount=amount,
        callback_url="https://snuz.ng/order-complete",
        metadata={"source": "snuz.ng"},
    )


def test_require_secret(monkeypatch):
    assert service.require_secret() == "sk_test_secret"
    monkeypatch.setattr(config, "PAYSTACK_SECRET_KEY", "")
    with pytest.raises(PaymentConfigError) as exc:
        service.require_secret()
    assert exc.value.message == "PAYSTACK_SECRET_KEY is not set"

def test_build_initialize_body_converts_to_kobo():
    assert service.build_initialize_body(_req(100.5)) == {
        "email": "buyer@example.com",
        "amount": 10050,
        "currency": "NGN",
        "callback_url": "https://snuz.ng/order-complete",
        "channels": ["card"],
        "metadata": {"source": "snuz.ng"},
    }

def test_initialize_transaction_success(paystack_init_ok):
    result = asyncio.run(service.initialize_transaction(_req()))
    assert result.authorization_url == "https://checkout.paystack.com/abc123"
    assert result.reference == "ref_123"

    (sent,) = paystack_init_ok.calls(f"{PAYSTACK}/transaction/initialize")
    assert sent.headers["authorization"] == "Bearer sk_test_secret"
    assert paystack_init_ok.json_of(sent)["amount"] == 10050

def test_initialize_transaction_propagates_processor_status(upstream):
    upstream.route("POST", f"{PAYSTACK}/transaction/initialize", status_code=401,
                   json_body={"status": False, "message": "Invalid key"})
    with pytest.raises(PaystackError) as exc:
        asyncio.run(service.initialize_transaction(_req()))
    assert exc.value.status_code == 401
    assert exc.value.to_body() == {
        "error": "Paystack initialize failed",
        "details": {"status": False, "message": "Invalid key"},
    }

def test_initialize_transaction_status_false_on_2xx(upstream):
    upstream.route("POST", f"{PAYSTACK}/transaction/initialize", json_body={"status": False})
    with pytest.raises(PaystackError) as exc:
        asyncio.run(service.initialize_transaction(_req()))
    assert exc.value.status_code == 200
    assert exc.value.details == {"status": False}

def test_verify_transaction_non_json_on_2xx_relays_status(upstream):
    upstream.route("GET", f"{PAYSTACK}/transaction/verify/", text="<html>ok</html>")
    with pytest.raises(PaystackError) as exc:
        asyncio.run(service.verify_transaction("ref_123"))
    assert exc.value.status_code == 200
    assert exc.value.details is None

def test_initialize_transaction_network_failure_defaults_to_500(upstream):
    def boom(request):
        raise httpx.ConnectError("connection refused", request=request)
    upstream.route("POST", f"{PAYSTACK}/transaction/initialize", handler=boom)
    with pytest.raises(PaystackError) as exc:
        asyncio.run(service.initialize_transaction(_req()))
    assert exc.value.status_code == 500
    assert exc.value.details is None

def test_verify_transaction_requires_reference(upstream):
    with pytest.raises(PaymentInputError):
        asyncio.run(service.verify_transaction("   "))
    assert upstream.requests == []

def test_verify_transaction_url_encodes_reference(upstream):
    upstream.route("GET", f"{PAYSTACK}/transaction/verify/", json_body={"status": True, "data": {"status": "success"}})
    data = asyncio.run(service.verify_transaction("ref/1 2"))
    assert data == {"status": True, "data": {"status": "success"}}
    (sent,) = upstream.requests
    assert sent.url.raw_path == b"/transaction/verify/ref%2F1%202"

def test_verify_transaction_failure(upstream):
    upstream.route("GET", f"{PAYSTACK}/transaction/verify/", status_code=404,
                   json_body={"status": False, "message": "Transaction reference not found"})
    with pytest.raises(PaystackError) as exc:
        asyncio.run(service.verify_transaction("missing"))
    assert exc.value.status_code == 404
    assert exc.value.message == "Paystack verify failed"

@pytest.mark.parametrize("payload,expected", [
    ({"status": True, "data": {"status": "success"}}, True),
    ({"status": True, "data": {"status": "abandoned"}}, False),
    ({"status": False, "data": {"status": "success"}}, False),
    ({"status": "true", "data": {"status": "success"}}, False),
    ({"status": True}, False),
    (None, False),
])
def test_is_payment_successful(payload, expected):
    assert service.is_payment_successful(payload) is expected
