import json

from storefront.payments.signature import compute_signature

PAYSTACK = "https://api.paystack.co"
SENDGRID = "https://api.sendgrid.com"

FORM = {
    "first_name": "Ada",
    "last_name": "Obi",
    "address": "12 Broad St",
    "city": "Lagos",
    "state": "Lagos",
    "phone": "+2348000000000",
    "email": "buyer@example.com",
    "pay": "card",
    "terms": "on",
}


def test_browse_checkout_pay_and_return(client, paystack_init_ok, email_configured):
    upstream = paystack_init_ok
    upstream.route("POST", f"{SENDGRID}/v3/mail/send", status_code=202, text="")

    # Contrôle d'âge puis panier
    client.post("/api/v1/age-gate/confirm", json={"remember": True})
    assert client.get("/api/v1/age-gate").json()["verified"] is True
    client.post("/api/v1/cart/items", json={"name": "Velo Strawberry Ice", "price_text": "₦9,500", "qty": 2})
    client.post("/api/v1/cart/items", json={"name": "Maggie Cherry Tonic", "price_text": "₦9,500"})

    page = client.get("/checkout")
    assert "Velo Strawberry Ice" in page.text

    # Formulaire -> page de paiement Paystack
    res = client.post("/checkout", data=FORM, follow_redirects=False)
    assert res.status_code == 303
    assert res.headers["location"] == "https://checkout.paystack.com/abc123"

    (init,) = upstream.calls(f"{PAYSTACK}/transaction/initialize")
    sent = upstream.json_of(init)
    assert sent["amount"] == 3063750
    assert sent["currency"] == "NGN"
    assert sent["channels"] == ["card"]
    assert [it["id"] for it in sent["metadata"]["items"]] == ["velo-strawberry-ice", "maggie-cherry-tonic"]

    # Webhook Paystack: e-mails opérateur et client
    event = {
        "event": "charge.success",
        "data": {
            "reference": "ref_123",
            "amount": sent["amount"],
            "customer": {"email": "buyer@example.com"},
            "metadata": sent["metadata"],
        },
    }
    raw = json.dumps(event).encode()
    hook = client.post(
        "/.netlify/functions/paystack-webhook",
        content=raw,
        headers={"x-paystack-signature": compute_signature(raw, "sk_test_secret")},
    )
    assert hook.status_code == 200
    assert hook.text == "ok"
    mails = upstream.calls(f"{SENDGRID}/v3/mail/send")
    assert len(mails) == 2
    operator = upstream.json_of(mails[0])
    assert operator["personalizations"][0]["to"] == [{"email": "ops@snuz.ng"}]
    assert "Amount: ₦30637.5" in operator["content"][0]["value"]

    # Retour sur le site: paiement vérifié, panier vidé
    upstream.route("GET", f"{PAYSTACK}/transaction/verify/ref_123",
                   json_body={"status": True, "data": {"status": "success", "reference": "ref_123"}})
    done = client.get("/order-complete", params={"reference": "ref_123", "trxref": "ref_123"})
    assert done.status_code == 200
    assert 'data-state="confirmed"' in done.text
    assert client.get("/api/v1/cart").json()["count"] == 0


def test_form_errors_come_back_to_checkout(client, upstream):
    form = {k: v for k, v in FORM.items() if k != "terms"}
    client.post("/api/v1/cart/items", json={"name": "Zyn Cool Blueberry"})
    res = client.post("/checkout", data=form)
    assert res.status_code == 200
    assert "Please accept the terms to place your order." in res.text
    assert upstream.requests == []
