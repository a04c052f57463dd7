def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    body = res.json()
    assert body["ok"] is True
    assert body["rate_limit"]["enabled"] is False

def test_health_config_reports_presence_only(client, email_configured):
    res = client.get("/health/config")
    assert res.json() == {"paystack": True, "email": True}
    assert "sk_test_secret" not in res.text

def test_catalog_api(client):
    body = client.get("/api/v1/catalog").json()
    assert body["brands"] == ["pablo", "zafari", "zyn", "iceberg", "velo", "maggie"]
    assert body["products"]["maggie"] == [{
        "name": "Maggie Cherry Tonic",
        "image": "./assets/maggie-cherrytonic.jpg",
        "brand": "maggie",
        "strength": "60mg",
    }]
    filtered = client.get("/api/v1/catalog", params={"brand": "velo"}).json()["products"]
    assert list(filtered) == ["velo"]

def test_brand_page_fragment(client):
    res = client.get("/brands/zyn")
    assert res.status_code == 200
    assert res.text.count('class="card product"') == 3
    assert client.get("/brands/killa").status_code == 404

def test_cart_api_validation(client):
    assert client.patch("/api/v1/cart/items/missing", json={"qty": 2}).status_code == 404
    client.post("/api/v1/cart/items", json={"name": "Velo Strawberry Ice"})
    res = client.patch("/api/v1/cart/items/velo-strawberry-ice", json={})
    assert res.status_code == 400

def test_security_headers(client):
    res = client.get("/api/v1/catalog")
    assert res.headers["x-content-type-options"] == "nosniff"
    assert res.headers["x-frame-options"] == "DENY"
    assert "content-security-policy" in res.headers

def test_favicon_and_home(client):
    assert client.get("/favicon.ico").status_code == 204
    res = client.get("/", follow_redirects=False)
    assert res.status_code in (200, 303)

def test_underage_page(client):
    res = client.get("/underage")
    assert res.status_code == 200
    assert "18 or older" in res.text

def test_cart_oversized_price_keeps_totals_finite(client):
    res = client.post("/api/v1/cart/items", json={"name": "Zyn Fresh Mint", "price_text": "9" * 308, "qty": 2})
    assert res.status_code == 200
    assert res.json()["item"]["price"] == 9500
    assert res.json()["totals"]["subtotal"] == 19000
    assert client.get("/api/v1/cart").status_code == 200

def test_csp_allows_docs_assets_and_paystack_form_action(client):
    csp = client.get("/docs").headers["content-security-policy"]
    assert "script-src 'self' 'unsafe-inline' https://cdn.jsdelivr.net" in csp
    assert "form-action 'self' https://checkout.paystack.com https://js.paystack.co" in csp
