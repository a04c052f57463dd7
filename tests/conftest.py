import json
import os

# Désactive l'init du rate limiter (Redis) avant l'import de l'app
os.environ.setdefault("DISABLE_FASTAPI_LIMITER_INIT_FOR_TESTS", "1")

import httpx
import pytest
from typing import Any, Callable, Generator, List, Optional
from fastapi.testclient import TestClient

from storefront import config as storefront_config
from storefront.app import app as fastapi_app

TEST_SECRET = "sk_test_secret"
PAYSTACK = "https://api.paystack.co"
SENDGRID = "https://api.sendgrid.com"

# Marquage automatique selon le dossier
def pytest_collection_modifyitems(config, items):
    for item in items:
        nodeid = item.nodeid.replace("\\", "/")
        if "tests/unit/" in nodeid:
            item.add_marker(pytest.mark.unit)
        elif "tests/integration/" in nodeid:
            item.add_marker(pytest.mark.integration)
        elif "tests/functional/" in nodeid:
            item.add_marker(pytest.mark.functional)


class FakeUpstream:
    """
    Paystack/SendGrid simulés derrière httpx.MockTransport.
    - route(): enregistre une réponse (ou une fonction) pour méthode + préfixe d'URL
    - requests: toutes les requêtes sortantes, dans l'ordre
    """

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self._routes: List[tuple] = []

    def route(self, method: str, url_prefix: str, status_code: int = 200, json_body: Any = None,
              text: Optional[str] = None, handler: Optional[Callable[[httpx.Request], httpx.Response]] = None):
        def _default(request: httpx.Request) -> httpx.Response:
            if text is not None:
                return httpx.Response(status_code, text=text)
            return httpx.Response(status_code, json=json_body)
        self._routes.append((method.upper(), url_prefix, handler or _default))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        for method, prefix, responder in reversed(self._routes):
            if request.method == method and str(request.url).startswith(prefix):
                return responder(request)
        return httpx.Response(404, json={"status": False, "message": "not mocked"})

    def calls(self, url_prefix: str) -> List[httpx.Request]:
        return [r for r in self.requests if str(r.url).startswith(url_prefix)]

    def json_of(self, request: httpx.Request) -> Any:
        return json.loads(request.content)


@pytest.fixture(autouse=True)
def upstream(monkeypatch) -> FakeUpstream:
    """Aucun appel réseau réel: tout client sortant passe par FakeUpstream."""
    fake = FakeUpstream()
    monkeypatch.setattr(
        "storefront.utils.http.get_http_client",
        lambda: httpx.AsyncClient(transport=httpx.MockTransport(fake.handler)),
    )
    return fake

@pytest.fixture(autouse=True)
def _test_config(monkeypatch):
    monkeypatch.setattr(storefront_config, "PAYSTACK_SECRET_KEY", TEST_SECRET)
    monkeypatch.setattr(storefront_config, "PAYSTACK_BASE", PAYSTACK)
    monkeypatch.setattr(storefront_config, "SENDGRID_BASE", SENDGRID)
    monkeypatch.setattr(storefront_config, "SENDGRID_API_KEY", "")
    monkeypatch.setattr(storefront_config, "ORDER_NOTIFY_FROM", "")
    monkeypatch.setattr(storefront_config, "ORDER_NOTIFY_TO", "")
    monkeypatch.setattr(storefront_config, "BASE_URL", "")
    monkeypatch.delenv("LOCAL_RATE_LIMIT_FALLBACK", raising=False)

@pytest.fixture
def email_configured(monkeypatch):
    monkeypatch.setattr(storefront_config, "SENDGRID_API_KEY", "SG.test")
    monkeypatch.setattr(storefront_config, "ORDER_NOTIFY_FROM", "orders@snuz.ng")
    monkeypatch.setattr(storefront_config, "ORDER_NOTIFY_TO", "ops@snuz.ng")

@pytest.fixture(scope="session")
def app():
    return fastapi_app

@pytest.fixture()
def client(app) -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c

@pytest.fixture
def paystack_init_ok(upstream):
    upstream.route(
        "POST",
        f"{PAYSTACK}/transaction/initialize",
        json_body={
            "status": True,
            "message": "Authorization URL created",
            "data": {
                "authorization_url": "https://checkout.paystack.com/abc123",
                "access_code": "abc123",
                "reference": "ref_123",
            },
        },
    )
    return upstream
