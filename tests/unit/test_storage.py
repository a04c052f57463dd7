from fastapi import FastAPI, Request, Response
from fastapi.testclient import TestClient

from storefront.storage import (
    AGE_VERIFIED_KEY,
    CART_ITEMS_KEY,
    MemoryStore,
    Store,
    StoreChain,
    client_stores,
    cookie_name,
)


class BrokenStore(Store):
    name = "broken"

    def _get(self, key):
        raise RuntimeError("quota exceeded")

    def _set(self, key, value, max_age):
        raise RuntimeError("quota exceeded")

    def _remove(self, key):
        raise RuntimeError("private mode")


def test_keys_are_namespaced_and_versioned():
    assert AGE_VERIFIED_KEY == "snuz.ng:age_verified_v1"
    assert CART_ITEMS_KEY == "snuz.ng:cart_items_v1"
    assert cookie_name(CART_ITEMS_KEY) == "snuz.ng_cart_items_v1"

def test_broken_backend_never_raises():
    store = BrokenStore()
    assert store.get("k") is None
    assert store.set("k", "v") is False
    assert store.remove("k") is False

def test_memory_store_roundtrip():
    store = MemoryStore()
    assert store.set("k", "v") is True
    assert store.get("k") == "v"
    store.remove("k")
    assert store.get("k") is None

def test_chain_first_match_follows_priority_order():
    chain = StoreChain([
        MemoryStore(name="persistent"),
        MemoryStore({"flag": "true"}, name="session"),
        MemoryStore({"flag": "true"}, name="cookie"),
    ])
    lookups = [("persistent", "flag"), ("session", "flag"), ("cookie", "flag")]
    assert chain.first_match(lookups) == "session"
    assert chain.names() == ["persistent", "session", "cookie"]

def test_chain_skips_broken_and_missing_backends():
    chain = StoreChain([BrokenStore(), MemoryStore({"flag": "true"}, name="window")])
    lookups = [("broken", "flag"), ("absent", "flag"), ("window", "flag")]
    assert chain.first_match(lookups) == "window"
    assert "absent" not in chain

def test_store_has_matches_exact_value():
    store = MemoryStore({"flag": "true"})
    assert store.has("flag", "true") is True
    assert store.has("flag", "false") is False
    assert BrokenStore().has("flag", "true") is False

def _app():
    app = FastAPI()

    @app.post("/write")
    def write(request: Request, response: Response):
        stores = client_stores(request, response)
        stores["persistent"].set("snuz.ng:x_v1", '{"a": "b c"}')
        stores["cookie"].set("plain", "yes")
        stores["window"].set("token", "true")
        # Session absente (pas de SessionMiddleware): écriture ignorée sans erreur
        ok = stores["session"].set("k", "v")
        return {"session_ok": ok, "read_back": stores["persistent"].get("snuz.ng:x_v1")}

    @app.get("/read")
    def read(request: Request):
        stores = client_stores(request)
        return {
            "persistent": stores["persistent"].get("snuz.ng:x_v1"),
            "cookie": stores["cookie"].get("plain"),
            "window": stores["window"].get("token"),
            "write_without_response": stores["cookie"].set("plain", "no"),
        }

    return app

def test_cookie_and_window_stores_through_http():
    client = TestClient(_app())
    res = client.post("/write")
    assert res.status_code == 200
    assert res.json() == {"session_ok": False, "read_back": '{"a": "b c"}'}
    assert res.headers["x-window-name"] == "token:true"
    set_cookies = res.headers.get_list("set-cookie")
    persistent = next(c for c in set_cookies if c.startswith("snuz.ng_x_v1="))
    assert "HttpOnly" in persistent
    assert "Max-Age=31536000" in persistent

    res = client.get("/read", headers={"X-Window-Name": "other:1 token:true"})
    assert res.json() == {
        "persistent": '{"a": "b c"}',
        "cookie": "yes",
        "window": "true",
        "write_without_response": False,
    }

def test_window_token_found_anywhere_in_header():
    client = TestClient(_app())
    res = client.get("/window", headers={"X-Window-Name": "token:false token:true"})
    assert res.json() == {"has_true": True}
    res = client.get("/window", headers={"X-Window-Name": "token:false tokenx:true"})
    assert res.json() == {"has_true": False}
