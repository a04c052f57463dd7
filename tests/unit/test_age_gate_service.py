import pytest

from storefront.age_gate import service as age_gate
from storefront.storage import (
    AGE_VERIFIED_COOKIE,
    AGE_VERIFIED_KEY,
    AGE_VERIFIED_SESSION_KEY,
    WINDOW_NAME_KEY,
    MemoryStore,
    StoreChain,
)


def _chain(**data):
    return StoreChain([
        MemoryStore(data.get("persistent"), name="persistent"),
        MemoryStore(data.get("session"), name="session"),
        MemoryStore(data.get("cookie"), name="cookie"),
        MemoryStore(data.get("window"), name="window"),
    ])


def test_not_verified_when_all_signals_absent():
    chain = _chain()
    assert age_gate.is_verified(chain) is False
    assert age_gate.verified_by(chain) is None

@pytest.mark.parametrize("backend,key", [
    ("persistent", AGE_VERIFIED_KEY),
    ("session", AGE_VERIFIED_SESSION_KEY),
    ("cookie", AGE_VERIFIED_COOKIE),
    ("window", WINDOW_NAME_KEY),
])
def test_any_single_signal_is_enough(backend, key):
    chain = _chain(**{backend: {key: "true"}})
    assert age_gate.is_verified(chain) is True
    assert age_gate.verified_by(chain) == backend

def test_signal_must_be_true():
    chain = _chain(persistent={AGE_VERIFIED_KEY: "false"})
    assert age_gate.is_verified(chain) is False

def test_confirm_with_remember_sets_every_signal():
    chain = _chain()
    redirect = age_gate.confirm(chain, remember=True)
    assert redirect is None
    assert chain["persistent"].get(AGE_VERIFIED_KEY) == "true"
    assert chain["session"].get(AGE_VERIFIED_SESSION_KEY) == "true"
    assert chain["cookie"].get(AGE_VERIFIED_COOKIE) == "true"
    assert chain["window"].get(WINDOW_NAME_KEY) == "true"

def test_confirm_without_remember_skips_persistent_flag():
    chain = _chain()
    age_gate.confirm(chain, remember=False)
    assert chain["persistent"].get(AGE_VERIFIED_KEY) is None
    assert chain["session"].get(AGE_VERIFIED_SESSION_KEY) == "true"
    assert age_gate.is_verified(chain) is True

def test_confirm_redirect_home_variant():
    assert age_gate.confirm(_chain(), True, current_path="/checkout", redirect_home=True) == "/"
    assert age_gate.confirm(_chain(), True, current_path="/", redirect_home=True) is None
    assert age_gate.confirm(_chain(), True, current_path="/index.html", redirect_home=True) is None
    assert age_gate.confirm(_chain(), True, current_path="/checkout") is None

def test_decline_goes_to_underage_page():
    assert age_gate.decline() == "/underage"
