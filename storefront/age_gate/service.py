"""
Logique du contrôle d'âge (sans HTTP).
- Vérifié si AU MOINS UN des quatre signaux est présent.
- Seuls le drapeau persistant et le cookie d'un an survivent à la session du navigateur.
"""
import logging
from typing import Optional

from storefront.storage import (
    AGE_VERIFIED_COOKIE,
    AGE_VERIFIED_KEY,
    AGE_VERIFIED_SESSION_KEY,
    ONE_YEAR_SECONDS,
    WINDOW_NAME_KEY,
    StoreChain,
)

logger = logging.getLogger(__name__)

UNDERAGE_PATH = "/underage"
HOME_PATHS = {"", "/", "/index.html"}

# (backend, clé) dans l'ordre de priorité
VERIFICATION_SIGNALS = [
    ("persistent", AGE_VERIFIED_KEY),
    ("session", AGE_VERIFIED_SESSION_KEY),
    ("cookie", AGE_VERIFIED_COOKIE),
    ("window", WINDOW_NAME_KEY),
]

# module storefront.age_gate.service
def verified_by(stores: StoreChain) -> Optional[str]:
    """Nom du premier backend portant le signal, ou None."""
    return stores.first_match(VERIFICATION_SIGNALS)

def is_verified(stores: StoreChain) -> bool:
    return verified_by(stores) is not None

def confirm(
    stores: StoreChain,
    remember: bool,
    *,
    current_path: str = "/",
    redirect_home: bool = False,
) -> Optional[str]:
    """
    Réponse "Oui".
    - Toujours: signal de session, jeton window et cookie de session.
    - Si remember: drapeau persistant et cookie d'un an.
    Retourne la redirection à effectuer (variante "retour à l'accueil") ou None.
    """
    _set_if_present(stores, "session", AGE_VERIFIED_SESSION_KEY)
    _set_if_present(stores, "window", WINDOW_NAME_KEY)
    if remember:
        _set_if_present(stores, "persistent", AGE_VERIFIED_KEY)
        _set_if_present(stores, "cookie", AGE_VERIFIED_COOKIE, max_age=ONE_YEAR_SECONDS)
    else:
        _set_if_present(stores, "cookie", AGE_VERIFIED_COOKIE)

    logger.info("age_gate.confirm remember=%s", remember)
    if redirect_home and (current_path or "/").rstrip("/") not in {p.rstrip("/") for p in HOME_PATHS}:
        return "/"
    return None

def decline() -> str:
    """Réponse "Non" (ou touche Échap): direction la page mineurs."""
    logger.info("age_gate.decline")
    return UNDERAGE_PATH

def _set_if_present(stores: StoreChain, name: str, key: str, max_age: Optional[int] = None) -> None:
    store = stores.get(name)
    if store is None:
        return
    store.set(key, "true", max_age=max_age)
