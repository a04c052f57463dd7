"""
Clés de stockage côté client.
Préfixe fixe + suffixe de version: incrémenter le suffixe pour migrer un format.
"""
import re

KEY_PREFIX = "snuz.ng:"
KEY_VERSION = "v1"

# Vérification d'âge
AGE_VERIFIED_KEY = f"{KEY_PREFIX}age_verified_{KEY_VERSION}"
AGE_VERIFIED_SESSION_KEY = f"{KEY_PREFIX}age_verified_session_{KEY_VERSION}"
AGE_VERIFIED_COOKIE = "snuz_age_verified"
WINDOW_NAME_KEY = "snuz_age_verified"

# Panier
CART_ITEMS_KEY = f"{KEY_PREFIX}cart_items_{KEY_VERSION}"

ONE_YEAR_SECONDS = 60 * 60 * 24 * 365

_COOKIE_UNSAFE = re.compile(r"[^A-Za-z0-9_.\-]")

def cookie_name(key: str) -> str:
    """"snuz.ng:cart_items_v1" -> "snuz.ng_cart_items_v1" (nom de cookie sûr)."""
    return _COOKIE_UNSAFE.sub("_", key)
