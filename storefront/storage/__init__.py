"""
Module 'storage': point d'entrée public.
Contrat unique de lecture/écriture au-dessus des stockages côté client.
"""

from .keys import (
    AGE_VERIFIED_COOKIE,
    AGE_VERIFIED_KEY,
    AGE_VERIFIED_SESSION_KEY,
    CART_ITEMS_KEY,
    ONE_YEAR_SECONDS,
    WINDOW_NAME_KEY,
    cookie_name,
)
from .stores import (
    CookieStore,
    MemoryStore,
    PersistentStore,
    SessionStore,
    Store,
    StoreChain,
    WindowNameStore,
    WINDOW_NAME_HEADER,
    client_stores,
)

__all__ = [
    # keys
    "AGE_VERIFIED_COOKIE",
    "AGE_VERIFIED_KEY",
    "AGE_VERIFIED_SESSION_KEY",
    "CART_ITEMS_KEY",
    "ONE_YEAR_SECONDS",
    "WINDOW_NAME_KEY",
    "cookie_name",
    # stores
    "Store",
    "MemoryStore",
    "CookieStore",
    "PersistentStore",
    "SessionStore",
    "WindowNameStore",
    "StoreChain",
    "WINDOW_NAME_HEADER",
    "client_stores",
]
