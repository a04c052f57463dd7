"""
Adaptateurs de stockage côté client (un contrat lecture/écriture, plusieurs backends).

- PersistentStore: cookie longue durée (équivalent localStorage)
- SessionStore: session Starlette signée (équivalent sessionStorage)
- CookieStore: cookie simple (max_age=None => cookie de session)
- WindowNameStore: jetons "clé:valeur" portés par l'en-tête X-Window-Name
- MemoryStore: dict en mémoire (tests)

Politique: un backend indisponible (mode privé, quota, middleware absent...)
ne lève jamais. Lecture en échec => valeur absente; écriture en échec => ignorée.
"""
import logging
from collections import OrderedDict
from typing import Dict, Iterable, List, Optional, Tuple
from urllib.parse import quote, unquote

from fastapi import Request, Response

from storefront.config import COOKIE_SECURE
from storefront.storage.keys import ONE_YEAR_SECONDS, cookie_name

logger = logging.getLogger(__name__)

WINDOW_NAME_HEADER = "X-Window-Name"


# module storefront.storage.stores
class Store:
    """Contrat commun: get/set/remove tolérants aux erreurs."""

    name = "store"

    def get(self, key: str) -> Optional[str]:
        try:
            return self._get(key)
        except Exception:
            logger.debug("storage.%s get failed key=%s", self.name, key, exc_info=True)
            return None

    def set(self, key: str, value: str, *, max_age: Optional[int] = None) -> bool:
        try:
            self._set(key, str(value), max_age)
            return True
        except Exception:
            logger.debug("storage.%s set failed key=%s", self.name, key, exc_info=True)
            return False

    def remove(self, key: str) -> bool:
        try:
            self._remove(key)
            return True
        except Exception:
            logger.debug("storage.%s remove failed key=%s", self.name, key, exc_info=True)
            return False

    def has(self, key: str, value: str) -> bool:
        """Vrai si la clé porte exactement cette valeur."""
        return self.get(key) == value

    def _get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def _set(self, key: str, value: str, max_age: Optional[int]) -> None:
        raise NotImplementedError

    def _remove(self, key: str) -> None:
        raise NotImplementedError


class MemoryStore(Store):
    name = "memory"

    def __init__(self, data: Optional[Dict[str, str]] = None, name: Optional[str] = None):
        self.data: Dict[str, str] = dict(data or {})
        if name:
            self.name = name

    def _get(self, key):
        return self.data.get(key)

    def _set(self, key, value, max_age):
        self.data[key] = value

    def _remove(self, key):
        self.data.pop(key, None)


class CookieStore(Store):
    """
    Cookie lu sur la requête, écrit sur la réponse qui sera renvoyée.
    - Les écritures en attente sont visibles par les lectures suivantes (même requête).
    - Valeurs encodées façon encodeURIComponent.
    """

    name = "cookie"

    def __init__(
        self,
        request: Request,
        response: Optional[Response],
        *,
        default_max_age: Optional[int] = None,
        httponly: bool = False,
    ):
        self.request = request
        self.response = response
        self.default_max_age = default_max_age
        self.httponly = httponly
        self._pending: Dict[str, Optional[str]] = {}

    def _require_response(self) -> Response:
        if self.response is None:
            raise RuntimeError("cookie store en lecture seule (pas de réponse)")
        return self.response

    def _get(self, key):
        name = cookie_name(key)
        if name in self._pending:
            return self._pending[name]
        raw = self.request.cookies.get(name)
        return unquote(raw) if raw is not None else None

    def _set(self, key, value, max_age):
        name = cookie_name(key)
        self._require_response().set_cookie(
            key=name,
            value=quote(value, safe=""),
            max_age=max_age if max_age is not None else self.default_max_age,
            path="/",
            secure=COOKIE_SECURE,
            httponly=self.httponly,
            samesite="lax",
        )
        self._pending[name] = value

    def _remove(self, key):
        name = cookie_name(key)
        self._require_response().delete_cookie(name, path="/")
        self._pending[name] = None


class PersistentStore(CookieStore):
    name = "persistent"

    def __init__(self, request: Request, response: Optional[Response]):
        super().__init__(request, response, default_max_age=ONE_YEAR_SECONDS, httponly=True)


class SessionStore(Store):
    """request.session (SessionMiddleware). Sans middleware: backend indisponible."""

    name = "session"

    def __init__(self, request: Request):
        self.request = request

    def _get(self, key):
        value = self.request.session.get(key)
        return None if value is None else str(value)

    def _set(self, key, value, max_age):
        self.request.session[key] = value

    def _remove(self, key):
        self.request.session.pop(key, None)


class WindowNameStore(Store):
    """
    Équivalent window.name: une liste de jetons "clé:valeur" séparés par des espaces,
    envoyée par le client dans X-Window-Name et renvoyée mise à jour dans la réponse.
    """

    name = "window"

    def __init__(self, request: Request, response: Optional[Response], header: str = WINDOW_NAME_HEADER):
        self.request = request
        self.response = response
        self.header = header
        self._current: Optional[str] = None

    def _value(self) -> str:
        if self._current is None:
            self._current = str(self.request.headers.get(self.header) or "")
        return self._current

    def _tokens(self) -> List[str]:
        return self._value().split()

    def _publish(self, value: str) -> None:
        if self.response is None:
            raise RuntimeError("window store en lecture seule (pas de réponse)")
        self.response.headers[self.header] = value
        self._current = value

    def _get(self, key):
        prefix = f"{key}:"
        for token in self._tokens():
            if token.startswith(prefix):
                return token[len(prefix):]
        return None

    def has(self, key: str, value: str) -> bool:
        # Plusieurs jetons pour une même clé: le jeton complet suffit, où qu'il soit
        try:
            return f"{key}:{value}" in self._tokens()
        except Exception:
            logger.debug("storage.%s has failed key=%s", self.name, key, exc_info=True)
            return False

    def _set(self, key, value, max_age):
        token = f"{key}:{value}"
        current = self._value()
        if token in current.split():
            return
        self._publish(f"{current} {token}" if current else token)

    def _remove(self, key):
        prefix = f"{key}:"
        self._publish(" ".join(t for t in self._tokens() if not t.startswith(prefix)))


class StoreChain:
    """
    Backends nommés, consultés dans un ordre de priorité fixe.
    Ajouter un backend = l'ajouter à la chaîne, sans toucher aux appelants.
    """

    def __init__(self, stores: Iterable[Store] = ()):
        self._stores: "OrderedDict[str, Store]" = OrderedDict()
        for store in stores:
            self.add(store)

    def add(self, store: Store) -> None:
        self._stores[store.name] = store

    def __getitem__(self, name: str) -> Store:
        return self._stores[name]

    def __contains__(self, name: str) -> bool:
        return name in self._stores

    def get(self, name: str) -> Optional[Store]:
        return self._stores.get(name)

    def names(self) -> List[str]:
        return list(self._stores.keys())

    def first_match(self, lookups: Iterable[Tuple[str, str]], expected: str = "true") -> Optional[str]:
        """
        lookups: [(nom_backend, clé), ...] dans l'ordre de priorité voulu.
        Retourne le nom du premier backend dont la valeur vaut `expected`, sinon None.
        """
        for store_name, key in lookups:
            store = self._stores.get(store_name)
            if store is not None and store.has(key, expected):
                return store_name
        return None


def client_stores(request: Request, response: Optional[Response] = None) -> StoreChain:
    """
    Chaîne standard liée à une requête: persistent > session > cookie > window.
    `response` doit être la réponse effectivement renvoyée (cookies/en-têtes).
    """
    return StoreChain([
        PersistentStore(request, response),
        SessionStore(request),
        CookieStore(request, response),
        WindowNameStore(request, response),
    ])
