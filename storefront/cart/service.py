"""
Gestion du panier persisté côté client (pas de copie serveur).
- Lecture tolérante: JSON invalide => panier vide.
- Fusion des doublons par id (slug), quantités bornées à [1, 99].
- Chaque mutation renvoie le nombre d'unités (badge panier).
"""
import json
import logging
import math
import re
import time
from typing import Any, Dict, List, Optional

from storefront.cart.models import (
    DEFAULT_UNIT_PRICE_NGN,
    MAX_UNIT_PRICE_NGN,
    PRODUCT_QTY_MAX,
    PRODUCT_QTY_MIN,
    CartItem,
)
from storefront.storage import CART_ITEMS_KEY, Store
from storefront.utils.money import coerce_number

logger = logging.getLogger(__name__)

_SLUG_UNSAFE = re.compile(r"[^a-z0-9]+")
_PRICE_UNSAFE = re.compile(r"[^0-9.]")
_LEADING_NUMBER = re.compile(r"\d+(?:\.\d*)?|\.\d+")

# module storefront.cart.service
def clamp_qty(qty: Any) -> int:
    try:
        value = int(qty)
    except (TypeError, ValueError):
        return PRODUCT_QTY_MIN
    return min(PRODUCT_QTY_MAX, max(PRODUCT_QTY_MIN, value))

def slugify_id(value: Any) -> str:
    """"Pablo Blue Mint" -> "pablo-blue-mint"."""
    slug = _SLUG_UNSAFE.sub("-", str(value or "").strip().lower())
    return slug.strip("-")

def parse_price(text: Any) -> float:
    """
    Prix affiché -> nombre.
    - Retire tout sauf chiffres et points ("₦9,500" -> 9500).
    - Prix par défaut si non parsable, <= 0 ou au-delà de MAX_UNIT_PRICE_NGN.
    """
    digits = _PRICE_UNSAFE.sub("", str(text or ""))
    m = _LEADING_NUMBER.match(digits)
    if not m:
        return DEFAULT_UNIT_PRICE_NGN
    return _valid_price(float(m.group(0)))

def _valid_price(value: float) -> float:
    return value if math.isfinite(value) and 0 < value <= MAX_UNIT_PRICE_NGN else DEFAULT_UNIT_PRICE_NGN

def cart_count(items: List[CartItem]) -> int:
    return sum(item.qty for item in items)

def _coerce_item(raw: Dict[str, Any]) -> Optional[CartItem]:
    item_id = str(raw.get("id") or "")
    qty = int(coerce_number(raw.get("qty")) or 1)
    if not item_id or qty <= 0:
        return None
    price = coerce_number(raw.get("price"))
    return CartItem(
        id=item_id,
        name=str(raw.get("name") or "Product"),
        image=str(raw.get("image") or ""),
        price=_valid_price(price),
        qty=min(PRODUCT_QTY_MAX, qty),
    )


class CartManager:
    """Panier lié à un backend de stockage (PersistentStore en production)."""

    def __init__(self, store: Store, key: str = CART_ITEMS_KEY):
        self.store = store
        self.key = key

    def read(self) -> List[CartItem]:
        raw = self.store.get(self.key)
        if not raw:
            return []
        try:
            parsed = json.loads(raw)
        except ValueError:
            logger.debug("cart.read: JSON invalide, panier vide")
            return []
        if not isinstance(parsed, list):
            return []
        items = []
        for entry in parsed:
            if not isinstance(entry, dict):
                continue
            item = _coerce_item(entry)
            if item is not None:
                items.append(item)
        return items

    def write(self, items: List[CartItem]) -> int:
        payload = json.dumps([item.model_dump() for item in items], separators=(",", ":"), ensure_ascii=False)
        self.store.set(self.key, payload)
        return cart_count(items)

    def count(self) -> int:
        return cart_count(self.read())

    def add_or_merge(self, name: str, image: str = "", price_text: str = "", qty: int = 1) -> CartItem:
        """
        Ajout depuis une carte produit.
        - id = slug(nom) ou slug(image) ou item-<timestamp ms>
        - id existant: qty = min(99, qty_existante + qty)
        """
        name = (name or "Product").strip()
        qty = clamp_qty(qty)
        item_id = slugify_id(name) or slugify_id(image) or f"item-{int(time.time() * 1000)}"

        items = self.read()
        existing = next((it for it in items if it.id == item_id), None)
        if existing is not None:
            existing.qty = min(PRODUCT_QTY_MAX, existing.qty + qty)
            result = existing
        else:
            result = CartItem(id=item_id, name=name, image=image or "", price=parse_price(price_text), qty=qty)
            items.append(result)
        self.write(items)
        return result

    def set_quantity(self, item_id: str, qty: int) -> Optional[CartItem]:
        items = self.read()
        item = next((it for it in items if it.id == item_id), None)
        if item is None:
            return None
        item.qty = clamp_qty(qty)
        self.write(items)
        return item

    def change_quantity(self, item_id: str, delta: int) -> Optional[CartItem]:
        """Boutons +/-: jamais en dessous de 1 ni au-dessus de 99 (pas de suppression implicite)."""
        items = self.read()
        item = next((it for it in items if it.id == item_id), None)
        if item is None:
            return None
        item.qty = clamp_qty(item.qty + int(delta))
        self.write(items)
        return item

    def remove(self, item_id: str) -> bool:
        items = self.read()
        kept = [it for it in items if it.id != item_id]
        self.write(kept)
        return len(kept) != len(items)

    def clear(self) -> None:
        self.write([])
