"""
Module 'cart': point d'entrée public.
Panier persisté côté client (cookie longue durée), totaux dérivés.
"""

from .models import CartItem, Totals, PRODUCT_QTY_MAX, PRODUCT_QTY_MIN, DEFAULT_UNIT_PRICE_NGN
from .service import CartManager, cart_count, clamp_qty, parse_price, slugify_id
from .totals import SHIPPING_NGN, VAT_RATE, compute_totals

__all__ = [
    # models
    "CartItem",
    "Totals",
    "PRODUCT_QTY_MIN",
    "PRODUCT_QTY_MAX",
    "DEFAULT_UNIT_PRICE_NGN",
    # service
    "CartManager",
    "cart_count",
    "clamp_qty",
    "parse_price",
    "slugify_id",
    # totals
    "SHIPPING_NGN",
    "VAT_RATE",
    "compute_totals",
]
