"""
Calcul des totaux (fonction pure).
- Aucun arrondi ici: l'arrondi au naira se fait à l'affichage (utils.money.format_ngn).
- fsum: somme exacte, donc indépendante de l'ordre des lignes.
"""
import math
from typing import Iterable

from storefront.cart.models import CartItem, Totals

SHIPPING_NGN = 0.0
VAT_RATE = 0.075

# module storefront.cart.totals
def compute_totals(items: Iterable[CartItem]) -> Totals:
    subtotal = math.fsum(item.price * item.qty for item in items)
    shipping = SHIPPING_NGN
    vat = subtotal * VAT_RATE
    total = subtotal + shipping + vat
    return Totals(subtotal=subtotal, shipping=shipping, vat=vat, total=total)
