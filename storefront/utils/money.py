"""
Helpers monétaires (naira / kobo).
- Arrondi "demi vers le haut" pour coller à l'affichage côté navigateur.
"""
import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

# module storefront.utils.money
def _to_decimal(amount) -> Decimal:
    try:
        value = Decimal(str(amount))
    except (InvalidOperation, ValueError, TypeError) as exc:
        raise ValueError(f"montant invalide: {amount!r}") from exc
    if not value.is_finite():
        raise ValueError(f"montant invalide: {amount!r}")
    return value

def to_minor_units(amount) -> int:
    """
    Convertit un montant en naira vers des kobo (x100, arrondi demi vers le haut).
    Ex: 100.5 -> 10050
    """
    kobo = (_to_decimal(amount) * Decimal("100")).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return int(kobo)

def from_minor_units(value) -> float:
    """Kobo -> naira. Toute valeur non numérique vaut 0."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number / 100

def round_naira(amount) -> int:
    """Arrondi au naira entier le plus proche (affichage uniquement)."""
    try:
        value = _to_decimal(amount)
    except ValueError:
        return 0
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))

def format_ngn(amount) -> str:
    """
    Format d'affichage: "₦10,213".
    - Aucun arrondi n'est fait avant l'affichage (voir totals).
    """
    return f"₦{round_naira(amount):,}"

def plain_number(value: float) -> str:
    """Rend 9500.0 en "9500" et 9500.5 en "9500.5" (texte des e-mails)."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)

def coerce_number(value) -> float:
    """Lecture tolérante d'un nombre venu d'un JSON client: non numérique ou non fini => 0."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0
