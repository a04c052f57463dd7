from pydantic import BaseModel, Field

PRODUCT_QTY_MIN = 1
PRODUCT_QTY_MAX = 99
DEFAULT_UNIT_PRICE_NGN = 9500.0
# Au-delà: prix considéré comme illisible (les totaux restent finis et sérialisables)
MAX_UNIT_PRICE_NGN = 100_000_000.0


class CartItem(BaseModel):
    """Ligne du panier, clé = slug du nom du produit."""
    id: str = Field(min_length=1)
    name: str = "Product"
    image: str = ""
    price: float = Field(default=DEFAULT_UNIT_PRICE_NGN, gt=0, le=MAX_UNIT_PRICE_NGN)
    qty: int = Field(default=1, ge=PRODUCT_QTY_MIN, le=PRODUCT_QTY_MAX)


class Totals(BaseModel):
    """Dérivé du panier, jamais stocké."""
    subtotal: float
    shipping: float
    vat: float
    total: float
