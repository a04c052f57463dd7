import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Request, Response
from pydantic import BaseModel, Field

from storefront.cart.service import CartManager
from storefront.cart.totals import compute_totals
from storefront.storage import PersistentStore
from storefront.utils.money import format_ngn

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/cart", tags=["Cart API"])


class AddItemRequest(BaseModel):
    name: str = "Product"
    image: str = ""
    price_text: str = ""
    qty: int = 1


class UpdateItemRequest(BaseModel):
    qty: Optional[int] = None
    delta: Optional[int] = None


def _cart(request: Request, response: Optional[Response] = None) -> CartManager:
    return CartManager(PersistentStore(request, response))

def cart_snapshot(cart: CartManager) -> dict:
    """Vue complète du panier: lignes, badge, totaux (valeurs brutes + affichage)."""
    items = cart.read()
    totals = compute_totals(items)
    return {
        "items": [item.model_dump() for item in items],
        "count": sum(item.qty for item in items),
        "totals": totals.model_dump(),
        "display": {k: format_ngn(v) for k, v in totals.model_dump().items()},
    }


# module storefront.cart.views
@router.get("")
def get_cart(request: Request):
    return cart_snapshot(_cart(request))

@router.post("/items")
def add_item(body: AddItemRequest, request: Request, response: Response):
    """
    Ajout depuis une carte produit ("Add to cart").
    - Fusionne avec la ligne existante (même slug), qty bornée à 99.
    """
    cart = _cart(request, response)
    item = cart.add_or_merge(body.name, image=body.image, price_text=body.price_text, qty=body.qty)
    logger.info("cart.add id=%s qty=%s", item.id, item.qty)
    return {"item": item.model_dump(), **cart_snapshot(cart)}

@router.patch("/items/{item_id}")
def update_item(item_id: str, body: UpdateItemRequest, request: Request, response: Response):
    """
    Champ quantité ({"qty": n}) ou boutons +/- ({"delta": +1|-1}).
    - 400 si aucun des deux, 404 si la ligne n'existe pas.
    """
    cart = _cart(request, response)
    if body.qty is not None:
        item = cart.set_quantity(item_id, body.qty)
    elif body.delta is not None:
        item = cart.change_quantity(item_id, body.delta)
    else:
        raise HTTPException(status_code=400, detail="qty or delta is required")
    if item is None:
        raise HTTPException(status_code=404, detail="Item not found")
    return {"item": item.model_dump(), **cart_snapshot(cart)}

@router.delete("/items/{item_id}")
def remove_item(item_id: str, request: Request, response: Response):
    cart = _cart(request, response)
    removed = cart.remove(item_id)
    return {"removed": removed, **cart_snapshot(cart)}

@router.delete("")
def clear_cart(request: Request, response: Response):
    cart = _cart(request, response)
    cart.clear()
    return cart_snapshot(cart)
