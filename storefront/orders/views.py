from fastapi import APIRouter, Request, Response
from fastapi.responses import HTMLResponse

from storefront.cart.service import CartManager
from storefront.orders import service as orders
from storefront.storage import PersistentStore
from storefront.utils.templates import templates

api_router = APIRouter(prefix="/api/v1/order-complete", tags=["Orders"])
web_router = APIRouter(tags=["Pages"])


# module storefront.orders.views
@api_router.get("")
async def order_complete_api(request: Request, response: Response):
    """
    Statut de la commande au retour de Paystack (?reference= ou ?trxref=).
    - {"state": "complete" | "confirmed" | "unconfirmed", "title", "message", "reference"}
    """
    cart = CartManager(PersistentStore(request, response))
    status = await orders.complete_order(orders.reference_from_query(request.query_params), cart)
    return status.to_dict()

@web_router.get("/order-complete", response_class=HTMLResponse, include_in_schema=False)
async def order_complete_page(request: Request):
    # Le rendu dépend du statut: les cookies sont collectés puis recopiés sur la page renvoyée
    collected = Response()
    cart = CartManager(PersistentStore(request, collected))
    status = await orders.complete_order(orders.reference_from_query(request.query_params), cart)
    page = templates.TemplateResponse(request, "order_complete.html", {"status": status})
    page.raw_headers.extend(h for h in collected.raw_headers if h[0] == b"set-cookie")
    return page
