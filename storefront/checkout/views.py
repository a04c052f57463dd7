import logging
import urllib.parse

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from starlette.status import HTTP_303_SEE_OTHER

from storefront.cart.service import CartManager
from storefront.cart.totals import compute_totals
from storefront.checkout import service as checkout
from storefront.storage import PersistentStore
from storefront.utils.rate_limit import optional_rate_limit
from storefront.utils.templates import templates

logger = logging.getLogger(__name__)
api_router = APIRouter(prefix="/api/v1/checkout", tags=["Checkout"])
web_router = APIRouter(tags=["Pages"])


def _origin(request: Request) -> str:
    return str(request.base_url).rstrip("/")


# module storefront.checkout.views
@api_router.post("", dependencies=[Depends(optional_rate_limit(times=10, seconds=60))])
async def checkout_api(body: checkout.CheckoutRequest, request: Request):
    """
    Passe commande à partir du panier courant.
    - Entrée JSON: champs de facturation + "pay" + "terms"
    - Succès: { "authorization_url", "reference" } (le navigateur y est redirigé)
    - Erreurs: { "error": <message> } 400 (préconditions) ou 502 (paiement non démarré)
    """
    items = CartManager(PersistentStore(request, None)).read()
    try:
        return await checkout.place_order(body, items, _origin(request))
    except checkout.CheckoutError as e:
        return JSONResponse(status_code=e.status_code, content={"error": e.message})

@web_router.get("/checkout", response_class=HTMLResponse, include_in_schema=False)
def checkout_page(request: Request, error: str = ""):
    items = CartManager(PersistentStore(request, None)).read()
    return templates.TemplateResponse(
        request,
        "checkout.html",
        {"items": items, "totals": compute_totals(items), "error": error},
    )

@web_router.post("/checkout", dependencies=[Depends(optional_rate_limit(times=10, seconds=60))], include_in_schema=False)
async def checkout_form(request: Request):
    """
    Variante formulaire HTML.
    - Succès: 303 vers la page de paiement Paystack
    - Échec: 303 vers /checkout?error=<message>
    """
    form = await request.form()
    req = checkout.CheckoutRequest.model_validate(dict(form))
    items = CartManager(PersistentStore(request, None)).read()
    try:
        result = await checkout.place_order(req, items, _origin(request))
    except checkout.CheckoutError as e:
        msg = urllib.parse.quote_plus(e.message)
        return RedirectResponse(url=f"/checkout?error={msg}", status_code=HTTP_303_SEE_OTHER)
    return RedirectResponse(url=result["authorization_url"], status_code=HTTP_303_SEE_OTHER)
