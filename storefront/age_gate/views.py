import logging

from fastapi import APIRouter, Request, Response
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import BaseModel
from starlette.status import HTTP_303_SEE_OTHER

from storefront.age_gate import service as age_gate
from storefront.storage import client_stores
from storefront.utils.templates import templates

logger = logging.getLogger(__name__)
api_router = APIRouter(prefix="/api/v1/age-gate", tags=["Age gate"])
web_router = APIRouter(tags=["Pages"])


class ConfirmRequest(BaseModel):
    remember: bool = True
    current_path: str = "/"
    redirect_home: bool = False


# module storefront.age_gate.views
@api_router.get("")
def age_gate_status(request: Request):
    """
    État du contrôle d'âge pour la page courante.
    - verified: au moins un signal présent (persistant, session, cookie, window)
    - show_gate: l'inverse, pour piloter l'overlay
    """
    stores = client_stores(request)
    source = age_gate.verified_by(stores)
    return {"verified": source is not None, "show_gate": source is None, "source": source}

@api_router.post("/confirm")
def age_gate_confirm(body: ConfirmRequest, request: Request, response: Response):
    """
    "Oui": pose les signaux (voir age_gate.service.confirm).
    - Réponse: {"verified": true, "redirect": "/" | null}
    - Les écritures de stockage peuvent échouer silencieusement.
    """
    stores = client_stores(request, response)
    redirect = age_gate.confirm(
        stores,
        body.remember,
        current_path=body.current_path,
        redirect_home=body.redirect_home,
    )
    return {"verified": True, "redirect": redirect}

@api_router.post("/decline")
def age_gate_decline():
    return RedirectResponse(url=age_gate.decline(), status_code=HTTP_303_SEE_OTHER)

@web_router.get("/underage", response_class=HTMLResponse, include_in_schema=False)
def underage_page(request: Request):
    return templates.TemplateResponse(request, "underage.html", {})
