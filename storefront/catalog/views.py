from typing import Optional

from fastapi import APIRouter, HTTPException
from fastapi.responses import HTMLResponse

from storefront.catalog import service as catalog

api_router = APIRouter(prefix="/api/v1/catalog", tags=["Catalog API"])
web_router = APIRouter(tags=["Pages"])


# module storefront.catalog.views
@api_router.get("")
def get_catalog(brand: Optional[str] = None):
    """
    Catalogue {marque: [produits]} avec dosages.
    - ?brand=<marque> filtre comme les onglets de la page d'accueil.
    """
    return {"brands": catalog.list_brands(), "products": catalog.catalog_listing(brand)}

@web_router.get("/brands/{brand}", response_class=HTMLResponse)
def brand_page(brand: str):
    """Fragment HTML des cartes produit d'une marque (404 si inconnue)."""
    if brand not in catalog.list_brands():
        raise HTTPException(status_code=404, detail="Unknown brand")
    return HTMLResponse(catalog.render_brand_page(brand))
