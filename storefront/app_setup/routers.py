"""
Registre central des routers (pages, API v1, fonctions de paiement, health).
"""
from fastapi import FastAPI
from storefront.age_gate import views as age_gate_views
from storefront.catalog import views as catalog_views
from storefront.cart.views import router as cart_router
from storefront.checkout import views as checkout_views
from storefront.orders import views as orders_views
from storefront.payments.views import router as payments_router
from storefront.health.router import router as health_router

def register_routers(app: FastAPI) -> None:
    """
    Agrège tous les routers de l'application.
    - L'ordre n'a pas d'impact sauf conflits de chemins (évités par préfixes).
    """
    # Pages web (HTML)
    app.include_router(age_gate_views.web_router)
    app.include_router(catalog_views.web_router)
    app.include_router(checkout_views.web_router)
    app.include_router(orders_views.web_router)
    # API v1
    app.include_router(age_gate_views.api_router)
    app.include_router(catalog_views.api_router)
    app.include_router(cart_router)
    app.include_router(checkout_views.api_router)
    app.include_router(orders_views.api_router)
    # Fonctions de paiement (chemins historiques)
    app.include_router(payments_router)
    # Health & monitoring
    app.include_router(health_router)
