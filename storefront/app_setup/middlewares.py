"""
Middlewares transverses de l'application.
- register_basic_middlewares: session signée (équivalent sessionStorage) et CORS optionnel.
- register_force_https_middleware: force la redirection HTTPS (utile derrière proxy).
Notes:
- Les fonctions de paiement posent elles-mêmes access-control-allow-origin: *.
- L'ordre d'ajout est important: le middleware HTTPS est ajouté en dernier pour s'exécuter en premier.
"""
from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from storefront.config import COOKIE_SECURE, CORS_ORIGINS, SESSION_SECRET_KEY

SESSION_COOKIE_NAME = "snuz_session"

def register_basic_middlewares(app: FastAPI) -> None:
    """
    Ajoute les middlewares « de base »:
    - SessionMiddleware: cookie de session (sans max_age: expire avec le navigateur).
    - CORSMiddleware: seulement si CORS_ORIGINS est renseigné.
    """
    app.add_middleware(
        SessionMiddleware,
        secret_key=SESSION_SECRET_KEY,
        session_cookie=SESSION_COOKIE_NAME,
        max_age=None,
        same_site="lax",
        https_only=COOKIE_SECURE,
    )
    if CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=CORS_ORIGINS,
            allow_credentials="*" not in CORS_ORIGINS,
            allow_methods=["*"],
            allow_headers=["*"],
            expose_headers=["X-Window-Name"],
        )

def register_force_https_middleware(app: FastAPI) -> None:
    """
    Force la redirection HTTP -> HTTPS lorsqu'un proxy place x-forwarded-proto=http.
    - Actif seulement si COOKIE_SECURE (production).
    """
    if not COOKIE_SECURE:
        return

    @app.middleware("http")
    async def force_https(request: Request, call_next):
        if request.headers.get("x-forwarded-proto") == "http":
            url = str(request.url.replace(scheme="https"))
            return RedirectResponse(url, status_code=301)
        return await call_next(request)
