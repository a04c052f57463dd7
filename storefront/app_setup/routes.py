"""
Routes simples (hors routers) pour la page d'accueil.
- Sert / (et /index.html) depuis public/index.html si présent, sinon redirige vers le catalogue JSON.
- /favicon.ico: pas de contenu (204) pour éviter des 404 dans les logs.
"""
from fastapi import FastAPI
from fastapi.responses import FileResponse, RedirectResponse, Response
from starlette.status import HTTP_204_NO_CONTENT, HTTP_303_SEE_OTHER
from storefront.config import PUBLIC_DIR

def _home():
    index_path = PUBLIC_DIR / "index.html"
    if index_path.exists():
        return FileResponse(str(index_path))
    return RedirectResponse(url="/api/v1/catalog", status_code=HTTP_303_SEE_OTHER)

def register_routes(app: FastAPI) -> None:
    """
    Enregistre la racine et son alias.
    - Laisse l'OpenAPI propre (include_in_schema=False).
    """
    @app.get("/", include_in_schema=False)
    def root():
        return _home()

    @app.get("/index.html", include_in_schema=False)
    def index_alias():
        return _home()

    @app.get("/favicon.ico", include_in_schema=False)
    async def favicon():
        return Response(status_code=HTTP_204_NO_CONTENT)
