from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from storefront.config import PUBLIC_DIR

def mount_static_files(app: FastAPI) -> None:
    # Site statique optionnel (public/): monté seulement s'il existe
    if PUBLIC_DIR.is_dir():
        app.mount("/public", StaticFiles(directory=str(PUBLIC_DIR)), name="public")
