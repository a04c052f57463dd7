"""
Réponses des fonctions de paiement (chemins historiques /.netlify/functions/*).
- JSON + en-têtes CORS ouverts (toute origine) pour Initialize et Verify.
- Texte brut pour le webhook.
"""
from typing import Any, Dict

from fastapi.responses import JSONResponse, PlainTextResponse, Response
from starlette.status import HTTP_204_NO_CONTENT

FUNCTIONS_PREFIX = "/.netlify/functions"
INITIALIZE_PATH = f"{FUNCTIONS_PREFIX}/paystack-initialize"
VERIFY_PATH = f"{FUNCTIONS_PREFIX}/paystack-verify"
WEBHOOK_PATH = f"{FUNCTIONS_PREFIX}/paystack-webhook"

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

# module storefront.payments.responses
def cors_headers(path: str) -> Dict[str, str]:
    headers = {"access-control-allow-origin": "*"}
    if path == INITIALIZE_PATH:
        headers["access-control-allow-headers"] = "content-type"
        headers["access-control-allow-methods"] = "GET, POST, OPTIONS"
    return headers

def is_function_path(path: str) -> bool:
    return path.startswith(f"{FUNCTIONS_PREFIX}/")

def function_json(path: str, status_code: int, body: Any) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body, headers=cors_headers(path))

def preflight(path: str) -> Response:
    return Response(status_code=HTTP_204_NO_CONTENT, headers=cors_headers(path))

def method_not_allowed(path: str) -> JSONResponse:
    return function_json(path, 405, {"error": "Method not allowed"})

def text(status_code: int, body: str) -> PlainTextResponse:
    return PlainTextResponse(str(body or ""), status_code=status_code)
