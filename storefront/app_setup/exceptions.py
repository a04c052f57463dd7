"""
Gestionnaires d'exceptions (utilisés par la factory).
- Erreurs paiement: {"error", "details"?} avec le statut porté par l'exception.
  Sur les chemins /.netlify/functions/*, les en-têtes CORS ouverts sont conservés.
- HTTPException: réponse JSON FastAPI standard {"detail"}.
"""
import logging
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from storefront.payments import responses
from storefront.payments.exceptions import PaymentError

logger = logging.getLogger(__name__)

def register_exception_handlers(app: FastAPI) -> None:
    """
    Enregistre les handlers PaymentError et HTTPException.
    - Configuration absente: 500; entrée invalide: 400; Paystack: statut relayé.
    """
    @app.exception_handler(PaymentError)
    async def payment_error_handler(request: Request, exc: PaymentError):
        path = request.url.path
        logger.info("payment error path=%s status=%s error=%s", path, exc.status_code, exc.message)
        if responses.is_function_path(path):
            return responses.function_json(path, exc.status_code, exc.to_body())
        return JSONResponse(status_code=exc.status_code, content=exc.to_body())

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        headers = getattr(exc, "headers", None) or {}
        if responses.is_function_path(request.url.path):
            headers = {**responses.cors_headers(request.url.path), **headers}
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail}, headers=headers)
