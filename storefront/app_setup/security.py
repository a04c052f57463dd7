from fastapi import FastAPI
from storefront.config import COOKIE_SECURE

PAYSTACK_CHECKOUT_ORIGINS = ["https://checkout.paystack.com", "https://js.paystack.co"]
# Assets de /docs (Swagger UI servi par FastAPI)
DOCS_UI_CDNS = ["https://cdn.jsdelivr.net"]

def register_security_middleware(app: FastAPI) -> None:
    @app.middleware("http")
    async def security_headers(request, call_next):
        response = await call_next(request)

        # En-têtes de sécurité
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "strict-origin-when-cross-origin")
        response.headers.setdefault("Permissions-Policy", "geolocation=(), microphone=(), camera=()")
        if COOKIE_SECURE:
            response.headers.setdefault("Strict-Transport-Security", "max-age=63072000; includeSubDomains; preload")

        # CSP: la page de paiement Paystack est hors site (redirection), seules les images sont externes
        csp = (
            "default-src 'self'; "
            "base-uri 'self'; object-src 'none'; frame-ancestors 'none'; "
            "img-src 'self' data: blob: https:; "
            f"style-src 'self' 'unsafe-inline' {' '.join(DOCS_UI_CDNS)}; "
            f"script-src 'self' 'unsafe-inline' {' '.join(DOCS_UI_CDNS)}; "
            f"form-action 'self' {' '.join(PAYSTACK_CHECKOUT_ORIGINS)}; "
            "connect-src 'self'"
        )
        response.headers.setdefault("Content-Security-Policy", csp)

        return response
