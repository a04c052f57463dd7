"""
Client HTTP sortant (Paystack, SendGrid).
Point d'injection unique: les tests remplacent get_http_client par un client à transport simulé.
"""
import httpx

# module storefront.utils.http
def get_http_client() -> httpx.AsyncClient:
    from storefront.config import HTTP_TIMEOUT_SECONDS
    return httpx.AsyncClient(timeout=HTTP_TIMEOUT_SECONDS)
