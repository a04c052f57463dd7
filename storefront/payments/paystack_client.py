"""
Adaptateur Paystack: centralise les appels HTTP (httpx) vers l'API transaction.
- Authentification: Authorization: Bearer <secret>
- Aucune interprétation métier ici: statut HTTP + corps JSON (ou None) sont renvoyés tels quels.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from storefront.utils import http

logger = logging.getLogger(__name__)


@dataclass
class PaystackResponse:
    status_code: int
    ok: bool
    data: Optional[Any] = None


# module storefront.payments.paystack_client
async def _request(method: str, path: str, *, secret: str, json: Optional[Dict[str, Any]] = None) -> PaystackResponse:
    from storefront.config import PAYSTACK_BASE

    headers = {"Authorization": f"Bearer {secret}"}
    try:
        async with http.get_http_client() as client:
            resp = await client.request(method, f"{PAYSTACK_BASE}{path}", headers=headers, json=json)
    except httpx.HTTPError:
        # Réseau/timeout: pas de statut Paystack, l'appelant retombe sur 500
        logger.exception("paystack.%s %s: échec réseau", method.lower(), path)
        return PaystackResponse(status_code=500, ok=False, data=None)

    try:
        data = resp.json()
    except ValueError:
        data = None
    return PaystackResponse(status_code=resp.status_code or 500, ok=resp.is_success, data=data)

async def initialize(body: Dict[str, Any], *, secret: str) -> PaystackResponse:
    """
    POST /transaction/initialize
    body: {email, amount (kobo), currency, callback_url, channels, metadata}
    """
    return await _request("POST", "/transaction/initialize", secret=secret, json=body)

async def verify(reference: str, *, secret: str) -> PaystackResponse:
    """GET /transaction/verify/<référence encodée>"""
    return await _request("GET", f"/transaction/verify/{quote(reference, safe='')}", secret=secret)
