"""
Adaptateur SendGrid (API v3 mail/send) via httpx.
"""
import logging
from typing import Any, Dict

from storefront.utils import http

logger = logging.getLogger(__name__)


class EmailDeliveryError(Exception):
    """Réponse non-2xx de SendGrid."""


# module storefront.notifications.sendgrid_client
def build_payload(*, sender: str, to: str, subject: str, text: str, html: str) -> Dict[str, Any]:
    return {
        "personalizations": [{"to": [{"email": to}]}],
        "from": {"email": sender},
        "subject": subject,
        "content": [
            {"type": "text/plain", "value": text or ""},
            {"type": "text/html", "value": html or ""},
        ],
    }

async def send_email(*, api_key: str, sender: str, to: str, subject: str, text: str, html: str) -> None:
    """
    Envoie un e-mail (texte + HTML).
    - Lève EmailDeliveryError si SendGrid ne répond pas 2xx.
    """
    from storefront.config import SENDGRID_BASE

    payload = build_payload(sender=sender, to=to, subject=subject, text=text, html=html)
    headers = {"Authorization": f"Bearer {api_key}"}
    async with http.get_http_client() as client:
        resp = await client.post(f"{SENDGRID_BASE}/v3/mail/send", headers=headers, json=payload)
    if not resp.is_success:
        raise EmailDeliveryError(f"SendGrid failed: {resp.status_code} {resp.text}")
    logger.info("sendgrid.sent to=%s subject=%s", to, subject)
