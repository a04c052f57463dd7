"""
Orchestration des fonctions de paiement (sans HTTP entrant).
- initialize_transaction: naira -> kobo, devise et canal imposés, relais Paystack
- verify_transaction: relais du verify Paystack, corps renvoyé tel quel
La clé secrète est relue à chaque appel (import local) pour détecter une config absente par requête.
"""
import logging
from typing import Any, Dict

from storefront.payments import paystack_client
from storefront.payments.exceptions import PaymentConfigError, PaymentInputError, PaystackError
from storefront.payments.schemas import InitializeRequest, InitializeResult
from storefront.utils.money import to_minor_units

logger = logging.getLogger(__name__)

# module storefront.payments.service
def require_secret() -> str:
    from storefront.config import PAYSTACK_SECRET_KEY

    if not PAYSTACK_SECRET_KEY:
        raise PaymentConfigError("PAYSTACK_SECRET_KEY is not set")
    return PAYSTACK_SECRET_KEY

def build_initialize_body(req: InitializeRequest) -> Dict[str, Any]:
    from storefront.config import PAYSTACK_CHANNELS, PAYSTACK_CURRENCY

    return {
        "email": str(req.email),
        "amount": to_minor_units(req.amount),
        "currency": PAYSTACK_CURRENCY,
        "callback_url": req.callback_url,
        "channels": list(PAYSTACK_CHANNELS),
        "metadata": req.metadata,
    }

async def initialize_transaction(req: InitializeRequest) -> InitializeResult:
    """
    Démarre une transaction Paystack.
    - Succès: {authorization_url, access_code, reference}
    - Échec: PaystackError avec le statut Paystack relayé tel quel (500 sans réponse)
    """
    secret = require_secret()
    body = build_initialize_body(req)
    resp = await paystack_client.initialize(body, secret=secret)

    data = resp.data if isinstance(resp.data, dict) else None
    payload = (data or {}).get("data")
    if not resp.ok or data is None or data.get("status") is not True or not isinstance(payload, dict):
        status = resp.status_code or 500
        logger.warning("paystack.initialize failed status=%s", resp.status_code)
        raise PaystackError("Paystack initialize failed", status_code=status, details=resp.data)

    logger.info("paystack.initialize ok reference=%s amount=%s", payload.get("reference"), body["amount"])
    return InitializeResult(
        authorization_url=str(payload.get("authorization_url") or ""),
        access_code=str(payload.get("access_code") or ""),
        reference=str(payload.get("reference") or ""),
    )

async def verify_transaction(reference: str) -> Any:
    """
    Vérifie une transaction par référence.
    - Référence vide: PaymentInputError, aucun appel sortant.
    - Retourne le corps Paystack complet, non modifié.
    """
    secret = require_secret()
    ref = str(reference or "").strip()
    if not ref:
        raise PaymentInputError("reference is required")

    resp = await paystack_client.verify(ref, secret=secret)
    if not resp.ok or resp.data is None:
        logger.warning("paystack.verify failed reference=%s status=%s", ref, resp.status_code)
        status = resp.status_code or 500
        raise PaystackError("Paystack verify failed", status_code=status, details=resp.data)
    return resp.data

def is_payment_successful(verification: Any) -> bool:
    """Paiement confirmé ssi status == true ET data.status == "success"."""
    if not isinstance(verification, dict) or verification.get("status") is not True:
        return False
    data = verification.get("data")
    return isinstance(data, dict) and data.get("status") == "success"
