"""
Vérification au retour de Paystack (page order-complete).
- Référence lue dans ?reference= ou ?trxref=
- Paiement confirmé => panier vidé; sinon le panier est conservé
"""
import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping

from storefront.cart.service import CartManager
from storefront.payments import service as payments_service
from storefront.payments.exceptions import PaymentError

logger = logging.getLogger(__name__)

STATE_COMPLETE = "complete"
STATE_CONFIRMED = "confirmed"
STATE_UNCONFIRMED = "unconfirmed"


@dataclass
class OrderStatus:
    state: str
    title: str
    message: str
    reference: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# module storefront.orders.service
def reference_from_query(params: Mapping[str, str]) -> str:
    return str(params.get("reference") or params.get("trxref") or "").strip()

async def complete_order(reference: str, cart: CartManager) -> OrderStatus:
    if not reference:
        return OrderStatus(STATE_COMPLETE, "Order complete", "Thanks — your order has been placed.")

    try:
        verification = await payments_service.verify_transaction(reference)
        confirmed = payments_service.is_payment_successful(verification)
    except PaymentError:
        logger.exception("order_complete: vérification impossible reference=%s", reference)
        confirmed = False

    if confirmed:
        cart.clear()
        logger.info("order_complete.confirmed reference=%s", reference)
        return OrderStatus(
            STATE_CONFIRMED,
            "Order complete",
            "Payment confirmed. We’ve emailed your order details and will contact you shortly.",
            reference,
        )

    logger.info("order_complete.unconfirmed reference=%s", reference)
    return OrderStatus(
        STATE_UNCONFIRMED,
        "Payment not confirmed",
        "We couldn’t verify your payment yet. If you were charged, please contact support with your reference.",
        reference,
    )
