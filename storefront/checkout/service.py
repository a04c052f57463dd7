"""
Orchestration du checkout.
- Préconditions contrôlées dans l'ordre, la première en échec gagne (message affiché dans le formulaire).
- Succès: Initialize Paystack avec {email, amount=total, callback_url, metadata}.
"""
import logging
from typing import Any, Dict, List, Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, field_validator

from storefront.cart.models import CartItem
from storefront.cart.totals import compute_totals
from storefront.payments import service as payments_service
from storefront.payments.exceptions import PaymentError
from storefront.payments.schemas import InitializeRequest

logger = logging.getLogger(__name__)

SUPPORTED_PAYMENT_METHOD = "card"
ORDER_COMPLETE_PATH = "/order-complete"
REQUIRED_BILLING_FIELDS = ("first_name", "last_name", "address", "city", "state", "phone")

MSG_UNSUPPORTED_METHOD = "Only debit/credit card payments via Paystack are supported right now."
MSG_INCOMPLETE_FORM = "Please complete all required fields to place your order."
MSG_TERMS = "Please accept the terms to place your order."
MSG_EMPTY_CART = "Your cart is empty. Add products before checking out."
MSG_EMAIL_REQUIRED = "Email address is required for payment."
MSG_PAYMENT_NOT_STARTED = "Payment could not be started. Please try again."


class CheckoutError(Exception):
    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class CheckoutRequest(BaseModel):
    """Champs du formulaire de facturation (tous optionnels ici, contrôlés par validate_checkout)."""
    first_name: str = ""
    last_name: str = ""
    company: str = ""
    address: str = ""
    address2: str = ""
    city: str = ""
    state: str = ""
    phone: str = ""
    email: str = ""
    notes: str = ""
    pay: str = SUPPORTED_PAYMENT_METHOD
    terms: bool = False

    @field_validator("*", mode="before")
    @classmethod
    def _none_to_default(cls, v, info):
        if info.field_name == "terms":
            # case à cocher HTML absente ou vide => non cochée
            return False if v in (None, "") else v
        if v is None:
            return ""
        return str(v).strip()

    def billing(self) -> Dict[str, str]:
        return self.model_dump(exclude={"pay", "terms"})


# module storefront.checkout.service
def _email_well_formed(email: str) -> bool:
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True

def validate_checkout(req: CheckoutRequest, items: List[CartItem]) -> None:
    """Lève CheckoutError (400) sur la première précondition non remplie."""
    if req.pay != SUPPORTED_PAYMENT_METHOD:
        raise CheckoutError(MSG_UNSUPPORTED_METHOD)
    if any(not getattr(req, field) for field in REQUIRED_BILLING_FIELDS):
        raise CheckoutError(MSG_INCOMPLETE_FORM)
    if req.email and not _email_well_formed(req.email):
        raise CheckoutError(MSG_INCOMPLETE_FORM)
    if not req.terms:
        raise CheckoutError(MSG_TERMS)
    if not items:
        raise CheckoutError(MSG_EMPTY_CART)
    if not req.email:
        raise CheckoutError(MSG_EMAIL_REQUIRED)

def build_order_metadata(req: CheckoutRequest, items: List[CartItem]) -> Dict[str, Any]:
    from storefront.config import ORDER_SOURCE

    return {
        "billing": req.billing(),
        "items": [item.model_dump() for item in items],
        "totals": compute_totals(items).model_dump(),
        "source": ORDER_SOURCE,
    }

def callback_url(origin: str) -> str:
    from storefront.config import BASE_URL

    return f"{(BASE_URL or origin).rstrip('/')}{ORDER_COMPLETE_PATH}"

async def place_order(req: CheckoutRequest, items: List[CartItem], origin: str) -> Dict[str, Optional[str]]:
    """
    Valide puis démarre le paiement.
    Retour: {"authorization_url", "reference"}; CheckoutError 502 si Paystack refuse.
    """
    validate_checkout(req, items)
    totals = compute_totals(items)
    try:
        init = InitializeRequest(
            email=req.email,
            amount=totals.total,
            callback_url=callback_url(origin),
            metadata=build_order_metadata(req, items),
        )
        result = await payments_service.initialize_transaction(init)
    except (PaymentError, ValueError):
        logger.exception("checkout: initialisation du paiement impossible")
        raise CheckoutError(MSG_PAYMENT_NOT_STARTED, status_code=502)

    if not result.authorization_url:
        raise CheckoutError(MSG_PAYMENT_NOT_STARTED, status_code=502)
    logger.info("checkout.placed reference=%s items=%s", result.reference, len(items))
    return {"authorization_url": result.authorization_url, "reference": result.reference}
