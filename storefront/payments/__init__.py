"""
Module 'payments' (feature-first): point d'entrée public.
Réunit client Paystack, signature webhook, schémas et services.
"""

from .exceptions import PaymentError, PaymentConfigError, PaymentInputError, PaystackError
from .paystack_client import PaystackResponse, initialize, verify
from .schemas import InitializeRequest, InitializeResult, OrderLine, PaidOrder, paid_order_from_charge, parse_initialize_request
from .service import build_initialize_body, initialize_transaction, is_payment_successful, require_secret, verify_transaction
from .signature import SIGNATURE_HEADER, compute_signature, verify_signature

__all__ = [
    # exceptions
    "PaymentError",
    "PaymentConfigError",
    "PaymentInputError",
    "PaystackError",
    # paystack
    "PaystackResponse",
    "initialize",
    "verify",
    # schemas
    "InitializeRequest",
    "InitializeResult",
    "OrderLine",
    "PaidOrder",
    "paid_order_from_charge",
    "parse_initialize_request",
    # services
    "build_initialize_body",
    "initialize_transaction",
    "is_payment_successful",
    "require_secret",
    "verify_transaction",
    # signature
    "SIGNATURE_HEADER",
    "compute_signature",
    "verify_signature",
]
