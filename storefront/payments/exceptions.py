"""
Erreurs du domaine paiement, converties en réponses {error, details?}
par app_setup.exceptions.
"""
from typing import Any


class PaymentError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_body(self) -> dict:
        return {"error": self.message}


class PaymentConfigError(PaymentError):
    """Configuration manquante (ex: PAYSTACK_SECRET_KEY). Non rejouable côté client."""
    status_code = 500


class PaymentInputError(PaymentError):
    status_code = 400


class PaystackError(PaymentError):
    """Réponse Paystack en échec: statut et corps bruts relayés à l'appelant."""

    def __init__(self, message: str, status_code: int = 500, details: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details

    def to_body(self) -> dict:
        return {"error": self.message, "details": self.details}
