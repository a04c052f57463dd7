"""
Schémas d'entrée/sortie des fonctions de paiement.
Les valeurs par défaut des charges utiles Paystack sont résolues ici, une seule fois.
"""
from typing import Any, Dict, List, Union

from pydantic import BaseModel, EmailStr, Field, ValidationError, field_validator

from storefront.payments.exceptions import PaymentInputError
from storefront.utils.money import coerce_number, from_minor_units


class InitializeRequest(BaseModel):
    email: EmailStr
    amount: float = Field(gt=0, allow_inf_nan=False)
    callback_url: str = Field(min_length=1)
    metadata: Union[Dict[str, Any], List[Any]] = Field(default_factory=dict)

    @field_validator("email", "callback_url", mode="before")
    @classmethod
    def _strip(cls, v):
        return str(v or "").strip()

    @field_validator("metadata", mode="before")
    @classmethod
    def _metadata_object(cls, v):
        # Objet ou tableau JSON relayé tel quel; tout autre type => {}
        return v if isinstance(v, (dict, list)) else {}


class InitializeResult(BaseModel):
    authorization_url: str
    access_code: str = ""
    reference: str = ""


class OrderLine(BaseModel):
    name: str = "Item"
    qty: float = 1
    price: float = 0

    @classmethod
    def from_raw(cls, raw: Any) -> "OrderLine":
        raw = raw if isinstance(raw, dict) else {}
        return cls(
            name=str(raw.get("name") or "Item"),
            qty=coerce_number(raw.get("qty")) or 1,
            price=coerce_number(raw.get("price")) or 0,
        )


class PaidOrder(BaseModel):
    """Commande payée telle que relue dans un événement charge.success."""
    reference: str = ""
    customer_email: str = ""
    amount: float = 0
    billing: Dict[str, Any] = Field(default_factory=dict)
    items: List[OrderLine] = Field(default_factory=list)


# Ordre des contrôles et messages renvoyés au client
_FIELD_MESSAGES = [
    ("email", "email is invalid"),
    ("amount", "amount must be > 0"),
    ("callback_url", "callback_url is required"),
]

# module storefront.payments.schemas
def parse_initialize_request(payload: Any) -> InitializeRequest:
    """
    Valide le corps d'Initialize et lève PaymentInputError avec le premier message pertinent.
    - Corps non-objet: traité comme {}.
    """
    if not isinstance(payload, dict):
        payload = {}
    if not str(payload.get("email") or "").strip():
        raise PaymentInputError("email is required")
    try:
        return InitializeRequest.model_validate(payload)
    except ValidationError as exc:
        failed = {str(err["loc"][0]) for err in exc.errors() if err.get("loc")}
        for field, message in _FIELD_MESSAGES:
            if field in failed:
                raise PaymentInputError(message) from exc
        raise PaymentInputError("Invalid request body") from exc

def paid_order_from_charge(data: Any) -> PaidOrder:
    """
    data (événement charge.success) -> PaidOrder.
    - amount: kobo / 100
    - metadata.billing: objet, sinon {}
    - metadata.items: liste, sinon []
    """
    data = data if isinstance(data, dict) else {}
    customer = data.get("customer") if isinstance(data.get("customer"), dict) else {}
    meta = data.get("metadata") if isinstance(data.get("metadata"), dict) else {}
    billing = meta.get("billing") if isinstance(meta.get("billing"), dict) else {}
    items = meta.get("items") if isinstance(meta.get("items"), list) else []
    return PaidOrder(
        reference=str(data.get("reference") or ""),
        customer_email=str(customer.get("email") or ""),
        amount=from_minor_units(data.get("amount")),
        billing=billing,
        items=[OrderLine.from_raw(it) for it in items],
    )
