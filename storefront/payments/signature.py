"""
Signature des webhooks Paystack: en-tête x-paystack-signature = hex(HMAC-SHA512(secret, corps brut)).
Le corps doit être celui reçu, octet pour octet (pas de re-sérialisation JSON).
"""
import hashlib
import hmac
from typing import Optional

SIGNATURE_HEADER = "x-paystack-signature"

# module storefront.payments.signature
def compute_signature(secret: str, raw_body: bytes) -> str:
    return hmac.new(secret.encode("utf-8"), raw_body, hashlib.sha512).hexdigest()

def verify_signature(secret: str, raw_body: bytes, signature: Optional[str]) -> bool:
    if not secret or not signature:
        return False
    expected = compute_signature(secret, raw_body)
    return hmac.compare_digest(expected.encode("utf-8"), signature.encode("utf-8"))
