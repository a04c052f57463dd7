from fastapi import APIRouter, Request
from storefront.utils.rate_limit import rate_limit_health_info

router = APIRouter(prefix="/health", tags=["Health"])

@router.get("")
def health_root(request: Request):
    return {"ok": True, "rate_limit": rate_limit_health_info(request)}

@router.get("/config")
def health_config():
    """Présence (jamais la valeur) des secrets attendus."""
    from storefront import config

    return {
        "paystack": bool(config.PAYSTACK_SECRET_KEY),
        "email": bool(config.SENDGRID_API_KEY and config.ORDER_NOTIFY_FROM and config.ORDER_NOTIFY_TO),
    }
