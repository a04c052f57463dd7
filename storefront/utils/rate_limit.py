from typing import Optional, Dict, Any
from fastapi import Request, Response, HTTPException
import os
import time


def client_ip(request: Request) -> str:
    # IP de la socket; derrière un proxy de confiance, uvicorn --proxy-headers la réécrit (FORWARDED_ALLOW_IPS)
    return request.client.host if request.client else "local"

def rate_limit_key(request: Request) -> str:
    return f"ip:{client_ip(request)}:{request.url.path}"

def optional_rate_limit(times: int, seconds: int):
    """
    Dépendance de limitation de débit (par IP et par chemin).
    - LOCAL_RATE_LIMIT_FALLBACK=1: compteur en mémoire (app.state)
    - sinon fastapi-limiter (Redis) si initialisé; jamais de 429 si Redis est indisponible
    """
    async def _dep(request: Request, response: Response):
        # Forcer le fallback mémoire en DEV si demandé
        if os.getenv("LOCAL_RATE_LIMIT_FALLBACK") == "1":
            now = time.time()
            key = rate_limit_key(request)
            store = getattr(request.app.state, "_rl_store", {})
            hits = [t for t in store.get(key, []) if now - t < seconds]
            if len(hits) >= times:
                raise HTTPException(status_code=429, detail="Too Many Requests")
            hits.append(now)
            store[key] = hits
            request.app.state._rl_store = store
            return

        # Respecter le flag global
        if getattr(request.app.state, "rate_limit_enabled", None) is False:
            return

        try:
            from fastapi_limiter.depends import RateLimiter
            async def _identifier(req: Request) -> str:
                return rate_limit_key(req)
            return await RateLimiter(times=times, seconds=seconds, identifier=_identifier)(request, response)
        except HTTPException:
            raise
        except Exception:
            # Redis injoignable ou limiter non initialisé: pas de 429
            return
    return _dep

def rate_limit_health_info(request: Request) -> Dict[str, Any]:
    enabled = getattr(request.app.state, "rate_limit_enabled", None)

    limiter_ready = False
    backend: Optional[str] = None
    try:
        from fastapi_limiter import FastAPILimiter
        limiter_ready = getattr(FastAPILimiter, "redis", None) is not None
        backend = "redis" if limiter_ready else None
    except Exception:
        limiter_ready = False
        backend = None

    if os.getenv("LOCAL_RATE_LIMIT_FALLBACK") == "1":
        backend = backend or "memory"

    return {
        "enabled": (bool(enabled) if enabled is not None else None),
        "ready": limiter_ready,
        "backend": backend,
    }
