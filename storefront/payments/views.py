import json
import logging

from fastapi import APIRouter, BackgroundTasks, Depends, Request

from storefront.notifications.service import notify_order_paid
from storefront.payments import responses, service
from storefront.payments.exceptions import PaymentConfigError, PaymentInputError
from storefront.payments.schemas import paid_order_from_charge, parse_initialize_request
from storefront.payments.signature import SIGNATURE_HEADER, verify_signature
from storefront.utils.rate_limit import optional_rate_limit

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Payment functions"])

CHARGE_SUCCESS = "charge.success"


# module storefront.payments.views
@router.api_route(
    responses.INITIALIZE_PATH,
    methods=responses.ALL_METHODS,
    dependencies=[Depends(optional_rate_limit(times=10, seconds=60))],
)
async def paystack_initialize(request: Request):
    """
    Initialise une transaction Paystack (carte uniquement, NGN).
    - Entrée JSON: { "email", "amount" (naira, > 0), "callback_url", "metadata"? }
    - Ordre des contrôles: OPTIONS 204, méthode 405, secret 500, JSON 400, champs 400
    - Succès: { "authorization_url", "access_code", "reference" }
    - Échec Paystack: statut Paystack + { "error", "details" } (app_setup.exceptions)
    """
    path = responses.INITIALIZE_PATH
    if request.method == "OPTIONS":
        return responses.preflight(path)
    if request.method != "POST":
        return responses.method_not_allowed(path)

    service.require_secret()
    raw = await request.body()
    try:
        payload = json.loads(raw or b"{}")
    except ValueError:
        raise PaymentInputError("Invalid JSON body")

    req = parse_initialize_request(payload)
    result = await service.initialize_transaction(req)
    return responses.function_json(path, 200, result.model_dump())

@router.api_route(responses.VERIFY_PATH, methods=responses.ALL_METHODS)
async def paystack_verify(request: Request):
    """
    Vérifie une transaction: ?reference=<ref>
    - 400 sans référence (aucun appel Paystack)
    - Succès: corps Paystack complet, non modifié
    """
    path = responses.VERIFY_PATH
    if request.method != "GET":
        return responses.method_not_allowed(path)

    data = await service.verify_transaction(request.query_params.get("reference") or "")
    return responses.function_json(path, 200, data)

@router.api_route(responses.WEBHOOK_PATH, methods=responses.ALL_METHODS, include_in_schema=False)
async def paystack_webhook(request: Request, background_tasks: BackgroundTasks):
    """
    Webhook Paystack (texte brut).
    - Signature: HMAC-SHA512 du corps brut, sinon 401 sans effet de bord
    - Seul charge.success est traité; tout autre événement => 200 "ignored"
    - Les e-mails partent en tâche de fond: leurs échecs ne changent jamais la réponse "ok"
    """
    if request.method != "POST":
        return responses.text(405, "Method not allowed")
    try:
        secret = service.require_secret()
    except PaymentConfigError as e:
        return responses.text(500, e.message)

    raw = await request.body()
    if not verify_signature(secret, raw, request.headers.get(SIGNATURE_HEADER)):
        logger.warning("paystack.webhook invalid signature")
        return responses.text(401, "Invalid signature")

    try:
        payload = json.loads(raw)
    except ValueError:
        return responses.text(400, "Invalid JSON")

    event = payload.get("event") if isinstance(payload, dict) else None
    if event != CHARGE_SUCCESS:
        logger.info("paystack.webhook ignored event=%s", event)
        return responses.text(200, "ignored")

    order = paid_order_from_charge(payload.get("data"))
    background_tasks.add_task(notify_order_paid, order)
    logger.info("paystack.webhook charge.success reference=%s items=%s", order.reference, len(order.items))
    return responses.text(200, "ok")
