"""
Notifications de commande payée (webhook charge.success).

Politique d'envoi:
- Tâche d'arrière-plan exécutée après la réponse au webhook.
- Chaque e-mail est tenté indépendamment; un échec est journalisé (logger.exception)
  et ne modifie jamais la réponse renvoyée à Paystack.
- Config e-mail incomplète (SENDGRID_API_KEY, ORDER_NOTIFY_FROM, ORDER_NOTIFY_TO): log uniquement.
- Pas de dédoublonnage: une livraison rejouée renvoie les e-mails.
"""
import json
import logging
from dataclasses import dataclass
from typing import List, Optional

from storefront.notifications import sendgrid_client
from storefront.payments.schemas import PaidOrder
from storefront.utils.money import plain_number
from storefront.utils.templates import templates

logger = logging.getLogger(__name__)


@dataclass
class EmailMessage:
    to: str
    subject: str
    text: str
    html: str


@dataclass
class EmailSettings:
    api_key: str
    sender: str
    operator: str


# module storefront.notifications.service
def email_settings() -> Optional[EmailSettings]:
    from storefront.config import ORDER_NOTIFY_FROM, ORDER_NOTIFY_TO, SENDGRID_API_KEY

    if not (SENDGRID_API_KEY and ORDER_NOTIFY_FROM and ORDER_NOTIFY_TO):
        return None
    return EmailSettings(api_key=SENDGRID_API_KEY, sender=ORDER_NOTIFY_FROM, operator=ORDER_NOTIFY_TO)

def _billing_json(order: PaidOrder) -> str:
    return json.dumps(order.billing, indent=2, ensure_ascii=False)

def build_operator_email(order: PaidOrder, to: str) -> EmailMessage:
    """E-mail opérateur: référence, montant, client, lignes, facturation."""
    amount = plain_number(order.amount)
    lines = "\n".join(
        f"- {line.name} x{plain_number(line.qty)} (₦{plain_number(line.price)})" for line in order.items
    )
    text = (
        f"Payment received.\nReference: {order.reference}\nAmount: ₦{amount}\n\n"
        f"Customer: {order.customer_email}\n\nItems:\n{lines}\n\nBilling:\n{_billing_json(order)}"
    )
    html = templates.get_template("emails/order_operator.html").render(
        order=order,
        amount=amount,
        lines=[{"name": line.name, "qty": plain_number(line.qty)} for line in order.items],
        billing_json=_billing_json(order),
    )
    return EmailMessage(to=to, subject=f"New paid order {order.reference}", text=text, html=html)

def build_customer_email(order: PaidOrder) -> Optional[EmailMessage]:
    if not order.customer_email:
        return None
    html = templates.get_template("emails/order_customer.html").render(reference=order.reference)
    return EmailMessage(
        to=order.customer_email,
        subject=f"Order received — {order.reference}",
        text=f"Thanks! We received your payment.\nReference: {order.reference}",
        html=html,
    )

def build_order_emails(order: PaidOrder, settings: EmailSettings) -> List[EmailMessage]:
    messages = [build_operator_email(order, settings.operator)]
    customer = build_customer_email(order)
    if customer is not None:
        messages.append(customer)
    return messages

async def notify_order_paid(order: PaidOrder) -> int:
    """
    Envoie les e-mails de commande payée. Ne lève jamais.
    Retour: nombre d'e-mails effectivement acceptés par SendGrid.
    """
    settings = email_settings()
    if settings is None:
        logger.info(
            "Webhook received but email is not configured. "
            "Set SENDGRID_API_KEY, ORDER_NOTIFY_FROM, ORDER_NOTIFY_TO. reference=%s",
            order.reference,
        )
        return 0

    sent = 0
    for message in build_order_emails(order, settings):
        try:
            await sendgrid_client.send_email(
                api_key=settings.api_key,
                sender=settings.sender,
                to=message.to,
                subject=message.subject,
                text=message.text,
                html=message.html,
            )
            sent += 1
        except Exception:
            logger.exception("notifications: échec d'envoi reference=%s to=%s", order.reference, message.to)
    return sent
