"""Per-family payload rules for the ``data.object`` field of an event.

Each synthesizer is a pure function of the event type, the shared monetary
fields and the random source. Status fields are looked up in the variant
tables below rather than derived from substring checks.
"""
from collections.abc import Callable
from typing import Any, NamedTuple

from hookseed.errors import UnclassifiedEventError
from hookseed.randomness import RandomSource
from hookseed.taxonomy import ObjectFamily, classify, variant

Payload = dict[str, Any]

AMOUNT_MIN = 1000
AMOUNT_MAX = 50000
CURRENCIES = ("brl", "usd", "eur")

# Identifier prefix and random token length per object kind.
ID_FORMATS: dict[str, tuple[str, int]] = {
    "charge": ("ch", 24),
    "payment_intent": ("pi", 24),
    "subscription": ("sub", 14),
    "invoice": ("in", 24),
    "checkout.session": ("cs", 60),
    "customer": ("cus", 14),
    "payout": ("po", 24),
    "payment_method": ("pm", 24),
    "plan": ("plan", 14),
    "product": ("prod", 14),
    "subscription_item": ("si", 14),
    "price": ("price", 14),
    "event": ("evt", 24),
    "request": ("req", 14),
}


class SharedFields(NamedTuple):
    amount: int
    currency: str


class ChargeStatus(NamedTuple):
    status: str
    paid: bool


class InvoiceStatus(NamedTuple):
    status: str
    collected: bool


class CheckoutStatus(NamedTuple):
    payment_status: str
    status: str


CHARGE_STATUSES: dict[str, ChargeStatus] = {
    "succeeded": ChargeStatus("succeeded", True),
    "failed": ChargeStatus("failed", False),
    "refunded": ChargeStatus("refunded", False),
}

PAYMENT_INTENT_STATUSES: dict[str, str] = {
    "succeeded": "succeeded",
    "payment_failed": "failed",
    "canceled": "canceled",
}
PAYMENT_INTENT_DEFAULT = "processing"

SUBSCRIPTION_STATUSES: dict[str, str] = {
    "deleted": "canceled",
}
SUBSCRIPTION_DEFAULT = "active"

INVOICE_STATUSES: dict[str, InvoiceStatus] = {
    "paid": InvoiceStatus("paid", True),
    "payment_failed": InvoiceStatus("open", False),
}
INVOICE_DEFAULT = InvoiceStatus("draft", False)

CHECKOUT_STATUSES: dict[str, CheckoutStatus] = {
    "completed": CheckoutStatus("paid", "complete"),
    "expired": CheckoutStatus("unpaid", "expired"),
}

PAYOUT_STATUSES: dict[str, str] = {
    "paid": "paid",
    "failed": "failed",
}
PAYOUT_DEFAULT = "pending"


def make_id(kind: str, source: RandomSource) -> str:
    prefix, length = ID_FORMATS[kind]
    return f"{prefix}_{source.alphanumeric(length)}"


def lookup_outcome(table: dict[str, Any], event_type: str) -> Any:
    """Status entry for a subtype whose family has no default, e.g. "charge.captured"."""
    try:
        return table[variant(event_type)]
    except KeyError:
        raise UnclassifiedEventError(event_type) from None


def draw_shared_fields(source: RandomSource) -> SharedFields:
    return SharedFields(
        amount=source.integer(AMOUNT_MIN, AMOUNT_MAX),
        currency=source.pick(CURRENCIES),
    )


# ── Family rules ───────────────────────────────────────────────────────────────

def charge_payload(event_type: str, shared: SharedFields, source: RandomSource) -> Payload:
    outcome = lookup_outcome(CHARGE_STATUSES, event_type)
    return {
        "id": make_id("charge", source),
        "object": "charge",
        "amount": shared.amount,
        "currency": shared.currency,
        "customer": make_id("customer", source),
        "description": source.product_name(),
        "paid": outcome.paid,
        "status": outcome.status,
        "payment_method": make_id("payment_method", source),
        "receipt_email": source.email(),
        "receipt_url": f"https://pay.stripe.com/receipts/{source.alphanumeric(40)}",
    }


def payment_intent_payload(event_type: str, shared: SharedFields, source: RandomSource) -> Payload:
    return {
        "id": make_id("payment_intent", source),
        "object": "payment_intent",
        "amount": shared.amount,
        "currency": shared.currency,
        "customer": make_id("customer", source),
        "description": source.product_name(),
        "status": PAYMENT_INTENT_STATUSES.get(variant(event_type), PAYMENT_INTENT_DEFAULT),
        "payment_method": make_id("payment_method", source),
        "receipt_email": source.email(),
    }


def subscription_payload(event_type: str, shared: SharedFields, source: RandomSource) -> Payload:
    return {
        "id": make_id("subscription", source),
        "object": "subscription",
        "customer": make_id("customer", source),
        "status": SUBSCRIPTION_STATUSES.get(variant(event_type), SUBSCRIPTION_DEFAULT),
        "current_period_start": source.past(),
        "current_period_end": source.future(),
        "plan": {
            "id": make_id("plan", source),
            "amount": shared.amount,
            "currency": shared.currency,
            "interval": source.pick(("month", "year")),
            "product": make_id("product", source),
        },
        "items": {
            "data": [
                {
                    "id": make_id("subscription_item", source),
                    "price": {
                        "id": make_id("price", source),
                        "product": source.product_name(),
                        "unit_amount": shared.amount,
                        "currency": shared.currency,
                    },
                },
            ],
        },
    }


def invoice_payload(event_type: str, shared: SharedFields, source: RandomSource) -> Payload:
    outcome = INVOICE_STATUSES.get(variant(event_type), INVOICE_DEFAULT)
    return {
        "id": make_id("invoice", source),
        "object": "invoice",
        "amount_due": shared.amount,
        "amount_paid": shared.amount if outcome.collected else 0,
        "currency": shared.currency,
        "customer": make_id("customer", source),
        "customer_email": source.email(),
        "status": outcome.status,
        "hosted_invoice_url": f"https://invoice.stripe.com/{source.alphanumeric(40)}",
        "invoice_pdf": f"https://pay.stripe.com/invoice/{source.alphanumeric(40)}/pdf",
        "subscription": make_id("subscription", source),
    }


def checkout_session_payload(event_type: str, shared: SharedFields, source: RandomSource) -> Payload:
    outcome = lookup_outcome(CHECKOUT_STATUSES, event_type)
    return {
        "id": make_id("checkout.session", source),
        "object": "checkout.session",
        "amount_total": shared.amount,
        "currency": shared.currency,
        "customer": make_id("customer", source),
        "customer_email": source.email(),
        "payment_status": outcome.payment_status,
        "status": outcome.status,
        "success_url": f"https://{source.domain_name()}/success",
        "cancel_url": f"https://{source.domain_name()}/cancel",
    }


def customer_payload(event_type: str, shared: SharedFields, source: RandomSource) -> Payload:
    city, state, country = source.city()
    return {
        "id": make_id("customer", source),
        "object": "customer",
        "email": source.email(),
        "name": source.full_name(),
        "phone": source.phone(),
        "address": {
            "city": city,
            "country": country,
            "line1": source.street_address(),
            "postal_code": source.postal_code(),
            "state": state,
        },
    }


def payout_payload(event_type: str, shared: SharedFields, source: RandomSource) -> Payload:
    return {
        "id": make_id("payout", source),
        "object": "payout",
        "amount": shared.amount,
        "currency": shared.currency,
        "arrival_date": source.future(),
        "status": PAYOUT_STATUSES.get(variant(event_type), PAYOUT_DEFAULT),
        "method": "standard",
        "type": "bank_account",
    }


def payment_method_payload(event_type: str, shared: SharedFields, source: RandomSource) -> Payload:
    return {
        "id": make_id("payment_method", source),
        "object": "payment_method",
        "type": source.pick(("card", "boleto", "pix")),
        "customer": make_id("customer", source),
        "card": {
            "brand": source.pick(("visa", "mastercard", "amex")),
            "last4": source.card_last4(),
            "exp_month": source.integer(1, 12),
            "exp_year": source.integer(2024, 2030),
        },
    }


Synthesizer = Callable[[str, SharedFields, RandomSource], Payload]

SYNTHESIZERS: dict[ObjectFamily, Synthesizer] = {
    ObjectFamily.CHARGE: charge_payload,
    ObjectFamily.PAYMENT_INTENT: payment_intent_payload,
    ObjectFamily.SUBSCRIPTION: subscription_payload,
    ObjectFamily.INVOICE: invoice_payload,
    ObjectFamily.CHECKOUT_SESSION: checkout_session_payload,
    ObjectFamily.CUSTOMER: customer_payload,
    ObjectFamily.PAYOUT: payout_payload,
    ObjectFamily.PAYMENT_METHOD: payment_method_payload,
}


def synthesize(event_type: str, shared: SharedFields, source: RandomSource) -> Payload:
    """Build the ``data.object`` payload for event_type.

    Raises UnclassifiedEventError if event_type belongs to no family.
    """
    return SYNTHESIZERS[classify(event_type)](event_type, shared, source)
