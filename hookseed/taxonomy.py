from enum import Enum
from typing import NamedTuple

from hookseed.errors import UnclassifiedEventError


class ObjectFamily(str, Enum):
    CHARGE = "charge"
    PAYMENT_INTENT = "payment_intent"
    SUBSCRIPTION = "subscription"
    INVOICE = "invoice"
    CHECKOUT_SESSION = "checkout.session"
    CUSTOMER = "customer"
    PAYOUT = "payout"
    PAYMENT_METHOD = "payment_method"


EVENT_TYPES: tuple[str, ...] = (
    "charge.succeeded",
    "charge.failed",
    "charge.refunded",
    "payment_intent.succeeded",
    "payment_intent.payment_failed",
    "payment_intent.created",
    "payment_intent.canceled",
    "payment_method.attached",
    "payment_method.detached",
    "customer.created",
    "customer.updated",
    "customer.deleted",
    "customer.subscription.created",
    "customer.subscription.updated",
    "customer.subscription.deleted",
    "customer.subscription.trial_will_end",
    "invoice.created",
    "invoice.finalized",
    "invoice.paid",
    "invoice.payment_failed",
    "invoice.payment_action_required",
    "checkout.session.completed",
    "checkout.session.expired",
    "payout.created",
    "payout.paid",
    "payout.failed",
)


class Rule(NamedTuple):
    prefix: str
    family: ObjectFamily
    excludes: str | None = None

    def matches(self, event_type: str) -> bool:
        if not event_type.startswith(self.prefix):
            return False
        return self.excludes is None or self.excludes not in event_type


# Evaluated top to bottom: "customer.subscription." must precede "customer.".
RULES: tuple[Rule, ...] = (
    Rule("charge.", ObjectFamily.CHARGE),
    Rule("payment_intent.", ObjectFamily.PAYMENT_INTENT),
    Rule("customer.subscription.", ObjectFamily.SUBSCRIPTION),
    Rule("invoice.", ObjectFamily.INVOICE),
    Rule("checkout.session.", ObjectFamily.CHECKOUT_SESSION),
    Rule("customer.", ObjectFamily.CUSTOMER, excludes="subscription"),
    Rule("payout.", ObjectFamily.PAYOUT),
    Rule("payment_method.", ObjectFamily.PAYMENT_METHOD),
)


def match(event_type: str) -> Rule:
    """
    Return the first rule matching event_type.

    Raises UnclassifiedEventError if no rule matches.
    """
    for rule in RULES:
        if rule.matches(event_type):
            return rule
    raise UnclassifiedEventError(event_type)


def classify(event_type: str) -> ObjectFamily:
    return match(event_type).family


def variant(event_type: str) -> str:
    """Subtype of event_type after its family prefix, e.g. "payment_failed"."""
    return event_type[len(match(event_type).prefix):]


def validate_vocabulary(event_types: tuple[str, ...] = EVENT_TYPES) -> None:
    """
    Check that every event type maps to exactly one rule.

    Raises UnclassifiedEventError for unmatched types and ValueError for
    types claimed by more than one rule.
    """
    for event_type in event_types:
        claimed = [rule for rule in RULES if rule.matches(event_type)]
        if not claimed:
            raise UnclassifiedEventError(event_type)
        if len(claimed) > 1:
            families = ", ".join(rule.family.value for rule in claimed)
            raise ValueError(f"Event type '{event_type}' is ambiguous: {families}.")
