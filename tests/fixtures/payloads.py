import json
import uuid

from hookseed.schemas import API_VERSION


def make_event_body(
    event_type: str,
    data_object: dict | None = None,
    event_id: str | None = None,
    **overrides,
) -> dict:
    """Build a minimal event envelope dict."""
    body = {
        "id": event_id or f"evt_{uuid.uuid4().hex[:24]}",
        "object": "event",
        "api_version": API_VERSION,
        "created": 1_760_000_000,
        "type": event_type,
        "data": {"object": data_object or {}},
        "livemode": False,
        "pending_webhooks": 1,
        "request": {"id": f"req_{uuid.uuid4().hex[:14]}", "idempotency_key": str(uuid.uuid4())},
    }
    body.update(overrides)
    return body


def make_delivery_fields(event_type: str, ip: str = "3.18.12.63", **overrides) -> dict:
    """Build keyword arguments for a DeliveryRecord whose body has the given type."""
    body = json.dumps(make_event_body(event_type), indent=2)
    fields = {
        "pathname": "/stripe/webhook",
        "ip": ip,
        "content_length": len(body.encode("utf-8")),
        "headers": {"content-type": "application/json", "x-stripe-event-type": event_type},
        "body": body,
    }
    fields.update(overrides)
    return fields
