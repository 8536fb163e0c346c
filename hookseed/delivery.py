import json
import logging

from hookseed.errors import SerializationError
from hookseed.randomness import RandomSource
from hookseed.schemas import DeliveryRecord, EventData, EventEnvelope, EventRequest
from hookseed.signature import EVENT_TYPE_HEADER, SIGNATURE_HEADER, random_signature
from hookseed.synthesizers import draw_shared_fields, make_id, synthesize

logger = logging.getLogger(__name__)

WEBHOOK_PATH = "/stripe/webhook"
CONTENT_TYPE = "application/json"
USER_AGENT = "Stripe/1.0 (+https://stripe.com/docs/webhooks)"
RECENT_DAYS = 30

# Known provider egress addresses.
SOURCE_IPS = (
    "3.18.12.63",
    "3.130.192.231",
    "13.235.14.237",
    "35.154.171.200",
    "52.89.214.238",
    "54.187.174.169",
    "54.187.205.235",
    "54.187.216.72",
)


def build_envelope(event_type: str, source: RandomSource) -> EventEnvelope:
    """Synthesize a payload for event_type and wrap it in an event envelope.

    Raises UnclassifiedEventError if event_type belongs to no family.
    """
    shared = draw_shared_fields(source)
    payload = synthesize(event_type, shared, source)
    return EventEnvelope(
        id=make_id("event", source),
        created=source.recent(RECENT_DAYS),
        type=event_type,
        data=EventData(object=payload),
        request=EventRequest(
            id=make_id("request", source),
            idempotency_key=source.uuid4(),
        ),
    )


def serialize_envelope(envelope: EventEnvelope) -> str:
    try:
        return json.dumps(envelope.model_dump(mode="json"), indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Cannot serialize event {envelope.id}: {exc}") from exc


def build_delivery(event_type: str, source: RandomSource) -> DeliveryRecord:
    """
    Build the stored HTTP delivery for one synthetic event.

    Pure given the random source: no I/O happens here.
    """
    envelope = build_envelope(event_type, source)
    body = serialize_envelope(envelope)
    headers = {
        "content-type": CONTENT_TYPE,
        SIGNATURE_HEADER: random_signature(source),
        "user-agent": USER_AGENT,
        "accept": "*/*",
        "accept-encoding": "gzip, deflate",
        EVENT_TYPE_HEADER: envelope.type,
    }
    logger.debug("Built delivery for %s (%s)", envelope.type, envelope.id)
    return DeliveryRecord(
        pathname=WEBHOOK_PATH,
        ip=source.pick(SOURCE_IPS),
        content_type=CONTENT_TYPE,
        content_length=len(body.encode("utf-8")),
        headers=headers,
        body=body,
    )
