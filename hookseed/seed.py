"""Batch orchestration: generate a fixed-size batch, store it, report the mix.

Generation finishes before the single bulk insert is issued; nothing is
written if any record fails to build.
"""
import json
import logging
from collections import Counter
from collections.abc import Sequence

from hookseed.delivery import build_delivery
from hookseed.randomness import RandomSource
from hookseed.schemas import DeliveryRecord
from hookseed.storage import WebhookStore
from hookseed.taxonomy import EVENT_TYPES

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 70


def generate_batch(
    count: int,
    source: RandomSource,
    event_types: Sequence[str] = EVENT_TYPES,
) -> list[DeliveryRecord]:
    """Build count deliveries, each for an event type drawn uniformly with replacement."""
    if count < 1:
        raise ValueError(f"Batch size must be positive, got {count}")
    return [build_delivery(source.pick(event_types), source) for _ in range(count)]


def seed_batch(
    count: int,
    store: WebhookStore,
    source: RandomSource,
    event_types: Sequence[str] = EVENT_TYPES,
) -> list[DeliveryRecord]:
    """
    Generate a batch and hand it to the store in one bulk insert.

    Raises:
        StorageError: If the store rejects the batch. Nothing is retried.
    """
    logger.info("Starting seed with %d webhook deliveries", count)
    records = generate_batch(count, source, event_types)

    logger.info("Inserting %d webhooks...", len(records))
    store.insert_many(records)

    logger.info("Seed completed: %d webhooks created", len(records))
    return records


def event_distribution(records: Sequence[DeliveryRecord]) -> list[tuple[str, int]]:
    """
    Count event types across records, most frequent first.

    The type is read back from each serialized body. Ties keep the order in
    which the event types were first seen.
    """
    counts = Counter(json.loads(record.body)["type"] for record in records)
    return sorted(counts.items(), key=lambda item: item[1], reverse=True)
