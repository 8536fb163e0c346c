from collections.abc import Sequence

from hookseed.schemas import DeliveryRecord


class RecordingStore:
    """Wraps a store and records every bulk insert it forwards."""

    def __init__(self, inner) -> None:
        self.inner = inner
        self.calls: list[int] = []

    def insert_many(self, records: Sequence[DeliveryRecord]) -> None:
        self.calls.append(len(records))
        self.inner.insert_many(records)
