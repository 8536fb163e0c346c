from collections.abc import Sequence
from typing import Protocol

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from hookseed.errors import StorageError
from hookseed.models import Webhook
from hookseed.schemas import DeliveryRecord


class WebhookStore(Protocol):
    def insert_many(self, records: Sequence[DeliveryRecord]) -> None:
        """Persist the whole batch or raise StorageError."""


class SqlWebhookStore:
    """Stores delivery records in the ``webhooks`` table, one transaction per batch."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def insert_many(self, records: Sequence[DeliveryRecord]) -> None:
        rows = [Webhook(**record.model_dump()) for record in records]
        try:
            self.db.add_all(rows)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StorageError(f"Bulk insert of {len(rows)} webhooks failed: {exc}") from exc

    def list_recent(self, limit: int = 20) -> list[Webhook]:
        stmt = select(Webhook).order_by(Webhook.created_at.desc()).limit(limit)
        return list(self.db.scalars(stmt))

    def get(self, webhook_id: str) -> Webhook | None:
        return self.db.get(Webhook, webhook_id)
