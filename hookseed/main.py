import json
import logging
import threading

from fastapi import Depends, FastAPI, Query, Request, Response
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session, sessionmaker

from hookseed.config import get_settings
from hookseed.database import get_db, init_db, make_engine, make_session_factory
from hookseed.errors import StorageError
from hookseed.models import Webhook
from hookseed.randomness import RandomSource
from hookseed.schemas import DeliveryDetail, DeliverySummary, EventCount, SeedResult
from hookseed.seed import event_distribution, seed_batch
from hookseed.signature import EVENT_TYPE_HEADER
from hookseed.storage import SqlWebhookStore

logger = logging.getLogger(__name__)

MAX_BATCH_SIZE = 10_000
MAX_LIST_LIMIT = 500


def create_app(
    session_factory: sessionmaker[Session] | None = None,
    random_seed: int | None = None,
) -> FastAPI:
    application = FastAPI(title="Hookseed Webhook Inspector")

    if session_factory is None:
        engine = make_engine()
        init_db(engine)
        session_factory = make_session_factory(engine)
    application.state.session_factory = session_factory
    application.state.seed_lock = threading.Lock()
    application.state.seeds = RandomSource(
        seed=random_seed if random_seed is not None else get_settings().random_seed
    )

    @application.post("/seed", response_model=SeedResult)
    def seed(
        request: Request,
        count: int = Query(default=get_settings().batch_size, ge=1, le=MAX_BATCH_SIZE),
        db: Session = Depends(get_db),
    ) -> Response | SeedResult:
        with request.app.state.seed_lock:
            source = request.app.state.seeds.spawn()
        store = SqlWebhookStore(db)
        try:
            records = seed_batch(count, store, source)
        except StorageError as exc:
            logger.error("Seed failed: %s", exc)
            return JSONResponse(status_code=503, content={"error": str(exc)})

        return SeedResult(
            inserted=len(records),
            distribution=[
                EventCount(event_type=event_type, count=n)
                for event_type, n in event_distribution(records)
            ],
        )

    @application.get("/webhooks", response_model=list[DeliverySummary])
    def list_webhooks(
        limit: int = Query(default=20, ge=1, le=MAX_LIST_LIMIT),
        db: Session = Depends(get_db),
    ) -> list[DeliverySummary]:
        return [_summary(row) for row in SqlWebhookStore(db).list_recent(limit)]

    @application.get("/webhooks/{webhook_id}", response_model=DeliveryDetail)
    def get_webhook(
        webhook_id: str,
        db: Session = Depends(get_db),
    ) -> Response | DeliveryDetail:
        row = SqlWebhookStore(db).get(webhook_id)
        if row is None:
            return JSONResponse(
                status_code=404,
                content={"error": f"Webhook '{webhook_id}' not found"},
            )
        return DeliveryDetail(
            **_summary(row).model_dump(),
            content_type=row.content_type or "",
            content_length=row.content_length or 0,
            headers=row.headers,
            body=row.body or "",
        )

    return application


def _summary(row: Webhook) -> DeliverySummary:
    """Summary fields for a stored webhook; the event type comes from its header or body."""
    event_type = row.headers.get(EVENT_TYPE_HEADER)
    if event_type is None and row.body:
        try:
            event_type = json.loads(row.body).get("type")
        except (json.JSONDecodeError, AttributeError):
            event_type = None
    return DeliverySummary(
        id=row.id,
        method=row.method,
        pathname=row.pathname,
        ip=row.ip,
        status_code=row.status_code,
        event_type=event_type,
        created_at=row.created_at,
    )
