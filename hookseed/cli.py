"""Typer application for seeding the webhook-inspection database.

Entry point: ``hookseed`` (configured via pyproject.toml console_scripts).
"""

import logging

import typer
from rich.console import Console
from rich.table import Table
from sqlalchemy.exc import SQLAlchemyError

from hookseed.config import get_settings
from hookseed.database import init_db, make_engine, make_session_factory
from hookseed.errors import StorageError
from hookseed.randomness import RandomSource
from hookseed.schemas import DeliveryRecord
from hookseed.seed import event_distribution, seed_batch
from hookseed.storage import SqlWebhookStore
from hookseed.taxonomy import EVENT_TYPES, classify

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="hookseed",
    help="Generate synthetic Stripe webhook deliveries for the inspection tool.",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def main(
    log_level: str = typer.Option(None, help="Logging level (defaults to HOOKSEED_LOG_LEVEL)."),
) -> None:
    logging.basicConfig(
        level=(log_level or get_settings().log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command(name="seed", help="Generate a batch of deliveries and bulk-insert it.")
def seed_cmd(
    count: int = typer.Option(None, "--count", "-n", min=1, help="Number of deliveries."),
    seed: int = typer.Option(None, "--seed", help="Random seed for a reproducible batch."),
    database_url: str = typer.Option(None, help="SQLAlchemy database URL."),
) -> None:
    settings = get_settings()
    count = count or settings.batch_size
    source = RandomSource(seed=seed if seed is not None else settings.random_seed)

    try:
        records = _store_batch(count, source, database_url)
    except StorageError as exc:
        logger.error("Seed failed: %s", exc)
        raise typer.Exit(code=1)

    # The batch is committed; reporting problems must not change the exit code.
    try:
        _print_distribution(records)
    except Exception:  # noqa: BLE001
        logger.exception("Could not print the event distribution")


def _store_batch(count: int, source: RandomSource, database_url: str | None) -> list[DeliveryRecord]:
    try:
        engine = make_engine(database_url)
    except SQLAlchemyError as exc:
        raise StorageError(f"Invalid database URL: {exc}") from exc

    try:
        init_db(engine)
        db = make_session_factory(engine)()
        try:
            return seed_batch(count, SqlWebhookStore(db), source)
        finally:
            db.close()
    finally:
        engine.dispose()


def _print_distribution(records: list[DeliveryRecord]) -> None:
    console = Console()
    table = Table(title=f"Event distribution ({len(records)} webhooks)")
    table.add_column("Event type")
    table.add_column("Count", justify="right")
    for event_type, n in event_distribution(records):
        table.add_row(event_type, str(n))
    console.print(table)


@app.command(name="events", help="List the event types and their object family.")
def events_cmd() -> None:
    console = Console()
    table = Table(title="Event types")
    table.add_column("Event type")
    table.add_column("Family")
    for event_type in EVENT_TYPES:
        table.add_row(event_type, classify(event_type).value)
    console.print(table)
