"""Shared BDD step definitions for all feature files.

Step definitions live here (not in common_steps.py) because pytest-bdd
registers step fixtures in the caller module's locals. Only conftest.py
modules are auto-discovered by pytest, so steps used by more than one
feature MUST be defined here.

All parametric steps use parsers.parse(); plain strings match exactly.
"""
from pytest_bdd import given, parsers, then

from hookseed.errors import UnclassifiedEventError
from hookseed.models import Base
from tests.step_defs.common_steps import count_webhooks


# ── Given ──────────────────────────────────────────────────────────────────────

@given("the webhooks table is missing")
def drop_webhooks_table(db_engine):
    Base.metadata.drop_all(db_engine)


# ── Then ───────────────────────────────────────────────────────────────────────

@then(parsers.parse('classification should fail for "{event_type}"'))
def check_classification_failed(event_type, context):
    error = context.get("error")
    assert isinstance(error, UnclassifiedEventError), f"Expected UnclassifiedEventError, got {error!r}"
    assert error.event_type == event_type


@then(parsers.parse("{n:d} webhooks should be stored"))
def check_stored_count(n, db_session):
    db_session.expire_all()
    assert count_webhooks(db_session) == n


@then(parsers.parse("the response status should be {code:d}"))
def check_status_code(code, context):
    assert context["response"].status_code == code, (
        f"Expected {code}, got {context['response'].status_code}: "
        f"{context['response'].text}"
    )
