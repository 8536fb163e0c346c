import json

from pytest_bdd import given, parsers, scenarios, then, when
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from starlette.testclient import TestClient

from hookseed.main import create_app
from hookseed.models import Base
from hookseed.signature import EVENT_TYPE_HEADER
from tests.helpers.concurrency import send_concurrent_posts

scenarios("api.feature")


@given(parsers.parse("{n:d} webhooks have been seeded"))
def seeded(n, client):
    response = client.post(f"/seed?count={n}")
    assert response.status_code == 200, response.text


@when(parsers.parse('I POST to "{url}"'))
def post(url, client, context):
    context["response"] = client.post(url)


@when(parsers.parse('I GET "{url}"'))
def get(url, client, context):
    context["response"] = client.get(url)


@when("I fetch the first listed delivery")
def fetch_first(client, context):
    listing = client.get("/webhooks").json()
    context["response"] = client.get(f"/webhooks/{listing[0]['id']}")


@then(parsers.parse("the response should report {n:d} inserted webhooks"))
def check_inserted(n, context):
    data = context["response"].json()
    assert data["inserted"] == n
    assert sum(item["count"] for item in data["distribution"]) == n


@then(parsers.parse("the response should list {n:d} deliveries with event types"))
def check_listing(n, context):
    items = context["response"].json()
    assert len(items) == n
    for item in items:
        assert item["event_type"]
        assert item["method"] == "POST"
        assert item["pathname"] == "/stripe/webhook"


@then("the delivery body should match its event type header")
def check_detail(context):
    data = context["response"].json()
    body = json.loads(data["body"])
    assert body["type"] == data["headers"][EVENT_TYPE_HEADER] == data["event_type"]
    assert data["content_length"] == len(data["body"].encode("utf-8"))


@when(parsers.parse(
    "two apps seeded alike each receive {n:d} concurrent seed requests of {count:d} webhooks"
))
def concurrent_seeds(n, count, tmp_path, context):
    batches = []
    for name in ("first", "second"):
        engine = create_engine(
            f"sqlite:///{tmp_path / f'{name}.db'}",
            connect_args={"check_same_thread": False, "timeout": 30},
        )
        Base.metadata.create_all(engine)
        factory = sessionmaker(bind=engine, autocommit=False, autoflush=False)
        try:
            with TestClient(create_app(session_factory=factory, random_seed=11)) as c:
                responses = send_concurrent_posts(c, f"/seed?count={count}", n=n)
        finally:
            engine.dispose()
        for response in responses:
            assert not isinstance(response, Exception), response
            assert response.status_code == 200, response.text
        batches.append(sorted(
            tuple((item["event_type"], item["count"]) for item in r.json()["distribution"])
            for r in responses
        ))
    context["batches"] = batches


@then("both apps should have produced the same set of batches")
def check_same_batches(context):
    first, second = context["batches"]
    assert first == second
    assert len(set(first)) > 1
