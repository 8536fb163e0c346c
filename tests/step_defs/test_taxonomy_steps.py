from pytest_bdd import parsers, scenarios, then, when

from hookseed.errors import UnclassifiedEventError
from hookseed.taxonomy import EVENT_TYPES, RULES, classify, validate_vocabulary, variant

scenarios("taxonomy.feature")


@when(parsers.parse('I classify the event type "{event_type}"'))
def classify_event(event_type, context):
    try:
        context["family"] = classify(event_type)
        context["variant"] = variant(event_type)
    except UnclassifiedEventError as exc:
        context["error"] = exc


@then(parsers.parse('the object family should be "{family}"'))
def check_family(family, context):
    assert context["family"].value == family


@then(parsers.parse('the variant should be "{expected}"'))
def check_variant(expected, context):
    assert context["variant"] == expected


@then("every event type in the vocabulary should match exactly one rule")
def check_vocabulary():
    validate_vocabulary()
    for event_type in EVENT_TYPES:
        matching = [rule for rule in RULES if rule.matches(event_type)]
        assert len(matching) == 1, f"{event_type} matched {matching}"


@then(parsers.parse("the vocabulary should contain {n:d} event types"))
def check_vocabulary_size(n):
    assert len(EVENT_TYPES) == n
    assert len(set(EVENT_TYPES)) == n
