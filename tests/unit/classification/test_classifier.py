"""Tests for the rule-based intent classifier."""

from datetime import datetime

import pytest

from switchboard.bootstrap import Registries
from switchboard.classification import (
    ClassificationRequest,
    IntentClassifier,
    entity_overlap,
)
from switchboard.config.models import ClassifierConfig
from switchboard.errors import NoIntentMatch
from switchboard.extraction import extract_entities
from switchboard.patterns import HitKind, PatternPool
from switchboard.taxonomy import Domain, EntityType
from tests.factories import IntentFactory, build_registries


@pytest.fixture(scope="module")
def small() -> Registries:
    return build_registries()


@pytest.fixture
def classifier(small: Registries) -> IntentClassifier:
    return IntentClassifier(small.taxonomy, small.patterns)


@pytest.fixture
def shipped(registries: Registries) -> IntentClassifier:
    return IntentClassifier(registries.taxonomy, registries.patterns)


def _request(text: str, now: datetime, route: str | None = None) -> ClassificationRequest:
    return ClassificationRequest(text=text, route=route, now=now)


class TestEntityOverlap:
    """Tests for the required-entity overlap signal."""

    def test_no_requirements_is_full_overlap(self, now: datetime) -> None:
        assert entity_overlap(IntentFactory.create(), ()) == 1.0

    def test_partial_overlap(self, now: datetime) -> None:
        intent = IntentFactory.create(required_entities=(EntityType.JOB_ID, EntityType.DATE))
        entities = extract_entities("job 4417 please", now).entities

        assert entity_overlap(intent, entities) == 0.5


class TestRanking:
    """Candidates rank by strength, route agreement, entity overlap, then order."""

    def test_phrase_hit_with_entities(self, classifier: IntentClassifier, now: datetime) -> None:
        result = classifier.classify(_request("schedule the job for friday", now))

        assert result.intent_id == "schedule_job"
        assert result.domain == Domain.SCHEDULING
        assert result.match_kind == HitKind.PHRASE
        assert result.matched_pattern_id == "schedule_job"
        assert result.confidence == pytest.approx(0.75)
        assert result.missing_required == ()
        assert result.entities[0].value == "2025-06-20"

    def test_route_agreement_raises_confidence(self, classifier: IntentClassifier, now: datetime) -> None:
        result = classifier.classify(_request("schedule the job for friday", now, route="/calendar/week"))

        assert result.route_domain == Domain.SCHEDULING
        assert result.confidence == pytest.approx(1.0)

    def test_keyword_hit(self, classifier: IntentClassifier, now: datetime) -> None:
        result = classifier.classify(_request("book something", now))

        assert result.intent_id == "schedule_job"
        assert result.match_kind == HitKind.KEYWORD
        assert result.confidence == pytest.approx(0.24)
        assert result.missing_required == (EntityType.DATE,)

    def test_route_breaks_ties(self, classifier: IntentClassifier, now: datetime) -> None:
        text = "show my calendar and create an invoice"

        without_route = classifier.classify(_request(text, now))
        with_route = classifier.classify(_request(text, now, route="/invoices"))

        assert without_route.intent_id == "view_calendar"
        assert with_route.intent_id == "create_invoice"
        assert [alt.intent_id for alt in with_route.alternatives] == ["view_calendar"]

    def test_phrase_in_other_domain_beats_keyword_in_route_domain(
        self, classifier: IntentClassifier, now: datetime
    ) -> None:
        result = classifier.classify(_request("void the invoice from the calendar", now, route="/calendar"))

        assert result.intent_id == "void_invoice"
        assert result.confidence == pytest.approx(0.6)
        assert result.missing_required == (EntityType.INVOICE_ID,)
        assert result.confirmation_required is True
        assert result.alternatives[0].intent_id == "view_calendar"
        assert result.alternatives[0].confidence == pytest.approx(0.64)

    def test_alternatives_are_capped(self, small: Registries, now: datetime) -> None:
        classifier = IntentClassifier(small.taxonomy, small.patterns, ClassifierConfig(max_alternatives=0))

        result = classifier.classify(_request("show my calendar and create an invoice", now))

        assert result.alternatives == ()

    def test_keyword_strength_from_config(self, small: Registries, now: datetime) -> None:
        config = ClassifierConfig(keyword_strength=0.5)
        classifier = IntentClassifier(small.taxonomy, small.patterns, config)

        result = classifier.classify(_request("book something", now))

        assert result.confidence == pytest.approx(0.3)

    def test_unknown_route_is_ignored(self, classifier: IntentClassifier, now: datetime) -> None:
        result = classifier.classify(_request("schedule the job for friday", now, route="/nowhere"))

        assert result.route_domain is None
        assert result.intent_id == "schedule_job"


class TestUnclassified:
    """No pattern hit means an explicit unclassified result."""

    def test_no_match(self, classifier: IntentClassifier, now: datetime) -> None:
        result = classifier.classify(_request("hello there", now, route="/invoices"))

        assert result.is_unclassified
        assert result.intent_id is None
        assert result.domain is None
        assert result.confidence == 0.0
        assert result.route_domain == Domain.INVOICING

    def test_require_intent_raises(self, classifier: IntentClassifier, now: datetime) -> None:
        result = classifier.classify(_request("hello there", now))

        with pytest.raises(NoIntentMatch) as exc_info:
            result.require_intent()
        assert exc_info.value.text == "hello there"

    def test_entities_still_extracted(self, classifier: IntentClassifier, now: datetime) -> None:
        result = classifier.classify(_request("hello, see you tomorrow", now))

        assert result.is_unclassified
        assert [entity.type for entity in result.entities] == [EntityType.DATE]


class TestShippedCatalog:
    """Classification against the shipped taxonomy and patterns."""

    def test_new_lead_with_name_and_phone(self, shipped: IntentClassifier, now: datetime) -> None:
        result = shipped.classify(_request("new lead from John Smith, 555-0100", now, route="/leads"))

        assert result.intent_id == "create_lead"
        assert result.domain == Domain.LEAD_GENERATION
        assert result.route_domain == Domain.LEAD_GENERATION
        names = [entity.value for entity in result.entities if entity.type == EntityType.NAME]
        phones = [entity.value for entity in result.entities if entity.type == EntityType.PHONE]
        assert names == ["John Smith"]
        assert phones == ["+15550100"]
        assert result.missing_required == ()

    def test_contact_the_customer(self, shipped: IntentClassifier, now: datetime) -> None:
        result = shipped.classify(_request("contact the customer", now))

        assert result.intent_id == "contact_customer"
        assert result.domain == Domain.COMMUNICATION

    def test_small_talk_is_unclassified(self, shipped: IntentClassifier, now: datetime) -> None:
        assert shipped.classify(_request("hello there", now)).is_unclassified

    def test_high_risk_intent_missing_id(self, shipped: IntentClassifier, now: datetime) -> None:
        result = shipped.classify(_request("void the invoice", now, route="/invoices"))

        assert result.intent_id == "void_invoice"
        assert result.confirmation_required is True
        assert result.missing_required == (EntityType.INVOICE_ID,)

    def test_high_risk_intent_with_id(self, shipped: IntentClassifier, now: datetime) -> None:
        result = shipped.classify(_request("void invoice INV-1001", now, route="/invoices"))

        assert result.intent_id == "void_invoice"
        assert result.missing_required == ()
        assert result.entities[0].value == "INV-1001"

    def test_every_example_classifies_to_its_intent(
        self, registries: Registries, shipped: IntentClassifier, now: datetime
    ) -> None:
        for pattern in registries.patterns.get_pool(PatternPool.INTENT):
            for example in pattern.definition.examples:
                result = shipped.classify(_request(example, now))
                assert result.intent_id == pattern.target_id, example
                assert result.match_kind == HitKind.PHRASE, example
