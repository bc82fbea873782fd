"""Tests for the domain and intent registry."""

import pytest

from switchboard.errors import RegistryInvariantViolation
from switchboard.taxonomy import Domain, EntityType, IntentEffect, RiskLevel, TaxonomyRegistry
from switchboard.taxonomy.catalog import DOMAINS, INTENTS
from tests.factories import IntentFactory


@pytest.fixture(scope="module")
def taxonomy() -> TaxonomyRegistry:
    return TaxonomyRegistry(DOMAINS, INTENTS)


class TestShippedCatalog:
    """The shipped taxonomy loads and covers every domain."""

    def test_every_domain_registered_once(self, taxonomy: TaxonomyRegistry) -> None:
        assert set(taxonomy.domains) == set(Domain)
        assert len(taxonomy.domains) == len(Domain)

    def test_intent_count(self, taxonomy: TaxonomyRegistry) -> None:
        assert len(taxonomy) == 54

    def test_intent_ids_unique(self, taxonomy: TaxonomyRegistry) -> None:
        ids = [intent.id for intent in taxonomy.intents]
        assert len(ids) == len(set(ids))

    def test_every_domain_has_intents(self, taxonomy: TaxonomyRegistry) -> None:
        for domain in Domain:
            assert taxonomy.get_intents_by_domain(domain), domain

    def test_money_and_outbound_intents_are_guarded(self, taxonomy: TaxonomyRegistry) -> None:
        """Intents with side effects need confirmation or a high risk level."""
        for intent in taxonomy.intents:
            if intent.effects & {IntentEffect.MOVES_MONEY, IntentEffect.EXTERNAL_COMMUNICATION}:
                assert intent.confirmation_required or intent.high_risk, intent.id


class TestLookups:
    """Tests for registry lookups."""

    def test_get_intent(self, taxonomy: TaxonomyRegistry) -> None:
        intent = taxonomy.get_intent("void_invoice")
        assert intent is not None
        assert intent.domain == Domain.INVOICING
        assert intent.required_entities == (EntityType.INVOICE_ID,)
        assert intent.risk_level == RiskLevel.HIGH
        assert intent.label == "invoicing.void_invoice"

    def test_get_unknown_intent(self, taxonomy: TaxonomyRegistry) -> None:
        assert taxonomy.get_intent("launch_rocket") is None
        assert "launch_rocket" not in taxonomy

    def test_intents_by_domain_keep_registration_order(self, taxonomy: TaxonomyRegistry) -> None:
        ids = [intent.id for intent in taxonomy.get_intents_by_domain(Domain.LEAD_GENERATION)]
        assert ids[0] == "create_lead"
        assert taxonomy.registration_index("create_lead") == 0

    def test_high_risk_intents(self, taxonomy: TaxonomyRegistry) -> None:
        high_risk = {intent.id for intent in taxonomy.get_high_risk_intents()}
        assert {"void_invoice", "cancel_job"} <= high_risk
        assert all(intent.risk_level == RiskLevel.HIGH for intent in taxonomy.get_high_risk_intents())

    def test_confirmation_required_includes_high_risk(self, taxonomy: TaxonomyRegistry) -> None:
        confirmation = set(taxonomy.get_confirmation_required_intents())
        assert set(taxonomy.get_high_risk_intents()) <= confirmation

    def test_domain_metadata(self, taxonomy: TaxonomyRegistry) -> None:
        meta = taxonomy.get_domain_metadata(Domain.INVOICING)
        assert meta is not None
        assert "/invoices" in meta.route_prefixes


class TestRouteDomain:
    """Tests for get_domain_from_route."""

    @pytest.mark.parametrize(
        ("route", "domain"),
        [
            ("/invoices", Domain.INVOICING),
            ("/invoices/123/edit", Domain.INVOICING),
            ("/calendar?view=week", Domain.SCHEDULING),
            ("/settings/team", Domain.TEAM_MANAGEMENT),
            ("/jobs/42#notes", Domain.JOB_MANAGEMENT),
        ],
    )
    def test_known_routes(self, taxonomy: TaxonomyRegistry, route: str, domain: Domain) -> None:
        assert taxonomy.get_domain_from_route(route) == domain

    def test_matches_whole_segments_only(self, taxonomy: TaxonomyRegistry) -> None:
        assert taxonomy.get_domain_from_route("/invoicesarchive") is None

    @pytest.mark.parametrize("route", [None, "", "/", "/unknown/page"])
    def test_unknown_routes(self, taxonomy: TaxonomyRegistry, route: str | None) -> None:
        assert taxonomy.get_domain_from_route(route) is None


class TestValidation:
    """Load-time invariant checks."""

    def test_duplicate_intent_id(self) -> None:
        intent = IntentFactory.create()
        with pytest.raises(RegistryInvariantViolation, match="duplicate intent id: schedule_job"):
            TaxonomyRegistry((IntentFactory.domain(Domain.SCHEDULING),), (intent, intent))

    def test_intent_in_unregistered_domain(self) -> None:
        with pytest.raises(RegistryInvariantViolation) as exc_info:
            TaxonomyRegistry(
                (IntentFactory.domain(Domain.SCHEDULING),),
                (IntentFactory.create(), IntentFactory.create(id="void_invoice", domain=Domain.INVOICING)),
            )
        assert "intent void_invoice uses unregistered domain invoicing" in exc_info.value.violations

    def test_domain_without_intents(self) -> None:
        with pytest.raises(RegistryInvariantViolation, match="domain invoicing has no intents"):
            TaxonomyRegistry(
                (IntentFactory.domain(Domain.SCHEDULING), IntentFactory.domain(Domain.INVOICING)),
                (IntentFactory.create(),),
            )

    def test_route_prefix_claimed_twice(self) -> None:
        with pytest.raises(RegistryInvariantViolation, match="claimed by"):
            TaxonomyRegistry(
                (
                    IntentFactory.domain(Domain.SCHEDULING, "/calendar"),
                    IntentFactory.domain(Domain.INVOICING, "/calendar/"),
                ),
                (IntentFactory.create(), IntentFactory.create(id="void_invoice", domain=Domain.INVOICING)),
            )

    def test_entity_both_required_and_optional(self) -> None:
        intent = IntentFactory.create(
            required_entities=(EntityType.DATE,),
            optional_entities=(EntityType.DATE,),
        )
        with pytest.raises(RegistryInvariantViolation, match="as required and optional"):
            TaxonomyRegistry((IntentFactory.domain(Domain.SCHEDULING),), (intent,))

    def test_unguarded_side_effect(self) -> None:
        intent = IntentFactory.create().model_copy(update={"effects": frozenset({IntentEffect.MOVES_MONEY})})
        with pytest.raises(RegistryInvariantViolation, match="neither high risk nor confirmation required"):
            TaxonomyRegistry((IntentFactory.domain(Domain.SCHEDULING),), (intent,))

    def test_collects_every_violation(self) -> None:
        """All problems are reported together, not just the first."""
        intent = IntentFactory.create(required_entities=(EntityType.DATE, EntityType.DATE))
        with pytest.raises(RegistryInvariantViolation) as exc_info:
            TaxonomyRegistry(
                (IntentFactory.domain(Domain.SCHEDULING), IntentFactory.domain(Domain.INVOICING)),
                (intent, intent),
            )
        assert len(exc_info.value.violations) >= 3
        assert exc_info.value.registry == "taxonomy"
