"""Tests for pattern compilation and the pattern registry."""

import pytest

from switchboard.bootstrap import Registries
from switchboard.errors import RegistryInvariantViolation
from switchboard.patterns import HitKind, PatternPool, PatternRegistry, compile_pattern
from switchboard.taxonomy import Domain, TaxonomyRegistry
from tests.factories import PatternFactory
from tests.factories.registries import build_taxonomy

WORKFLOW_IDS = frozenset({"close_and_bill"})


@pytest.fixture
def taxonomy() -> TaxonomyRegistry:
    return build_taxonomy()


def _violations(taxonomy: TaxonomyRegistry, *definitions, **kwargs) -> list[str]:
    with pytest.raises(RegistryInvariantViolation) as exc_info:
        PatternRegistry(definitions, taxonomy, WORKFLOW_IDS, **kwargs)
    assert exc_info.value.registry == "patterns"
    return exc_info.value.violations


class TestCompiledPattern:
    """Tests for matching a single compiled pattern set."""

    def test_phrase_hit(self) -> None:
        compiled = compile_pattern(
            PatternFactory.create(patterns=(r"\bschedule\s+the\s+job\b",), keywords=("book",))
        )

        hit = compiled.match("please schedule the job", keyword_strength=0.4)

        assert hit is not None
        assert hit.kind == HitKind.PHRASE
        assert hit.strength == 1.0
        assert hit.matched_text == "schedule the job"
        assert hit.target_id == "schedule_job"

    def test_matching_is_case_insensitive(self) -> None:
        compiled = compile_pattern(PatternFactory.create(patterns=(r"\bschedule\b",)))

        assert compiled.matches_phrase("SCHEDULE it")

    def test_keyword_hit_is_weaker(self) -> None:
        compiled = compile_pattern(
            PatternFactory.create(patterns=(r"\bschedule\s+the\s+job\b",), keywords=("book", "time slot"))
        )

        hit = compiled.match("find me a time   slot", keyword_strength=0.4)

        assert hit is not None
        assert hit.kind == HitKind.KEYWORD
        assert hit.strength == 0.4
        assert not compiled.matches_phrase("find me a time slot")

    def test_keywords_match_whole_words(self) -> None:
        compiled = compile_pattern(
            PatternFactory.create(patterns=(r"\bschedule\s+the\s+job\b",), keywords=("book",))
        )

        assert compiled.match("open the bookkeeping", keyword_strength=0.4) is None

    def test_no_hit(self) -> None:
        compiled = compile_pattern(PatternFactory.create())

        assert compiled.match("void the invoice", keyword_strength=0.4) is None


class TestRegistryLookups:
    """Tests for pools, ordering and lookups on a valid registry."""

    def test_pools_are_disjoint(self, taxonomy: TaxonomyRegistry) -> None:
        registry = PatternRegistry(
            (
                PatternFactory.create(examples=("schedule the job",)),
                PatternFactory.create(
                    id="close_and_bill",
                    pool=PatternPool.WORKFLOW,
                    domain=Domain.INVOICING,
                    patterns=(r"\bclose\s+out\b",),
                ),
            ),
            taxonomy,
            WORKFLOW_IDS,
        )

        assert [pattern.id for pattern in registry.get_pool(PatternPool.INTENT)] == ["schedule_job"]
        assert [pattern.id for pattern in registry.get_pool(PatternPool.WORKFLOW)] == ["close_and_bill"]
        assert len(registry) == 2

    def test_priority_order_with_stable_ties(self, taxonomy: TaxonomyRegistry) -> None:
        registry = PatternRegistry(
            (
                PatternFactory.create(id="view_calendar", patterns=(r"\bcalendar\b",), priority=50),
                PatternFactory.create(id="schedule_job", priority=10),
                PatternFactory.create(
                    id="create_invoice", domain=Domain.INVOICING, patterns=(r"\binvoice\b",), priority=50
                ),
            ),
            taxonomy,
            WORKFLOW_IDS,
        )

        ids = [pattern.id for pattern in registry.get_pool(PatternPool.INTENT)]
        assert ids == ["schedule_job", "view_calendar", "create_invoice"]

    def test_lookups(self, taxonomy: TaxonomyRegistry) -> None:
        registry = PatternRegistry(
            (
                PatternFactory.create(),
                PatternFactory.create(id="void_invoice", domain=Domain.INVOICING, patterns=(r"\bvoid\b",)),
            ),
            taxonomy,
            WORKFLOW_IDS,
        )

        assert registry.get("void_invoice").target_id == "void_invoice"
        assert registry.get("missing") is None
        assert [p.id for p in registry.patterns_for_domain(Domain.INVOICING)] == ["void_invoice"]
        assert [p.id for p in registry.patterns_for_target("schedule_job")] == ["schedule_job"]

    def test_overlaps_against_given_phrases(self, taxonomy: TaxonomyRegistry) -> None:
        registry = PatternRegistry(
            (
                PatternFactory.create(patterns=(r"\bschedule\b",)),
                PatternFactory.create(id="view_calendar", patterns=(r"\bcalendar\b",)),
            ),
            taxonomy,
            WORKFLOW_IDS,
        )

        overlaps = registry.find_overlapping_patterns(
            PatternPool.INTENT, ["schedule on the calendar", "show the calendar", "schedule on the calendar"]
        )

        assert len(overlaps) == 1
        assert overlaps[0].phrase == "schedule on the calendar"
        assert overlaps[0].target_ids == ("schedule_job", "view_calendar")


class TestRegistryValidation:
    """Every load-time violation is collected and reported together."""

    def test_duplicate_id(self, taxonomy: TaxonomyRegistry) -> None:
        violations = _violations(taxonomy, PatternFactory.create(), PatternFactory.create())

        assert violations == ["duplicate pattern id: schedule_job"]

    def test_unknown_intent(self, taxonomy: TaxonomyRegistry) -> None:
        violations = _violations(taxonomy, PatternFactory.create(id="launch_rocket"))

        assert violations == ["pattern launch_rocket targets unknown intent launch_rocket"]

    def test_domain_mismatch(self, taxonomy: TaxonomyRegistry) -> None:
        violations = _violations(taxonomy, PatternFactory.create(id="void_invoice"))

        assert violations == [
            "pattern void_invoice declares domain scheduling but intent void_invoice is in invoicing"
        ]

    def test_unknown_workflow(self, taxonomy: TaxonomyRegistry) -> None:
        violations = _violations(taxonomy, PatternFactory.create(id="nope", pool=PatternPool.WORKFLOW))

        assert violations == ["pattern nope targets unknown workflow nope"]

    def test_empty_and_invalid_regexes(self, taxonomy: TaxonomyRegistry) -> None:
        violations = _violations(
            taxonomy,
            PatternFactory.create(patterns=()),
            PatternFactory.create(id="view_calendar", patterns=("(unclosed",)),
        )

        assert violations[0] == "pattern schedule_job has no trigger patterns"
        assert violations[1].startswith("pattern view_calendar has invalid regex '(unclosed'")

    def test_example_must_match_own_set(self, taxonomy: TaxonomyRegistry) -> None:
        violations = _violations(taxonomy, PatternFactory.create(examples=("book a slot",)))

        assert violations == ["pattern schedule_job does not match its example 'book a slot'"]

    def test_overlapping_examples_rejected(self, taxonomy: TaxonomyRegistry) -> None:
        violations = _violations(
            taxonomy,
            PatternFactory.create(patterns=(r"\bschedule\b",), examples=("schedule on the calendar",)),
            PatternFactory.create(id="view_calendar", patterns=(r"\bcalendar\b",)),
        )

        assert violations == [
            "intent example 'schedule on the calendar' matches ['schedule_job', 'view_calendar']"
        ]

    def test_overlap_allowance(self, taxonomy: TaxonomyRegistry) -> None:
        registry = PatternRegistry(
            (
                PatternFactory.create(patterns=(r"\bschedule\b",), examples=("schedule on the calendar",)),
                PatternFactory.create(id="view_calendar", patterns=(r"\bcalendar\b",)),
            ),
            taxonomy,
            WORKFLOW_IDS,
            max_example_overlaps=1,
        )

        assert len(registry) == 2


class TestShippedPatterns:
    """The shipped pools load and are mutually exclusive on their examples."""

    def test_one_set_per_intent(self, registries: Registries) -> None:
        intent_pool = registries.patterns.get_pool(PatternPool.INTENT)

        assert len(intent_pool) == len(registries.taxonomy)
        assert {pattern.target_id for pattern in intent_pool} == {
            intent.id for intent in registries.taxonomy.intents
        }

    def test_one_set_per_workflow(self, registries: Registries) -> None:
        workflow_pool = registries.patterns.get_pool(PatternPool.WORKFLOW)

        assert {pattern.target_id for pattern in workflow_pool} == registries.workflows.ids

    def test_workflow_priority_order(self, registries: Registries) -> None:
        ids = [pattern.id for pattern in registries.patterns.get_pool(PatternPool.WORKFLOW)]

        assert ids == [
            "complete_lead_generation",
            "complete_customer_communication",
            "complete_site_assessment",
            "quote_to_job",
            "job_to_invoice",
        ]

    @pytest.mark.parametrize("pool", list(PatternPool))
    def test_examples_are_mutually_exclusive(self, registries: Registries, pool: PatternPool) -> None:
        assert registries.patterns.find_overlapping_patterns(pool) == []

    def test_every_set_has_examples(self, registries: Registries) -> None:
        for pool in PatternPool:
            for pattern in registries.patterns.get_pool(pool):
                assert pattern.definition.examples, pattern.id
