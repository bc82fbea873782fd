"""Tests for matching utterances to workflows."""

import pytest

from switchboard.bootstrap import Registries
from switchboard.errors import NoWorkflowMatch
from switchboard.patterns import PatternPool
from switchboard.workflows import WorkflowMatcher
from tests.factories import build_registries


@pytest.fixture
def matcher(registries: Registries) -> WorkflowMatcher:
    return WorkflowMatcher(registries.patterns, registries.workflows)


class TestShippedMatcher:
    """Matching against the shipped workflow pool."""

    def test_site_visit(self, matcher: WorkflowMatcher) -> None:
        match = matcher.match_patterns("schedule a site visit")

        assert match.matched
        assert match.workflow_id == "complete_site_assessment"
        assert match.pattern_id == "complete_site_assessment"
        assert [step.tool for step in match.steps] == [
            "search_customer",
            "create_customer",
            "create_request",
            "check_availability",
            "create_assessment_job",
            "assign_job",
            "send_confirmation",
        ]

    def test_contact_the_customer(self, matcher: WorkflowMatcher) -> None:
        assert matcher.match_patterns("contact the customer").workflow_id == "complete_customer_communication"

    @pytest.mark.parametrize(
        ("text", "workflow_id"),
        [
            ("add a new customer and schedule a site visit", "complete_lead_generation"),
            ("contact them and set up an assessment", "complete_customer_communication"),
        ],
    )
    def test_compound_request_goes_to_first_by_priority(
        self, matcher: WorkflowMatcher, text: str, workflow_id: str
    ) -> None:
        assert matcher.match_patterns(text).workflow_id == workflow_id

    def test_no_match(self, matcher: WorkflowMatcher) -> None:
        match = matcher.match_patterns("hello there")

        assert not match.matched
        assert match.pattern_id is None
        assert match.steps == ()
        with pytest.raises(NoWorkflowMatch) as exc_info:
            match.require_workflow()
        assert exc_info.value.text == "hello there"

    def test_require_workflow(self, matcher: WorkflowMatcher) -> None:
        assert matcher.match_patterns("schedule a site visit").require_workflow() == "complete_site_assessment"

    def test_every_example_matches_its_workflow(self, registries: Registries, matcher: WorkflowMatcher) -> None:
        for pattern in registries.patterns.get_pool(PatternPool.WORKFLOW):
            for example in pattern.definition.examples:
                assert matcher.match_patterns(example).workflow_id == pattern.target_id, example


class TestFactoryMatcher:
    """Matching against a small hand-built catalog."""

    def test_matches_and_returns_steps(self) -> None:
        small = build_registries()
        matcher = WorkflowMatcher(small.patterns, small.workflows)

        match = matcher.match_patterns("close out the job and bill them")

        assert match.workflow_id == "close_and_bill"
        assert [step.output_key for step in match.steps] == ["job", "invoice"]

    def test_intent_phrases_do_not_match_workflows(self) -> None:
        small = build_registries()
        matcher = WorkflowMatcher(small.patterns, small.workflows)

        assert not matcher.match_patterns("void the invoice").matched
