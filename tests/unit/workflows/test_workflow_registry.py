"""Tests for the workflow registry and the shipped workflows."""

import pytest

from switchboard.errors import RegistryInvariantViolation
from switchboard.taxonomy import Domain
from switchboard.workflows import (
    TOOL_CATALOG,
    WORKFLOWS,
    WorkflowCategory,
    WorkflowRegistry,
)
from tests.factories import StepFactory, WorkflowFactory


def _violations(*workflows) -> list[str]:
    with pytest.raises(RegistryInvariantViolation) as exc_info:
        WorkflowRegistry(workflows)
    assert exc_info.value.registry == "workflows"
    return exc_info.value.violations


class TestValidation:
    """Load-time checks on workflow definitions."""

    def test_valid_workflow_loads(self) -> None:
        registry = WorkflowRegistry((WorkflowFactory.create(),))

        assert "close_and_bill" in registry
        assert registry.get("close_and_bill").tools == ("complete_job", "create_invoice")

    def test_duplicate_id(self) -> None:
        violations = _violations(WorkflowFactory.create(), WorkflowFactory.create())

        assert violations == ["duplicate workflow id: close_and_bill"]

    def test_non_contiguous_order(self) -> None:
        workflow = WorkflowFactory.create(steps=(StepFactory.create(1), StepFactory.create(3)))

        assert _violations(workflow) == ["workflow close_and_bill step order is not 1..N: [1, 3]"]

    def test_order_must_match_position(self) -> None:
        workflow = WorkflowFactory.create(steps=(StepFactory.create(2), StepFactory.create(1)))

        assert _violations(workflow) == ["workflow close_and_bill step order is not 1..N: [2, 1]"]

    def test_unknown_tool(self) -> None:
        workflow = WorkflowFactory.create(steps=(StepFactory.create(1, "launch_rocket"),))

        assert _violations(workflow) == ["workflow close_and_bill step 1 uses unknown tool launch_rocket"]

    def test_reused_output_key(self) -> None:
        workflow = WorkflowFactory.create(
            steps=(
                StepFactory.create(1, output_key="job"),
                StepFactory.create(2, output_key="job"),
            )
        )

        assert _violations(workflow) == ["workflow close_and_bill step 2 reuses output key job"]

    def test_invalid_expression(self) -> None:
        workflow = WorkflowFactory.create(
            steps=(StepFactory.create(1, args_template={"job_id": "input.("}),)
        )

        violations = _violations(workflow)

        assert len(violations) == 1
        assert violations[0].startswith("workflow close_and_bill step 1 has invalid expression for job_id")

    def test_invalid_skip_condition(self) -> None:
        workflow = WorkflowFactory.create(steps=(StepFactory.create(1, skip_if="results.job ==="),))

        violations = _violations(workflow)

        assert violations[0].startswith("workflow close_and_bill step 1 has invalid expression for skip_if")

    def test_no_steps(self) -> None:
        assert _violations(WorkflowFactory.create(steps=())) == ["workflow close_and_bill has no steps"]

    def test_custom_tool_catalog(self) -> None:
        with pytest.raises(RegistryInvariantViolation):
            WorkflowRegistry((WorkflowFactory.create(),), tool_catalog={"complete_job"})


class TestShippedWorkflows:
    """The shipped workflows load and keep their documented shape."""

    @pytest.fixture(scope="class")
    def registry(self) -> WorkflowRegistry:
        return WorkflowRegistry(WORKFLOWS)

    def test_ids(self, registry: WorkflowRegistry) -> None:
        assert registry.ids == {
            "complete_lead_generation",
            "complete_customer_communication",
            "complete_site_assessment",
            "quote_to_job",
            "job_to_invoice",
        }
        assert len(registry) == 5

    def test_site_assessment_steps(self, registry: WorkflowRegistry) -> None:
        workflow = registry.get("complete_site_assessment")

        assert workflow.tools == (
            "search_customer",
            "create_customer",
            "create_request",
            "check_availability",
            "create_assessment_job",
            "assign_job",
            "send_confirmation",
        )
        assert [step.order for step in workflow.steps] == list(range(1, 8))

    def test_every_tool_is_in_catalog(self, registry: WorkflowRegistry) -> None:
        for workflow in registry.workflows:
            assert set(workflow.tools) <= TOOL_CATALOG, workflow.id

    def test_by_domain(self, registry: WorkflowRegistry) -> None:
        assert [w.id for w in registry.by_domain(Domain.INVOICING)] == ["job_to_invoice"]
        assert registry.by_domain(Domain.CHECKLISTS) == ()

    def test_by_category(self, registry: WorkflowRegistry) -> None:
        ids = [workflow.id for workflow in registry.by_category(WorkflowCategory.PRE_SERVICE)]

        assert ids == ["complete_lead_generation", "complete_site_assessment"]

    def test_unknown_workflow(self, registry: WorkflowRegistry) -> None:
        assert registry.get("launch_rocket") is None
        assert "launch_rocket" not in registry
