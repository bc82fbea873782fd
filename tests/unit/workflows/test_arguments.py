"""Tests for step argument templates."""

import pytest
from jinja2 import TemplateSyntaxError

from switchboard.workflows import WORKFLOWS, missing_inputs, resolve_step_args, should_skip
from switchboard.workflows.arguments import compile_step_expression, input_references
from tests.factories import StepFactory, WorkflowFactory


def _workflow(workflow_id: str):
    return next(workflow for workflow in WORKFLOWS if workflow.id == workflow_id)


class TestResolveStepArgs:
    """Argument expressions read input, earlier results and host context."""

    def test_reads_all_three_scopes(self) -> None:
        step = StepFactory.create(
            2,
            "create_invoice",
            args_template={
                "job_id": "results.job.id",
                "business_id": "context.business_id",
                "memo": "input.memo",
            },
        )

        args = resolve_step_args(
            step,
            {"memo": "spring cleanup"},
            {"job": {"id": "JOB-4521"}},
            {"business_id": "biz-1"},
        )

        assert args == {"job_id": "JOB-4521", "business_id": "biz-1", "memo": "spring cleanup"}

    def test_missing_chain_resolves_to_none(self) -> None:
        step = StepFactory.create(args_template={"customer_id": "results.customer.id"})

        assert resolve_step_args(step, {}, {}) == {"customer_id": None}

    def test_fallback_expression(self) -> None:
        step = StepFactory.create(
            args_template={
                "customer_id": "results.customer.id or results.existing_customer.id",
                "title": "input.request_title or 'New lead'",
            }
        )

        args = resolve_step_args(step, {}, {"existing_customer": {"id": "CUS-77", "found": True}})

        assert args == {"customer_id": "CUS-77", "title": "New lead"}

    def test_inputs_are_not_modified(self) -> None:
        step = StepFactory.create(args_template={"job_id": "input.job_id"})
        input_data = {"job_id": "4521"}
        results: dict = {}

        resolve_step_args(step, input_data, results)

        assert input_data == {"job_id": "4521"}
        assert results == {}

    def test_compiled_expressions_are_cached(self) -> None:
        assert compile_step_expression("input.job_id") is compile_step_expression("input.job_id")

    def test_invalid_expression_raises(self) -> None:
        with pytest.raises(TemplateSyntaxError):
            compile_step_expression("input.(")


class TestShouldSkip:
    """Conditional steps."""

    def test_no_condition(self) -> None:
        assert not should_skip(StepFactory.create(), {}, {})

    def test_truthy_condition_skips(self) -> None:
        step = StepFactory.create(skip_if="results.existing_customer.found")

        assert should_skip(step, {}, {"existing_customer": {"found": True}})
        assert not should_skip(step, {}, {"existing_customer": {"found": False}})

    def test_missing_result_does_not_skip(self) -> None:
        step = StepFactory.create(skip_if="results.existing_customer.found")

        assert not should_skip(step, {}, {})

    def test_negated_missing_result_skips(self) -> None:
        step = StepFactory.create(skip_if="not results.request.id")

        assert should_skip(step, {}, {})
        assert not should_skip(step, {}, {"request": {"id": "REQ-1"}})


class TestMissingInputs:
    """Inputs a workflow cannot start without."""

    def test_input_references(self) -> None:
        assert input_references("input.preferred_date or input.date") == ["preferred_date", "date"]
        assert input_references("results.job.id") == []
        assert input_references("input.note or input.note") == ["note"]

    def test_first_required_step_drives_missing_inputs(self) -> None:
        assert missing_inputs(WorkflowFactory.create(), {}) == ["job_id"]
        assert missing_inputs(WorkflowFactory.create(), {"job_id": "4521"}) == []

    def test_empty_string_counts_as_missing(self) -> None:
        assert missing_inputs(WorkflowFactory.create(), {"job_id": ""}) == ["job_id"]

    def test_optional_and_conditional_steps_are_passed_over(self) -> None:
        workflow = WorkflowFactory.create(
            steps=(
                StepFactory.create(1, args_template={"note": "input.note"}, optional=True),
                StepFactory.create(2, args_template={"id": "input.id"}, skip_if="input.skip"),
                StepFactory.create(3, args_template={"job_id": "input.job_id"}),
            )
        )

        assert missing_inputs(workflow, {}) == ["job_id"]

    def test_shipped_lead_workflow(self) -> None:
        workflow = _workflow("complete_lead_generation")

        assert missing_inputs(workflow, {}) == ["email", "phone", "name"]
        assert missing_inputs(workflow, {"name": "John Smith"}) == ["email", "phone"]
