"""Tests for building prompts from templates."""

import pytest

from switchboard.bootstrap import Registries
from switchboard.config.models.prompts import PromptConfig
from switchboard.errors import MissingRequiredContext, MissingTemplate, PromptBuildError
from switchboard.prompts import PromptBuilder
from switchboard.taxonomy import RiskLevel
from tests.factories import TemplateFactory, build_registries

SCHEDULING_CONTEXT = {"business_name": "Green Co", "job_id": "4521", "user_message": "move it to friday"}


@pytest.fixture(scope="module")
def small() -> Registries:
    return build_registries()


@pytest.fixture
def builder(small: Registries) -> PromptBuilder:
    return PromptBuilder(small.templates, small.workflows)


class TestBuildFromTemplate:
    """Rendering a single template."""

    def test_builds_system_prompt(self, small: Registries, builder: PromptBuilder) -> None:
        prompt = builder.build_prompt_from_template(small.templates.get("domain.scheduling"), SCHEDULING_CONTEXT)

        assert prompt.system_prompt == (
            "You schedule work for Green Co.\n\n"
            "--- CURRENT CONTEXT ---\nJob: 4521\n\n"
            "--- YOUR TASK ---\nHandle: move it to friday"
        )
        assert prompt.tools == ("schedule_job",)
        assert prompt.template_id == "domain.scheduling"
        assert prompt.required_context == ("business_name", "job_id", "user_message")
        assert prompt.risk_level == RiskLevel.LOW
        assert not prompt.requires_confirmation
        assert prompt.step_order is None

    @pytest.mark.parametrize("job_id", [None, "absent"])
    def test_refuses_missing_required_key(self, small: Registries, builder: PromptBuilder, job_id) -> None:
        context = dict(SCHEDULING_CONTEXT, job_id=job_id)
        if job_id == "absent":
            del context["job_id"]

        with pytest.raises(MissingRequiredContext) as exc_info:
            builder.build_prompt_from_template(small.templates.get("domain.scheduling"), context)

        assert exc_info.value.template_id == "domain.scheduling"
        assert exc_info.value.missing_keys == ["job_id"]

    def test_empty_string_is_a_value(self, small: Registries, builder: PromptBuilder) -> None:
        prompt = builder.build_prompt_from_template(
            small.templates.get("domain.scheduling"), dict(SCHEDULING_CONTEXT, job_id="")
        )

        assert "--- CURRENT CONTEXT ---\nJob:" in prompt.system_prompt

    def test_missing_nested_value_is_a_build_error(self, builder: PromptBuilder) -> None:
        template = TemplateFactory.create(context="Job: {{ job_id.number }}")

        with pytest.raises(PromptBuildError) as exc_info:
            builder.build_prompt_from_template(template, SCHEDULING_CONTEXT)

        assert not isinstance(exc_info.value, MissingRequiredContext)
        assert exc_info.value.message.startswith("Template domain.scheduling failed to render")

    def test_lists_are_capped(self, small: Registries) -> None:
        builder = PromptBuilder(small.templates, small.workflows, PromptConfig(max_array_items=2))
        template = TemplateFactory.create(
            context="Team: {{ team_members | join(', ') }}",
            required_context_keys=("business_name", "team_members", "user_message"),
        )
        context = dict(SCHEDULING_CONTEXT, team_members=["Mike", "Sarah", "Ana"])

        prompt = builder.build_prompt_from_template(template, context)

        assert "Team: Mike, Sarah\n" in prompt.system_prompt
        assert context["team_members"] == ["Mike", "Sarah", "Ana"]

    def test_tools_override(self, small: Registries, builder: PromptBuilder) -> None:
        prompt = builder.build_prompt_from_template(
            small.templates.get("domain.scheduling"), SCHEDULING_CONTEXT, step_order=2, tools=("get_job",)
        )

        assert prompt.tools == ("get_job",)
        assert prompt.step_order == 2


class TestLookups:
    """Building by intent and by template id."""

    def test_intent_template(self, builder: PromptBuilder) -> None:
        context = {"business_name": "Green Co", "invoice_number": "INV-1001", "user_message": "void it"}

        prompt = builder.build_prompt_for_intent("void_invoice", context)

        assert prompt.template_id == "intent.void_invoice"
        assert prompt.risk_level == RiskLevel.HIGH
        assert prompt.requires_confirmation
        assert "Invoice: INV-1001" in prompt.system_prompt

    def test_intent_falls_back_to_domain(self, builder: PromptBuilder) -> None:
        assert builder.build_prompt_for_intent("view_calendar", SCHEDULING_CONTEXT).template_id == "domain.scheduling"

    def test_by_template_id(self, builder: PromptBuilder) -> None:
        prompt = builder.build_prompt_from_template_id("domain.scheduling", SCHEDULING_CONTEXT)

        assert prompt.template_id == "domain.scheduling"

    def test_context_keys_for_template(self, builder: PromptBuilder) -> None:
        assert builder.get_context_keys_for_template("intent.void_invoice") == (
            "business_name",
            "invoice_number",
            "user_message",
        )
        with pytest.raises(MissingTemplate):
            builder.get_context_keys_for_template("nothing")

    def test_validate_context(self) -> None:
        missing = PromptBuilder.validate_context(
            {"business_name": "Green Co", "job_id": None},
            ("business_name", "job_id", "user_message"),
        )

        assert missing == ["job_id", "user_message"]

    def test_merge_context(self) -> None:
        base = {"business_name": "Green Co", "job_id": "1"}
        override = {"job_id": "2"}

        assert PromptBuilder.merge_context(base, override) == {"business_name": "Green Co", "job_id": "2"}
        assert base == {"business_name": "Green Co", "job_id": "1"}


class TestPreview:
    """Placeholder previews."""

    def test_preview(self, builder: PromptBuilder) -> None:
        preview = builder.preview_prompt("domain.scheduling")

        assert preview.startswith("=== PROMPT PREVIEW: Domain Scheduling ===\nID: domain.scheduling\n")
        assert "Tools: schedule_job" in preview
        assert "=== SYSTEM PROMPT ===\nYou schedule work for [business_name]." in preview
        assert "Job: [job_id]" in preview

    def test_workflow_preview_lists_tools_per_step(self, builder: PromptBuilder) -> None:
        assert "Tools: per step" in builder.preview_prompt("workflow.close_and_bill")

    def test_unknown_template(self, builder: PromptBuilder) -> None:
        with pytest.raises(MissingTemplate):
            builder.preview_prompt("nothing")

    def test_every_shipped_template_previews(self, registries: Registries) -> None:
        builder = PromptBuilder(registries.templates, registries.workflows)

        for template in registries.templates.templates:
            preview = builder.preview_prompt(template.id)
            assert "=== SYSTEM PROMPT ===" in preview, template.id


class TestWorkflowPrompts:
    """One prompt per workflow step."""

    def test_one_prompt_per_step(self, builder: PromptBuilder) -> None:
        prompts = builder.build_prompts_for_workflow(
            "close_and_bill", {"business_name": "Green Co"}, input_data={"job_id": "4521"}
        )

        assert [prompt.step_order for prompt in prompts] == [1, 2]
        assert [prompt.tools for prompt in prompts] == [("complete_job",), ("create_invoice",)]
        assert prompts[0].system_prompt == (
            "You run Close And Bill for Green Co.\n\n"
            "--- CURRENT CONTEXT ---\nStep 1 of 2: complete_job\n\n"
            "--- YOUR TASK ---\nArguments: job_id=4521"
        )

    def test_later_steps_see_earlier_results(self, builder: PromptBuilder) -> None:
        prompts = builder.build_prompts_for_workflow(
            "close_and_bill",
            {"business_name": "Green Co"},
            step_results={"job": {"id": "JOB-9"}},
            input_data={"job_id": "4521"},
        )

        assert prompts[1].system_prompt.endswith("Arguments: job_id=JOB-9")

    def test_results_not_yet_gathered(self, builder: PromptBuilder) -> None:
        prompts = builder.build_prompts_for_workflow("close_and_bill", {"business_name": "Green Co"})

        assert prompts[0].system_prompt.endswith("Arguments: none")
        assert prompts[1].system_prompt.endswith("Arguments: none")

    def test_host_context_feeds_arguments(self, builder: PromptBuilder) -> None:
        prompts = builder.build_prompts_for_workflow(
            "close_and_bill",
            {"business_name": "Green Co", "business_id": "biz-1"},
            step_results={"job": {"id": "JOB-9"}},
        )

        assert prompts[1].system_prompt.endswith("Arguments: job_id=JOB-9, business_id=biz-1")

    def test_base_context_is_required(self, builder: PromptBuilder) -> None:
        with pytest.raises(MissingRequiredContext) as exc_info:
            builder.build_prompts_for_workflow("close_and_bill", {})

        assert exc_info.value.missing_keys == ["business_name"]

    def test_unknown_workflow(self, builder: PromptBuilder) -> None:
        with pytest.raises(MissingTemplate):
            builder.build_prompts_for_workflow("launch_rocket", {"business_name": "Green Co"})
