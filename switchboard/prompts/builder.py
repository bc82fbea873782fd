"""Build system prompts from templates and resolved context.

The builder refuses to emit a prompt with a blank where a required value
belongs: missing keys raise MissingRequiredContext before anything is
rendered.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from jinja2 import UndefinedError

from switchboard.config.models.prompts import PromptConfig
from switchboard.errors import MissingRequiredContext, MissingTemplate, PromptBuildError
from switchboard.observability.logging import get_logger
from switchboard.prompts.models import BuiltPrompt, PromptTemplate
from switchboard.prompts.registry import PromptTemplateRegistry
from switchboard.prompts.rendering import (
    assemble_prompt,
    cap_arrays,
    placeholder_context,
    render_section,
)
from switchboard.workflows.arguments import resolve_step_args
from switchboard.workflows.registry import WorkflowRegistry

logger = get_logger(__name__)


class PromptBuilder:
    """Turns a template plus context into a BuiltPrompt."""

    def __init__(
        self,
        templates: PromptTemplateRegistry,
        workflows: WorkflowRegistry,
        config: PromptConfig | None = None,
    ) -> None:
        self._templates = templates
        self._workflows = workflows
        self._config = config or PromptConfig()

    def get_context_keys_for_template(self, template_id: str) -> tuple[str, ...]:
        """Raises MissingTemplate for an unknown id."""
        return self._require_template(template_id).required_context_keys

    @staticmethod
    def validate_context(context: Mapping[str, Any], keys: Sequence[str]) -> list[str]:
        """Keys that are absent from the context or None, in the given order."""
        return [key for key in keys if context.get(key) is None]

    def build_prompt_from_template(
        self,
        template: PromptTemplate,
        context: Mapping[str, Any],
        step_order: int | None = None,
        tools: Sequence[str] | None = None,
    ) -> BuiltPrompt:
        """Render a template.

        Args:
            template: Template to render
            context: Values for the template's required keys
            step_order: Workflow step the prompt is for, if any
            tools: Tools to expose instead of the template's own

        Returns:
            The assembled prompt

        Raises:
            MissingRequiredContext: a required key is absent or None
            PromptBuildError: a nested value the template reads is missing
        """
        missing = self.validate_context(context, template.required_context_keys)
        if missing:
            logger.info("prompt_build_refused", template_id=template.id, missing_keys=missing)
            raise MissingRequiredContext(template.id, missing)

        capped = cap_arrays(context, self._config.max_array_items)
        try:
            rendered = [(name, render_section(source, capped)) for name, source in template.sections.items()]
        except UndefinedError as exc:
            raise PromptBuildError(f"Template {template.id} failed to render: {exc.message}", cause=exc) from exc

        logger.debug("prompt_built", template_id=template.id, step_order=step_order)
        return BuiltPrompt(
            system_prompt=assemble_prompt(rendered),
            tools=tuple(tools) if tools is not None else template.tools,
            template_id=template.id,
            required_context=template.required_context_keys,
            risk_level=template.risk_level,
            requires_confirmation=template.requires_confirmation,
            step_order=step_order,
        )

    def build_prompt_for_intent(self, intent_id: str, context: Mapping[str, Any]) -> BuiltPrompt:
        """Build with the intent's template, falling back to its domain's."""
        return self.build_prompt_from_template(self._templates.get_template_for_intent(intent_id), context)

    def build_prompt_from_template_id(self, template_id: str, context: Mapping[str, Any]) -> BuiltPrompt:
        return self.build_prompt_from_template(self._require_template(template_id), context)

    def preview_prompt(self, template_id: str) -> str:
        """Render a template with placeholder values, for inspection."""
        template = self._require_template(template_id)
        built = self.build_prompt_from_template(template, placeholder_context(template.required_context_keys))
        header = "\n".join((
            f"=== PROMPT PREVIEW: {template.name} ===",
            f"ID: {template.id}",
            f"Domain: {template.domain.value}",
            f"Context step: {template.context_step}",
            f"Risk level: {template.risk_level.value}",
            f"Requires confirmation: {template.requires_confirmation}",
            f"Required context: {', '.join(template.required_context_keys)}",
            f"Tools: {', '.join(template.tools) or 'per step'}",
        ))
        return f"{header}\n\n=== SYSTEM PROMPT ===\n{built.system_prompt}"

    def build_prompts_for_workflow(
        self,
        workflow_id: str,
        context: Mapping[str, Any],
        step_results: Mapping[str, Any] | None = None,
        input_data: Mapping[str, Any] | None = None,
    ) -> list[BuiltPrompt]:
        """One prompt per step, in step order.

        Each step sees the base context, its own runtime keys and the
        results of earlier steps (by output_key, and as `previous_results`).
        A step never sees the result of itself or of a later step.

        Args:
            workflow_id: Workflow to build for
            context: Resolved context for the workflow template's step
            step_results: Tool results gathered so far, keyed by output_key
            input_data: Request data the step arguments read as `input`

        Raises:
            MissingTemplate: unknown workflow or no template for it
            MissingRequiredContext: the base context lacks a required key
        """
        workflow = self._workflows.get(workflow_id)
        if workflow is None:
            raise MissingTemplate(workflow_id)
        template = self._templates.get_template_for_workflow(workflow_id)
        step_results = step_results or {}

        prompts: list[BuiltPrompt] = []
        earlier: dict[str, Any] = {}
        previous: list[dict[str, Any]] = []
        for step in workflow.steps:
            step_context = self.merge_context(
                context,
                {
                    "workflow_name": workflow.name,
                    "step_order": step.order,
                    "total_steps": len(workflow.steps),
                    "step_tool": step.tool,
                    "step_description": step.description,
                    "step_args": resolve_step_args(step, input_data or {}, earlier, context),
                    "previous_results": list(previous),
                },
                earlier,
            )
            prompts.append(
                self.build_prompt_from_template(template, step_context, step_order=step.order, tools=(step.tool,))
            )

            if step.output_key in step_results:
                result = step_results[step.output_key]
                earlier[step.output_key] = result
                previous.append(
                    {"order": step.order, "tool": step.tool, "output_key": step.output_key, "result": result}
                )

        logger.debug("workflow_prompts_built", workflow_id=workflow_id, steps=len(prompts))
        return prompts

    @staticmethod
    def merge_context(*contexts: Mapping[str, Any]) -> dict[str, Any]:
        """Shallow merge; later mappings win and no input is modified."""
        merged: dict[str, Any] = {}
        for context in contexts:
            merged.update(context)
        return merged

    def _require_template(self, template_id: str) -> PromptTemplate:
        template = self._templates.get(template_id)
        if template is None:
            raise MissingTemplate(template_id)
        return template
