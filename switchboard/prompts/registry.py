"""Immutable registry of prompt templates."""

from collections.abc import Collection, Iterable
from types import MappingProxyType

from jinja2 import TemplateSyntaxError

from switchboard.context.context_map import ContextMap
from switchboard.errors import MissingTemplate, RegistryInvariantViolation
from switchboard.observability.logging import get_logger
from switchboard.prompts.models import (
    INTENT_RUNTIME_KEYS,
    WORKFLOW_RUNTIME_KEYS,
    PromptTemplate,
    TargetKind,
)
from switchboard.prompts.rendering import compile_section, referenced_variables
from switchboard.taxonomy.enums import Domain
from switchboard.taxonomy.registry import TaxonomyRegistry
from switchboard.workflows.registry import WorkflowRegistry
from switchboard.workflows.tools import TOOL_CATALOG

logger = get_logger(__name__)


class PromptTemplateRegistry:
    """Templates by id and by target, validated once at load.

    Load-time checks:
        - template ids are unique, one template per target
        - targets exist: intents in the taxonomy, workflows in the workflow
          registry, both in the template's domain
        - the context step exists in the context map for the domain
        - every section compiles
        - every variable a section references is in required_context_keys
        - every required key is declared by the context step or supplied by
          the builder at runtime
        - every tool is in the tool catalog
    """

    def __init__(
        self,
        templates: Iterable[PromptTemplate],
        taxonomy: TaxonomyRegistry,
        workflows: WorkflowRegistry,
        context_map: ContextMap,
        tool_catalog: Collection[str] = TOOL_CATALOG,
    ) -> None:
        self._templates = tuple(templates)
        self._taxonomy = taxonomy
        violations: list[str] = []

        seen_ids: set[str] = set()
        seen_targets: set[tuple[TargetKind, str]] = set()
        for template in self._templates:
            if template.id in seen_ids:
                violations.append(f"duplicate template id: {template.id}")
            seen_ids.add(template.id)

            target = (template.target_kind, template.target_id)
            if target in seen_targets:
                violations.append(
                    f"template {template.id} duplicates {template.target_kind.value} target {template.target_id}"
                )
            seen_targets.add(target)

            violations.extend(self._check_target(template, taxonomy, workflows))
            violations.extend(self._check_sections(template))
            violations.extend(self._check_context(template, context_map))
            violations.extend(
                f"template {template.id} uses unknown tool {tool}"
                for tool in template.tools
                if tool not in tool_catalog
            )

        if violations:
            raise RegistryInvariantViolation("prompts", violations)

        self._by_id = MappingProxyType({template.id: template for template in self._templates})
        self._by_target = MappingProxyType({
            (template.target_kind, template.target_id): template for template in self._templates
        })
        logger.debug("prompt_templates_loaded", count=len(self._templates))

    @staticmethod
    def _check_target(
        template: PromptTemplate,
        taxonomy: TaxonomyRegistry,
        workflows: WorkflowRegistry,
    ) -> list[str]:
        if template.target_kind == TargetKind.DOMAIN:
            if template.target_id != template.domain.value:
                return [
                    f"template {template.id} targets domain {template.target_id} "
                    f"but declares {template.domain.value}"
                ]
            return []

        if template.target_kind == TargetKind.INTENT:
            intent = taxonomy.get_intent(template.target_id)
            if intent is None:
                return [f"template {template.id} targets unknown intent {template.target_id}"]
            target_domain = intent.domain
        else:
            workflow = workflows.get(template.target_id)
            if workflow is None:
                return [f"template {template.id} targets unknown workflow {template.target_id}"]
            target_domain = workflow.domain

        if target_domain != template.domain:
            return [
                f"template {template.id} declares domain {template.domain.value} "
                f"but its target is in {target_domain.value}"
            ]
        return []

    @staticmethod
    def _check_sections(template: PromptTemplate) -> list[str]:
        violations: list[str] = []
        declared = set(template.required_context_keys)
        for name, source in template.sections.items():
            if not source:
                continue
            try:
                compile_section(source)
                referenced = referenced_variables(source)
            except TemplateSyntaxError as exc:
                violations.append(f"template {template.id} section {name} does not parse: {exc.message}")
                continue
            violations.extend(
                f"template {template.id} section {name} references undeclared key {key}"
                for key in sorted(referenced - declared)
            )
        return violations

    @staticmethod
    def _check_context(template: PromptTemplate, context_map: ContextMap) -> list[str]:
        if template.context_step not in context_map.steps_for(template.domain):
            return [
                f"template {template.id} uses unknown context step "
                f"{template.domain.value}/{template.context_step}"
            ]

        runtime_keys = WORKFLOW_RUNTIME_KEYS if template.target_kind == TargetKind.WORKFLOW else INTENT_RUNTIME_KEYS
        declared = set(context_map.get_required_context(template.domain, template.context_step).keys)
        return [
            f"template {template.id} requires key {key} that "
            f"{template.domain.value}/{template.context_step} does not provide"
            for key in template.required_context_keys
            if key not in declared and key not in runtime_keys
        ]

    @property
    def templates(self) -> tuple[PromptTemplate, ...]:
        return self._templates

    def get(self, template_id: str) -> PromptTemplate | None:
        return self._by_id.get(template_id)

    def get_template_for_intent(self, intent_id: str) -> PromptTemplate:
        """The intent's own template, else its domain's template.

        Raises:
            MissingTemplate: unknown intent, or neither template exists
        """
        template = self._by_target.get((TargetKind.INTENT, intent_id))
        if template is not None:
            return template

        intent = self._taxonomy.get_intent(intent_id)
        if intent is not None:
            template = self._by_target.get((TargetKind.DOMAIN, intent.domain.value))
            if template is not None:
                return template
        raise MissingTemplate(intent_id)

    def get_template_for_domain(self, domain: Domain) -> PromptTemplate | None:
        return self._by_target.get((TargetKind.DOMAIN, domain.value))

    def get_templates_for_domain(self, domain: Domain) -> tuple[PromptTemplate, ...]:
        """Every template in the domain: domain, intent and workflow templates."""
        return tuple(template for template in self._templates if template.domain == domain)

    def get_template_for_workflow(self, workflow_id: str) -> PromptTemplate:
        """Raises MissingTemplate when the workflow has no template."""
        template = self._by_target.get((TargetKind.WORKFLOW, workflow_id))
        if template is None:
            raise MissingTemplate(workflow_id)
        return template

    def __len__(self) -> int:
        return len(self._templates)
