"""Immutable registry of multi-step workflows."""

from collections.abc import Collection, Iterable
from types import MappingProxyType

from jinja2 import TemplateSyntaxError

from switchboard.errors import RegistryInvariantViolation
from switchboard.observability.logging import get_logger
from switchboard.taxonomy.enums import Domain
from switchboard.workflows.arguments import compile_step_expression
from switchboard.workflows.models import MultiStepWorkflow, WorkflowCategory
from switchboard.workflows.tools import TOOL_CATALOG

logger = get_logger(__name__)


class WorkflowRegistry:
    """Workflows by id, validated once at load.

    Load-time checks:
        - workflow ids are unique
        - step order is exactly 1..N and matches position
        - every step names a tool from the tool catalog
        - output keys are unique within a workflow
        - argument and skip_if expressions parse
    """

    def __init__(
        self,
        workflows: Iterable[MultiStepWorkflow],
        tool_catalog: Collection[str] = TOOL_CATALOG,
    ) -> None:
        self._workflows = tuple(workflows)
        violations: list[str] = []

        seen: set[str] = set()
        for workflow in self._workflows:
            if workflow.id in seen:
                violations.append(f"duplicate workflow id: {workflow.id}")
            seen.add(workflow.id)
            violations.extend(self._check_workflow(workflow, tool_catalog))

        if violations:
            raise RegistryInvariantViolation("workflows", violations)

        self._by_id = MappingProxyType({workflow.id: workflow for workflow in self._workflows})
        logger.debug("workflows_loaded", count=len(self._workflows))

    @staticmethod
    def _check_workflow(workflow: MultiStepWorkflow, tool_catalog: Collection[str]) -> list[str]:
        violations: list[str] = []

        if not workflow.steps:
            violations.append(f"workflow {workflow.id} has no steps")

        orders = [step.order for step in workflow.steps]
        if orders != list(range(1, len(orders) + 1)):
            violations.append(f"workflow {workflow.id} step order is not 1..N: {orders}")

        output_keys: set[str] = set()
        for step in workflow.steps:
            if step.tool not in tool_catalog:
                violations.append(f"workflow {workflow.id} step {step.order} uses unknown tool {step.tool}")
            if step.output_key in output_keys:
                violations.append(
                    f"workflow {workflow.id} step {step.order} reuses output key {step.output_key}"
                )
            output_keys.add(step.output_key)

            expressions = dict(step.args_template)
            if step.skip_if:
                expressions["skip_if"] = step.skip_if
            for name, expression in expressions.items():
                try:
                    compile_step_expression(expression)
                except TemplateSyntaxError as exc:
                    violations.append(
                        f"workflow {workflow.id} step {step.order} has invalid expression "
                        f"for {name}: {exc.message}"
                    )
        return violations

    @property
    def workflows(self) -> tuple[MultiStepWorkflow, ...]:
        """All workflows in registration order."""
        return self._workflows

    @property
    def ids(self) -> frozenset[str]:
        return frozenset(self._by_id)

    def get(self, workflow_id: str) -> MultiStepWorkflow | None:
        return self._by_id.get(workflow_id)

    def by_domain(self, domain: Domain) -> tuple[MultiStepWorkflow, ...]:
        return tuple(workflow for workflow in self._workflows if workflow.domain == domain)

    def by_category(self, category: WorkflowCategory) -> tuple[MultiStepWorkflow, ...]:
        return tuple(workflow for workflow in self._workflows if workflow.category == category)

    def __contains__(self, workflow_id: object) -> bool:
        return workflow_id in self._by_id

    def __len__(self) -> int:
        return len(self._workflows)
