"""Rendering step argument templates.

Expressions are jinja2 expressions over `input`, `results` and `context`.
Chained lookups on missing values ("results.customer.id" before a customer
exists) evaluate to None instead of failing.
"""

from collections.abc import Mapping
from functools import lru_cache
from typing import Any

from jinja2 import ChainableUndefined, Environment, nodes
from jinja2.environment import TemplateExpression

from switchboard.workflows.models import MultiStepWorkflow, OrderedStep

_ENVIRONMENT = Environment(undefined=ChainableUndefined, autoescape=False)


@lru_cache(maxsize=512)
def compile_step_expression(source: str) -> TemplateExpression:
    """Compile an expression once; raises jinja2.TemplateSyntaxError when invalid."""
    return _ENVIRONMENT.compile_expression(source, undefined_to_none=True)


def _scope(
    input_data: Mapping[str, Any],
    results: Mapping[str, Any],
    context: Mapping[str, Any] | None,
) -> dict[str, Any]:
    return {"input": dict(input_data), "results": dict(results), "context": dict(context or {})}


def resolve_step_args(
    step: OrderedStep,
    input_data: Mapping[str, Any],
    results: Mapping[str, Any],
    context: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Evaluate a step's argument template.

    Args:
        step: Step whose args_template to render
        input_data: Request data (entities, form fields)
        results: Outputs of earlier steps keyed by output_key
        context: Host context such as the business id

    Returns:
        Argument name to value; unresolved references are None
    """
    scope = _scope(input_data, results, context)
    return {
        name: compile_step_expression(expression)(**scope)
        for name, expression in step.args_template.items()
    }


def should_skip(
    step: OrderedStep,
    input_data: Mapping[str, Any],
    results: Mapping[str, Any],
    context: Mapping[str, Any] | None = None,
) -> bool:
    """Whether the step's skip_if expression is truthy."""
    if not step.skip_if:
        return False
    return bool(compile_step_expression(step.skip_if)(**_scope(input_data, results, context)))


def input_references(expression: str) -> list[str]:
    """Names of the `input.<key>` lookups an expression makes, in order."""
    parsed = _ENVIRONMENT.parse(f"{{{{ {expression} }}}}")
    keys: list[str] = []
    for node in parsed.find_all(nodes.Getattr):
        if isinstance(node.node, nodes.Name) and node.node.name == "input" and node.attr not in keys:
            keys.append(node.attr)
    return keys


def missing_inputs(workflow: MultiStepWorkflow, input_data: Mapping[str, Any]) -> list[str]:
    """Input keys the workflow cannot start without.

    Looks at the first step that is neither optional nor conditional. Every
    argument of that step that evaluates to an empty value against the
    input contributes the input keys it reads.
    """
    first_step = next(
        (step for step in workflow.steps if not step.optional and not step.skip_if),
        None,
    )
    if first_step is None:
        return []

    scope = _scope(input_data, {}, None)
    missing: list[str] = []
    for expression in first_step.args_template.values():
        if compile_step_expression(expression)(**scope) not in (None, ""):
            continue
        for key in input_references(expression):
            if key not in missing:
                missing.append(key)
    return missing
