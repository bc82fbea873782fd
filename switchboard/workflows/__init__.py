"""Multi-step workflows and their matcher."""

from switchboard.workflows.arguments import (
    missing_inputs,
    resolve_step_args,
    should_skip,
)
from switchboard.workflows.catalog import WORKFLOWS
from switchboard.workflows.matcher import WorkflowMatch, WorkflowMatcher
from switchboard.workflows.models import (
    MultiStepWorkflow,
    OrderedStep,
    SpecialCardType,
    WorkflowCategory,
)
from switchboard.workflows.registry import WorkflowRegistry
from switchboard.workflows.tools import TOOL_CATALOG, TOOLS

__all__ = [
    "MultiStepWorkflow",
    "OrderedStep",
    "SpecialCardType",
    "TOOLS",
    "TOOL_CATALOG",
    "WORKFLOWS",
    "WorkflowCategory",
    "WorkflowMatch",
    "WorkflowMatcher",
    "WorkflowRegistry",
    "missing_inputs",
    "resolve_step_args",
    "should_skip",
]
