"""Multi-step workflow models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from switchboard.taxonomy.enums import Domain


class WorkflowCategory(str, Enum):
    """Where a workflow sits in the service lifecycle."""

    PRE_SERVICE = "pre_service"
    SERVICE_DELIVERY = "service_delivery"
    POST_SERVICE = "post_service"
    OPERATIONS = "operations"


class SpecialCardType(str, Enum):
    """Dedicated UI card the host renders for a workflow's progress."""

    LEAD_WORKFLOW = "lead_workflow"
    ASSESSMENT_WORKFLOW = "assessment_workflow"
    COMMUNICATION_WORKFLOW = "communication_workflow"


class OrderedStep(BaseModel):
    """One tool invocation within a workflow.

    `args_template` maps argument names to jinja expressions evaluated over
    `input` (the request data), `results` (earlier step outputs keyed by
    their output_key) and `context` (host context). `skip_if` is an
    expression of the same kind; a truthy result skips the step.
    """

    model_config = ConfigDict(frozen=True)

    order: int = Field(..., ge=1)
    tool: str = Field(..., min_length=1)
    description: str
    args_template: dict[str, str] = Field(default_factory=dict)
    output_key: str = Field(..., min_length=1)
    optional: bool = False
    skip_if: str | None = None
    retry_on_fail: bool = False


class MultiStepWorkflow(BaseModel):
    """An ordered sequence of tool invocations recognized from one request."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str
    description: str
    domain: Domain
    category: WorkflowCategory
    steps: tuple[OrderedStep, ...]
    preconditions: tuple[str, ...] = ()
    postconditions: tuple[str, ...] = ()
    success_metrics: tuple[str, ...] = ()
    special_card_type: SpecialCardType | None = None
    estimated_duration_ms: int = Field(default=5000, ge=0)

    @property
    def tools(self) -> tuple[str, ...]:
        """Tool names in step order."""
        return tuple(step.tool for step in self.steps)
