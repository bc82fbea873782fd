"""Prompt template and built prompt models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from switchboard.taxonomy.enums import Domain, RiskLevel

# Keys the engine supplies for intent and domain templates.
INTENT_RUNTIME_KEYS: frozenset[str] = frozenset({"user_message", "intent_name", "entities"})

# Keys the builder supplies per step for workflow templates.
WORKFLOW_RUNTIME_KEYS: frozenset[str] = frozenset({
    "workflow_name",
    "step_order",
    "total_steps",
    "step_tool",
    "step_description",
    "step_args",
    "previous_results",
})


class TargetKind(str, Enum):
    """What a template is registered for."""

    INTENT = "intent"
    DOMAIN = "domain"
    WORKFLOW = "workflow"


class PromptSections(BaseModel):
    """Jinja2 sources for each part of a system prompt.

    Empty sections are left out of the assembled prompt.
    """

    model_config = ConfigDict(frozen=True)

    role: str
    context: str = ""
    task: str = ""
    constraints: str = ""
    output_format: str = ""

    def items(self) -> tuple[tuple[str, str], ...]:
        return (
            ("role", self.role),
            ("context", self.context),
            ("task", self.task),
            ("constraints", self.constraints),
            ("output_format", self.output_format),
        )


class PromptTemplate(BaseModel):
    """A prompt skeleton for an intent, a domain or a workflow.

    `context_step` names the context map step (within `domain`) whose
    fields feed the template. Every variable the sections reference must
    be listed in `required_context_keys`.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str
    target_kind: TargetKind
    target_id: str = Field(..., description="Intent id, domain value or workflow id")
    domain: Domain
    context_step: str
    sections: PromptSections
    required_context_keys: tuple[str, ...] = ()
    tools: tuple[str, ...] = ()
    risk_level: RiskLevel = RiskLevel.LOW
    requires_confirmation: bool = False


class BuiltPrompt(BaseModel):
    """A fully rendered system prompt ready for the reasoning step."""

    model_config = ConfigDict(frozen=True)

    system_prompt: str
    tools: tuple[str, ...]
    template_id: str
    required_context: tuple[str, ...]
    risk_level: RiskLevel
    requires_confirmation: bool
    step_order: int | None = Field(default=None, description="Set on workflow step prompts only")
