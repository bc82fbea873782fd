"""Recognize compound requests as multi-step workflows.

Workflows are recognized by trigger phrase alone: no entity extraction and
no scoring. The first workflow-pool pattern, in priority order, whose
regexes hit wins.
"""

from pydantic import BaseModel, ConfigDict

from switchboard.errors import NoWorkflowMatch
from switchboard.observability.logging import get_logger
from switchboard.patterns.models import PatternPool
from switchboard.patterns.registry import PatternRegistry
from switchboard.workflows.models import OrderedStep
from switchboard.workflows.registry import WorkflowRegistry

logger = get_logger(__name__)


class WorkflowMatch(BaseModel):
    """Result of matching an utterance against the workflow pool."""

    model_config = ConfigDict(frozen=True)

    text: str
    pattern_id: str | None = None
    workflow_id: str | None = None
    steps: tuple[OrderedStep, ...] = ()

    @property
    def matched(self) -> bool:
        return self.workflow_id is not None

    def require_workflow(self) -> str:
        """Return the workflow id.

        Raises:
            NoWorkflowMatch: no workflow pattern matched
        """
        if self.workflow_id is None:
            raise NoWorkflowMatch(self.text)
        return self.workflow_id


class WorkflowMatcher:
    """Matches utterances against the workflow pattern pool."""

    def __init__(self, patterns: PatternRegistry, workflows: WorkflowRegistry) -> None:
        self._patterns = patterns
        self._workflows = workflows

    def match_patterns(self, text: str) -> WorkflowMatch:
        for pattern in self._patterns.get_pool(PatternPool.WORKFLOW):
            if not pattern.matches_phrase(text):
                continue

            workflow = self._workflows.get(pattern.target_id)
            if workflow is None:
                # Pattern registry is validated against the workflow ids.
                continue

            logger.debug("workflow_matched", pattern_id=pattern.id, workflow_id=workflow.id)
            return WorkflowMatch(
                text=text,
                pattern_id=pattern.id,
                workflow_id=workflow.id,
                steps=workflow.steps,
            )

        logger.debug("workflow_unmatched")
        return WorkflowMatch(text=text)
