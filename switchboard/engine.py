"""Host-facing entry point: classify an utterance, then build prompts.

The engine is stateless between calls. It owns no data access: context
values come from the host's ContextResolver, and tools are never invoked
here.
"""

import time
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict

from switchboard.bootstrap import Registries, get_registries
from switchboard.classification import (
    ClassificationRequest,
    ClassifiedIntent,
    IntentClassifier,
    generate_clarification_question,
    needs_clarification,
)
from switchboard.config import Settings, get_settings
from switchboard.context import resolve_step_context
from switchboard.errors import MissingRequiredContext, MissingRequiredEntities, PromptBuildError
from switchboard.interfaces import ContextResolver
from switchboard.observability.logging import get_logger
from switchboard.observability.metrics import (
    CLARIFICATIONS_REQUESTED,
    CLASSIFICATION_LATENCY,
    CLASSIFICATIONS,
    ENTITIES_EXTRACTED,
    PROMPT_BUILDS,
    WORKFLOW_MATCHES,
)
from switchboard.prompts import BuiltPrompt, PromptBuilder, PromptTemplate
from switchboard.workflows import WorkflowMatch, WorkflowMatcher

logger = get_logger(__name__)


class ClassificationResponse(BaseModel):
    """What the host gets back for one utterance.

    clarification_question is set when the host should ask the user before
    acting; building a prompt for such a response is refused.
    """

    model_config = ConfigDict(frozen=True)

    intent: ClassifiedIntent
    workflow: WorkflowMatch | None = None
    clarification_question: str | None = None

    @property
    def needs_clarification(self) -> bool:
        return self.clarification_question is not None


class ClassificationEngine:
    """Classifier, workflow matcher and prompt builder over shared registries."""

    def __init__(
        self,
        registries: Registries | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._registries = registries or get_registries()
        self._settings = settings or get_settings()
        self._classifier = IntentClassifier(
            self._registries.taxonomy,
            self._registries.patterns,
            self._settings.classifier,
            self._settings.extraction,
        )
        self._matcher = WorkflowMatcher(self._registries.patterns, self._registries.workflows)
        self._builder = PromptBuilder(
            self._registries.templates,
            self._registries.workflows,
            self._settings.prompts,
        )
        self._metrics_enabled = self._settings.observability.metrics.enabled

    @property
    def builder(self) -> PromptBuilder:
        return self._builder

    def classify(self, request: ClassificationRequest) -> ClassificationResponse:
        """Classify an utterance and check it against the workflow pool.

        A workflow hit with no intent hit is a complete answer: the response
        carries the workflow alone and no clarification question.
        """
        started = time.perf_counter()

        intent = self._classifier.classify(request)
        match = self._matcher.match_patterns(request.text)
        workflow = match if match.matched else None

        classifier_config = self._settings.classifier
        question = None
        if needs_clarification(intent, classifier_config.clarification_threshold, classifier_config.ambiguity_ratio):
            if not (intent.is_unclassified and workflow is not None):
                question = generate_clarification_question(intent, classifier_config.ambiguity_ratio)

        response = ClassificationResponse(intent=intent, workflow=workflow, clarification_question=question)
        self._record_classification(response, time.perf_counter() - started)

        logger.info(
            "utterance_classified",
            intent_id=intent.intent_id,
            domain=intent.domain.value if intent.domain else None,
            confidence=round(intent.confidence, 3),
            workflow_id=workflow.workflow_id if workflow else None,
            needs_clarification=question is not None,
        )
        return response

    def build_prompt(self, response: ClassificationResponse, resolver: ContextResolver) -> BuiltPrompt:
        """Build the system prompt for a classified intent.

        Resolves the context step of the intent's template (or its domain's
        template), adds the request's runtime values and renders.

        Raises:
            MissingRequiredEntities: the response still needs clarification
            NoIntentMatch: the response carries no intent
            MissingTemplate: neither the intent nor its domain has a template
            MissingRequiredContext: the resolver left a required key empty
        """
        intent = response.intent
        if response.clarification_question is not None:
            raise MissingRequiredEntities(
                intent.intent_id,
                [entity_type.value for entity_type in intent.missing_required],
                response.clarification_question,
            )

        intent_id = intent.require_intent()
        template = self._registries.templates.get_template_for_intent(intent_id)
        runtime = {
            "user_message": intent.text,
            "intent_name": intent.intent_name,
            "entities": [{"type": entity.type.value, "value": entity.value} for entity in intent.entities],
        }
        return self._build(template, resolver, runtime)

    def build_workflow_prompts(
        self,
        workflow_id: str,
        resolver: ContextResolver,
        step_results: Mapping[str, Any] | None = None,
        input_data: Mapping[str, Any] | None = None,
    ) -> list[BuiltPrompt]:
        """Build one prompt per workflow step.

        Args:
            workflow_id: Workflow to build for
            resolver: Data-loading layer for the workflow template's context
            step_results: Tool results of steps already run, by output_key
            input_data: Request values the step arguments read as `input`

        Raises:
            MissingTemplate: unknown workflow or no template for it
            MissingRequiredContext: the resolver left a required key empty
        """
        template = self._registries.templates.get_template_for_workflow(workflow_id)
        context = self._resolve(template, resolver)
        try:
            prompts = self._builder.build_prompts_for_workflow(workflow_id, context, step_results, input_data)
        except PromptBuildError:
            self._record_build(template.id, "refused")
            raise
        self._record_build(template.id, "built")
        return prompts

    def _build(
        self,
        template: PromptTemplate,
        resolver: ContextResolver,
        runtime: Mapping[str, Any],
    ) -> BuiltPrompt:
        context = self._resolve(template, resolver)
        try:
            built = self._builder.build_prompt_from_template(template, self._builder.merge_context(context, runtime))
        except PromptBuildError:
            self._record_build(template.id, "refused")
            raise
        self._record_build(template.id, "built")
        return built

    def _resolve(self, template: PromptTemplate, resolver: ContextResolver) -> dict[str, Any]:
        step = self._registries.context_map.get_required_context(template.domain, template.context_step)
        try:
            return resolve_step_context(step, resolver)
        except MissingRequiredContext:
            self._record_build(template.id, "refused")
            raise

    def _record_build(self, template_id: str, status: str) -> None:
        if self._metrics_enabled:
            PROMPT_BUILDS.labels(template_id=template_id, status=status).inc()

    def _record_classification(self, response: ClassificationResponse, elapsed: float) -> None:
        if not self._metrics_enabled:
            return

        intent = response.intent
        CLASSIFICATION_LATENCY.observe(elapsed)
        for entity in intent.entities:
            ENTITIES_EXTRACTED.labels(entity_type=entity.type.value).inc()
        if response.workflow is not None:
            WORKFLOW_MATCHES.labels(workflow_id=response.workflow.workflow_id).inc()

        if response.needs_clarification:
            outcome = "clarification"
            if intent.is_unclassified:
                reason = "unclassified"
            elif intent.missing_required:
                reason = "missing_entities"
            else:
                reason = "low_confidence"
            CLARIFICATIONS_REQUESTED.labels(reason=reason).inc()
        elif intent.is_unclassified:
            outcome = "workflow"
        else:
            outcome = "classified"

        domain = intent.domain.value if intent.domain else "none"
        CLASSIFICATIONS.labels(domain=domain, outcome=outcome).inc()
