"""Error hierarchy for switchboard.

Per-call errors (extraction, classification) are recovered close to where
they happen and turn into "ask the user" behavior. Prompt build errors abort
that one request. Registry errors are configuration bugs and are never
caught: the process must not serve requests with a corrupt catalog.
"""

from collections.abc import Sequence


class SwitchboardError(Exception):
    """Base exception for all switchboard errors."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class ExtractionAmbiguous(SwitchboardError):
    """Raised by a normalizer when a span cannot be typed with confidence.

    Never escapes entity extraction: the span is logged and omitted.

    Examples:
        - "02/30" (no such calendar day)
        - a digit run too short or too long to be a phone number
    """

    def __init__(self, raw_span: str, reason: str) -> None:
        super().__init__(f"Ambiguous span {raw_span!r}: {reason}")
        self.raw_span = raw_span
        self.reason = reason


class NoIntentMatch(SwitchboardError):
    """Raised when a caller insists on an intent for an unclassified utterance."""

    def __init__(self, text: str) -> None:
        super().__init__(f"No intent matched: {text!r}")
        self.text = text


class NoWorkflowMatch(SwitchboardError):
    """Raised when a caller insists on a workflow for an unmatched utterance."""

    def __init__(self, text: str) -> None:
        super().__init__(f"No workflow matched: {text!r}")
        self.text = text


class MissingRequiredEntities(SwitchboardError):
    """Raised when a prompt is requested before clarification is resolved.

    Carries the question that should be put to the user instead.
    """

    def __init__(self, intent_id: str | None, missing: Sequence[str], question: str) -> None:
        super().__init__(f"Clarification required for {intent_id}: {question}")
        self.intent_id = intent_id
        self.missing = list(missing)
        self.question = question


class PromptBuildError(SwitchboardError):
    """Base for errors that abort prompt building for a request."""

    pass


class MissingTemplate(PromptBuildError):
    """Raised when no template is registered for an intent, domain or workflow."""

    def __init__(self, target: str) -> None:
        super().__init__(f"No prompt template registered for: {target}")
        self.target = target


class MissingRequiredContext(PromptBuildError):
    """Raised when required context keys are absent.

    A half-populated prompt silently degrades the downstream reasoning
    step, so building refuses instead.
    """

    def __init__(self, template_id: str, missing_keys: Sequence[str]) -> None:
        keys = ", ".join(missing_keys)
        super().__init__(f"Missing required context for template {template_id}: {keys}")
        self.template_id = template_id
        self.missing_keys = list(missing_keys)


class RegistryInvariantViolation(SwitchboardError):
    """Raised at load time when a catalog breaks one of its invariants.

    Examples:
        - duplicate intent ids
        - non-contiguous workflow step order
        - pattern examples matched by more than one pattern set
        - a template referencing an undeclared context key
    """

    def __init__(self, registry: str, violations: Sequence[str]) -> None:
        details = "; ".join(violations)
        super().__init__(f"{registry} registry failed validation: {details}")
        self.registry = registry
        self.violations = list(violations)
