"""Intent classification."""

from switchboard.classification.clarification import (
    ENTITY_QUESTIONS,
    generate_clarification_question,
    is_ambiguous,
    needs_clarification,
)
from switchboard.classification.classifier import IntentClassifier, entity_overlap
from switchboard.classification.models import (
    ClassificationRequest,
    ClassifiedIntent,
    IntentAlternative,
)

__all__ = [
    "ClassificationRequest",
    "ClassifiedIntent",
    "ENTITY_QUESTIONS",
    "IntentAlternative",
    "IntentClassifier",
    "entity_overlap",
    "generate_clarification_question",
    "is_ambiguous",
    "needs_clarification",
]
