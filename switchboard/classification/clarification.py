"""Deciding when to ask the user, and what to ask."""

from types import MappingProxyType

from switchboard.classification.models import ClassifiedIntent
from switchboard.taxonomy.enums import EntityType

ENTITY_QUESTIONS = MappingProxyType({
    EntityType.DATE: "What date should this be for?",
    EntityType.DATE_RANGE: "What period should this cover?",
    EntityType.TIME: "What time works?",
    EntityType.DURATION: "How long did it take?",
    EntityType.MONEY: "What amount should I use?",
    EntityType.PERCENTAGE: "What percentage should I apply?",
    EntityType.JOB_ID: "Which job is this for?",
    EntityType.QUOTE_ID: "Which quote do you mean?",
    EntityType.INVOICE_ID: "Which invoice do you mean?",
    EntityType.CUSTOMER_ID: "Which customer is this for?",
    EntityType.PAYMENT_ID: "Which payment do you mean?",
    EntityType.REFERENCE_ID: "What is the reference number?",
    EntityType.NAME: "Who is this for?",
    EntityType.EMAIL: "What email address should I use?",
    EntityType.PHONE: "What phone number should I use?",
    EntityType.ADDRESS: "What is the address?",
    EntityType.NOTE: "What should the message say?",
    EntityType.FREQUENCY: "How often should this repeat?",
    EntityType.PAYMENT_METHOD: "How was it paid?",
})

_unasked = set(EntityType) - set(ENTITY_QUESTIONS)
if _unasked:
    raise RuntimeError(f"No clarification question for entity types: {sorted(_unasked)}")

UNCLASSIFIED_QUESTION = (
    "I'm not sure what you'd like to do. Could you rephrase, or tell me whether "
    "this is about a customer, a job, the schedule, a quote or an invoice?"
)


DEFAULT_AMBIGUITY_RATIO = 0.8
MAX_OPTIONS = 3


def is_ambiguous(classified: ClassifiedIntent, ambiguity_ratio: float = DEFAULT_AMBIGUITY_RATIO) -> bool:
    """Whether the runner-up scores close enough to the best guess to ask."""
    if classified.is_unclassified or not classified.alternatives:
        return False
    runner_up = max(alternative.confidence for alternative in classified.alternatives)
    return runner_up > classified.confidence * ambiguity_ratio


def needs_clarification(
    classified: ClassifiedIntent,
    threshold: float,
    ambiguity_ratio: float = DEFAULT_AMBIGUITY_RATIO,
) -> bool:
    """Whether the caller should ask the user before acting.

    True for unclassified results, for confidence below the threshold, when
    the runner-up is within the ambiguity ratio of the best guess, and for
    confirmation-required intents that are missing required entities.
    """
    if classified.is_unclassified:
        return True
    if classified.confidence < threshold:
        return True
    if is_ambiguous(classified, ambiguity_ratio):
        return True
    return bool(classified.missing_required) and classified.confirmation_required


def generate_clarification_question(
    classified: ClassifiedIntent,
    ambiguity_ratio: float = DEFAULT_AMBIGUITY_RATIO,
) -> str:
    """Render a deterministic clarification question.

    An ambiguous result lists the best guess and its closest runners-up.
    Missing required entities get one question each, in required-list
    order, joined by spaces. Otherwise the user is asked to confirm the
    guessed intent, or to rephrase when there is no guess.
    """
    if classified.is_unclassified:
        return UNCLASSIFIED_QUESTION

    if is_ambiguous(classified, ambiguity_ratio):
        names = [classified.intent_name or classified.intent_id or ""]
        names.extend(alternative.intent_name for alternative in classified.alternatives[: MAX_OPTIONS - 1])
        options = ", or ".join(name.lower() for name in names)
        return f"I want to make sure I understand. Did you want to: {options}?"

    if classified.missing_required:
        return " ".join(ENTITY_QUESTIONS[entity_type] for entity_type in classified.missing_required)

    action = (classified.intent_name or classified.intent_id or "").lower()
    return f"Just to confirm, do you want to {action}?"
