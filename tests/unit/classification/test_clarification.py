"""Tests for clarification decisions and questions."""

from switchboard.classification import (
    ENTITY_QUESTIONS,
    ClassifiedIntent,
    IntentAlternative,
    generate_clarification_question,
    is_ambiguous,
    needs_clarification,
)
from switchboard.classification.clarification import UNCLASSIFIED_QUESTION
from switchboard.taxonomy import Domain, EntityType

THRESHOLD = 0.5


def _classified(**overrides) -> ClassifiedIntent:
    values = {
        "text": "schedule the job",
        "intent_id": "schedule_job",
        "intent_name": "Schedule Job",
        "domain": Domain.SCHEDULING,
        "confidence": 0.75,
    }
    values.update(overrides)
    return ClassifiedIntent(**values)


class TestNeedsClarification:
    """When the caller should ask before acting."""

    def test_confident_and_complete(self) -> None:
        assert not needs_clarification(_classified(), THRESHOLD)

    def test_unclassified(self) -> None:
        assert needs_clarification(ClassifiedIntent(text="hello there"), THRESHOLD)

    def test_low_confidence(self) -> None:
        assert needs_clarification(_classified(confidence=0.24), THRESHOLD)

    def test_threshold_is_inclusive(self) -> None:
        assert not needs_clarification(_classified(confidence=0.5), THRESHOLD)

    def test_missing_entities_on_confirmation_intent(self) -> None:
        classified = _classified(
            intent_id="void_invoice",
            missing_required=(EntityType.INVOICE_ID,),
            confirmation_required=True,
        )

        assert needs_clarification(classified, THRESHOLD)

    def test_missing_entities_without_confirmation(self) -> None:
        """A low-risk intent can proceed and gather the rest later."""
        classified = _classified(missing_required=(EntityType.DATE,), confirmation_required=False)

        assert not needs_clarification(classified, THRESHOLD)


class TestGenerateClarificationQuestion:
    """Questions are deterministic and follow the required-list order."""

    def test_one_missing_entity(self) -> None:
        classified = _classified(missing_required=(EntityType.INVOICE_ID,))

        assert generate_clarification_question(classified) == "Which invoice do you mean?"

    def test_missing_entities_in_order(self) -> None:
        classified = _classified(missing_required=(EntityType.JOB_ID, EntityType.DATE))

        assert generate_clarification_question(classified) == (
            "Which job is this for? What date should this be for?"
        )

    def test_same_input_same_question(self) -> None:
        classified = _classified(missing_required=(EntityType.DATE, EntityType.TIME))

        assert generate_clarification_question(classified) == generate_clarification_question(classified)

    def test_low_confidence_asks_to_confirm(self) -> None:
        classified = _classified(confidence=0.24)

        assert generate_clarification_question(classified) == "Just to confirm, do you want to schedule job?"

    def test_unclassified_asks_to_rephrase(self) -> None:
        question = generate_clarification_question(ClassifiedIntent(text="hello there"))

        assert question == UNCLASSIFIED_QUESTION

    def test_every_entity_type_has_a_question(self) -> None:
        assert set(ENTITY_QUESTIONS) == set(EntityType)
        assert all(question.endswith("?") for question in ENTITY_QUESTIONS.values())


def _alternative(intent_id: str, name: str, confidence: float) -> IntentAlternative:
    return IntentAlternative(intent_id=intent_id, intent_name=name, domain=Domain.SCHEDULING, confidence=confidence)


class TestAmbiguity:
    """A runner-up close to the best guess means the user should choose."""

    def test_similar_confidence_needs_clarification(self) -> None:
        classified = _classified(
            confidence=0.55,
            alternatives=(_alternative("reschedule_job", "Reschedule Job", 0.52),),
        )

        assert is_ambiguous(classified)
        assert needs_clarification(classified, THRESHOLD)

    def test_distant_runner_up_is_not_ambiguous(self) -> None:
        classified = _classified(alternatives=(_alternative("reschedule_job", "Reschedule Job", 0.6),))

        assert not is_ambiguous(classified)
        assert not needs_clarification(classified, THRESHOLD)

    def test_ratio_is_configurable(self) -> None:
        classified = _classified(alternatives=(_alternative("reschedule_job", "Reschedule Job", 0.65),))

        assert needs_clarification(classified, THRESHOLD)
        assert not needs_clarification(classified, THRESHOLD, ambiguity_ratio=0.9)

    def test_unclassified_is_never_ambiguous(self) -> None:
        assert not is_ambiguous(ClassifiedIntent(text="hello there"))

    def test_question_lists_up_to_three_options(self) -> None:
        classified = _classified(
            confidence=0.55,
            missing_required=(EntityType.JOB_ID,),
            alternatives=(
                _alternative("reschedule_job", "Reschedule Job", 0.52),
                _alternative("cancel_job", "Cancel Job", 0.5),
                _alternative("view_calendar", "View Calendar", 0.45),
            ),
        )

        assert generate_clarification_question(classified) == (
            "I want to make sure I understand. Did you want to: schedule job, or reschedule job, or cancel job?"
        )

    def test_question_without_ambiguity_asks_for_entities(self) -> None:
        classified = _classified(
            missing_required=(EntityType.JOB_ID,),
            alternatives=(_alternative("reschedule_job", "Reschedule Job", 0.52),),
        )

        assert generate_clarification_question(classified, ambiguity_ratio=0.8) == "Which job is this for?"
