"""Tests for the offline coverage harness."""

from datetime import datetime

import pytest

from switchboard.bootstrap import Registries
from switchboard.classification import ClassificationRequest, ClassifiedIntent, IntentClassifier
from switchboard.config.models.prompts import CoverageConfig
from switchboard.coverage import (
    INTENT_CORPUS,
    WORKFLOW_CORPUS,
    CorpusEntry,
    CoverageAnalyzer,
    IssueKind,
    format_coverage_report,
)
from switchboard.patterns import PatternPool
from switchboard.taxonomy import Domain
from switchboard.workflows import WorkflowMatcher


@pytest.fixture
def analyzer(registries: Registries) -> CoverageAnalyzer:
    return CoverageAnalyzer(registries.patterns, registries.taxonomy)


class TestShippedCorpora:
    """The shipped pattern pools against their labeled corpora."""

    def test_quick_check_passes(self, analyzer: CoverageAnalyzer) -> None:
        check = analyzer.quick_coverage_check()

        assert check.passed, check.failures
        assert check.critical_issues == 0
        assert set(check.reports) == {PatternPool.INTENT, PatternPool.WORKFLOW}

    def test_intent_pool(self, analyzer: CoverageAnalyzer) -> None:
        report = analyzer.analyze_coverage(INTENT_CORPUS, PatternPool.INTENT)

        assert report.total_phrases == 71
        assert report.correct_matches == 70
        assert report.coverage == pytest.approx(64 / 65)
        assert report.critical_issues == 0
        assert report.overlaps == ()
        assert report.by_target["(none)"].total == 6

    def test_intent_corpus_is_not_the_declared_examples(self, registries: Registries) -> None:
        pool = registries.patterns.get_pool(PatternPool.INTENT)
        examples = {example for pattern in pool for example in pattern.definition.examples}
        phrases = {entry.phrase for entry in INTENT_CORPUS}

        assert phrases.isdisjoint(examples)

    def test_intent_known_miss(self, analyzer: CoverageAnalyzer) -> None:
        report = analyzer.analyze_coverage(INTENT_CORPUS, PatternPool.INTENT)

        misses = report.issues_of(IssueKind.FALSE_NEGATIVE)

        assert [(result.entry.phrase, result.entry.route) for result in misses] == [("cancel it", "/jobs")]
        assert report.issues == misses

    def test_workflow_pool(self, analyzer: CoverageAnalyzer) -> None:
        report = analyzer.analyze_coverage(WORKFLOW_CORPUS, PatternPool.WORKFLOW)

        assert report.total_phrases == 118
        assert report.correct_matches == 116
        assert report.coverage == pytest.approx(111 / 113)
        assert report.critical_issues == 0
        assert report.overlaps == ()

    def test_known_misses_are_false_negatives(self, analyzer: CoverageAnalyzer) -> None:
        report = analyzer.analyze_coverage(WORKFLOW_CORPUS, PatternPool.WORKFLOW)

        misses = report.issues_of(IssueKind.FALSE_NEGATIVE)

        assert [result.entry.phrase for result in misses] == ["new lede from John", "contct the customer"]
        assert report.issues == misses
        assert "Add patterns to complete_lead_generation for: 'new lede from John'" in report.suggestions

    def test_grouped_stats(self, analyzer: CoverageAnalyzer) -> None:
        report = analyzer.analyze_coverage(WORKFLOW_CORPUS, PatternPool.WORKFLOW)

        lead = report.by_target["complete_lead_generation"]
        assert (lead.total, lead.passed, lead.failed) == (29, 28, 1)
        misspelled = report.by_category["misspelled"]
        assert (misspelled.total, misspelled.passed) == (3, 1)

    def test_stricter_threshold_fails(self, analyzer: CoverageAnalyzer) -> None:
        check = analyzer.quick_coverage_check(min_accuracy=0.99)

        assert not check.passed
        assert check.failures == (
            "intent accuracy 98.6% is below 99.0%",
            "workflow accuracy 98.3% is below 99.0%",
        )

    def test_thresholds_come_from_config(self, registries: Registries) -> None:
        analyzer = CoverageAnalyzer(registries.patterns, registries.taxonomy, CoverageConfig(min_coverage=1.0))

        assert analyzer.quick_coverage_check().failures == (
            "intent coverage 98.5% is below 100.0%",
            "workflow coverage 98.2% is below 100.0%",
        )


class TestIssueKinds:
    """Scoring of single phrases."""

    def _report(self, analyzer: CoverageAnalyzer, *entries: CorpusEntry):
        return analyzer.analyze_coverage(entries, PatternPool.WORKFLOW)

    def test_false_positive_is_critical(self, analyzer: CoverageAnalyzer) -> None:
        report = self._report(analyzer, CorpusEntry(phrase="add a new customer"))

        assert report.results[0].issue == IssueKind.FALSE_POSITIVE
        assert report.results[0].matched_pattern_id == "complete_lead_generation"
        assert report.critical_issues == 1
        assert report.suggestions == ("Tighten complete_lead_generation: it matches 'add a new customer'",)

    def test_wrong_domain(self, analyzer: CoverageAnalyzer) -> None:
        entry = CorpusEntry(
            phrase="contact the customer",
            expected_pattern_id="complete_lead_generation",
            expected_domain=Domain.LEAD_GENERATION,
        )

        report = self._report(analyzer, entry)

        assert report.results[0].issue == IssueKind.WRONG_DOMAIN
        assert report.results[0].matched_domain == Domain.COMMUNICATION
        assert report.critical_issues == 1

    def test_wrong_pattern(self, analyzer: CoverageAnalyzer) -> None:
        entry = CorpusEntry(phrase="contact the customer", expected_pattern_id="complete_lead_generation")

        report = self._report(analyzer, entry)

        assert report.results[0].issue == IssueKind.WRONG_PATTERN
        assert report.suggestions == ("Review pattern order - 1 phrases matched wrong patterns",)

    def test_miss_is_not_critical(self, analyzer: CoverageAnalyzer) -> None:
        report = self._report(analyzer, CorpusEntry(phrase="hello", expected_pattern_id="quote_to_job"))

        assert report.results[0].issue == IssueKind.FALSE_NEGATIVE
        assert report.critical_issues == 0
        assert report.coverage == 0.0

    def test_corpus_overlap_is_critical(self, analyzer: CoverageAnalyzer) -> None:
        phrase = "add a new customer and contact the customer"
        entry = CorpusEntry(phrase=phrase, expected_pattern_id="complete_lead_generation")

        report = self._report(analyzer, entry)

        assert report.correct_matches == 1
        assert [overlap.target_ids for overlap in report.overlaps] == [
            ("complete_lead_generation", "complete_customer_communication")
        ]
        assert report.critical_issues == 1
        assert report.suggestions == (
            f"Make complete_lead_generation, complete_customer_communication mutually exclusive for {phrase!r}",
        )

    def test_tolerated_overlaps(self, registries: Registries) -> None:
        analyzer = CoverageAnalyzer(registries.patterns, registries.taxonomy, CoverageConfig(max_pattern_overlaps=1))
        entry = CorpusEntry(
            phrase="add a new customer and contact the customer",
            expected_pattern_id="complete_lead_generation",
        )

        assert analyzer.analyze_coverage([entry], PatternPool.WORKFLOW).critical_issues == 0

    def test_empty_corpus(self, analyzer: CoverageAnalyzer) -> None:
        report = self._report(analyzer)

        assert report.accuracy == 0.0
        assert report.coverage == 1.0
        assert report.total_phrases == 0


class TestIntentScoring:
    """Intent phrases are scored by the classifier, not by regex alone."""

    def _result(self, analyzer: CoverageAnalyzer, entry: CorpusEntry):
        return analyzer.analyze_coverage([entry], PatternPool.INTENT).results[0]

    def test_keyword_hit_counts_as_a_guess(self, analyzer: CoverageAnalyzer) -> None:
        result = self._result(analyzer, CorpusEntry(phrase="quote the job", expected_pattern_id="create_quote"))

        assert result.correct
        assert result.matched_pattern_id == "create_quote"
        assert result.matched_domain == Domain.QUOTING

    def test_keyword_hit_on_a_negative_is_a_false_positive(self, analyzer: CoverageAnalyzer) -> None:
        result = self._result(analyzer, CorpusEntry(phrase="quote the job"))

        assert result.issue == IssueKind.FALSE_POSITIVE

    @pytest.mark.parametrize(
        ("route", "expected"),
        [
            ("/payments", "record_payment"),
            ("/invoices", "create_invoice"),
        ],
    )
    def test_route_picks_between_keyword_hits(
        self,
        analyzer: CoverageAnalyzer,
        route: str,
        expected: str,
    ) -> None:
        entry = CorpusEntry(phrase="the invoice payment", expected_pattern_id=expected, route=route)

        assert self._result(analyzer, entry).correct


class TestDeterminism:
    """Same input, same output, across repeated runs over both corpora."""

    def test_workflow_matches_repeat(self, registries: Registries) -> None:
        matcher = WorkflowMatcher(registries.patterns, registries.workflows)

        first = [matcher.match_patterns(entry.phrase) for entry in WORKFLOW_CORPUS]
        second = [matcher.match_patterns(entry.phrase) for entry in WORKFLOW_CORPUS]

        assert first == second

    def test_classifications_repeat(self, registries: Registries, now: datetime) -> None:
        classifier = IntentClassifier(registries.taxonomy, registries.patterns)

        def run() -> list[ClassifiedIntent]:
            return [
                classifier.classify(ClassificationRequest(text=entry.phrase, route=entry.route, now=now))
                for entry in INTENT_CORPUS
            ]

        assert run() == run()

    def test_reports_repeat(self, analyzer: CoverageAnalyzer) -> None:
        for corpus, pool in ((INTENT_CORPUS, PatternPool.INTENT), (WORKFLOW_CORPUS, PatternPool.WORKFLOW)):
            assert analyzer.analyze_coverage(corpus, pool) == analyzer.analyze_coverage(corpus, pool)


class TestFormatReport:
    """Plain-text rendering."""

    def test_workflow_report(self, analyzer: CoverageAnalyzer) -> None:
        text = format_coverage_report(analyzer.analyze_coverage(WORKFLOW_CORPUS, PatternPool.WORKFLOW))
        lines = text.splitlines()

        assert lines[0] == "COVERAGE REPORT (workflow patterns)"
        assert "Accuracy:        98.3%" in lines
        assert "Coverage:        98.2%" in lines
        assert "No overlapping patterns" in lines
        assert "FALSE NEGATIVES (2)" in lines
        assert "'new lede from John' expected complete_lead_generation" in lines
        lead_row = next(line for line in lines if line.startswith("complete_lead_generation "))
        assert "28/29" in lead_row
        assert lead_row.endswith("97%")
        assert "WRONG MATCHES" not in text
        assert "FALSE POSITIVES" not in text

    def test_lists_false_positives_and_overlaps(self, analyzer: CoverageAnalyzer) -> None:
        report = analyzer.analyze_coverage(
            [
                CorpusEntry(phrase="add a new customer"),
                CorpusEntry(
                    phrase="add a new customer and contact the customer",
                    expected_pattern_id="complete_lead_generation",
                ),
            ],
            PatternPool.WORKFLOW,
        )

        text = format_coverage_report(report)

        assert "FALSE POSITIVES (1)\n" in text
        assert "'add a new customer' matched complete_lead_generation" in text
        assert (
            "'add a new customer and contact the customer' -> "
            "complete_lead_generation, complete_customer_communication"
        ) in text
