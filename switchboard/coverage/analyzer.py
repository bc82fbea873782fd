"""Offline accuracy and coverage measurement for the pattern pools."""

from collections import defaultdict
from collections.abc import Callable, Mapping, Sequence
from datetime import datetime

from switchboard.classification.classifier import IntentClassifier
from switchboard.classification.models import ClassificationRequest
from switchboard.config.models import ClassifierConfig
from switchboard.config.models.prompts import CoverageConfig
from switchboard.coverage.corpus import INTENT_CORPUS, WORKFLOW_CORPUS
from switchboard.coverage.models import (
    CorpusEntry,
    CoverageCheck,
    CoverageReport,
    GroupStats,
    IssueKind,
    MatchResult,
)
from switchboard.observability.logging import get_logger
from switchboard.patterns.compiler import CompiledPattern
from switchboard.patterns.models import PatternOverlap, PatternPool
from switchboard.patterns.registry import PatternRegistry
from switchboard.taxonomy.enums import Domain
from switchboard.taxonomy.registry import TaxonomyRegistry

logger = get_logger(__name__)

NEGATIVE_TARGET = "(none)"

# Relative dates in corpus phrases resolve against a fixed instant.
CORPUS_NOW = datetime(2025, 1, 6, 9, 0)

_CRITICAL = frozenset({IssueKind.FALSE_POSITIVE, IssueKind.WRONG_PATTERN, IssueKind.WRONG_DOMAIN})


class CoverageAnalyzer:
    """Runs labeled corpora through the classifier and the pattern registry.

    Intent phrases go through `IntentClassifier.classify` with the entry's
    route, so a keyword-only hit, route preference and entity overlap count
    exactly as they do on a live request. A workflow phrase's guess is the
    first pattern set in priority order whose trigger regexes match, the
    same rule the workflow matcher applies.

    Critical issues are phrases routed somewhere they should not go (false
    positives, wrong pattern, wrong domain) plus corpus overlaps beyond
    `max_pattern_overlaps`. A miss is not critical: the classifier asks for
    clarification instead of acting.
    """

    def __init__(
        self,
        patterns: PatternRegistry,
        taxonomy: TaxonomyRegistry,
        config: CoverageConfig | None = None,
        classifier_config: ClassifierConfig | None = None,
    ) -> None:
        self._patterns = patterns
        self._config = config or CoverageConfig()
        self._classifier = IntentClassifier(taxonomy, patterns, classifier_config)

    def match(self, phrase: str, pool: PatternPool) -> CompiledPattern | None:
        for pattern in self._patterns.get_pool(pool):
            if pattern.matches_phrase(phrase):
                return pattern
        return None

    def guess(self, entry: CorpusEntry, pool: PatternPool) -> tuple[str | None, Domain | None]:
        """Target id and domain a phrase resolves to, or (None, None)."""
        if pool == PatternPool.INTENT:
            classified = self._classifier.classify(
                ClassificationRequest(text=entry.phrase, route=entry.route, now=CORPUS_NOW)
            )
            return classified.matched_pattern_id, classified.domain

        pattern = self.match(entry.phrase, pool)
        if pattern is None:
            return None, None
        return pattern.id, pattern.definition.domain

    def analyze_coverage(self, corpus: Sequence[CorpusEntry], pool: PatternPool) -> CoverageReport:
        """Score every corpus phrase against one pool.

        Args:
            corpus: Labeled phrases
            pool: Pattern pool the labels refer to

        Returns:
            Report with accuracy, coverage, per-group stats and suggestions
        """
        results = [self._score(entry, pool) for entry in corpus]

        total = len(results)
        correct = sum(1 for result in results if result.correct)
        positives = [result for result in results if not result.entry.is_negative]
        guessed = sum(1 for result in positives if result.matched_pattern_id is not None)

        overlaps = tuple(self._patterns.find_overlapping_patterns(pool, [entry.phrase for entry in corpus]))
        critical = sum(1 for result in results if result.issue in _CRITICAL)
        if len(overlaps) > self._config.max_pattern_overlaps:
            critical += len(overlaps)

        report = CoverageReport(
            pool=pool,
            total_phrases=total,
            correct_matches=correct,
            accuracy=correct / total if total else 0.0,
            coverage=guessed / len(positives) if positives else 1.0,
            results=tuple(results),
            by_target=_group(results, lambda result: result.entry.expected_pattern_id or NEGATIVE_TARGET),
            by_category=_group(results, lambda result: result.entry.category),
            overlaps=overlaps,
            critical_issues=critical,
            suggestions=tuple(_suggestions(results, overlaps)),
        )
        logger.info(
            "coverage_analyzed",
            pool=pool.value,
            total=total,
            accuracy=round(report.accuracy, 4),
            coverage=round(report.coverage, 4),
            critical_issues=critical,
        )
        return report

    def quick_coverage_check(
        self,
        min_accuracy: float | None = None,
        min_coverage: float | None = None,
        corpora: Mapping[PatternPool, Sequence[CorpusEntry]] | None = None,
    ) -> CoverageCheck:
        """Check both pools against the thresholds.

        Thresholds default to the coverage config. Each pool passes when its
        accuracy and coverage reach the thresholds and it has no critical
        issues; the check passes when every pool does.
        """
        min_accuracy = self._config.min_accuracy if min_accuracy is None else min_accuracy
        min_coverage = self._config.min_coverage if min_coverage is None else min_coverage
        if corpora is None:
            corpora = {PatternPool.INTENT: INTENT_CORPUS, PatternPool.WORKFLOW: WORKFLOW_CORPUS}

        reports: dict[PatternPool, CoverageReport] = {}
        failures: list[str] = []
        for pool, corpus in corpora.items():
            report = self.analyze_coverage(corpus, pool)
            reports[pool] = report
            if report.accuracy < min_accuracy:
                failures.append(f"{pool.value} accuracy {report.accuracy:.1%} is below {min_accuracy:.1%}")
            if report.coverage < min_coverage:
                failures.append(f"{pool.value} coverage {report.coverage:.1%} is below {min_coverage:.1%}")
            if report.critical_issues:
                failures.append(f"{pool.value} has {report.critical_issues} critical issues")

        if failures:
            logger.warning("coverage_check_failed", failures=failures)
        return CoverageCheck(passed=not failures, reports=reports, failures=tuple(failures))

    def _score(self, entry: CorpusEntry, pool: PatternPool) -> MatchResult:
        matched_id, matched_domain = self.guess(entry, pool)

        if entry.is_negative:
            issue = IssueKind.FALSE_POSITIVE if matched_id is not None else None
        elif matched_id is None:
            issue = IssueKind.FALSE_NEGATIVE
        elif entry.expected_domain is not None and matched_domain != entry.expected_domain:
            issue = IssueKind.WRONG_DOMAIN
        elif matched_id != entry.expected_pattern_id:
            issue = IssueKind.WRONG_PATTERN
        else:
            issue = None

        return MatchResult(
            entry=entry,
            matched_pattern_id=matched_id,
            matched_domain=matched_domain,
            issue=issue,
        )


def _group(results: Sequence[MatchResult], key: Callable[[MatchResult], str]) -> dict[str, GroupStats]:
    totals: dict[str, int] = defaultdict(int)
    passed: dict[str, int] = defaultdict(int)
    for result in results:
        name = key(result)
        totals[name] += 1
        if result.correct:
            passed[name] += 1
    return {name: GroupStats(total=count, passed=passed[name]) for name, count in totals.items()}


def _suggestions(results: Sequence[MatchResult], overlaps: Sequence[PatternOverlap]) -> list[str]:
    suggestions: list[str] = []

    missed: dict[str, list[str]] = defaultdict(list)
    for result in results:
        if result.issue == IssueKind.FALSE_NEGATIVE:
            missed[result.entry.expected_pattern_id].append(result.entry.phrase)
    for target, phrases in missed.items():
        sample = ", ".join(repr(phrase) for phrase in phrases[:3])
        suggestions.append(f"Add patterns to {target} for: {sample}")

    misrouted = sum(1 for result in results if result.issue in (IssueKind.WRONG_PATTERN, IssueKind.WRONG_DOMAIN))
    if misrouted:
        suggestions.append(f"Review pattern order - {misrouted} phrases matched wrong patterns")

    for result in results:
        if result.issue == IssueKind.FALSE_POSITIVE:
            suggestions.append(f"Tighten {result.matched_pattern_id}: it matches {result.entry.phrase!r}")

    for overlap in overlaps:
        suggestions.append(f"Make {', '.join(overlap.target_ids)} mutually exclusive for {overlap.phrase!r}")

    return suggestions
