"""Coverage harness models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from switchboard.patterns.models import PatternOverlap, PatternPool
from switchboard.taxonomy.enums import Domain


class CorpusSource(str, Enum):
    """Register a corpus phrase is written in."""

    FORMAL = "formal"
    CONVERSATIONAL = "conversational"
    INDUSTRY = "industry"


class IssueKind(str, Enum):
    """Why a corpus phrase was scored as incorrect.

    - FALSE_POSITIVE: a phrase that should match nothing matched a pattern
    - FALSE_NEGATIVE: a phrase that should match got no pattern at all
    - WRONG_PATTERN: matched another pattern in the expected domain
    - WRONG_DOMAIN: matched a pattern in another domain
    """

    FALSE_POSITIVE = "false_positive"
    FALSE_NEGATIVE = "false_negative"
    WRONG_PATTERN = "wrong_pattern"
    WRONG_DOMAIN = "wrong_domain"


class CorpusEntry(BaseModel):
    """A labeled phrase; no expected pattern means it must match nothing."""

    model_config = ConfigDict(frozen=True)

    phrase: str = Field(..., min_length=1)
    expected_pattern_id: str | None = None
    expected_domain: Domain | None = None
    source: CorpusSource = CorpusSource.FORMAL
    category: str = "general"
    route: str | None = Field(default=None, description="UI route the phrase is typed on")

    @property
    def is_negative(self) -> bool:
        return self.expected_pattern_id is None


class MatchResult(BaseModel):
    """Outcome for one corpus phrase."""

    model_config = ConfigDict(frozen=True)

    entry: CorpusEntry
    matched_pattern_id: str | None = None
    matched_domain: Domain | None = None
    issue: IssueKind | None = None

    @property
    def correct(self) -> bool:
        return self.issue is None


class GroupStats(BaseModel):
    """Pass/fail counts for a target or category."""

    model_config = ConfigDict(frozen=True)

    total: int = 0
    passed: int = 0

    @property
    def failed(self) -> int:
        return self.total - self.passed

    @property
    def pass_rate(self) -> float:
        return self.passed / self.total if self.total else 0.0


class CoverageReport(BaseModel):
    """Accuracy and coverage of one pool against one corpus.

    accuracy is correct / total phrases, where a negative phrase is correct
    when nothing matched. coverage is the share of phrases expecting a match
    that got any pattern at all, right or wrong.
    """

    model_config = ConfigDict(frozen=True)

    pool: PatternPool
    total_phrases: int
    correct_matches: int
    accuracy: float
    coverage: float
    results: tuple[MatchResult, ...]
    by_target: dict[str, GroupStats]
    by_category: dict[str, GroupStats]
    overlaps: tuple[PatternOverlap, ...] = ()
    critical_issues: int = 0
    suggestions: tuple[str, ...] = ()

    @property
    def issues(self) -> tuple[MatchResult, ...]:
        return tuple(result for result in self.results if result.issue is not None)

    def issues_of(self, kind: IssueKind) -> tuple[MatchResult, ...]:
        return tuple(result for result in self.results if result.issue == kind)


class CoverageCheck(BaseModel):
    """Pass/fail verdict over both pools."""

    model_config = ConfigDict(frozen=True)

    passed: bool
    reports: dict[PatternPool, CoverageReport]
    failures: tuple[str, ...] = ()

    @property
    def critical_issues(self) -> int:
        return sum(report.critical_issues for report in self.reports.values())
