"""Offline coverage harness for the pattern pools."""

from switchboard.coverage.analyzer import CoverageAnalyzer
from switchboard.coverage.corpus import INTENT_CORPUS, WORKFLOW_CORPUS
from switchboard.coverage.models import (
    CorpusEntry,
    CorpusSource,
    CoverageCheck,
    CoverageReport,
    GroupStats,
    IssueKind,
    MatchResult,
)
from switchboard.coverage.report import format_coverage_report

__all__ = [
    "CorpusEntry",
    "CorpusSource",
    "CoverageAnalyzer",
    "CoverageCheck",
    "CoverageReport",
    "GroupStats",
    "INTENT_CORPUS",
    "IssueKind",
    "MatchResult",
    "WORKFLOW_CORPUS",
    "format_coverage_report",
]
