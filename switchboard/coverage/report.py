"""Plain-text rendering of a coverage report."""

from switchboard.coverage.models import CoverageReport, IssueKind

MAX_LISTED = 5


def format_coverage_report(report: CoverageReport) -> str:
    lines = [
        f"COVERAGE REPORT ({report.pool.value} patterns)",
        "=" * 60,
        f"Total phrases:   {report.total_phrases}",
        f"Correct matches: {report.correct_matches}",
        f"Accuracy:        {report.accuracy:.1%}",
        f"Coverage:        {report.coverage:.1%}",
        f"Critical issues: {report.critical_issues}",
        "",
        "BY TARGET",
        "-" * 60,
    ]
    width = max((len(name) for name in report.by_target), default=10)
    for name, stats in sorted(report.by_target.items()):
        lines.append(f"{name:<{width}}  {stats.passed:>3}/{stats.total:<3}  {stats.pass_rate:.0%}")

    lines += ["", "MUTUAL EXCLUSIVITY", "-" * 60]
    if report.overlaps:
        lines += [f"{overlap.phrase!r} -> {', '.join(overlap.target_ids)}" for overlap in report.overlaps]
    else:
        lines.append("No overlapping patterns")

    false_negatives = report.issues_of(IssueKind.FALSE_NEGATIVE)
    if false_negatives:
        lines += ["", f"FALSE NEGATIVES ({len(false_negatives)})", "-" * 60]
        for result in false_negatives[:MAX_LISTED]:
            lines.append(f"{result.entry.phrase!r} expected {result.entry.expected_pattern_id}")
        if len(false_negatives) > MAX_LISTED:
            lines.append(f"... and {len(false_negatives) - MAX_LISTED} more")

    misrouted = report.issues_of(IssueKind.WRONG_PATTERN) + report.issues_of(IssueKind.WRONG_DOMAIN)
    if misrouted:
        lines += ["", f"WRONG MATCHES ({len(misrouted)})", "-" * 60]
        for result in misrouted:
            lines.append(
                f"{result.entry.phrase!r} expected {result.entry.expected_pattern_id}, "
                f"got {result.matched_pattern_id} ({result.issue.value})"
            )

    false_positives = report.issues_of(IssueKind.FALSE_POSITIVE)
    if false_positives:
        lines += ["", f"FALSE POSITIVES ({len(false_positives)})", "-" * 60]
        lines += [f"{result.entry.phrase!r} matched {result.matched_pattern_id}" for result in false_positives]

    if report.suggestions:
        lines += ["", "SUGGESTIONS", "-" * 60]
        lines += [f"- {suggestion}" for suggestion in report.suggestions]

    return "\n".join(lines)
