#!/usr/bin/env python3
"""Coverage gate for the intent and workflow pattern pools.

Usage:
    uv run python scripts/check_coverage.py
    uv run python scripts/check_coverage.py --min-accuracy 0.9 --report

Exits with status 1 when either pool falls below the accuracy or coverage
threshold or has critical issues.
"""

import argparse
import sys

from switchboard.bootstrap import load_registries
from switchboard.config import get_settings
from switchboard.coverage import CoverageAnalyzer, format_coverage_report
from switchboard.observability.logging import setup_logging


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Check pattern accuracy and coverage against the corpus")
    parser.add_argument("--min-accuracy", type=float, default=None, help="Override coverage.min_accuracy")
    parser.add_argument("--min-coverage", type=float, default=None, help="Override coverage.min_coverage")
    parser.add_argument("--report", action="store_true", help="Print the full report for each pool")
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging(level="WARNING", format="console")

    registries = load_registries(settings)
    analyzer = CoverageAnalyzer(registries.patterns, registries.taxonomy, settings.coverage, settings.classifier)
    check = analyzer.quick_coverage_check(args.min_accuracy, args.min_coverage)

    for pool, report in check.reports.items():
        if args.report:
            print(format_coverage_report(report))
            print()
        print(
            f"{pool.value:<9} accuracy {report.accuracy:6.1%}  coverage {report.coverage:6.1%}  "
            f"critical {report.critical_issues}"
        )

    if not check.passed:
        print("\nCoverage check FAILED:")
        for failure in check.failures:
            print(f"  - {failure}")
        return 1

    print("\nCoverage check passed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
