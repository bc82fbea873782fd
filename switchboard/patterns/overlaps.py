"""Mutual exclusivity checks for pattern pools."""

from collections.abc import Iterable, Sequence

from switchboard.patterns.compiler import CompiledPattern
from switchboard.patterns.models import PatternOverlap


def find_overlapping_patterns(
    patterns: Sequence[CompiledPattern],
    phrases: Iterable[str] | None = None,
) -> list[PatternOverlap]:
    """Find phrases that trigger more than one target in a pool.

    Every pattern set is tested against every phrase. Without explicit
    phrases the declared examples of all sets are used, so each set is
    checked against the examples of every other set. Only trigger regexes
    count; keyword-only hits are a ranking signal, not a match.

    Args:
        patterns: Compiled pattern sets of a single pool
        phrases: Phrases to test (defaults to the declared examples)

    Returns:
        One overlap per ambiguous phrase, in phrase order
    """
    if phrases is None:
        phrases = [example for pattern in patterns for example in pattern.definition.examples]

    overlaps: list[PatternOverlap] = []
    seen: set[str] = set()
    for phrase in phrases:
        if phrase in seen:
            continue
        seen.add(phrase)

        hits = [pattern for pattern in patterns if pattern.matches_phrase(phrase)]
        targets = tuple(dict.fromkeys(pattern.target_id for pattern in hits))
        if len(targets) > 1:
            overlaps.append(
                PatternOverlap(
                    phrase=phrase,
                    pattern_ids=tuple(pattern.id for pattern in hits),
                    target_ids=targets,
                )
            )

    return overlaps
