"""Compile pattern definitions once at load time."""

import re

from switchboard.errors import RegistryInvariantViolation
from switchboard.patterns.models import HitKind, PatternDefinition, PatternHit

PHRASE_STRENGTH = 1.0


class CompiledPattern:
    """A pattern definition with its regexes and keyword matcher compiled.

    Built once per definition; matching is a handful of regex searches.
    """

    __slots__ = ("definition", "regexes", "keywords", "_keyword_regex")

    def __init__(
        self,
        definition: PatternDefinition,
        regexes: tuple[re.Pattern[str], ...],
        keywords: frozenset[str],
        keyword_regex: re.Pattern[str] | None,
    ) -> None:
        self.definition = definition
        self.regexes = regexes
        self.keywords = keywords
        self._keyword_regex = keyword_regex

    @property
    def id(self) -> str:
        return self.definition.id

    @property
    def target_id(self) -> str:
        return self.definition.target_id

    def matches_phrase(self, text: str) -> bool:
        """Whether any trigger regex matches (keywords are not consulted)."""
        return any(regex.search(text) for regex in self.regexes)

    def match(self, text: str, keyword_strength: float) -> PatternHit | None:
        """Test the utterance: a regex hit beats a keyword-only hit.

        Args:
            text: Utterance to test
            keyword_strength: Strength assigned to a keyword-only hit

        Returns:
            The hit, or None when neither regexes nor keywords match
        """
        for regex in self.regexes:
            found = regex.search(text)
            if found:
                return self._hit(HitKind.PHRASE, PHRASE_STRENGTH, found.group(0))

        if self._keyword_regex is not None:
            found = self._keyword_regex.search(text)
            if found:
                return self._hit(HitKind.KEYWORD, keyword_strength, found.group(0))

        return None

    def _hit(self, kind: HitKind, strength: float, matched_text: str) -> PatternHit:
        return PatternHit(
            pattern_id=self.definition.id,
            target_id=self.definition.target_id,
            domain=self.definition.domain,
            kind=kind,
            strength=strength,
            matched_text=matched_text,
        )

    def __repr__(self) -> str:
        return f"CompiledPattern(id={self.definition.id!r}, regexes={len(self.regexes)})"


def compile_pattern(definition: PatternDefinition) -> CompiledPattern:
    """Compile a pattern definition.

    Raises:
        RegistryInvariantViolation: no trigger patterns, or a regex that
            does not compile
    """
    if not definition.trigger_patterns:
        raise RegistryInvariantViolation(
            "patterns", [f"pattern {definition.id} has no trigger patterns"]
        )

    regexes: list[re.Pattern[str]] = []
    errors: list[str] = []
    for source in definition.trigger_patterns:
        try:
            regexes.append(re.compile(source, re.IGNORECASE))
        except re.error as exc:
            errors.append(f"pattern {definition.id} has invalid regex {source!r}: {exc}")
    if errors:
        raise RegistryInvariantViolation("patterns", errors)

    keywords = frozenset(" ".join(keyword.lower().split()) for keyword in definition.keywords)
    keyword_regex = None
    if keywords:
        alternatives = "|".join(
            r"\s+".join(re.escape(part) for part in keyword.split())
            for keyword in sorted(keywords, key=len, reverse=True)
        )
        keyword_regex = re.compile(rf"\b(?:{alternatives})\b", re.IGNORECASE)

    return CompiledPattern(definition, tuple(regexes), keywords, keyword_regex)
