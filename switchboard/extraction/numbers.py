"""Spelled-out number parsing ("twelve hundred", "two thousand five hundred")."""

import re

UNITS: dict[str, int] = {
    "zero": 0,
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
    "ten": 10,
    "eleven": 11,
    "twelve": 12,
    "thirteen": 13,
    "fourteen": 14,
    "fifteen": 15,
    "sixteen": 16,
    "seventeen": 17,
    "eighteen": 18,
    "nineteen": 19,
}

TENS: dict[str, int] = {
    "twenty": 20,
    "thirty": 30,
    "forty": 40,
    "fifty": 50,
    "sixty": 60,
    "seventy": 70,
    "eighty": 80,
    "ninety": 90,
}

SCALES: dict[str, int] = {
    "thousand": 1_000,
    "million": 1_000_000,
}

_WORDS = sorted([*UNITS, *TENS, "hundred", *SCALES], key=len, reverse=True)
_WORD = "(?:" + "|".join(_WORDS) + ")"

# "a" is only a number when it introduces a scale word: "a hundred", "a thousand".
NUMBER_PHRASE = (
    rf"(?:an?\s+(?=hundred|thousand))?{_WORD}"
    rf"(?:(?:\s+and\s+|[\s-]+){_WORD})*"
)
NUMBER_PHRASE_PATTERN = re.compile(rf"\b{NUMBER_PHRASE}\b", re.IGNORECASE)

# Digits, a spelled-out phrase, or a bare article ("in a week").
QUANTITY = rf"(?:\d+|{NUMBER_PHRASE}|an?)"


def parse_number_words(phrase: str) -> int | None:
    """Convert a spelled-out English number to an int.

    Returns None when the phrase contains a token that is not a number word.
    """
    tokens = [token for token in re.split(r"[\s-]+", phrase.strip().lower()) if token]
    if not tokens:
        return None

    total = 0
    current = 0
    for token in tokens:
        if token == "and":
            continue
        if token in ("a", "an"):
            current = current or 1
        elif token in UNITS:
            current += UNITS[token]
        elif token in TENS:
            current += TENS[token]
        elif token == "hundred":
            current = (current or 1) * 100
        elif token in SCALES:
            total += (current or 1) * SCALES[token]
            current = 0
        else:
            return None

    return total + current


def parse_quantity(token: str) -> int | None:
    """Parse digits, number words, or a bare article into an int."""
    stripped = token.strip().lower()
    if stripped.isdigit():
        try:
            return int(stripped)
        except ValueError:
            # past the interpreter's digit limit
            return None
    if stripped in ("a", "an"):
        return 1
    return parse_number_words(stripped)
