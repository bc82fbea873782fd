"""Per-type entity extractors.

Each extractor is a pure generator over one entity type. Extractors yield
every candidate they find and may overlap each other; the extraction
pipeline decides which candidates are claimed. A span whose normalizer
raises ExtractionAmbiguous is logged and skipped, never mis-typed.
"""

import math
import re
from collections.abc import Callable, Iterable, Iterator

from switchboard.errors import ExtractionAmbiguous
from switchboard.extraction.dates import (
    DATE_PATTERNS,
    DATE_RANGE_PATTERNS,
    TIME_PATTERNS,
    format_range,
    format_time,
)
from switchboard.extraction.models import ExtractedEntity, ExtractionContext
from switchboard.extraction.normalizers import (
    FREQUENCIES,
    ID_KEYWORDS,
    PAYMENT_METHODS,
    identifier_type_for_code,
    money_to_minor_units,
    normalize_email,
    normalize_identifier,
    normalize_phone,
    normalize_token,
    words_to_minor_units,
)
from switchboard.extraction.numbers import NUMBER_PHRASE, parse_quantity
from switchboard.observability.logging import get_logger
from switchboard.taxonomy.enums import EntityType

logger = get_logger(__name__)

Extractor = Callable[[str, ExtractionContext], Iterator[ExtractedEntity]]

_I = re.IGNORECASE


def _from_matches(
    entity_type: EntityType,
    matches: Iterable[re.Match[str]],
    resolve: Callable[[re.Match[str]], str | int | float],
    confidence: float,
    group: str | int = 0,
    resolve_type: Callable[[re.Match[str]], EntityType] | None = None,
) -> Iterator[ExtractedEntity]:
    """Turn regex matches into entities, skipping spans that fail to normalize."""
    for match in matches:
        try:
            value = resolve(match)
        except ExtractionAmbiguous as exc:
            logger.debug("entity_omitted", entity_type=entity_type.value, reason=exc.reason)
            continue

        start, end = match.span(group)
        yield ExtractedEntity(
            type=resolve_type(match) if resolve_type else entity_type,
            raw_span=match.group(group),
            value=value,
            confidence=confidence,
            start=start,
            end=end,
        )


# --- Free-text notes --------------------------------------------------------

NOTE_PATTERN = re.compile(
    r"\b(?:note|notes|comment|message|memo)\b[^:\n]{0,40}:\s*(?P<body>[^\n]*\S)",
    _I,
)
QUOTED_PATTERN = re.compile(r"[\"“](?P<body>[^\"“”\n]{2,})[\"”]")


def extract_notes(text: str, ctx: ExtractionContext) -> Iterator[ExtractedEntity]:
    """Text after "note:"/"message:" style labels, or inside double quotes."""
    yield from _from_matches(
        EntityType.NOTE,
        NOTE_PATTERN.finditer(text),
        lambda m: m["body"].strip(),
        0.9,
        group="body",
    )
    yield from _from_matches(
        EntityType.NOTE,
        QUOTED_PATTERN.finditer(text),
        lambda m: m["body"].strip(),
        0.7,
        group="body",
    )


# --- Contact details --------------------------------------------------------

EMAIL_PATTERN = re.compile(
    r"(?<![\w.+-])[A-Za-z0-9._%+-]+@[A-Za-z0-9-]+(?:\.[A-Za-z0-9-]+)*\.[A-Za-z]{2,}(?![\w-])"
)


def extract_emails(text: str, ctx: ExtractionContext) -> Iterator[ExtractedEntity]:
    yield from _from_matches(
        EntityType.EMAIL,
        EMAIL_PATTERN.finditer(text),
        lambda m: normalize_email(m.group(0)),
        0.95,
    )


PHONE_PATTERNS: tuple[tuple[re.Pattern[str], float], ...] = (
    # Separated groups: 555-0100, (555) 201-3344, +1 555.201.3344
    (
        re.compile(
            r"(?<![\w+-])(?:\+\d{1,3}[\s.-]?)?(?:\(\d{3}\)\s?|\d{3}[\s.-])?\d{3}[\s.-]\d{4}(?![\w-])"
        ),
        0.9,
    ),
    # Contiguous local or country-prefixed digits
    (re.compile(r"(?<![\w+-])\d{10,11}(?![\w-])"), 0.8),
    # International E.164-like
    (re.compile(r"(?<![\w+])\+\d{8,15}(?![\w-])"), 0.9),
)


def extract_phones(text: str, ctx: ExtractionContext) -> Iterator[ExtractedEntity]:
    country_code = ctx.config.default_country_code
    for pattern, confidence in PHONE_PATTERNS:
        yield from _from_matches(
            EntityType.PHONE,
            pattern.finditer(text),
            lambda m: normalize_phone(m.group(0), country_code),
            confidence,
        )


# --- Identifiers ------------------------------------------------------------

_UUID = r"[0-9a-fA-F]{8}(?:-[0-9a-fA-F]{4}){3}-[0-9a-fA-F]{12}"
_KNOWN_PREFIX = r"QUO|QT|EST|INV|JOB|WO|PAY|PMT|CUST|CUS"

CODE_PATTERN = re.compile(rf"\b(?:{_KNOWN_PREFIX})-?\d{{2,8}}\b", _I)
KEYWORD_ID_PATTERN = re.compile(
    r"\b(?P<keyword>job|work\s+order|quote|estimate|invoice|customer|client|payment)"
    r"\s*(?:id|number|num|no\.?)?\s*[#:]?\s*"
    rf"(?P<id>{_UUID}|[A-Za-z]{{2,5}}-?\d{{2,8}}|\d{{3,8}})(?![-.]?\d)(?![\w-])",
    _I,
)


def _keyword_id_type(match: re.Match[str]) -> EntityType:
    identifier = match["id"]
    if not identifier.isdigit() and not re.fullmatch(_UUID, identifier):
        coded = identifier_type_for_code(normalize_identifier(identifier))
        if coded != EntityType.REFERENCE_ID:
            return coded
    return ID_KEYWORDS[" ".join(match["keyword"].lower().split())]


def extract_typed_identifiers(text: str, ctx: ExtractionContext) -> Iterator[ExtractedEntity]:
    """Identifiers whose type is known from a code prefix or a preceding noun."""
    yield from _from_matches(
        EntityType.REFERENCE_ID,
        KEYWORD_ID_PATTERN.finditer(text),
        lambda m: normalize_identifier(m["id"]),
        0.9,
        group="id",
        resolve_type=_keyword_id_type,
    )
    yield from _from_matches(
        EntityType.REFERENCE_ID,
        CODE_PATTERN.finditer(text),
        lambda m: normalize_identifier(m.group(0)),
        0.95,
        resolve_type=lambda m: identifier_type_for_code(normalize_identifier(m.group(0))),
    )


GENERIC_ID_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(rf"\b{_UUID}\b"),
    re.compile(r"(?<![\w#])#\d{3,8}\b"),
    re.compile(r"\b[A-Z]{2,5}-\d{2,8}\b"),
)


def extract_generic_references(text: str, ctx: ExtractionContext) -> Iterator[ExtractedEntity]:
    """Identifier shapes with no type cue."""
    for pattern in GENERIC_ID_PATTERNS:
        yield from _from_matches(
            EntityType.REFERENCE_ID,
            pattern.finditer(text),
            lambda m: normalize_identifier(m.group(0)),
            0.7,
        )


# --- Money and numbers ------------------------------------------------------

_AMOUNT = r"(?P<whole>\d{1,3}(?:,\d{3})+|\d+)(?:\.(?P<fraction>\d{1,2}))?"
_NOT_A_UNIT = r"(?!\s+(?:hours?|hrs?|minutes?|mins?|days?|weeks?|months?|years?|percent|%))"

MONEY_PATTERNS: tuple[tuple[re.Pattern[str], float], ...] = (
    (re.compile(rf"\$\s?{_AMOUNT}(?!\d|,\d)"), 0.95),
    (re.compile(rf"\b{_AMOUNT}\s*(?:dollars?|usd|bucks)\b", _I), 0.9),
    (re.compile(rf"\b(?P<words>{NUMBER_PHRASE})\s+(?:dollars?|bucks)\b", _I), 0.85),
)
MONEY_CUE_PATTERN = re.compile(
    r"\b(?:paid|pay|charge|charged|refund|refunded|collect|collected|owes?)\s+"
    r"(?:me\s+|us\s+|them\s+|him\s+|her\s+)?"
    rf"(?P<words>{NUMBER_PHRASE})\b{_NOT_A_UNIT}",
    _I,
)


def _money_value(match: re.Match[str]) -> int:
    if match.groupdict().get("words"):
        return words_to_minor_units(match["words"])
    return money_to_minor_units(match["whole"], match["fraction"])


def extract_money(text: str, ctx: ExtractionContext) -> Iterator[ExtractedEntity]:
    """Amounts in integer cents."""
    for pattern, confidence in MONEY_PATTERNS:
        yield from _from_matches(EntityType.MONEY, pattern.finditer(text), _money_value, confidence)
    yield from _from_matches(
        EntityType.MONEY,
        MONEY_CUE_PATTERN.finditer(text),
        _money_value,
        0.6,
        group="words",
    )


PERCENTAGE_PATTERN = re.compile(
    r"(?<![\w.])(?P<value>\d+(?:\.\d+)?)\s*(?:%|percent\b|per\s+cent\b)",
    _I,
)


def extract_percentages(text: str, ctx: ExtractionContext) -> Iterator[ExtractedEntity]:
    yield from _from_matches(
        EntityType.PERCENTAGE,
        PERCENTAGE_PATTERN.finditer(text),
        lambda m: float(m["value"]),
        0.95,
    )


DURATION_PATTERN = re.compile(
    rf"\b(?P<amount>\d+(?:\.\d+)?|{NUMBER_PHRASE}|an?)\s*(?P<unit>hours?|hrs?|minutes?|mins?)\b"
    rf"(?:\s+and\s+(?P<extra>\d+|{NUMBER_PHRASE})\s*(?:minutes?|mins?)\b)?",
    _I,
)
HALF_HOUR_PATTERN = re.compile(r"\bhalf\s+an?\s+hour\b", _I)


def _duration_minutes(match: re.Match[str]) -> int:
    raw_amount = match["amount"]
    try:
        amount = float(raw_amount)
    except ValueError:
        parsed = parse_quantity(raw_amount)
        if parsed is None:
            raise ExtractionAmbiguous(match.group(0), "unreadable quantity") from None
        amount = float(parsed)

    minutes = amount * 60 if match["unit"].lower().startswith("h") else amount
    if match["extra"]:
        extra = parse_quantity(match["extra"])
        if extra is None:
            raise ExtractionAmbiguous(match.group(0), "unreadable minutes")
        minutes += extra
    if not math.isfinite(minutes):
        raise ExtractionAmbiguous(match.group(0), "duration out of range")
    return round(minutes)


def extract_durations(text: str, ctx: ExtractionContext) -> Iterator[ExtractedEntity]:
    """Durations in whole minutes."""
    yield from _from_matches(EntityType.DURATION, DURATION_PATTERN.finditer(text), _duration_minutes, 0.85)
    yield from _from_matches(EntityType.DURATION, HALF_HOUR_PATTERN.finditer(text), lambda m: 30, 0.85)


# --- Calendar ---------------------------------------------------------------


def extract_date_ranges(text: str, ctx: ExtractionContext) -> Iterator[ExtractedEntity]:
    for pattern, resolver in DATE_RANGE_PATTERNS:
        yield from _from_matches(
            EntityType.DATE_RANGE,
            pattern.finditer(text),
            lambda m, resolver=resolver: format_range(*resolver(m, ctx.now)),
            0.85,
        )


def extract_dates(text: str, ctx: ExtractionContext) -> Iterator[ExtractedEntity]:
    for pattern, resolver in DATE_PATTERNS:
        yield from _from_matches(
            EntityType.DATE,
            pattern.finditer(text),
            lambda m, resolver=resolver: resolver(m, ctx.now).isoformat(),
            0.9,
        )


def extract_times(text: str, ctx: ExtractionContext) -> Iterator[ExtractedEntity]:
    for pattern, resolver, confidence in TIME_PATTERNS:
        yield from _from_matches(
            EntityType.TIME,
            pattern.finditer(text),
            lambda m, resolver=resolver: format_time(*resolver(m)),
            confidence,
        )


# --- Closed vocabularies ----------------------------------------------------

FREQUENCY_PATTERN = re.compile(
    r"\b(?:every\s+other\s+(?:week|month)"
    r"|every\s+(?:day|week|month|quarter|year)"
    r"|(?:once|twice)\s+a\s+(?:week|month|year)"
    r"|bi-?weekly|bi-?monthly|semi-?annually|fortnightly"
    r"|daily|weekly|monthly|quarterly|annually|yearly)\b",
    _I,
)


def extract_frequencies(text: str, ctx: ExtractionContext) -> Iterator[ExtractedEntity]:
    yield from _from_matches(
        EntityType.FREQUENCY,
        FREQUENCY_PATTERN.finditer(text),
        lambda m: normalize_token(m.group(0), FREQUENCIES),
        0.9,
    )


PAYMENT_METHOD_PATTERN = re.compile(
    r"\b(?:by|with|via|using|in|through)\s+(?:a\s+)?"
    r"(?P<method>credit\s+card|debit\s+card|bank\s+transfer|wire\s+transfer"
    r"|cash|check|cheque|card|ach|wire|venmo|zelle|paypal)\b",
    _I,
)


def extract_payment_methods(text: str, ctx: ExtractionContext) -> Iterator[ExtractedEntity]:
    yield from _from_matches(
        EntityType.PAYMENT_METHOD,
        PAYMENT_METHOD_PATTERN.finditer(text),
        lambda m: normalize_token(m["method"], PAYMENT_METHODS),
        0.85,
        group="method",
    )


# --- Addresses and names ----------------------------------------------------

_STREET_SUFFIX = (
    r"Street|St|Avenue|Ave|Road|Rd|Boulevard|Blvd|Drive|Dr|Lane|Ln|Court|Ct"
    r"|Way|Place|Pl|Parkway|Pkwy|Highway|Hwy|Circle|Cir|Terrace|Ter"
)
ADDRESS_PATTERN = re.compile(
    rf"\b\d{{1,6}}\s+(?:[A-Z][a-z]+\.?\s+){{1,3}}(?:{_STREET_SUFFIX})\b\.?"
)


def extract_addresses(text: str, ctx: ExtractionContext) -> Iterator[ExtractedEntity]:
    """Street addresses: house number, capitalized street name, suffix."""
    yield from _from_matches(
        EntityType.ADDRESS,
        ADDRESS_PATTERN.finditer(text),
        lambda m: " ".join(m.group(0).split()),
        0.8,
    )


NAME_STOPWORDS: frozenset[str] = frozenset({
    # commands
    "add", "approve", "accept", "arrange", "assign", "attach", "bill", "book", "build",
    "bulk", "call", "cancel", "capture", "change", "charge", "check", "clock", "close",
    "complete", "conduct", "contact", "convert", "create", "delete", "dispatch", "do",
    "draft", "edit", "email", "end", "enter", "find", "finish", "follow", "generate",
    "get", "give", "go", "have", "import", "inform", "invite", "invoice", "let", "log",
    "look", "make", "mark", "measure", "message", "move", "need", "notify", "onboard",
    "open", "optimize", "pause", "perform", "ping", "plan", "prepare", "process", "pull",
    "push", "put", "reach", "reactivate", "record", "refund", "register", "remind",
    "remove", "reply", "request", "reschedule", "respond", "restart", "resume", "revise",
    "run", "schedule", "scope", "search", "send", "set", "show", "start", "stop",
    "summarize", "survey", "suspend", "take", "tell", "text", "touch", "turn", "unpause",
    "update", "upload", "view", "void", "walk", "write",
    # pronouns, articles and small talk
    "a", "an", "and", "the", "or", "i", "me", "my", "we", "us", "our", "you", "your",
    "he", "him", "his", "she", "her", "they", "them", "their", "it", "its", "this",
    "that", "these", "those", "someone", "what", "who", "when", "where", "how", "why",
    "can", "could", "would", "will", "should", "please", "now", "also", "then", "just",
    "hey", "hi", "hello", "thanks", "thank", "ok", "okay", "yes", "no", "asap",
    # calendar words
    "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday",
    "mon", "tue", "tues", "wed", "thu", "thur", "thurs", "fri", "sat", "sun",
    "january", "jan", "february", "feb", "march", "mar", "april", "apr", "may",
    "june", "jun", "july", "jul", "august", "aug", "september", "sept", "sep",
    "october", "oct", "november", "nov", "december", "dec",
    "today", "tomorrow", "tonight", "yesterday", "next", "last", "noon", "morning",
    "afternoon", "evening", "week", "month",
    # domain nouns
    "customer", "customers", "client", "clients", "lead", "leads", "prospect", "job",
    "jobs", "work", "order", "quote", "quotes", "estimate", "invoice", "invoices",
    "payment", "payments", "team", "crew", "checklist", "task", "portal", "site", "visit",
    "assessment", "report", "calendar", "subscription", "plan", "timesheet", "route",
    "messages", "inbox", "note", "notes",
    # abbreviations
    "pto", "csv", "ach", "am", "pm", "id", "usd",
})
HONORIFICS: frozenset[str] = frozenset({"mr", "mrs", "ms", "miss", "mx", "dr"})
NAME_CUES: frozenset[str] = frozenset({
    "from", "for", "named", "called", "customer", "client", "with", "by",
})

_NAME_TOKEN = re.compile(r"[A-Za-z][A-Za-z'’.&-]*")
_POSSESSIVE = re.compile(r"['’]s?$")
_PRECEDING_WORD = re.compile(r"([A-Za-z]+)\W*$")


def _bare(token: str) -> str:
    return _POSSESSIVE.sub("", token.rstrip(".").lower())


def normalize_name(raw: str) -> str:
    """Collapse whitespace and drop a trailing possessive or full stop."""
    name = " ".join(raw.split())
    name = _POSSESSIVE.sub("", name)
    if name.endswith(".") and _bare(name.split()[-1]) not in HONORIFICS:
        name = name[:-1]
    return name


def _name_segments(text: str) -> Iterator[tuple[int, int]]:
    """Yield (start, end) for runs of capitalized non-stopword tokens."""
    segment: list[re.Match[str]] = []
    previous_end = 0

    def flush() -> Iterator[tuple[int, int]]:
        if segment and not all(_bare(m.group(0)) in HONORIFICS for m in segment):
            yield segment[0].start(), segment[-1].end()
        segment.clear()

    for match in _NAME_TOKEN.finditer(text):
        token = match.group(0)
        start, end = match.span()
        attached = (start > 0 and text[start - 1].isalnum()) or (
            end < len(text) and text[end].isdigit()
        )
        is_name = (
            not attached
            and token[0].isupper()
            and not token.endswith("-")
            and _bare(token) not in NAME_STOPWORDS
        )
        gap = text[previous_end:start]
        if not is_name or (segment and gap.strip() not in ("", "&")):
            yield from flush()
        if is_name:
            segment.append(match)
        previous_end = end

    yield from flush()


def extract_names(text: str, ctx: ExtractionContext) -> Iterator[ExtractedEntity]:
    """Person or business names from capitalized token runs.

    A run is cut at stopwords (commands, pronouns, calendar words, domain
    nouns); a name introduced by a cue word such as "from" or "named" gets
    the higher configured confidence.
    """
    for start, end in _name_segments(text):
        raw = text[start:end]
        if raw.endswith(".") and _bare(raw.split()[-1]) not in HONORIFICS:
            end -= 1
            raw = raw[:-1]

        preceding = _PRECEDING_WORD.search(text[:start])
        cued = preceding is not None and preceding.group(1).lower() in NAME_CUES
        confidence = ctx.config.cued_name_confidence if cued else ctx.config.name_confidence

        yield ExtractedEntity(
            type=EntityType.NAME,
            raw_span=raw,
            value=normalize_name(raw),
            confidence=confidence,
            start=start,
            end=end,
        )
