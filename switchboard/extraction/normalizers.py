"""Normalizers for contact details, money and identifiers.

Each normalizer is pure and raises ExtractionAmbiguous instead of guessing.
Phone normalization is idempotent on its own output.
"""

import re
from decimal import Decimal, InvalidOperation

from switchboard.errors import ExtractionAmbiguous
from switchboard.extraction.numbers import parse_number_words
from switchboard.taxonomy.enums import EntityType

_EMAIL_STRUCTURE = re.compile(
    r"^(?P<local>[a-z0-9._%+-]+)@(?P<domain>[a-z0-9-]+(?:\.[a-z0-9-]+)*\.[a-z]{2,})$"
)


def normalize_phone(raw: str, default_country_code: str = "1") -> str:
    """Normalize a phone number to +<country code><digits>.

    - "+..." keeps its own country code (8 to 15 digits total)
    - 7 or 10 digits get the default country code
    - default country code followed by 10 digits is already complete
    """
    stripped = raw.strip()
    digits = re.sub(r"\D", "", stripped)

    if stripped.startswith("+"):
        if 8 <= len(digits) <= 15:
            return f"+{digits}"
        raise ExtractionAmbiguous(raw, "international number must have 8 to 15 digits")

    if len(digits) in (7, 10):
        return f"+{default_country_code}{digits}"
    if len(digits) == 10 + len(default_country_code) and digits.startswith(default_country_code):
        return f"+{digits}"

    raise ExtractionAmbiguous(raw, f"{len(digits)} digits is not a phone number")


def normalize_email(raw: str) -> str:
    """Lowercase an email address after checking its structure."""
    candidate = raw.strip().lower()
    match = _EMAIL_STRUCTURE.match(candidate)
    if not match:
        raise ExtractionAmbiguous(raw, "malformed email address")

    local = match["local"]
    if local.startswith(".") or local.endswith(".") or ".." in candidate:
        raise ExtractionAmbiguous(raw, "malformed email address")
    if any(label.startswith("-") or label.endswith("-") for label in match["domain"].split(".")):
        raise ExtractionAmbiguous(raw, "malformed email domain")
    return candidate


def money_to_minor_units(whole: str, fraction: str | None = None) -> int:
    """Convert "1,200" and "5" to integer cents (120005)."""
    text = whole.replace(",", "")
    if fraction:
        text = f"{text}.{fraction}"
    try:
        return int((Decimal(text) * 100).quantize(Decimal(1)))
    except InvalidOperation as exc:
        raise ExtractionAmbiguous(whole, "unreadable amount") from exc


def words_to_minor_units(phrase: str) -> int:
    """Convert a spelled-out dollar amount to integer cents."""
    amount = parse_number_words(phrase)
    if amount is None:
        raise ExtractionAmbiguous(phrase, "unreadable number words")
    return amount * 100


# Known code prefixes and the identifier type they imply.
CODE_PREFIXES: dict[str, EntityType] = {
    "QUO": EntityType.QUOTE_ID,
    "QT": EntityType.QUOTE_ID,
    "EST": EntityType.QUOTE_ID,
    "INV": EntityType.INVOICE_ID,
    "JOB": EntityType.JOB_ID,
    "WO": EntityType.JOB_ID,
    "PAY": EntityType.PAYMENT_ID,
    "PMT": EntityType.PAYMENT_ID,
    "CUS": EntityType.CUSTOMER_ID,
    "CUST": EntityType.CUSTOMER_ID,
}

# Nouns that type the identifier following them.
ID_KEYWORDS: dict[str, EntityType] = {
    "job": EntityType.JOB_ID,
    "work order": EntityType.JOB_ID,
    "quote": EntityType.QUOTE_ID,
    "estimate": EntityType.QUOTE_ID,
    "invoice": EntityType.INVOICE_ID,
    "customer": EntityType.CUSTOMER_ID,
    "client": EntityType.CUSTOMER_ID,
    "payment": EntityType.PAYMENT_ID,
}

_UUID = re.compile(r"^[0-9a-f]{8}(?:-[0-9a-f]{4}){3}-[0-9a-f]{12}$", re.IGNORECASE)
_CODE = re.compile(r"^(?P<prefix>[A-Z]{2,5})-?(?P<number>\d{2,8})$", re.IGNORECASE)


def normalize_identifier(raw: str) -> str:
    """Canonical identifier text: lowercase UUIDs, uppercase PREFIX-NUMBER codes, bare digits."""
    text = raw.strip().lstrip("#").strip()
    if _UUID.match(text):
        return text.lower()
    code = _CODE.match(text)
    if code:
        return f"{code['prefix'].upper()}-{code['number']}"
    if text.isdigit():
        return text
    raise ExtractionAmbiguous(raw, "not an identifier shape")


def identifier_type_for_code(code: str) -> EntityType:
    """Identifier type implied by a code's prefix, REFERENCE_ID when unknown."""
    prefix = code.split("-", 1)[0].upper()
    return CODE_PREFIXES.get(prefix, EntityType.REFERENCE_ID)


FREQUENCIES: dict[str, str] = {
    "daily": "daily",
    "every day": "daily",
    "twice a week": "twice_weekly",
    "weekly": "weekly",
    "every week": "weekly",
    "once a week": "weekly",
    "biweekly": "biweekly",
    "bi-weekly": "biweekly",
    "fortnightly": "biweekly",
    "every other week": "biweekly",
    "twice a month": "semimonthly",
    "monthly": "monthly",
    "every month": "monthly",
    "once a month": "monthly",
    "bimonthly": "bimonthly",
    "bi-monthly": "bimonthly",
    "every other month": "bimonthly",
    "quarterly": "quarterly",
    "every quarter": "quarterly",
    "twice a year": "semiannually",
    "semiannually": "semiannually",
    "semi-annually": "semiannually",
    "annually": "annually",
    "yearly": "annually",
    "every year": "annually",
    "once a year": "annually",
}

PAYMENT_METHODS: dict[str, str] = {
    "cash": "cash",
    "check": "check",
    "cheque": "check",
    "credit card": "credit_card",
    "debit card": "debit_card",
    "card": "card",
    "ach": "ach",
    "bank transfer": "bank_transfer",
    "wire": "wire",
    "wire transfer": "wire",
    "venmo": "venmo",
    "zelle": "zelle",
    "paypal": "paypal",
}


def normalize_token(raw: str, table: dict[str, str]) -> str:
    """Look up a phrase in a closed vocabulary after collapsing whitespace."""
    key = " ".join(raw.lower().split())
    try:
        return table[key]
    except KeyError as exc:
        raise ExtractionAmbiguous(raw, "not in vocabulary") from exc
