"""Rule-based parsing and normalization of raw profile text."""

import math
import re
import sys
from typing import Optional

from models import Measurements, Number

# --- Unit conversion (metric -> imperial) ---
# Factors kept as-is for output compatibility with existing records.
_CM_TO_FT = 0.033
_KG_TO_LBS = 2.2
_EPSILON = sys.float_info.epsilon

# --- Text patterns ---
_CM_RE = re.compile(r"(\d+)cm")
_KG_RE = re.compile(r"(\d+)kg")
_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")
_LEADING_DIGITS_RE = re.compile(r"^\d+")
_DECIMAL_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")
_PREFIXED_INT_RE = re.compile(r"^0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)$")
_INFINITY_RE = re.compile(r"^[+-]?Infinity$")
_ALIAS_SPLIT_RE = re.compile(r",\s*")
_UNKNOWN_RE = re.compile(r"unknown", re.IGNORECASE)


def _round_half_up(value: float) -> float:
    """Two-decimal rounding with halves going up (not banker's rounding)."""
    return math.floor((value + _EPSILON) * 100 + 0.5) / 100


def cm_to_ft(cm: Number) -> float:
    return _round_half_up(cm * _CM_TO_FT)


def kg_to_lbs(kg: Number) -> float:
    return _round_half_up(kg * _KG_TO_LBS)


def _to_number(text: str) -> Number:
    """Numeric value of a text segment, read like JavaScript's Number().

    Accepts decimals with exponents, 0x/0o/0b integers and Infinity; anything
    else (including Python-only spellings like 'inf' or '1_000') is NaN.
    """
    text = text.strip()
    if _PREFIXED_INT_RE.match(text):
        return int(text, 0)
    if not (_DECIMAL_RE.match(text) or _INFINITY_RE.match(text)):
        return math.nan
    value = float(text)
    if math.isfinite(value) and value.is_integer():
        return int(value)
    return value


def parse_measurements(text: str) -> Optional[Measurements]:
    """Parse '34DD-26-36' into Measurements.

    The bra segment splits into the leading digit run (bust) and whatever
    follows it (cup). Returns None unless bra, waist and hip are all present.
    """
    segments = text.split("-")
    if len(segments) < 3:
        return None
    bra, waist, hip = (s.strip() for s in segments[:3])
    if not (bra and waist and hip):
        return None

    m = _LEADING_DIGITS_RE.match(bra)
    bust: Number = int(m.group(0)) if m else math.nan
    cup = bra[m.end():] if m else bra

    return Measurements(bust=bust, cup=cup, waist=_to_number(waist), hip=_to_number(hip))


def format_measurements(measurements: Measurements) -> str:
    return str(measurements)


def extract_cm(text: str) -> Optional[int]:
    m = _CM_RE.search(text)
    return int(m.group(1)) if m else None


def extract_kg(text: str) -> Optional[int]:
    m = _KG_RE.search(text)
    return int(m.group(1)) if m else None


def extract_date(text: str) -> Optional[str]:
    """First YYYY-MM-DD substring, e.g. from a '?birthDate=1990-01-31' href."""
    m = _DATE_RE.search(text)
    return m.group(0) if m else None


def last_query_value(href: str) -> str:
    """Value after the last '=' in a link, e.g. 'US' from '...countryCode%5D=US'."""
    return href.split("=")[-1]


def split_aliases(text: str) -> list[str]:
    """'Jane Doe, J. Doe' -> ['Jane Doe', 'J. Doe']; placeholders give []."""
    if not text or _UNKNOWN_RE.search(text):
        return []
    text = text.strip()
    if not text:
        return []
    return _ALIAS_SPLIT_RE.split(text)


def split_semicolon_list(text: str) -> list[str]:
    return [part.strip() for part in text.split(";")]
