"""Turn measurement strings ("$45", "1.2 - 2.0 kWh", "N/A") into floats."""

from __future__ import annotations

import re

_NON_NUMERIC = re.compile(r"[^0-9.\-]")


def _to_float(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return 0.0


def extract_value(text: str) -> float:
    """Representative value of a measurement string.

    Currency symbols, units and whitespace are dropped. A single hyphen
    marks a range and yields the midpoint. Anything unparseable, including
    "N/A" and "Unable to determine", yields 0.0.

    >>> extract_value("12-20")
    16.0
    """
    cleaned = _NON_NUMERIC.sub("", text)
    if cleaned.count("-") == 1:
        low, high = cleaned.split("-")
        return (_to_float(low) + _to_float(high)) / 2
    return _to_float(cleaned)


def extract_optional(text: str | None) -> float | None:
    """Like :func:`extract_value`, but an absent or empty field stays absent."""
    if not text:
        return None
    return extract_value(text)
