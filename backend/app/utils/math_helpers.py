"""Number parsing helpers for SVG attribute values. No engine imports."""

from __future__ import annotations

import math
import re

# Leading numeric token, unit suffixes ignored: "3px" -> 3.0, "2.5e1" -> 25.0
_LEADING_NUMBER_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_number(value: str | None) -> float | None:
    """Parse the leading number of an attribute value, or None if there is none."""
    if value is None:
        return None
    m = _LEADING_NUMBER_RE.match(value)
    if not m:
        return None
    number = float(m.group(1))
    if not math.isfinite(number):
        return None
    return number


def parse_number_or(value: str | None, default: float = 0.0) -> float:
    number = parse_number(value)
    return default if number is None else number


def parse_number_list(value: str | None) -> list[float]:
    """All numbers in a comma/space separated list such as a polygon's ``points``."""
    if not value:
        return []
    return [float(tok) for tok in _NUMBER_RE.findall(value)]
