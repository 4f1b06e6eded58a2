"""Convert raw form input (text amounts, dates, checkboxes) into LeaseFacts."""

from __future__ import annotations

import math
import re
from datetime import date, datetime
from typing import Any, Mapping

from .models import LeaseFacts, UnitType

_TRUE_FLAGS: set[str] = {"1", "true", "yes", "y", "on", "checked"}
_CURRENCY_PREFIX = re.compile(r"^(?:AED|DHS?)\.?", re.IGNORECASE)


def parse_amount(val: Any) -> float | None:
    """Parse a currency amount such as ``85000`` or ``"AED 85,000"``.

    Empty or unparseable input gives None; the engine treats a missing
    amount as insufficient input rather than failing.
    """
    if val is None or isinstance(val, bool):
        return None
    if isinstance(val, (int, float)):
        return float(val) if math.isfinite(val) else None
    s = _CURRENCY_PREFIX.sub("", str(val).strip())
    s = re.sub(r"[\s,]", "", s)
    if not s:
        return None
    try:
        amount = float(s)
    except ValueError:
        return None
    return amount if math.isfinite(amount) else None


def parse_date(val: Any) -> date | None:
    """Parse an ISO date (``2025-06-30``) or ISO datetime; otherwise None."""
    if val is None:
        return None
    if isinstance(val, date):
        return val
    s = str(val).strip()
    if not s:
        return None
    try:
        return date.fromisoformat(s)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(s)
    except ValueError:
        return None


def parse_flag(val: Any) -> bool:
    """Checkbox-style flag."""
    if isinstance(val, bool):
        return val
    if val is None:
        return False
    return str(val).strip().lower() in _TRUE_FLAGS


def _unit_type(val: Any) -> str:
    s = str(val or "").strip().lower()
    for ut in UnitType:
        if ut.value.lower() == s:
            return ut.value
    return UnitType.APARTMENT.value


def build_lease_facts(raw: Mapping[str, Any]) -> LeaseFacts:
    """Build LeaseFacts from a raw form mapping.

    The valuation amount is only carried when a valuation is indicated.
    """
    has_valuation = parse_flag(raw.get("has_valuation"))
    return LeaseFacts(
        current_rent=parse_amount(raw.get("current_rent")) or 0,
        market_rent=parse_amount(raw.get("market_rent")),
        has_valuation=has_valuation,
        valuation_amount=parse_amount(raw.get("valuation_amount")) if has_valuation else None,
        expiry_date=parse_date(raw.get("expiry_date")),
        notice_date=parse_date(raw.get("notice_date")),
        tenant_flip_flop=parse_flag(raw.get("tenant_flip_flop")),
        area=str(raw.get("area") or "").strip(),
        unit_type=_unit_type(raw.get("unit_type")),
        bedrooms=str(raw.get("bedrooms") or "1 Bedroom").strip(),
    )
