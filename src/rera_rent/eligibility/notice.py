"""Renewal notice-period validation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime

MISSING_DATES_MESSAGE = "Notice not evaluated (dates missing)"


@dataclass(frozen=True)
class NoticeCheck:
    """Outcome of the notice-period check."""

    is_valid: bool
    days: int
    message: str
    evaluated: bool


def _as_datetime(value: date) -> datetime:
    """Naive datetime in the value's own local calendar."""
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    return datetime(value.year, value.month, value.day)


def notice_period_days(notice_date: date, expiry_date: date) -> int:
    """Calendar days from notice to expiry, fractional days rounded up."""
    delta = _as_datetime(expiry_date) - _as_datetime(notice_date)
    return math.ceil(delta.total_seconds() / 86400)


def check_notice(
    notice_date: date | None,
    expiry_date: date | None,
    minimum_days: int = 90,
) -> NoticeCheck:
    """Validate the renewal notice against the statutory minimum.

    Missing dates leave the notice unevaluated and treated as valid, with
    ``minimum_days`` reported as the period. Notice served on or after
    expiry is just a very short (invalid) period.
    """
    if notice_date is None or expiry_date is None:
        return NoticeCheck(
            is_valid=True,
            days=minimum_days,
            message=MISSING_DATES_MESSAGE,
            evaluated=False,
        )

    days = notice_period_days(notice_date, expiry_date)
    if days < minimum_days:
        return NoticeCheck(
            is_valid=False,
            days=days,
            message=f"Notice was sent {days} days before expiry. RERA requires {minimum_days} days.",
            evaluated=True,
        )
    return NoticeCheck(
        is_valid=True,
        days=days,
        message=f"Notice was sent {days} days before expiry (Valid >= {minimum_days} days).",
        evaluated=True,
    )
