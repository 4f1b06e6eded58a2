"""Rent-increase eligibility and notice validation."""

from .bands import RERA_BANDS, RentBand, gap_percent, increase_for_gap, lookup_band
from .engine import RentEligibilityEngine, evaluate, resolve_benchmark
from .notice import NoticeCheck, check_notice, notice_period_days

__all__ = [
    "RentEligibilityEngine",
    "evaluate",
    "resolve_benchmark",
    "RERA_BANDS",
    "RentBand",
    "gap_percent",
    "increase_for_gap",
    "lookup_band",
    "NoticeCheck",
    "check_notice",
    "notice_period_days",
]
