"""Rent-increase eligibility engine (RERA Decree No. 43 of 2013)."""

from __future__ import annotations

from typing import Iterable, List

from ..config import get_notice_params, load_config
from ..models import Decision, LeaseFacts, NoticeParams, RiskLevel
from . import rationale
from .bands import gap_percent, increase_for_gap
from .notice import NoticeCheck, check_notice


def resolve_benchmark(facts: LeaseFacts) -> tuple[float, bool, bool]:
    """Pick the authoritative benchmark.

    Returns (benchmark_rent, valuation_used, valuation_fallback). A positive
    valuation amount overrides the index when a valuation is indicated; an
    indicated valuation without a positive amount falls back to the index.
    """
    if facts.has_valuation:
        if facts.valuation_amount is not None and facts.valuation_amount > 0:
            return facts.valuation_amount, True, False
        return facts.market_rent or 0, False, True
    return facts.market_rent or 0, False, False


class RentEligibilityEngine:
    """
    Stateless rules engine: lease facts in, rent-increase decision out.
    Covers benchmark choice, increase band, notice validity, risk and rationale.
    """

    def __init__(
        self,
        notice_params: NoticeParams | None = None,
        config: dict | None = None,
    ) -> None:
        cfg = config if config is not None else load_config()
        self.notice_params = notice_params or get_notice_params(cfg)

    def evaluate(self, facts: LeaseFacts) -> Decision:
        """Evaluate a lease. Never raises for well-typed facts."""
        current = facts.current_rent or 0
        benchmark, valuation_used, valuation_fallback = resolve_benchmark(facts)
        notes = (rationale.VALUATION_FALLBACK_NOTE,) if valuation_fallback else ()

        if not current or not benchmark:
            return self._insufficient_input(current, valuation_fallback, notes)

        # Band
        gap = gap_percent(current, benchmark)
        provisional_pct, band_reason = increase_for_gap(gap)
        band_eligible = provisional_pct > 0

        # Notice
        notice = check_notice(
            facts.notice_date,
            facts.expiry_date,
            minimum_days=self.notice_params.minimum_days,
        )
        notice_blocked = band_eligible and not notice.is_valid

        # Risk + overrides
        risk_level, risk_reason, warning = self._assess_risk(
            band_eligible, notice, valuation_used
        )
        if facts.tenant_flip_flop:
            warning = rationale.flip_flop_warning(warning)

        is_eligible = band_eligible and not notice_blocked
        increase_pct = increase_for_gap(gap)[0] if is_eligible else 0
        max_increase = current * increase_pct / 100
        new_max_rent = current + max_increase

        notice_invalid = notice.evaluated and not notice.is_valid
        return Decision(
            is_eligible=is_eligible,
            increase_percentage=increase_pct,
            max_increase_amount=max_increase,
            new_max_rent=new_max_rent,
            current_rent=current,
            benchmark_rent=benchmark,
            gap_percent=gap,
            band_reason=band_reason,
            is_notice_valid=notice.is_valid,
            notice_days=notice.days,
            notice_message=notice.message,
            valuation_used=valuation_used,
            risk_level=risk_level,
            risk_reason=risk_reason,
            why_result=rationale.why_result(
                notice_blocked=notice_blocked,
                gap=gap,
                increase_percentage=increase_pct,
                valuation_used=valuation_used,
                notice_days=notice.days,
            ),
            plain_english_summary=rationale.plain_english_summary(
                is_eligible=is_eligible,
                increase_percentage=increase_pct,
                notice_invalid=notice_invalid,
            ),
            rdc_expectation=rationale.rdc_expectation(
                valuation_used=valuation_used,
                notice_invalid=notice_invalid,
            ),
            edge_case_warning=warning,
            valuation_fallback=valuation_fallback,
            notes=notes,
        )

    def evaluate_many(self, leases: Iterable[LeaseFacts]) -> List[Decision]:
        """Evaluate multiple leases."""
        return [self.evaluate(f) for f in leases]

    def _assess_risk(
        self,
        band_eligible: bool,
        notice: NoticeCheck,
        valuation_used: bool,
    ) -> tuple[RiskLevel, str, str | None]:
        """Resolve the notice override and score risk.

        Returns (risk_level, risk_reason, edge_case_warning).
        """
        if not notice.is_valid and band_eligible:
            return "High", rationale.NOTICE_BLOCKED_RISK_REASON, rationale.NOTICE_BLOCKED_WARNING
        if not notice.is_valid:
            return "Low", rationale.NOTICE_AND_MARKET_RISK_REASON, None
        if valuation_used:
            return "Medium", rationale.VALUATION_RISK_REASON, None
        if band_eligible and notice.days < self.notice_params.close_to_minimum_days:
            return "Medium", rationale.CLOSE_NOTICE_RISK_REASON, None
        return "Low", rationale.STANDARD_RISK_REASON, None

    @staticmethod
    def _insufficient_input(
        current: float,
        valuation_fallback: bool,
        notes: tuple[str, ...],
    ) -> Decision:
        """Terminal state for missing current or benchmark rent."""
        return Decision(
            is_eligible=False,
            increase_percentage=0,
            max_increase_amount=0,
            new_max_rent=current,
            current_rent=current,
            benchmark_rent=0,
            gap_percent=0,
            band_reason="",
            is_notice_valid=True,
            notice_days=0,
            notice_message="",
            valuation_used=False,
            risk_level="Low",
            risk_reason="",
            why_result="",
            plain_english_summary="",
            rdc_expectation="",
            valuation_fallback=valuation_fallback,
            notes=notes,
            insufficient_input=True,
        )


def evaluate(facts: LeaseFacts, notice_params: NoticeParams | None = None) -> Decision:
    """Evaluate with built-in defaults, without reading config.yaml."""
    return RentEligibilityEngine(notice_params=notice_params, config={}).evaluate(facts)
