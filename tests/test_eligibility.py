"""Tests for the rent-increase eligibility engine."""

from dataclasses import replace
from datetime import date, datetime, timedelta, timezone

import pytest

from rera_rent.eligibility import (
    RERA_BANDS,
    RentEligibilityEngine,
    check_notice,
    evaluate,
    increase_for_gap,
    lookup_band,
    notice_period_days,
)
from rera_rent.eligibility import rationale
from rera_rent.eligibility.bands import ABOVE_MARKET_REASON, gap_percent
from rera_rent.eligibility.notice import MISSING_DATES_MESSAGE
from rera_rent.models import LeaseFacts, NoticeParams


class TestBands:
    """Tests for the increase band table."""

    @pytest.mark.parametrize(
        "gap,expected",
        [
            (-25, 0),
            (0, 0),
            (10, 0),
            (10.5, 5),
            (20, 5),
            (20.0001, 10),
            (30, 10),
            (35, 15),
            (40, 15),
            (40.01, 20),
            (95, 20),
        ],
    )
    def test_lookup_band(self, gap: float, expected: int) -> None:
        assert increase_for_gap(gap)[0] == expected

    def test_table_is_ascending(self) -> None:
        uppers = [b.upper_gap_percent for b in RERA_BANDS]
        assert uppers == sorted(uppers)

    def test_above_market_reason(self) -> None:
        assert increase_for_gap(-0.5) == (0, ABOVE_MARKET_REASON)
        assert lookup_band(-0.5).increase_percentage == 0

    def test_lookup_is_repeatable(self) -> None:
        assert lookup_band(33.3) is lookup_band(33.3)

    def test_gap_percent(self) -> None:
        assert gap_percent(80000, 120000) == pytest.approx(33.333, abs=0.001)
        assert gap_percent(120000, 100000) == pytest.approx(-20)


class TestNotice:
    """Tests for notice-period validation."""

    def test_missing_dates(self) -> None:
        result = check_notice(None, date(2025, 6, 30))
        assert result.is_valid
        assert result.days == 90
        assert result.message == MISSING_DATES_MESSAGE
        assert not result.evaluated

    @pytest.mark.parametrize(
        "notice,days,valid",
        [
            (date(2025, 4, 1), 90, True),
            (date(2025, 4, 2), 89, False),
            (date(2025, 3, 2), 120, True),
            (date(2025, 6, 30), 0, False),
            (date(2025, 7, 10), -10, False),
        ],
    )
    def test_threshold(self, notice: date, days: int, valid: bool) -> None:
        result = check_notice(notice, date(2025, 6, 30))
        assert result.days == days
        assert result.is_valid is valid
        assert str(days) in result.message
        assert "90" in result.message

    def test_fractional_days_round_up(self) -> None:
        assert notice_period_days(datetime(2025, 3, 2, 12, 0), date(2025, 6, 30)) == 120
        assert notice_period_days(datetime(2025, 3, 2, 0, 0), datetime(2025, 6, 30, 0, 0)) == 120

    def test_timezone_aware_mixed_with_date(self) -> None:
        dubai = timezone(timedelta(hours=4))
        assert notice_period_days(datetime(2025, 3, 2, tzinfo=dubai), date(2025, 6, 30)) == 120
        assert notice_period_days(date(2025, 3, 2), datetime(2025, 6, 30, tzinfo=timezone.utc)) == 120
        d = evaluate(
            LeaseFacts(
                current_rent=50000,
                market_rent=90000,
                expiry_date=date(2025, 6, 30),
                notice_date=datetime(2025, 3, 2, tzinfo=dubai),
            )
        )
        assert d.notice_days == 120
        assert d.is_eligible


class TestRentEligibilityEngine:
    """Tests for the full decision."""

    def test_eligible_increase(self, engine: RentEligibilityEngine, eligible_facts: LeaseFacts) -> None:
        d = engine.evaluate(eligible_facts)
        assert d.is_eligible
        assert d.increase_percentage == 20
        assert d.max_increase_amount == pytest.approx(10000)
        assert d.new_max_rent == pytest.approx(60000)
        assert d.is_notice_valid
        assert d.notice_days == 120
        assert d.risk_level == "Low"
        assert d.risk_reason == rationale.STANDARD_RISK_REASON
        assert d.edge_case_warning is None
        assert "44.4% below the RERA Index" in d.why_result
        assert "raise the rent by 20%" in d.plain_english_summary
        assert d.rdc_expectation == rationale.RDC_INDEX

    def test_late_notice_overrides_increase(
        self, engine: RentEligibilityEngine, late_notice_facts: LeaseFacts
    ) -> None:
        d = engine.evaluate(late_notice_facts)
        assert not d.is_notice_valid
        assert d.notice_days == 60
        assert not d.is_eligible
        assert d.increase_percentage == 0
        assert d.max_increase_amount == 0
        assert d.new_max_rent == 80000
        assert d.risk_level == "High"
        assert d.risk_reason == rationale.NOTICE_BLOCKED_RISK_REASON
        assert d.edge_case_warning == rationale.NOTICE_BLOCKED_WARNING
        assert "blocked" in d.why_result
        assert "missed 90-day notice" in d.plain_english_summary
        assert d.rdc_expectation == rationale.RDC_LATE_NOTICE
        # band reason still reflects the market position
        assert d.band_reason == "Rent is 31-40% below market value"

    def test_within_ten_percent(self, engine: RentEligibilityEngine) -> None:
        d = engine.evaluate(LeaseFacts(current_rent=100000, market_rent=105000))
        assert not d.is_eligible
        assert d.increase_percentage == 0
        assert d.new_max_rent == 100000
        assert d.risk_level == "Low"
        assert "within 10%" in d.why_result
        assert "close to or above market value" in d.plain_english_summary

    def test_missing_dates_governed_by_band(self, engine: RentEligibilityEngine) -> None:
        d = engine.evaluate(LeaseFacts(current_rent=50000, market_rent=90000))
        assert d.is_notice_valid
        assert d.notice_days == 90
        assert d.notice_message == MISSING_DATES_MESSAGE
        assert d.is_eligible
        assert d.increase_percentage == 20

    def test_rent_above_market(self, engine: RentEligibilityEngine) -> None:
        d = engine.evaluate(LeaseFacts(current_rent=120000, market_rent=100000))
        assert not d.is_eligible
        assert d.band_reason == ABOVE_MARKET_REASON
        assert "higher than the RERA Index" in d.why_result

    def test_late_notice_when_not_eligible_anyway(self, engine: RentEligibilityEngine) -> None:
        d = engine.evaluate(
            LeaseFacts(
                current_rent=100000,
                market_rent=105000,
                expiry_date=date(2025, 6, 30),
                notice_date=date(2025, 5, 1),
            )
        )
        assert not d.is_notice_valid
        assert d.risk_level == "Low"
        assert d.risk_reason == rationale.NOTICE_AND_MARKET_RISK_REASON
        assert d.edge_case_warning is None
        assert "within 10%" in d.why_result
        assert d.rdc_expectation == rationale.RDC_LATE_NOTICE

    def test_close_to_minimum_notice_is_medium(
        self, engine: RentEligibilityEngine, eligible_facts: LeaseFacts
    ) -> None:
        d = engine.evaluate(replace(eligible_facts, notice_date=date(2025, 3, 30)))
        assert d.notice_days == 92
        assert d.is_eligible
        assert d.risk_level == "Medium"
        assert d.risk_reason == rationale.CLOSE_NOTICE_RISK_REASON

    def test_exact_minimum_notice_is_valid(
        self, engine: RentEligibilityEngine, eligible_facts: LeaseFacts
    ) -> None:
        d = engine.evaluate(replace(eligible_facts, notice_date=date(2025, 4, 1)))
        assert d.notice_days == 90
        assert d.is_notice_valid
        assert d.is_eligible

    def test_close_notice_threshold_from_config(self, eligible_facts: LeaseFacts) -> None:
        engine = RentEligibilityEngine(config={"notice": {"close_to_minimum_days": 125}})
        assert engine.notice_params == NoticeParams(minimum_days=90, close_to_minimum_days=125)
        d = engine.evaluate(eligible_facts)
        assert d.risk_level == "Medium"

    def test_notice_params_override_config(self, eligible_facts: LeaseFacts) -> None:
        params = NoticeParams(minimum_days=150, close_to_minimum_days=155)
        engine = RentEligibilityEngine(notice_params=params, config={"notice": {"minimum_days": 30}})
        assert engine.notice_params is params
        assert vars(engine) == {"notice_params": params}
        d = evaluate(eligible_facts, notice_params=params)
        assert d == engine.evaluate(eligible_facts)
        assert not d.is_notice_valid
        assert d.risk_level == "High"

    def test_valuation_overrides_index(self, engine: RentEligibilityEngine) -> None:
        d = engine.evaluate(
            LeaseFacts(
                current_rent=100000,
                market_rent=60000,
                has_valuation=True,
                valuation_amount=200000,
            )
        )
        assert d.valuation_used
        assert d.benchmark_rent == 200000
        assert d.increase_percentage == 20
        assert d.risk_level == "Medium"
        assert d.risk_reason == rationale.VALUATION_RISK_REASON
        assert d.rdc_expectation == rationale.RDC_VALUATION
        assert "below the valuation" in d.why_result

    def test_valuation_flag_without_amount_falls_back(self, engine: RentEligibilityEngine) -> None:
        d = engine.evaluate(
            LeaseFacts(current_rent=50000, market_rent=90000, has_valuation=True, valuation_amount=0)
        )
        assert not d.valuation_used
        assert d.valuation_fallback
        assert d.benchmark_rent == 90000
        assert d.notes == (rationale.VALUATION_FALLBACK_NOTE,)
        assert d.increase_percentage == 20

    def test_unused_valuation_amount_is_ignored(self, engine: RentEligibilityEngine) -> None:
        d = engine.evaluate(
            LeaseFacts(current_rent=50000, market_rent=90000, has_valuation=False, valuation_amount=500000)
        )
        assert not d.valuation_used
        assert not d.valuation_fallback
        assert d.benchmark_rent == 90000

    @pytest.mark.parametrize(
        "facts",
        [
            LeaseFacts(current_rent=0, market_rent=90000),
            LeaseFacts(current_rent=50000),
            LeaseFacts(current_rent=50000, market_rent=0),
        ],
    )
    def test_insufficient_input(self, engine: RentEligibilityEngine, facts: LeaseFacts) -> None:
        d = engine.evaluate(facts)
        assert d.insufficient_input
        assert not d.is_eligible
        assert d.increase_percentage == 0
        assert d.max_increase_amount == 0
        assert d.new_max_rent == facts.current_rent
        assert d.is_notice_valid
        assert d.risk_level == "Low"
        assert d.why_result == ""
        assert d.plain_english_summary == ""
        assert d.rdc_expectation == ""

    def test_flip_flop_only_changes_warning(
        self, engine: RentEligibilityEngine, eligible_facts: LeaseFacts
    ) -> None:
        base = engine.evaluate(eligible_facts)
        flipped = engine.evaluate(replace(eligible_facts, tenant_flip_flop=True))
        assert flipped.is_eligible == base.is_eligible
        assert flipped.increase_percentage == base.increase_percentage
        assert flipped.new_max_rent == base.new_max_rent
        assert flipped.edge_case_warning == rationale.FLIP_FLOP_WARNING
        assert replace(flipped, edge_case_warning=None) == base

    def test_flip_flop_appends_to_override_warning(
        self, engine: RentEligibilityEngine, late_notice_facts: LeaseFacts
    ) -> None:
        d = engine.evaluate(replace(late_notice_facts, tenant_flip_flop=True))
        assert d.edge_case_warning.startswith(rationale.NOTICE_BLOCKED_WARNING)
        assert d.edge_case_warning.endswith(rationale.FLIP_FLOP_SUFFIX)

    def test_never_raises_on_odd_input(self, engine: RentEligibilityEngine) -> None:
        d = engine.evaluate(
            LeaseFacts(
                current_rent=-5000,
                market_rent=-1000,
                has_valuation=True,
                expiry_date=date(2024, 1, 1),
                notice_date=datetime(2025, 1, 1, 8, 30),
                tenant_flip_flop=True,
            )
        )
        assert not d.is_notice_valid
        assert d.new_max_rent == d.current_rent + d.max_increase_amount

    @pytest.mark.parametrize("current", [1000, 45000, 80000, 99999, 150000])
    @pytest.mark.parametrize("benchmark", [50000, 100000, 137000])
    def test_new_max_rent_invariant(self, engine: RentEligibilityEngine, current: float, benchmark: float) -> None:
        d = engine.evaluate(LeaseFacts(current_rent=current, market_rent=benchmark))
        assert d.new_max_rent == d.current_rent + d.max_increase_amount
        assert d.max_increase_amount == pytest.approx(current * d.increase_percentage / 100)
        assert d.is_eligible == (d.increase_percentage > 0)

    def test_idempotent(self, engine: RentEligibilityEngine, late_notice_facts: LeaseFacts) -> None:
        assert engine.evaluate(late_notice_facts) == engine.evaluate(late_notice_facts)

    def test_evaluate_many(self, engine: RentEligibilityEngine, eligible_facts: LeaseFacts, late_notice_facts: LeaseFacts) -> None:
        decisions = engine.evaluate_many([eligible_facts, late_notice_facts])
        assert [d.is_eligible for d in decisions] == [True, False]

    def test_module_level_evaluate(self, eligible_facts: LeaseFacts) -> None:
        assert evaluate(eligible_facts) == RentEligibilityEngine(config={}).evaluate(eligible_facts)

    def test_comparison_and_dict(self, engine: RentEligibilityEngine, eligible_facts: LeaseFacts) -> None:
        d = engine.evaluate(eligible_facts)
        assert d.comparison() == {
            "current_rent": 50000,
            "benchmark_rent": 90000,
            "new_max_rent": pytest.approx(60000),
        }
        data = d.to_dict()
        assert data["risk_level"] == "Low"
        assert data["notes"] == []
