"""Plain-language rationale for rent-increase decisions."""

from __future__ import annotations

STANDARD_RISK_REASON = "Standard RERA compliance."
NOTICE_BLOCKED_RISK_REASON = "Invalid notice period usually invalidates any increase."
NOTICE_AND_MARKET_RISK_REASON = "No increase possible due to market rates (and notice was also late)."
VALUATION_RISK_REASON = (
    "Valuation certificates are generally stronger than the Index, but disputes can occur."
)
CLOSE_NOTICE_RISK_REASON = "Notice period is valid but close to the 90-day minimum limit."

NOTICE_BLOCKED_WARNING = (
    "Although the market value supports an increase, the 90-day notice requirement was not met."
)
FLIP_FLOP_SUFFIX = "Also, tenant changing mind does not reset legal deadlines."
FLIP_FLOP_WARNING = (
    "A tenant changing their decision does not reset rent eligibility. "
    "Renewal terms still follow RERA-based limits."
)
VALUATION_FALLBACK_NOTE = (
    "A valuation certificate was indicated but no valuation amount was given; "
    "the RERA Index figure was used instead."
)

RDC_VALUATION = (
    "In similar cases, RDC typically favors a valid Valuation Certificate over the general Rental Index."
)
RDC_LATE_NOTICE = (
    "RDC typically strictly enforces the 90-day notice rule. Late notices are usually rejected if challenged."
)
RDC_INDEX = "RDC typically relies on the Smart Rental Index calculator for standard disputes."


def benchmark_label(valuation_used: bool) -> str:
    return "valuation" if valuation_used else "RERA Index"


def flip_flop_warning(existing: str | None) -> str:
    """Add the tenant change-of-mind clarification to an edge-case warning."""
    if existing:
        return f"{existing} {FLIP_FLOP_SUFFIX}"
    return FLIP_FLOP_WARNING


def why_result(
    *,
    notice_blocked: bool,
    gap: float,
    increase_percentage: int,
    valuation_used: bool,
    notice_days: int,
) -> str:
    """Explain numerically why the decision came out the way it did."""
    source = benchmark_label(valuation_used)
    if notice_blocked:
        return (
            "While your rent is below market value, the rent increase is blocked because "
            "the 90-day notice requirement was not met. "
            f"Notice was served only {notice_days} days prior to expiry."
        )
    if increase_percentage == 0:
        if gap < 0:
            return f"Your current rent is higher than the {source}. No increase is justified."
        return (
            f"Your current rent is within 10% of the {source}. "
            "Under RERA rules, no increase is permitted when the gap is small."
        )
    return (
        f"Your rent is {gap:.1f}% below the {source}. "
        f"RERA bands permit a {increase_percentage}% increase for this gap."
    )


def plain_english_summary(*, is_eligible: bool, increase_percentage: int, notice_invalid: bool) -> str:
    if is_eligible:
        return (
            f"You can legally raise the rent by {increase_percentage}%. "
            "Ensure you have proof of the notice delivery."
        )
    if notice_invalid:
        return (
            "You cannot increase the rent this cycle due to the missed 90-day notice deadline. "
            "Renew at the current amount."
        )
    return (
        "You cannot increase the rent this cycle as the current rent is close to or above "
        "market value. Renew at the current amount."
    )


def rdc_expectation(*, valuation_used: bool, notice_invalid: bool) -> str:
    """Non-binding RDC expectation, by priority: valuation, late notice, index."""
    if valuation_used:
        return RDC_VALUATION
    if notice_invalid:
        return RDC_LATE_NOTICE
    return RDC_INDEX
