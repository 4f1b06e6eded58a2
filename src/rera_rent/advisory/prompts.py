"""Prompt templates for the advisory service."""

from __future__ import annotations

from ..models import Decision, LeaseFacts


def build_advice_prompt(facts: LeaseFacts, decision: Decision) -> str:
    """Summarize lease facts and the engine decision for next-step advice."""
    source = "Official Valuation" if decision.valuation_used else "RERA Index"
    tenant_issue = (
        "Tenant initially declined then requested renewal" if facts.tenant_flip_flop else "None"
    )
    area = facts.area or "Dubai"
    return f"""
    You are a Dubai Real Estate expert (RDC context).

    Landlord Situation:
    - Unit: {facts.bedrooms} {facts.unit_type} in {area}
    - Current Rent: AED {decision.current_rent:,.0f}
    - Benchmark Rent: AED {decision.benchmark_rent:,.0f} (Source: {source})
    - Notice Sent: {decision.notice_days} days before expiry (Valid: {decision.is_notice_valid})
    - Tenant Issue: {tenant_issue}

    Calculated Outcome:
    - Eligible for Increase: {decision.is_eligible}
    - Allowed Increase: {decision.increase_percentage}%
    - Risk Level: {decision.risk_level} ({decision.risk_reason})

    Task:
    Provide 3 concise, calm, and neutral "Recommended Next Steps" for the landlord.
    If the notice is invalid, advise to renew at current rent.
    If high risk, advise caution.
    Provide 1 short sentence "Market Context" about demand in {area}.

    Constraint: Do NOT give legal guarantees. Use phrases like "Consider...", "Typically...", "It is recommended to...".
    """


def build_estimate_prompt(area: str, unit_type: str, bedrooms: str) -> str:
    return f"""
    Estimate the current average annual market rent (RERA Index) for a {bedrooms} {unit_type} in {area}, Dubai.
    Return ONLY a single number representing the average annual rent in AED.
    Do not give a range, just a conservative average integer.
    """


ADVICE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "nextSteps": {"type": "ARRAY", "items": {"type": "STRING"}},
        "marketContext": {"type": "STRING"},
    },
    "required": ["nextSteps", "marketContext"],
}

ESTIMATE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "estimatedRent": {"type": "NUMBER"},
    },
}
