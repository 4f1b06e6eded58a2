"""Data models for lease facts and rent-increase decisions."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Literal

RiskLevel = Literal["Low", "Medium", "High"]


class UnitType(str, Enum):
    APARTMENT = "Apartment"
    VILLA = "Villa"


@dataclass(frozen=True)
class LeaseFacts:
    """Lease facts supplied by the landlord (source-agnostic)."""

    current_rent: float
    market_rent: float | None = None
    has_valuation: bool = False
    valuation_amount: float | None = None
    expiry_date: date | None = None
    notice_date: date | None = None
    tenant_flip_flop: bool = False
    # Metadata for benchmark estimation and advisory text only
    area: str = ""
    unit_type: str = UnitType.APARTMENT.value
    bedrooms: str = "1 Bedroom"

    def to_dict(self) -> dict[str, Any]:
        return {
            "current_rent": self.current_rent,
            "market_rent": self.market_rent,
            "has_valuation": self.has_valuation,
            "valuation_amount": self.valuation_amount,
            "expiry_date": self.expiry_date.isoformat() if self.expiry_date else None,
            "notice_date": self.notice_date.isoformat() if self.notice_date else None,
            "tenant_flip_flop": self.tenant_flip_flop,
            "area": self.area,
            "unit_type": self.unit_type,
            "bedrooms": self.bedrooms,
        }


@dataclass(frozen=True)
class NoticeParams:
    """Renewal notice thresholds."""

    minimum_days: int
    close_to_minimum_days: int


@dataclass(frozen=True)
class AdvisorySettings:
    """Text-generation service settings."""

    model: str
    base_url: str
    timeout_seconds: float


@dataclass(frozen=True)
class Decision:
    """Full rent-increase decision for a lease."""

    is_eligible: bool
    increase_percentage: int
    max_increase_amount: float
    new_max_rent: float
    current_rent: float
    benchmark_rent: float
    gap_percent: float
    band_reason: str
    is_notice_valid: bool
    notice_days: int
    notice_message: str
    valuation_used: bool
    risk_level: RiskLevel
    risk_reason: str
    why_result: str
    plain_english_summary: str
    rdc_expectation: str
    edge_case_warning: str | None = None
    # Valuation was flagged but no positive amount was supplied
    valuation_fallback: bool = False
    notes: tuple[str, ...] = field(default_factory=tuple)
    insufficient_input: bool = False

    def comparison(self) -> dict[str, float]:
        """Amounts for a current / benchmark / new-max comparison chart."""
        return {
            "current_rent": self.current_rent,
            "benchmark_rent": self.benchmark_rent,
            "new_max_rent": self.new_max_rent,
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_eligible": self.is_eligible,
            "increase_percentage": self.increase_percentage,
            "max_increase_amount": self.max_increase_amount,
            "new_max_rent": self.new_max_rent,
            "current_rent": self.current_rent,
            "benchmark_rent": self.benchmark_rent,
            "gap_percent": self.gap_percent,
            "band_reason": self.band_reason,
            "is_notice_valid": self.is_notice_valid,
            "notice_days": self.notice_days,
            "notice_message": self.notice_message,
            "valuation_used": self.valuation_used,
            "valuation_fallback": self.valuation_fallback,
            "risk_level": self.risk_level,
            "risk_reason": self.risk_reason,
            "why_result": self.why_result,
            "plain_english_summary": self.plain_english_summary,
            "rdc_expectation": self.rdc_expectation,
            "edge_case_warning": self.edge_case_warning,
            "notes": list(self.notes),
            "insufficient_input": self.insufficient_input,
        }


@dataclass
class Advice:
    """Recommended next steps returned by the advisory collaborator."""

    next_steps: list[str]
    market_context: str
    source: str = "fallback"

    def to_dict(self) -> dict[str, Any]:
        return {
            "next_steps": self.next_steps,
            "market_context": self.market_context,
            "source": self.source,
        }
