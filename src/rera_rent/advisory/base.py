"""Base interface for advisory (next steps / rent estimate) services."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ..models import Advice

if TYPE_CHECKING:
    from ..models import Decision, LeaseFacts

FALLBACK_MARKET_CONTEXT = (
    "Dubai's rental market remains active; verify specific community trends."
)


class AdvisoryError(Exception):
    """Advisory service returned an unusable response."""


def fallback_advice(decision: Decision) -> Advice:
    """Deterministic next steps used whenever the advisory service fails."""
    first = (
        "Proceed with the renewal contract reflecting the increase."
        if decision.is_eligible
        else "Renew at the current rental amount."
    )
    return Advice(
        next_steps=[
            first,
            "Ensure all communications with the tenant are documented.",
            "If a dispute arises, file an 'Offer and Deposit' with the RDC.",
        ],
        market_context=FALLBACK_MARKET_CONTEXT,
        source="fallback",
    )


class AdvisoryService(ABC):
    """
    Abstract interface for advisory text services.
    Implementations never raise: failures resolve to fallback advice or None.
    """

    @abstractmethod
    def advise(self, facts: LeaseFacts, decision: Decision) -> Advice:
        """Recommended next steps plus one market-context sentence."""
        ...

    @abstractmethod
    def estimate_market_rent(
        self,
        area: str,
        unit_type: str,
        bedrooms: str,
    ) -> float | None:
        """Estimated average annual rent (AED), or None when unavailable."""
        ...

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Identifier for this service."""
        ...


class OfflineAdvisor(AdvisoryService):
    """Advisor that never calls out; always the local fallback."""

    @property
    def source_name(self) -> str:
        return "offline"

    def advise(self, facts: LeaseFacts, decision: Decision) -> Advice:
        return fallback_advice(decision)

    def estimate_market_rent(self, area: str, unit_type: str, bedrooms: str) -> float | None:
        return None
