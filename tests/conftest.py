"""Pytest fixtures."""

from datetime import date

import pytest

from rera_rent.eligibility import RentEligibilityEngine
from rera_rent.models import LeaseFacts


@pytest.fixture
def engine() -> RentEligibilityEngine:
    """Engine with built-in notice thresholds (90 / 95 days)."""
    return RentEligibilityEngine(config={})


@pytest.fixture
def eligible_facts() -> LeaseFacts:
    """Rent ~44% below index with 120 days' notice."""
    return LeaseFacts(
        current_rent=50000,
        market_rent=90000,
        expiry_date=date(2025, 6, 30),
        notice_date=date(2025, 3, 2),
        area="Jumeirah Village Circle",
        unit_type="Apartment",
        bedrooms="1 Bedroom",
    )


@pytest.fixture
def late_notice_facts() -> LeaseFacts:
    """Rent ~33% below index, notice served 60 days before expiry."""
    return LeaseFacts(
        current_rent=80000,
        market_rent=120000,
        expiry_date=date(2025, 6, 30),
        notice_date=date(2025, 5, 1),
        area="Dubai Marina",
        unit_type="Apartment",
        bedrooms="2 Bedrooms",
    )
