"""RERA rent increase bands (Decree No. 43 of 2013)."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class RentBand:
    """Allowed increase for a gap-to-benchmark interval (upper edge inclusive)."""

    upper_gap_percent: float
    increase_percentage: int
    reason: str


# Ascending upper bounds, first match wins.
RERA_BANDS: tuple[RentBand, ...] = (
    RentBand(10, 0, "Rent is within 10% of market value"),
    RentBand(20, 5, "Rent is 11-20% below market value"),
    RentBand(30, 10, "Rent is 21-30% below market value"),
    RentBand(40, 15, "Rent is 31-40% below market value"),
    RentBand(math.inf, 20, "Rent is >40% below market value"),
)

ABOVE_MARKET_REASON = "Current rent is above market value"


def gap_percent(current_rent: float, benchmark_rent: float) -> float:
    """Percentage by which current rent sits below the benchmark.

    Positive when current rent is below benchmark, negative when above.
    """
    return (benchmark_rent - current_rent) / benchmark_rent * 100


def lookup_band(gap: float) -> RentBand:
    """Return the band for ``gap`` from the ordered table."""
    for band in RERA_BANDS:
        if gap <= band.upper_gap_percent:
            return band
    # NaN compares false against every bound
    return RERA_BANDS[0]


def increase_for_gap(gap: float) -> tuple[int, str]:
    """Allowed increase percentage and reason for a gap.

    Rent above the benchmark never earns an increase; it shares the lowest
    band's percentage but carries its own reason.
    """
    if gap < 0:
        return 0, ABOVE_MARKET_REASON
    band = lookup_band(gap)
    return band.increase_percentage, band.reason
