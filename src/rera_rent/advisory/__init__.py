"""Advisory services: next-step advice and market rent estimates."""

from .base import (
    FALLBACK_MARKET_CONTEXT,
    AdvisoryError,
    AdvisoryService,
    OfflineAdvisor,
    fallback_advice,
)
from .gemini import GeminiAdvisor

__all__ = [
    "AdvisoryService",
    "AdvisoryError",
    "OfflineAdvisor",
    "GeminiAdvisor",
    "fallback_advice",
    "FALLBACK_MARKET_CONTEXT",
]
