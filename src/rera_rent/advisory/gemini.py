"""Gemini (Google Generative Language API) advisory service.

Uses the REST endpoint ``/models/{model}:generateContent`` with a JSON
response schema. Every failure resolves to the local fallback.
"""

from __future__ import annotations

import json
import logging
import math
import os
import re
from typing import Any

import httpx

from ..config import get_advisory_settings
from ..models import Advice, AdvisorySettings, Decision, LeaseFacts
from .base import AdvisoryError, AdvisoryService, fallback_advice
from .prompts import ADVICE_SCHEMA, ESTIMATE_SCHEMA, build_advice_prompt, build_estimate_prompt

logger = logging.getLogger(__name__)

# InvalidURL (malformed base_url) is not an HTTPError subclass
_SERVICE_ERRORS = (httpx.HTTPError, httpx.InvalidURL, AdvisoryError, ValueError)


def _clean_json_text(text: str) -> str:
    """Strip markdown code fences some models wrap around JSON."""
    text = text.strip()
    m = re.match(r"^```(?:json)?\s*(.*?)\s*```$", text, re.DOTALL)
    return m.group(1) if m else text


class GeminiAdvisor(AdvisoryService):
    """
    Advisory service backed by Gemini.
    Construct explicitly and pass it to callers; an httpx.Client may be
    injected (tests use httpx.MockTransport).
    """

    def __init__(
        self,
        api_key: str | None = None,
        settings: AdvisorySettings | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self.api_key = api_key or os.environ.get("GEMINI_API_KEY", "")
        self.settings = settings or get_advisory_settings({})
        self._client = client

    @property
    def source_name(self) -> str:
        return "gemini"

    def advise(self, facts: LeaseFacts, decision: Decision) -> Advice:
        """Fetch next steps; fall back to local advice on any failure."""
        try:
            data = self._generate(build_advice_prompt(facts, decision), ADVICE_SCHEMA)
            return self._parse_advice(data)
        except _SERVICE_ERRORS as e:
            logger.error("Advice request failed, using fallback: %s", e)
            return fallback_advice(decision)

    def estimate_market_rent(
        self,
        area: str,
        unit_type: str,
        bedrooms: str,
    ) -> float | None:
        """Estimate annual market rent; None leaves the benchmark unset."""
        if not area:
            return None
        try:
            data = self._generate(build_estimate_prompt(area, unit_type, bedrooms), ESTIMATE_SCHEMA)
        except _SERVICE_ERRORS as e:
            logger.error("Rent estimate request failed: %s", e)
            return None
        rent = data.get("estimatedRent")
        if isinstance(rent, bool) or not isinstance(rent, (int, float)) or not math.isfinite(rent) or rent <= 0:
            logger.warning("No usable estimate in response: %r", data)
            return None
        return float(rent)

    def _generate(self, prompt: str, schema: dict[str, Any]) -> dict[str, Any]:
        """Call generateContent and decode the JSON object it returns."""
        if not self.api_key:
            raise AdvisoryError("GEMINI_API_KEY not set. Set env var or pass api_key.")

        url = f"{self.settings.base_url}/models/{self.settings.model}:generateContent"
        headers = {
            "x-goog-api-key": self.api_key,
            "Content-Type": "application/json",
        }
        payload = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": schema,
            },
        }
        logger.debug("POST %s (model=%s)", url, self.settings.model)
        post = self._client.post if self._client is not None else httpx.post
        resp = post(url, headers=headers, json=payload, timeout=self.settings.timeout_seconds)
        resp.raise_for_status()

        text = self._extract_text(resp.json())
        data = json.loads(_clean_json_text(text))
        if not isinstance(data, dict):
            raise AdvisoryError(f"Expected a JSON object, got {type(data).__name__}")
        return data

    @staticmethod
    def _extract_text(body: Any) -> str:
        try:
            parts = body["candidates"][0]["content"]["parts"]
            text = "".join(p.get("text", "") for p in parts)
        except (KeyError, IndexError, TypeError, AttributeError) as e:
            raise AdvisoryError(f"Unexpected response shape: {e!s}") from e
        if not text:
            raise AdvisoryError("No response from model")
        return text

    @staticmethod
    def _parse_advice(data: dict[str, Any]) -> Advice:
        steps = data.get("nextSteps")
        context = data.get("marketContext")
        if not isinstance(steps, list) or not steps or not all(isinstance(s, str) for s in steps):
            raise AdvisoryError("nextSteps must be a non-empty list of strings")
        if not isinstance(context, str):
            raise AdvisoryError("marketContext must be a string")
        return Advice(next_steps=steps, market_context=context, source="gemini")
