"""Configuration loader."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .models import AdvisorySettings, NoticeParams

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config.yaml"


def load_config(config_path: Path | str | None = None) -> dict[str, Any]:
    """Load config from YAML file.

    An explicit path must exist. Without one, the repository's config.yaml
    is used when present; otherwise built-in defaults apply.
    """
    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config not found: {path}")
    else:
        path = DEFAULT_CONFIG_PATH
        if not path.exists():
            return {}
    with open(path) as f:
        return yaml.safe_load(f) or {}


def get_notice_params(config: dict[str, Any]) -> NoticeParams:
    """Extract notice thresholds from config."""
    nt = config.get("notice", {}) or {}
    return NoticeParams(
        minimum_days=int(nt.get("minimum_days", 90)),
        close_to_minimum_days=int(nt.get("close_to_minimum_days", 95)),
    )


def get_advisory_settings(config: dict[str, Any]) -> AdvisorySettings:
    """Extract text-generation service settings from config."""
    adv = config.get("advisory", {}) or {}
    return AdvisorySettings(
        model=str(adv.get("model", "gemini-2.5-flash")),
        base_url=str(adv.get("base_url", "https://generativelanguage.googleapis.com/v1beta")).rstrip("/"),
        timeout_seconds=float(adv.get("timeout_seconds", 30)),
    )
